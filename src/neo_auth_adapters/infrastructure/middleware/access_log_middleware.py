"""HTTP access log middleware for FastAPI.

Writes one line per response in the usual access log formats (combined,
common, short, tiny, dev) to the ``neo_auth_adapters.access`` logger.
"""

import base64
import binascii
import logging
import time
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Union

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ...config.logging_config import LoggingConfig

access_logger = logging.getLogger(LoggingConfig.ACCESS_LOGGER)


@dataclass(frozen=True)
class AccessLogRecord:
    """Everything an access log line may show about one request."""
    
    remote_addr: Optional[str]
    remote_user: Optional[str]
    timestamp: datetime
    method: str
    url: str
    http_version: str
    status: int
    content_length: Optional[str]
    referrer: Optional[str]
    user_agent: Optional[str]
    response_time_ms: float
    
    @property
    def clf_date(self) -> str:
        return self.timestamp.strftime("%d/%b/%Y:%H:%M:%S %z")
    
    def as_fields(self) -> Dict[str, str]:
        """Field values for format templates, missing values shown as '-'."""
        values = {
            f.name: "-" if getattr(self, f.name) is None else str(getattr(self, f.name))
            for f in fields(self)
        }
        values["clf_date"] = self.clf_date
        values["response_time"] = f"{self.response_time_ms:.3f}"
        return values


ACCESS_LOG_FORMATS: Dict[str, str] = {
    "combined": (
        '{remote_addr} - {remote_user} [{clf_date}] "{method} {url} HTTP/{http_version}" '
        '{status} {content_length} "{referrer}" "{user_agent}"'
    ),
    "common": (
        '{remote_addr} - {remote_user} [{clf_date}] "{method} {url} HTTP/{http_version}" '
        '{status} {content_length}'
    ),
    "short": (
        "{remote_addr} {remote_user} {method} {url} HTTP/{http_version} "
        "{status} {content_length} - {response_time} ms"
    ),
    "tiny": "{method} {url} {status} {content_length} - {response_time} ms",
    "dev": "{method} {url} {status} {response_time} ms - {content_length}",
}

AccessLogFormatter = Callable[[AccessLogRecord], Optional[str]]


def format_access_log(record: AccessLogRecord, format: Union[str, AccessLogFormatter]) -> Optional[str]:
    """Render a record with a named format or a formatter callable."""
    if callable(format):
        return format(record)
    return ACCESS_LOG_FORMATS[format].format(**record.as_fields())


class AccessLogMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware writing an access log line per request."""
    
    def __init__(
        self,
        app,
        format: Union[str, AccessLogFormatter] = "combined",
        logger: Optional[logging.Logger] = None,
        exempt_paths: Optional[List[str]] = None
    ):
        super().__init__(app)
        if not callable(format) and format not in ACCESS_LOG_FORMATS:
            raise ValueError(
                f"Unknown access log format '{format}', "
                f"expected one of {sorted(ACCESS_LOG_FORMATS)} or a callable"
            )
        self.format = format
        self.logger = logger or access_logger
        self.exempt_paths = exempt_paths or []
    
    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request and log it once the response is ready."""
        
        if any(request.url.path.startswith(path) for path in self.exempt_paths):
            return await call_next(request)
        
        timestamp = datetime.now(timezone.utc)
        start_time = time.perf_counter()
        
        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors surface as 500 to the client
            self._write(request, timestamp, start_time, 500, None)
            raise
        
        self._write(
            request,
            timestamp,
            start_time,
            response.status_code,
            response.headers.get("content-length"),
        )
        return response
    
    def _write(
        self,
        request: Request,
        timestamp: datetime,
        start_time: float,
        status_code: int,
        content_length: Optional[str],
    ) -> None:
        record = AccessLogRecord(
            remote_addr=self._get_client_ip(request),
            remote_user=self._get_remote_user(request),
            timestamp=timestamp,
            method=request.method,
            url=self._get_url(request),
            http_version=request.scope.get("http_version", "1.1"),
            status=status_code,
            content_length=content_length,
            referrer=request.headers.get("referer") or request.headers.get("referrer"),
            user_agent=request.headers.get("user-agent"),
            response_time_ms=(time.perf_counter() - start_time) * 1000,
        )
        
        line = format_access_log(record, self.format)
        if line is not None:
            self.logger.info(line)
    
    def _get_url(self, request: Request) -> str:
        query = request.url.query
        return f"{request.url.path}?{query}" if query else request.url.path
    
    def _get_client_ip(self, request: Request) -> Optional[str]:
        """Extract client IP address from request."""
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        
        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip
        
        if request.client:
            return request.client.host
        
        return None
    
    def _get_remote_user(self, request: Request) -> Optional[str]:
        """User name from Basic credentials, as access logs traditionally show."""
        authorization = request.headers.get("Authorization", "")
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() != "basic" or not credentials:
            return None
        
        try:
            decoded = base64.b64decode(credentials, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return None
        
        username, _, _ = decoded.partition(":")
        return username or None
