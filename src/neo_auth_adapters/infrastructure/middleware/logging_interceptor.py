"""Method invocation logging.

``@log()`` wraps sync or async callables, including FastAPI route handlers,
and logs their arguments, results and errors:

    @router.get("/hello/{name}")
    @log()
    async def hello(name: str):
        return {"message": f"Hello, {name}"}
"""

import functools
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, TypeVar

T = TypeVar("T")


class LoggingInterceptor:
    """Logs invocations of a target around a ``call_next`` callable."""
    
    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self.logger = logger or logging.getLogger(__name__)
        self.level = level
    
    def intercept(
        self,
        target_name: str,
        args: Tuple[Any, ...],
        kwargs: Dict[str, Any],
        call_next: Callable[[], T],
    ) -> T:
        self._log_invoking(target_name, args, kwargs)
        try:
            result = call_next()
        except Exception as e:
            self._log_error(target_name, e)
            raise
        self._log_returned(target_name, result)
        return result
    
    async def intercept_async(
        self,
        target_name: str,
        args: Tuple[Any, ...],
        kwargs: Dict[str, Any],
        call_next: Callable[[], Awaitable[T]],
    ) -> T:
        self._log_invoking(target_name, args, kwargs)
        try:
            result = await call_next()
        except Exception as e:
            self._log_error(target_name, e)
            raise
        self._log_returned(target_name, result)
        return result
    
    def _log_invoking(self, target_name: str, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> None:
        if self.logger.isEnabledFor(self.level):
            self.logger.log(
                self.level,
                f"invoking {target_name} with: {_describe_arguments(args, kwargs)}",
            )
    
    def _log_returned(self, target_name: str, result: Any) -> None:
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, f"returned from {target_name}: {result!r}")
    
    def _log_error(self, target_name: str, error: Exception) -> None:
        self.logger.error(f"error from {target_name}: {error!r}", exc_info=True)


def _describe_arguments(args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> str:
    described = repr(list(args))
    if kwargs:
        described += f" {kwargs!r}"
    return described


def _is_bound_style(func: Callable) -> bool:
    """Whether the first parameter is the instance or class of a method."""
    try:
        params = list(inspect.signature(func).parameters)
    except (TypeError, ValueError):
        return False
    return bool(params) and params[0] in ("self", "cls")


def log(logger: Optional[logging.Logger] = None, level: int = logging.DEBUG):
    """Decorator logging every invocation of the decorated callable.
    
    Args:
        logger: Logger to write to, defaults to the callable's module logger
        level: Level for invocation and return lines; errors use ERROR
    """
    def decorator(func: Callable) -> Callable:
        interceptor = LoggingInterceptor(logger or logging.getLogger(func.__module__), level)
        target_name = func.__qualname__
        skip_first = _is_bound_style(func)
        
        def logged_args(args: Tuple[Any, ...]) -> Tuple[Any, ...]:
            return args[1:] if skip_first else args
        
        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                return await interceptor.intercept_async(
                    target_name, logged_args(args), kwargs, lambda: func(*args, **kwargs)
                )
            return async_wrapper
        
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            return interceptor.intercept(
                target_name, logged_args(args), kwargs, lambda: func(*args, **kwargs)
            )
        return wrapper
    
    return decorator
