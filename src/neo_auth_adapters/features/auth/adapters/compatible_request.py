"""Request wrapper exposing the login helpers strategies expect.

Strategies written for callback-style frameworks assume the request can log a
user in and out and can tell whether someone is already authenticated. The
wrapper adds those helpers around the framework request instead of writing
them onto it; every other attribute is read straight from the wrapped object.
"""

import logging
from collections.abc import MutableMapping
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_SESSION_USER_KEY = "auth_user"


class CompatibleRequest:
    """Framework request plus login/logout helpers."""
    
    def __init__(self, request: Any, session_key: str = DEFAULT_SESSION_USER_KEY):
        self._request = request
        self._session_key = session_key
        self.user: Any = None
    
    @classmethod
    def wrap(
        cls,
        request: Any,
        session_key: str = DEFAULT_SESSION_USER_KEY,
    ) -> "CompatibleRequest":
        """Wrap a request; already wrapped requests are returned as they are."""
        if isinstance(request, cls):
            return request
        return cls(request, session_key=session_key)
    
    @property
    def request(self) -> Any:
        """The original framework request."""
        return self._request
    
    def __getattr__(self, name: str) -> Any:
        # Only reached for names the wrapper does not define itself
        if name == "_request":
            raise AttributeError(name)
        return getattr(self._request, name)
    
    def login(self, user: Any, session: bool = True) -> None:
        """Mark ``user`` as logged in for this request.
        
        With ``session`` set and a session available on the wrapped request,
        the user is also stored in the session.
        """
        self.user = user
        
        if session:
            store = self._get_session()
            if store is not None:
                store[self._session_key] = user
            else:
                logger.debug("login() requested a session but the request has none")
    
    def logout(self) -> None:
        """Forget the logged in user, in the session as well."""
        self.user = None
        
        store = self._get_session()
        if store is not None:
            store.pop(self._session_key, None)
    
    # Spellings used by some strategy libraries
    log_in = login
    log_out = logout
    
    def is_authenticated(self) -> bool:
        return self.user is not None
    
    def is_unauthenticated(self) -> bool:
        return not self.is_authenticated()
    
    def _get_session(self) -> Optional[MutableMapping]:
        """Return the wrapped request's session mapping, if it has one."""
        scope = getattr(self._request, "scope", None)
        if isinstance(scope, MutableMapping):
            # Starlette asserts when SessionMiddleware is missing, so check the scope
            session = scope.get("session")
            return session if isinstance(session, MutableMapping) else None
        
        session = getattr(self._request, "session", None)
        return session if isinstance(session, MutableMapping) else None
    
    def __repr__(self) -> str:
        return f"CompatibleRequest({self._request!r}, user={self.user!r})"
