"""Auth feature module - callback-style strategy adapters for FastAPI.

This module lets third-party authentication strategies, which report their
result through success/fail/error callbacks, run inside async FastAPI routes:
- StrategyAdapter: uniform ``await adapter.authenticate(request)``
- StrategySession: per-call outcome handlers, first outcome wins
- CompatibleRequest: login/logout helpers around the framework request
- StrategyRegistry: lookup of adapters by name
- StrategyAuthenticator: FastAPI dependency mapping failures to HTTP errors

Usage Example:
```python
from neo_auth_adapters.features.auth import (
    Strategy,
    StrategyAdapter,
    StrategyAuthenticator,
    UserProfile,
)

class ApiKeyStrategy(Strategy):
    name = "api-key"
    
    def authenticate(self, request, **options):
        key = request.headers.get("X-API-Key")
        if key == "secret":
            self.success({"id": "service", "name": "Service account"})
        else:
            self.fail('ApiKey realm="api"')

api_key = StrategyAdapter(ApiKeyStrategy(), "api-key", UserProfile.from_mapping)

@router.get("/protected")
async def protected_route(user: UserProfile = Depends(StrategyAuthenticator(api_key))):
    return {"user_id": user.security_id}
```
"""

from .entities import (
    CompatibleRequestProtocol,
    Error,
    Fail,
    Outcome,
    Strategy,
    StrategyProtocol,
    Success,
    UserProfile,
    UserToUserProfileConverter,
    to_user_profile_identity,
)
from .adapters import CompatibleRequest, StrategyAdapter, StrategySession
from .services import StrategyRegistry, get_strategy_registry
from .dependencies import StrategyAuthenticator

__all__ = [
    # Entities
    "Success",
    "Fail",
    "Error",
    "Outcome",
    "UserProfile",
    "UserToUserProfileConverter",
    "to_user_profile_identity",
    
    # Protocols
    "StrategyProtocol",
    "CompatibleRequestProtocol",
    "Strategy",
    
    # Adapters
    "CompatibleRequest",
    "StrategyAdapter",
    "StrategySession",
    
    # Services
    "StrategyRegistry",
    "get_strategy_registry",
    
    # Dependencies
    "StrategyAuthenticator",
]
