"""Tagged outcome of a single strategy invocation."""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Success:
    """Strategy accepted the request and produced a raw user."""
    
    user: Any
    info: Any = None


@dataclass(frozen=True)
class Fail:
    """Strategy rejected the request with a challenge for the caller."""
    
    challenge: Any = None
    status: Optional[int] = None


@dataclass(frozen=True)
class Error:
    """Strategy hit an internal error."""
    
    error: Any


Outcome = Union[Success, Fail, Error]
