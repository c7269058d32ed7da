"""User profile entity returned by strategy adapters."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

U = TypeVar("U")

# Maps the raw user a strategy hands to success() to the profile callers expect
UserToUserProfileConverter = Callable[[Any], Any]


@dataclass(frozen=True)
class UserProfile:
    """Normalized representation of an authenticated identity."""
    
    security_id: str
    email: Optional[str] = None
    name: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)
    
    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        id_field: str = "id",
    ) -> "UserProfile":
        """Build a profile from a raw user mapping.
        
        Keys other than the id, email and name end up in ``attributes``.
        """
        if id_field not in data:
            raise ValueError(f"Raw user is missing the '{id_field}' field")
        
        known = {id_field, "email", "name"}
        return cls(
            security_id=str(data[id_field]),
            email=data.get("email"),
            name=data.get("name"),
            attributes={k: v for k, v in data.items() if k not in known},
        )


def to_user_profile_identity(user: U) -> U:
    """Default converter: the raw user already is the profile."""
    return user
