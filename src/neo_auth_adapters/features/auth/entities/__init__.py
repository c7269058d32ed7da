"""Entities and protocols of the auth feature."""

from .outcome import Error, Fail, Outcome, Success
from .protocols import CompatibleRequestProtocol, StrategyProtocol
from .strategy import Strategy
from .user_profile import UserProfile, UserToUserProfileConverter, to_user_profile_identity

__all__ = [
    "Success",
    "Fail",
    "Error",
    "Outcome",
    "StrategyProtocol",
    "CompatibleRequestProtocol",
    "Strategy",
    "UserProfile",
    "UserToUserProfileConverter",
    "to_user_profile_identity",
]
