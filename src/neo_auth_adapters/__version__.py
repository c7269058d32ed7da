"""Version information for neo-auth-adapters."""

__version__ = "0.1.0"
