"""Feature modules of neo-auth-adapters."""
