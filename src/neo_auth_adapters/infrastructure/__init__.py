"""Infrastructure components of neo-auth-adapters."""
