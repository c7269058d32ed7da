"""Core building blocks shared by all neo-auth-adapters features."""
