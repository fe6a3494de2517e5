"""Client and command line tool for the Twitter v2 user lookup, follow and timeline endpoints."""

__version__ = "0.1.0"

__all__ = ["cli", "user", "user_obj", "user_params"]