"""Email/password authentication API: signup, login and token-protected profile data."""

__version__ = "0.1.0"
