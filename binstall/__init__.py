"""Build a release binary and install it into a user-local bin directory."""

__version__ = "0.1.0"
