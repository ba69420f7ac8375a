"""Build signing resolver for the hashtara Android build."""

__version__ = "0.1.0"
