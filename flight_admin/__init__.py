"""Flight booking administration backend and admin client."""

__version__ = "1.0.0"
