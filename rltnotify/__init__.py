"""In-memory real-time notifications with long-polling HTTP endpoints."""

__version__ = "0.1.0"