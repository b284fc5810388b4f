"""HTTP and WebSocket surface of the employee directory."""
from .main import create_app

__all__ = ["create_app"]
