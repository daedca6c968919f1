"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn backend_reputation.api_server.app:app --host 0.0.0.0 --port 30008
"""

from backend_reputation.api_server.server import create_app

app = create_app()

__all__ = ["app"]
