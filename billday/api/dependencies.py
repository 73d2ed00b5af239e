"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from billday.infrastructure.clients.bark import BarkClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_bark_client() -> BarkClient:
    """Provide Bark push client instance"""
    return BarkClient()
