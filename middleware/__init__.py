"""HTTP middleware"""
from .security import SecurityHeadersMiddleware, RequestLoggingMiddleware

__all__ = [
    'SecurityHeadersMiddleware',
    'RequestLoggingMiddleware'
]
