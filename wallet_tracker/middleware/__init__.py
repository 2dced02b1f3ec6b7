from .cors import PermissiveCORSMiddleware
from .logging_middleware import RequestLoggingMiddleware

__all__ = [
    "PermissiveCORSMiddleware",
    "RequestLoggingMiddleware",
]
