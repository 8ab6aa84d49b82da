"""
Middleware package: error mapping, rate limiting and request logging.
"""

from codearena.middleware.error_handler import register_error_handlers
from codearena.middleware.rate_limiter import limiter, rate_limit_exceeded_handler
from codearena.middleware.request_logging import RequestLoggingMiddleware

__all__ = [
    "register_error_handlers",
    "limiter",
    "rate_limit_exceeded_handler",
    "RequestLoggingMiddleware",
]
