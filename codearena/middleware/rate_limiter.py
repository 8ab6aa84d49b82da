"""
Rate limiting middleware using slowapi.
Each submission costs a call to the paid judge service, so the
submission endpoint is limited per user.
"""

import hashlib

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request, Response
from fastapi.responses import JSONResponse

from codearena.config import get_settings

settings = get_settings()


def get_user_identifier(request: Request) -> str:
    """
    Get a unique identifier for rate limiting.
    Uses the bearer token if present, otherwise falls back to IP address.
    """
    auth_header = request.headers.get("authorization", "")
    if auth_header.startswith("Bearer "):
        token = auth_header[7:]
        return f"token:{hashlib.sha256(token.encode()).hexdigest()}"

    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_user_identifier,
    enabled=settings.rate_limit_enabled,
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Rate limit errors use the same envelope as every other error."""
    limit_value = str(exc.detail) if hasattr(exc, "detail") else "Rate limit exceeded"
    retry_after = getattr(exc, "retry_after", 60)

    return JSONResponse(
        status_code=429,
        content={
            "statusCode": 429,
            "message": f"Too many requests: {limit_value}",
        },
        headers={
            "Retry-After": str(retry_after),
            "X-RateLimit-Limit": limit_value,
        },
    )


def submissions_limit() -> str:
    """Get rate limit string for the submissions endpoint."""
    return f"{settings.rate_limit_submissions_per_hour}/hour"
