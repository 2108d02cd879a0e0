from typing import Optional

from app.core.config import Settings
from app.core.security import issue


def issue_service_token(settings: Settings, now: Optional[int] = None, jti: Optional[str] = None) -> str:
    """Mints the public directory service token from configuration."""
    return issue(
        settings.AUTH_SECRET,
        subject=settings.SERVICE_SUBJECT,
        issuer=settings.TOKEN_ISSUER,
        claims={"role": settings.SERVICE_ROLE, "email": settings.SERVICE_EMAIL},
        ttl_seconds=settings.TOKEN_TTL_SECONDS,
        now=now,
        jti=jti,
    )
