import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.security import TokenError, authenticate
from app.core.config import settings
from app.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenClaims:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="missing bearer token")

    try:
        return authenticate(credentials.credentials, settings.AUTH_SECRET)
    except TokenError as exc:
        logger.info("rejected bearer token: %s", exc)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid or expired token")


def require_role(*roles: str):
    allowed = set(roles)

    def _check(current_user: TokenClaims = Depends(get_current_user)) -> TokenClaims:
        if not isinstance(current_user.role, str) or current_user.role not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="role not allowed")
        return current_user

    return _check
