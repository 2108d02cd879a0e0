from fastapi import APIRouter, Depends, HTTPException, status

from app.core.security import MalformedTokenError, is_expired, verify
from app.core.config import settings
from app.schemas.auth import IntrospectIn, IntrospectOut, TokenClaims
from app.api.deps import get_current_user, require_role

router = APIRouter(prefix="/auth", tags=["auth"])

INTROSPECT_ROLES = ("admin", settings.SERVICE_ROLE)


@router.get("/me", response_model=TokenClaims)
def me(current_user: TokenClaims = Depends(get_current_user)):
    return current_user


@router.post("/introspect", response_model=IntrospectOut)
def introspect(payload: IntrospectIn, current_user: TokenClaims = Depends(require_role(*INTROSPECT_ROLES))):
    try:
        report = verify(payload.token, settings.AUTH_SECRET)
    except MalformedTokenError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    return IntrospectOut(
        signature_valid=report.signature_valid,
        expired=is_expired(report.claims),
        header=report.header,
        claims=report.claims,
    )
