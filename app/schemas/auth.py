from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

class TokenClaims(BaseModel):
    model_config = ConfigDict(extra="allow")

    sub: str
    iss: str
    iat: int
    exp: int
    # domain claims may carry any JSON value
    role: Any = None
    email: Any = None
    jti: Any = None


class TokenReport(BaseModel):
    signature_valid: bool
    expected_signature: str
    signature: str
    header: Dict[str, Any]
    claims: TokenClaims

    @property
    def role(self) -> Any:
        return self.claims.role


class IntrospectIn(BaseModel):
    token: str = Field(..., min_length=1)

class IntrospectOut(BaseModel):
    signature_valid: bool
    expired: bool
    header: Dict[str, Any]
    claims: TokenClaims
