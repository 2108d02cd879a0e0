import base64
import binascii
import hashlib
import hmac
import json
import time
import uuid
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from app.schemas.auth import TokenClaims, TokenReport

ALG = "HS256"
HEADER = {"alg": ALG, "typ": "JWT"}
REGISTERED_CLAIMS = ("sub", "iss", "iat", "exp")

Secret = Union[str, bytes]


class TokenError(Exception):
    pass

class MalformedTokenError(TokenError):
    pass

class SignatureMismatchError(TokenError):
    pass

class EncodingError(TokenError):
    pass

class TokenExpiredError(TokenError):
    pass


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")

def b64url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    try:
        return base64.urlsafe_b64decode((data + padding).encode("ascii"))
    except (binascii.Error, UnicodeEncodeError, ValueError) as exc:
        raise MalformedTokenError(f"invalid base64url segment: {exc}") from exc


def _to_json(obj: Mapping[str, Any]) -> bytes:
    try:
        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"claims are not JSON serializable: {exc}") from exc

def _from_json(segment: str, what: str) -> Dict[str, Any]:
    raw = b64url_decode(segment)
    try:
        obj = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedTokenError(f"{what} is not valid JSON") from exc
    if not isinstance(obj, dict):
        raise MalformedTokenError(f"{what} must be a JSON object")
    return obj


def sign_segment(signing_input: str, secret: Secret) -> str:
    """HMAC-SHA256 of ``header.payload``, base64url encoded without padding."""
    key = secret if isinstance(secret, bytes) else secret.encode("utf-8")
    digest = hmac.new(key, signing_input.encode("utf-8"), hashlib.sha256).digest()
    return b64url_encode(digest)


def issue(
    secret: Secret,
    subject: str,
    issuer: str,
    claims: Optional[Mapping[str, Any]] = None,
    ttl_seconds: int = 3600,
    now: Optional[int] = None,
    jti: Optional[str] = None,
) -> str:
    """
    Builds a compact HS256 token: ``b64url(header).b64url(payload).b64url(sig)``.

    Payload key order is sub, iss, iat, exp, the supplied claims, then jti.
    Passing ``now`` and ``jti`` makes the output fully deterministic.
    """
    if int(ttl_seconds) <= 0:
        raise ValueError("ttl_seconds must be positive")

    extra = dict(claims or {})
    clash = [k for k in REGISTERED_CLAIMS if k in extra]
    if clash:
        raise ValueError(f"claims cannot override registered claims: {', '.join(clash)}")

    iat = int(time.time()) if now is None else int(now)
    body: Dict[str, Any] = {
        "sub": subject,
        "iss": issuer,
        "iat": iat,
        "exp": iat + int(ttl_seconds),
        **extra,
    }
    if jti is not None:
        body["jti"] = jti
    elif "jti" not in extra:
        body["jti"] = str(uuid.uuid4())

    signing_input = b64url_encode(_to_json(HEADER)) + "." + b64url_encode(_to_json(body))
    return signing_input + "." + sign_segment(signing_input, secret)


def verify(token: str, secret: Secret) -> TokenReport:
    """
    Recomputes the signature of ``token`` and decodes its claims.

    A wrong signature is reported through ``signature_valid``; only structural
    problems raise ``MalformedTokenError``. Expiry is not checked here, see
    ``ensure_not_expired``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise MalformedTokenError(f"expected 3 segments, got {len(parts)}")

    header_b64, payload_b64, signature = parts
    expected = sign_segment(header_b64 + "." + payload_b64, secret)
    valid = hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))

    header = _from_json(header_b64, "header")
    if header.get("alg") != ALG:
        raise MalformedTokenError(f"unsupported alg: {header.get('alg')!r}")

    payload = _from_json(payload_b64, "payload")
    try:
        claims = TokenClaims.model_validate(payload)
    except ValidationError as exc:
        raise MalformedTokenError(f"invalid claims: {exc.error_count()} error(s)") from exc

    return TokenReport(
        signature_valid=valid,
        expected_signature=expected,
        signature=signature,
        header=header,
        claims=claims,
    )


def is_expired(claims: TokenClaims, now: Optional[int] = None) -> bool:
    current = int(time.time()) if now is None else int(now)
    return current >= claims.exp

def ensure_not_expired(claims: TokenClaims, now: Optional[int] = None) -> None:
    if is_expired(claims, now):
        raise TokenExpiredError(f"token expired at {claims.exp}")


def authenticate(token: str, secret: Secret, now: Optional[int] = None) -> TokenClaims:
    report = verify(token, secret)
    if not report.signature_valid:
        raise SignatureMismatchError("signature mismatch")
    ensure_not_expired(report.claims, now)
    return report.claims
