#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
validate_token.py

Recomputes a token's signature with AUTH_SECRET and prints its claims.

Usage:
  python scripts/validate_token.py <token>
  TOKEN=... python scripts/validate_token.py

Exits 1 when the token is malformed or the signature does not match.
"""

from __future__ import annotations

import json
import os
import sys

from app.core.config import settings
from app.core.security import MalformedTokenError, is_expired, verify


def die(msg: str, code: int = 1) -> None:
    print(f"[ERROR] {msg}")
    raise SystemExit(code)


def main(argv: list[str]) -> int:
    token = argv[1] if len(argv) > 1 else os.getenv("TOKEN")
    if not token:
        die("no token given (argument or TOKEN env)")

    try:
        report = verify(token.strip(), settings.AUTH_SECRET)
    except MalformedTokenError as exc:
        die(f"Invalid JWT format: {exc}")

    print("Expected signature:", report.expected_signature)
    print("Actual signature:", report.signature)
    print("Signatures match:", report.signature_valid)
    print("Decoded payload:", json.dumps(report.claims.model_dump(exclude_none=True), ensure_ascii=False))
    print("Role claim:", report.role)
    print(f"Role is {settings.SERVICE_ROLE}:", report.role == settings.SERVICE_ROLE)
    print("Expired:", is_expired(report.claims))

    return 0 if report.signature_valid else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
