#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
generate_token.py

Prints a signed token for the public directory service identity.

Required env:
  AUTH_SECRET=...

Optional env:
  SERVICE_SUBJECT, SERVICE_ROLE, SERVICE_EMAIL, TOKEN_ISSUER, TOKEN_TTL_SECONDS
"""

from app.core.config import settings
from app.services.tokens import issue_service_token


def main() -> None:
    token = issue_service_token(settings)
    print("Generated JWT Token:")
    print(token)


if __name__ == "__main__":
    main()
