#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
check_dashboard_contract.py

Calls the read endpoints of a running dashboard API with a freshly issued
token and prints what each one returned.

Optional env:
  DASHBOARD_API_URL=http://127.0.0.1:3000
  ACCESS_TOKEN=...        (skips issuing a token)
  ROLES=admin,agent,user
"""

from __future__ import annotations

import os

from app.clients.dashboard import DashboardApiError, DashboardClient
from app.core.config import settings
from app.core.logging import configure_logging
from app.services.tokens import issue_service_token


def main() -> int:
    configure_logging(settings.LOG_LEVEL)
    token = os.getenv("ACCESS_TOKEN") or issue_service_token(settings)
    client = DashboardClient(settings.DASHBOARD_API_URL, token, timeout=settings.REQUEST_TIMEOUT)

    roles = [r.strip() for r in os.getenv("ROLES", "admin,agent,user").split(",") if r.strip()]
    checks = []
    for role in roles:
        checks.append((f"GET /api/dashboard/{role}", lambda r=role: client.get_dashboard(r)))
        checks.append((f"GET /api/dashboard/{role}/metrics", lambda r=role: client.get_dashboard_metrics(r)))
    checks.append(("GET /api/user/role", client.get_user_role))
    checks.append(("GET /api/user/preferences", client.get_preferences))

    failures = 0
    for name, call in checks:
        try:
            result = call()
        except DashboardApiError as exc:
            failures += 1
            print(f"[FAIL] {name}: {exc}")
            continue
        print(f"[OK]   {name}: {result.model_dump(by_alias=True)}")

    print(f"{len(checks) - failures}/{len(checks)} ok")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
