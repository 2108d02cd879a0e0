#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
cloudwatch_smoke.py

Writes one event to the local CloudWatch Logs emulator.

Optional env:
  LOGS_ENDPOINT_URL=http://localhost:4566
  LOGS_REGION=us-east-1
  LOG_GROUP=espasyo-frontend-dev
  LOG_STREAM=frontend-app
  SMOKE_MESSAGE=...
"""

import os

from app.core.config import settings
from app.core.logging import configure_logging
from app.services.log_smoke import DEFAULT_MESSAGE, logs_client, run_smoke_test


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    client = logs_client(settings)
    result = run_smoke_test(
        client,
        settings.LOG_GROUP,
        settings.LOG_STREAM,
        message=os.getenv("SMOKE_MESSAGE", DEFAULT_MESSAGE),
    )
    print("PutLogEvents result:", result)


if __name__ == "__main__":
    main()
