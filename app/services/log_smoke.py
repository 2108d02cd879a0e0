"""
Smoke test for a local CloudWatch Logs emulator (LocalStack by default).

Runs a fixed sequence against the emulator: create the log group, create the
log stream, describe the streams and append one event. "Already exists"
answers on the two create calls are logged and ignored; every other error
goes up to the caller.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import ClientError

from app.core.config import Settings

logger = logging.getLogger(__name__)

ALREADY_EXISTS = "ResourceAlreadyExistsException"
DEFAULT_MESSAGE = "Test event from Python SDK"


def logs_client(settings: Settings):
    return boto3.client(
        "logs",
        endpoint_url=settings.LOGS_ENDPOINT_URL,
        aws_access_key_id=settings.LOGS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.LOGS_SECRET_ACCESS_KEY,
        region_name=settings.LOGS_REGION,
    )


def _error_code(exc: ClientError) -> str:
    return exc.response.get("Error", {}).get("Code", "")


def ensure_log_group(client, group: str) -> bool:
    """Returns True when the group was created, False when it already existed."""
    try:
        client.create_log_group(logGroupName=group)
    except ClientError as exc:
        if _error_code(exc) != ALREADY_EXISTS:
            raise
        logger.info("log group exists: %s", group)
        return False
    logger.info("log group created: %s", group)
    return True


def ensure_log_stream(client, group: str, stream: str) -> bool:
    try:
        client.create_log_stream(logGroupName=group, logStreamName=stream)
    except ClientError as exc:
        if _error_code(exc) != ALREADY_EXISTS:
            raise
        logger.info("log stream exists: %s/%s", group, stream)
        return False
    logger.info("log stream created: %s/%s", group, stream)
    return True


def find_log_stream(client, group: str, stream: str) -> Optional[Dict[str, Any]]:
    resp = client.describe_log_streams(logGroupName=group, logStreamNamePrefix=stream)
    for item in resp.get("logStreams", []):
        if item.get("logStreamName") == stream:
            return item
    return None


def put_event(
    client,
    group: str,
    stream: str,
    message: str,
    timestamp_ms: Optional[int] = None,
    sequence_token: Optional[str] = None,
) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {
        "logGroupName": group,
        "logStreamName": stream,
        "logEvents": [{
            "timestamp": int(time.time() * 1000) if timestamp_ms is None else int(timestamp_ms),
            "message": message,
        }],
    }
    # newer backends ignore it, LocalStack still hands one out
    if sequence_token:
        kwargs["sequenceToken"] = sequence_token
    return client.put_log_events(**kwargs)


def run_smoke_test(
    client,
    group: str,
    stream: str,
    message: str = DEFAULT_MESSAGE,
    timestamp_ms: Optional[int] = None,
) -> Dict[str, Any]:
    ensure_log_group(client, group)
    ensure_log_stream(client, group, stream)

    found = find_log_stream(client, group, stream)
    sequence_token = (found or {}).get("uploadSequenceToken")

    result = put_event(client, group, stream, message, timestamp_ms=timestamp_ms, sequence_token=sequence_token)
    logger.info("put_log_events ok: %s/%s", group, stream)
    return result
