"""
AWS Lambda entry point for API Gateway proxy events.

The event's raw body and headers are handed to the same webhook handler the
HTTP service uses, and the result is rendered as the
{statusCode, headers, body} structure API Gateway expects.
"""

import asyncio
import base64
import binascii
import logging
from typing import Any, Dict, Union

from cdn_bot.config import get_settings
from cdn_bot.core.models import WebhookResponse
from cdn_bot.slack.webhook import get_webhook_handler

logger = logging.getLogger(__name__)


def _raw_body(event: Dict[str, Any]) -> Union[str, bytes]:
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        # Left as bytes; the webhook handler owns decoding errors
        return base64.b64decode(body, validate=True)
    return body


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    logging.getLogger().setLevel(get_settings().log_level.upper())

    headers = event.get("headers") or {}

    try:
        body = _raw_body(event)
    except binascii.Error as e:
        logger.error(f"Invalid base64 body: {str(e)}")
        return WebhookResponse(status_code=500, body=f"Invalid base64 body: {str(e)}").to_lambda()

    result = asyncio.run(get_webhook_handler().handle(body, headers))
    logger.info(f"Responding to Slack with status {result.status_code}")
    return result.to_lambda()
