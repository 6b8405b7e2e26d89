"""
Slack webhook handling for Events API requests.

Every request produces exactly one WebhookResponse. Failures of any kind
are mapped to a 500 carrying the error message, and the response always
asks Slack not to retry delivery.
"""

import json
import logging
from functools import lru_cache
from typing import Mapping, Union

from pydantic import ValidationError

from cdn_bot.config import Settings, get_settings
from cdn_bot.core.cdn import CloudFrontInvalidator
from cdn_bot.core.errors import MalformedInputError
from cdn_bot.core.models import (
    EVENT_CALLBACK,
    RETRY_NUM_HEADER,
    URL_VERIFICATION,
    InboundEvent,
    Message,
    WebhookResponse,
)
from cdn_bot.slack.bot import SlackBot
from cdn_bot.slack.events import SlackEventHandler

logger = logging.getLogger(__name__)


def parse_event(raw_body: Union[str, bytes]) -> InboundEvent:
    try:
        data = json.loads(raw_body)
    except (TypeError, ValueError) as e:
        raise MalformedInputError(f"Invalid JSON body: {str(e)}") from e

    if not isinstance(data, dict):
        raise MalformedInputError("Request body must be a JSON object")

    return InboundEvent.model_validate(data)


def parse_message(event: InboundEvent) -> Message:
    if event.event is None:
        raise MalformedInputError("event_callback without an event")

    try:
        return Message.model_validate(event.event)
    except ValidationError as e:
        raise MalformedInputError(f"Invalid event payload: {str(e)}") from e


def is_retry(headers: Mapping[str, str]) -> bool:
    retry_header = RETRY_NUM_HEADER.lower()
    return any(key.lower() == retry_header for key in headers)


class SlackWebhook:
    """Handles Slack Events API requests."""

    def __init__(self, settings: Settings, bot: SlackBot, event_handler: SlackEventHandler):
        self.settings = settings
        self.bot = bot
        self.event_handler = event_handler

    async def handle(self, raw_body: Union[str, bytes], headers: Mapping[str, str]) -> WebhookResponse:
        """Handle one webhook request and build its response."""
        response = WebhookResponse()

        try:
            event = parse_event(raw_body)

            # Slack retries slow deliveries; the first attempt already ran the command
            if is_retry(headers):
                logger.warning("Ignoring retried Slack delivery")
            else:
                body = raw_body.decode("utf-8") if isinstance(raw_body, bytes) else raw_body
                self.bot.verify_signature(body, headers)

                if event.type == URL_VERIFICATION:
                    logger.info("Handling URL verification challenge")
                    response.body = self.bot.verify_token(event)
                elif event.type == EVENT_CALLBACK:
                    await self.event_handler.handle_message(parse_message(event))
                    response.body = {"ok": True}
                else:
                    logger.warning(f"Unhandled request type: {event.type}")
                    response.status_code = 400
                    response.body = "Empty request"

        except Exception as e:
            logger.error(f"Error handling webhook: {str(e)}", exc_info=True)
            response.status_code = 500
            response.body = str(e)

        return response


def build_webhook_handler(settings: Settings) -> SlackWebhook:
    bot = SlackBot(settings)
    invalidator = CloudFrontInvalidator(settings)
    event_handler = SlackEventHandler(settings, bot, invalidator)
    return SlackWebhook(settings, bot, event_handler)


@lru_cache()
def get_webhook_handler() -> SlackWebhook:
    """Build a webhook handler from the environment settings."""
    return build_webhook_handler(get_settings())
