import asyncio
import hmac
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Mapping, Optional

from slack_sdk.errors import SlackApiError
from slack_sdk.signature import SignatureVerifier
from slack_sdk.web.client import WebClient

from cdn_bot.config import Settings
from cdn_bot.core.errors import AuthError, MessagingError
from cdn_bot.core.models import InboundEvent

logger = logging.getLogger(__name__)


class SlackBot:

    def __init__(self, settings: Settings, client: Optional[WebClient] = None):
        self.settings = settings
        self.client = client or WebClient(token=settings.bot_token)
        self.signature_verifier = (
            SignatureVerifier(settings.slack_signing_secret)
            if settings.slack_signing_secret
            else None
        )
        self.executor = ThreadPoolExecutor(max_workers=4)

    def verify_token(self, event: InboundEvent) -> str:
        """Check a url_verification request and return its challenge."""
        token = event.token if isinstance(event.token, str) else ""
        if not token or not hmac.compare_digest(token, self.settings.verification_token):
            raise AuthError("Verification failed")
        return event.challenge or ""

    def verify_signature(self, body: str, headers: Mapping[str, str]) -> None:
        if self.signature_verifier is None:
            return

        lowered = {k.lower(): v for k, v in headers.items()}
        timestamp = lowered.get("x-slack-request-timestamp", "")
        signature = lowered.get("x-slack-signature", "")

        if not self.signature_verifier.is_valid(body, timestamp, signature):
            raise AuthError("Invalid signature")

    async def send_message(self, channel: str, text: str) -> Dict[str, Any]:
        try:
            # Run the synchronous call in a thread pool to avoid blocking
            response = await asyncio.get_event_loop().run_in_executor(
                self.executor,
                lambda: self.client.chat_postMessage(
                    channel=channel,
                    text=text
                )
            )
        except SlackApiError as e:
            logger.error(f"Error sending message to {channel}: {str(e)}")
            raise MessagingError(f"Failed to send message: {e.response.get('error', str(e))}") from e

        if not response["ok"]:
            logger.error(f"Failed to send message: {response.get('error')}")
            raise MessagingError(f"Failed to send message: {response.get('error')}")

        return response
