import logging
from typing import Optional

from cdn_bot.config import Settings
from cdn_bot.core.cdn import CloudFrontInvalidator
from cdn_bot.core.models import Message
from cdn_bot.slack.bot import SlackBot

logger = logging.getLogger(__name__)

INVALIDATE_CDN = "invalidate_cdn"


def parse_command(text: str) -> Optional[str]:
    """Return the word following the bot mention, e.g. "@bot invalidate_cdn"."""
    # Positional: a multi-word mention shifts the command out of place
    parts = text.split()
    if len(parts) < 2:
        return None
    return parts[1]


class SlackEventHandler:

    def __init__(self, settings: Settings, bot: SlackBot, invalidator: CloudFrontInvalidator):
        self.settings = settings
        self.bot = bot
        self.invalidator = invalidator

    async def handle_message(self, message: Message) -> None:
        # Ignore bot messages to prevent loops
        if message.bot_id:
            logger.info(f"Ignoring bot message from {message.bot_id}")
            return

        command = parse_command(message.text)
        logger.info(f"Handling command '{command}' in {message.channel}")

        if command == INVALIDATE_CDN:
            invalidation_id = await self.invalidator.invalidate()
            await self.bot.send_message(
                channel=message.channel,
                text=f"Sir/Madam, I've just invalidated the cache, this is the invalidation ID. *{invalidation_id}*"
            )
        else:
            await self.bot.send_message(
                channel=message.channel,
                text=self.help_text()
            )

    def help_text(self) -> str:
        return (
            "Sir/Madam, I don't understand what you need. "
            f"Please use `@{self.settings.bot_name} {INVALIDATE_CDN}` to clear the CDN cache."
        )
