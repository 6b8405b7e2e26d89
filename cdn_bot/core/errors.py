class CdnBotError(Exception):
    """Base class for errors raised while handling a Slack request."""


class AuthError(CdnBotError):
    """The request failed token or signature verification."""


class InfrastructureError(CdnBotError):
    """The CloudFront API call failed."""


class MessagingError(CdnBotError):
    """The Slack chat.postMessage call failed."""


class MalformedInputError(CdnBotError):
    """The inbound request body could not be understood."""
