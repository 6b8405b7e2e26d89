import json
from typing import Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field

URL_VERIFICATION = "url_verification"
EVENT_CALLBACK = "event_callback"

NO_RETRY_HEADER = "X-Slack-No-Retry"
RETRY_NUM_HEADER = "X-Slack-Retry-Num"


class Message(BaseModel):
    text: str = ""
    channel: str = ""
    bot_id: Optional[str] = None

    # Slack sends many more fields (user, ts, team, blocks, ...)
    model_config = ConfigDict(extra="ignore")


class InboundEvent(BaseModel):
    # Only the fields a request type reads are validated, in its own branch
    type: Any = None
    token: Any = None
    challenge: Any = None
    event: Any = None

    model_config = ConfigDict(extra="ignore")


class WebhookResponse(BaseModel):
    status_code: int = 200
    body: Any = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=lambda: {NO_RETRY_HEADER: "1"})

    def to_lambda(self) -> Dict[str, Any]:
        """Render as an API Gateway proxy response."""
        body = self.body if isinstance(self.body, str) else json.dumps(self.body)
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": body,
        }
