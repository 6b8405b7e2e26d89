from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from cdn_bot.core.models import WebhookResponse
from cdn_bot.slack.webhook import SlackWebhook, get_webhook_handler

router = APIRouter(prefix="/slack", tags=["slack"])


def to_http_response(result: WebhookResponse) -> Response:
    if isinstance(result.body, str):
        return PlainTextResponse(result.body, status_code=result.status_code, headers=result.headers)
    return JSONResponse(result.body, status_code=result.status_code, headers=result.headers)


@router.post("/")
async def slack_webhook(request: Request, webhook_handler: SlackWebhook = Depends(get_webhook_handler)):
    body = await request.body()
    return to_http_response(await webhook_handler.handle(body, request.headers))


@router.get("/")
async def slack_webhook_get():
    return {"message": "Slack webhook endpoint is active"}


@router.post("/events")
async def slack_events(request: Request, webhook_handler: SlackWebhook = Depends(get_webhook_handler)):
    body = await request.body()
    return to_http_response(await webhook_handler.handle(body, request.headers))
