"""Slack endpoint.

Slash commands, Events API deliveries and liveness checks all arrive on
``/api/slack``. The raw body is read once and handed to the gateway, so the
bytes that are signature-checked are the bytes that are parsed.
"""

from fastapi import APIRouter, BackgroundTasks, Request
from fastapi.responses import JSONResponse

from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.services import SlackGatewayDep
from modules.gateway import InboundRequest

logger = get_module_logger()

router = APIRouter(tags=["Slack"])


@router.api_route("/api/slack", methods=["GET", "HEAD", "POST"])
async def slack_endpoint(
    request: Request, background_tasks: BackgroundTasks, gateway: SlackGatewayDep
) -> JSONResponse:
    """Answer a Slack delivery and schedule its deferred work."""
    body = await request.body()
    inbound = InboundRequest.from_parts(request.method, request.headers, body)

    with bind_request_context(
        request_path=request.url.path, request_method=request.method
    ):
        result = gateway.handle(inbound)
        logger.debug(
            "slack_request_answered",
            status_code=result.status_code,
            deferred_tasks=len(result.tasks),
        )

    for task in result.tasks:
        background_tasks.add_task(task)

    return JSONResponse(
        content=result.body,
        status_code=result.status_code,
        background=background_tasks,
    )
