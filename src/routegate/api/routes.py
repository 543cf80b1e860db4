"""Gateway route handler."""

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from routegate.api.dependencies import get_dispatcher
from routegate.dispatcher import Dispatcher
from routegate.models import GatewayRequest

router = APIRouter(tags=["gateway"])

GATEWAY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def raw_request_path(request: Request) -> str:
    """Path as sent by the client, with percent-escapes left intact."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1").split("?", 1)[0]
    return request.scope["path"]


async def to_gateway_request(request: Request) -> GatewayRequest:
    """Convert a Starlette request into a gateway request."""
    return GatewayRequest(
        method=request.method,
        path=raw_request_path(request),
        query_string=request.scope.get("query_string", b"").decode("latin-1"),
        headers=request.headers.items(),
        body=await request.body(),
    )


@router.api_route(
    "/{full_path:path}",
    methods=GATEWAY_METHODS,
    summary="Relay a request",
    description="Authenticate and relay /{version}/{module}/... to the routed service",
)
async def gateway(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response:
    """
    Relay a request through the gateway.

    Args:
        request: Inbound request
        dispatcher: Gateway dispatcher

    Returns:
        Envelope or relayed downstream response
    """
    result = await dispatcher.dispatch(await to_gateway_request(request))
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.media_type,
    )
