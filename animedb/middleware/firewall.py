"""访问防火墙中间件：在路由之前拦截非本机、非局域网的请求。

每个顶层 HTTP 请求只判定一次；ASGI scope 中带有子请求标记的应用内部请求直接放行。
被拒绝的请求直接返回 403，不再进入任何路由处理。
"""

from __future__ import annotations

from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from animedb.packages.catalog.core.config import get_settings
from animedb.packages.catalog.core.constants import SUB_REQUEST_SCOPE_KEY
from animedb.packages.catalog.core.firewall import evaluate
from animedb.packages.catalog.core.logger import logger
from animedb.packages.catalog.core.responses import create_response

CLIENT_IP_HEADER = b"client-ip"
FORWARDED_FOR_HEADER = b"x-forwarded-for"


def is_sub_request(scope: Scope) -> bool:
    return bool(scope.get(SUB_REQUEST_SCOPE_KEY))


class FirewallMiddleware:
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope.get("type") != "http" or is_sub_request(scope) or not get_settings().firewall_enabled:
            await self.app(scope, receive, send)
            return

        header_names = {name.lower() for name, _ in scope.get("headers", [])}
        client = scope.get("client")
        client_addr = client[0] if client else None

        decision = evaluate(
            client_addr,
            has_client_ip_header=CLIENT_IP_HEADER in header_names,
            has_forwarded_for_header=FORWARDED_FOR_HEADER in header_names,
        )
        if decision.allowed:
            await self.app(scope, receive, send)
            return

        logger.debug("Access denied for client %s on %s", client_addr, scope.get("path"))
        response = JSONResponse(
            status_code=decision.status_code,
            content=create_response(decision.message, None, decision.status_code),
            headers={"Cache-Control": "public"},
        )
        await response(scope, receive, send)
