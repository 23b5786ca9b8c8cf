"""Per-request access log for the PnL API.

One line per request, tagged with the wallet (and token filter) being
queried so a slow or failing PnL computation can be traced back to its
input. Server errors are logged at WARNING, everything else at INFO.

    INFO  GET /pnl wallet=7xKX…gAsU token=* → 200 (412ms) req_a1b2c3d4e5f6
    WARNING GET /pnl wallet=7xKX…gAsU token=* → 500 (5003ms) req_0f9e8d7c6b5a
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("pnl.request")

REQUEST_ID_HEADER = "X-Request-ID"


def short_wallet(wallet: str | None) -> str:
    if not wallet:
        return "-"
    if len(wallet) <= 12:
        return wallet
    return f"{wallet[:4]}…{wallet[-4:]}"


def query_context(request: Request) -> str:
    """`wallet=… token=…` for /pnl queries, empty for every other route."""
    params = request.query_params
    if "wallet" not in params and "token" not in params:
        return ""
    token = (params.get("token") or "").strip() or "*"
    return f" wallet={short_wallet(params.get('wallet'))} token={token}"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = f"req_{uuid.uuid4().hex[:12]}"
        request.state.request_id = request_id

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s%s → %d (%.0fms) %s",
            request.method,
            request.url.path,
            query_context(request),
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response
