"""PnL REST API: 1 endpoint.

GET /pnl?wallet=<address>                 → {"tokens": [...], "summary": {...}}
GET /pnl?wallet=<address>&token=<mint>    → {"trades": [...]}
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from src.pnl_ledger.api.dependencies import get_pnl_service
from src.pnl_ledger.application.service import PnlApplicationService

router = APIRouter(tags=["pnl"])


@router.get("/pnl")
async def get_pnl(
    service: Annotated[PnlApplicationService, Depends(get_pnl_service)],
    wallet: str | None = Query(None, description="Wallet address (base58)"),
    token: str | None = Query(None, description="Restrict to one asset mint"),
) -> dict[str, Any]:
    return await service.get_pnl(wallet, token)
