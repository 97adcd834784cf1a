# edge_proxy/api/routes.py
import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ledger_api.schemas.transaction import ErrorOut, SummaryOut, TransactionOut
from edge_proxy.services.backend import BackendUnavailable, forward

logger = logging.getLogger(__name__)

router = APIRouter()

PROXY_ERROR = {"error": "Proxy failed to reach backend"}
ERROR_RESPONSES = {500: {"model": ErrorOut}, 502: {"model": ErrorOut}}


async def _relay(method: str, path: str, body: Optional[bytes] = None) -> JSONResponse:
    try:
        status_code, data = await run_in_threadpool(forward, method, path, body)
    except BackendUnavailable:
        logger.exception("Proxy %s %s", method, path)
        return JSONResponse(status_code=502, content=PROXY_ERROR)
    return JSONResponse(status_code=status_code, content=data)


@router.get(
    "/api/transactions",
    responses={200: {"model": list[TransactionOut]}, **ERROR_RESPONSES},
)
async def list_transactions():
    return await _relay("GET", "/api/transactions")


@router.post(
    "/api/transactions",
    status_code=201,
    responses={201: {"model": TransactionOut}, 400: {"model": ErrorOut}, **ERROR_RESPONSES},
)
async def create_transaction(request: Request):
    # raw bytes go upstream untouched; validation is the ledger's job
    body = await request.body()
    return await _relay("POST", "/api/transactions", body)


@router.get("/api/summary", responses={200: {"model": SummaryOut}, **ERROR_RESPONSES})
async def get_summary():
    return await _relay("GET", "/api/summary")
