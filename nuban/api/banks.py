"""
Bank directory and inference endpoints

These routes do blocking HTTP calls, so they are plain functions and run in
FastAPI's thread pool.
"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from .dependencies import NubanService, get_nuban_service
from .schemas import BankModel, BankListResponse, InferBanksResponse
from ..exceptions import BankDirectoryError

logger = logging.getLogger("nuban.api")

router = APIRouter()


@router.get("", response_model=BankListResponse)
def list_banks(service: NubanService = Depends(get_nuban_service)):
    """List all banks known to the directory"""
    try:
        banks = service.directory.fetch_banks()
    except BankDirectoryError as e:
        logger.error(f"Bank directory unavailable: {e}")
        raise HTTPException(status_code=503, detail="Bank directory unavailable")

    return BankListResponse(
        banks=[BankModel.from_bank(bank) for bank in banks],
        count=len(banks)
    )


@router.get("/infer/{account_number}", response_model=InferBanksResponse)
def infer_banks(
    account_number: str,
    service: NubanService = Depends(get_nuban_service)
):
    """Find the banks an account number could belong to"""
    try:
        banks = service.inferrer.infer_banks(account_number, strict=True)
    except BankDirectoryError as e:
        logger.error(f"Bank directory unavailable: {e}")
        raise HTTPException(status_code=503, detail="Bank directory unavailable")

    return InferBanksResponse(
        account_number=account_number,
        banks=[BankModel.from_bank(bank) for bank in banks]
    )
