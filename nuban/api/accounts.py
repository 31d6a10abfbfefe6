"""
Account number generation and validation endpoints
"""

import logging
from fastapi import APIRouter, HTTPException

from .schemas import (
    GenerateAccountRequest, GenerateAccountResponse,
    ValidateAccountRequest, ValidateAccountResponse
)
from ..checksum import generate, validate
from ..exceptions import InvalidBankCodeError
from ..logging_config import log_action

logger = logging.getLogger("nuban.api")

router = APIRouter()


@router.post("/generate", response_model=GenerateAccountResponse)
async def generate_account(request: GenerateAccountRequest):
    """Generate a NUBAN from a serial number and bank code"""
    try:
        account_number = generate(request.serial_number, request.bank_code)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    log_action(
        logger, "info", "Account number generated",
        action="generate", resource=request.bank_code,
        extra={"account_number": account_number}
    )

    return GenerateAccountResponse(
        account_number=account_number,
        serial_number=account_number[:-1],
        check_digit=int(account_number[-1]),
        bank_code=request.bank_code
    )


@router.post("/validate", response_model=ValidateAccountResponse)
async def validate_account(request: ValidateAccountRequest):
    """Check an account number against a bank code"""
    try:
        valid = validate(request.account_number, request.bank_code)
    except InvalidBankCodeError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ValidateAccountResponse(
        account_number=request.account_number,
        bank_code=request.bank_code,
        valid=valid
    )
