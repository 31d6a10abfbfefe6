"""
Pydantic schemas for API requests and responses
"""

from typing import List
from pydantic import BaseModel, Field

from ..banks import Bank


class GenerateAccountRequest(BaseModel):
    serial_number: str = Field(..., description="Bank-assigned serial number, at most 9 digits")
    bank_code: str = Field(..., description="3 or 5 digit bank code")


class GenerateAccountResponse(BaseModel):
    account_number: str
    serial_number: str
    check_digit: int
    bank_code: str


class ValidateAccountRequest(BaseModel):
    account_number: str = Field(..., description="Candidate 10 digit NUBAN")
    bank_code: str = Field(..., description="3 or 5 digit bank code")


class ValidateAccountResponse(BaseModel):
    account_number: str
    bank_code: str
    valid: bool


class BankModel(BaseModel):
    name: str
    code: str
    longcode: str = ""

    @classmethod
    def from_bank(cls, bank: Bank) -> 'BankModel':
        return cls(name=bank.name, code=bank.code, longcode=bank.longcode)


class BankListResponse(BaseModel):
    banks: List[BankModel]
    count: int


class InferBanksResponse(BaseModel):
    account_number: str
    banks: List[BankModel]
