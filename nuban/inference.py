"""
Bank Inference Module

Works out which banks an account number could belong to by checking it
against every code in the bank directory. A NUBAN does not encode its bank,
so several banks may match the same number.
"""

import logging
from typing import Iterable, List

from .banks import Bank
from .checksum import is_valid_bank_code, validate

logger = logging.getLogger("nuban.inference")


def matches_bank(account_number: str, bank: Bank) -> bool:
    """
    Check whether an account number is valid under either of a bank's codes.

    Codes that are not 3 or 5 digits (directory entries sometimes carry sort
    codes or blanks) are ignored rather than treated as errors.
    """
    for code in (bank.code, bank.longcode):
        if is_valid_bank_code(code) and validate(account_number, code):
            return True
    return False


def infer_banks(account_number: str, banks: Iterable[Bank]) -> List[Bank]:
    """Filter banks down to those whose codes validate the account number"""
    return [bank for bank in banks if matches_bank(account_number, bank)]


class BankInferrer:
    """Infers candidate banks for an account number from a bank directory"""

    def __init__(self, directory):
        """
        Args:
            directory: Anything with a list_banks() method, typically a
                BankDirectoryClient or StaticBankDirectory
        """
        self.directory = directory

    def infer_banks(self, account_number: str, strict: bool = False) -> List[Bank]:
        """
        Find the banks an account number may belong to.

        Args:
            account_number: 10 digit NUBAN
            strict: Use fetch_banks() so directory failures raise
                BankDirectoryError instead of yielding no candidates

        Returns:
            Matching banks in directory order
        """
        banks = self.directory.fetch_banks() if strict else self.directory.list_banks()
        candidates = infer_banks(account_number, banks)

        logger.debug(
            f"Inferred {len(candidates)} of {len(banks)} banks for account {account_number}"
        )
        return candidates
