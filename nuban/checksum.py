"""
NUBAN Checksum Module

Implements the check digit algorithm of the CBN revised NUBAN standard (2020).

A bank code is normalized to six digits (3-digit codes are padded with '0',
5-digit codes with a single '9'), prefixed to the 9-digit serial number, and
the resulting 15-digit cipher is weighted position by position against the
seed 373373373373373. The check digit is whatever brings the weighted sum
up to the next multiple of ten.

All functions here are pure: they read only their arguments and the module
constants below.
"""

import re

from .exceptions import InvalidBankCodeError, InvalidInputError, SerialNumberTooLongError


SEED = "373373373373373"

SERIAL_NUMBER_LENGTH = 9
NUBAN_LENGTH = 10

SHORT_BANK_CODE_LENGTH = 3
LONG_BANK_CODE_LENGTH = 5
NORMALIZED_BANK_CODE_LENGTH = 6

_DIGITS = re.compile(r"[0-9]+")


def _is_digits(value) -> bool:
    return isinstance(value, str) and _DIGITS.fullmatch(value) is not None


def is_valid_bank_code(bank_code) -> bool:
    """Check whether a bank code has one of the two accepted shapes"""
    return _is_digits(bank_code) and len(bank_code) in (
        SHORT_BANK_CODE_LENGTH, LONG_BANK_CODE_LENGTH
    )


def normalize_bank_code(bank_code: str) -> str:
    """
    Expand a bank code to the six digits used in the cipher.

    Legacy 3-digit codes are left-padded with '0' and 5-digit codes with a
    single '9', so the two numbering eras never collide.

    Raises:
        InvalidBankCodeError: If the code is not 3 or 5 digits
    """
    if not is_valid_bank_code(bank_code):
        raise InvalidBankCodeError(bank_code)

    if len(bank_code) == SHORT_BANK_CODE_LENGTH:
        return bank_code.rjust(NORMALIZED_BANK_CODE_LENGTH, "0")
    return bank_code.rjust(NORMALIZED_BANK_CODE_LENGTH, "9")


def pad_serial_number(serial_number: str) -> str:
    """
    Left-pad a serial number with zeros to the standard length.

    Raises:
        InvalidInputError: If the serial number is empty or not all digits
        SerialNumberTooLongError: If it has more than 9 digits
    """
    if not _is_digits(serial_number):
        raise InvalidInputError(f"Serial number must be a non-empty digit string, got {serial_number!r}")

    if len(serial_number) > SERIAL_NUMBER_LENGTH:
        raise SerialNumberTooLongError(serial_number, SERIAL_NUMBER_LENGTH)

    return serial_number.rjust(SERIAL_NUMBER_LENGTH, "0")


def generate_check_digit(serial_number: str, bank_code: str) -> int:
    """
    Compute the check digit for a serial number under a bank code.

    Args:
        serial_number: Serial portion of the account number (at most 9 digits)
        bank_code: 3 or 5 digit bank code

    Returns:
        Check digit between 0 and 9
    """
    cipher = normalize_bank_code(bank_code) + pad_serial_number(serial_number)

    total = 0
    for digit, weight in zip(cipher, SEED):
        total += int(digit) * int(weight)

    check_digit = 10 - (total % 10)
    return 0 if check_digit == 10 else check_digit


def generate(serial_number: str, bank_code: str) -> str:
    """
    Generate a NUBAN account number from a serial number and bank code.

    The serial number is zero-padded to 9 digits and the check digit is
    appended, so the result is always exactly 10 digits.

    Args:
        serial_number: Bank-assigned serial number (at most 9 digits)
        bank_code: 3 or 5 digit bank code

    Returns:
        10 digit account number

    Raises:
        SerialNumberTooLongError: If the serial number exceeds 9 digits
        InvalidBankCodeError: If the bank code is not 3 or 5 digits
        InvalidInputError: If the serial number is not a digit string
    """
    padded = pad_serial_number(serial_number)
    return f"{padded}{generate_check_digit(padded, bank_code)}"


def validate(account_number, bank_code: str) -> bool:
    """
    Check a NUBAN account number against a bank code.

    Malformed account numbers (missing, wrong length, non-digits) are simply
    not valid. Only a malformed bank code raises.

    Raises:
        InvalidBankCodeError: If the bank code is not 3 or 5 digits
    """
    # Bank code errors must surface even when the account number is junk
    normalize_bank_code(bank_code)

    if not _is_digits(account_number) or len(account_number) != NUBAN_LENGTH:
        return False

    serial_number = account_number[:SERIAL_NUMBER_LENGTH]
    check_digit = generate_check_digit(serial_number, bank_code)

    return check_digit == int(account_number[NUBAN_LENGTH - 1])
