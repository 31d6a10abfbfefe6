"""
NUBAN Error Types

Caller mistakes (bad bank codes, oversized serials) are ValueErrors so they
can be handled the same way as any other invalid argument. Directory errors
describe failures of the remote bank list and are never raised by the
checksum routines.
"""


class NubanError(Exception):
    """Base class for all NUBAN toolkit errors"""


class InvalidBankCodeError(NubanError, ValueError):
    """Bank code is not a 3 or 5 digit string"""

    def __init__(self, bank_code):
        self.bank_code = bank_code
        super().__init__("Bank Code must be either 3 or 5 digits!")


class SerialNumberTooLongError(NubanError, ValueError):
    """Serial number has more digits than the standard allows"""

    def __init__(self, serial_number: str, max_length: int):
        self.serial_number = serial_number
        self.max_length = max_length
        super().__init__(f"Serial number should be at most {max_length}-digits long.")


class InvalidInputError(NubanError, ValueError):
    """Serial number contains characters other than digits"""


class BankDirectoryError(NubanError):
    """Bank directory could not be retrieved"""


class BankDirectoryFetchError(BankDirectoryError):
    """Transport failure or non-success HTTP status from the directory source"""


class BankDirectoryParseError(BankDirectoryError):
    """Directory payload is not a JSON list of bank records"""
