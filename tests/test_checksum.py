"""
Test suite for checksum module

Tests NUBAN check digit generation, account validation, bank code
normalization and the error taxonomy.
"""

import pytest

from nuban.checksum import (
    SEED, SERIAL_NUMBER_LENGTH, NUBAN_LENGTH,
    generate, validate, generate_check_digit, normalize_bank_code,
    pad_serial_number, is_valid_bank_code
)
from nuban.exceptions import (
    NubanError, InvalidBankCodeError, SerialNumberTooLongError, InvalidInputError
)


VALID_BANK_CODES = ["044", "058", "033", "000", "50211", "12345", "99999"]


class TestConstants:
    """Test the fixed values of the standard"""

    def test_seed(self):
        """Seed is 373 repeated five times"""
        assert SEED == "373" * 5
        assert len(SEED) == 15

    def test_lengths(self):
        assert SERIAL_NUMBER_LENGTH == 9
        assert NUBAN_LENGTH == 10


class TestNormalizeBankCode:
    """Test bank code normalization to six digits"""

    def test_short_code_padded_with_zeros(self):
        assert normalize_bank_code("044") == "000044"
        assert normalize_bank_code("000") == "000000"

    def test_long_code_padded_with_nine(self):
        assert normalize_bank_code("12345") == "912345"
        assert normalize_bank_code("50211") == "950211"

    @pytest.mark.parametrize("bank_code", ["", "1", "12", "1234", "123456", "044150149"])
    def test_invalid_lengths_rejected(self, bank_code):
        with pytest.raises(InvalidBankCodeError):
            normalize_bank_code(bank_code)

    @pytest.mark.parametrize("bank_code", ["04A", "12 45", "-44", None, 44])
    def test_non_digit_codes_rejected(self, bank_code):
        with pytest.raises(InvalidBankCodeError):
            normalize_bank_code(bank_code)

    def test_is_valid_bank_code(self):
        assert is_valid_bank_code("044")
        assert is_valid_bank_code("12345")
        assert not is_valid_bank_code("12")
        assert not is_valid_bank_code("04B")
        assert not is_valid_bank_code("")
        assert not is_valid_bank_code(None)


class TestGenerate:
    """Test account number generation"""

    def test_known_vector_short_code(self):
        """123456789 under Access Bank (044)"""
        assert generate("123456789", "044") == "1234567895"

    def test_known_vector_long_code(self):
        assert generate("123456789", "12345") == "1234567893"

    def test_known_vector_padded_serial(self):
        assert generate("1", "044") == "0000000017"
        assert generate("69000003", "044") == "0690000032"

    def test_zero_check_digit(self):
        """A weighted sum that is already a multiple of ten gives check digit 0"""
        assert generate("0", "044") == "0000000000"
        assert generate_check_digit("000000000", "044") == 0

    @pytest.mark.parametrize("bank_code", VALID_BANK_CODES)
    def test_padding_equivalence(self, bank_code):
        assert generate("1", bank_code) == generate("000000001", bank_code)
        assert generate("4567", bank_code) == generate("000004567", bank_code)

    @pytest.mark.parametrize("bank_code", VALID_BANK_CODES)
    def test_result_is_ten_digits(self, bank_code):
        for serial in ["1", "42", "123456", "987654321"]:
            account_number = generate(serial, bank_code)
            assert len(account_number) == 10
            assert account_number.isdigit()
            assert account_number[:9] == serial.rjust(9, "0")

    def test_deterministic(self):
        results = {generate("555123", "058") for _ in range(20)}
        assert len(results) == 1

    def test_serial_too_long(self):
        with pytest.raises(SerialNumberTooLongError) as exc_info:
            generate("1234567890", "044")

        assert exc_info.value.max_length == 9
        assert "at most 9-digits" in str(exc_info.value)

    def test_invalid_bank_code(self):
        with pytest.raises(InvalidBankCodeError, match="3 or 5 digits"):
            generate("123456789", "12")

    @pytest.mark.parametrize("serial", ["", "12a", "12 34", "-1", "1.5"])
    def test_non_digit_serial(self, serial):
        with pytest.raises(InvalidInputError):
            generate(serial, "044")

    def test_errors_are_value_errors(self):
        """Caller mistakes can be caught as ValueError"""
        for exc_type in (InvalidBankCodeError, SerialNumberTooLongError, InvalidInputError):
            assert issubclass(exc_type, ValueError)
            assert issubclass(exc_type, NubanError)


class TestValidate:
    """Test account number validation"""

    def test_generated_account_is_valid(self):
        assert validate("1234567895", "044") is True

    def test_all_zero_account(self):
        assert validate("0000000000", "044") is True

    def test_wrong_check_digit(self):
        assert validate("1234567894", "044") is False

    def test_wrong_bank(self):
        assert validate("1234567895", "058") is False

    def test_shared_check_digit_across_banks(self):
        """Different banks can accept the same account number"""
        assert validate("1234567895", "033") is True

    @pytest.mark.parametrize("account_number", ["", "123", "123456789", "12345678950", None])
    def test_wrong_length_is_not_valid(self, account_number):
        assert validate(account_number, "044") is False

    @pytest.mark.parametrize("account_number", ["12345678a5", "123456789x", " 123456789", "١٢٣٤٥٦٧٨٩٥"])
    def test_non_digit_account_is_not_valid(self, account_number):
        assert validate(account_number, "044") is False

    def test_invalid_bank_code_raises(self):
        with pytest.raises(InvalidBankCodeError):
            validate("1234567895", "12")

    def test_invalid_bank_code_raises_for_malformed_account(self):
        with pytest.raises(InvalidBankCodeError):
            validate("", "1234")


class TestRoundTrip:
    """Test generate/validate consistency"""

    @pytest.mark.parametrize("bank_code", VALID_BANK_CODES)
    def test_round_trip_all_serial_lengths(self, bank_code):
        for length in range(1, 10):
            serial = "123456789"[-length:]
            assert validate(generate(serial, bank_code), bank_code) is True

    @pytest.mark.parametrize("bank_code", VALID_BANK_CODES)
    def test_round_trip_serial_range(self, bank_code):
        for number in range(0, 1000, 7):
            account_number = generate(str(number), bank_code)
            assert validate(account_number, bank_code) is True

    def test_single_digit_tampering_detected(self):
        """Every single-digit substitution in the serial changes the check digit"""
        account_number = generate("123456789", "044")

        for position in range(9):
            for digit in "0123456789":
                if digit == account_number[position]:
                    continue
                tampered = account_number[:position] + digit + account_number[position + 1:]
                assert validate(tampered, "044") is False, tampered

    def test_check_digit_tampering_detected(self):
        account_number = generate("69000003", "044")

        for digit in "0123456789":
            tampered = account_number[:9] + digit
            assert validate(tampered, "044") is (tampered == account_number)


class TestPadSerialNumber:
    """Test serial number padding"""

    def test_pads_to_nine(self):
        assert pad_serial_number("1") == "000000001"
        assert pad_serial_number("123456789") == "123456789"

    def test_never_truncates(self):
        with pytest.raises(SerialNumberTooLongError):
            pad_serial_number("0123456789")
