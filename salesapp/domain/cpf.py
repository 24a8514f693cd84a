"""
CPF (Brazilian individual tax id) helpers.

A CPF has 11 digits; the last two are check digits computed from the
preceding ones with a modulo-11 weighted sum.
"""
import re

CPF_LENGTH = 11

_NON_DIGITS = re.compile(r"[^0-9]")


def only_digits(value: str) -> str:
    """Strip every non-digit character ("111.444.777-35" -> "11144477735")."""
    return _NON_DIGITS.sub("", value or "")


def _check_digit(digits: str, length: int) -> int:
    total = sum((length + 1 - i) * int(digits[i]) for i in range(length))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cpf(value: str) -> bool:
    """
    Validate a CPF.

    Non-digit characters are ignored. The remaining digits must be exactly 11,
    not all identical, and end with the two correct check digits.
    """
    if not value or not value.strip():
        return False

    digits = only_digits(value)
    if len(digits) != CPF_LENGTH:
        return False
    if len(set(digits)) == 1:
        return False

    return (
        int(digits[9]) == _check_digit(digits, 9)
        and int(digits[10]) == _check_digit(digits, 10)
    )


def normalize_cpf(value: str) -> str:
    """
    Return the 11-digit form of a valid CPF.

    Raises:
        ValueError: If the CPF is invalid
    """
    if not is_valid_cpf(value):
        raise ValueError("Invalid CPF")
    return only_digits(value)
