"""Check digit algorithms (modulo 11) for CPF and CNPJ."""
from __future__ import annotations

CPF_LENGTH = 11
CNPJ_LENGTH = 14

CNPJ_WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def _check_digit(total: int) -> int:
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _is_ascii_digits(value: str, length: int) -> bool:
    return len(value) == length and value.isascii() and value.isdigit()


def validate_cpf(digits: str) -> bool:
    """Validates an unmasked 11 digit CPF."""
    if not _is_ascii_digits(digits, CPF_LENGTH):
        return False
    if digits == digits[0] * CPF_LENGTH:
        return False

    numbers = [int(c) for c in digits]
    total1 = sum(n * (10 - i) for i, n in enumerate(numbers[:9]))
    total2 = sum(n * (11 - i) for i, n in enumerate(numbers[:9]))

    dv1 = _check_digit(total1)
    if numbers[9] != dv1:
        return False

    dv2 = _check_digit(total2 + dv1 * 2)
    return numbers[10] == dv2


def cpf_check_digits(base: str) -> str:
    """Derives the two check digits for a 9 digit CPF base."""
    if not _is_ascii_digits(base, CPF_LENGTH - 2):
        raise ValueError(f"CPF base must have 9 digits: {base!r}")
    numbers = [int(c) for c in base]
    dv1 = _check_digit(sum(n * (10 - i) for i, n in enumerate(numbers)))
    dv2 = _check_digit(sum(n * (11 - i) for i, n in enumerate(numbers)) + dv1 * 2)
    return f"{dv1}{dv2}"


def validate_cnpj(digits: str) -> bool:
    """Validates an unmasked 14 digit CNPJ in a single pass."""
    if not _is_ascii_digits(digits, CNPJ_LENGTH):
        return False

    total1 = total2 = 0
    identical = True
    for position, char in enumerate(digits):
        digit = int(char)
        if position and char != digits[position - 1]:
            identical = False

        if position < 12:
            total1 += digit * CNPJ_WEIGHTS_1[position]
            total2 += digit * CNPJ_WEIGHTS_2[position]
        elif position == 12:
            dv1 = _check_digit(total1)
            if digit != dv1:
                return False
            total2 += dv1 * CNPJ_WEIGHTS_2[12]
        else:
            if digit != _check_digit(total2):
                return False

    return not identical


def cnpj_check_digits(base: str) -> str:
    """Derives the two check digits for a 12 digit CNPJ base."""
    if not _is_ascii_digits(base, CNPJ_LENGTH - 2):
        raise ValueError(f"CNPJ base must have 12 digits: {base!r}")
    numbers = [int(c) for c in base]
    dv1 = _check_digit(sum(n * w for n, w in zip(numbers, CNPJ_WEIGHTS_1)))
    dv2 = _check_digit(sum(n * w for n, w in zip(numbers + [dv1], CNPJ_WEIGHTS_2)))
    return f"{dv1}{dv2}"
