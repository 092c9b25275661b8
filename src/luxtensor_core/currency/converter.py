"""
Currency Unit Converter — Конверсия и форматирование LTS ↔ MDT

Единственный допустимый способ преобразований между:
- atomic amount (LTS, u128)
- display amount (MDT, целое u128)
- десятичной строкой MDT ("1.5", "0.000000000000000001")

Все операции чистые: нет состояния, нет I/O, нет логирования.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение u128 всегда сообщается (None или AmountOverflowError)
2. parse_mdt_to_lts никогда не округляет и не усекает
3. format_lts_as_mdt без потерь: parse_mdt_to_lts обращает его точно
4. lts_to_mdt: единственная операция с потерей точности
"""

import re
from typing import Final, Optional

from luxtensor_core.currency.checked_math import checked_add, checked_mul, validate_u128
from luxtensor_core.currency.errors import (
    AmountOverflowError,
    ExcessPrecisionError,
    MalformedAmountError,
)
from luxtensor_core.currency.units import (
    LTS_PER_MDT,
    LTS_SYMBOL,
    MDT_DECIMALS,
    MDT_SYMBOL,
    U128_MAX,
)


# =============================================================================
# ФОРМАТ СТРОКИ
# =============================================================================

DECIMAL_SEPARATOR: Final[str] = "."

# Только ASCII-цифры: int() принимает также знак, пробелы, "_" и Unicode-цифры
_DIGITS_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+")

# Целая часть длиннее этого (без ведущих нулей) заведомо > U128_MAX
_U128_MAX_DIGITS: Final[int] = len(str(U128_MAX))


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def mdt_to_lts(mdt: int) -> Optional[int]:
    """
    Конверсия: MDT (целые) → LTS

    lts = mdt * LTS_PER_MDT с проверкой переполнения.

    Args:
        mdt: Сумма в целых MDT (u128)

    Returns:
        Сумма в LTS, или None если произведение не влезает в u128.
        None означает отказ от суммы, а не нулевой баланс.

    Raises:
        TypeError: Если mdt не int
        NegativeAmountError: Если mdt < 0
        AmountOverflowError: Если mdt сам по себе > U128_MAX

    Examples:
        >>> mdt_to_lts(1)
        1000000000000000000
        >>> mdt_to_lts(U128_MAX) is None
        True
    """
    validate_u128(mdt, "mdt")
    return checked_mul(mdt, LTS_PER_MDT)


def lts_to_mdt(lts: int) -> int:
    """
    Конверсия: LTS → MDT (целые), с потерей дробной части.

    Остаток меньше 1 MDT отбрасывается. Там, где нужна точность,
    использовать format_lts_as_mdt.

    Examples:
        >>> lts_to_mdt(1_500_000_000_000_000_000)
        1
    """
    validate_u128(lts, "lts")
    return lts // LTS_PER_MDT


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_lts_as_mdt(lts: int) -> str:
    """
    Форматирование LTS как десятичной строки MDT без потери точности.

    Examples:
        >>> format_lts_as_mdt(1_500_000_000_000_000_000)
        '1.500000000000000000 MDT'
        >>> format_lts_as_mdt(0)
        '0.000000000000000000 MDT'
    """
    validate_u128(lts, "lts")
    whole, fractional = divmod(lts, LTS_PER_MDT)
    return f"{whole}{DECIMAL_SEPARATOR}{fractional:0{MDT_DECIMALS}d} {MDT_SYMBOL}"


def format_lts(lts: int) -> str:
    """
    Форматирование LTS как есть.

    Examples:
        >>> format_lts(1_500_000_000_000_000_000)
        '1500000000000000000 LTS'
    """
    validate_u128(lts, "lts")
    return f"{lts} {LTS_SYMBOL}"


# =============================================================================
# ПАРСИНГ
# =============================================================================


def _require_digits(segment: str, text: str, what: str) -> None:
    """Непустая строка ASCII-цифр, иначе MalformedAmountError."""
    if not _DIGITS_RE.fullmatch(segment):
        raise MalformedAmountError(
            f"MDT amount {text!r} is malformed: {what} must be digits"
        )


def parse_mdt_to_lts(mdt_str: str) -> int:
    """
    Парсинг десятичной строки MDT в LTS.

    Формат: "<digits>" или "<digits>.<digits>". Знак, пробелы,
    разделители тысяч и экспонента не допускаются.

    Алгоритм:
    1. Разбиение по "." (больше одной точки → ошибка формата)
    2. Целая часть → int
    3. Дробная часть: не длиннее MDT_DECIMALS, дополняется нулями справа
    4. whole * LTS_PER_MDT с проверкой переполнения
    5. + fractional с проверкой переполнения

    Args:
        mdt_str: Строка суммы в MDT (например, "1.5")

    Returns:
        Сумма в LTS (u128)

    Raises:
        TypeError: Если mdt_str не str
        MalformedAmountError: Нецифровой или пустой сегмент, больше одной точки
        ExcessPrecisionError: Дробная часть длиннее MDT_DECIMALS
        AmountOverflowError: Результат не влезает в u128

    Examples:
        >>> parse_mdt_to_lts("1.5")
        1500000000000000000
        >>> parse_mdt_to_lts("1.000000000000000001")
        1000000000000000001
    """
    if not isinstance(mdt_str, str):
        raise TypeError(f"mdt_str must be a str, got {type(mdt_str).__name__}")

    parts = mdt_str.split(DECIMAL_SEPARATOR)
    if len(parts) > 2:
        raise MalformedAmountError(
            f"MDT amount {mdt_str!r} is malformed: more than one {DECIMAL_SEPARATOR!r}"
        )

    whole_str = parts[0]
    _require_digits(whole_str, mdt_str, "whole part")

    # Слишком длинная целая часть: это переполнение, а не ошибка формата
    if len(whole_str.lstrip("0")) > _U128_MAX_DIGITS:
        raise AmountOverflowError(f"MDT amount {mdt_str!r} exceeds u128 range")
    whole = int(whole_str.lstrip("0") or "0")
    if whole > U128_MAX:
        raise AmountOverflowError(f"MDT amount {mdt_str!r} exceeds u128 range")

    fractional = 0
    if len(parts) == 2:
        frac_str = parts[1]
        _require_digits(frac_str, mdt_str, "fractional part")
        if len(frac_str) > MDT_DECIMALS:
            raise ExcessPrecisionError(
                f"MDT amount {mdt_str!r} has {len(frac_str)} decimal places "
                f"(max {MDT_DECIMALS})"
            )
        fractional = int(frac_str.ljust(MDT_DECIMALS, "0"))

    scaled = checked_mul(whole, LTS_PER_MDT)
    if scaled is None:
        raise AmountOverflowError(
            f"MDT amount {mdt_str!r} exceeds u128 range when scaled to {LTS_SYMBOL}"
        )

    total = checked_add(scaled, fractional)
    if total is None:
        raise AmountOverflowError(
            f"MDT amount {mdt_str!r} exceeds u128 range when adding fractional part"
        )

    return total
