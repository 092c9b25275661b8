"""
Checked Math — Беззнаковая 128-битная арифметика с проверкой переполнения

Python int не ограничен по ширине, поэтому семантика u128 ledger'а
воспроизводится явно:
- checked_mul / checked_add возвращают None, если результат не влезает в u128
- validate_u128 отклоняет не-int, отрицательные и слишком большие значения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не превращается в clamp или wraparound
2. Saturating-вариантов нет
3. bool не считается суммой, хотя и является подклассом int
"""

from typing import Optional

from luxtensor_core.currency.errors import AmountOverflowError, NegativeAmountError
from luxtensor_core.currency.units import U128_MAX


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_u128(value: object) -> bool:
    """
    Проверка, является ли значение валидным u128.

    Examples:
        >>> is_u128(0)
        True
        >>> is_u128(2**128)
        False
        >>> is_u128(True)
        False
    """
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= U128_MAX
    )


def validate_u128(value: object, name: str) -> None:
    """
    Валидация беззнаковой 128-битной суммы.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (bool, float, Decimal, str и т.д.)
        NegativeAmountError: Если value < 0
        AmountOverflowError: Если value > U128_MAX
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise NegativeAmountError(f"{name} must be non-negative, got {value}")

    if value > U128_MAX:
        raise AmountOverflowError(f"{name} exceeds u128 maximum {U128_MAX}, got {value}")


# =============================================================================
# CHECKED ARITHMETIC
# =============================================================================


def checked_mul(a: int, b: int) -> Optional[int]:
    """
    Умножение u128 с проверкой переполнения.

    Args:
        a: Множитель (u128)
        b: Множитель (u128)

    Returns:
        a * b, или None если произведение > U128_MAX

    Examples:
        >>> checked_mul(2, 3)
        6
        >>> checked_mul(U128_MAX, 2) is None
        True
    """
    validate_u128(a, "a")
    validate_u128(b, "b")

    product = a * b
    if product > U128_MAX:
        return None
    return product


def checked_add(a: int, b: int) -> Optional[int]:
    """
    Сложение u128 с проверкой переполнения.

    Returns:
        a + b, или None если сумма > U128_MAX
    """
    validate_u128(a, "a")
    validate_u128(b, "b")

    total = a + b
    if total > U128_MAX:
        return None
    return total
