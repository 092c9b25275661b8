"""
Currency Errors — Таксономия ошибок конверсии

Все ошибки наследуют ValueError: вызывающий код, которому не важна причина,
может ловить ValueError. Модуль ничего не логирует; обработка и показ
пользователю остаются за вызывающим.
"""


class CurrencyError(ValueError):
    """Базовая ошибка денежных единиц."""

    pass


class AmountOverflowError(CurrencyError):
    """
    Результат или вход выходит за диапазон u128.

    Никогда не заменяется clamp'ом или wraparound'ом.
    """

    pass


class MalformedAmountError(CurrencyError):
    """Строка не является десятичным числом вида <digits> или <digits>.<digits>."""

    pass


class ExcessPrecisionError(CurrencyError):
    """
    Дробная часть длиннее MDT_DECIMALS.

    Цифры по отдельности валидны, но вместе требуют точности ниже 1 LTS.
    Округление или усечение не выполняется.
    """

    pass


class NegativeAmountError(CurrencyError):
    """Отрицательная сумма там, где ожидается беззнаковое значение."""

    pass
