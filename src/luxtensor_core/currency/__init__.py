"""
Currency — денежные единицы LuxTensor (LTS/MDT)

Конверсия, форматирование и парсинг сумм с точной десятичной семантикой
и проверкой переполнения u128.
"""

# Units
from luxtensor_core.currency.units import (
    LTS,
    LTS_PER_KMDT,
    LTS_PER_MDT,
    LTS_PER_MMDT,
    LTS_SYMBOL,
    MDT,
    MDT_DECIMALS,
    MDT_SYMBOL,
    U128_BITS,
    U128_MAX,
    Denomination,
)

# Errors
from luxtensor_core.currency.errors import (
    AmountOverflowError,
    CurrencyError,
    ExcessPrecisionError,
    MalformedAmountError,
    NegativeAmountError,
)

# Checked Math
from luxtensor_core.currency.checked_math import (
    checked_add,
    checked_mul,
    is_u128,
    validate_u128,
)

# Converter
from luxtensor_core.currency.converter import (
    DECIMAL_SEPARATOR,
    format_lts,
    format_lts_as_mdt,
    lts_to_mdt,
    mdt_to_lts,
    parse_mdt_to_lts,
)

# Value objects
from luxtensor_core.currency.amount import LtsAmount

__all__ = [
    # Units — Constants
    "LTS_PER_MDT",
    "LTS_PER_KMDT",
    "LTS_PER_MMDT",
    "MDT_DECIMALS",
    "MDT_SYMBOL",
    "LTS_SYMBOL",
    "U128_BITS",
    "U128_MAX",
    # Units — Denominations
    "Denomination",
    "MDT",
    "LTS",
    # Errors
    "CurrencyError",
    "AmountOverflowError",
    "MalformedAmountError",
    "ExcessPrecisionError",
    "NegativeAmountError",
    # Checked Math
    "is_u128",
    "validate_u128",
    "checked_mul",
    "checked_add",
    # Converter
    "DECIMAL_SEPARATOR",
    "mdt_to_lts",
    "lts_to_mdt",
    "format_lts_as_mdt",
    "format_lts",
    "parse_mdt_to_lts",
    # Value objects
    "LtsAmount",
]
