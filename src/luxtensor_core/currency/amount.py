"""
LtsAmount — Immutable value object суммы в LTS

Immutable Pydantic модель поверх операций converter: для потребителей
(account/state, transaction, reporting), которым нужен типизированный
баланс вместо голого int. Хранит только LTS; MDT существует лишь как
представление.
"""

from functools import total_ordering

from pydantic import BaseModel, Field, StrictInt, field_validator

from luxtensor_core.currency.checked_math import checked_add
from luxtensor_core.currency.converter import (
    format_lts,
    format_lts_as_mdt,
    lts_to_mdt,
    mdt_to_lts,
    parse_mdt_to_lts,
)
from luxtensor_core.currency.errors import AmountOverflowError
from luxtensor_core.currency.units import U128_MAX


# =============================================================================
# LTS AMOUNT MODEL
# =============================================================================


@total_ordering
class LtsAmount(BaseModel):
    """
    Сумма в атомарных единицах LTS (u128).

    Immutable модель (frozen=True): любая арифметика создаёт новый экземпляр.
    StrictInt не допускает коэрсию из str/float/bool.
    """

    lts: StrictInt = Field(..., description="Сумма в LTS (u128)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("lts")
    @classmethod
    def validate_u128_range(cls, v: int) -> int:
        """Диапазон u128: [0, U128_MAX]."""
        if v < 0:
            raise ValueError(f"lts must be non-negative, got {v}")
        if v > U128_MAX:
            raise ValueError(f"lts {v} exceeds u128 maximum {U128_MAX}")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "LtsAmount":
        """Нулевая сумма."""
        return cls(lts=0)

    @classmethod
    def from_mdt(cls, mdt: int) -> "LtsAmount":
        """
        Сумма из целых MDT.

        Raises:
            AmountOverflowError: Если mdt * LTS_PER_MDT не влезает в u128
        """
        lts = mdt_to_lts(mdt)
        if lts is None:
            raise AmountOverflowError(f"{mdt} MDT exceeds u128 range in LTS")
        return cls(lts=lts)

    @classmethod
    def parse_mdt(cls, mdt_str: str) -> "LtsAmount":
        """Сумма из десятичной строки MDT (см. parse_mdt_to_lts)."""
        return cls(lts=parse_mdt_to_lts(mdt_str))

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def to_mdt(self) -> int:
        """Целые MDT, дробная часть отбрасывается."""
        return lts_to_mdt(self.lts)

    def format_mdt(self) -> str:
        return format_lts_as_mdt(self.lts)

    def format_lts(self) -> str:
        return format_lts(self.lts)

    def __str__(self) -> str:
        return self.format_mdt()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def checked_add(self, other: "LtsAmount") -> "LtsAmount":
        """
        Сложение с проверкой переполнения.

        Raises:
            AmountOverflowError: Если сумма не влезает в u128
        """
        total = checked_add(self.lts, other.lts)
        if total is None:
            raise AmountOverflowError(
                f"{self.format_lts()} + {other.format_lts()} exceeds u128 range"
            )
        return LtsAmount(lts=total)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LtsAmount):
            return NotImplemented
        return self.lts < other.lts
