"""
Currency Units — Константы денежных единиц LuxTensor

Единицы:
- LTS (LuxTensor Smallest): базовая неделимая единица, все балансы хранятся в LTS
- MDT (ModernTensor): основная (display) деноминация

1 MDT = 10^18 LTS (аналогично ETH/wei).

КРИТИЧЕСКИЙ ИНВАРИАНТ:
Количество знаков MDT задаётся ровно один раз (MDT_DECIMALS). Масштаб,
ширина zero-padding и лимит дробной части выводятся только из него.
"""

from dataclasses import dataclass
from typing import Final


# =============================================================================
# DENOMINATION
# =============================================================================


@dataclass(frozen=True)
class Denomination:
    """Деноминация: символ и количество implied decimal places."""

    symbol: str
    decimals: int

    @property
    def scale(self) -> int:
        """Число атомарных единиц в одной единице деноминации (10^decimals)."""
        return 10**self.decimals


# =============================================================================
# ШИРИНА ЦЕЛОГО
# =============================================================================

# Балансы ledger'а хранятся в u128; Python int неограничен, поэтому ширина
# проверяется явно (см. checked_math)
U128_BITS: Final[int] = 128
U128_MAX: Final[int] = (1 << U128_BITS) - 1


# =============================================================================
# ДЕНОМИНАЦИИ
# =============================================================================

MDT_DECIMALS: Final[int] = 18

MDT_SYMBOL: Final[str] = "MDT"
LTS_SYMBOL: Final[str] = "LTS"

MDT: Final[Denomination] = Denomination(symbol=MDT_SYMBOL, decimals=MDT_DECIMALS)
LTS: Final[Denomination] = Denomination(symbol=LTS_SYMBOL, decimals=0)


# =============================================================================
# МАСШТАБЫ
# =============================================================================

# 10^18
LTS_PER_MDT: Final[int] = MDT.scale

# Кратные для magnitude-based форматирования у потребителей
LTS_PER_KMDT: Final[int] = 1_000 * LTS_PER_MDT  # 10^21 (1000 MDT)
LTS_PER_MMDT: Final[int] = 1_000_000 * LTS_PER_MDT  # 10^24 (1M MDT)
