"""
LuxTensor core primitives.

Фундаментальные building blocks ledger'а, не зависящие от внешних систем
(storage, network, consensus). Балансы всегда хранятся в LTS.
"""

from luxtensor_core import currency
from luxtensor_core.currency import *  # noqa: F401,F403

__all__ = list(currency.__all__)
