"""
Тесты для LtsAmount — Pydantic value object

Покрывает:
- Создание и валидацию (u128, strict int)
- Конструкторы from_mdt / parse_mdt
- Immutability (frozen=True)
- Checked-сложение
- JSON сериализацию/десериализацию
"""

import pytest
from pydantic import ValidationError

from luxtensor_core.currency import (
    LTS_PER_MDT,
    U128_MAX,
    AmountOverflowError,
    ExcessPrecisionError,
    LtsAmount,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def one_and_half():
    """1.5 MDT"""
    return LtsAmount(lts=1_500_000_000_000_000_000)


# =============================================================================
# ТЕСТЫ: создание и валидация
# =============================================================================


class TestLtsAmountValidation:
    """Тесты валидации поля lts"""

    def test_valid_bounds(self):
        assert LtsAmount(lts=0).lts == 0
        assert LtsAmount(lts=U128_MAX).lts == U128_MAX

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            LtsAmount(lts=-1)

    def test_above_u128_rejected(self):
        with pytest.raises(ValidationError):
            LtsAmount(lts=U128_MAX + 1)

    @pytest.mark.parametrize("value", ["100", 1.0, True])
    def test_no_coercion(self, value):
        with pytest.raises(ValidationError):
            LtsAmount(lts=value)

    def test_frozen(self, one_and_half):
        with pytest.raises(ValidationError):
            one_and_half.lts = 0


# =============================================================================
# ТЕСТЫ: конструкторы
# =============================================================================


class TestLtsAmountConstructors:
    """Тесты zero / from_mdt / parse_mdt"""

    def test_zero(self):
        assert LtsAmount.zero() == LtsAmount(lts=0)

    def test_from_mdt(self):
        assert LtsAmount.from_mdt(3).lts == 3 * LTS_PER_MDT

    def test_from_mdt_overflow(self):
        with pytest.raises(AmountOverflowError):
            LtsAmount.from_mdt(U128_MAX)

    def test_parse_mdt(self, one_and_half):
        assert LtsAmount.parse_mdt("1.5") == one_and_half

    def test_parse_mdt_propagates_errors(self):
        with pytest.raises(ExcessPrecisionError):
            LtsAmount.parse_mdt("0.1234567890123456789")


# =============================================================================
# ТЕСТЫ: представления и арифметика
# =============================================================================


class TestLtsAmountBehaviour:
    """Тесты представлений, сравнения и сложения"""

    def test_representations(self, one_and_half):
        assert one_and_half.to_mdt() == 1
        assert one_and_half.format_mdt() == "1.500000000000000000 MDT"
        assert one_and_half.format_lts() == "1500000000000000000 LTS"
        assert str(one_and_half) == "1.500000000000000000 MDT"

    def test_ordering(self, one_and_half):
        assert LtsAmount.zero() < one_and_half
        assert one_and_half >= LtsAmount.from_mdt(1)
        assert max(LtsAmount(lts=5), LtsAmount(lts=7)).lts == 7

    def test_checked_add(self, one_and_half):
        total = one_and_half.checked_add(LtsAmount(lts=500_000_000_000_000_000))
        assert total == LtsAmount.from_mdt(2)
        # Исходный экземпляр не изменился
        assert one_and_half.lts == 1_500_000_000_000_000_000

    def test_checked_add_overflow(self):
        with pytest.raises(AmountOverflowError, match="exceeds u128 range"):
            LtsAmount(lts=U128_MAX).checked_add(LtsAmount(lts=1))

    def test_json_roundtrip(self):
        amount = LtsAmount(lts=U128_MAX)
        restored = LtsAmount.model_validate_json(amount.model_dump_json())
        assert restored == amount

    def test_hashable(self, one_and_half):
        assert len({one_and_half, LtsAmount.parse_mdt("1.5")}) == 1
