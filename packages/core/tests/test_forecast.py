"""Tests for the spending forecast."""

from decimal import Decimal

from spendwise_core.forecast import forecast
from spendwise_core.models import Confidence, Trend


def totals(*values: str) -> list[Decimal]:
    return [Decimal(v) for v in values]


class TestForecast:
    """Test suite for forecast()."""

    def test_increasing_history(self):
        result = forecast(totals("100", "150", "200"), total_transaction_count=12)

        assert result is not None
        assert result.average == Decimal("150")
        assert result.trend_value == Decimal("50")
        assert result.projected_amount == Decimal("200")
        assert result.trend == Trend.INCREASING
        assert result.confidence == Confidence.MEDIUM
        assert result.data_points == 3

    def test_decreasing_history(self):
        result = forecast(totals("300", "200", "100"), total_transaction_count=10)

        assert result.trend == Trend.DECREASING
        assert result.projected_amount == Decimal("100")

    def test_stable_history(self):
        result = forecast(totals("100", "400", "100"), total_transaction_count=10)

        assert result.trend == Trend.STABLE
        assert result.projected_amount == Decimal("200")

    def test_projection_never_negative(self):
        result = forecast(totals("900", "0", "0"), total_transaction_count=10)

        assert result.trend_value == Decimal("-450")
        assert result.projected_amount == Decimal("0")

    def test_insufficient_transactions(self):
        """Fewer than 10 transactions means no forecast."""
        assert forecast(totals("100", "150", "200"), total_transaction_count=9) is None

    def test_empty_history(self):
        assert forecast([], total_transaction_count=50) is None

    def test_short_history_low_confidence(self):
        result = forecast(totals("100", "200"), total_transaction_count=20)

        assert result.confidence == Confidence.LOW
        assert result.average == Decimal("150")
        assert result.trend_value == Decimal("50")

    def test_uses_last_three_months(self):
        result = forecast(totals("5000", "100", "150", "200"), total_transaction_count=20)

        assert result.average == Decimal("150")
        assert result.data_points == 3

    def test_idempotent(self):
        history = totals("120.40", "80.10", "99.99")
        assert forecast(history, 15) == forecast(history, 15)
