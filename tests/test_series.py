"""Tests for day-indexed return series."""

import pytest

from projection.indices import DEFAULT_INDICES
from projection.instruments import Instrument, RateKind, RateSpec
from projection.returns import effective_annual_rate, gross_return
from projection.series import ReturnPoint, generate_series, gross_series, net_series

CDB = Instrument(RateSpec(RateKind.PERCENT_OF_INDEX, 110), is_taxable=True, name="CDB 110% CDI")
LCA = Instrument(RateSpec(RateKind.PERCENT_OF_INDEX, 100), is_taxable=False, name="LCA 100% CDI")


def test_one_point_per_day_inclusive() -> None:
    series = generate_series(CDB, DEFAULT_INDICES, 730)
    assert len(series) == 731
    assert [p.day_offset for p in series] == list(range(731))
    assert series[0] == ReturnPoint(day_offset=0, gross_return=0.0, net_return=0.0)


def test_zero_days() -> None:
    assert generate_series(CDB, DEFAULT_INDICES, 0) == [ReturnPoint(0, 0.0, 0.0)]


def test_negative_total_days_raises() -> None:
    with pytest.raises(ValueError, match="total_days must be >= 0"):
        generate_series(CDB, DEFAULT_INDICES, -1)


def test_gross_is_closed_form() -> None:
    """Each day equals the direct formula; no accumulated drift."""
    rate = effective_annual_rate(CDB, DEFAULT_INDICES)
    series = generate_series(CDB, DEFAULT_INDICES, 1500)
    for day in (1, 17, 365, 999, 1500):
        assert series[day].gross_return == gross_return(rate, day)


@pytest.mark.parametrize("boundary", [180, 360, 720])
def test_net_jumps_up_at_bracket_change(boundary: int) -> None:
    series = generate_series(CDB, DEFAULT_INDICES, 800)
    before, after = series[boundary], series[boundary + 1]
    assert after.net_return > before.net_return
    # The net jump is far larger than one day of gross accrual.
    daily_gross = after.gross_return - before.gross_return
    assert after.net_return - before.net_return > daily_gross


def test_gross_continuous_at_bracket_change() -> None:
    series = generate_series(CDB, DEFAULT_INDICES, 800)
    step_720 = series[721].gross_return - series[720].gross_return
    step_719 = series[720].gross_return - series[719].gross_return
    assert step_720 > 0
    assert abs(step_720 - step_719) < 1e-6


def test_exempt_series_net_equals_gross() -> None:
    series = generate_series(LCA, DEFAULT_INDICES, 800)
    assert all(p.net_return == p.gross_return for p in series)


def test_restartable() -> None:
    """Recomputing gives identical values; a shorter horizon is a prefix."""
    long = generate_series(CDB, DEFAULT_INDICES, 400)
    assert generate_series(CDB, DEFAULT_INDICES, 400) == long
    assert generate_series(CDB, DEFAULT_INDICES, 200) == long[:201]


def test_float_views() -> None:
    full = generate_series(CDB, DEFAULT_INDICES, 30)
    assert gross_series(CDB, DEFAULT_INDICES, 30) == [p.gross_return for p in full]
    assert net_series(CDB, DEFAULT_INDICES, 30) == [p.net_return for p in full]
