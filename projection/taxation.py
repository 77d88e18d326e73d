"""
Progressive income-tax brackets for fixed income (IR regressivo).

The rate depends only on how long the position was held:

    days held     rate
    0 - 180       22.5%
    181 - 360     20.0%
    361 - 720     17.5%
    721+          15.0%

Brackets are closed integer ranges; the last one is open-ended. The table is a
tuple scanned linearly (four entries).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaxBracket:
    """Holding-period range [min_days, max_days] taxed at `rate` (decimal)."""

    min_days: int
    max_days: Union[int, float]  # math.inf for the open bracket
    rate: float

    @property
    def is_open(self) -> bool:
        return math.isinf(self.max_days)

    def contains(self, holding_days: float) -> bool:
        return self.min_days <= holding_days <= self.max_days


TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(min_days=0, max_days=180, rate=0.225),
    TaxBracket(min_days=181, max_days=360, rate=0.20),
    TaxBracket(min_days=361, max_days=720, rate=0.175),
    TaxBracket(min_days=721, max_days=math.inf, rate=0.15),
)


class TaxBracketResolver:
    """
    Maps a holding period to its tax bracket.

    The table must partition [0, inf): first bracket starts at 0, each bracket
    starts the day after the previous one ends, and only the last is open.
    """

    def __init__(self, brackets: Sequence[TaxBracket] = TAX_BRACKETS) -> None:
        self.brackets: tuple[TaxBracket, ...] = tuple(brackets)
        self._validate()

    def _validate(self) -> None:
        if not self.brackets:
            raise ValueError("bracket table must not be empty")
        if self.brackets[0].min_days != 0:
            raise ValueError("first bracket must start at day 0")
        for prev, cur in zip(self.brackets, self.brackets[1:]):
            if prev.is_open:
                raise ValueError("only the last bracket may be open-ended")
            if cur.min_days != prev.max_days + 1:
                raise ValueError(
                    f"brackets must be contiguous: {prev.max_days} is followed by {cur.min_days}"
                )
        if not self.brackets[-1].is_open:
            raise ValueError("last bracket must be open-ended")

    def resolve(self, holding_days: float) -> TaxBracket:
        """
        Bracket for `holding_days`. Zero or negative days count as day 0.

        If nothing matches (a fractional day between two integer brackets) the
        open, lowest-rate bracket is returned instead of raising.
        """
        days = max(holding_days, 0)
        for bracket in self.brackets:
            if bracket.contains(days):
                return bracket
        logger.debug("No bracket contains %s days; falling back to the open bracket", holding_days)
        return self.brackets[-1]

    def rate(self, holding_days: float) -> float:
        """Tax rate (decimal) for `holding_days`."""
        return self.resolve(holding_days).rate

    def transition_days(self) -> tuple[int, ...]:
        """Last day of every closed bracket, ascending: (180, 360, 720)."""
        return tuple(int(b.max_days) for b in self.brackets if not b.is_open)

    def transition_pairs(self) -> tuple[int, ...]:
        """Both sides of every rate change: (180, 181, 360, 361, 720, 721)."""
        days: list[int] = []
        for day in self.transition_days():
            days.extend((day, day + 1))
        return tuple(days)


DEFAULT_RESOLVER = TaxBracketResolver()


def tax_rate(holding_days: float) -> float:
    """Tax rate under the default bracket table."""
    return DEFAULT_RESOLVER.rate(holding_days)
