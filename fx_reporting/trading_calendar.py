"""Weekend conventions per currency and settlement date shifting."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Iterable

# Home markets that trade Sunday to Thursday.
SUNDAY_TO_THURSDAY_CURRENCIES = frozenset({"AED", "SAR"})

_FRIDAY, _SATURDAY, _SUNDAY = 4, 5, 6


@dataclass(frozen=True)
class TradingCalendar:
    sunday_to_thursday: frozenset = SUNDAY_TO_THURSDAY_CURRENCIES

    @classmethod
    def from_currencies(cls, currencies: Iterable[str]) -> "TradingCalendar":
        return cls(sunday_to_thursday=frozenset(c.strip().upper() for c in currencies))

    def is_sunday_to_thursday_market(self, currency: str) -> bool:
        return currency.upper() in self.sunday_to_thursday

    def is_non_tradable_day(self, day: dt.date, currency: str) -> bool:
        weekday = day.weekday()
        if self.is_sunday_to_thursday_market(currency):
            return weekday in (_FRIDAY, _SATURDAY)
        return weekday in (_SATURDAY, _SUNDAY)

    def next_tradable_date(self, day: dt.date, currency: str) -> dt.date:
        """Return ``day`` or the first later date the currency's market is open."""
        while self.is_non_tradable_day(day, currency):
            day += dt.timedelta(days=1)
        return day


DEFAULT_CALENDAR = TradingCalendar()


def is_sunday_to_thursday_market(currency: str) -> bool:
    return DEFAULT_CALENDAR.is_sunday_to_thursday_market(currency)


def is_non_tradable_day(day: dt.date, currency: str) -> bool:
    return DEFAULT_CALENDAR.is_non_tradable_day(day, currency)


def next_tradable_date(day: dt.date, currency: str) -> dt.date:
    return DEFAULT_CALENDAR.next_tradable_date(day, currency)
