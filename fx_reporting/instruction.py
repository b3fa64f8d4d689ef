"""Foreign exchange trade instruction."""
from __future__ import annotations

import dataclasses
import datetime as dt
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from .errors import InvalidArgumentError, InvalidStateError
from .operation import Operation
from .trading_calendar import DEFAULT_CALENDAR, TradingCalendar

MANDATORY_FIELDS = ("settlement_date", "agreed_fx", "currency", "price_per_unit", "units")
_ZERO = Decimal(0)


@dataclass(frozen=True)
class Instruction:
    """A validated trade instruction.

    Instances are only ever constructed in a valid state: every constructor
    path (direct call, ``create``, ``from_dict``, ``with_changes``) runs the
    same checks. Single bad values raise ``InvalidArgumentError``; missing
    mandatory fields raise ``InvalidStateError``.
    """

    entity: str
    operation: Operation
    agreed_fx: Decimal
    currency: str
    instruction_date: Optional[dt.date]
    settlement_date: dt.date
    units: int
    price_per_unit: Decimal

    def __post_init__(self) -> None:
        # Per-field checks first, then the aggregate check.
        if self.operation is not None:
            object.__setattr__(self, "operation", Operation.parse(self.operation))
        if self.agreed_fx is not None:
            agreed_fx = _to_decimal("agreed_fx", self.agreed_fx)
            if agreed_fx < _ZERO:
                raise InvalidArgumentError("agreed_fx", self.agreed_fx, "AgreedFx rate cannot be negative")
            object.__setattr__(self, "agreed_fx", agreed_fx)
        if self.units is not None:
            units = _to_int("units", self.units)
            if units <= 0:
                raise InvalidArgumentError("units", self.units, "Units should be greater than zero")
            object.__setattr__(self, "units", units)
        if self.price_per_unit is not None:
            price = _to_decimal("price_per_unit", self.price_per_unit)
            if price <= _ZERO:
                raise InvalidArgumentError(
                    "price_per_unit", self.price_per_unit, "Price per unit should be greater than zero"
                )
            object.__setattr__(self, "price_per_unit", price)
        object.__setattr__(self, "entity", "" if self.entity is None else str(self.entity))
        if self.currency is not None:
            object.__setattr__(self, "currency", str(self.currency).strip().upper())
        for name in ("settlement_date", "instruction_date"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, _to_date(name, value))

        missing = tuple(name for name in MANDATORY_FIELDS if getattr(self, name) in (None, ""))
        if missing:
            raise InvalidStateError(
                f"The instruction to instantiate is invalid, missing: {', '.join(missing)}",
                missing=missing,
            )

    @classmethod
    def create(
        cls,
        *,
        entity: str = "",
        operation: Operation | str | None = None,
        agreed_fx: Any = None,
        currency: str | None = None,
        instruction_date: Any = None,
        settlement_date: Any = None,
        units: Any = None,
        price_per_unit: Any = None,
    ) -> "Instruction":
        return cls(
            entity=entity,
            operation=operation,
            agreed_fx=agreed_fx,
            currency=currency,
            instruction_date=instruction_date,
            settlement_date=settlement_date,
            units=units,
            price_per_unit=price_per_unit,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Instruction":
        return cls.create(
            entity=data.get("entity", ""),
            operation=data.get("operation", data.get("buy_sell")),
            agreed_fx=data.get("agreed_fx"),
            currency=data.get("currency"),
            instruction_date=data.get("instruction_date"),
            settlement_date=data.get("settlement_date"),
            units=data.get("units"),
            price_per_unit=data.get("price_per_unit"),
        )

    def with_changes(self, **changes: Any) -> "Instruction":
        """Return a copy with ``changes`` applied, validated like a new instruction."""
        return dataclasses.replace(self, **changes)

    @property
    def effective_settlement_date(self) -> dt.date:
        return DEFAULT_CALENDAR.next_tradable_date(self.settlement_date, self.currency)

    def effective_settlement_date_on(self, calendar: TradingCalendar) -> dt.date:
        return calendar.next_tradable_date(self.settlement_date, self.currency)


def _to_decimal(field: str, value: Any) -> Decimal:
    if isinstance(value, bool):
        raise InvalidArgumentError(field, value, f"{field} must be a decimal number")
    if isinstance(value, float):
        value = str(value)
    try:
        result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidArgumentError(field, value, f"{field} must be a decimal number") from exc
    if not result.is_finite():
        raise InvalidArgumentError(field, value, f"{field} must be a finite number")
    return result


def _to_int(field: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentError(field, value, f"{field} must be an integer")
    try:
        result = int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidArgumentError(field, value, f"{field} must be an integer") from exc
    # int() truncates floats, Decimals and Fractions.
    if not isinstance(value, (int, str)) and result != value:
        raise InvalidArgumentError(field, value, f"{field} must be an integer")
    return result


def _to_date(field: str, value: Any) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        try:
            return dt.date.fromisoformat(value.strip())
        except ValueError as exc:
            raise InvalidArgumentError(field, value, f"{field} must be an ISO date") from exc
    raise InvalidArgumentError(field, value, f"{field} must be a date")
