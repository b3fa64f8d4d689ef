"""Settlement and ranking reports over trade instructions."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from decimal import MAX_PREC, ROUND_HALF_EVEN, Decimal, localcontext
from typing import Callable, Dict, Iterable, Optional, Sequence

from .instruction import Instruction
from .logging import get_logger
from .operation import Operation
from .trading_calendar import DEFAULT_CALENDAR, TradingCalendar

OPERATION_SCALE = 3
RESULT_SCALE = 2

_OPERATION_QUANTUM = Decimal(1).scaleb(-OPERATION_SCALE)
_RESULT_QUANTUM = Decimal(1).scaleb(-RESULT_SCALE)

SETTLED_PER_DAY = "settled_per_day"
ENTITY_RANKING = "entity_ranking"

Presenter = Callable[[str, Operation, Dict], None]

logger = get_logger(__name__)


@dataclass
class GlobalReport:
    settled_per_day: Dict[Operation, Dict[dt.date, Decimal]] = field(default_factory=dict)
    entity_ranking: Dict[Operation, Dict[str, Decimal]] = field(default_factory=dict)


def line_total(instruction: Instruction) -> Decimal:
    """Rate x unit price x units, rounded half-even to 3 places at each step."""
    # Exact arithmetic: only the explicit quantize steps may round.
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        total = (instruction.agreed_fx * instruction.price_per_unit).quantize(
            _OPERATION_QUANTUM, rounding=ROUND_HALF_EVEN
        )
        return (total * instruction.units).quantize(_OPERATION_QUANTUM, rounding=ROUND_HALF_EVEN)


def accumulate(current: Optional[Decimal], amount: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        if current is None:
            return amount.quantize(_RESULT_QUANTUM, rounding=ROUND_HALF_EVEN)
        return (current + amount).quantize(_RESULT_QUANTUM, rounding=ROUND_HALF_EVEN)


def validate_inputs(instructions: Optional[Sequence[Instruction]], operation: Optional[Operation]) -> bool:
    return bool(instructions) and operation is not None


def amount_settled_per_day(
    instructions: Optional[Sequence[Instruction]],
    operation: Optional[Operation],
    calendar: TradingCalendar | None = None,
) -> Dict[dt.date, Decimal]:
    """Total amount settled on each effective settlement date, oldest day first.

    Returns an empty dict when there are no instructions or no operation.
    """
    if not validate_inputs(instructions, operation):
        logger.debug("report_skipped", report=SETTLED_PER_DAY, operation=str(operation))
        return {}
    calendar = calendar or DEFAULT_CALENDAR

    per_day: Dict[dt.date, Decimal] = {}
    for instruction in instructions:
        if instruction.operation is not operation:
            continue
        day = instruction.effective_settlement_date_on(calendar)
        per_day[day] = accumulate(per_day.get(day), line_total(instruction))

    return {day: per_day[day] for day in sorted(per_day)}


def entity_ranking(
    instructions: Optional[Sequence[Instruction]],
    operation: Optional[Operation],
) -> Dict[str, Decimal]:
    """Total amount per entity, highest first. Equal totals are ordered by entity."""
    if not validate_inputs(instructions, operation):
        logger.debug("report_skipped", report=ENTITY_RANKING, operation=str(operation))
        return {}

    totals: Dict[str, Decimal] = {}
    for instruction in instructions:
        if instruction.operation is not operation:
            continue
        totals[instruction.entity] = accumulate(totals.get(instruction.entity), line_total(instruction))

    by_entity = sorted(totals.items(), key=lambda item: item[0])
    return dict(sorted(by_entity, key=lambda item: item[1], reverse=True))


def generate_global_report(
    instructions: Optional[Iterable[Instruction]],
    presenter: Presenter | None = None,
    calendar: TradingCalendar | None = None,
) -> GlobalReport:
    """Build the four report bodies: incoming/outgoing per day, then incoming/outgoing ranking."""
    if instructions is not None:
        instructions = list(instructions)
    report = GlobalReport()
    for operation in (Operation.SELL, Operation.BUY):
        body = amount_settled_per_day(instructions, operation, calendar)
        report.settled_per_day[operation] = body
        if presenter is not None:
            presenter(SETTLED_PER_DAY, operation, body)
    for operation in (Operation.SELL, Operation.BUY):
        body = entity_ranking(instructions, operation)
        report.entity_ranking[operation] = body
        if presenter is not None:
            presenter(ENTITY_RANKING, operation, body)

    logger.debug(
        "report_generated",
        instructions=len(instructions) if instructions is not None else 0,
        days={str(op): len(body) for op, body in report.settled_per_day.items()},
        entities={str(op): len(body) for op, body in report.entity_ranking.items()},
    )
    return report
