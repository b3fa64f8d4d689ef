"""Text and JSON rendering of report bodies."""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, List, TextIO

from .operation import Operation
from .reporting_engine import ENTITY_RANKING, SETTLED_PER_DAY, GlobalReport


def render_settled_per_day(operation: Operation, body: Dict, currency: str = "USD") -> List[str]:
    lines = [f"Amount in {currency} settled per day for {operation} instructions:"]
    for day, amount in body.items():
        lines.append(f"Day: {day.isoformat()}, Amount: {amount} {currency}")
    return lines


def render_entity_ranking(operation: Operation, body: Dict, currency: str = "USD") -> List[str]:
    lines = [f"Ranking of entities in descending order by amount instructed to {operation} instructions:"]
    for entity, amount in body.items():
        lines.append("{:<15}, {:<10}".format(f"Entity: {entity}", f"Amount: {amount} {currency}"))
    return lines


_RENDERERS = {
    SETTLED_PER_DAY: render_settled_per_day,
    ENTITY_RANKING: render_entity_ranking,
}


class TextPresenter:
    """Writes each report body as it is produced, separated by blank lines."""

    def __init__(self, currency: str = "USD", stream: TextIO | None = None) -> None:
        self.currency = currency
        self.stream = stream or sys.stdout

    def __call__(self, kind: str, operation: Operation, body: Dict) -> None:
        lines = _RENDERERS[kind](operation, body, self.currency)
        print("\n" + "\n".join(lines), file=self.stream)


def report_to_dict(report: GlobalReport, currency: str = "USD") -> Dict[str, Any]:
    return {
        "currency": currency,
        SETTLED_PER_DAY: {
            str(op): [{"day": day.isoformat(), "amount": str(amount)} for day, amount in body.items()]
            for op, body in report.settled_per_day.items()
        },
        ENTITY_RANKING: {
            str(op): [{"entity": entity, "amount": str(amount)} for entity, amount in body.items()]
            for op, body in report.entity_ranking.items()
        },
    }


def render_json(report: GlobalReport, currency: str = "USD") -> str:
    return json.dumps(report_to_dict(report, currency), indent=2)
