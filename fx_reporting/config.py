"""Reporting configuration."""
from __future__ import annotations

import pathlib
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .trading_calendar import SUNDAY_TO_THURSDAY_CURRENCIES, TradingCalendar
from .utils import CONFIG_DIR, load_schema, load_yaml, validate_json

DEFAULT_CONFIG_PATH = CONFIG_DIR / "reporting.yaml"


@dataclass
class ReportingConfig:
    reporting_currency: str = "USD"
    sunday_to_thursday_currencies: List[str] = field(
        default_factory=lambda: sorted(SUNDAY_TO_THURSDAY_CURRENCIES)
    )
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "ReportingConfig":
        data = data or {}
        defaults = cls()
        return cls(
            reporting_currency=data.get("reporting_currency", defaults.reporting_currency).upper(),
            sunday_to_thursday_currencies=[
                c.upper()
                for c in data.get("sunday_to_thursday_currencies", defaults.sunday_to_thursday_currencies)
            ],
            log_level=data.get("log_level", defaults.log_level).upper(),
        )

    def calendar(self) -> TradingCalendar:
        return TradingCalendar.from_currencies(self.sunday_to_thursday_currencies)


def load_config(path: str | pathlib.Path | None = None) -> ReportingConfig:
    """Load and validate a YAML config file; the bundled file when ``path`` is None."""
    data = load_yaml(path or DEFAULT_CONFIG_PATH) or {}
    validate_json(data, load_schema("reporting_config"))
    return ReportingConfig.from_dict(data)
