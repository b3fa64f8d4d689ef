"""Instruction sources: the built-in sample set and instruction files."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import Any, List

import yaml
from jsonschema import ValidationError

from .errors import InstructionError, InstructionFileError
from .instruction import Instruction
from .logging import get_logger
from .utils import load_schema, load_yaml, validate_json

logger = get_logger(__name__)

# entity, operation, agreed_fx, currency, instruction_date, settlement_date, units, price_per_unit
_SAMPLE_ROWS = [
    ("foo", "B", "0.50", "SGP", "2016-01-01", "2016-01-02", 200, "100.25"),
    ("bar", "S", "0.22", "AED", "2016-01-05", "2016-01-07", 450, "150.5"),
    ("baz", "B", "1.00", "USD", "2016-06-15", "2016-06-18", 150, "35.75"),
    ("qux", "S", "0.27", "SAR", "2016-06-15", "2016-06-17", 1000, "12.125"),
    ("foo", "S", "1.12", "EUR", "2016-06-16", "2016-06-19", 80, "99.99"),
    ("bar", "B", "0.25", "AED", "2016-06-16", "2016-06-18", 300, "44.10"),
    ("quux", "B", "1.30", "GBP", "2016-06-17", "2016-06-20", 120, "61.5"),
    ("baz", "S", "0.75", "CHF", "2016-06-17", "2016-06-20", 75, "205.00"),
    ("corge", "S", "0.27", "SAR", "2016-06-18", "2016-06-19", 500, "40.4"),
    ("qux", "B", "0.50", "USD", "2016-11-24", "2016-11-26", 250, "100.25"),
]


def sample_instructions() -> List[Instruction]:
    return [
        Instruction.create(
            entity=entity,
            operation=operation,
            agreed_fx=agreed_fx,
            currency=currency,
            instruction_date=instruction_date,
            settlement_date=settlement_date,
            units=units,
            price_per_unit=price_per_unit,
        )
        for entity, operation, agreed_fx, currency, instruction_date, settlement_date, units, price_per_unit in _SAMPLE_ROWS
    ]


def load_instructions(path: str | pathlib.Path) -> List[Instruction]:
    """Read a YAML or JSON instruction file and build validated instructions.

    The document must look like ``{"instructions": [{...}, ...]}``. Any
    problem (unreadable file, schema violation, invalid record) is raised as
    ``InstructionFileError``.
    """
    path = pathlib.Path(path)
    try:
        if path.suffix.lower() == ".json":
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        else:
            document = load_yaml(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise InstructionFileError(f"Unable to read instruction file {path}: {exc}") from exc

    document = _jsonable(document)
    try:
        validate_json(document, load_schema("instructions"))
    except ValidationError as exc:
        index = _record_index(exc)
        raise InstructionFileError(f"{path}: {exc.message}", index=index) from exc

    instructions = []
    for index, record in enumerate(document["instructions"]):
        try:
            instructions.append(Instruction.from_dict(record))
        except InstructionError as exc:
            raise InstructionFileError(f"{path}: record {index}: {exc}", index=index) from exc

    logger.info("instructions_loaded", path=str(path), count=len(instructions))
    return instructions


def _jsonable(value: Any) -> Any:
    # YAML turns bare ISO dates into date objects.
    if isinstance(value, dt.date):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_jsonable(item) for item in value]
    return value


def _record_index(exc: ValidationError) -> int | None:
    path = list(exc.absolute_path)
    if len(path) >= 2 and path[0] == "instructions" and isinstance(path[1], int):
        return path[1]
    return None

