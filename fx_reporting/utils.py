"""Utility helpers."""
from __future__ import annotations

import json
import pathlib
from typing import Any, Dict

import yaml
from jsonschema import validate

BASE_DIR = pathlib.Path(__file__).resolve().parent.parent
CONFIG_DIR = BASE_DIR / "config"
SCHEMA_DIR = BASE_DIR / "schemas"


def load_yaml(path: str | pathlib.Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_json_schema(path: str | pathlib.Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_schema(name: str) -> Dict[str, Any]:
    return load_json_schema(SCHEMA_DIR / f"{name}.schema.json")


def validate_json(data: Any, schema: Dict[str, Any]) -> None:
    validate(instance=data, schema=schema)
