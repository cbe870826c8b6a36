from __future__ import annotations

import json
from pathlib import Path

import pytest

from valid_npm_name.settings import FORMAT_ENV_VAR

REPORT_SCHEMA_PATH = Path(__file__).resolve().parents[1] / "contracts" / "name-report.schema.json"


@pytest.fixture
def report_schema() -> dict:
    return json.loads(REPORT_SCHEMA_PATH.read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def _clear_format_env(monkeypatch):
    monkeypatch.delenv(FORMAT_ENV_VAR, raising=False)
