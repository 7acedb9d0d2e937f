import json

import pytest

from sqlmerge import cli as cli_module
from sqlmerge.formatters import AbsentFormatter, ExternalFormatResult


class StubFormatter:
    """External formatter double that records calls and returns a fixed result."""

    def __init__(self, *, text: str | None = None, error: str | None = None, name: str = "stub"):
        self.name = name
        self._result = ExternalFormatResult(text=text, error=error)
        self.calls: list[str] = []

    def is_available(self) -> bool:
        return True

    def format(self, sql, options):
        del options
        self.calls.append(sql)
        return self._result


@pytest.fixture
def temp_workspace(tmp_path):
    """Create a temporary workspace directory"""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace


@pytest.fixture
def payload_file(temp_workspace):
    """Structured merge payload on disk"""
    path = temp_workspace / "payload.json"
    path.write_text(
        json.dumps({"sql": "SELECT * FROM t WHERE id = ? AND name = ?", "values": [7, "O'Reilly"]}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def local_formatting(monkeypatch):
    """Keep CLI formatting deterministic by disabling the external formatter"""
    monkeypatch.setattr(cli_module.services.format, "formatter", AbsentFormatter())


@pytest.fixture
def stub_formatter_factory():
    return StubFormatter
