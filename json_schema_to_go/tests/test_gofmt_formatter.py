"""Tests for the gofmt post-processing step."""

import subprocess

import pytest

from json_schema_to_go.pipeline.config import FormatterConfig
from json_schema_to_go.pipeline.formatters import GofmtFormatter
from json_schema_to_go.pipeline.formatters import gofmt_formatter

CODE = "type JsonFoo struct {\nBar string `json:\"bar\"`\n}\n"


@pytest.fixture
def installed(monkeypatch):
    """Pretend gofmt is on the PATH."""
    monkeypatch.setattr(gofmt_formatter.shutil, "which", lambda name: f"/usr/bin/{name}")


class TestGofmtFormatter:
    def test_missing_executable_returns_input(self):
        config = FormatterConfig(command=["definitely-not-a-go-formatter"])
        formatter = GofmtFormatter()

        assert formatter.is_available(config) is False
        assert formatter.format(CODE, config) == CODE

    def test_empty_command_is_unavailable(self):
        assert GofmtFormatter().is_available(FormatterConfig(command=[])) is False

    def test_formatted_output_is_returned(self, installed, monkeypatch):
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return subprocess.CompletedProcess(cmd, 0, stdout="formatted\n", stderr="")

        monkeypatch.setattr(gofmt_formatter.subprocess, "run", fake_run)

        assert GofmtFormatter().format(CODE, FormatterConfig(timeout=5)) == "formatted\n"
        cmd, kwargs = calls[0]
        assert cmd == ["gofmt"]
        assert kwargs["input"] == CODE
        assert kwargs["timeout"] == 5

    def test_rejected_source_returns_input(self, installed, monkeypatch):
        monkeypatch.setattr(
            gofmt_formatter.subprocess,
            "run",
            lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 2, stdout="", stderr="syntax error"),
        )

        assert GofmtFormatter().format(CODE, FormatterConfig()) == CODE

    def test_timeout_returns_input(self, installed, monkeypatch):
        def fake_run(cmd, **kwargs):
            raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

        monkeypatch.setattr(gofmt_formatter.subprocess, "run", fake_run)

        assert GofmtFormatter().format(CODE, FormatterConfig()) == CODE
