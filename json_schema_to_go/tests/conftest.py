"""Shared fixtures for json_schema_to_go tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from json_schema_to_go.pipeline.analyzer import InheritanceResolver, ReferenceLoader, TypeRegistry, TypeSynthesizer
from json_schema_to_go.pipeline.config import CodeGeneratorConfig
from json_schema_to_go.pipeline.schema_ast import SchemaParser


def write_documents(directory: Path, documents: dict) -> None:
    """Write schema documents; string values are written verbatim."""
    for name, content in documents.items():
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")


@pytest.fixture
def plain_config():
    """Factory for configs without generation comment or gofmt, for exact output checks."""

    def _make(**overrides) -> CodeGeneratorConfig:
        config = CodeGeneratorConfig.from_dict({"add_generation_comment": False, "formatter": {"enabled": False}})
        for key, value in overrides.items():
            setattr(config, key, value)
        return config

    return _make


@pytest.fixture
def parser():
    return SchemaParser()


@pytest.fixture
def write_schemas(tmp_path):
    """Write documents into tmp_path and return the directory."""

    def _write(documents: dict) -> Path:
        write_documents(tmp_path, documents)
        return tmp_path

    return _write


@pytest.fixture
def loader(tmp_path):
    return ReferenceLoader(tmp_path)


@pytest.fixture
def resolver(loader):
    return InheritanceResolver(loader)


@pytest.fixture
def registry():
    return TypeRegistry()


@pytest.fixture
def synthesizer(resolver, registry):
    return TypeSynthesizer(resolver, registry)
