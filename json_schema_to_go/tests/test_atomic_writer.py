"""Tests for writing generated code to disk."""

import pytest

from json_schema_to_go.pipeline import AtomicWriter, OutputValidationError

CODE = 'package models\n\ntype JsonFoo struct {\n\tBar map[string]interface{} `json:"b{a}r"`\n}\n'


class TestAtomicWriter:
    def test_write_creates_parent_directories(self, tmp_path):
        path = tmp_path / "out" / "types.go"
        AtomicWriter(package_name="models").write(path, CODE)

        assert path.read_text() == CODE
        assert [p.name for p in path.parent.iterdir()] == ["types.go"]

    def test_non_atomic_write(self, tmp_path):
        path = tmp_path / "types.go"
        AtomicWriter().write(path, CODE, atomic=False)
        assert path.read_text() == CODE

    def test_write_if_not_exists_refuses_existing_file(self, tmp_path):
        path = tmp_path / "types.go"
        path.write_text("custom")

        with pytest.raises(FileExistsError, match="already exists"):
            AtomicWriter().write_if_not_exists(path, CODE)
        assert path.read_text() == "custom"

    def test_write_if_not_exists(self, tmp_path):
        path = tmp_path / "types.go"
        assert AtomicWriter().write_if_not_exists(path, CODE) is True
        assert path.read_text() == CODE

    def test_unbalanced_braces(self, tmp_path):
        path = tmp_path / "types.go"
        with pytest.raises(OutputValidationError, match="unbalanced braces"):
            AtomicWriter().write(path, "type JsonFoo struct {\n")
        assert not path.exists()

    def test_missing_package_clause(self, tmp_path):
        with pytest.raises(OutputValidationError, match="package clause"):
            AtomicWriter(package_name="other").write(tmp_path / "types.go", CODE)

    def test_validation_can_be_skipped(self, tmp_path):
        path = tmp_path / "types.go"
        AtomicWriter(package_name="other").write(path, "{", validate=False)
        assert path.read_text() == "{"

    def test_custom_validator(self, tmp_path):
        seen = []
        AtomicWriter(validate_go=seen.append).write(tmp_path / "types.go", CODE)
        assert seen == [CODE]
