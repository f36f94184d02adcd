import json
from pathlib import Path

import pytest

from json_schema_to_go.pipeline import CodeGeneratorConfig, PipelineGenerator


def discover_test_cases():
    """Automatically discover all test cases from test_cases directory"""
    test_cases_dir = Path(__file__).parent / "test_data" / "test_cases"
    test_cases = []

    for test_dir in sorted(test_cases_dir.iterdir()):
        if not test_dir.is_dir() or test_dir.name.startswith("."):
            continue

        schema_file = test_dir / "schema.json"
        reference_file = test_dir / "reference.go"
        if not schema_file.exists() or not reference_file.exists():
            continue

        test_cases.append(
            {
                "test_name": test_dir.name,
                "schema_file": schema_file,
                "config_file": test_dir / "config.json",
                "reference_file": reference_file,
            }
        )

    return test_cases


@pytest.mark.parametrize("test_case", discover_test_cases(), ids=lambda tc: tc["test_name"])
def test_reference_file_generation(test_case):
    """Test code generation against reference files"""
    if test_case["config_file"].exists():
        with open(test_case["config_file"]) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()
        config.add_generation_comment = False
        config.formatter.enabled = False

    generated_code = PipelineGenerator(test_case["schema_file"], config).generate()

    with open(test_case["reference_file"]) as f:
        reference_code = f.read()

    # Normalize line endings for cross-platform compatibility
    generated_normalized = generated_code.replace("\r\n", "\n").strip()
    reference_normalized = reference_code.replace("\r\n", "\n").strip()

    if generated_normalized != reference_normalized:
        import difflib

        diff = difflib.unified_diff(
            reference_normalized.splitlines(keepends=True),
            generated_normalized.splitlines(keepends=True),
            fromfile="reference",
            tofile="generated",
            lineterm="",
        )
        diff_text = "".join(diff)

        pytest.fail(f"Generated code does not match reference for {test_case['test_name']}\n\nDiff:\n{diff_text}")


if __name__ == "__main__":
    test_cases = discover_test_cases()
    print(f"Discovered {len(test_cases)} test cases:")
    for tc in test_cases:
        print(f"  - {tc['test_name']}")
