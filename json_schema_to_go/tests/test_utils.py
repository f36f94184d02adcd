import pytest

from json_schema_to_go.utils import capitalize_words


@pytest.mark.parametrize(
    "text,expected",
    [
        ("foo", "Foo"),
        ("Foo", "Foo"),
        ("first name", "FirstName"),
        ("camelCase", "CamelCase"),
        ("snake_case", "Snake_case"),
        ("kebab-case", "Kebab-case"),
        ("  spaced   out ", "SpacedOut"),
        ("x", "X"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_capitalize_words(text, expected):
    assert capitalize_words(text) == expected
