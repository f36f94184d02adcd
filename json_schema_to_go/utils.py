"""
Utility functions for JSON Schema to Go generator.
"""


def capitalize_words(text: str) -> str:
    """Capitalize the first letter of each space-separated word and join them.

    Only the first character of a word changes; the rest is kept as is.

    Examples:
        "foo" -> "Foo"
        "first name" -> "FirstName"
        "camelCase" -> "CamelCase"
        "snake_case" -> "Snake_case"
        "  a  b " -> "AB"

    Args:
        text: Title or property key to convert

    Returns:
        Concatenated identifier (empty for an empty or blank input)
    """
    return "".join(word[:1].upper() + word[1:] for word in text.split(" ") if word)
