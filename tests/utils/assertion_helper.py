from pydantic import BaseModel

# Source ranges are checked by dedicated tests; tree-shape comparisons skip them.
SKIPPED_FIELDS = ("start", "end")


def assert_asts_equal(actual, expected):
    """
    Recursively asserts that two AST nodes (Pydantic Models) are equal,
    ignoring their source offsets. Provides detailed error messages for mismatches.
    """
    assert type(actual) == type(expected), f"AST node types differ. Actual: {type(actual).__name__}, Expected: {type(expected).__name__}"

    if isinstance(actual, BaseModel):
        for field_name in type(actual).model_fields:
            if field_name in SKIPPED_FIELDS:
                continue

            actual_value = getattr(actual, field_name)
            expected_value = getattr(expected, field_name)

            try:
                assert_asts_equal(actual_value, expected_value)
            except AssertionError as e:
                raise AssertionError(f"Mismatch in field '{field_name}' of {type(actual).__name__}:\n{e}") from e

    elif isinstance(actual, list):
        assert len(actual) == len(expected), f"List lengths differ. Actual: {len(actual)}, Expected: {len(expected)}"
        for i, (act, exp) in enumerate(zip(actual, expected)):
            try:
                assert_asts_equal(act, exp)
            except AssertionError as e:
                raise AssertionError(f"Mismatch at index [{i}] of a list:\n{e}") from e

    else:
        assert actual == expected, f"Primitive values differ. Actual: '{actual}', Expected: '{expected}'"
