import pytest

from conststruct.naming import is_valid_field_name, make_valid_field_name, make_valid_field_names


def test__is_valid_field_name() -> None:
    assert is_valid_field_name("a")
    assert is_valid_field_name("myField_2")
    assert not is_valid_field_name("")
    assert not is_valid_field_name("_private")
    assert not is_valid_field_name("2nd")
    assert not is_valid_field_name("my field")
    assert not is_valid_field_name("while")
    assert not is_valid_field_name("café")
    assert not is_valid_field_name(42)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("valid", "valid"),
        ("my field", "myField"),
        ("  padded name  ", "paddedName"),
        ("Item #1", "Item_1"),
        ("a-b", "a_b"),
        ("1st", "x1st"),
        ("_private", "x_private"),
        ("", "x"),
        ("for", "xFor"),
        ("None", "xNone"),
        ("café", "caf_"),
    ],
)
def test__make_valid_field_name(name: str, expected: str) -> None:
    assert make_valid_field_name(name) == expected
    assert is_valid_field_name(expected)


def test__make_valid_field_names__keeps_order_and_duplicates() -> None:
    assert make_valid_field_names(["b", "a b", "b"]) == ["b", "aB", "b"]
