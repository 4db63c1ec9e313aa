import pytest

from brazil_models.domain.value_objects.digits import (
    apply_mask,
    format_digits,
    normalize,
    pad_left_with_zeros,
    remove_mask,
    remove_non_digits,
)


def test_remove_non_digits_keeps_order():
    assert remove_non_digits(" 49.020.406/0001-25 ") == "49020406000125"
    assert remove_non_digits("abc") == ""
    assert remove_non_digits("") == ""


def test_remove_non_digits_ignores_non_ascii_digits():
    assert remove_non_digits("1²3٣") == "13"


def test_pad_left_with_zeros():
    assert pad_left_with_zeros("12345601", 11) == "00012345601"
    assert pad_left_with_zeros("12345678901", 11) == "12345678901"
    assert pad_left_with_zeros("1234567890123", 11) == "1234567890123"


@pytest.mark.parametrize("value", ["", " ", "   \t", None])
def test_normalize_blank_gives_empty_marker(value):
    assert normalize(value, 11) == ""


@pytest.mark.parametrize(
    "value",
    ["1.123.456/0001-01", "12345601", "abc", "000.123.456-01", "9" * 20],
)
def test_normalize_is_idempotent(value):
    once = normalize(value, 14)
    assert normalize(once, 14) == once


def test_normalize_pads_partial_input():
    assert normalize("1.123.456/0001-01", 14) == "01123456000101"
    assert normalize("abc", 11) == "00000000000"


def test_apply_mask():
    assert apply_mask("49020406000125", "##.###.###/####-##") == "49.020.406/0001-25"
    assert apply_mask("00012345601", "###.###.###-##") == "000.123.456-01"


def test_apply_mask_keeps_placeholders_when_digits_run_out():
    assert apply_mask("123", "###.###") == "123.###"


def test_remove_mask_inverts_apply_mask():
    assert remove_mask(apply_mask("52998224725", "###.###.###-##")) == "52998224725"


def test_format_digits():
    assert format_digits("12345601", 11, "###.###.###-##") == "000.123.456-01"
    assert format_digits("000.123.456-01", 11) == "00012345601"
    assert format_digits("  ", 11, "###.###.###-##") == ""
    assert format_digits("123456789012", 11) == ""
