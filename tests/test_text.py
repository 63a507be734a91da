import pytest

from aisutil.text import prepad, to_lower, to_upper, trim, trim_quotes


def test_to_lower_converts_ascii_letters():
    assert to_lower("HeLLo World") == "hello world"


def test_to_upper_matches_str_upper_for_ascii():
    sample = "Mixed Case 123 !?"
    assert to_upper(sample) == sample.upper()


def test_case_conversion_keeps_length_and_non_letters():
    sample = "ABC-xyz_09"
    assert len(to_lower(sample)) == len(sample)
    assert to_lower(sample)[3] == "-"
    assert to_upper(to_lower(sample)) == to_upper(sample)


def test_case_conversion_leaves_non_ascii_alone():
    assert to_lower("\u00c9") == "\u00c9"
    assert to_upper("\u00e9") == "\u00e9"


def test_prepad_pads_to_width():
    result = prepad("ab", 5, "0")
    assert len(result) == 5
    assert result.endswith("ab")
    assert set(result[:3]) == {"0"}


def test_prepad_default_fill_is_space():
    assert prepad("x", 3) == "  x"


def test_prepad_does_not_crop_long_text():
    assert prepad("abcdef", 3, "*") == "abcdef"


def test_prepad_rejects_multi_character_fill():
    with pytest.raises(ValueError):
        prepad("a", 4, "ab")


def test_trim_strips_whitespace_both_ends():
    assert trim(" \t abc def \r\n") == "abc def"


def test_trim_keeps_other_whitespace_inside_and_vertical_tab():
    assert trim("\vabc") == "\vabc"
    assert trim("   ") == ""


def test_trim_quotes_strips_quotes_and_spaces():
    assert trim_quotes(" \"'quoted value'\" ") == "quoted value"


def test_trim_quotes_leaves_tabs():
    assert trim_quotes("\t'a'\t") == "\t'a'\t"
    assert trim_quotes("''") == ""