import datetime as dt

import pytest

from treexml.filters import (
    XML_ATTRIBUTE_FILTER,
    XML_TEXT_FILTER,
    FilterPatternError,
    compile_filter,
    filter_text,
    stringify,
)


def test_without_filter_is_identity_on_text():
    assert filter_text("a & b") == "a & b"
    assert filter_text("a & b", {}) == "a & b"


def test_scalars_are_stringified_first():
    assert filter_text(5) == "5"
    assert filter_text(1.5) == "1.5"
    assert filter_text(True) == "true"
    assert filter_text(False) == "false"
    assert filter_text(None) == ""
    assert filter_text(dt.date(2024, 1, 2)) == "2024-01-02"
    assert stringify(dt.datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05"


def test_xml_text_filter():
    assert filter_text("x < y & z > w", XML_TEXT_FILTER) == "x &lt; y &amp; z &gt; w"


def test_xml_attribute_filter_escapes_quotes():
    assert filter_text("""say "hi" it's""", XML_ATTRIBUTE_FILTER) == "say &quot;hi&quot; it&apos;s"


def test_multi_character_keys():
    assert filter_text("foo bar foo", {"foo": "baz"}) == "baz bar baz"


def test_missing_replacement_deletes_match():
    assert filter_text("foo-bar", {"-": ""}) == "foobar"
    assert filter_text("foo-bar", {"o": None}) == "f-bar"


def test_regex_metacharacters_are_not_escaped():
    # "." matches every character; only the literal "." has a replacement.
    assert filter_text("a.b", {".": "!"}) == "!"


def test_invalid_pattern_fails_fast():
    with pytest.raises(FilterPatternError):
        compile_filter({"(": "x"})
    with pytest.raises(ValueError):
        filter_text("text", {"[": "x"})


def test_compiled_pattern_is_reused():
    assert compile_filter({"a": "b"}) is compile_filter({"a": "c"})
