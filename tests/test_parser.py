import logging
import textwrap

import pytest

import lexini
from lexini import Ini, LexError, ParseError


def test_empty():
    ini = lexini.parse("")

    assert ini == Ini()
    assert list(ini) == [""]
    assert len(ini[""]) == 0


def test_default_section_key():
    ini = lexini.parse("bar=baz")

    expected = Ini()
    expected[""].insert("bar", "baz")

    assert ini == expected


def test_section():
    ini = lexini.parse("[foo]")

    expected = Ini()
    expected.add_section("foo")

    assert ini == expected


def test_section_key():
    ini = lexini.parse(
        """
        [foo]
        bar=baz
        """
    )

    expected = Ini()
    expected.add_section("foo").insert("bar", "baz")

    assert ini == expected


def test_many_sections():
    ini = lexini.parse(
        """
        [foo]
        [bar]
        [baz]
        """
    )

    assert set(ini) == {"", "foo", "bar", "baz"}


def test_greeting():
    ini = lexini.parse("[section]\nearly=morning\nlate=night")

    assert ini["section"]["early"] == "morning"
    assert ini["section"]["late"] == "night"
    assert len(ini[""]) == 0


def test_keys_before_section():
    ini = lexini.parse("a=1\nb=2\n[foo]\nc=3")

    assert ini[""].to_dict() == {"a": "1", "b": "2"}
    assert ini["foo"].to_dict() == {"c": "3"}


def test_last_key_wins():
    ini = lexini.parse("foo=bar\nfoo=baz")

    assert ini[""]["foo"] == "baz"


def test_repeated_section_replaces():
    ini = lexini.parse("[foo]\na=1\n[bar]\n[foo]\nb=2")

    assert ini["foo"].to_dict() == {"b": "2"}


def test_quoted_names():
    ini = lexini.parse('["foo bar"]\n"baz qux"=quux')

    assert ini["foo bar"]["baz qux"] == "quux"


def test_quoted_default_key():
    ini = lexini.parse('"foo bar"=baz')

    assert ini[""]["foo bar"] == "baz"


def test_quoted_escape():
    ini = lexini.parse(r'"foo\"bar"="baz\"qux"')

    assert ini[""]['foo"bar'] == 'baz"qux'


def test_quoted_empty_value():
    ini = lexini.parse('foo=""')

    assert ini[""]["foo"] == ""


@pytest.mark.parametrize("comment", ["; comment", "# comment"])
def test_comment(comment: str):
    assert lexini.parse(f"{comment}\nfoo=bar") == lexini.parse("foo=bar")


def test_inline_comments():
    ini = lexini.parse(
        """
        [foo] ; comment
        bar=baz # comment
        """
    )

    assert ini["foo"]["bar"] == "baz"


def test_windows_newlines():
    ini = lexini.parse("[foo]\r\nbar=baz\r\n; comment\r\nqux=quux\r\n")

    assert ini["foo"].to_dict() == {"bar": "baz", "qux": "quux"}


def test_whitespace_around_equal():
    ini = lexini.parse("\tfoo = bar \t")

    assert ini[""]["foo"] == "bar"


@pytest.mark.parametrize(
    "text",
    [
        "bar=baz qux=quux",
        "[foo] [bar]",
        "[foo] bar=baz",
        "bar=\nbaz",
        "[foo\n]",
        "bar=baz [foo]",
        '""=value',
        "=value",
        "bar",
        "bar baz",
        "bar=baz=qux",
        "[foo",
        "[]",
        "]",
        "[foo]]",
        "\n\n= bar",
    ],
)
def test_reject(text: str):
    with pytest.raises(ParseError):
        lexini.parse(text)


def test_reject_unterminated_quote():
    with pytest.raises(LexError):
        lexini.parse('"foo')

    with pytest.raises(ParseError):
        lexini.parse('foo="bar\n')


def test_error_location():
    with pytest.raises(ParseError) as e:
        lexini.parse("[foo]\nbar=baz qux=quux")

    assert (e.value.line, e.value.column) == (2, 9)
    assert "line 2, column 9" in str(e.value)


def test_error_end_of_input():
    with pytest.raises(ParseError, match="end of input"):
        lexini.parse("bar=")


def test_from_str():
    text = textwrap.dedent(
        """\
        [greeting]
        early=morning
        """
    )

    assert Ini.from_str(text) == lexini.parse(text)


def test_quoted_value_spans_lines():
    ini = lexini.parse('a="x\ny"')

    assert ini[""]["a"] == "x\ny"


def test_reject_escaped_closing_quote():
    with pytest.raises(LexError):
        lexini.parse(r'a="x\\"')


def test_quoted_default_section_header_replaces():
    ini = lexini.parse('a=1\n[""]\nb=2')

    assert ini[""].to_dict() == {"b": "2"}


def test_debug_logging(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="lexini.parser")

    lexini.parse("a=1\n[foo]\nbar=baz")

    assert "set key 'a' in section ''" in caplog.text
    assert "opened section 'foo'" in caplog.text
    assert "set key 'bar' in section 'foo'" in caplog.text
