import sys

import pytest

from argopts.exceptions import MissingValueError
from argopts.option import Occurrence, Option
from argopts.parser import Parser


def test_str():
    parser = Parser()
    assert str(parser) == "Parser(options=0, short=0, long=0)"

    parser.add("h", "help", "print help message")
    parser.add(None, "verbose", "print more")
    assert str(parser) == "Parser(options=2, short=1, long=2)"
    assert repr(parser) == str(parser)
    assert len(parser) == 2


def test_construct_from_tuples_and_options():
    parser = Parser([("h", "help", "print help message"), Option("v", "verbose")])
    assert parser.options == (
        Option("h", "help", "print help message"),
        Option("v", "verbose", ""),
    )


def test_add_returns_option():
    parser = Parser()
    option = parser.add("x", "extra", "extra stuff")
    assert option == Option("x", "extra", "extra stuff")
    assert parser.options[-1] is option


@pytest.mark.parametrize("shortopt", ["", "ab", 1])
def test_add_invalid_short(shortopt):
    with pytest.raises(ValueError):
        Parser().add(shortopt, "long", "")


def test_program_name_skipped():
    parser = Parser()
    assert parser.parse(["-h"]) == []
    assert parser.parse(["--help"]) == []
    assert parser.parse([]) == []


def test_positional_skipped():
    options = Parser().parse(["prog", "file.txt", "-v", "other"])
    assert len(options) == 1
    assert options[0].shortopt == "v"
    assert options[0].index == 2


def test_lone_dash_skipped():
    assert Parser().parse(["prog", "-"]) == []
    options = Parser().parse(["prog", "-", "-v"])
    assert [opt.shortopt for opt in options] == ["v"]


def test_double_dash_stops_parsing():
    options = Parser().parse(["prog", "-a", "--", "-b", "--long"])
    assert len(options) == 1
    assert options[0].shortopt == "a"
    assert options[0].arg.as_str() == "--"
    assert all(opt.index < 2 for opt in options)


def test_double_dash_first():
    assert Parser().parse(["prog", "--", "-a"]) == []


def test_known_options():
    parser = Parser(
        [("h", "help", "print help message"), ("v", "verbose", "print more")]
    )
    options = parser.parse(["prog", "--verbose", "-h"])
    assert [(opt.shortopt, opt.longopt, opt.help, opt.index) for opt in options] == [
        ("v", "verbose", "print more", 1),
        ("h", "help", "print help message", 2),
    ]


def test_unknown_options():
    options = Parser().parse(["prog", "--what", "-x"])
    assert options[0].shortopt is None
    assert options[0].longopt == "what"
    assert options[0].help == ""
    assert options[1].shortopt == "x"
    assert options[1].longopt == ""
    assert options[1].help == ""


def test_short_with_value():
    parser = Parser([("a", "alpha", "Alpha option")])
    for argv in (["prog", "-a=value"], ["prog", "-a", "value"]):
        options = parser.parse(argv)
        assert len(options) == 1
        assert options[0].longopt == "alpha"
        assert options[0].arg.as_str() == "value"


def test_long_with_value():
    for argv in (["prog", "--thing=value"], ["prog", "--thing", "value"]):
        options = Parser().parse(argv)
        assert len(options) == 1
        assert options[0].longopt == "thing"
        assert options[0].shortopt is None
        assert options[0].arg.as_str() == "value"


def test_inline_value_keeps_further_equals():
    options = Parser().parse(["prog", "--define=key=value", "next"])
    assert options[0].longopt == "define"
    assert options[0].arg.as_str() == "key=value"


def test_inline_empty_value_is_missing():
    options = Parser().parse(["prog", "--output=", "next"])
    assert options[0].longopt == "output"
    with pytest.raises(MissingValueError):
        options[0].arg.as_str()


def test_equals_without_name():
    options = Parser().parse(["prog", "--=value"])
    assert options[0].longopt == "=value"
    assert options[0].arg.value is None


def test_value_is_next_argument_even_if_option():
    options = Parser().parse(["prog", "-a", "-b"])
    assert options[0].arg.as_str() == "-b"
    assert options[1].arg.value is None


def test_missing_value_at_end():
    options = Parser([("n", "count", "number of repeats")]).parse(["prog", "-n"])
    with pytest.raises(MissingValueError) as excinfo:
        int(options[0].arg)
    assert excinfo.value.usage == "-n, --count\t\tnumber of repeats"
    assert "Usage: -n, --count" in str(excinfo.value)
    for target in (int, float, str):
        with pytest.raises(MissingValueError):
            options[0].arg.get(target)


def test_typed_values():
    options = Parser().parse(["prog", "-n", "42", "--scale", "3.1415"])
    assert int(options[0].arg) == 42
    assert options[0].arg.as_str() == "42"
    assert float(options[1].arg) == 3.1415
    with pytest.raises(ValueError) as excinfo:
        int(options[1].arg)
    assert "--scale" in str(excinfo.value)
    assert "3.1415" in str(excinfo.value)


def test_first_declared_wins():
    parser = Parser(
        [
            ("a", "alpha", "first"),
            ("a", "again", "second"),
            (None, "alpha", "third"),
        ]
    )
    options = parser.parse(["prog", "-a", "--alpha"])
    assert (options[0].longopt, options[0].help) == ("alpha", "first")
    assert (options[1].shortopt, options[1].help) == ("a", "first")


def test_argc_limits_arguments():
    argv = ["prog", "-a", "x", "-b"]
    options = Parser().parse(argv, argc=3)
    assert [opt.shortopt for opt in options] == ["a"]
    assert options[0].arg.as_str() == "x"

    options = Parser().parse(argv, argc=2)
    assert options[0].arg.value is None


def test_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["prog", "--verbose"])
    options = Parser().parse()
    assert [opt.longopt for opt in options] == ["verbose"]


def test_occurrences_are_copies():
    parser = Parser([("v", "verbose", "print more")])
    options = parser.parse(["prog", "-v"])
    parser.add("x", "extra", "")
    assert options[0] == Occurrence("v", "verbose", "print more", 1)
    assert parser.options[0] == Option("v", "verbose", "print more")


def test_print_options():
    parser = Parser(
        [
            ("h", "help", "print help message"),
            (None, "verbose", ""),
            ("x", "", ""),
            ("n", "", "count"),
        ]
    )
    assert parser.print_options() == (
        "-h, --help\t\tprint help message\n" "--verbose\n" "-x\n" "-n\t\tcount\n"
    )
    assert Parser().print_options() == ""


def test_usage():
    options = Parser([("h", "help", "print help message")]).parse(
        ["prog", "-h", "--long", "-q"]
    )
    assert [opt.usage() for opt in options] == [
        "-h, --help\t\tprint help message",
        "--long",
        "-q",
    ]


def test_is_option():
    option = Parser([("v", "verbose", "")]).parse(["prog", "-v"])[0]
    assert option.is_option("v")
    assert option.is_option(longopt="verbose")
    assert option.is_option("x", "verbose")
    assert not option.is_option("x", "extra")
    assert not option.is_option()
