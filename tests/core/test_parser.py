# tests/core/test_parser.py
from telosys_shell.core.parser import parse_command_line


def test_parse_simple_command():
    """A single command without arguments."""
    assert parse_command_line("pwd") == [("pwd", [], None)]


def test_parse_command_with_arguments():
    result = parse_command_line("gen Car,Driver java")
    assert result == [("gen", ["Car,Driver", "java"], None)]


def test_parse_star_arguments_are_kept():
    assert parse_command_line("gen * *") == [("gen", ["*", "*"], None)]


def test_parse_sequential_operator():
    result = parse_command_line("m cars ; b java-bundle")
    assert result == [
        ("m", ["cars"], None),
        ("b", ["java-bundle"], ";"),
    ]


def test_parse_conditional_operators():
    result = parse_command_line("cd /tmp && h . || pwd")
    assert result == [
        ("cd", ["/tmp"], None),
        ("h", ["."], "&&"),
        ("pwd", [], "||"),
    ]


def test_parse_quoted_arguments():
    result = parse_command_line('cd "My Projects/demo"')
    assert result == [("cd", ["My Projects/demo"], None)]


def test_parse_unbalanced_quotes_falls_back_to_split():
    assert parse_command_line('cd "abc') == [("cd", ['"abc'], None)]


def test_parse_empty_and_whitespace_input():
    assert parse_command_line("") == []
    assert parse_command_line("    ") == []
    assert parse_command_line(None) == []
