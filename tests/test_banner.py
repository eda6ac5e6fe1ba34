import io

from ostoolkit.banner import header_lines, print_header


def test_header_has_three_lines_with_matching_rules():
    lines = header_lines("MAIN MENU")
    assert len(lines) == 3
    assert lines[0] == lines[2]


def test_header_middle_line_holds_text():
    lines = header_lines("File Copy Program")
    assert lines[1] == "\t\t\t\t=   File Copy Program   ="


def test_rule_width_follows_text_length():
    for text in ["", "a", "Number Guessing Game"]:
        rule = header_lines(text)[0]
        assert rule.startswith("\t\t\t\t<")
        assert rule.endswith(">")
        assert rule.count("=") == len(text) + 8


def test_print_header_writes_lines_without_trailing_newline():
    buffer = io.StringIO()
    print_header("File Deletion Program", buffer)
    written = buffer.getvalue()
    assert written == "\n".join(header_lines("File Deletion Program"))
    assert not written.endswith("\n")


def test_print_header_defaults_to_stdout(capsys):
    print_header("Move File Program")
    assert capsys.readouterr().out == "\n".join(header_lines("Move File Program"))