import gzip
import io

import pytest

from ordtree import cmdfile
from ordtree.command import Command, parse_count, parse_key, parser
from ordtree.exception import (
        FileParseError,
        InvalidKeyError,
        MissingKeyError,
        ParseError,
        UnknownCommandError
    )


@pytest.fixture
def parse():
    return parser()


@pytest.mark.parametrize("line,expected", [
    ("insert 5\n", Command('insert', 5)),
    ("insert -12", Command('insert', -12)),
    ("find +7\r\n", Command('find', 7)),
    ("delete 0\n", Command('delete', 0)),
    ("print\n", Command('print', None)),
    ("print 3\n", Command('print', None)),
])
def test_parse_valid(parse, line, expected):
    assert parse(line) == expected


def test_parse_unknown_command(parse):
    with pytest.raises(UnknownCommandError) as e:
        parse("remove 5\n")
    assert str(e.value) == "unknown command `remove'"


@pytest.mark.parametrize("line", ["insert x\n", "find 1.5\n", "delete \n",
                                  "insert 1_000\n", "print five\n"])
def test_parse_invalid_key(parse, line):
    with pytest.raises(InvalidKeyError):
        parse(line)


@pytest.mark.parametrize("line", ["insert\n", "find", "delete\n"])
def test_parse_missing_key(parse, line):
    with pytest.raises(MissingKeyError):
        parse(line)


def test_parse_too_many_fields(parse):
    with pytest.raises(ParseError):
        parse("insert 5 6\n")


def test_parse_empty_line(parse):
    with pytest.raises(UnknownCommandError):
        parse("\n")


def test_parse_key():
    assert parse_key("-3") == -3
    with pytest.raises(InvalidKeyError):
        parse_key(" 3")


def test_parse_count():
    assert parse_count("3\n") == 3
    with pytest.raises(ParseError):
        parse_count("-1\n")
    with pytest.raises(ParseError):
        parse_count("three\n")


def read(text):
    return list(cmdfile.CommandStream(io.StringIO(text)).command_reader())


def test_reader():
    cmds = read("3\ninsert 5\nfind 5\nprint\n")
    assert cmds == [Command('insert', 5), Command('find', 5),
                    Command('print', None)]


def test_reader_ignores_lines_after_count():
    assert read("1\ninsert 5\nbogus\n") == [Command('insert', 5)]


def test_reader_zero_commands():
    assert read("0\n") == []


def test_reader_missing_count():
    with pytest.raises(FileParseError) as e:
        read("")
    assert e.value.line == 1


def test_reader_bad_count():
    with pytest.raises(FileParseError) as e:
        read("x\ninsert 1\n")
    assert e.value.line == 1


def test_reader_truncated_input():
    with pytest.raises(FileParseError) as e:
        read("3\ninsert 1\n")
    assert e.value.line == 3
    assert "unexpected end of input" in e.value.msg


def test_reader_reports_line_number():
    stream = cmdfile.CommandStream(io.StringIO("3\ninsert 1\njump 2\nprint\n"))
    reader = stream.command_reader()
    assert next(reader) == Command('insert', 1)
    with pytest.raises(FileParseError) as e:
        next(reader)
    assert e.value.line == 3
    assert str(e.value) == "<stream>:3: invalid command: unknown command `jump'"


def test_commands_from_file(tmp_path):
    path = tmp_path / "cmds.txt"
    path.write_text("2\ninsert 4\nfind 4\n")
    assert cmdfile.commands_from_file(str(path)) == [Command('insert', 4),
                                                     Command('find', 4)]


def test_commands_from_gzip_file(tmp_path):
    path = tmp_path / "cmds.txt.gz"
    with gzip.open(str(path), "wt", encoding="utf-8") as f:
        f.write("1\ndelete 4\n")
    assert cmdfile.commands_from_file(str(path)) == [Command('delete', 4)]


def test_file_error_names_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1\ninsert x\n")
    with pytest.raises(FileParseError) as e:
        cmdfile.commands_from_file(str(path))
    assert e.value.filename == str(path)
    assert e.value.line == 2


def test_reader_binary_stream():
    stream = cmdfile.CommandStream(io.BytesIO(b"2\ninsert 4\nprint\n"))
    assert list(stream.command_reader()) == [Command('insert', 4),
                                             Command('print', None)]


def test_reader_invalid_encoding():
    stream = cmdfile.CommandStream(io.BytesIO(b"2\ninsert 1\ninsert \xff\n"))
    reader = stream.command_reader()
    assert next(reader) == Command('insert', 1)
    with pytest.raises(FileParseError) as e:
        next(reader)
    assert e.value.line == 3
    assert e.value.msg == "invalid encoding"


def test_reader_invalid_encoding_in_count():
    with pytest.raises(FileParseError) as e:
        list(cmdfile.CommandStream(io.BytesIO(b"\xfe1\n")).command_reader())
    assert e.value.line == 1
