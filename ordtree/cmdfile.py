import gzip

from . import log
from . import command
from .exception import FileParseError, ParseError

# lines are decoded one at a time by the reader
def _open(filename, mode):
    if filename.endswith(".gz"):
        return gzip.open(filename, mode + 'b')
    return open(filename, mode + 'b')

def open_input_cmdfile(filename):
    return CommandFile(_open(filename, "r"), filename)

class CommandStream(object):
    """A command stream: a line with the number of commands n, followed
    by n command lines. Anything after the n-th command is not read.

    f may be a text or a binary stream; binary lines must be UTF-8."""

    def __init__(self, f):
        self.f = f
        self.count = None

    def close(self):
        if self.f is not None:
            self.f.close()
            self.f = None

    def _desc_filename(self):
        return getattr(self.f, 'name', '<stream>')

    def _decode(self, i, line):
        if isinstance(line, str):
            return line
        try:
            return line.decode("utf-8")
        except UnicodeDecodeError:
            raise FileParseError(self._desc_filename(), i, "invalid encoding")

    def command_reader(self):
        log.debug1("reading commands from ", self._desc_filename())
        cmd_parse = command.parser()
        lines = enumerate(self.f, start=1)

        try:
            header = next(lines, None)
        except UnicodeDecodeError:
            raise FileParseError(self._desc_filename(), 1, "invalid encoding")
        if header is None:
            raise FileParseError(self._desc_filename(), 1,
                    "missing command count")
        try:
            self.count = command.parse_count(self._decode(1, header[1]))
        except ParseError as e:
            raise FileParseError(self._desc_filename(), 1, str(e))
        log.debug2("expecting ", self.count, " commands")

        i = 1
        for _ in range(self.count):
            try:
                i, line = next(lines)
            except StopIteration:
                raise FileParseError(self._desc_filename(), i + 1,
                        "unexpected end of input, expected {0:d} commands"
                        .format(self.count))
            except UnicodeDecodeError:
                raise FileParseError(self._desc_filename(), i + 1,
                        "invalid encoding")
            try:
                cmd = cmd_parse(self._decode(i, line))
            except ParseError as e:
                raise FileParseError(self._desc_filename(), i,
                        "invalid command: " + str(e))
            yield cmd


class CommandFile(CommandStream):
    def __init__(self, f, fname):
        super().__init__(f)
        self.filename = fname

    def _desc_filename(self):
        return self.filename


def commands_from_file(filename):
    """Read all commands from a file"""
    cf = None
    try:
        cf = open_input_cmdfile(filename)
        return list(cf.command_reader())
    finally:
        if cf is not None:
            cf.close()
