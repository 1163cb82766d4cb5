import re
import collections

from .exception import (
        InvalidKeyError,
        MissingKeyError,
        ParseError,
        UnknownCommandError
    )

INSERT = 'insert'
FIND = 'find'
DELETE = 'delete'
PRINT = 'print'

# commands that need a key argument
KEYED_COMMANDS = (INSERT, FIND, DELETE)
COMMANDS = KEYED_COMMANDS + (PRINT,)

Command = collections.namedtuple('Command', ('name', 'key'))

def parse_key(s):
    """Parse a signed decimal integer, rejecting anything int() would
    tolerate beyond that (whitespace, underscores, other bases)."""
    if re.match(r'^[+-]?[0-9]+$', s) is None:
        raise InvalidKeyError(s)
    return int(s)

def parse_count(s):
    s = s.rstrip('\r\n')
    if re.match(r'^[+]?[0-9]+$', s) is None:
        raise ParseError("invalid command count `", s, "'")
    return int(s)

def parser():
    def command_from_text(s):
        fields = s.rstrip('\r\n').split(' ')
        if len(fields) > 2:
            raise ParseError("too many fields")
        name = fields[0]
        if name not in COMMANDS:
            raise UnknownCommandError(name)
        key = None
        if len(fields) == 2:
            key = parse_key(fields[1])
            if name == PRINT:
                key = None
        elif name in KEYED_COMMANDS:
            raise MissingKeyError(name)
        return Command(name, key)
    return command_from_text
