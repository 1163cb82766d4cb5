
class OrdTreeError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class ParseError(OrdTreeError):
    pass

class UnknownCommandError(ParseError):
    def __str__(self):
        return "unknown command `" + str(self.args[0]) + "'"

class InvalidKeyError(ParseError):
    def __str__(self):
        return "invalid key `" + str(self.args[0]) + "'"

class MissingKeyError(ParseError):
    def __str__(self):
        return "missing key for command `" + str(self.args[0]) + "'"

class FileParseError(OrdTreeError):
    def __init__(self, filename, line, msg):
        super(FileParseError, self).__init__(filename, line, msg)
        self.filename = filename
        self.line = line
        self.msg = msg
    def __str__(self):
        return self.filename + ':' + str(self.line) + ": " + str(self.msg)

class TreeInvariantError(OrdTreeError):
    def __str__(self):
        return 'tree invariant violated: ' + ''.join(map(str, self.args))
