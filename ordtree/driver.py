import collections

from . import log
from . import command
from .cmdfile import CommandStream
from .tree.bstree import BSTree

def format_keys(keys):
    return ''.join(" {0:d}".format(k) for k in keys)

def execute(tree, cmd, out):
    """Apply a single command to tree, writing any result lines to out.

    Returns True if the command may have changed the tree."""
    name, key = cmd
    if name == command.INSERT:
        tree.insert(key)
        return True
    elif name == command.FIND:
        out.write("yes\n" if tree.contains(key) else "no\n")
    elif name == command.PRINT:
        out.write(format_keys(tree.inorder()) + "\n")
        out.write(format_keys(tree.preorder()) + "\n")
    elif name == command.DELETE:
        if tree.deletekey(key) is None:
            log.debug2("delete ", key, ": no such key")
        return True
    else:
        raise ValueError("unexpected command " + repr(name))
    return False

def run(stream, out, tree=None, check=False, stats=None):
    """Execute all commands read from stream against tree.

    stream is a CommandStream or a text stream.

    Commands run one at a time in input order; a malformed line raises
    FileParseError after all preceding commands have been executed.
    With check, the tree invariants are verified after every mutation.
    Returns the tree.
    """
    if tree is None:
        tree = BSTree()
    counts = collections.Counter()
    if isinstance(stream, CommandStream):
        cmdstream = stream
    else:
        cmdstream = CommandStream(stream)
    for cmd in cmdstream.command_reader():
        log.debug3("command: ", cmd.name, "" if cmd.key is None
                else " " + str(cmd.key))
        counts[cmd.name] += 1
        if execute(tree, cmd, out) and check:
            tree.check()

    if stats is not None:
        stats.update(("commands " + name, n) for name, n in
                sorted(counts.items()))
        stats['commands'] = sum(counts.values())
        stats['keys'] = len(tree)
        stats['height'] = tree.height()
    return tree
