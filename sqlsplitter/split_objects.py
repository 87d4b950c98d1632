"""Take an SSMS "Script Objects" dump and split it into its component objects

SSMS can script out every object in a database as one long .sql file. Each
object is introduced by a header comment naming its type, schema and name;
the dump may also switch database part-way through with a USE / GO pair.

Reading the dump one line at a time, every header line starts a new output
(see sinks.py) and every following line goes to that output until the next
header. The most recent USE / GO pair is written at the top of each output
so that each file can be run on its own against the right database.
"""
import os, sys
import codecs
import collections
import io
import logging

from . import objects
from .errors import InputNotFoundError, TruncatedUseStatementError

UTF_8 = "utf-8"
WINDOWS_1252 = "cp1252"
C1_CONTROLS = "c1-controls"

def c1_controls(exc):
    """Decode the five bytes cp1252 leaves undefined as the C1 controls

    Bytes 0x81, 0x8D, 0x8F, 0x90 and 0x9D have no cp1252 character. The
    WHATWG windows-1252 table maps each to the code point of the same value
    (0x81 => U+0081) and so never fails; do the same here.
    """
    if not isinstance(exc, UnicodeDecodeError):
        raise exc
    undefined = exc.object[exc.start:exc.end]
    return "".join(chr(b) for b in undefined), exc.end

codecs.register_error(C1_CONTROLS, c1_controls)

def split_objects(lines, sinks, logger=logging):
    """Write each object in the iterable `lines` to its own output from `sinks`

    Lines before the first recognised object header have nowhere to go
    and are dropped. Returns a Counter of objects written per object type.
    """
    counts = collections.Counter()
    use_statement = ""
    current = None
    lines = iter(lines)
    try:
        for line in lines:
            #
            # Keep track of which database the following objects belong to.
            # The USE line is always followed by its GO; neither is written
            # out other than at the top of each new object.
            #
            if objects.is_use_statement(line):
                go_line = next(lines, None)
                if go_line is None:
                    raise TruncatedUseStatementError("Input ends after %r with no batch terminator" % line)
                use_statement = line + go_line
                logger.debug("Database context is now %s", line.strip())
                continue

            obj = objects.from_marker(line)
            if obj is None:
                if line.startswith(objects.MARKER_PREFIX):
                    logger.debug("Unrecognised object header; treating as content: %s", line.strip())
                if current is not None:
                    current.write(line)
                continue

            #
            # Finish off the previous object before anything is written
            # to the new one
            #
            if current is not None:
                current.close()
                current = None

            current = sinks.create(obj)
            if use_statement:
                current.write(use_statement)
            current.write(line)
            counts[str(obj.type)] += 1
    finally:
        if current is not None:
            current.close()

    return counts

def open_input(filepath=None, encoding=UTF_8):
    """Open the dump (or stdin) as text, splitting lines on LF only and keeping
    each line's own line ending untouched

    UTF-8 is decoded strictly; windows-1252 never fails (see c1_controls)
    """
    if filepath is None:
        stream = sys.stdin.buffer
    else:
        if not os.path.isfile(filepath):
            raise InputNotFoundError("File does not exist: %s" % filepath)
        stream = open(filepath, "rb")
    if codecs.lookup(encoding).name == WINDOWS_1252:
        errors = C1_CONTROLS
    else:
        errors = "strict"
    return io.TextIOWrapper(stream, encoding=encoding, errors=errors, newline="\n")

def from_filepath(filepath, make_sinks, encoding=UTF_8, logger=logging):
    """Split the dump at `filepath` (or stdin) into the sinks built by `make_sinks()`

    The input is opened before `make_sinks` is called so that a missing
    file leaves no empty folder or zip behind.
    """
    with open_input(filepath, encoding) as f:
        with make_sinks() as sinks:
            return split_objects(f, sinks, logger)
