#!python3
"""sql-splitter - split a blob of SSMS-generated SQL objects into separate files

usage: sql-splitter [-n] [-v] [-w] [-d <out-dir> | -z <zip>] [<file>]

Reads the dump from <file>, or from stdin if no file is given, and writes
<out-dir>/<ObjectType>/<schema>.<name>.sql for each object found in it.
"""
import sys
import argparse
import logging

from . import __version__
from . import sinks
from . import split_objects
from .errors import SplitterError

logger = logging.getLogger("sql-splitter")

def setup_logging(verbose=False):
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    #
    # Progress ("creating ...") goes to stdout, but only when asked for;
    # anything going wrong goes to stderr regardless
    #
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)
    logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    logger.addHandler(stderr_handler)

def make_sinks(args):
    if args.zip:
        return sinks.ZipSinks(args.zip, only_names=args.only_names, logger=logger)
    else:
        return sinks.FileSinks(args.out_dir, only_names=args.only_names, logger=logger)

def run(args):
    if args.windows_1252:
        encoding = split_objects.WINDOWS_1252
    else:
        encoding = split_objects.UTF_8

    counts = split_objects.from_filepath(
        args.in_file, lambda: make_sinks(args), encoding, logger=logger
    )

    logger.info("%d objects written", sum(counts.values()))
    for type_name, n_objects in sorted(counts.items()):
        logger.info("  %s: %d", type_name, n_objects)
    return counts

def command_line(argv=None):
    parser = argparse.ArgumentParser(
        prog="sql-splitter",
        description="Split a blob of SSMS-generated SQL objects into separate files"
    )
    parser.add_argument("-d", "--out-dir", dest="out_dir", default=".", help="Output directory to create files")
    parser.add_argument("-n", "--only_names", dest="only_names", action="store_true", help="Exclude schema-name from filenames")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-w", "--windows-1252", dest="windows_1252", action="store_true", help="Input is windows-1252 encoded rather than UTF-8")
    parser.add_argument("-z", "--zip", help="Write all files into this zip instead of a folder")
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    parser.add_argument("in_file", nargs="?", help="File to process (default: stdin)")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    try:
        run(args)
    except (SplitterError, OSError, UnicodeDecodeError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

if __name__ == '__main__':
    command_line()
