"""Destinations for the split-out objects

The splitter asks for one new output per object and writes that object's
lines to it until the next object comes along. The outputs are either loose
files in a folder per object type, or entries in a single zip archive laid
out the same way.
"""
import os
import io
import logging
import zipfile

from .errors import ZipExistsError

ZIP_EXTENSION = ".zip"

class Sinks(object):
    """Produce one writable text stream per database object

    Subclasses decide where the stream goes; the naming of files within
    each object-type folder is common to both.
    """

    def __init__(self, only_names=False, logger=logging):
        self.only_names = only_names
        self.logger = logger

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def filename(self, obj):
        if self.only_names or not obj.schema:
            return "%s.sql" % obj.name
        else:
            return "%s.%s.sql" % (obj.schema, obj.name)

    def create(self, obj):
        raise NotImplementedError

    def close(self):
        pass

class FileSinks(Sinks):
    """Write each object to <out_dir>/<ObjectType>/<filename>.sql
    """

    def __init__(self, out_dir=".", only_names=False, logger=logging):
        Sinks.__init__(self, only_names, logger)
        #
        # Allow for "output/" or "output\" on the command line but
        # don't turn a root "/" into the current directory
        #
        if len(out_dir) > 1 and out_dir[-1] in "/\\":
            out_dir = out_dir[:-1]
        self.out_dir = out_dir
        os.makedirs(self.out_dir, exist_ok=True)

    def destination(self, obj):
        return os.path.join(self.out_dir, str(obj.type), self.filename(obj))

    def create(self, obj):
        type_dirpath = os.path.join(self.out_dir, str(obj.type))
        os.makedirs(type_dirpath, exist_ok=True)

        #
        # A second object with the same type, schema & name simply
        # replaces the first: the last one in the dump wins
        #
        filepath = self.destination(obj)
        self.logger.info("creating %s", filepath)
        return open(filepath, "w", encoding="utf-8", newline="")

class ZipSinks(Sinks):
    """Write each object as an entry <base>/<ObjectType>/<filename>.sql in one zip

    <base> is the zip's own filename without its extension so that unzipping
    produces a single folder. The archive is only valid once close() has run.
    """

    def __init__(self, zip_filepath, only_names=False, logger=logging):
        Sinks.__init__(self, only_names, logger)
        if not zip_filepath.lower().endswith(ZIP_EXTENSION):
            zip_filepath += ZIP_EXTENSION
        if os.path.exists(zip_filepath):
            raise ZipExistsError("Zip file already exists: %s" % zip_filepath)

        self.zip_filepath = zip_filepath
        self.base_name, _ = os.path.splitext(os.path.basename(zip_filepath))
        self.zip = zipfile.ZipFile(zip_filepath, "x", compression=zipfile.ZIP_DEFLATED)

        #
        # Give the archive a single root folder named after the zip itself
        #
        root = zipfile.ZipInfo(self.base_name + "/")
        root.external_attr = (0o40775 << 16) | 0x10
        try:
            self.zip.writestr(root, b"")
        except Exception:
            self.zip.close()
            self.zip = None
            raise

    def destination(self, obj):
        return "/".join([self.base_name, str(obj.type), self.filename(obj)])

    def create(self, obj):
        #
        # No folders need creating: the "/" in the entry name is enough
        # for any unzip tool to lay the entries out by object type
        #
        entry_name = self.destination(obj)
        self.logger.info("creating %s", entry_name)
        entry = self.zip.open(entry_name, "w")
        return io.TextIOWrapper(entry, encoding="utf-8", newline="")

    def close(self):
        if self.zip is not None:
            self.zip.close()
            self.zip = None
