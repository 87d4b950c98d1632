"""Recognise the object header comments which SSMS writes into a "Script Objects" dump

Each object in the dump is introduced by a comment of the form:

    /****** Object:  StoredProcedure [dbo].[GetUsers]    Script Date: 01/02/2024 ******/

Some objects (databases, indexes) carry only a name, with no schema:

    /****** Object:  Index [IX_Users_Name]    Script Date: 01/02/2024 ******/
"""
import collections
import enum
import re

MARKER_PREFIX = "/****** Object:"
USE_PREFIX = "USE "

class ObjectType(enum.Enum):
    DATABASE = "Database"
    DATABASE_ROLE = "DatabaseRole"
    DDL_TRIGGER = "DdlTrigger"
    INDEX = "Index"
    SCHEMA = "Schema"
    SEQUENCE = "Sequence"
    STORED_PROCEDURE = "StoredProcedure"
    SYNONYM = "Synonym"
    TABLE = "Table"
    TRIGGER = "Trigger"
    USER = "User"
    USER_DEFINED_DATA_TYPE = "UserDefinedDataType"
    USER_DEFINED_FUNCTION = "UserDefinedFunction"
    VIEW = "View"

    def __str__(self):
        return self.value

    @classmethod
    def from_name(cls, name):
        """Return the object type whose display name is exactly `name`, or None
        """
        try:
            return cls(name)
        except ValueError:
            return None

DatabaseObject = collections.namedtuple("DatabaseObject", ["type", "schema", "name"])

#
# A name-only header can't be followed by "."; "[dbo].[Order Details]"
# is not a header for an object called "dbo"
#
R_MARKER = re.compile(r"^/\*+\s+Object:\s+(\w+)\s+(?:\[(\S+)\]\.)?\[(\S+)\](?!\.)")

def from_marker(line):
    """Return the DatabaseObject described by an object header line

    If the line isn't a header, or it is a header for a type of object we
    don't know about, return None: the caller treats it as an ordinary line.
    """
    if not line.startswith(MARKER_PREFIX):
        return None

    matched = R_MARKER.match(line)
    if not matched:
        return None

    type_name, schema, name = matched.groups()
    object_type = ObjectType.from_name(type_name)
    if object_type is None:
        return None

    return DatabaseObject(object_type, schema or "", name)

def is_use_statement(line):
    return line.startswith(USE_PREFIX)
