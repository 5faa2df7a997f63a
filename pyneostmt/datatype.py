"""A module for housing the datatype classes.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Binary -- Class for a Binary object

Exported Functions:
DateFromTicks -- Converts ticks to a Date object.
TimeFromTicks -- Converts ticks to a Time object.
TimestampFromTicks -- Converts ticks to a Timestamp object.
TypeObjectFromValue -- Converts a column value to a TypeObject variable.

TypeObject Variables:
STRING -- TypeObject(str)
BINARY -- TypeObject(bytes, bytearray)
NUMBER -- TypeObject(int, float, decimal.Decimal, bool)
DATETIME -- TypeObject(datetime.datetime, datetime.date, datetime.time)
ROWID -- TypeObject()
"""

__all__ = ['Date', 'Time', 'Timestamp', 'DateFromTicks', 'TimeFromTicks',
           'TimestampFromTicks', 'Binary', 'STRING', 'BINARY', 'NUMBER',
           'DATETIME', 'ROWID', 'TypeObjectFromValue']

import decimal
from datetime import datetime as Timestamp, date as Date, time as Time
from datetime import tzinfo  # pylint: disable=unused-import

from typing import Any, Optional, Union  # pylint: disable=unused-import

import tzlocal

LOCALZONE = tzlocal.get_localzone()
LOCALZONE_NAME = tzlocal.get_localzone_name()


class Binary(bytes):
    """A binary string.

    If passed a string we assume it's encoded as LATIN-1, which ensures that
    the characters 0-255 are considered single-character sequences.
    """

    def __new__(cls, data):
        # type: (Union[str, bytes, bytearray]) -> Binary
        if isinstance(data, str):
            return bytes.__new__(cls, data.encode('latin-1'))
        return bytes.__new__(cls, data)

    @property
    def string(self):
        # type: () -> bytes
        return self


def DateFromTicks(ticks, zoneinfo=LOCALZONE):
    # type: (float, tzinfo) -> Date
    """Convert ticks to a Date object."""
    return Timestamp.fromtimestamp(ticks, zoneinfo).date()


def TimeFromTicks(ticks, zoneinfo=LOCALZONE):
    # type: (float, tzinfo) -> Time
    """Convert ticks to a Time object."""
    # returns naive time, like the time() of a local Timestamp
    return Timestamp.fromtimestamp(ticks, zoneinfo).time()


def TimestampFromTicks(ticks, zoneinfo=LOCALZONE):
    # type: (float, tzinfo) -> Timestamp
    """Convert ticks to a timezone-aware Timestamp object."""
    return Timestamp.fromtimestamp(ticks, zoneinfo)


class TypeObject(object):
    """A column type object.

    Compares equal to itself and to any Python type it describes, so both
    ``desc[1] == NUMBER`` and ``NUMBER == int`` hold.
    """

    def __init__(self, name, *values):
        self.name = name
        self.values = values

    def __eq__(self, other):
        if other is self:
            return True
        return other in self.values

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return 'TypeObject(%s)' % (self.name)


STRING = TypeObject('STRING', str)
BINARY = TypeObject('BINARY', bytes, bytearray, Binary)
NUMBER = TypeObject('NUMBER', int, float, decimal.Decimal, bool)
DATETIME = TypeObject('DATETIME', Timestamp, Date, Time)
ROWID = TypeObject('ROWID')
NULL = TypeObject('NULL', type(None))

TYPEMAP = (NULL, STRING, BINARY, NUMBER, DATETIME)


def TypeObjectFromValue(value):
    # type: (Any) -> Optional[TypeObject]
    """Return the TypeObject describing a column value.

    Graph values (nodes, relationships, lists, maps) have no PEP 249 type
    object; None is returned for them.
    """
    for obj in TYPEMAP:
        if type(value) in obj.values:
            return obj
    for obj in TYPEMAP:
        if isinstance(value, obj.values):
            return obj
    return None
