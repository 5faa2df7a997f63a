"""A module for connecting to a graph database through a session.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Connection -- Class owning a session and the statements created on it.

Exported Functions:
connect -- Creates a connection object.
"""

__all__ = ['apilevel', 'threadsafety', 'paramstyle', 'connect',
           'Connection']

import copy
import logging

from typing import Any, Dict, Mapping, Optional  # pylint: disable=unused-import

from . import __version__
from .exception import Error, InterfaceError

from . import cursor
from .session import Session  # pylint: disable=unused-import
from . import statement
from .datatype import LOCALZONE_NAME

apilevel = "2.0"
threadsafety = 1
paramstyle = "named"

MAXROWS = 'maxrows'

_log = logging.getLogger(__name__)


def connect(session,          # type: Session
            properties=None,  # type: Optional[Mapping[str, Any]]
            **kwargs
            ):
    # type: (...) -> Connection
    """Return a new Connection object.

    :param session: Session used to execute queries.
    :param properties: Connection properties.
    :returns: A new Connection object.
    """
    return Connection(session, properties=properties, **kwargs)


class Connection(object):
    """A connection to a graph database.

    Public Functions:
    close -- Closes the connection and its session.
    create_statement -- Return a new Statement using the connection.
    cursor -- Return a new Cursor object using the connection.
    get_configuration -- Look up a connection property.
    connection_config -- Return a copy of the connection configuration.
    """

    # PEP 249 recommends that all exceptions be exposed as attributes in the
    # Connection object.
    from .exception import Warning, Error, InterfaceError, DatabaseError
    from .exception import OperationalError, IntegrityError, InternalError
    from .exception import ProgrammingError, NotSupportedError

    __session = None          # type: Session
    __config = None           # type: Dict[str, Any]
    __properties = None       # type: Dict[str, Any]

    def __init__(self, session,        # type: Session
                 properties=None,      # type: Optional[Mapping[str, Any]]
                 **kwargs
                 ):
        # type: (...) -> None
        """Construct a Connection object.

        :param session: Session used to execute queries.
        :param properties: Connection properties.
        :param kwargs: Extra properties, merged over properties.
        """
        if session is None:
            raise InterfaceError("No session provided.")

        # Property names are case-insensitive
        self.__properties = {}
        for k, v in dict(properties or {}, **kwargs).items():
            self.__properties[k.lower()] = v

        self.__config = {'driver_version': __version__,
                         'timezone': LOCALZONE_NAME,
                         'properties': copy.deepcopy(self.__properties)}

        self.__session = session

    def connection_config(self):
        # type: () -> Dict[str, Any]
        """Returns a copy of the connection configuration.

        Configuration:
          connected      :bool: True if the connection is active
          driver_version :str:  Version of this driver
          properties     :dict: Dictionary of connection properties
          timezone       :str:  Name of the local timezone

        :returns: Copy of the connection config names and values.
                  Modifying these values has no effect on the connection.
        """
        config = copy.deepcopy(self.__config)
        config['connected'] = not self.is_closed()
        return config

    def get_configuration(self, key, default=None):
        # type: (str, Any) -> Any
        """Return the connection property named key, or default."""
        return self.__properties.get(key.lower(), default)

    def _max_rows(self):
        # type: () -> int
        value = self.get_configuration(MAXROWS, 0)
        try:
            max_rows = int(value)
        except (TypeError, ValueError):
            raise InterfaceError("Invalid %s property: %r" % (MAXROWS, value))
        if max_rows < 0:
            raise InterfaceError("Invalid %s property: %r" % (MAXROWS, value))
        return max_rows

    def is_closed(self):
        # type: () -> bool
        return self.__session.closed

    def close(self):
        # type: () -> None
        """Close this connection and its session."""
        self._check_closed()
        self.__session.close()
        _log.debug("connection closed")

    def _check_closed(self):
        # type: () -> None
        """Check if the connection is available.

        :raises Error: If the connection is closed.
        """
        if self.__session.closed:
            raise Error("connection is closed")

    def create_statement(self, result_set_type=None,  # type: Optional[int]
                         concurrency=None,            # type: Optional[int]
                         holdability=None             # type: Optional[int]
                         ):
        # type: (...) -> statement.Statement
        """Return a new Statement using the connection.

        The shape arguments become the statement's defaults, reported while
        it holds no result set.  Trailing unset values are left out.
        """
        self._check_closed()
        params = [result_set_type, concurrency, holdability]
        while params and params[-1] is None:
            params.pop()
        if None in params:
            raise InterfaceError("Result set shape defaults must be given in order:"
                                 " type, concurrency, holdability.")
        return statement.Statement(self, self.__session,
                                   max_rows=self._max_rows(),
                                   result_set_params=params)

    def cursor(self):
        # type: () -> cursor.Cursor
        """Return a new Cursor object using the connection."""
        return cursor.Cursor(self.create_statement())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self.is_closed():
            self.close()
