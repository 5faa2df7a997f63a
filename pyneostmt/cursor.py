"""A module for housing the Cursor class.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Cursor -- Class for a PEP 249 cursor over a statement.
"""

__all__ = ['Cursor']

from typing import Any, Iterable, Iterator, List  # pylint: disable=unused-import
from typing import Mapping, Optional, Sequence  # pylint: disable=unused-import

from .exception import Error, NotSupportedError, InvalidStateError
from .result_set import ResultSet  # pylint: disable=unused-import
from . import statement  # pylint: disable=unused-import


class Cursor(object):
    """A PEP 249 cursor.

    Public Functions:
    close -- Closes the cursor and its statement.
    execute -- Executes an operation.
    executemany -- Executes an operation once per parameter set.
    fetchone -- Gets one row from the current result set.
    fetchmany -- Gets up to size rows from the current result set.
    fetchall -- Gets all remaining rows from the current result set.
    nextset -- Moves past the current result set.

    Private Functions:
    __init__ -- Constructor for the Cursor class.
    _check_closed -- Checks if the cursor or its connection is closed.
    _reset -- Forgets the previous execution.
    """

    def __init__(self, stmt):
        # type: (statement.Statement) -> None
        """Create a cursor over a statement.

        :param stmt: The statement this cursor executes with.
        """
        self._statement = stmt
        self._connection = stmt.get_connection()
        self.closed = False
        self.arraysize = 1
        self.query = None  # type: Optional[str]

        self.description = None  # type: Optional[List[List[Any]]]
        self.rowcount = -1
        self._result_set = None  # type: Optional[ResultSet]

    @property
    def connection(self):
        return self._connection

    def close(self):
        # type: () -> None
        """Close this cursor and its statement."""
        self._check_closed()
        self._reset()
        self._statement.close()
        self.closed = True

    def _check_closed(self):
        # type: () -> None
        """Check if the cursor is available.

        :raises Error: If the cursor or its connection is closed.
        """
        if self.closed:
            raise Error("cursor is closed")
        if self._connection.is_closed():
            raise Error("connection is closed")

    def _reset(self):
        # type: () -> None
        """Forget the previous execution, closing its result set."""
        self.description = None
        self.rowcount = -1
        if self._result_set is not None:
            self._result_set.close()
        self._result_set = None

    def callproc(self, procname, parameters=None):
        # type: (str, Optional[Sequence[Any]]) -> None
        raise NotSupportedError("callproc is not supported")

    def execute(self, operation, parameters=None):
        # type: (str, Optional[Mapping[str, Any]]) -> None
        """Executes an operation.

        :param operation: Query to execute.
        :param parameters: Named parameters for the query.
        """
        self._check_closed()
        self._reset()

        self.query = operation
        if self._statement.execute(operation, parameters):
            self._result_set = self._statement.get_result_set()
            self.description = self._result_set.description
        else:
            self.rowcount = self._statement.get_update_count()

    def executemany(self, operation, seq_of_parameters):
        # type: (str, Iterable[Mapping[str, Any]]) -> None
        """Executes an operation once for each parameter set.

        rowcount is the sum of the update counts.
        """
        self._check_closed()
        rowcount = 0
        for parameters in seq_of_parameters:
            self.execute(operation, parameters)
            if self.rowcount >= 0:
                rowcount += self.rowcount
        self._reset()
        self.rowcount = rowcount

    def _check_result(self):
        # type: () -> ResultSet
        self._check_closed()
        if self._result_set is None:
            raise Error("Previous execute did not produce any results or no call was issued yet")
        return self._result_set

    def fetchone(self):
        # type: () -> Optional[Sequence[Any]]
        """Return the next row, or None once there are no more."""
        rs = self._check_result()
        try:
            return rs.fetchone()
        except InvalidStateError:
            raise Error("result set is closed")

    def fetchmany(self, size=None):
        # type: (Optional[int]) -> List[Sequence[Any]]
        """Return up to size rows; size defaults to arraysize."""
        self._check_result()

        if size is None:
            size = self.arraysize

        fetched_rows = []
        while len(fetched_rows) < size:
            row = self.fetchone()
            if row is None:
                break
            fetched_rows.append(row)

        return fetched_rows

    def fetchall(self):
        # type: () -> List[Sequence[Any]]
        """Return all remaining rows."""
        self._check_result()

        fetched_rows = []
        while True:
            row = self.fetchone()
            if row is None:
                break
            fetched_rows.append(row)

        return fetched_rows

    def nextset(self):
        # type: () -> None
        """Move past the current result set.

        A statement produces a single result, so there is never another
        set: the current one is closed and None is returned.
        """
        self._check_closed()
        self._statement.get_more_results()
        self._reset()
        return None

    def setinputsizes(self, sizes):
        # type: (Any) -> None
        pass

    def setoutputsize(self, size, column=None):
        # type: (Any, Optional[int]) -> None
        pass

    def __iter__(self):
        # type: () -> Iterator[Sequence[Any]]
        while True:
            row = self.fetchone()
            if row is None:
                return
            yield row
