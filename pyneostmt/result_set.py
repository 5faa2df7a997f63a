"""Result sets handed out by a statement.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__all__ = ['ResultSet', 'ListResultSet']

from typing import Any, Iterator, List, Optional, Sequence  # pylint: disable=unused-import

from .constants import DEFAULT_TYPE, DEFAULT_CONCURRENCY, DEFAULT_HOLDABILITY
from .constants import lookup_type
from .datatype import TypeObjectFromValue
from .exception import InvalidStateError

Row = Sequence[Any]


class ResultSet(object):
    """The view of a result set that a statement relies on.

    A statement owns at most one of these at a time.  Implementations
    report their shape and whether they are closed, and release their
    resources on close().  When max_rows is positive no more than that
    many rows are returned.

    Cursors read rows through fetchone() and the PEP 249 description.
    """

    max_rows = 0
    description = None  # type: Optional[List[List[Any]]]

    def is_closed(self):
        # type: () -> bool
        raise NotImplementedError("is_closed")

    def close(self):
        # type: () -> None
        raise NotImplementedError("close")

    def fetchone(self):
        # type: () -> Optional[Row]
        """Return the next row, or None once there are no more."""
        raise NotImplementedError("fetchone")

    def get_type(self):
        # type: () -> int
        return DEFAULT_TYPE

    def get_concurrency(self):
        # type: () -> int
        return DEFAULT_CONCURRENCY

    def get_holdability(self):
        # type: () -> int
        return DEFAULT_HOLDABILITY


class ListResultSet(ResultSet):
    """A result set whose rows are all held in memory."""

    def __init__(self, rows=None,           # type: Optional[List[Row]]
                 columns=None,              # type: Optional[List[str]]
                 result_set_type=DEFAULT_TYPE,
                 concurrency=DEFAULT_CONCURRENCY,
                 holdability=DEFAULT_HOLDABILITY,
                 debug=False
                 ):
        # type: (...) -> None
        """Create a result set.

        :param rows: The rows, each a sequence with one value per column.
        :param columns: Column names.
        :param result_set_type: One of the TYPE_* constants.
        :param concurrency: One of the CONCUR_* constants.
        :param holdability: One of the HOLD_*/CLOSE_* constants.
        :param debug: Inert debug flag, kept for callers that set it.
        """
        self.results = [tuple(row) for row in (rows or [])]
        self.columns = list(columns or [])
        self.results_idx = 0
        self.debug = debug
        self._type = result_set_type
        self._concurrency = concurrency
        self._holdability = holdability
        self._closed = False

    def __repr__(self):
        return '<ListResultSet %s rows=%d columns=%d%s>' % (
            lookup_type(self._type), len(self.results), len(self.columns),
            ' closed' if self._closed else '')

    def _check_closed(self):
        # type: () -> None
        if self._closed:
            raise InvalidStateError("result set is closed")

    def is_closed(self):
        # type: () -> bool
        return self._closed

    def close(self):
        # type: () -> None
        """Release the rows.  Closing twice has no effect."""
        if self._closed:
            return
        del self.results[:]
        self.results_idx = 0
        self._closed = True

    def get_type(self):
        # type: () -> int
        return self._type

    def get_concurrency(self):
        # type: () -> int
        return self._concurrency

    def get_holdability(self):
        # type: () -> int
        return self._holdability

    @property
    def col_count(self):
        # type: () -> int
        return len(self.columns)

    @property
    def rownumber(self):
        # type: () -> int
        """Index of the next row to be fetched."""
        return self.results_idx

    @property
    def description(self):
        # type: () -> Optional[List[List[Any]]]
        """PEP 249 description of the columns, or None if there are none.

        The type code comes from the first row; it is None when the result
        set is empty or the value has no matching type object.
        """
        if not self.columns:
            return None
        first = self.results[0] if self.results else None
        description = []
        for i, name in enumerate(self.columns):
            type_code = None
            if first is not None and i < len(first):
                type_code = TypeObjectFromValue(first[i])
            description.append([name, type_code, None, None, None, None, None])
        return description

    def _limit(self):
        # type: () -> int
        if self.max_rows > 0:
            return min(self.max_rows, len(self.results))
        return len(self.results)

    def fetchone(self):
        # type: () -> Optional[Row]
        self._check_closed()
        if self.results_idx >= self._limit():
            return None

        res = self.results[self.results_idx]
        self.results_idx += 1
        return res

    def fetchmany(self, size=1):
        # type: (int) -> List[Row]
        self._check_closed()
        end = min(self.results_idx + max(size, 0), self._limit())
        rows = self.results[self.results_idx:end]
        self.results_idx = max(end, self.results_idx)
        return rows

    def fetchall(self):
        # type: () -> List[Row]
        self._check_closed()
        return self.fetchmany(self._limit() - self.results_idx)

    def __iter__(self):
        # type: () -> Iterator[Row]
        while True:
            row = self.fetchone()
            if row is None:
                return
            yield row
