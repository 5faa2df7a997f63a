"""Statement execution handle.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

A Statement runs queries through its connection's session and records the
outcome of the last one: either a result set or an update count, never
both.  The outcome is handed out once; after that the statement reports
nothing until the next execution.
"""

__all__ = ['Statement', 'ExecutionResult']

import logging

from typing import Any, List, Mapping, Optional, Sequence  # pylint: disable=unused-import

from .constants import NO_UPDATE_COUNT, EXECUTE_FAILED, FETCH_FORWARD
from .constants import FETCH_SIZE_UNLIMITED
from .constants import DEFAULT_TYPE, DEFAULT_CONCURRENCY, DEFAULT_HOLDABILITY
from .exception import DatabaseError, ProgrammingError, BatchError
from .exception import InvalidStateError, UnsupportedOperationError
from .loggable import Loggable
from .result_set import ResultSet, ListResultSet  # pylint: disable=unused-import
from . import wrapper

_log = logging.getLogger(__name__)


class ExecutionResult(object):
    """Result of a statement execution, as reported by a session."""

    def __init__(self, statement,         # type: Optional[Statement]
                 result_set=None,         # type: Optional[ResultSet]
                 update_count=NO_UPDATE_COUNT  # type: int
                 ):
        # type: (...) -> None
        """Create the result of a statement execution.

        :param statement: Statement that was executed.
        :param result_set: Rows produced by the execution, if any.
        :param update_count: Number of entities changed, or NO_UPDATE_COUNT.
        """
        self.statement = statement
        self.result_set = result_set
        self.update_count = update_count

    @property
    def has_result_set(self):
        # type: () -> bool
        return self.result_set is not None


class _Outcome(object):
    """The pending outcome of the last execution.

    Holds at most one of a result set or an update count.  Every change to
    either goes through the methods below.
    """

    def __init__(self):
        # type: () -> None
        self.result_set = None  # type: Optional[ResultSet]
        self.update_count = NO_UPDATE_COUNT

    def discard(self):
        # type: () -> None
        """Forget the pending outcome, closing a result set still owned."""
        rs = self.result_set
        self.result_set = None
        self.update_count = NO_UPDATE_COUNT
        if rs is not None and not rs.is_closed():
            rs.close()

    def record_result_set(self, rs):
        # type: (ResultSet) -> None
        self.discard()
        self.result_set = rs

    def record_update_count(self, count):
        # type: (int) -> None
        self.discard()
        self.update_count = max(count, 0)

    def take_update_count(self):
        # type: () -> int
        if self.result_set is not None:
            return NO_UPDATE_COUNT
        count = self.update_count
        self.update_count = NO_UPDATE_COUNT
        return count

    def take_result_set(self):
        # type: () -> Optional[ResultSet]
        rs = self.result_set
        self.result_set = None
        return rs

    def advance(self):
        # type: () -> bool
        """Close the pending result set; return True if it was open."""
        rs = self.result_set
        if rs is None or rs.is_closed():
            return False
        rs.close()
        return True


class Statement(Loggable):
    """A statement handle bound to a connection.

    Public Functions:
    execute -- Run a query and record its outcome.
    execute_query -- Run a query that must return rows.
    execute_update -- Run a query and return its update count.
    execute_batch -- Run every batched command.
    get_result_set -- Hand out the pending result set once.
    get_update_count -- Hand out the pending update count once.
    get_more_results -- Close the pending result set.
    close -- Close the statement and any result set it still owns.
    """

    def __init__(self, connection,            # type: Any
                 session,                     # type: Any
                 max_rows=0,                  # type: int
                 result_set_params=None       # type: Optional[Sequence[int]]
                 ):
        # type: (...) -> None
        """Create a statement.

        :param connection: The owning connection.  Only its is_closed() is
                           used.
        :param session: The session that executes queries.
        :param max_rows: Row cap resolved from the connection configuration.
        :param result_set_params: Up to three shape defaults, in the order
                                  (type, concurrency, holdability).
        """
        self._connection = connection
        self._session = session
        self._outcome = _Outcome()
        self._batch = []  # type: List[str]
        self._max_rows = max_rows
        self._query_timeout = 0
        self._result_set_params = list(result_set_params or [])[:3]

    def __del__(self):
        outcome = getattr(self, '_outcome', None)
        if outcome is not None:
            outcome.discard()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _check_closed(self):
        # type: () -> None
        """Check if the statement is usable.

        :raises InvalidStateError: If the statement or its connection is
                                   closed.
        """
        if self.is_closed():
            raise InvalidStateError("statement is closed")

    @staticmethod
    def _reject_key_hints(auto_generated_keys, column_indexes, column_names):
        # type: (Optional[int], Optional[Sequence[int]], Optional[Sequence[str]]) -> None
        if (auto_generated_keys is not None or column_indexes is not None
                or column_names is not None):
            raise UnsupportedOperationError(
                "generated key hints are not supported")

    def _run(self, operation, parameters):
        # type: (str, Optional[Mapping[str, Any]]) -> ExecutionResult
        self._check_closed()
        self._outcome.discard()
        _log.debug("executing: %s", operation)
        return self._session.execute_statement(self, operation, parameters)

    def _record_result_set(self, rs):
        # type: (ResultSet) -> ResultSet
        if self._max_rows > 0:
            rs.max_rows = self._max_rows
        self._outcome.record_result_set(rs)
        return rs

    # Execution

    def execute(self, operation,               # type: str
                parameters=None,               # type: Optional[Mapping[str, Any]]
                auto_generated_keys=None,      # type: Optional[int]
                column_indexes=None,           # type: Optional[Sequence[int]]
                column_names=None              # type: Optional[Sequence[str]]
                ):
        # type: (...) -> bool
        """Execute a query and record its outcome.

        :returns: True if the outcome is a result set, False if it is an
                  update count.
        :raises UnsupportedOperationError: If any generated key hint is
                                           given.
        """
        self._reject_key_hints(auto_generated_keys, column_indexes, column_names)
        result = self._run(operation, parameters)
        if result.has_result_set:
            self._record_result_set(result.result_set)
            return True
        self._outcome.record_update_count(result.update_count)
        return False

    def execute_query(self, operation, parameters=None):
        # type: (str, Optional[Mapping[str, Any]]) -> ResultSet
        """Execute a query that returns rows.

        The result set is also recorded as the pending outcome.  The query
        has already run when the error below is raised, so its update
        count is recorded and can still be read with get_update_count().

        :raises ProgrammingError: If the query did not return rows.
        """
        result = self._run(operation, parameters)
        if not result.has_result_set:
            self._outcome.record_update_count(result.update_count)
            raise ProgrammingError("query did not return a result set")
        return self._record_result_set(result.result_set)

    def execute_update(self, operation,        # type: str
                       parameters=None,        # type: Optional[Mapping[str, Any]]
                       auto_generated_keys=None,  # type: Optional[int]
                       column_indexes=None,    # type: Optional[Sequence[int]]
                       column_names=None       # type: Optional[Sequence[str]]
                       ):
        # type: (...) -> int
        """Execute a query and return its update count.

        Any rows the query returned are discarded.
        """
        self._reject_key_hints(auto_generated_keys, column_indexes, column_names)
        result = self._run(operation, parameters)
        if result.result_set is not None and not result.result_set.is_closed():
            result.result_set.close()
        self._outcome.record_update_count(result.update_count)
        return self._outcome.update_count

    def execute_batch(self):
        # type: () -> List[int]
        """Execute every batched command in order.

        The batch is emptied whether or not the commands succeed.

        :returns: One update count per command.
        :raises BatchError: If any command failed; its results hold
                            EXECUTE_FAILED for each failed command.
        """
        self._check_closed()
        commands = self._batch
        self._batch = []
        self._outcome.discard()

        results = []  # type: List[int]
        error_string = None
        for command in commands:
            try:
                result = self._session.execute_statement(self, command, None)
            except DatabaseError as ex:
                _log.debug("batch command failed: %s: %s", command, ex)
                results.append(EXECUTE_FAILED)
                # only report first
                if error_string is None:
                    error_string = str(ex)
                continue
            if result.has_result_set:
                result.result_set.close()
                results.append(EXECUTE_FAILED)
                if error_string is None:
                    error_string = "batch command returned a result set: %s" % (command)
                continue
            results.append(max(result.update_count, 0))

        if error_string is not None:
            raise BatchError(error_string, results)

        return results

    # Outcome retrieval

    def get_connection(self):
        # type: () -> Any
        self._check_closed()
        return self._connection

    def get_update_count(self):
        # type: () -> int
        """Return the pending update count once.

        While a result set is pending this is always NO_UPDATE_COUNT and
        nothing is consumed.
        """
        self._check_closed()
        return self._outcome.take_update_count()

    def get_result_set(self):
        # type: () -> Optional[ResultSet]
        """Return the pending result set once, passing it to the caller.

        The caller is then responsible for closing it.
        """
        self._check_closed()
        return self._outcome.take_result_set()

    def get_more_results(self, current=None):
        # type: (Optional[int]) -> bool
        """Move past the current result.

        Only one result is produced per execution, so this never finds
        another: it closes the pending result set.

        :param current: CLOSE_CURRENT_RESULT, KEEP_CURRENT_RESULT or
                        CLOSE_ALL_RESULTS.  Accepted, with no further effect.
        :returns: True if a pending result set was open.
        """
        self._check_closed()
        return self._outcome.advance()

    def get_generated_keys(self):
        # type: () -> ResultSet
        return ListResultSet([], [])

    # Configuration

    def get_max_rows(self):
        # type: () -> int
        self._check_closed()
        return self._max_rows

    def set_max_rows(self, max_rows):
        # type: (int) -> None
        """Set the row cap; 0 means unlimited."""
        self._check_closed()
        self._max_rows = max_rows

    def set_fetch_size(self, rows):
        # type: (int) -> None
        """Validate a fetch size.  Nothing is stored.

        :raises UnsupportedOperationError: If rows exceeds a positive max
                                           rows, unless it is
                                           FETCH_SIZE_UNLIMITED.
        """
        self._check_closed()
        if rows != FETCH_SIZE_UNLIMITED and 0 < self._max_rows < rows:
            raise UnsupportedOperationError(
                "fetch size larger than max rows: max rows %d, rows %d"
                % (self._max_rows, rows))

    def get_fetch_size(self):
        # type: () -> int
        return 0

    def get_fetch_direction(self):
        # type: () -> int
        return FETCH_FORWARD

    def set_fetch_direction(self, direction):
        # type: (int) -> None
        pass

    def get_query_timeout(self):
        # type: () -> int
        # Stored only; readable and settable on a closed statement too.
        return self._query_timeout

    def set_query_timeout(self, seconds):
        # type: (int) -> None
        self._query_timeout = seconds

    def get_max_field_size(self):
        # type: () -> int
        return 0

    def set_max_field_size(self, max_size):
        # type: (int) -> None
        pass

    def set_escape_processing(self, enable):
        # type: (bool) -> None
        pass

    def set_cursor_name(self, name):
        # type: (str) -> None
        pass

    # Batch

    def add_batch(self, operation):
        # type: (str) -> None
        self._check_closed()
        self._batch.append(operation)

    def clear_batch(self):
        # type: () -> None
        self._check_closed()
        del self._batch[:]

    @property
    def batch(self):
        # type: () -> List[str]
        """A copy of the pending batch commands."""
        return list(self._batch)

    # Result set shape

    def _shape(self, index, default):
        # type: (int, int) -> int
        if index < len(self._result_set_params):
            return self._result_set_params[index]
        return default

    def get_result_set_type(self):
        # type: () -> int
        self._check_closed()
        if self._outcome.result_set is not None:
            return self._outcome.result_set.get_type()
        return self._shape(0, DEFAULT_TYPE)

    def get_result_set_concurrency(self):
        # type: () -> int
        self._check_closed()
        if self._outcome.result_set is not None:
            return self._outcome.result_set.get_concurrency()
        return self._shape(1, DEFAULT_CONCURRENCY)

    def get_result_set_holdability(self):
        # type: () -> int
        self._check_closed()
        if self._outcome.result_set is not None:
            return self._outcome.result_set.get_holdability()
        return self._shape(2, DEFAULT_HOLDABILITY)

    # Warnings

    def get_warnings(self):
        # type: () -> None
        self._check_closed()
        return None

    def clear_warnings(self):
        # type: () -> None
        self._check_closed()

    # Lifecycle

    def cancel(self):
        # type: () -> None
        pass

    def set_poolable(self, poolable):
        # type: (bool) -> None
        pass

    def is_poolable(self):
        # type: () -> bool
        return False

    def close_on_completion(self):
        # type: () -> None
        self._check_closed()

    def is_close_on_completion(self):
        # type: () -> bool
        self._check_closed()
        return False

    def is_closed(self):
        # type: () -> bool
        """Return True if this statement or its connection is closed."""
        return self._connection is None or self._connection.is_closed()

    def close(self):
        # type: () -> None
        """Close the statement.  Closing twice has no effect.

        A result set the statement still owns is closed; one already handed
        out by get_result_set() is left to the caller.
        """
        if self.is_closed():
            return
        self._outcome.discard()
        self._connection = None
        _log.debug("statement closed")

    # Capabilities

    def unwrap(self, iface):
        # type: (Any) -> Any
        return wrapper.unwrap(iface, self)

    def is_wrapper_for(self, iface):
        # type: (Any) -> bool
        return wrapper.is_wrapper_for(iface, type(self))
