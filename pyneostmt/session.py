"""The protocol session a connection runs its statements over.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__all__ = ["SessionException", "Session"]

# A Session is the part of the driver that actually talks to the database:
# it transmits a query with its parameters and turns the reply into an
# ExecutionResult.  How it does that (Bolt, HTTP, an embedded engine) is up
# to the subclass.  Statements only ever call execute_statement(); the
# connection owns the session and is the only one to close it.

from typing import Any, Mapping, Optional  # pylint: disable=unused-import

from .exception import OperationalError
from . import statement  # pylint: disable=unused-import


class SessionException(OperationalError):
    """Raised for problems encountered with the session."""

    pass


class Session(object):
    """Base class for protocol sessions."""

    closed = False

    def execute_statement(self, stmt, query, parameters=None):
        # type: (statement.Statement, str, Optional[Mapping[str, Any]]) -> statement.ExecutionResult
        """Execute a query on behalf of the given statement.

        :param stmt: Statement the query is executed for.
        :param query: Operation to be executed.
        :param parameters: Named query parameters.
        :returns: The result of the operation execution.
        :raises SessionException: If the session is closed.
        """
        raise NotImplementedError("execute_statement")

    def close(self):
        # type: () -> None
        """Close the session.  Closing twice has no effect."""
        self.closed = True

    def _check_closed(self):
        # type: () -> None
        if self.closed:
            raise SessionException("session is closed")
