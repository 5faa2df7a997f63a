"""
(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging

from typing import Any, Dict, List, Mapping, Optional, Tuple  # pylint: disable=unused-import

import pyneostmt
from pyneostmt.exception import ProgrammingError
from pyneostmt.result_set import ListResultSet
from pyneostmt.statement import ExecutionResult

_log = logging.getLogger("pyneostmttest")

MATCH_PEOPLE = "MATCH (p:Person) RETURN p.name AS name, p.age AS age"
CREATE_PERSON = "CREATE (p:Person {name: $name})"

PEOPLE = [('Alice', 34), ('Bob', 27), ('Carol', 41)]


class ScriptedSession(pyneostmt.Session):
    """A session that answers queries from a script instead of a server.

    Every result set it creates is kept in result_sets so tests can check
    who closed what.
    """

    def __init__(self):
        self.responses = {}   # type: Dict[str, Any]
        self.executed = []    # type: List[Tuple[str, Optional[Mapping[str, Any]]]]
        self.result_sets = []  # type: List[ListResultSet]

    def add_rows(self, query, columns, rows, **shape):
        # type: (str, List[str], List[Any], **int) -> None
        def respond(stmt):
            rs = ListResultSet(rows, columns, **shape)
            self.result_sets.append(rs)
            return ExecutionResult(stmt, result_set=rs)
        self.responses[query] = respond

    def add_count(self, query, count):
        # type: (str, int) -> None
        self.responses[query] = lambda stmt: ExecutionResult(stmt, update_count=count)

    def add_error(self, query, error):
        # type: (str, Exception) -> None
        self.responses[query] = error

    def execute_statement(self, stmt, query, parameters=None):
        self._check_closed()
        _log.info("execute: %s %r", query, parameters)
        self.executed.append((query, parameters))
        response = self.responses.get(query)
        if response is None:
            raise ProgrammingError("no scripted response for: %s" % (query))
        if isinstance(response, Exception):
            raise response
        return response(stmt)

    @property
    def last_result_set(self):
        # type: () -> ListResultSet
        return self.result_sets[-1]
