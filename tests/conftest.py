"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import pytest

import pyneostmt

from . import ScriptedSession, MATCH_PEOPLE, CREATE_PERSON, PEOPLE


@pytest.fixture
def session():
    s = ScriptedSession()
    s.add_rows(MATCH_PEOPLE, ['name', 'age'], PEOPLE)
    s.add_count(CREATE_PERSON, 1)
    return s


@pytest.fixture
def connection(session):
    con = pyneostmt.connect(session)
    yield con
    if not con.is_closed():
        con.close()


@pytest.fixture
def statement(connection):
    return connection.create_statement()
