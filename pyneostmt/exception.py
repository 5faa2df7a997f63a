"""Classes containing the exceptions for reporting errors.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__all__ = ['Warning', 'Error', 'InterfaceError', 'DatabaseError', 'BatchError',
           'DataError', 'OperationalError', 'IntegrityError', 'InternalError',
           'ProgrammingError', 'NotSupportedError', 'InvalidStateError',
           'UnsupportedOperationError']


class Warning(Exception):  # pylint: disable=redefined-builtin
    def __init__(self, value):
        super(Warning, self).__init__(value)
        self.__value = value

    def __str__(self):
        return str(self.__value)


class Error(Exception):
    def __init__(self, value):
        super(Error, self).__init__(value)
        self.__value = value

    def __str__(self):
        return str(self.__value)


class InterfaceError(Error):
    pass


class DatabaseError(Error):
    pass


class BatchError(DatabaseError):
    """A batch failed part way through.

    results holds one entry per batch command: the update count of a
    command that succeeded, or EXECUTE_FAILED for one that did not.
    """

    results = None

    def __init__(self, value, results):
        DatabaseError.__init__(self, value)
        self.results = results


class DataError(DatabaseError):
    pass


class OperationalError(DatabaseError):
    pass


class IntegrityError(DatabaseError):
    pass


class InternalError(DatabaseError):
    pass


class ProgrammingError(DatabaseError):
    pass


class NotSupportedError(DatabaseError):
    pass


class InvalidStateError(ProgrammingError):
    """An operation was attempted on a closed statement or result set."""

    pass


class UnsupportedOperationError(NotSupportedError):
    """The driver deliberately does not implement this operation."""

    def __init__(self, value="operation is not supported"):
        NotSupportedError.__init__(self, value)
