"""Capability queries for driver objects.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Callers written against a generic database API ask a driver object
whether it exposes a driver-specific interface before using it:

    if stmt.is_wrapper_for(Loggable):
        stmt.unwrap(Loggable).set_debug(True)

An interface here is any class; an object exposes it if it is an
instance of that class.
"""

__all__ = ['unwrap', 'is_wrapper_for']

from typing import Any, Type, TypeVar  # pylint: disable=unused-import

from .exception import InterfaceError

T = TypeVar('T')


def unwrap(iface, obj):
    # type: (Type[T], Any) -> T
    """Return obj viewed as iface.

    :param iface: The class the caller wants to use.
    :param obj: The driver object.
    :raises InterfaceError: If obj does not expose iface.
    """
    if isinstance(obj, iface):
        return obj
    raise InterfaceError("%s is not a wrapper for %s"
                         % (type(obj).__name__, getattr(iface, '__name__', iface)))


def is_wrapper_for(iface, cls):
    # type: (Type[Any], Type[Any]) -> bool
    """Return True if instances of cls expose iface."""
    try:
        return issubclass(cls, iface)
    except TypeError:
        return False
