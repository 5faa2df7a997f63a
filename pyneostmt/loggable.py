"""Debug flags carried by driver objects.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__all__ = ['Loggable']


class Loggable(object):
    """Mixin holding a debug switch and level.

    The values are stored for tools that set and read them back; they do
    not change what the object does or what it logs.
    """

    debug = False
    debug_level = 0

    def has_debug(self):
        # type: () -> bool
        return self.debug

    def set_debug(self, debug):
        # type: (bool) -> None
        self.debug = debug

    def get_debug_level(self):
        # type: () -> int
        return self.debug_level

    def set_debug_level(self, level):
        # type: (int) -> None
        self.debug_level = level
