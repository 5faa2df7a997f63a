"""A PEP 249 statement layer for graph database drivers.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__version__ = '1.0.0'

from .connection import *  # pylint: disable=wildcard-import
from .datatype import *    # pylint: disable=wildcard-import
from .exception import *   # pylint: disable=wildcard-import, redefined-builtin
from .constants import *   # pylint: disable=wildcard-import
from .result_set import *  # pylint: disable=wildcard-import
from .statement import *   # pylint: disable=wildcard-import
from .session import *     # pylint: disable=wildcard-import
from .loggable import *    # pylint: disable=wildcard-import
