"""Constants describing result set shapes and statement outcomes.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

The numeric values match the ones JDBC tools expect, so that a value
reported by one driver layer can be compared with another's.
"""

# pylint: disable=bad-whitespace

# Result Set Types
TYPE_FORWARD_ONLY                 = 1003
TYPE_SCROLL_INSENSITIVE           = 1004
TYPE_SCROLL_SENSITIVE             = 1005

# Result Set Concurrency
CONCUR_READ_ONLY                  = 1007
CONCUR_UPDATABLE                  = 1008

# Result Set Holdability
HOLD_CURSORS_OVER_COMMIT          = 1
CLOSE_CURSORS_AT_COMMIT           = 2

# Fetch Directions
FETCH_FORWARD                     = 1000
FETCH_REVERSE                     = 1001
FETCH_UNKNOWN                     = 1002

# get_more_results() Selectors
CLOSE_CURRENT_RESULT              = 1
KEEP_CURRENT_RESULT               = 2
CLOSE_ALL_RESULTS                 = 3

# Statement Outcomes
NO_UPDATE_COUNT                   = -1
SUCCESS_NO_INFO                   = -2
EXECUTE_FAILED                    = -3

# Passing this to set_fetch_size() never conflicts with max rows
FETCH_SIZE_UNLIMITED              = -2147483648

# Shape reported when neither a result set nor a statement default exists
DEFAULT_TYPE                      = TYPE_FORWARD_ONLY
DEFAULT_CONCURRENCY               = CONCUR_READ_ONLY
DEFAULT_HOLDABILITY               = CLOSE_CURSORS_AT_COMMIT

RESULT_SET_TYPES = (TYPE_FORWARD_ONLY, TYPE_SCROLL_INSENSITIVE,
                    TYPE_SCROLL_SENSITIVE)
RESULT_SET_CONCURRENCIES = (CONCUR_READ_ONLY, CONCUR_UPDATABLE)
RESULT_SET_HOLDABILITIES = (HOLD_CURSORS_OVER_COMMIT, CLOSE_CURSORS_AT_COMMIT)

stringifyType = {TYPE_FORWARD_ONLY: 'FORWARD_ONLY',
                 TYPE_SCROLL_INSENSITIVE: 'SCROLL_INSENSITIVE',
                 TYPE_SCROLL_SENSITIVE: 'SCROLL_SENSITIVE'}


def lookup_type(result_set_type):
    # type: (int) -> str
    """Return a printable name for a result set type."""
    return stringifyType.get(result_set_type,
                             '<UNKNOWN TYPE %d>' % (result_set_type))
