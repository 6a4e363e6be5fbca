# ctxtemplate — functional string templating over navigable data
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Callback shapes for :meth:`Context.join`.

An iterator callback may accept exactly the information it needs:

==============  ====================================
Shape           Call
==============  ====================================
``INDEX_NAME``  ``callback(context, index, name, data)``
``INDEX``       ``callback(context, index, data)``
``NAME``        ``callback(context, name, data)``
``BARE``        ``callback(context, data)``
==============  ====================================

The shape is normally detected from the callback's signature; callers that
wrap callbacks (decorators, ``functools.partial`` with odd signatures) can
pass it explicitly instead.
"""

from __future__ import annotations

import inspect
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from ctxtemplate.data_types import IteratorCallback

if TYPE_CHECKING:
    from ctxtemplate.context import Context

logger = logging.getLogger(__name__)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


# positional_arity() results that are not a parameter count.
VARIADIC = -1
UNINSPECTABLE = -2


class CallbackShape(Enum):
    """Argument list an iterator callback is invoked with."""

    INDEX_NAME = "index_name"
    INDEX = "index"
    NAME = "name"
    BARE = "bare"


def positional_arity(callback: IteratorCallback) -> int:
    """Count the required positional parameters of *callback*.

    Returns :data:`VARIADIC` when the callback accepts ``*args`` and
    :data:`UNINSPECTABLE` when its signature cannot be read (some builtins).
    """
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        logger.debug("Cannot inspect signature of %r", callback)
        return UNINSPECTABLE

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return VARIADIC
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty:
            count += 1
    return count


def detect_shape(callback: IteratorCallback, *, mapping: bool) -> CallbackShape:
    """Pick a :class:`CallbackShape` from the callback's declared arity.

    Four parameters receive index and name; three receive the key in
    mapping mode and the index otherwise; anything else gets the bare
    ``(context, data)`` form.  A ``*args`` callback receives everything.
    """
    arity = positional_arity(callback)
    if arity in (VARIADIC, 4):
        return CallbackShape.INDEX_NAME
    if arity == 3:
        return CallbackShape.NAME if mapping else CallbackShape.INDEX
    return CallbackShape.BARE


def invoke_callback(
    callback: IteratorCallback,
    shape: CallbackShape,
    context: Context,
    index: int,
    name: str,
    data: Any,
) -> Any:
    """Call *callback* with the argument list matching *shape*."""
    if shape is CallbackShape.INDEX_NAME:
        return callback(context, index, name, data)
    if shape is CallbackShape.INDEX:
        return callback(context, index, data)
    if shape is CallbackShape.NAME:
        return callback(context, name, data)
    return callback(context, data)
