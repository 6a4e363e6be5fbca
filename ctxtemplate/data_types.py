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

"""Type aliases shared across the templating engine.

A *template* is, recursively, a string, a callable ``(context, data) -> str``
or a list/tuple of templates.  After flattening only *leaves* remain: plain
strings and callables.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from ctxtemplate.context import Context

TemplateFunction = Callable[["Context", Any], "str | None"]
ConditionFunction = Callable[["Context", Any], Any]
SelectorFunction = Callable[[Any], Any]

Leaf = Union[str, TemplateFunction]
Template = Union[Leaf, list[Any], tuple[Any, ...], None]
# Any other value is accepted too and tested for truthiness.
Condition = Union[bool, ConditionFunction]

# Callback for Context.join; the accepted positional arguments depend on
# its CallbackShape.
IteratorCallback = Callable[..., "str | None"]
