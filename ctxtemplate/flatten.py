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

"""Template flattening.

Templates may be nested lists/tuples of strings and callables.  Before
rendering they are flattened into a single list of leaves, depth-first and
left to right, so that::

    flatten_templates("a", ["b", ["c", "d"]], "e") == ["a", "b", "c", "d", "e"]
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ctxtemplate.data_types import Leaf


def is_template_function(value: Any) -> bool:
    return callable(value)


def is_condition_function(value: Any) -> bool:
    return callable(value)


def is_selector_function(value: Any) -> bool:
    return callable(value)


def is_template_sequence(value: Any) -> bool:
    """Only lists and tuples nest; strings and mappings are never sequences."""
    return isinstance(value, (list, tuple))


def flatten_templates(*templates: Any) -> list[Leaf]:
    """Flatten template arguments into an ordered list of leaves.

    The arguments themselves form the outermost sequence.  Nested sequences
    are expanded in place, empty ones contribute nothing, and ``None``
    entries are dropped.  No deduplication or reordering takes place.
    """
    leaves: list[Leaf] = []
    stack: list[Iterator[Any]] = [iter(templates)]
    while stack:
        for item in stack[-1]:
            if item is None:
                continue
            if is_template_sequence(item):
                stack.append(iter(item))
                break
            leaves.append(item)
        else:
            stack.pop()
    return leaves
