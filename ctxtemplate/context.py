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

"""Navigable render context.

A :class:`Context` carries the data currently in scope together with a link
to the context it was derived from, so templates can look back up the tree::

    def field(c, data):
        return f"{c.parent['name']}.{data['name']}"

    apply_data(schema, lambda c, d: c.join(d["fields"], "\\n", field))

Contexts are immutable.  New ones are only ever derived from an existing
context (by :meth:`Context.join` and :meth:`Context.with_`), which keeps the
lineage a simple chain ending at the root.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from ctxtemplate.callbacks import CallbackShape, detect_shape, invoke_callback
from ctxtemplate.data_types import Condition, IteratorCallback, Leaf, Template
from ctxtemplate.flatten import (
    flatten_templates,
    is_condition_function,
    is_selector_function,
    is_template_function,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Context:
    """Current data binding plus its position in the lineage.

    Attributes:
        data: The value currently in scope.
        parent_context: The context this one was derived from, or ``None``
            at the root.
        index: Position within the iteration that produced this context.
        name: Label within the parent: a stringified index or mapping key.
        depth: Nesting level, ``0`` at the root.
    """

    data: Any
    parent_context: Context | None = field(default=None, repr=False)
    index: int = 0
    name: str = "0"
    depth: int = field(init=False)

    def __post_init__(self) -> None:
        depth = self.parent_context.depth + 1 if self.parent_context else 0
        object.__setattr__(self, "depth", depth)

    # --- Lineage ---

    @property
    def parent(self) -> Any | None:
        """Data of the immediate parent, ``None`` at the root."""
        if self.parent_context is None:
            return None
        return self.parent_context.data

    @property
    def root(self) -> Any:
        """Data of the outermost context."""
        current = self
        while current.parent_context is not None:
            current = current.parent_context
        return current.data

    @property
    def parents(self) -> list[Any]:
        """Ancestor data, nearest first and root last."""
        return [ctx.data for ctx in self._ancestors()]

    def _ancestors(self) -> Iterator[Context]:
        current = self.parent_context
        while current is not None:
            yield current
            current = current.parent_context

    # --- Rendering ---

    def render(self, *templates: Template) -> str:
        """Render one or more templates and concatenate the results."""
        return self._render_leaves(flatten_templates(*templates))

    def if_(self, condition: Condition, *templates: Template) -> str:
        """Render *templates* only when *condition* holds, else ``""``."""
        if self._evaluate(condition):
            return self.render(*templates)
        return ""

    def if_else(
        self,
        condition: Condition,
        then_template: Template,
        else_template: Template,
    ) -> str:
        """Render exactly one of two templates depending on *condition*."""
        if self._evaluate(condition):
            return self.render(then_template)
        return self.render(else_template)

    # --- Iteration ---

    def join(
        self,
        items: Iterable[Any] | Mapping[Any, Any] | None,
        separator: str,
        callback: IteratorCallback,
        prefix: Template = None,
        suffix: Template = None,
        *,
        shape: CallbackShape | None = None,
    ) -> str:
        """Render *callback* for every element and join the results.

        Mappings are iterated by key, everything else by position.  Each
        element is rendered in its own child context.  Callbacks returning
        ``None`` are skipped.  *prefix* and *suffix* are only rendered when
        at least one element produced output.  ``None`` items render as
        ``""``.
        """
        if items is None:
            return ""
        if isinstance(items, Mapping):
            return self.join_mapping(items, separator, callback, prefix, suffix, shape=shape)
        return self.join_sequence(items, separator, callback, prefix, suffix, shape=shape)

    def join_sequence(
        self,
        items: Iterable[Any],
        separator: str,
        callback: IteratorCallback,
        prefix: Template = None,
        suffix: Template = None,
        *,
        shape: CallbackShape | None = None,
    ) -> str:
        """Like :meth:`join`, always iterating *items* by position."""
        entries = ((index, str(index), item) for index, item in enumerate(items))
        if shape is None:
            shape = detect_shape(callback, mapping=False)
        return self._join(entries, separator, callback, prefix, suffix, shape)

    def join_mapping(
        self,
        items: Mapping[Any, Any],
        separator: str,
        callback: IteratorCallback,
        prefix: Template = None,
        suffix: Template = None,
        *,
        shape: CallbackShape | None = None,
    ) -> str:
        """Like :meth:`join`, always iterating *items* by key."""
        entries = (
            (index, str(key), value)
            for index, (key, value) in enumerate(items.items())
        )
        if shape is None:
            shape = detect_shape(callback, mapping=True)
        return self._join(entries, separator, callback, prefix, suffix, shape)

    # --- Scoping ---

    def with_(self, selector: Any, *selectors: Any) -> Context:
        """Derive a chain of child contexts, one per selector.

        Each selector is either a callable applied to the previous step's
        data or a literal value used as the new data.  The deepest context
        is returned; the intermediate ones remain reachable as ancestors.
        """
        context = self
        for sel in (selector, *selectors):
            data = sel(context.data) if is_selector_function(sel) else sel
            context = Context(data, context)
        logger.debug(
            "Rebound data through %d selector(s), depth now %d",
            len(selectors) + 1, context.depth,
        )
        return context

    # --- Internals ---

    def _evaluate(self, condition: Condition) -> Any:
        if is_condition_function(condition):
            return condition(self, self.data)
        return condition

    def _join(
        self,
        entries: Iterable[tuple[int, str, Any]],
        separator: str,
        callback: IteratorCallback,
        prefix: Template,
        suffix: Template,
        shape: CallbackShape,
    ) -> str:
        results: list[str] = []
        skipped = 0
        for index, name, item in entries:
            child = Context(item, self, index, name)
            result = invoke_callback(callback, shape, child, index, name, item)
            if result is None:
                skipped += 1
                continue
            results.append(result)

        if skipped:
            logger.debug("join skipped %d element(s)", skipped)
        if not results:
            return ""
        return self.render(prefix) + separator.join(results) + self.render(suffix)

    def _render_leaves(self, leaves: list[Leaf]) -> str:
        if not leaves:
            return ""
        if len(leaves) == 1:
            return self._render_leaf(leaves[0])
        return "".join(self._render_leaf(leaf) for leaf in leaves)

    def _render_leaf(self, leaf: Leaf) -> str:
        result = leaf(self, self.data) if is_template_function(leaf) else leaf
        if result is None:
            return ""
        if not isinstance(result, str):
            raise TypeError(
                f"template {leaf!r} rendered {type(result).__name__}, expected str"
            )
        return result
