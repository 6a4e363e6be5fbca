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

"""Functional string templating over navigable data.

Templates are plain strings or callables ``(context, data) -> str``,
composed with ordinary function calls rather than a template language.
The :class:`Context` passed to every callable knows where it is in the
data tree and offers the combinators used to build larger output.

Usage::

    from ctxtemplate import apply_data

    def column(c, name, spec):
        return f"    {name} {spec['type']}"

    ddl = apply_data(
        table,
        lambda c, t: f"CREATE TABLE {t['name']} (\\n",
        lambda c, t: c.join(t["columns"], ",\\n", column),
        "\\n);",
    )
"""

from ctxtemplate.callbacks import CallbackShape, detect_shape
from ctxtemplate.context import Context
from ctxtemplate.engine import apply_data
from ctxtemplate.flatten import flatten_templates

__all__ = [
    "CallbackShape",
    "Context",
    "apply_data",
    "detect_shape",
    "flatten_templates",
]
