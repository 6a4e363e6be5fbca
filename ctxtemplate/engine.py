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

"""Render entry point."""

from __future__ import annotations

import logging
from typing import Any

from ctxtemplate.context import Context
from ctxtemplate.data_types import Template

logger = logging.getLogger(__name__)


def apply_data(data: Any, template: Template, *templates: Template) -> str:
    """Render *template* (and any further *templates*) against *data*.

    A root :class:`Context` is created for *data*; every template is
    flattened and rendered in order and the results concatenated.
    Exceptions raised by templates propagate unchanged.
    """
    context = Context(data)
    logger.debug("Applying %d template argument(s)", len(templates) + 1)
    return context.render(template, *templates)
