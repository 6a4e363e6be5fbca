"""Shared fixtures for ctxtemplate tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def test_data() -> dict:
    return {
        "name": "nameValue",
        "conditionTrue": True,
        "abcArray": ["a", "b", "c"],
        "xyzObj": {"x": "X", "y": "Y", "z": "Z"},
        "itemTree": {
            "name": "itemTree",
            "subItem01": {
                "name": "subitem 01",
                "values": {"q": "Q", "w": "W", "e": "E"},
            },
            "subItem02": {
                "name": "subitem 02",
                "values": ["A", "S", "D"],
            },
        },
    }
