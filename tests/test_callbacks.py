"""Tests for ctxtemplate.callbacks."""

from __future__ import annotations

import functools

from ctxtemplate.callbacks import (
    UNINSPECTABLE,
    VARIADIC,
    CallbackShape,
    detect_shape,
    invoke_callback,
    positional_arity,
)


def four(c, index, name, data):
    return f"{index}_{name}_{data}"


def three(c, key, data):
    return f"{key}_{data}"


def two(c, data):
    return f"{data}"


class TestPositionalArity:
    def test_counts_required_positional(self):
        assert positional_arity(four) == 4
        assert positional_arity(three) == 3
        assert positional_arity(lambda c, d: d) == 2

    def test_defaults_are_not_counted(self):
        def cb(c, data, extra=None):
            return data

        assert positional_arity(cb) == 2

    def test_var_positional(self):
        assert positional_arity(lambda *args: "") == VARIADIC

    def test_bound_method_excludes_self(self):
        class Renderer:
            def item(self, c, data):
                return data

        assert positional_arity(Renderer().item) == 2

    def test_partial(self):
        def cb(prefix, c, data):
            return prefix + data

        assert positional_arity(functools.partial(cb, "x")) == 2

    def test_uninspectable_signature(self):
        assert positional_arity(42) == UNINSPECTABLE


class TestDetectShape:
    def test_four_params(self):
        assert detect_shape(four, mapping=False) is CallbackShape.INDEX_NAME
        assert detect_shape(four, mapping=True) is CallbackShape.INDEX_NAME

    def test_three_params_depend_on_mode(self):
        assert detect_shape(three, mapping=False) is CallbackShape.INDEX
        assert detect_shape(three, mapping=True) is CallbackShape.NAME

    def test_two_params(self):
        assert detect_shape(two, mapping=False) is CallbackShape.BARE

    def test_other_counts_default_to_bare(self):
        assert detect_shape(lambda c: "", mapping=False) is CallbackShape.BARE
        assert detect_shape(lambda a, b, c, d, e: "", mapping=True) is CallbackShape.BARE

    def test_var_positional_receives_everything(self):
        assert detect_shape(lambda *args: "", mapping=False) is CallbackShape.INDEX_NAME


class TestInvokeCallback:
    def test_argument_lists(self):
        calls = []

        def record(*args):
            calls.append(args)

        ctx = object()
        for shape in CallbackShape:
            invoke_callback(record, shape, ctx, 1, "one", "data")

        assert calls == [
            (ctx, 1, "one", "data"),
            (ctx, 1, "data"),
            (ctx, "one", "data"),
            (ctx, "data"),
        ]
