"""Property-based tests for flattening and rendering laws."""

from __future__ import annotations

from hypothesis import given, strategies as st

from ctxtemplate import Context, flatten_templates


def _echo(c, data):
    return f"<{data}>"


def _depth(c, data):
    return str(c.depth)


leaves = st.one_of(st.text(max_size=5), st.sampled_from([_echo, _depth]))
templates = st.recursive(
    leaves,
    lambda children: st.lists(children, max_size=4),
    max_leaves=12,
)


class TestFlatteningLaws:
    @given(templates, templates, templates)
    def test_render_is_associative(self, a, b, c):
        ctx = Context("d")
        expected = ctx.render(a, b, c)
        assert ctx.render([a, [b, c]]) == expected
        assert ctx.render([a], [b], [c]) == expected
        assert ctx.render([[a, b], c]) == expected

    @given(st.lists(templates, max_size=5))
    def test_flatten_is_idempotent(self, items):
        flat = flatten_templates(*items)
        assert flatten_templates(flat) == flat
        assert all(isinstance(leaf, str) or callable(leaf) for leaf in flat)

    @given(st.lists(st.text(max_size=5), max_size=6))
    def test_strings_concatenate_in_order(self, parts):
        assert Context(None).render(parts) == "".join(parts)


class TestConditionalLaws:
    @given(templates)
    def test_if_false_is_empty(self, t):
        assert Context("d").if_(False, t) == ""

    @given(templates)
    def test_if_true_is_render(self, t):
        ctx = Context("d")
        assert ctx.if_(True, t) == ctx.render(t)

    @given(templates, templates, st.booleans())
    def test_if_else_picks_one_branch(self, a, b, flag):
        ctx = Context("d")
        assert ctx.if_else(flag, a, b) == ctx.render(a if flag else b)


class TestJoinLaws:
    @given(st.lists(st.text(max_size=5), max_size=6), st.text(max_size=3))
    def test_bare_join_matches_str_join(self, items, sep):
        ctx = Context("d")
        assert ctx.join(items, sep, lambda c, d: d) == sep.join(items)

    @given(st.text(min_size=1, max_size=3), st.text(min_size=1, max_size=3))
    def test_empty_never_renders_affixes(self, prefix, suffix):
        assert Context("d").join([], ",", lambda c, d: d, prefix, suffix) == ""
