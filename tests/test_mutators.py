"""HTML 变异器测试：每个目录条目的语义与性质。"""
import random
import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mini_html_fuzz.mutators.content_mutator import (
    replace_attribute_name,
    replace_attribute_value,
    replace_inner_content,
)
from mini_html_fuzz.mutators.marker_mutator import (
    jitter_close_braces,
    jitter_open_braces,
    strip_close_marker,
    strip_closing_bracket,
    strip_open_marker,
)
from mini_html_fuzz.mutators.tag_mutator import (
    DoubleOuterTagMutator,
    DoubleRandomTagMutator,
    ReplaceTagNamesMutator,
    outer_tag_name,
)

SEED = '<html a="value">...</html>'
html_like = st.text(alphabet='<>/="abc .\n', max_size=40)


def _reference_outer_tag(text):
    # 逐字复现的双重循环，用来对照 outer_tag_name
    name = ""
    for i in range(len(text) - 1):
        if text[i] == "<" or text[i + 1] == "/":
            for j in range(i + 2, len(text)):
                if text[j] == ">":
                    name = text[i + 2:j]
    return name


class TestStripMarkers:
    def test_strip_open_marker_on_seed(self):
        assert strip_open_marker().apply(SEED, random.Random(0)) == 'html a="value">.../html>'

    def test_strip_close_marker_on_seed(self):
        assert strip_close_marker().apply(SEED, random.Random(0)) == '<html a="value">...html>'

    def test_strip_closing_bracket_on_seed(self):
        assert strip_closing_bracket().apply(SEED, random.Random(0)) == '<html a="value"...</html'

    @pytest.mark.parametrize("factory", [strip_open_marker, strip_close_marker, strip_closing_bracket])
    def test_deterministic(self, factory):
        m = factory()
        assert m.apply(SEED, random.Random(1)) == m.apply(SEED, random.Random(2))

    @given(text=html_like)
    def test_strip_open_idempotent(self, text):
        m = strip_open_marker()
        once = m.apply(text, random.Random(0))
        assert m.apply(once, random.Random(0)) == once
        assert "<" not in once

    @given(text=html_like)
    def test_strip_closing_bracket_idempotent(self, text):
        m = strip_closing_bracket()
        once = m.apply(text, random.Random(0))
        assert m.apply(once, random.Random(0)) == once

    def test_no_marker_leaves_text_unchanged(self):
        assert strip_close_marker().apply("plain text", random.Random(0)) == "plain text"


class TestBraceJitter:
    @pytest.mark.parametrize("factory,brace", [(jitter_open_braces, "<"), (jitter_close_braces, ">")])
    def test_single_count_applied_to_all_occurrences(self, factory, brace):
        m = factory()
        seen = set()
        for s in range(40):
            out = m.apply(SEED, random.Random(s))
            assert out in (SEED, SEED.replace(brace, brace * 2))
            seen.add(out)
        assert len(seen) == 2

    def test_custom_max_repeat(self):
        m = jitter_open_braces(max_repeat=3)
        outs = {m.apply("<", random.Random(s)) for s in range(60)}
        assert outs == {"<", "<<", "<<<"}


class TestReplaceTagNames:
    def test_same_token_for_open_and_close(self):
        out = ReplaceTagNamesMutator().apply(SEED, random.Random(5))
        match = re.fullmatch(r'<([a-z]{1,24}) a="value">\.\.\.</\1>', out)
        assert match is not None

    def test_all_tags_share_one_token(self):
        out = ReplaceTagNamesMutator().apply("<a><b>x</b></a>", random.Random(9))
        match = re.fullmatch(r"<([a-z]+)><\1>x</\1></\1>", out)
        assert match is not None

    def test_no_tags_unchanged(self):
        assert ReplaceTagNamesMutator().apply("no tags here", random.Random(0)) == "no tags here"


class TestContentAndAttributes:
    def test_replace_inner_content(self):
        out = replace_inner_content().apply(SEED, random.Random(2))
        assert re.fullmatch(r'<html a="value">[a-z]{1,100}</html>', out)

    def test_replace_inner_content_first_shortest_span_only(self):
        out = replace_inner_content().apply("<a>x</a><b>y</b>", random.Random(2))
        assert re.fullmatch(r"<a>[a-z]+</a><b>y</b>", out)

    def test_replace_inner_content_ignores_empty_span(self):
        assert replace_inner_content().apply("<a></a>", random.Random(0)) == "<a></a>"

    def test_replace_attribute_name(self):
        out = replace_attribute_name().apply(SEED, random.Random(4))
        assert re.fullmatch(r'<html [a-z]{1,50}="value">\.\.\.</html>', out)

    def test_replace_attribute_name_normalizes_whitespace_to_space(self):
        out = replace_attribute_name().apply('<p\ta="1">', random.Random(4))
        assert re.fullmatch(r'<p [a-z]+="1">', out)

    def test_replace_attribute_value(self):
        out = replace_attribute_value().apply(SEED, random.Random(4))
        assert re.fullmatch(r'<html a="[a-z]{1,12}">\.\.\.</html>', out)

    def test_replace_attribute_value_first_match_only(self):
        out = replace_attribute_value().apply('<p x="one" y="two">', random.Random(1))
        assert re.fullmatch(r'<p x="[a-z]+" y="two">', out)

    @pytest.mark.parametrize("factory", [replace_inner_content, replace_attribute_name, replace_attribute_value])
    def test_no_match_leaves_text_unchanged(self, factory):
        assert factory().apply("plain", random.Random(0)) == "plain"


class TestDoubleTag:
    def test_double_outer_tag_on_seed(self):
        out = DoubleOuterTagMutator().apply(SEED, random.Random(0))
        assert out == '<html><html a="value">...</html></html>'

    def test_double_outer_tag_empty_input(self):
        assert DoubleOuterTagMutator().apply("", random.Random(0)) == "<></>"

    def test_heuristic_keeps_last_bracket(self):
        # 不是真正的解析：名字一直截取到最后一个 '>'
        assert outer_tag_name("<a></a>x>") == "a>x"

    @given(text=html_like)
    def test_outer_tag_matches_reference_scan(self, text):
        assert outer_tag_name(text) == _reference_outer_tag(text)

    @given(text=html_like)
    def test_output_framed_by_captured_name(self, text):
        name = outer_tag_name(text)
        out = DoubleOuterTagMutator().apply(text, random.Random(0))
        assert out.startswith(f"<{name}>")
        assert out.endswith(f"</{name}>")
        assert out == f"<{name}>{text}</{name}>"

    def test_double_outer_tag_deterministic(self):
        m = DoubleOuterTagMutator()
        assert m.apply(SEED, random.Random(1)) == m.apply(SEED, random.Random(99))

    def test_double_random_tag(self):
        out = DoubleRandomTagMutator().apply(SEED, random.Random(8))
        assert re.fullmatch(r'<([a-z]{1,24})><\1 a="value">\.\.\.</\1></\1>', out)


class TestExplicitTokenLimits:
    def test_zero_limit_is_kept_not_defaulted(self):
        assert replace_attribute_value(max_length=0).max_length == 0
        assert ReplaceTagNamesMutator(max_length=0).max_length == 0

    def test_zero_limit_fails_loudly(self):
        with pytest.raises(ValueError):
            replace_inner_content(max_length=0).apply(SEED, random.Random(0))

    def test_none_uses_configured_default(self):
        assert replace_attribute_name().max_length == 50
        assert ReplaceTagNamesMutator().max_length == 24
