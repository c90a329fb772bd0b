"""
标签标记变异器

模拟括号缺失/重复一类的畸形 HTML：
- 删除所有 `<`、`</` 或 `>`；
- 把所有 `<`（或 `>`）替换为随机重复 1..N 次的同一字符（每次调用只抽取一次次数）。
"""
from __future__ import annotations

import random

from .basic_mutator import Mutation
from ..utils.config import DEFAULTS


class StripMarkerMutator(Mutation):
    """删除输入中所有出现的 marker 子串（确定性、幂等）。"""

    def __init__(self, name: str, marker: str):
        self.name = name
        self.marker = marker

    def apply(self, text: str, rng: random.Random) -> str:
        return text.replace(self.marker, "")


class BraceJitterMutator(Mutation):
    """把每个 brace 替换为 brace * k，k 在 [1, max_repeat] 中均匀抽取一次。"""

    def __init__(self, name: str, brace: str, max_repeat: int = None):
        self.name = name
        self.brace = brace
        self.max_repeat = max_repeat if max_repeat is not None else DEFAULTS["brace_repeat_max"]

    def apply(self, text: str, rng: random.Random) -> str:
        count = rng.randint(1, self.max_repeat)
        return text.replace(self.brace, self.brace * count)


def strip_open_marker() -> StripMarkerMutator:
    return StripMarkerMutator("strip_open_marker", "<")


def strip_close_marker() -> StripMarkerMutator:
    return StripMarkerMutator("strip_close_marker", "</")


def strip_closing_bracket() -> StripMarkerMutator:
    return StripMarkerMutator("strip_closing_bracket", ">")


def jitter_open_braces(max_repeat: int = None) -> BraceJitterMutator:
    return BraceJitterMutator("jitter_open_braces", "<", max_repeat)


def jitter_close_braces(max_repeat: int = None) -> BraceJitterMutator:
    return BraceJitterMutator("jitter_close_braces", ">", max_repeat)


__all__ = [
    "StripMarkerMutator",
    "BraceJitterMutator",
    "strip_open_marker",
    "strip_close_marker",
    "strip_closing_bracket",
    "jitter_open_braces",
    "jitter_close_braces",
]
