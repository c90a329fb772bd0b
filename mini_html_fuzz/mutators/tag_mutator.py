"""
标签变异器

- replace_tag_names：用同一个随机 token 替换所有开始标签名与结束标签名；
- double_outer_tag：用启发式找到“最外层标签名”，在输入外再包一层同名标签；
- double_random_tag：先替换标签名，再对结果做 double_outer_tag。

最外层标签名的查找并不是真正的 HTML 解析：对已经被破坏的输入可能得到空名或错误的名字，
这一行为保持原样。
"""
from __future__ import annotations

import random
import re

from .basic_mutator import Mutation
from ..utils.config import DEFAULTS
from ..utils.random_token import random_token

OPEN_TAG_RE = re.compile(r"<\w+", re.ASCII)
CLOSE_TAG_RE = re.compile(r"</\w+>", re.ASCII)


def outer_tag_name(text: str) -> str:
    """启发式地捕获最外层标签名。

    规则：对每个满足 text[i] == '<' 或 text[i+1] == '/' 的位置 i，
    每个 j > i+1 且 text[j] == '>' 都把结果设为 text[i+2:j]，最后一次赋值生效。
    因此结果等价于：取最后一个 '>'（下标 last），再找满足条件且 i <= last-2 的最大 i，
    返回 text[i+2:last]；找不到时返回空字符串。
    """
    last = text.rfind(">")
    if last < 2:
        return ""
    for i in range(min(len(text) - 2, last - 2), -1, -1):
        if text[i] == "<" or text[i + 1] == "/":
            return text[i + 2:last]
    return ""


class ReplaceTagNamesMutator(Mutation):
    name = "replace_tag_names"

    def __init__(self, max_length: int = None):
        self.max_length = DEFAULTS["tag_token_max"] if max_length is None else max_length

    def apply(self, text: str, rng: random.Random) -> str:
        tag = random_token(self.max_length, rng)
        out = OPEN_TAG_RE.sub(lambda _m: "<" + tag, text)
        return CLOSE_TAG_RE.sub(lambda _m: "</" + tag + ">", out)


class DoubleOuterTagMutator(Mutation):
    name = "double_outer_tag"

    def apply(self, text: str, rng: random.Random) -> str:
        tag = outer_tag_name(text)
        return f"<{tag}>{text}</{tag}>"


class DoubleRandomTagMutator(Mutation):
    """组合变异：ReplaceTagNames 之后再 DoubleOuterTag。"""

    name = "double_random_tag"

    def __init__(self, max_length: int = None):
        self._replace = ReplaceTagNamesMutator(max_length)
        self._double = DoubleOuterTagMutator()

    def apply(self, text: str, rng: random.Random) -> str:
        return self._double.apply(self._replace.apply(text, rng), rng)


__all__ = [
    "outer_tag_name",
    "ReplaceTagNamesMutator",
    "DoubleOuterTagMutator",
    "DoubleRandomTagMutator",
]
