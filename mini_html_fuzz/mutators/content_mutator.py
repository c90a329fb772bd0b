"""
内容/属性变异器

用随机 token 替换第一个匹配的片段：
- 标签之间的文本内容（最短的 `>...<` 区间）；
- 属性名（` name="` 形式）；
- 属性值（`="value"` 形式）。

只替换第一处匹配；没有匹配时原样返回输入。
"""
from __future__ import annotations

import random
import re

from .basic_mutator import Mutation
from ..utils.config import DEFAULTS
from ..utils.random_token import random_token

# \w 只匹配 ASCII 单词字符
CONTENT_RE = re.compile(r">.+?<")
ATTR_NAME_RE = re.compile(r'\s\w+="', re.ASCII)
ATTR_VALUE_RE = re.compile(r'="\w+"', re.ASCII)


class RegexTokenMutator(Mutation):
    """把 pattern 的第一处匹配替换为 prefix + token + suffix。

    token 由 random_token(max_length, rng) 生成，每次调用只生成一次。
    """

    def __init__(self, name: str, pattern: re.Pattern, prefix: str, suffix: str,
                 max_length: int):
        self.name = name
        self.pattern = pattern
        self.prefix = prefix
        self.suffix = suffix
        self.max_length = max_length

    def apply(self, text: str, rng: random.Random) -> str:
        replacement = self.prefix + random_token(self.max_length, rng) + self.suffix
        # 使用函数作为替换项，避免 token 被当作反向引用模板解析
        return self.pattern.sub(lambda _m: replacement, text, count=1)


def replace_inner_content(max_length: int = None) -> RegexTokenMutator:
    return RegexTokenMutator("replace_inner_content", CONTENT_RE, ">", "<",
                             DEFAULTS["content_token_max"] if max_length is None else max_length)


def replace_attribute_name(max_length: int = None) -> RegexTokenMutator:
    # 前导空白统一替换为一个空格
    return RegexTokenMutator("replace_attribute_name", ATTR_NAME_RE, " ", '="',
                             DEFAULTS["attr_name_token_max"] if max_length is None else max_length)


def replace_attribute_value(max_length: int = None) -> RegexTokenMutator:
    return RegexTokenMutator("replace_attribute_value", ATTR_VALUE_RE, '="', '"',
                             DEFAULTS["attr_value_token_max"] if max_length is None else max_length)


__all__ = [
    "RegexTokenMutator",
    "replace_inner_content",
    "replace_attribute_name",
    "replace_attribute_value",
]
