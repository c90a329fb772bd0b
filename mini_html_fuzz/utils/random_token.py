"""
随机 token 生成器

生成长度在 [1, max_length] 内均匀分布、字符取自 26 个小写字母的随机字符串，
供各变异器作为替换内容（标签名、属性名/值、文本内容）。
"""
from __future__ import annotations

import random
import string
from typing import Optional


def random_token(max_length: int, rng: Optional[random.Random] = None) -> str:
    """返回长度在 [1, max_length] 的随机小写字符串。

    rng 为空时使用 random 模块的全局随机源。
    """
    if max_length < 1:
        raise ValueError(f"max_length must be >= 1, got {max_length}")
    r = rng if rng is not None else random
    length = r.randint(1, max_length)
    return ''.join(r.choice(string.ascii_lowercase) for _ in range(length))


__all__ = ["random_token"]
