"""
基础变异器接口

所有 HTML 变异器都继承 Mutation：每个实例有稳定的 name，并实现
apply(text, rng) -> str，把一个输入字符串映射为一个变异后的字符串。
变异器本身无状态，随机性只来自调用方传入的 rng。
"""
from __future__ import annotations

import random


class Mutation:
    """变异器基类。子类需设置 name 并实现 apply。"""

    name = "mutation"

    def apply(self, text: str, rng: random.Random) -> str:
        raise NotImplementedError

    def __call__(self, text: str, rng: random.Random) -> str:
        return self.apply(text, rng)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


__all__ = ["Mutation"]
