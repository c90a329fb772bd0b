"""
变异目录（注册表）

按声明顺序保存具名变异器。驱动器只依赖 MutationCatalogue 的迭代接口，
新增变异器只需 register，无需修改驱动器。
"""
from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from .basic_mutator import Mutation
from .content_mutator import replace_attribute_name, replace_attribute_value, replace_inner_content
from .marker_mutator import (
    jitter_close_braces,
    jitter_open_braces,
    strip_close_marker,
    strip_closing_bracket,
    strip_open_marker,
)
from .tag_mutator import DoubleOuterTagMutator, DoubleRandomTagMutator, ReplaceTagNamesMutator
from ..utils.config import DEFAULTS


class MutationCatalogue:
    """有序、按名字唯一的变异器集合。"""

    def __init__(self, mutations: Optional[List[Mutation]] = None) -> None:
        self._order: List[Mutation] = []
        self._by_name: Dict[str, Mutation] = {}
        for m in mutations or []:
            self.register(m)

    def register(self, mutation: Mutation) -> Mutation:
        """把变异器追加到目录末尾；重名时抛出 ValueError。"""
        if mutation.name in self._by_name:
            raise ValueError(f"mutation already registered: {mutation.name}")
        self._order.append(mutation)
        self._by_name[mutation.name] = mutation
        return mutation

    def get(self, name: str) -> Mutation:
        return self._by_name[name]

    @property
    def names(self) -> List[str]:
        return [m.name for m in self._order]

    def __iter__(self) -> Iterator[Mutation]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


def default_catalogue(cfg: Optional[dict] = None) -> MutationCatalogue:
    """构建包含 11 个变异器的默认目录，token 长度上限取自配置。"""
    cfg = cfg or DEFAULTS
    return MutationCatalogue([
        strip_open_marker(),
        strip_close_marker(),
        strip_closing_bracket(),
        jitter_open_braces(cfg["brace_repeat_max"]),
        jitter_close_braces(cfg["brace_repeat_max"]),
        ReplaceTagNamesMutator(cfg["tag_token_max"]),
        replace_inner_content(cfg["content_token_max"]),
        replace_attribute_name(cfg["attr_name_token_max"]),
        replace_attribute_value(cfg["attr_value_token_max"]),
        DoubleOuterTagMutator(),
        DoubleRandomTagMutator(cfg["tag_token_max"]),
    ])


__all__ = ["MutationCatalogue", "default_catalogue"]
