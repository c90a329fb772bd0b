"""
变异驱动器

把目录中的每个变异器独立地作用在原始种子上（不串联），生成候选批次。
种子本身作为第一个候选。随机源由调用方显式传入，便于固定种子复现。
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List

from ..mutators.basic_mutator import Mutation


@dataclass(frozen=True)
class Candidate:
    """一个待执行的候选输入。

    字段：
      index: 在批次中的位置（种子为 0）
      name: 'seed' 或产生它的变异器名
      text: 候选输入文本
    """

    index: int
    name: str
    text: str


def drive(seed: str, catalogue: Iterable[Mutation], rng: random.Random) -> List[str]:
    """对 seed 逐个应用目录中的变异器，返回与目录等长、同序的结果列表。"""
    return [mutation.apply(seed, rng) for mutation in catalogue]


def build_batch(seed: str, catalogue: Iterable[Mutation], rng: random.Random) -> List[Candidate]:
    """返回完整候选批次：种子在前，随后每个变异器一个候选。"""
    mutations = list(catalogue)
    batch = [Candidate(index=0, name="seed", text=seed)]
    for i, (mutation, text) in enumerate(zip(mutations, drive(seed, mutations, rng)), start=1):
        batch.append(Candidate(index=i, name=mutation.name, text=text))
    return batch


__all__ = ["Candidate", "drive", "build_batch"]
