"""
判定逻辑 / 驱动循环

按顺序执行候选批次，每个候选一个 Running 状态，外加终止状态：
- 输出为空：报告“输入被拒绝”，继续下一个；
- 输出非空：报告输出，继续下一个；
- 退出码非零：进入 halted 终止状态，报告退出码并停止，后续候选不再执行；
- 启动/I/O 失败或超时：报告错误，视为无结论，继续下一个；
- 全部候选执行完毕：进入 done 状态，退出码为 0。

循环本身不会结束进程，而是把终止状态以 FuzzOutcome 返回给调用方。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .driver import Candidate
from .monitor import Monitor

DONE = "done"
HALTED = "halted"


@dataclass(frozen=True)
class FuzzOutcome:
    """驱动循环的终止状态。

    字段：
      state: 'done' | 'halted'
      exit_code: done 时为 0，halted 时为目标的非零退出码
      candidate_index: halted 时触发崩溃的候选序号
      runs: 实际执行的候选数量
    """

    state: str
    exit_code: int
    candidate_index: Optional[int] = None
    runs: int = 0

    @property
    def halted(self) -> bool:
        return self.state == HALTED


def shell_exit_code(code: int) -> int:
    """被信号 N 终止时 returncode 为 -N，按 shell 惯例换算为 128 + N。"""
    return 128 - code if code < 0 else code


def run_batch(candidates: Iterable[Candidate], target, monitor: Optional[Monitor] = None) -> FuzzOutcome:
    """依次执行候选，遇到第一个非零退出码即停止（first crash wins）。"""
    monitor = monitor or Monitor()
    runs = 0
    for cand in candidates:
        monitor.report_candidate(cand)
        result = target.run(cand.text)
        runs += 1
        monitor.report_result(cand, result)
        if result.crashed:
            return FuzzOutcome(state=HALTED, exit_code=shell_exit_code(result.exit_code),
                               candidate_index=cand.index, runs=runs)
    return FuzzOutcome(state=DONE, exit_code=0, runs=runs)


__all__ = ["FuzzOutcome", "run_batch", "shell_exit_code", "DONE", "HALTED"]
