"""
运行结果监控组件

功能：
- 在控制台打印每个候选的输入、输出（或“输入被拒绝”）以及最终退出码；
- 记录每次执行的元数据（序号、变异器名、状态、退出码、输出长度、耗时）；
- 提供导出接口供评估模块使用（JSON）。
"""
from __future__ import annotations

import json
import os
import sys
import time
from dataclasses import dataclass, asdict
from typing import List, Optional, TextIO

REJECTED_MESSAGE = "Not a valid HTML File (input rejected)"


@dataclass
class RunRecord:
    timestamp: float
    index: int
    name: str
    status: str
    exit_code: Optional[int]
    output_len: int
    wall_time: float


class Monitor:
    """监控器：负责控制台报告并维护运行历史。"""

    def __init__(self, stream: Optional[TextIO] = None, err_stream: Optional[TextIO] = None):
        self._stream = stream
        self._err_stream = err_stream
        self.records: List[RunRecord] = []

    # 默认在调用时解析 sys.stdout/sys.stderr，便于测试中被替换
    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    @property
    def err_stream(self) -> TextIO:
        return self._err_stream or sys.stderr

    def report_command(self, argv: List[str]) -> None:
        print(f"Command: {argv}", file=self.stream)

    def report_candidate(self, candidate) -> None:
        print(f"Running with Input: {candidate.text}", file=self.stream)

    def report_result(self, candidate, result) -> RunRecord:
        """打印一次运行的结论并记录。返回创建的 RunRecord。"""
        if result.status in ("error", "hang"):
            print(f"{candidate.name}: {result.error}", file=self.err_stream)
        elif result.output:
            print(f"Output: {result.output}", file=self.stream)
        else:
            print(REJECTED_MESSAGE + "\n", file=self.stream)

        rec = RunRecord(timestamp=time.time(), index=candidate.index, name=candidate.name,
                        status=result.status, exit_code=result.exit_code,
                        output_len=len(result.output or ""), wall_time=result.wall_time)
        self.records.append(rec)
        return rec

    def report_finish(self, exit_code: int) -> None:
        print(f"Program finished with exit Code {exit_code}", file=self.stream)

    def export_records(self, path: str) -> str:
        """把记录导出为 JSON 文件，返回文件路径。"""
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump([asdict(r) for r in self.records], f, ensure_ascii=False, indent=2)
        return path


__all__ = ["Monitor", "RunRecord", "REJECTED_MESSAGE"]
