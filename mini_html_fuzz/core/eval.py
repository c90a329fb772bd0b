"""
评估组件：运行报告导出

把 Monitor 中的运行记录整理为按候选排列的行，并导出为 CSV，
可交给 utils/csv_to_xy_plot.py 绘图。
"""
from __future__ import annotations

import csv
import os
from typing import List, Tuple

from .monitor import Monitor

CSV_HEADER = ["index", "name", "status", "exit_code", "output_len", "wall_time"]


def run_rows(monitor: Monitor) -> List[Tuple]:
    """返回列表：(index, name, status, exit_code, output_len, wall_time)。"""
    return [(r.index, r.name, r.status, r.exit_code, r.output_len, r.wall_time)
            for r in monitor.records]


def export_runs_csv(monitor: Monitor, path: str) -> str:
    """导出 CSV，列见 CSV_HEADER；没有记录时只写表头。"""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for index, name, status, exit_code, output_len, wall_time in run_rows(monitor):
            writer.writerow([index, name, status, "" if exit_code is None else exit_code,
                             output_len, f"{wall_time:.6f}"])
    return path


__all__ = ["CSV_HEADER", "run_rows", "export_runs_csv"]
