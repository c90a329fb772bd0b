#!/usr/bin/env python3
"""
csv_to_xy_plot.py

小工具：把 run_times.csv（由 core/eval.py 导出）画成每个候选的柱状/折线图。

用法示例:
  python -m mini_html_fuzz.utils.csv_to_xy_plot out/run_times.csv --y wall_time -o runs.png

X 轴为候选（按 index 排列，刻度显示变异器名），Y 轴为任一数值列（wall_time / output_len / exit_code）。
崩溃的候选用不同颜色标出。
"""
from __future__ import annotations
import argparse
import csv
import sys
from typing import List, Optional

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

STATUS_COLORS = {
    'rejected': 'tab:gray',
    'output': 'tab:blue',
    'crash': 'tab:red',
    'error': 'tab:orange',
    'hang': 'tab:purple',
}


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description='run_times.csv -> per-candidate plot')
    p.add_argument('csvfile', help='输入 CSV 文件路径')
    p.add_argument('--y', default='wall_time', help='Y 列名（默认 wall_time）')
    p.add_argument('-o', '--output', default='runs.png', help='输出文件，例如 runs.png 或 runs.pdf')
    p.add_argument('--kind', choices=['bar', 'line'], default='bar', help='图类型')
    p.add_argument('--title', default='', help='图标题')
    p.add_argument('--dpi', type=int, default=150, help='输出分辨率 DPI')
    p.add_argument('--ylog', action='store_true', help='Y 轴对数刻度')
    return p.parse_args(argv)


def read_rows(path: str) -> List[dict]:
    with open(path, newline='', encoding='utf-8') as f:
        return list(csv.DictReader(f))


def to_float(v) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        return float('nan')


def plot_runs(rows: List[dict], args: argparse.Namespace) -> None:
    labels = [r.get('name', '') for r in rows]
    xs = list(range(len(rows)))
    ys = [to_float(r.get(args.y)) for r in rows]
    colors = [STATUS_COLORS.get(r.get('status', ''), 'tab:gray') for r in rows]

    fig, ax = plt.subplots(figsize=(max(6, len(rows) * 0.6), 4))
    if args.kind == 'line':
        ax.plot(xs, ys, color='tab:blue', marker=None)
        ax.scatter(xs, ys, c=colors, zorder=3)
    else:
        ax.bar(xs, ys, color=colors)
    ax.set_xticks(xs)
    ax.set_xticklabels(labels, rotation=45, ha='right')
    ax.set_ylabel(args.y)
    if args.title:
        ax.set_title(args.title)
    if args.ylog:
        ax.set_yscale('log')
    ax.grid(True, axis='y')
    fig.tight_layout()
    fig.savefig(args.output, dpi=args.dpi)
    plt.close(fig)


def main(argv: Optional[list] = None) -> int:
    args = parse_args(argv)
    rows = read_rows(args.csvfile)
    if not rows:
        print('CSV 内容为空或无法读取', file=sys.stderr)
        return 2
    if args.y not in rows[0]:
        print(f'找不到列: {args.y}', file=sys.stderr)
        return 2
    plot_runs(rows, args)
    return 0


if __name__ == '__main__':
    sys.exit(main())
