"""mini_html_fuzz - fuzzer 入口模块。
"""
from __future__ import annotations

import sys
import argparse
import random
from typing import Optional
from pathlib import Path

# 兼容性：允许直接用 `python fuzzer.py` 运行而不报相对导入错误。
if __name__ == "__main__" and __package__ is None:
	import os as _os
	_this_dir = _os.path.dirname(_os.path.abspath(__file__))
	_pkg_parent = _os.path.dirname(_this_dir)
	if _pkg_parent not in sys.path:
		sys.path.insert(0, _pkg_parent)
	__package__ = "mini_html_fuzz"


from .core.driver import build_batch
from .core.eval import export_runs_csv
from .core.monitor import Monitor
from .core.verdict import FuzzOutcome, run_batch
from .mutators.catalogue import default_catalogue
from .targets.command_target import CommandTarget
from .targets.shell_launcher import ShellLauncher
from .utils.config import ConfigError, load_config, validate_config
from .utils.seed_provider import load_seed


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="mini_html_fuzz - mutation fuzzer for HTML-consuming commands")
	parser.add_argument("command", help="command to fuzz; must exist as a file relative to the working directory")
	parser.add_argument("--workdir", default=None, help="working directory for the command (default: ./)")
	parser.add_argument("--seed-file", default=None, help="read the seed input from this file instead of the built-in one")
	parser.add_argument("--rng-seed", type=int, default=None, help="seed for the random source (reproducible batches)")
	parser.add_argument("--timeout", type=float, default=None, help="per-run timeout in seconds (default: wait forever)")
	parser.add_argument("--outdir", default=None, help="write run_records.json and run_times.csv into this directory")
	parser.add_argument("--config", default=None, help="JSON file overriding the default configuration")
	return parser.parse_args(argv)


def check_command(command: str, workdir: str) -> Path:
	"""目标命令必须作为文件存在于工作目录下，否则抛出 ConfigError。"""
	path = Path(workdir, command)
	if not path.exists():
		raise ConfigError(f"Could not find command '{command}'.")
	return path


def fuzz(command: str, cfg: dict, seed: str, rng: random.Random,
		 monitor: Optional[Monitor] = None) -> FuzzOutcome:
	"""构建候选批次并依次执行，返回终止状态。"""
	monitor = monitor or Monitor()
	launcher = ShellLauncher(workdir=cfg["workdir"])
	target = CommandTarget(command, launcher=launcher, encoding=cfg["encoding"],
						   timeout=cfg["timeout"])
	monitor.report_command(target.argv)

	candidates = build_batch(seed, default_catalogue(cfg), rng)
	return run_batch(candidates, target, monitor)


def main(argv: Optional[list] = None) -> int:
	"""解析参数、校验目标命令并运行一轮模糊测试，返回进程退出码。"""
	args = parse_args(argv)

	try:
		cfg = load_config(args.config)
		if args.workdir is not None:
			cfg["workdir"] = args.workdir
		if args.timeout is not None:
			cfg["timeout"] = args.timeout
		validate_config(cfg)
		check_command(args.command, cfg["workdir"])
		seed = load_seed(args.seed_file, cfg, encoding=cfg["encoding"])
	except ConfigError as e:
		print(f"error: {e}", file=sys.stderr)
		return 1

	monitor = Monitor()
	rng = random.Random(args.rng_seed)
	outcome = fuzz(args.command, cfg, seed, rng, monitor)

	if args.outdir:
		out_dir = Path(args.outdir)
		try:
			records_path = monitor.export_records(str(out_dir / "run_records.json"))
			csv_path = export_runs_csv(monitor, str(out_dir / "run_times.csv"))
			print(f"run records exported to: {records_path}, {csv_path}")
		except OSError as e:
			print(f"error: failed to export run reports to {out_dir}: {e}", file=sys.stderr)

	monitor.report_finish(outcome.exit_code)
	return outcome.exit_code


if __name__ == "__main__":
	sys.exit(main())
