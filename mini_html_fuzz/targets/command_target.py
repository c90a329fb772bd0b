"""
CommandTarget：把候选输入交给被测命令执行并收集结果。

职责：
- 每个候选都通过 launcher 启动一个新进程（不复用进程），
- 把候选文本编码后整体写入 stdin 并关闭 stdin，
- 读取合并后的 stdout/stderr 直到结束并规范化换行，
- 等待进程退出并取得退出码，
- 启动或 I/O 失败时返回 status='error' 的结果而不抛出异常。
"""
from __future__ import annotations

import os
import re
import signal
import subprocess
import time
from dataclasses import dataclass
from typing import Optional

from .shell_launcher import ShellLauncher, is_windows

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass
class CommandTargetResult:
    """一次运行的结果。

    字段：
    - status: 'rejected'|'output'|'crash'|'error'|'hang'
    - exit_code: 退出码（若可得）
    - output: 合并后的输出文本（换行已规范化）
    - wall_time: 运行耗时（秒）
    - error: status 为 error/hang 时的说明
    """

    status: str
    exit_code: Optional[int] = None
    output: str = ""
    wall_time: float = 0.0
    error: Optional[str] = None

    @property
    def crashed(self) -> bool:
        return self.status == "crash"


def normalize_output(text: str) -> str:
    """按 \\r\\n、\\r、\\n 切分行，每行以 os.linesep 结尾后重新拼接。"""
    if not text:
        return ""
    lines = _LINE_BREAK_RE.split(text)
    # 以换行结尾时 split 会多出一个空串，它不是一行
    if lines and lines[-1] == "":
        lines.pop()
    return "".join(line + os.linesep for line in lines)


class CommandTarget:
    """被测命令的执行适配器。

    参数：
    - command: 传给 shell 的命令字符串
    - launcher: 进程启动器（默认在当前目录使用平台 shell）
    - encoding: 写入 stdin 与解码输出时使用的编码
    - timeout: 单次运行超时（秒），None 表示一直等待
    """

    def __init__(self, command: str, launcher: Optional[ShellLauncher] = None,
                 encoding: str = "utf-8", timeout: Optional[float] = None):
        self.command = command
        self.launcher = launcher or ShellLauncher()
        self.encoding = encoding
        self.timeout = timeout

    @property
    def argv(self):
        return self.launcher.argv_for(self.command)

    def run(self, candidate: str) -> CommandTargetResult:
        """执行一次目标并返回结果。"""
        start = time.time()
        try:
            proc = self.launcher.start(self.command)
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            return CommandTargetResult(status="error", error=f"failed to start {self.command!r}: {e}",
                                       wall_time=time.time() - start)

        try:
            # communicate 会写入全部输入、关闭 stdin，再读取输出直到 EOF
            out, _ = proc.communicate(input=candidate.encode(self.encoding), timeout=self.timeout)
        except subprocess.TimeoutExpired:
            self._kill(proc)
            out, _ = proc.communicate()
            return CommandTargetResult(status="hang", exit_code=proc.returncode,
                                       output=self._decode(out),
                                       wall_time=time.time() - start,
                                       error=f"timed out after {self.timeout}s")
        except (OSError, ValueError) as e:
            self._kill(proc)
            proc.wait()
            self._close_pipes(proc)
            return CommandTargetResult(status="error", exit_code=proc.returncode,
                                       wall_time=time.time() - start, error=str(e))

        exit_code = proc.returncode
        output = self._decode(out)
        if exit_code != 0:
            status = "crash"
        elif output:
            status = "output"
        else:
            status = "rejected"
        return CommandTargetResult(status=status, exit_code=exit_code, output=output,
                                   wall_time=time.time() - start)

    def _decode(self, data: Optional[bytes]) -> str:
        if not data:
            return ""
        return normalize_output(data.decode(self.encoding, errors="replace"))

    @staticmethod
    def _close_pipes(proc: subprocess.Popen) -> None:
        for stream in (proc.stdin, proc.stdout):
            if stream is not None:
                try:
                    stream.close()
                except OSError:
                    pass

    def _kill(self, proc: subprocess.Popen) -> None:
        # 先尝试整组 kill（shell 可能派生了子进程），失败再单独 kill
        if proc.poll() is not None:
            return
        try:
            if not is_windows(self.launcher.platform):
                os.killpg(proc.pid, signal.SIGKILL)
            else:
                proc.kill()
        except ProcessLookupError:
            pass
        except OSError:
            proc.kill()


__all__ = ["CommandTarget", "CommandTargetResult", "normalize_output"]
