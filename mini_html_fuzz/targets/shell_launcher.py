"""
进程启动器

根据平台选择命令解释器：Windows 使用 `cmd.exe /c`，其它平台使用 `/bin/sh -c`，
用户给出的命令字符串整体作为单个参数传入；stderr 合并到 stdout，工作目录固定。
"""
from __future__ import annotations

import subprocess
import sys
from typing import List, Optional


def is_windows(platform: Optional[str] = None) -> bool:
    return (platform or sys.platform).lower().startswith("win")


class ShellLauncher:
    """为每次运行启动一个新的 shell 子进程。"""

    def __init__(self, workdir: str = "./", platform: Optional[str] = None):
        self.workdir = workdir
        self.platform = platform or sys.platform

    def argv_for(self, command: str) -> List[str]:
        if is_windows(self.platform):
            return ["cmd.exe", "/c", command]
        return ["/bin/sh", "-c", command]

    def start(self, command: str) -> subprocess.Popen:
        """启动进程：stdin 管道，stderr 重定向到 stdout。

        非 Windows 平台上子进程放入新的进程组，超时时可以整组 kill。
        """
        return subprocess.Popen(self.argv_for(command),
                                stdin=subprocess.PIPE,
                                stdout=subprocess.PIPE,
                                stderr=subprocess.STDOUT,
                                cwd=self.workdir,
                                start_new_session=not is_windows(self.platform))


__all__ = ["ShellLauncher", "is_windows"]
