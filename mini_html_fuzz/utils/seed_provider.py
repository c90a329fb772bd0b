"""种子提供者：返回本次运行使用的唯一种子输入。"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import ConfigError, DEFAULTS


def load_seed(path: Optional[str] = None, cfg: Optional[dict] = None,
              encoding: str = "utf-8") -> str:
    """优先读取 path 指定的种子文件，否则返回配置中的 seed_input。"""
    if path is None:
        return (cfg or DEFAULTS)["seed_input"]
    p = Path(path)
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read seed file {p}: {e}") from e


__all__ = ["load_seed"]
