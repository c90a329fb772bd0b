"""
配置模块

提供默认配置（DEFAULTS）以及从 JSON 文件加载覆盖项的接口。
配置错误统一抛出 ConfigError，由 CLI 在任何变异/执行工作开始前报告。
"""
from __future__ import annotations

import codecs
import json
from typing import Optional


class ConfigError(RuntimeError):
    """配置错误：目标命令不存在、种子文件不可读、配置文件格式错误等。"""


DEFAULTS = {
    # 唯一的种子输入（格式良好的 HTML 片段）
    "seed_input": '<html a="value">...</html>',
    # 被测命令相对的工作目录
    "workdir": "./",
    # 候选输入写入 stdin / 解码输出时使用的编码
    "encoding": "utf-8",
    # 单次运行超时（秒）；None 表示一直等待目标退出
    "timeout": None,
}

# 各变异器随机 token 的最大长度
DEFAULTS.update({
    "tag_token_max": 24,
    "content_token_max": 100,
    "attr_name_token_max": 50,
    "attr_value_token_max": 12,
    # 括号抖动的最大重复次数（在 1..N 中均匀抽取）
    "brace_repeat_max": 2,
})

POSITIVE_INT_KEYS = ("tag_token_max", "content_token_max", "attr_name_token_max",
                     "attr_value_token_max", "brace_repeat_max")


def load_config(path: Optional[str] = None) -> dict:
    """返回 DEFAULTS 的副本；若给出 path，则用 JSON 文件中的对象覆盖对应项。

    JSON 顶层必须是对象，且只允许出现 DEFAULTS 中已有的键。
    """
    cfg = DEFAULTS.copy()
    if path is None:
        return cfg
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a JSON object")
    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
    cfg.update(data)
    validate_config(cfg)
    return cfg


def validate_config(cfg: dict) -> None:
    """检查各项取值：长度上限/重复次数为 >= 1 的整数，timeout 为 None 或正数。"""
    for key in POSITIVE_INT_KEYS:
        value = cfg[key]
        # bool 是 int 的子类，这里不接受
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigError(f"{key} must be an integer >= 1, got {value!r}")
    timeout = cfg["timeout"]
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float))
                                or timeout <= 0):
        raise ConfigError(f"timeout must be null or a number > 0, got {timeout!r}")
    for key in ("seed_input", "workdir", "encoding"):
        if not isinstance(cfg[key], str):
            raise ConfigError(f"{key} must be a string, got {cfg[key]!r}")
    try:
        codecs.lookup(cfg["encoding"])
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {cfg['encoding']!r}") from e


__all__ = ["ConfigError", "DEFAULTS", "load_config", "validate_config"]
