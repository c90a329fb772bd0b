"""
mini_html_fuzz

面向 HTML 输入的最小变异式模糊测试工具。

子模块：
- core: 变异驱动器、判定循环、运行监控与报告导出
- mutators: HTML 变异器与变异目录
- targets: 被测命令适配器（平台 shell 启动器 + stdin 执行器）
- utils: 配置、种子提供者、随机 token 与绘图小工具
"""

__all__ = [
    "core",
    "mutators",
    "targets",
    "utils",
]

__version__ = "0.1.0"
