"""mutators 子模块

HTML 专用变异器与变异目录（注册表），变异器之间互不依赖，可插件式扩展。
"""

__all__ = [
    "basic_mutator",
    "marker_mutator",
    "content_mutator",
    "tag_mutator",
    "catalogue",
]
