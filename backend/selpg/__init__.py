"""
selpg - 按页范围截取文本流

模块结构：
- config/     运行期配置（默认值 / YAML / 环境变量）
- models/     数据模型（页范围、分页策略、运行结果）
- core/       分页核心（读段、计页、选择性拷贝）
- streams/    输入源与输出端（文件/stdin、stdout/打印子进程）
- cli.py      命令行入口
"""

__version__ = "0.1.0"
