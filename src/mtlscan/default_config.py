from typing import Any, Dict
CONFIG_VERSION = "1.0.0"
DEFAULTS: Dict[str, Any] = {
    # MTL Scanner Defaults
    "COLOR_TOLERANCE": 1e-6,          # MTLColor 分量比较容差
    "DEFAULT_ENCODING": "utf-8",      # 读取 .mtl 文件的默认编码
    "PROGRESS_MIN_LINES": 2000,       # 行数 >= 该阈值时才显示进度条
    "MTL_SUFFIXES": (".mtl",),        # scan_file 接受的文件后缀
}
