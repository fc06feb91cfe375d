import os
import logging

from .const import FILENAME_DENYLIST, LAUNCHER_DENYLIST

logger = logging.getLogger(__name__)


# --- 通用 IO ---
def _load_set_from_file(filename, default_collection):
    result_set = set(default_collection)

    if os.path.exists(filename):
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith('#'): result_set.add(line)
            return result_set, "加载规则完成"
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"规则文件读取失败 {filename}: {e}")
            return result_set, "加载失败"
    # 文件不存在时只用默认规则，不在当前目录写文件
    return result_set, "使用默认规则"


# --- 具体接口 ---

# 文件名黑名单片段 (默认表 + 用户追加)
def load_denylist(filename=FILENAME_DENYLIST):
    s, m = _load_set_from_file(filename, LAUNCHER_DENYLIST)
    # 默认表顺序在前，追加项排序在后，便于日志阅读
    extra = sorted({x.lower() for x in s} - set(LAUNCHER_DENYLIST))
    return LAUNCHER_DENYLIST + tuple(extra), m

