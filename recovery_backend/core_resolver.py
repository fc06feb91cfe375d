import os
import re
import logging

from .const import LAUNCHER_DENYLIST, FOLDER_FALLBACK_LIMIT
from .core_heuristic import is_executable_name, is_plausible_launcher

logger = logging.getLogger(__name__)

# 末尾的图标索引, 例如 "foo.exe,0" / "foo.dll,-101"
_ICON_INDEX_RE = re.compile(r',\s*-?\d+$')
_QUOTE_CHARS = ' \t\r\n"\''


def canonical_path(path):
    return os.path.realpath(os.path.abspath(path))


def resolve_target(raw):
    """
    把注册表里的原始值 (裸路径 / 带引号 / 带 ",索引" / 指向 .ico) 解析成
    一个真实存在的 exe 绝对路径。解析失败返回 None，不抛异常。
    """
    if not isinstance(raw, str):
        return None
    try:
        value = raw.strip(_QUOTE_CHARS)
        value = _ICON_INDEX_RE.sub('', value).strip(_QUOTE_CHARS)
        if not value:
            return None
        value = os.path.expandvars(value)

        value_lower = value.lower()
        idx = value_lower.find('.exe')
        if idx >= 0:
            # 截掉安装程序追加的参数等尾巴
            value = value[:idx + 4]
        elif value_lower.endswith('.ico'):
            value = value[:-4] + '.exe'
        else:
            return None

        value = value.strip(_QUOTE_CHARS)
        if not os.path.isfile(value):
            return None
        return canonical_path(value)
    except (OSError, ValueError) as e:
        logger.debug(f"Resolve failed for {raw!r}: {e}")
        return None


def iter_executables(folder, limit=None, check_stop_callback=None):
    """
    按确定顺序递归枚举 folder 下的可执行文件，yield (完整路径, 大小)。
    读不到大小的文件同样计入 limit，大小为 None。
    limit: 最多检查的文件数 (None 不限)
    """
    inspected = 0
    for root, dirs, files in os.walk(folder, topdown=True):
        if check_stop_callback and check_stop_callback(): return
        dirs.sort(key=str.lower)
        for file in sorted(files, key=str.lower):
            if not is_executable_name(file): continue
            if limit is not None and inspected >= limit: return
            if check_stop_callback and check_stop_callback(): return
            inspected += 1

            full = os.path.join(root, file)
            try:
                size = os.path.getsize(full)
            except OSError as e:
                logger.debug(f"Skip unreadable '{full}': {e}")
                size = None
            yield full, size


def resolve_from_folder(folder, hint=None, denylist=LAUNCHER_DENYLIST, limit=FOLDER_FALLBACK_LIMIT):
    """
    InstallLocation 回退: 在目录中挑出最像主程序的 exe。
    1. 文件名包含 hint 的优先 (同样命中时取最大的)
    2. 否则取最大的那个
    """
    if not isinstance(folder, str) or not folder.strip():
        return None
    folder = os.path.expandvars(folder.strip(_QUOTE_CHARS))
    if not os.path.isdir(folder):
        return None

    hint_lower = hint.strip().lower() if isinstance(hint, str) else ''
    best_hint = None  # (size, path)
    best_any = None
    try:
        for full, size in iter_executables(folder, limit):
            if size is None: continue
            if not is_plausible_launcher(full, size, denylist): continue
            # 严格大于: 大小相同时保留先遇到的
            if best_any is None or size > best_any[0]:
                best_any = (size, full)
            if hint_lower and hint_lower in os.path.basename(full).lower():
                if best_hint is None or size > best_hint[0]:
                    best_hint = (size, full)
    except OSError as e:
        logger.debug(f"Folder fallback failed for '{folder}': {e}")
        return None

    chosen = best_hint or best_any
    if chosen is None:
        return None
    return canonical_path(chosen[1])
