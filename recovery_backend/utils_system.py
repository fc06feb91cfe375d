# recovery_backend/utils_system.py
import os
import ctypes
import logging

from .const import LAUNCHER_EXTENSION, START_MENU_SUBPATH
from .models import RecoveryError

logger = logging.getLogger(__name__)


def normalize_path(path):
    """去重用的路径键: 解析链接/联接点后统一小写"""
    if not path: return ""
    return os.path.normpath(os.path.realpath(path)).lower()


def is_user_admin():
    if os.name != 'nt': return False
    try:
        return bool(ctypes.windll.shell32.IsUserAnAdmin())
    except (AttributeError, OSError):
        return False


def programs_root(all_users=False):
    """开始菜单 Programs 目录: 所有用户 -> %ProgramData%，当前用户 -> %APPDATA%"""
    var = 'ProgramData' if all_users else 'APPDATA'
    base = os.environ.get(var)
    if not base:
        raise RecoveryError(f"无法定位开始菜单目录: 环境变量 %{var}% 未设置")
    return os.path.join(base, START_MENU_SUBPATH)


def scan_existing_launchers(folder_path):
    """递归收集已存在的快捷方式名称 (小写、去扩展名)"""
    names = set()
    if not folder_path or not os.path.isdir(folder_path): return names
    for root, _, files in os.walk(folder_path):
        for file in files:
            stem, ext = os.path.splitext(file)
            if ext.lower() == LAUNCHER_EXTENSION:
                names.add(stem.lower())
    logger.debug(f"Existing launchers under '{folder_path}': {len(names)}")
    return names

