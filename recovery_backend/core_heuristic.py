import os
import logging

from .const import MIN_LAUNCHER_SIZE, LAUNCHER_DENYLIST, EXECUTABLE_EXTENSIONS

logger = logging.getLogger(__name__)


def is_executable_name(file_name):
    return file_name.lower().endswith(EXECUTABLE_EXTENSIONS)


def denied_token(file_name, denylist=LAUNCHER_DENYLIST):
    """返回文件名命中的第一个黑名单片段，未命中返回 None"""
    name_lower = os.path.basename(file_name).lower()
    for token in denylist:
        if token in name_lower:
            return token
    return None


def is_plausible_launcher(path, size=None, denylist=LAUNCHER_DENYLIST):
    """
    判断文件是否像一个面向用户的主程序。
    宁可漏掉真实程序，也不能把卸载器/安装器当成程序。
    size: 调用方已 stat 过时可直接传入，避免重复读取
    """
    if size is None:
        try:
            size = os.path.getsize(path)
        except OSError as e:
            logger.debug(f"Stat failed for '{path}': {e}")
            return False

    if size < MIN_LAUNCHER_SIZE:
        return False

    token = denied_token(path, denylist)
    if token:
        logger.debug(f"Rejected '{os.path.basename(path)}' (matches '{token}')")
        return False
    return True
