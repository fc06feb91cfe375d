import os
import logging

from .const import ILLEGAL_NAME_CHARS, LAUNCHER_EXTENSION
from .models import LauncherWriteResult, WriteFailure

logger = logging.getLogger(__name__)

_ILLEGAL_TABLE = str.maketrans({c: ' ' for c in ILLEGAL_NAME_CHARS})


def create_shell():
    import win32com.client
    return win32com.client.Dispatch("WScript.Shell")


def sanitize_name(name, target_path=''):
    safe = (name or '').translate(_ILLEGAL_TABLE).strip()
    if not safe:
        safe = os.path.splitext(os.path.basename(target_path))[0]
    return safe


def write_launcher(name, target_path, destination, shell=None):
    """
    在 destination 下生成指向 target_path 的快捷方式。
    返回 LauncherWriteResult，失败原因写在 failure 里，不抛异常。
    """
    result = LauncherWriteResult(name, target_path)

    if not target_path or not os.path.isfile(target_path):
        result.failure = WriteFailure.TARGET_MISSING
        result.detail = f"目标不存在: {target_path}"
        return result

    try:
        os.makedirs(destination, exist_ok=True)
    except OSError as e:
        result.failure = WriteFailure.DESTINATION_UNAVAILABLE
        result.detail = f"无法创建目录 {destination}: {e}"
        return result

    shortcut_path = os.path.join(destination, sanitize_name(name, target_path) + LAUNCHER_EXTENSION)
    result.launcher_path = shortcut_path
    if os.path.exists(shortcut_path):
        result.failure = WriteFailure.ALREADY_EXISTS
        result.detail = f"已存在: {os.path.basename(shortcut_path)}"
        return result

    try:
        if shell is None: shell = create_shell()
        shortcut = shell.CreateShortCut(shortcut_path)
        shortcut.TargetPath = target_path
        shortcut.WorkingDirectory = os.path.dirname(target_path)
        shortcut.IconLocation = f"{target_path},0"
        shortcut.Save()
    except Exception as e:  # COM 错误类型来自 pywintypes，这里统一按写入失败处理
        result.failure = WriteFailure.WRITE_FAILED
        result.detail = f"失败: {os.path.basename(shortcut_path)} | {e}"
        return result

    result.detail = f"成功: {os.path.basename(shortcut_path)}"
    return result


def write_launchers(programs, destination, shell=None):
    """逐个写入，单个失败不影响后续；结果逐条返回"""
    results = []
    for p in programs:
        result = write_launcher(p.name, p.target_path, destination, shell)
        if result.ok:
            logger.info(result.detail)
        else:
            logger.warning(f"{result.failure}: {p.name} -> {p.target_path} ({result.detail})")
        results.append(result)
    return results
