import os
import logging

from .const import APP_PATHS_ROOTS, UNINSTALL_ROOTS, LAUNCHER_DENYLIST
from .core_heuristic import denied_token
from .core_resolver import resolve_target, resolve_from_folder
from .models import CandidateApp, Source

logger = logging.getLogger(__name__)

# 单个子键读取/解析时可能出现的错误，只跳过该子键
_ITEM_ERRORS = (OSError, ValueError, TypeError)


class WinRegistry:
    """
    基于 winreg 的只读注册表访问。
    root 为 (hive, 子键路径, 视图)，视图 64/32 对应原生/WOW64，None 为默认。
    """

    def __init__(self):
        import winreg
        self.winreg = winreg
        self.hives = {'HKLM': winreg.HKEY_LOCAL_MACHINE, 'HKCU': winreg.HKEY_CURRENT_USER}

    def _open(self, hive, path, view):
        access = self.winreg.KEY_READ
        if view == 64:
            access |= self.winreg.KEY_WOW64_64KEY
        elif view == 32:
            access |= self.winreg.KEY_WOW64_32KEY
        return self.winreg.OpenKey(self.hives[hive], path, 0, access)

    def list_subkeys(self, root):
        hive, path, view = root
        names = []
        with self._open(hive, path, view) as key:
            for i in range(self.winreg.QueryInfoKey(key)[0]):
                try:
                    names.append(self.winreg.EnumKey(key, i))
                except OSError:
                    break
        return names

    def read_values(self, root, subkey):
        """读取子键下全部值，默认值的名称为空字符串"""
        hive, path, view = root
        values = {}
        with self._open(hive, path + "\\" + subkey, view) as key:
            i = 0
            while True:
                try:
                    name, data, _ = self.winreg.EnumValue(key, i)
                except OSError:
                    break
                values[name] = data
                i += 1
        return values


def _text(values, name):
    value = values.get(name)
    return value.strip() if isinstance(value, str) else ''


def _iter_subkey_values(registry, roots):
    """遍历所有根下的子键，yield (子键名, 值字典)；坏子键单独跳过"""
    for root in roots:
        try:
            subkeys = registry.list_subkeys(root)
        except _ITEM_ERRORS as e:
            logger.debug(f"Registry root unavailable {root}: {e}")
            continue
        for subkey in subkeys:
            try:
                values = registry.read_values(root, subkey)
            except _ITEM_ERRORS as e:
                logger.debug(f"Skip registry key {root[0]}\\{root[1]}\\{subkey}: {e}")
                continue
            yield subkey, values


# --- App Paths ---
def _resolve_app_path(subkey, values):
    target = resolve_target(values.get(''))
    if target: return target

    path_value = _text(values, 'Path')
    target = resolve_target(path_value)
    if target: return target

    # Path 通常只是所在目录，子键名才是 exe 文件名
    folder = os.path.expandvars(path_value.strip('"; '))
    if folder and os.path.isdir(folder):
        return resolve_target(os.path.join(folder, subkey))
    return None


def read_app_paths(registry, roots=APP_PATHS_ROOTS):
    results = []
    for subkey, values in _iter_subkey_values(registry, roots):
        try:
            target = _resolve_app_path(subkey, values)
        except _ITEM_ERRORS as e:
            logger.debug(f"Skip App Paths entry '{subkey}': {e}")
            continue
        if not target: continue
        name = os.path.splitext(os.path.basename(target))[0]
        results.append(CandidateApp(name, target, Source.APP_PATHS))
    logger.info(f"App Paths: {len(results)} candidate(s)")
    return results


# --- Uninstall ---
def read_uninstall(registry, roots=UNINSTALL_ROOTS, denylist=LAUNCHER_DENYLIST):
    """
    DisplayName + DisplayIcon 解析成功即生成记录；
    图标解析失败或指向卸载器等黑名单程序时，回退到 InstallLocation 目录扫描
    (以 DisplayName 为提示)。
    缺名称或缺路径的条目 (补丁、运行库等) 直接跳过。
    """
    results = []
    for subkey, values in _iter_subkey_values(registry, roots):
        try:
            display_name = _text(values, 'DisplayName')
            if not display_name: continue
            if values.get('SystemComponent') == 1: continue

            target = resolve_target(values.get('DisplayIcon'))
            # Inno Setup 等常把图标设为 unins000.exe
            if target and denied_token(target, denylist):
                target = None
            if not target:
                target = resolve_from_folder(_text(values, 'InstallLocation'), display_name, denylist)
        except _ITEM_ERRORS as e:
            logger.debug(f"Skip Uninstall entry '{subkey}': {e}")
            continue
        if not target: continue
        results.append(CandidateApp(display_name, target, Source.UNINSTALL))
    logger.info(f"Uninstall: {len(results)} candidate(s)")
    return results
