import os
import logging

from .const import LAUNCHER_DENYLIST
from .core_dedup import aggregate, exclude_existing
from .core_registry import WinRegistry, read_app_paths, read_uninstall
from .core_scan import default_scan_roots, scan_folders
from .core_writer import write_launchers
from .models import RecoveryReport, RecoveryError
from .utils_system import programs_root, scan_existing_launchers, is_user_admin

logger = logging.getLogger(__name__)


def _default_registry():
    if os.name != 'nt':
        logger.warning("当前平台没有注册表，仅执行目录扫描")
        return None
    return WinRegistry()


def discover_candidates(options, registry=None, scan_roots=None, programs_dir=None,
                        denylist=LAUNCHER_DENYLIST, check_stop_callback=None):
    """
    汇总三个来源 -> 去重 -> 去掉已有快捷方式的程序。
    返回 (候选列表, 已有快捷方式名称集合)
    """
    if programs_dir is None: programs_dir = programs_root(options.all_users)
    if registry is None: registry = _default_registry()
    if scan_roots is None: scan_roots = default_scan_roots()

    existing = scan_existing_launchers(programs_dir)

    raw = []
    if registry is not None:
        raw += read_app_paths(registry)
        raw += read_uninstall(registry, denylist=denylist)
    roots = list(scan_roots) + list(options.extra_scan_roots)
    raw += scan_folders(roots, options.inspection_budget, denylist, check_stop_callback)

    merged = aggregate(raw)
    candidates = exclude_existing(merged, existing)
    logger.info(f"Candidates: {len(raw)} raw, {len(merged)} unique, {len(candidates)} without launcher")
    return candidates, existing


def run_recovery(options, selector=None, registry=None, shell=None, scan_roots=None, programs_dir=None,
                 denylist=LAUNCHER_DENYLIST, check_stop_callback=None, is_admin=None):
    """
    完整流程。selector(candidates) 返回要生成的列表 (可改名)，返回 None 表示取消。
    取消与空选择一样，不写任何文件。
    """
    if is_admin is None: is_admin = is_user_admin()
    if options.all_users and not is_admin:
        logger.warning("所有用户模式需要管理员权限，写入可能会失败")

    if programs_dir is None: programs_dir = programs_root(options.all_users)
    destination = os.path.join(programs_dir, options.destination_subfolder)

    candidates, existing = discover_candidates(options, registry, scan_roots, programs_dir,
                                               denylist, check_stop_callback)
    report = RecoveryReport(candidates=candidates, existing_names=existing,
                            destination=destination, preview=options.preview)
    if options.preview:
        return report

    if options.auto:
        chosen = list(candidates)
    elif not candidates:
        chosen = []
    else:
        if selector is None:
            raise RecoveryError("未指定选择方式: 请使用自动模式或提供选择界面")
        chosen = selector(candidates)

    if chosen is None:
        report.cancelled = True
        return report
    report.selected = list(chosen)
    if not report.selected:
        return report

    report.results = write_launchers(report.selected, destination, shell)
    logger.info(f"Launchers: {len(report.succeeded)} written, {len(report.failed)} failed")
    return report
