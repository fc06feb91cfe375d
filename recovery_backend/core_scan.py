import os
import logging

from .const import LAUNCHER_DENYLIST
from .core_heuristic import is_plausible_launcher
from .core_resolver import canonical_path, iter_executables
from .models import CandidateApp, Source
from .utils_system import normalize_path

logger = logging.getLogger(__name__)


def default_scan_roots():
    roots = []
    for var in ('ProgramFiles', 'ProgramFiles(x86)'):
        value = os.environ.get(var)
        if value: roots.append(value)
    local = os.environ.get('LOCALAPPDATA')
    if local: roots.append(os.path.join(local, 'Programs'))
    return roots


def scan_folders(roots, budget=None, denylist=LAUNCHER_DENYLIST, check_stop_callback=None):
    """
    递归扫描若干根目录下的 exe。
    budget: 所有根目录合计最多"检查"多少个文件 (不是最多接受多少个)，None 不限
    """
    results = []
    inspected = 0
    seen_roots = set()

    for root in roots:
        if check_stop_callback and check_stop_callback(): break
        if budget is not None and inspected >= budget: break
        if not root: continue

        key = normalize_path(root)
        if key in seen_roots: continue
        seen_roots.add(key)

        if not os.path.isdir(root):
            logger.debug(f"Scan root missing: {root}")
            continue

        remaining = None if budget is None else budget - inspected
        try:
            for full, size in iter_executables(root, remaining, check_stop_callback):
                inspected += 1
                if size is None: continue
                if not is_plausible_launcher(full, size, denylist): continue
                name = os.path.splitext(os.path.basename(full))[0]
                results.append(CandidateApp(name, canonical_path(full), Source.SCAN))
        except OSError as e:
            logger.debug(f"Scan aborted for root '{root}': {e}")

    logger.info(f"Folder scan: inspected {inspected} file(s), accepted {len(results)}")
    return results

