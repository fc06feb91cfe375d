import logging

# 导入常量
from .const import (
    DEFAULT_OUTPUT_FOLDER_NAME, DIR_CONFIG, CONFIG_FILE, CONFIG_SECTION, FILENAME_DENYLIST,
    LAUNCHER_DENYLIST, MIN_LAUNCHER_SIZE, DEFAULT_INSPECTION_BUDGET
)

from .models import (
    CandidateApp, Source, WriteFailure, LauncherWriteResult,
    RecoveryOptions, RecoveryReport, RecoveryError
)

from .utils_system import normalize_path, programs_root, scan_existing_launchers, is_user_admin
from .manager_config import load_config, save_config, options_from_config
from .manager_rules import load_denylist

from .core_heuristic import is_plausible_launcher
from .core_resolver import resolve_target, resolve_from_folder
from .core_scan import scan_folders, default_scan_roots
from .core_registry import WinRegistry, read_app_paths, read_uninstall
from .core_dedup import aggregate, exclude_existing
from .core_writer import write_launcher, write_launchers, sanitize_name
from .core_discovery import discover_candidates, run_recovery

LOG_FORMAT = '%(asctime)s - %(levelname)-8s - %(message)s'


def init_environment(log_level='INFO'):
    """配置日志。不创建目录、不写文件，预览模式下当前目录保持不变"""
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
