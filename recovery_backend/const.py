import os

# --- 目录定义 ---
DIR_CONFIG = "config"

DEFAULT_OUTPUT_FOLDER_NAME = "Recovered"

# --- 文件路径 (自动拼接目录) ---
CONFIG_FILE = os.path.join(DIR_CONFIG, "config.ini")

# 规则文件
FILENAME_DENYLIST = os.path.join(DIR_CONFIG, "denylist.txt")

# --- 默认配置 ---
CONFIG_SECTION = 'Recovery'

DEFAULT_CONFIG = {
    'all_users': 'false',
    'inspection_budget': '5000',
    'extra_scan_roots': '',
    'destination_subfolder': DEFAULT_OUTPUT_FOLDER_NAME,
    'preview': 'false',
    'auto': 'false',
    'log_level': 'INFO'
}

# --- 启动器判定规则 ---
MIN_LAUNCHER_SIZE = 200 * 1024

# 文件名中包含以下片段的视为安装/辅助程序 (不区分大小写)
LAUNCHER_DENYLIST = (
    'unins', 'uninstall', 'setup', 'install', 'updater', 'update',
    'elevation', 'crashpad', 'service', 'daemon', 'agent', 'reporter',
    'telemetry', 'console', 'cli', 'helper', 'tool', 'dbg', 'redist',
    'vc_redist', 'dxsetup', 'repair', 'cleanup', 'watchdog', 'monitor'
)

EXECUTABLE_EXTENSIONS = ('.exe',)
LAUNCHER_EXTENSION = '.lnk'

DEFAULT_INSPECTION_BUDGET = 5000

# InstallLocation 回退扫描的上限 (InstallLocation 可能直接指向盘符根目录)
FOLDER_FALLBACK_LIMIT = 2000

# 快捷方式文件名中的非法字符
ILLEGAL_NAME_CHARS = '\\/:*?"<>|'

# --- 注册表 ---
APP_PATHS_KEY = r"SOFTWARE\Microsoft\Windows\CurrentVersion\App Paths"
UNINSTALL_KEY = r"SOFTWARE\Microsoft\Windows\CurrentVersion\Uninstall"

# (hive, 子键, 视图) 视图: 64 = 原生, 32 = WOW64, None = 默认
APP_PATHS_ROOTS = (
    ('HKLM', APP_PATHS_KEY, 64),
    ('HKLM', APP_PATHS_KEY, 32),
    ('HKCU', APP_PATHS_KEY, None),
)

UNINSTALL_ROOTS = (
    ('HKLM', UNINSTALL_KEY, 64),
    ('HKLM', UNINSTALL_KEY, 32),
    ('HKCU', UNINSTALL_KEY, None),
)

# --- 开始菜单 ---
START_MENU_SUBPATH = os.path.join('Microsoft', 'Windows', 'Start Menu', 'Programs')
