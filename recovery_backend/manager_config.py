# recovery_backend/manager_config.py
import os
import logging
import configparser

from .const import CONFIG_FILE, CONFIG_SECTION, DEFAULT_CONFIG, DEFAULT_INSPECTION_BUDGET
from .models import RecoveryOptions, RecoveryError

logger = logging.getLogger(__name__)


def load_config(path=CONFIG_FILE):
    # 路径里常见 %VAR%，关闭插值
    config = configparser.ConfigParser(interpolation=None)
    if os.path.exists(path):
        try:
            config.read(path, encoding='utf-8')
        except (configparser.Error, UnicodeDecodeError) as e:
            raise RecoveryError(f"配置文件格式错误 {path}: {e}")

    if CONFIG_SECTION not in config: config[CONFIG_SECTION] = {}

    # 补全默认值
    for k, v in DEFAULT_CONFIG.items():
        if k not in config[CONFIG_SECTION]: config[CONFIG_SECTION][k] = v
    return config


def save_config(config, path=CONFIG_FILE):
    try:
        folder = os.path.dirname(path)
        if folder and not os.path.exists(folder):
            os.makedirs(folder)
        with open(path, 'w', encoding='utf-8') as f:
            config.write(f)
        return True
    except OSError as e:
        logger.error(f"Config Error: {e}")
        return False


def options_from_config(config):
    """把 [Recovery] 段转换成 RecoveryOptions，取值非法时报配置错误"""
    sec = config[CONFIG_SECTION]
    try:
        budget = sec.getint('inspection_budget', DEFAULT_INSPECTION_BUDGET)
        all_users = sec.getboolean('all_users', False)
        preview = sec.getboolean('preview', False)
        auto = sec.getboolean('auto', False)
    except ValueError as e:
        raise RecoveryError(f"配置项取值无效: {e}")

    roots = [os.path.expandvars(r.strip()) for r in sec.get('extra_scan_roots', '').split(';') if r.strip()]
    return RecoveryOptions(
        all_users=all_users,
        inspection_budget=budget if budget > 0 else None,
        extra_scan_roots=roots,
        destination_subfolder=sec.get('destination_subfolder', '').strip() or DEFAULT_CONFIG['destination_subfolder'],
        preview=preview,
        auto=auto
    )
