import pytest

from recovery_backend.const import CONFIG_SECTION, DEFAULT_OUTPUT_FOLDER_NAME, LAUNCHER_DENYLIST
from recovery_backend.manager_config import load_config, options_from_config, save_config
from recovery_backend.manager_rules import load_denylist
from recovery_backend.models import RecoveryError


def test_defaults_when_file_missing(tmp_path):
    config = load_config(str(tmp_path / "config.ini"))
    options = options_from_config(config)
    assert options.all_users is False
    assert options.inspection_budget == 5000
    assert options.extra_scan_roots == []
    assert options.destination_subfolder == DEFAULT_OUTPUT_FOLDER_NAME
    assert options.preview is False
    assert options.auto is False
    assert config[CONFIG_SECTION]['log_level'] == 'INFO'


def test_values_are_read_from_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "[Recovery]\n"
        "all_users = yes\n"
        "inspection_budget = 0\n"
        "extra_scan_roots = D:\\Games ; E:\\Portable;\n"
        "destination_subfolder = Found\n"
        "preview = true\n",
        encoding="utf-8",
    )
    options = options_from_config(load_config(str(path)))
    assert options.all_users is True
    assert options.inspection_budget is None
    assert options.extra_scan_roots == ["D:\\Games", "E:\\Portable"]
    assert options.destination_subfolder == "Found"
    assert options.preview is True


def test_invalid_value_is_a_config_error(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[Recovery]\ninspection_budget = lots\n", encoding="utf-8")
    with pytest.raises(RecoveryError):
        options_from_config(load_config(str(path)))


def test_malformed_file_is_a_config_error(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("no section header\n", encoding="utf-8")
    with pytest.raises(RecoveryError):
        load_config(str(path))


def test_non_utf8_file_is_a_config_error(tmp_path):
    path = tmp_path / "config.ini"
    path.write_bytes("[Recovery]\ndestination_subfolder = 恢复的程序\n".encode("gbk"))
    with pytest.raises(RecoveryError):
        load_config(str(path))


def test_save_round_trip(tmp_path):
    path = str(tmp_path / "sub" / "config.ini")
    config = load_config(path)
    config[CONFIG_SECTION]['destination_subfolder'] = 'Mine'
    assert save_config(config, path)
    assert load_config(path)[CONFIG_SECTION]['destination_subfolder'] == 'Mine'


def test_denylist_defaults_when_file_missing(tmp_path):
    path = tmp_path / "config" / "denylist.txt"
    denylist, _ = load_denylist(str(path))
    assert denylist == LAUNCHER_DENYLIST
    assert not (tmp_path / "config").exists()


def test_denylist_file_extends_defaults(tmp_path):
    path = tmp_path / "denylist.txt"
    path.write_text("# 自定义\nBenchmark\nsetup\n\n", encoding="utf-8")
    denylist, _ = load_denylist(str(path))
    assert denylist[:len(LAUNCHER_DENYLIST)] == LAUNCHER_DENYLIST
    assert denylist[len(LAUNCHER_DENYLIST):] == ("benchmark",)
