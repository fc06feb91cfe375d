import pytest

from recovery_backend.const import LAUNCHER_DENYLIST, MIN_LAUNCHER_SIZE
from recovery_backend.core_heuristic import denied_token, is_executable_name, is_plausible_launcher

from conftest import MB, make_file


def test_large_game_is_accepted(tmp_path):
    assert is_plausible_launcher(make_file(tmp_path / "game.exe", 5 * MB))


def test_uninstaller_is_rejected(tmp_path):
    assert not is_plausible_launcher(make_file(tmp_path / "unins000.exe", 5 * MB))


def test_small_file_is_rejected(tmp_path):
    assert not is_plausible_launcher(make_file(tmp_path / "app.exe", 10 * 1024))


def test_size_floor_is_inclusive(tmp_path):
    assert is_plausible_launcher(make_file(tmp_path / "app.exe", MIN_LAUNCHER_SIZE))
    assert not is_plausible_launcher(make_file(tmp_path / "app2.exe", MIN_LAUNCHER_SIZE - 1))


@pytest.mark.parametrize("name", [
    "Setup.exe", "MyAppUpdater.exe", "crashpad_handler.exe", "VC_REDIST.x64.exe",
    "node-cli.exe", "SyncService.exe", "HelperHost.exe",
])
def test_denylist_is_case_insensitive_infix(name):
    assert denied_token(name) is not None
    assert not is_plausible_launcher(name, size=5 * MB)


def test_passed_size_skips_stat():
    # 文件不存在，但调用方已给出大小
    assert is_plausible_launcher("C:/nowhere/editor.exe", size=5 * MB)


def test_missing_file_is_rejected(tmp_path):
    assert not is_plausible_launcher(str(tmp_path / "gone.exe"))


def test_custom_denylist(tmp_path):
    path = make_file(tmp_path / "launcher.exe", 5 * MB)
    assert is_plausible_launcher(path)
    assert not is_plausible_launcher(path, denylist=LAUNCHER_DENYLIST + ('launch',))


def test_denylist_table():
    assert len(LAUNCHER_DENYLIST) == 25
    assert all(t == t.lower() for t in LAUNCHER_DENYLIST)


def test_is_executable_name():
    assert is_executable_name("Foo.EXE")
    assert not is_executable_name("foo.dll")
