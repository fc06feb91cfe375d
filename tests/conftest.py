import os

import pytest

MB = 1024 * 1024


def make_file(path, size=MB):
    """创建指定大小的稀疏文件，返回路径字符串"""
    path = str(path)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'wb') as f:
        f.truncate(size)
    return path


def real(path):
    return os.path.realpath(str(path))


class FakeRegistry:
    """
    roots: {root: {子键名: 值字典 或 异常实例}}
    root 不存在时 list_subkeys 抛 FileNotFoundError，和 winreg 一致
    """

    def __init__(self, roots=None):
        self.roots = roots or {}

    def list_subkeys(self, root):
        if root not in self.roots:
            raise FileNotFoundError(root)
        return list(self.roots[root])

    def read_values(self, root, subkey):
        values = self.roots[root][subkey]
        if isinstance(values, Exception):
            raise values
        return dict(values)


class FakeShortcut:
    def __init__(self, path, shell):
        self.path = path
        self.shell = shell
        self.TargetPath = ''
        self.WorkingDirectory = ''
        self.IconLocation = ''

    def Save(self):
        if self.shell.fail_on and self.shell.fail_on in self.path:
            raise RuntimeError("COM error")
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(self.TargetPath)
        self.shell.saved.append(self)


class FakeShell:
    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.saved = []

    def CreateShortCut(self, path):
        return FakeShortcut(path, self)


@pytest.fixture
def shell():
    return FakeShell()


@pytest.fixture
def empty_registry():
    return FakeRegistry()
