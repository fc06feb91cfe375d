import pytest

from recovery_backend.models import CandidateApp, Source
from ui.console_picker import parse_selection, pick_candidates


@pytest.mark.parametrize("text, expected", [
    ("all", [0, 1, 2, 3]),
    ("", []),
    ("none", []),
    ("q", None),
    ("2", [1]),
    ("1,3-4", [0, 2, 3]),
    ("4-3 1", [2, 3, 0]),
    ("2,2", [1]),
])
def test_parse_selection(text, expected):
    assert parse_selection(text, 4) == expected


@pytest.mark.parametrize("text", ["5", "0", "x", "1-9"])
def test_parse_selection_rejects_invalid(text):
    with pytest.raises(ValueError):
        parse_selection(text, 4)


def _apps():
    return [
        CandidateApp("alpha", "C:/a.exe", Source.APP_PATHS),
        CandidateApp("beta", "C:/b.exe", Source.SCAN),
        CandidateApp("gamma", "C:/c.exe", Source.UNINSTALL),
    ]


def _answers(*lines):
    it = iter(lines)
    return lambda _prompt: next(it)


def test_pick_with_retry_and_rename():
    out = []
    apps = _apps()
    picked = pick_candidates(apps, _answers("7", "1,3", "3=Gamma Studio", "2=nope", ""), out.append)
    assert [a.name for a in picked] == ["alpha", "Gamma Studio"]
    assert apps[1].name == "beta"
    assert any("输入无效" in line for line in out)


def test_cancel_returns_none():
    assert pick_candidates(_apps(), _answers("q"), lambda _: None) is None


def test_empty_answer_selects_nothing():
    assert pick_candidates(_apps(), _answers(""), lambda _: None) == []


def _closed_after(*lines):
    it = iter(lines)

    def read(_prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


def test_closed_stdin_cancels():
    assert pick_candidates(_apps(), _closed_after(), lambda _: None) is None


def test_closed_stdin_while_renaming_cancels():
    assert pick_candidates(_apps(), _closed_after("1,2", "1=Alpha"), lambda _: None) is None
