import pytest

from recovery_backend.models import CandidateApp, Source


@pytest.fixture
def qt_app(monkeypatch):
    monkeypatch.setenv("QT_QPA_PLATFORM", "offscreen")
    widgets = pytest.importorskip("PySide6.QtWidgets")
    return widgets.QApplication.instance() or widgets.QApplication([])


def test_only_double_click_on_name_edits(qt_app):
    from PySide6.QtWidgets import QTreeWidget
    from ui.dialog_select import SelectCandidatesDialog

    apps = [CandidateApp("alpha", "C:/a.exe", Source.SCAN)]
    dialog = SelectCandidatesDialog(None, apps)
    assert dialog.tree.editTriggers() == QTreeWidget.NoEditTriggers
    assert dialog.tree.topLevelItemCount() == 1
