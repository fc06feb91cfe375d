from PySide6.QtWidgets import (
    QApplication, QDialog, QVBoxLayout, QHBoxLayout, QLabel, QTreeWidget,
    QTreeWidgetItem, QPushButton, QHeaderView
)
from PySide6.QtCore import Qt
import sys
import scanner_styles as styles

COL_CHECK, COL_NAME, COL_SOURCE, COL_PATH = range(4)


class SelectCandidatesDialog(QDialog):
    def __init__(self, parent, candidates):
        super().__init__(parent)
        self.setWindowTitle("恢复开始菜单快捷方式")
        self.resize(900, 600)
        self.candidates = candidates

        self.build_ui()
        self.populate_tree()

    def build_ui(self):
        layout = QVBoxLayout(self);
        layout.setContentsMargins(20, 20, 20, 20);
        layout.setSpacing(15)

        # 提示头
        header = QLabel(f"🔍 发现 {len(self.candidates)} 个没有开始菜单快捷方式的程序")
        header.setStyleSheet("font-size: 14pt; font-weight: bold; color: #333;")
        layout.addWidget(header)

        desc = QLabel("勾选需要生成快捷方式的程序，双击名称可以修改快捷方式名称。")
        desc.setStyleSheet("color: #666; margin-bottom: 10px;")
        layout.addWidget(desc)

        # 列表
        self.tree = QTreeWidget()
        self.tree.setHeaderLabels(['生成', '程序名称', '来源', '完整路径'])
        self.tree.header().setSectionResizeMode(COL_NAME, QHeaderView.ResizeToContents)
        self.tree.header().setSectionResizeMode(COL_PATH, QHeaderView.Stretch)
        self.tree.setAlternatingRowColors(True)
        self.tree.setRootIsDecorated(False)
        # 只允许在双击名称列时编辑
        self.tree.setEditTriggers(QTreeWidget.NoEditTriggers)
        self.tree.itemDoubleClicked.connect(self.on_item_double_clicked)
        self.tree.itemChanged.connect(self.update_count_label)
        layout.addWidget(self.tree)

        # 底部
        btn_box = QHBoxLayout()
        btn_all = QPushButton("全选");
        btn_all.clicked.connect(lambda: self.set_all_checked(True))
        btn_none = QPushButton("全不选");
        btn_none.clicked.connect(lambda: self.set_all_checked(False))
        self.lbl_count = QLabel()
        self.lbl_count.setStyleSheet("color: #0078D7; font-weight: bold; margin-left: 10px;")

        btn_cancel = QPushButton("取消");
        btn_cancel.clicked.connect(self.reject)
        btn_ok = QPushButton("生成快捷方式");
        btn_ok.setObjectName("primaryButton")
        btn_ok.clicked.connect(self.accept)

        btn_box.addWidget(btn_all);
        btn_box.addWidget(btn_none);
        btn_box.addWidget(self.lbl_count)
        btn_box.addStretch();
        btn_box.addWidget(btn_cancel);
        btn_box.addWidget(btn_ok)
        layout.addLayout(btn_box)

    def populate_tree(self):
        self.tree.blockSignals(True)
        self.tree.clear()
        for idx, app in enumerate(self.candidates):
            item = QTreeWidgetItem(self.tree)
            item.setFlags(item.flags() | Qt.ItemIsUserCheckable | Qt.ItemIsEditable)
            item.setCheckState(COL_CHECK, Qt.Checked)  # 默认全部勾选
            item.setText(COL_NAME, app.name)
            item.setText(COL_SOURCE, str(app.source))
            item.setText(COL_PATH, app.target_path)
            item.setToolTip(COL_PATH, app.target_path)
            item.setData(COL_CHECK, Qt.UserRole, idx)
        self.tree.blockSignals(False)
        self.update_count_label()

    def on_item_double_clicked(self, item, column):
        # 只允许修改名称列
        if column == COL_NAME:
            self.tree.editItem(item, COL_NAME)

    def set_all_checked(self, checked):
        state = Qt.Checked if checked else Qt.Unchecked
        root = self.tree.invisibleRootItem()
        for i in range(root.childCount()):
            root.child(i).setCheckState(COL_CHECK, state)

    def update_count_label(self, *_):
        root = self.tree.invisibleRootItem()
        checked = sum(1 for i in range(root.childCount()) if root.child(i).checkState(COL_CHECK) == Qt.Checked)
        self.lbl_count.setText(f"已选 {checked} / 共 {root.childCount()}")

    def get_selected_items(self):
        selected = []
        root = self.tree.invisibleRootItem()
        for i in range(root.childCount()):
            child = root.child(i)
            if child.checkState(COL_CHECK) != Qt.Checked: continue
            app = self.candidates[child.data(COL_CHECK, Qt.UserRole)]
            new_name = child.text(COL_NAME).strip()
            if new_name: app.name = new_name
            selected.append(app)
        return selected


def select_with_dialog(candidates):
    """selector 实现: 返回勾选的程序列表，关闭/取消返回 None"""
    app = QApplication.instance() or QApplication(sys.argv)
    app.setStyleSheet(styles.LIGHT_QSS)
    dialog = SelectCandidatesDialog(None, candidates)
    if dialog.exec() != QDialog.Accepted:
        return None
    return dialog.get_selected_items()
