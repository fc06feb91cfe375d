# scanner_styles.py
"""
选择对话框使用的 QSS 样式表
"""

COMMON_QSS = """
/* 全局字体与基础 */
QWidget { font-family: "Segoe UI", "Microsoft YaHei UI", sans-serif; font-size: 10pt; }

/* 主按钮 (蓝色) */
QPushButton[objectName="primaryButton"] {
    background-color: #0067C0; color: white; border: none; font-weight: bold;
    border-radius: 6px; padding: 8px 16px;
}
QPushButton[objectName="primaryButton"]:hover { background-color: #197CCC; }
QPushButton[objectName="primaryButton"]:pressed { background-color: #005299; }
"""

LIGHT_QSS = COMMON_QSS + """
QDialog { background-color: #FFFFFF; }

QPushButton { background-color: #FFFFFF; border: 1px solid #D0D0D0; border-radius: 6px; padding: 6px 12px; color: #333333; }
QPushButton:hover { background-color: #F9F9F9; border-color: #B0B0B0; }

QTreeWidget { border: 1px solid #E5E5E5; border-radius: 6px; alternate-background-color: #FAFAFA; }
QTreeWidget::item { height: 28px; }
QTreeWidget::item:selected { background-color: #E0EEF9; color: #000000; }
QHeaderView::section { background-color: #FFFFFF; border: none; border-bottom: 1px solid #E5E5E5; padding: 8px; font-weight: bold; color: #555555; }
"""
