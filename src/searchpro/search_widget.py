# -*- coding: utf-8 -*-
"""
SearchPro window — PySide6
- Search box with clear button and live dropdown of highlighted matches
- Enter freezes the live matches into "Final Search Output"
"""
from __future__ import annotations

import sys
from typing import Iterable, Optional

from PySide6 import QtCore, QtWidgets

from .config import CONFIG, SearchProConfig
from .dataset import Dataset, Record, load_dataset
from .logging_setup import get_logger
from .query_controller import QueryController
from .utils.matching import highlight, render_markup

logger = get_logger(__name__)

PLACEHOLDER = "Type and press Enter..."
FINAL_HEADING = "Final Search Output:"


def apply_theme(widget: QtWidgets.QWidget):
    widget.setStyleSheet("""
    QWidget{font-family:'Segoe UI','Inter','Noto Sans',system-ui;font-size:11pt;color:#0f172a;background:#f4f6fb;}
    QLabel#Heading{font-size:20pt;font-weight:800;background:transparent;}
    QLineEdit#SearchInput{padding:8px 12px;border-radius:12px;border:1px solid #e6eaf2;background:#fff;}
    QLineEdit#SearchInput:focus{border:1px solid #7aa2ff;}
    QToolButton#ClearButton{border:none;background:transparent;font-weight:800;}
    QListWidget{background:#fff;border:1px solid #e6e6ef;border-radius:12px;}
    QLabel#FinalHeading{font-weight:800;background:transparent;}
    """)


class ResultList(QtWidgets.QListWidget):
    """List of records rendered with highlighted matches."""

    def __init__(self, object_name: str, parent=None):
        super().__init__(parent)
        self.setObjectName(object_name)
        self.setSelectionMode(QtWidgets.QAbstractItemView.NoSelection)

    def set_records(self, records: Iterable[Record], query: str, prefix: str = ""):
        self.clear()
        for rec in records:
            item = QtWidgets.QListWidgetItem()
            item.setData(QtCore.Qt.UserRole, rec.id)
            label = QtWidgets.QLabel(prefix + render_markup(highlight(rec.name, query)))
            label.setTextFormat(QtCore.Qt.RichText)
            label.setContentsMargins(10, 4, 10, 4)
            self.addItem(item)
            item.setSizeHint(label.sizeHint())
            self.setItemWidget(item, label)

    def markups(self) -> list[str]:
        return [self.itemWidget(self.item(i)).text() for i in range(self.count())]

    def record_ids(self) -> list:
        return [self.item(i).data(QtCore.Qt.UserRole) for i in range(self.count())]


class SearchWindow(QtWidgets.QWidget):
    def __init__(self, controller: QueryController, parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self.setWindowTitle("SearchPro")
        apply_theme(self)

        root = QtWidgets.QVBoxLayout(self)
        root.setContentsMargins(24, 24, 24, 24)
        root.setSpacing(12)

        heading = QtWidgets.QLabel("SearchPro")
        heading.setObjectName("Heading")
        root.addWidget(heading)

        row = QtWidgets.QHBoxLayout()
        row.setSpacing(6)
        row.addWidget(QtWidgets.QLabel("🔍"))
        self.search_input = QtWidgets.QLineEdit()
        self.search_input.setObjectName("SearchInput")
        self.search_input.setPlaceholderText(PLACEHOLDER)
        self.search_input.setClearButtonEnabled(False)
        row.addWidget(self.search_input, 1)
        self.btn_clear = QtWidgets.QToolButton()
        self.btn_clear.setObjectName("ClearButton")
        self.btn_clear.setText("✕")
        self.btn_clear.setToolTip("Clear search and final results")
        self.btn_clear.hide()
        row.addWidget(self.btn_clear)
        root.addLayout(row)

        self.live_list = ResultList("LiveResults")
        self.live_list.hide()
        root.addWidget(self.live_list)

        self.final_box = QtWidgets.QFrame()
        final_layout = QtWidgets.QVBoxLayout(self.final_box)
        final_layout.setContentsMargins(0, 8, 0, 0)
        final_heading = QtWidgets.QLabel(FINAL_HEADING)
        final_heading.setObjectName("FinalHeading")
        final_layout.addWidget(final_heading)
        self.final_list = ResultList("FinalResults")
        final_layout.addWidget(self.final_list)
        self.final_box.hide()
        root.addWidget(self.final_box)
        root.addStretch(1)

        self.search_input.textChanged.connect(self._on_text_changed)
        self.search_input.returnPressed.connect(self._on_enter)
        self.btn_clear.clicked.connect(self._on_clear)
        controller.liveResultsChanged.connect(self._render_live)
        controller.committedResultsChanged.connect(self._render_final)

    # ---------- input ----------
    def _on_text_changed(self, text: str):
        self.controller.on_input(text)
        self.btn_clear.setVisible(bool(text))
        self._render_live(self.controller.live_results)

    def _on_enter(self):
        self.controller.flush()
        if self.controller.commit():
            self._set_input_text("")

    def _on_clear(self):
        self.controller.clear()
        self._set_input_text("")

    def _set_input_text(self, text: str):
        self.search_input.blockSignals(True)
        self.search_input.setText(text)
        self.search_input.blockSignals(False)
        self.btn_clear.setVisible(bool(text))
        self._render_live(self.controller.live_results)

    # ---------- rendering ----------
    @QtCore.Slot(object)
    def _render_live(self, results):
        if not self.controller.raw_input or not results:
            self.live_list.clear()
            self.live_list.hide()
            return
        self.live_list.set_records(results, self.controller.live_query, prefix="🔍 ")
        self.live_list.show()

    @QtCore.Slot(object)
    def _render_final(self, results):
        self.final_list.set_records(results, self.controller.committed_query)
        self.final_box.setVisible(bool(results))


def run_gui(dataset: Optional[Dataset] = None, config: SearchProConfig = CONFIG) -> int:
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    app.setApplicationName("SearchPro")
    records = dataset if dataset is not None else load_dataset(config.data_file)
    controller = QueryController(
        records,
        debounce_ms=config.debounce_ms,
        cache_size=config.cache_size,
        commit_enabled=config.commit_enabled,
    )
    ui = SearchWindow(controller)
    ui.resize(560, 640)
    ui.show()
    logger.info("SearchPro window opened with %d records", len(records))
    return app.exec()


__all__ = ["ResultList", "SearchWindow", "run_gui"]
