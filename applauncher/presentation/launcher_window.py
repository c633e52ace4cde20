from PySide6.QtCore import QModelIndex, Qt, QTimer
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListView,
    QVBoxLayout,
    QWidget,
)

from applauncher.application.app_launcher import (
    ENTER,
    ESC,
    LOGOUT,
    POWER_OFF,
    RESTART,
    AppLauncher,
)
from applauncher.presentation.results_model import ResultsListModel


class LauncherWindow(QWidget):
    """Query box, result list and clock on top of an `AppLauncher` session."""

    _TICK_INTERVAL_MS = 1000

    def __init__(self, launcher: AppLauncher) -> None:
        super().__init__()
        self._launcher = launcher

        self.setWindowTitle("applauncher")
        self.setWindowFlag(Qt.WindowType.FramelessWindowHint, True)
        self.resize(480, 320)

        self.line_edit_query = QLineEdit(self)
        self.line_edit_query.setPlaceholderText("Search applications")
        self.line_edit_query.setText(launcher.get_query())

        self.label_clock = QLabel(self)
        self.label_clock.setAlignment(Qt.AlignmentFlag.AlignRight)

        self.model = ResultsListModel(self)
        self.model.set_names(launcher.get_search_results())

        self.list_view_results = QListView(self)
        self.list_view_results.setModel(self.model)
        self.list_view_results.setEditTriggers(
            QAbstractItemView.EditTrigger.NoEditTriggers
        )
        self.list_view_results.setSelectionMode(
            QAbstractItemView.SelectionMode.SingleSelection
        )
        if self.model.rowCount() > 0:
            self.list_view_results.setCurrentIndex(self.model.index(0, 0))

        self.label_status = QLabel(self)
        self.label_status.setWordWrap(True)

        header = QHBoxLayout()
        header.addWidget(self.line_edit_query, 1)
        header.addWidget(self.label_clock)

        layout = QVBoxLayout(self)
        layout.addLayout(header)
        layout.addWidget(self.list_view_results, 1)
        layout.addWidget(self.label_status)

        # ---- Input -> tokens
        self.line_edit_query.textEdited.connect(self._on_query_edited)
        self.line_edit_query.returnPressed.connect(self._on_return_pressed)
        self.list_view_results.activated.connect(self._on_result_activated)
        escape = QShortcut(QKeySequence(Qt.Key.Key_Escape), self)
        escape.activated.connect(lambda: self._send(ESC))
        for key, delta in ((Qt.Key.Key_Up, -1), (Qt.Key.Key_Down, 1)):
            arrow = QShortcut(QKeySequence(key), self)
            arrow.activated.connect(lambda d=delta: self._move_current_row(d))

        if launcher.get_config().enable_power_options:
            for keys, token in (
                ("Ctrl+P", POWER_OFF),
                ("Ctrl+R", RESTART),
                ("Ctrl+L", LOGOUT),
            ):
                shortcut = QShortcut(QKeySequence(keys), self)
                shortcut.activated.connect(lambda t=token: self._send(t))

        # ---- Session -> view
        launcher.results_changed.connect(self._on_results_changed)
        launcher.error.connect(self._on_error)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(self._TICK_INTERVAL_MS)
        self._tick()

        self.line_edit_query.setFocus()

    def _send(self, token: str) -> None:
        self._launcher.handle_input(token)
        self._launcher.update()

    def _on_return_pressed(self) -> None:
        # Row 0 is what ENTER launches; other rows are launched by name.
        row = self.list_view_results.currentIndex().row()
        name = self.model.name_at(row)
        if name is None or row == 0:
            self._send(ENTER)
            return
        self._launcher.launch_app(name)
        self._launcher.update()

    def _move_current_row(self, delta: int) -> None:
        row = self.model.step_row(self.list_view_results.currentIndex().row(), delta)
        if row is not None:
            self.list_view_results.setCurrentIndex(self.model.index(row, 0))

    def _tick(self) -> None:
        self.label_clock.setText(self._launcher.get_time())
        self._launcher.update()

    def _on_query_edited(self, text: str) -> None:
        # Query text never goes through `handle_input`, so typing "P" is a search.
        self._launcher.set_query(text)

    def _on_result_activated(self, index: QModelIndex) -> None:
        name = self.model.name_at(index.row())
        if name is None:
            return
        self._launcher.launch_app(name)
        self._launcher.update()

    def _on_results_changed(self, names_obj: object) -> None:
        names = names_obj if isinstance(names_obj, list) else []
        self.model.set_names(names)
        if names:
            self.list_view_results.setCurrentIndex(self.model.index(0, 0))

    def _on_error(self, message: str) -> None:
        self.label_status.setText(message)
