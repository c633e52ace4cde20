from PySide6.QtCore import QAbstractListModel, QModelIndex, QPersistentModelIndex, Qt


class ResultsListModel(QAbstractListModel):
    """Lightweight list model backed by result names."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._names: list[str] = []

    def rowCount(
        self,
        /,
        parent: QModelIndex | QPersistentModelIndex = QModelIndex(),
    ) -> int:
        if parent.isValid():
            return 0
        return len(self._names)

    def data(
        self,
        index: QModelIndex | QPersistentModelIndex,
        /,
        role: int = Qt.ItemDataRole.DisplayRole,
    ) -> object | None:
        if not index.isValid():
            return None
        if role not in (Qt.ItemDataRole.DisplayRole, Qt.ItemDataRole.EditRole):
            return None
        return self._names[index.row()]

    def set_names(self, names: list[str]) -> None:
        self.beginResetModel()
        self._names = list(names)
        self.endResetModel()

    def name_at(self, row: int) -> str | None:
        if 0 <= row < len(self._names):
            return self._names[row]
        return None

    def step_row(self, row: int, delta: int) -> int | None:
        """Returns `row + delta` clamped to the list, or None when it is empty."""
        if not self._names:
            return None
        return max(0, min(row + delta, len(self._names) - 1))
