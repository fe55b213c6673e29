from typing import Any, Callable, List
from PySide6.QtCore import QAbstractListModel, QByteArray, QModelIndex, QPersistentModelIndex, Qt
from core.ui_logic.components import ViewNode


class StarterModel(QAbstractListModel):
    """Option nodes of the last render pass, exposed to the QML option row."""

    NameRole = Qt.ItemDataRole.UserRole + 1
    SelectedRole = Qt.ItemDataRole.UserRole + 2
    MarkerPathRole = Qt.ItemDataRole.UserRole + 3
    MarkerTintRole = Qt.ItemDataRole.UserRole + 4

    def __init__(self, resolve_image: Callable[[str], str]) -> None:
        super().__init__()
        self.options: List[ViewNode] = []
        self._resolve_image = resolve_image

    def set_options(self, options: List[ViewNode]) -> None:
        options = list(options)
        if options and len(options) == len(self.options):
            # Same rows, new state: keep delegates alive
            self.options = options
            self.dataChanged.emit(self.index(0, 0), self.index(len(options) - 1, 0))
            return

        self.beginResetModel()
        self.options = options
        self.endResetModel()

    def clear(self) -> None:
        self.set_options([])

    def rowCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:
        return len(self.options)

    def data(self, index: QModelIndex | QPersistentModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or index.row() >= len(self.options):
            return None

        option = self.options[index.row()]
        marker = option.children[0]

        if role == self.NameRole or role == Qt.ItemDataRole.DisplayRole:
            return option.props['starter'].name
        elif role == self.SelectedRole:
            return option.props['selected']
        elif role == self.MarkerPathRole:
            return self._resolve_image(marker.props['image'])
        elif role == self.MarkerTintRole:
            return marker.props['tint'] or ""

        return None

    def roleNames(self) -> dict[int, QByteArray]:
        return {
            self.NameRole: QByteArray(b"starterName"),
            self.SelectedRole: QByteArray(b"isSelected"),
            self.MarkerPathRole: QByteArray(b"markerPath"),
            self.MarkerTintRole: QByteArray(b"markerTint")
        }
