"""交易履历列表数据模型模块"""
from enum import IntEnum
from typing import Any, Final, List, Optional, Sequence, Tuple

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt

from kakeibo.format.money import format_amount_text
from kakeibo.models.transaction import Transaction
from kakeibo.services.history_grouper import HistorySection, group_history
from kakeibo.services.ledger_store import LedgerStore
from kakeibo.settings import KIND_INCOME
from kakeibo.ui.theme import get_kind_color


class RowKind(IntEnum):
    """行类型"""
    HEADER = 0
    ITEM = 1


# 自定义角色
RowKindRole: Final = Qt.UserRole + 1
SectionLabelRole: Final = Qt.UserRole + 2

_Row = Tuple[RowKind, HistorySection, Optional[Transaction]]


class HistoryListModel(QAbstractListModel):
    """
    按日期分组的交易履历（Model/View架构）

    每个日期组展开为一行标题加若干交易行，日期新的组在前。
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._sections: List[HistorySection] = []
        self._rows: List[_Row] = []
        self._store: Optional[LedgerStore] = None
        self._kind = ""

    def set_transactions(self, transactions: Sequence[Transaction]) -> None:
        """设置交易数据并重新分组"""
        self.beginResetModel()
        self._sections = group_history(transactions) or []
        self._rows = []
        for section in self._sections:
            self._rows.append((RowKind.HEADER, section, None))
            self._rows.extend((RowKind.ITEM, section, tx) for tx in section.items)
        self.endResetModel()

    def bind_store(self, store: LedgerStore, kind: str) -> None:
        """绑定账本，账本变化时自动刷新（kind: expense / income）"""
        if self._store is not None:
            self._store.changed.disconnect(self._on_store_changed)
        self._store = store
        self._kind = kind
        store.changed.connect(self._on_store_changed)
        self._on_store_changed()

    def _on_store_changed(self) -> None:
        if self._store is None:
            return
        if self._kind == KIND_INCOME:
            self.set_transactions(self._store.incomes)
        else:
            self.set_transactions(self._store.expenses)

    @property
    def sections(self) -> List[HistorySection]:
        return list(self._sections)

    def is_empty(self) -> bool:
        """没有任何交易（不需要渲染）"""
        return not self._rows

    def get_transaction(self, row: int) -> Optional[Transaction]:
        """根据行号获取交易对象，标题行返回 None"""
        if 0 <= row < len(self._rows):
            return self._rows[row][2]
        return None

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._rows)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        if not index.isValid() or not (0 <= index.row() < len(self._rows)):
            return None

        kind, section, tx = self._rows[index.row()]

        if role == Qt.DisplayRole:
            if kind == RowKind.HEADER:
                return section.label
            return format_amount_text(tx.amount)

        elif role == Qt.TextAlignmentRole:
            if kind == RowKind.HEADER:
                return Qt.AlignLeft | Qt.AlignVCenter
            return Qt.AlignRight | Qt.AlignVCenter

        elif role == Qt.ForegroundRole:
            if kind == RowKind.ITEM:
                return get_kind_color(tx.kind)

        elif role == Qt.UserRole:
            # 返回原始Transaction对象，标题行为 None
            return tx

        elif role == RowKindRole:
            return int(kind)

        elif role == SectionLabelRole:
            return section.label

        return None

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.NoItemFlags
        if self._rows[index.row()][0] == RowKind.HEADER:
            return Qt.ItemIsEnabled
        return Qt.ItemIsEnabled | Qt.ItemIsSelectable
