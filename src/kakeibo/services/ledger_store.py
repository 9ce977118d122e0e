"""账本状态管理模块"""
import logging
import time
from datetime import date
from typing import Final, List, Optional, Tuple, Union

from PySide6.QtCore import QObject, Signal

from kakeibo.format.dates import parse_iso_date, format_date_label
from kakeibo.format.money import format_amount_text
from kakeibo.models.transaction import Transaction, LedgerSnapshot
from kakeibo.services.history_grouper import HistorySection, group_history
from kakeibo.settings import (
    MAX_SAFE_INTEGER, KIND_EXPENSE, KIND_INCOME,
    MSG_AMOUNT_POSITIVE, MSG_AMOUNT_TOO_LARGE, MSG_AMOUNT_NOT_INTEGER,
)

logger: Final = logging.getLogger(__name__)


class LedgerValidationError(ValueError):
    """新增交易时的参数校验错误"""


def validate_amount(amount: Union[int, float]) -> int:
    """
    校验金额并转换为 int

    规则：整数（或没有小数部分的浮点数），0 < amount <= MAX_SAFE_INTEGER

    Raises:
        LedgerValidationError: 校验失败
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise LedgerValidationError(MSG_AMOUNT_NOT_INTEGER)
    if isinstance(amount, float):
        if not amount.is_integer():
            # NaN、无穷大、带小数的值都会落到这里
            raise LedgerValidationError(MSG_AMOUNT_NOT_INTEGER)
        amount = int(amount)
    if amount <= 0:
        raise LedgerValidationError(MSG_AMOUNT_POSITIVE)
    if amount > MAX_SAFE_INTEGER:
        raise LedgerValidationError(MSG_AMOUNT_TOO_LARGE)
    return amount


class LedgerStore(QObject):
    """
    内存账本

    持有支出、收入两个列表（新的在前），是交易进入系统的唯一入口。
    合计与结余不单独保存，每次读取时由列表重新计算。
    数据仅保存在内存中，重启后清空。
    """

    changed = Signal()

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._expenses: List[Transaction] = []
        self._incomes: List[Transaction] = []
        self._last_id = 0

    # ==================== 新增 ====================

    def add_expense(self, amount: Union[int, float], date: Union[str, date]) -> Transaction:
        """新增支出，返回新建的交易"""
        return self._add(self._expenses, KIND_EXPENSE, amount, date)

    def add_income(self, amount: Union[int, float], date: Union[str, date]) -> Transaction:
        """新增收入，返回新建的交易"""
        return self._add(self._incomes, KIND_INCOME, amount, date)

    def _add(
        self, target: List[Transaction], kind: str,
        amount: Union[int, float], entry: Union[str, date]
    ) -> Transaction:
        amount = validate_amount(amount)
        try:
            entry_date = parse_iso_date(entry)
        except ValueError as e:
            raise LedgerValidationError(str(e)) from None

        tx = Transaction(
            id=self._next_id(),
            amount=amount,
            timestamp=format_date_label(entry_date),
            entry_date=entry_date,
            kind=kind,
        )
        # 最新的放在最前面
        target.insert(0, tx)
        logger.info(f"新增{'收入' if kind == KIND_INCOME else '支出'}: {format_amount_text(amount)} ({tx.timestamp})")
        self.changed.emit()
        return tx

    def _next_id(self) -> str:
        """基于毫秒时间戳的 ID，同一毫秒内连续新增时顺延，保证单调递增"""
        candidate = time.time_ns() // 1_000_000
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    def clear(self) -> None:
        """清空账本"""
        self._expenses.clear()
        self._incomes.clear()
        logger.info("账本已清空")
        self.changed.emit()

    # ==================== 读取 ====================

    @property
    def expenses(self) -> Tuple[Transaction, ...]:
        """支出列表（新的在前）"""
        return tuple(self._expenses)

    @property
    def incomes(self) -> Tuple[Transaction, ...]:
        """收入列表（新的在前）"""
        return tuple(self._incomes)

    @property
    def total_expense_amount(self) -> int:
        return sum(tx.amount for tx in self._expenses)

    @property
    def total_income_amount(self) -> int:
        return sum(tx.amount for tx in self._incomes)

    @property
    def balance(self) -> int:
        """结余（收入 - 支出）"""
        return self.total_income_amount - self.total_expense_amount

    def snapshot(self) -> LedgerSnapshot:
        """获取当前账本的只读视图"""
        return LedgerSnapshot(expenses=self.expenses, incomes=self.incomes)

    def expense_history(self) -> Optional[List[HistorySection]]:
        """按日期分组的支出履历"""
        return group_history(self._expenses)

    def income_history(self) -> Optional[List[HistorySection]]:
        """按日期分组的收入履历"""
        return group_history(self._incomes)
