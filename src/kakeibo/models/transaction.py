from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from kakeibo.settings import KIND_EXPENSE, KIND_INCOME


@dataclass(frozen=True, slots=True)
class Transaction:
    """记账交易数据模型（支出与收入结构相同，由所在列表区分）"""
    id: str
    amount: int
    timestamp: str  # YYYY/MM/DD(曜)
    entry_date: Optional[date] = None  # 生成 timestamp 时使用的日期
    kind: str = KIND_EXPENSE  # expense / income

    @property
    def is_income(self) -> bool:
        return self.kind == KIND_INCOME


@dataclass(frozen=True)
class LedgerSnapshot:
    """账本的只读视图，每次读取时由交易列表重新计算"""
    expenses: Tuple[Transaction, ...] = ()
    incomes: Tuple[Transaction, ...] = ()

    @property
    def total_expense_amount(self) -> int:
        """支出合计"""
        return sum(tx.amount for tx in self.expenses)

    @property
    def total_income_amount(self) -> int:
        """收入合计"""
        return sum(tx.amount for tx in self.incomes)

    @property
    def balance(self) -> int:
        """结余（收入 - 支出）"""
        return self.total_income_amount - self.total_expense_amount
