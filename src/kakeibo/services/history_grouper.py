"""交易履历分组模块"""
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from kakeibo.format.dates import parse_date_label
from kakeibo.models.transaction import Transaction


@dataclass(frozen=True)
class HistorySection:
    """同一日期标签下的一组交易"""
    label: str
    date: Optional[date]
    items: Tuple[Transaction, ...]

    @property
    def total(self) -> int:
        """该组金额合计"""
        return sum(tx.amount for tx in self.items)


def group_history(transactions: Iterable[Transaction]) -> Optional[List[HistorySection]]:
    """
    按日期标签对交易分组，组按日期倒序排列

    规则：
    - 以 timestamp 字符串完全相等作为分组依据
    - 组的顺序由标签中的日期部分（去掉星期后缀）决定，新的在前
    - 无法解析日期的标签排在最后，保持首次出现的顺序
    - 组内顺序沿用输入顺序，不再排序

    Returns:
        分组列表；输入为空时返回 None（无需渲染）
    """
    groups: Dict[str, List[Transaction]] = {}
    for tx in transactions:
        groups.setdefault(tx.timestamp, []).append(tx)

    if not groups:
        return None

    sections = [
        HistorySection(label=label, date=parse_date_label(label), items=tuple(items))
        for label, items in groups.items()
    ]

    dated = [s for s in sections if s.date is not None]
    undated = [s for s in sections if s.date is None]
    # sorted 是稳定排序，相同日期保持首次出现的顺序
    dated.sort(key=lambda s: s.date, reverse=True)
    return dated + undated
