"""用户界面模块"""
from kakeibo.ui.history_model import HistoryListModel, RowKind, RowKindRole, SectionLabelRole
from kakeibo.ui.theme import COLOR_INCOME, COLOR_EXPENSE, get_kind_color, get_balance_color

__all__ = [
    # 数据模型
    "HistoryListModel",
    "RowKind",
    "RowKindRole",
    "SectionLabelRole",
    # 主题常量和函数
    "COLOR_INCOME",
    "COLOR_EXPENSE",
    "get_kind_color",
    "get_balance_color",
]
