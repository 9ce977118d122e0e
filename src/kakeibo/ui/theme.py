"""UI 主题工具模块 - 提供收支语义颜色"""
from typing import Final

from PySide6.QtGui import QColor

from kakeibo.settings import KIND_INCOME


# 语义颜色常量（收入绿色、支出红色）
COLOR_INCOME: Final = "#2e7d32"
COLOR_EXPENSE: Final = "#c62828"


def get_kind_color(kind: str) -> QColor:
    """根据交易类型返回前景色"""
    return QColor(COLOR_INCOME if kind == KIND_INCOME else COLOR_EXPENSE)


def get_balance_color(balance: int) -> str:
    """根据余额正负返回对应颜色"""
    return COLOR_INCOME if balance >= 0 else COLOR_EXPENSE
