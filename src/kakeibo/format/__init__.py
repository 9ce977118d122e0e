"""格式化工具模块"""
from kakeibo.format.money import (
    AmountOverflowError,
    format_money, format_money_for_input, format_money_for_display,
    format_amount_text, parse_money_string, is_safe_amount,
)
from kakeibo.format.dates import (
    parse_iso_date, format_date_label, parse_date_label, today_iso,
)

__all__ = [
    # 金额
    "AmountOverflowError",
    "format_money",
    "format_money_for_input",
    "format_money_for_display",
    "format_amount_text",
    "parse_money_string",
    "is_safe_amount",
    # 日期
    "parse_iso_date",
    "format_date_label",
    "parse_date_label",
    "today_iso",
]
