"""
Kakeibo - 家计簿（收支记账）核心逻辑
"""
from kakeibo.models.transaction import Transaction, LedgerSnapshot
from kakeibo.services.ledger_store import LedgerStore, LedgerValidationError
from kakeibo.services.amount_field import AmountFieldState
from kakeibo.services.history_grouper import HistorySection, group_history
from kakeibo.services.transaction_form import TransactionFormState
from kakeibo.format.money import (
    AmountOverflowError,
    format_money, format_money_for_input, format_money_for_display,
    format_amount_text, parse_money_string,
)
from kakeibo.settings import VERSION, APP_NAME, CURRENCY_SYMBOL, CURRENCY_CODE

__all__ = [
    # 数据模型
    "Transaction",
    "LedgerSnapshot",
    # 服务
    "LedgerStore",
    "LedgerValidationError",
    "AmountFieldState",
    "HistorySection",
    "group_history",
    "TransactionFormState",
    # 格式化
    "AmountOverflowError",
    "format_money",
    "format_money_for_input",
    "format_money_for_display",
    "format_amount_text",
    "parse_money_string",
    # 配置
    "VERSION",
    "APP_NAME",
    "CURRENCY_SYMBOL",
    "CURRENCY_CODE",
]
__version__ = VERSION
