"""数据模型模块"""
from kakeibo.models.transaction import Transaction, LedgerSnapshot

__all__ = ["Transaction", "LedgerSnapshot"]
