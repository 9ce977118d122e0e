"""金额输入框状态模块"""
import logging
from typing import Callable, Final, Optional

from PySide6.QtCore import QObject, Signal

from kakeibo.format.money import (
    AmountOverflowError, check_safe_integer, format_money_for_input, parse_money_string,
)

logger: Final = logging.getLogger(__name__)


class AmountFieldState(QObject):
    """
    金额输入框的状态

    只保存数值，显示文本每次读取时由数值推导，两者不会出现不一致。
    """

    # 金额可能超过 32 位整数范围，用 object 传递
    amountChanged = Signal(object)

    def __init__(
        self,
        amount: int = 0,
        on_change: Optional[Callable[[int], None]] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        check_safe_integer(amount)
        self._amount = amount
        self._on_change = on_change

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def text(self) -> str:
        """输入框显示文本（零和负数为空，显示占位符）"""
        return format_money_for_input(self._amount)

    def set_amount(self, value: int) -> None:
        """设置金额，超出安全范围时抛出 AmountOverflowError 且不修改状态"""
        check_safe_integer(value)
        if value == self._amount:
            return
        self._amount = value
        self.amountChanged.emit(value)

    def handle_change(self, raw_text: str) -> None:
        """处理输入框文本变化：解析为数值后更新，并通知外部回调"""
        numeric_value = parse_money_string(raw_text)
        try:
            self.set_amount(numeric_value)
        except AmountOverflowError:
            # 保持当前值不变
            logger.warning(f"金额输入值过大或无效: {raw_text!r}")
            return
        if self._on_change is not None:
            self._on_change(numeric_value)

    def reset(self) -> None:
        """金额清零"""
        self.set_amount(0)
