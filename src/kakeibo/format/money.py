"""金额格式化模块

提供金额数值与 ¥ 货币字符串之间的相互转换，所有函数均为纯函数。

两种展示策略：
- 显示用（format_money_for_display）：零和负数也照常显示，如 ¥0、¥-1,500
- 输入用（format_money_for_input）：零、负数、NaN 返回空字符串，让输入框显示占位符
"""
import logging
import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Final, Optional, Union

from kakeibo.settings import CURRENCY_SYMBOL, MAX_SAFE_INTEGER, INVALID_AMOUNT_TEXT

logger: Final = logging.getLogger(__name__)

Number = Union[int, float]

_NON_DIGIT: Final = re.compile(r"[^0-9]")
_MAX_SAFE_DIGITS: Final = len(str(MAX_SAFE_INTEGER))


class AmountOverflowError(ValueError):
    """金额绝对值超过 MAX_SAFE_INTEGER"""

    def __init__(self, value: Number):
        self.value = value
        super().__init__(
            f"金额过大：超过 MAX_SAFE_INTEGER ({MAX_SAFE_INTEGER}) 的值会丢失精度，不予支持。输入值: {value}"
        )


def _is_nan(value: Optional[Number]) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def is_safe_amount(value: Number) -> bool:
    """判断金额是否在安全整数范围内（NaN 与无穷大均视为不安全）"""
    if _is_nan(value):
        return False
    if isinstance(value, float) and math.isinf(value):
        return False
    return abs(value) <= MAX_SAFE_INTEGER


def check_safe_integer(value: Number) -> None:
    """超过安全整数范围时抛出 AmountOverflowError"""
    if abs(value) > MAX_SAFE_INTEGER:
        raise AmountOverflowError(value)


def format_money(
    value: Optional[Number],
    show_symbol: bool = True,
    empty_on_zero: bool = False,
    empty_on_negative: bool = False,
    decimal_places: int = 0,
) -> str:
    """
    将金额格式化为千分位字符串

    Args:
        value: 金额
        show_symbol: 是否带 ¥ 前缀
        empty_on_zero: 零值返回空字符串
        empty_on_negative: 负值返回空字符串
        decimal_places: 小数位数

    Returns:
        格式化后的字符串，如 "¥15,000"；None/NaN 返回空字符串

    Raises:
        AmountOverflowError: 绝对值超过 MAX_SAFE_INTEGER
    """
    if _is_nan(value):
        return ""

    check_safe_integer(value)

    if value == 0 and empty_on_zero:
        return ""
    if value < 0 and empty_on_negative:
        return ""

    if isinstance(value, int) and decimal_places == 0:
        formatted = f"{value:,}"
    else:
        # 与 toLocaleString 一致，.5 远离零舍入
        rounded = Decimal(str(value)).quantize(Decimal(1).scaleb(-decimal_places), rounding=ROUND_HALF_UP)
        formatted = f"{rounded:,.{decimal_places}f}"

    return f"{CURRENCY_SYMBOL}{formatted}" if show_symbol else formatted


def format_money_for_input(value: Optional[Number]) -> str:
    """输入框用格式：零、负数、NaN 返回空字符串"""
    return format_money(value, show_symbol=True, empty_on_zero=True, empty_on_negative=True)


def format_money_for_display(
    value: Optional[Number], show_symbol: bool = True, decimal_places: int = 0
) -> str:
    """显示用格式：包括零和负数在内始终显示"""
    return format_money(value, show_symbol=show_symbol, decimal_places=decimal_places)


def format_amount_text(value: Optional[Number]) -> str:
    """显示用格式，金额过大时返回"無効な値"而不是抛出异常"""
    try:
        return format_money_for_display(value)
    except AmountOverflowError:
        logger.warning(f"金额超出可显示范围: {value}")
        return INVALID_AMOUNT_TEXT


def parse_money_string(text: str) -> int:
    """
    从金额字符串中提取数值

    去掉所有非数字字符（¥、逗号等）后按整数解析，不支持小数点。
    位数超过 MAX_SAFE_INTEGER 时返回 MAX_SAFE_INTEGER + 1，交由调用方按过大处理。
    空字符串、不含数字的字符串以及非字符串输入均返回 0。

    >>> parse_money_string("¥15,000")
    15000
    >>> parse_money_string("abc123def")
    123
    """
    if not isinstance(text, str):
        return 0
    digits = _NON_DIGIT.sub("", text).lstrip("0")
    if len(digits) > _MAX_SAFE_DIGITS:
        # 位数超过安全整数，不再转换（超长字符串转 int 会抛出 ValueError）
        return MAX_SAFE_INTEGER + 1
    return int(digits) if digits else 0
