"""日期标签模块：YYYY-MM-DD 与 YYYY/MM/DD(曜) 之间的转换"""
import re
from datetime import date, datetime
from typing import Final, Optional, Union

from kakeibo.settings import (
    ISO_DATE_FORMAT, LABEL_DATE_FORMAT, WEEKDAY_LABELS,
    MSG_DATE_REQUIRED, MSG_DATE_FORMAT, MSG_DATE_INVALID,
)

_ISO_DATE_PATTERN: Final = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_iso_date(value: Union[str, date]) -> date:
    """
    解析 YYYY-MM-DD 日期字符串

    必须严格符合格式并且是真实存在的日期（2025-02-30 无效）。

    Raises:
        ValueError: 格式不对或日期不存在
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        raise ValueError(MSG_DATE_REQUIRED)
    if not _ISO_DATE_PATTERN.fullmatch(value):
        raise ValueError(MSG_DATE_FORMAT)
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except ValueError:
        raise ValueError(MSG_DATE_INVALID) from None


def format_date_label(d: date) -> str:
    """生成显示用日期标签，如 2025/01/15(水)"""
    return f"{d.year:04d}/{d.month:02d}/{d.day:02d}({WEEKDAY_LABELS[d.weekday()]})"


def parse_date_label(label: str) -> Optional[date]:
    """从日期标签中取出日期部分（忽略星期后缀），无法解析时返回 None"""
    date_part = label.split("(")[0].strip()
    try:
        return datetime.strptime(date_part, LABEL_DATE_FORMAT).date()
    except ValueError:
        return None


def today_iso() -> str:
    """本地日历的今天（YYYY-MM-DD）"""
    today = date.today()
    return f"{today.year:04d}-{today.month:02d}-{today.day:02d}"
