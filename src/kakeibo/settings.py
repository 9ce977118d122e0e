"""应用程序配置模块"""
from typing import Final, Tuple

# ==================== 应用信息 ====================
APP_NAME: Final = "Kakeibo"
VERSION: Final = "0.3.0"

# ==================== 货币设置 ====================
CURRENCY_SYMBOL: Final = "¥"
CURRENCY_CODE: Final = "JPY"

# ==================== 业务规则 ====================
# 超过该值的整数无法在双精度浮点中精确表示，金额一律视为无效
MAX_SAFE_INTEGER: Final = 2 ** 53 - 1

# ==================== 日期格式 ====================
ISO_DATE_FORMAT: Final = "%Y-%m-%d"
LABEL_DATE_FORMAT: Final = "%Y/%m/%d"
# 周一开始，与 date.weekday() 的下标一致
WEEKDAY_LABELS: Final[Tuple[str, ...]] = ("月", "火", "水", "木", "金", "土", "日")

# ==================== 交易类型 ====================
KIND_EXPENSE: Final = "expense"
KIND_INCOME: Final = "income"

# ==================== 提示文本 ====================
INVALID_AMOUNT_TEXT: Final = "無効な値"
MSG_AMOUNT_POSITIVE: Final = "金額は正の数値を入力してください"
MSG_AMOUNT_TOO_LARGE: Final = f"金額は{MAX_SAFE_INTEGER:,}円以下で入力してください"
MSG_AMOUNT_NOT_INTEGER: Final = "有効な数値を入力してください"
MSG_DATE_REQUIRED: Final = "日付を選択してください"
MSG_DATE_FORMAT: Final = "日付はYYYY-MM-DD形式で入力してください"
MSG_DATE_INVALID: Final = "有効な日付を入力してください"
