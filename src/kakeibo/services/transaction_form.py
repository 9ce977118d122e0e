"""收支共用的交易登记表单状态"""
import logging
from typing import Callable, Final, List, Optional

from kakeibo.format.dates import parse_iso_date, today_iso
from kakeibo.models.transaction import Transaction
from kakeibo.services.amount_field import AmountFieldState
from kakeibo.services.ledger_store import LedgerValidationError, validate_amount

logger: Final = logging.getLogger(__name__)

SubmitCallback = Callable[[int, str], Optional[Transaction]]


class TransactionFormState:
    """
    交易登记表单

    - 未开启"指定日期"时使用今天的日期
    - 提交成功后只清空金额，日期和开关状态保留
    """

    def __init__(self, on_submit: Optional[SubmitCallback] = None):
        self.amount_field = AmountFieldState()
        self.use_custom_date = False
        self.date = today_iso()
        self._on_submit = on_submit

    @property
    def amount(self) -> int:
        return self.amount_field.amount

    def _effective_date(self) -> str:
        return self.date if self.use_custom_date else today_iso()

    def errors(self) -> List[str]:
        """返回全部校验错误信息，为空表示可以提交"""
        messages = []
        try:
            validate_amount(self.amount)
        except LedgerValidationError as e:
            messages.append(str(e))
        if self.use_custom_date:
            try:
                parse_iso_date(self.date)
            except ValueError as e:
                messages.append(str(e))
        return messages

    @property
    def is_valid(self) -> bool:
        return not self.errors()

    def submit(self) -> Optional[Transaction]:
        """校验通过时调用提交回调并清空金额；否则不做任何事并返回 None"""
        errors = self.errors()
        if errors:
            logger.info(f"表单校验未通过: {'; '.join(errors)}")
            return None
        if self._on_submit is None:
            return None

        result = self._on_submit(self.amount, self._effective_date())
        self.amount_field.reset()
        return result
