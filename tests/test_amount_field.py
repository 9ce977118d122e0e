"""
Kakeibo - 金额输入框状态测试
"""
import logging

import pytest

from kakeibo.format.money import AmountOverflowError
from kakeibo.services.amount_field import AmountFieldState
from kakeibo.settings import MAX_SAFE_INTEGER


def test_initial_state():
    """TC-FIELD-001: 初始为 0，显示为空"""
    field = AmountFieldState()
    assert field.amount == 0
    assert field.text == ""

    field = AmountFieldState(15000)
    assert field.text == "¥15,000"


def test_set_amount_updates_text():
    """TC-FIELD-002: 修改数值后显示文本同步"""
    field = AmountFieldState()
    field.set_amount(25000)
    assert field.amount == 25000
    assert field.text == "¥25,000"

    field.set_amount(-500)
    assert field.text == ""

    field.set_amount(0)
    assert field.text == ""


def test_handle_change_parses_and_notifies():
    """TC-FIELD-003: 输入文本解析为数值并通知回调"""
    received = []
    field = AmountFieldState(on_change=received.append)

    field.handle_change("¥1,5000")
    assert field.amount == 15000
    assert field.text == "¥15,000"

    field.handle_change("abc")
    assert field.amount == 0
    assert field.text == ""

    assert received == [15000, 0]


def test_amount_changed_signal():
    """TC-FIELD-004: 数值变化时发出 amountChanged，未变化时不发出"""
    field = AmountFieldState()
    emitted = []
    field.amountChanged.connect(emitted.append)

    field.set_amount(100)
    field.set_amount(100)
    field.set_amount(MAX_SAFE_INTEGER)

    assert emitted == [100, MAX_SAFE_INTEGER]


def test_set_amount_overflow_keeps_state():
    """TC-FIELD-005: 超出安全范围时抛出异常且状态不变"""
    field = AmountFieldState(300)
    with pytest.raises(AmountOverflowError):
        field.set_amount(MAX_SAFE_INTEGER + 1)
    assert field.amount == 300
    assert field.text == "¥300"


def test_handle_change_overflow_is_recovered(caplog):
    """TC-FIELD-006: 输入过大时记录警告并保持当前值，不调用回调"""
    received = []
    field = AmountFieldState(1200, on_change=received.append)

    with caplog.at_level(logging.WARNING, logger="kakeibo.services.amount_field"):
        field.handle_change("99999999999999999999")

    assert field.amount == 1200
    assert field.text == "¥1,200"
    assert received == []
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_reset():
    """TC-FIELD-007: 清零"""
    field = AmountFieldState(800)
    field.reset()
    assert field.amount == 0
    assert field.text == ""


def test_handle_change_very_long_input_is_recovered(caplog):
    """TC-FIELD-008: 粘贴超长数字时记录警告并保持当前值"""
    received = []
    field = AmountFieldState(1200, on_change=received.append)

    with caplog.at_level(logging.WARNING, logger="kakeibo.services.amount_field"):
        field.handle_change("9" * 5000)

    assert field.amount == 1200
    assert field.text == "¥1,200"
    assert received == []
    assert any(r.levelno == logging.WARNING for r in caplog.records)
