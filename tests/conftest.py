"""
Kakeibo 测试公共夹具
"""
import pytest
from PySide6.QtCore import QCoreApplication

from kakeibo.services.ledger_store import LedgerStore


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """整个测试会话共用一个 QCoreApplication"""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def store():
    """空账本"""
    return LedgerStore()
