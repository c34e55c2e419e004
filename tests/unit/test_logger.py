"""
Unit tests for the logging utilities.
"""

import json
import logging

import pytest

from trend_engine.utils.logger import JSONFormatter, get_trading_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_json_formatter_includes_trade_fields():
    record = logging.LogRecord(
        name="trend_engine.test", level=logging.INFO, pathname=__file__, lineno=1,
        msg="Signal: %s", args=("BUY",), exc_info=None
    )
    record.side = "BUY"
    record.price = 100.1
    record.timestamp_tick = 2

    entry = json.loads(JSONFormatter().format(record))

    assert entry['message'] == "Signal: BUY"
    assert entry['level'] == "INFO"
    assert entry['side'] == "BUY"
    assert entry['price'] == 100.1
    assert entry['timestamp_tick'] == 2
    assert 'pnl' not in entry


def test_trading_logger_attaches_extras(caplog):
    caplog.set_level(logging.INFO, logger="trend_engine")
    trades = get_trading_logger("trend_engine.test.trades")

    trades.trade_signal(5, "SELL", 98.95, pnl=-1.15)
    trades.position_event(5, "FLAT", 0, 99998.85)

    signal, position = caplog.records[-2:]
    assert signal.side == "SELL" and signal.pnl == -1.15
    assert position.position == 0 and position.cash == 99998.85


def test_setup_logging_configures_root(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "engine.log"
    root = setup_logging("debug", log_file=str(log_file), json_format=True)

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert all(isinstance(h.formatter, JSONFormatter) for h in root.handlers)
    assert log_file.parent.is_dir()

    for handler in root.handlers:
        handler.close()
