"""Tests for logging infrastructure."""

import json
import logging
import types
from io import StringIO

from smartenum import SmartIntEnum, member
from smartenum.observability import (
    configure_logging,
    get_logger,
)


def _fresh_enum():
    def body(namespace):
        namespace["A"] = member(1)
        namespace["B"] = member(2)
    return types.new_class("Logged", (SmartIntEnum,), exec_body=body)


class TestConfigureLogging:
    """Tests for logging configuration."""
    
    def test_configures_smartenum_logger(self):
        """Loggers live under the smartenum namespace."""
        configure_logging(level=logging.DEBUG)
        
        logger = get_logger("test")
        assert logger.name == "smartenum.test"
        assert logging.getLogger("smartenum").level == logging.DEBUG
    
    def test_replaces_handlers(self):
        """Reconfiguring leaves a single handler."""
        configure_logging(stream=StringIO())
        configure_logging(stream=StringIO())
        
        assert len(logging.getLogger("smartenum").handlers) == 1
    
    def test_json_format(self):
        """JSON format produces valid JSON with extra fields."""
        stream = StringIO()
        configure_logging(json_format=True, stream=stream)
        
        get_logger("json_test").info(
            "Test message", extra={"extra_data": {"members": 3}}
        )
        
        log_entry = json.loads(stream.getvalue().strip())
        assert log_entry["message"] == "Test message"
        assert log_entry["logger"] == "smartenum.json_test"
        assert log_entry["members"] == 3
    
    def test_readable_format(self):
        """Readable format includes level, logger and message."""
        stream = StringIO()
        configure_logging(json_format=False, stream=stream)
        
        get_logger("readable_test").warning("Test message")
        
        output = stream.getvalue()
        assert "WARNING" in output
        assert "smartenum.readable_test" in output
        assert "Test message" in output


class TestRegistryLogging:
    """Tests for records emitted by the registry."""
    
    def test_build_logged_at_debug(self):
        """Building a registry logs the member count."""
        stream = StringIO()
        configure_logging(level=logging.DEBUG, json_format=True, stream=stream)
        
        Logged = _fresh_enum()
        Logged.get_all()
        
        entries = [json.loads(line) for line in stream.getvalue().splitlines()]
        built = [e for e in entries if e["message"].startswith("Built registry")]
        assert len(built) == 1
        assert built[0]["logger"] == "smartenum.registry"
        assert built[0]["members"] == 2
    
    def test_silent_above_debug(self):
        """Nothing is logged at INFO for a normal build."""
        stream = StringIO()
        configure_logging(level=logging.INFO, stream=stream)
        
        _fresh_enum().get_all()
        
        assert stream.getvalue() == ""
