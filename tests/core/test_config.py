import logging
import pytest
from pydantic import ValidationError
from fpkit.core.config import Settings
from fpkit.logger.logger import setup_logger


def test_defaults():
    settings = Settings.load({})
    assert settings.LOG_LEVEL == "INFO"
    assert settings.STRICT_ARITY is True


def test_load_from_environment():
    settings = Settings.load({"FPKIT_LOG_LEVEL": "debug", "FPKIT_STRICT_ARITY": "false"})
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.STRICT_ARITY is False


def test_generic_log_level_fallback():
    assert Settings.load({"LOG_LEVEL": "warning"}).LOG_LEVEL == "WARNING"
    assert (
        Settings.load({"LOG_LEVEL": "warning", "FPKIT_LOG_LEVEL": "error"}).LOG_LEVEL
        == "ERROR"
    )


@pytest.mark.parametrize(
    "environ",
    [{"FPKIT_LOG_LEVEL": "verbose"}, {"FPKIT_STRICT_ARITY": "sometimes"}],
)
def test_invalid_values_raise(environ):
    with pytest.raises(ValidationError):
        Settings.load(environ)


def test_setup_logger_configures_once():
    logger = setup_logger("fpkit.test", level="WARNING")
    again = setup_logger("fpkit.test", level="DEBUG")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False
