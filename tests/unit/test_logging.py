"""Console logging setup shared by every module logger."""

# Standard library imports
import logging

# Local application imports
from civicconnect.core.monitoring.logging import get_contextual_logger, get_logger
from civicconnect.settings.common import CommonSettings


class _Collect(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class TestGetLogger:
    def test_handler_lives_on_the_package_logger_only(self) -> None:
        module_logger = get_logger("civicconnect_logcheck.services.issues")
        sibling_logger = get_logger("civicconnect_logcheck.services.auth")
        package_logger = logging.getLogger("civicconnect_logcheck")

        assert module_logger.handlers == []
        assert sibling_logger.handlers == []
        assert module_logger.propagate is True
        assert len(package_logger.handlers) == 1

    def test_each_record_is_handled_once(self) -> None:
        get_logger("civicconnect_logonce.auth")
        package_logger = logging.getLogger("civicconnect_logonce")
        collector = _Collect()
        package_logger.addHandler(collector)
        try:
            get_contextual_logger("civicconnect_logonce.auth", user="u1").warning("Session created")
            get_logger("civicconnect_logonce").warning("Package message")
        finally:
            package_logger.removeHandler(collector)

        assert [record.getMessage() for record in collector.records] == [
            "Session created [user=u1]",
            "Package message",
        ]
        assert len(package_logger.handlers) == 1


class TestCommonSettings:
    def test_only_used_settings_are_declared(self) -> None:
        assert "BASE_DIR" not in CommonSettings.model_fields
        assert "FRONTEND_BASE_URL" not in CommonSettings.model_fields
