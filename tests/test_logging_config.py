import io
import logging

import pytest

from app.core.logging_config import LevelColorFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def make_record(level=logging.WARNING, message="layover too short"):
    return logging.LogRecord("app.search", level, __file__, 10, message, None, None)


class TestLevelColorFormatter:

    def test_colors_level_name(self):
        output = LevelColorFormatter("%(levelname)s %(message)s").format(make_record())
        assert output == "\033[33mWARNING\033[0m layover too short"

    def test_record_is_left_unchanged_for_other_handlers(self):
        record = make_record()
        LevelColorFormatter("%(levelname)s %(message)s").format(record)

        assert record.levelname == "WARNING"
        assert logging.Formatter("%(levelname)s").format(record) == "WARNING"

    def test_unknown_level_name_is_not_colored(self):
        record = make_record(level=5)
        assert LevelColorFormatter("%(levelname)s").format(record) == "Level 5"


class TestSetupLogging:

    def test_plain_output_when_not_a_terminal(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging("debug", stream=stream)

        logging.getLogger("app.search").debug("expanding %s", "ORD")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        line = stream.getvalue()
        assert "[DEBUG] app.search" in line
        assert line.rstrip().endswith("expanding ORD")
        assert "\033[" not in line

    def test_quiets_sqlalchemy_engine(self, restore_root_logger):
        setup_logging(logging.INFO, stream=io.StringIO())
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_unknown_level_name_raises(self, restore_root_logger):
        with pytest.raises(ValueError):
            setup_logging("chatty", stream=io.StringIO())
