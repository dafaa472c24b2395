"""Tests for the response envelope helpers and logging setup."""

import json
import logging

import pytest

from portfolio_backend.logging_config import setup_logging
from portfolio_backend.schemas.skill import ExistsResult
from portfolio_backend.utils.responses import current_millis, error_response, success_response


def body_of(response) -> dict:
    return json.loads(response.body)


class TestSuccessResponse:
    """Tests for success_response."""

    def test_list_payload_counts_items(self):
        """count is the list length."""
        response = success_response(["Backend", "Frontend", "Cloud"])
        body = body_of(response)
        assert response.status_code == 200
        assert body["success"] is True
        assert body["data"] == ["Backend", "Frontend", "Cloud"]
        assert body["count"] == 3

    def test_single_payload_counts_one(self):
        """Non-list payloads count as 1 and schemas dump with aliases."""
        body = body_of(success_response(ExistsResult(skill_id=4, exists=True)))
        assert body["count"] == 1
        assert body["data"] == {"skillId": 4, "exists": True}

    def test_string_payload_counts_one(self):
        """Strings are not treated as lists."""
        assert body_of(success_response("ok"))["count"] == 1

    def test_custom_status(self):
        """Status code is configurable."""
        assert success_response({"id": 1}, status_code=201).status_code == 201

    def test_timestamp_is_epoch_millis(self):
        """timestamp is close to now in milliseconds."""
        before = current_millis()
        body = body_of(success_response([]))
        assert before <= body["timestamp"] <= current_millis()


class TestErrorResponse:
    """Tests for error_response."""

    def test_error_shape(self):
        """Error envelopes carry error, details and timestamp but no data."""
        response = error_response("Skill not found", "No skill found with ID: 9", 404)
        body = body_of(response)
        assert response.status_code == 404
        assert body["success"] is False
        assert body["error"] == "Skill not found"
        assert body["details"] == "No skill found with ID: 9"
        assert isinstance(body["timestamp"], int)
        assert set(body) == {"success", "error", "details", "timestamp"}


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture
    def bare_root_logger(self):
        """Temporarily strip the root logger's handlers."""
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        root.handlers = []
        yield root
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)

    def test_configures_console_and_file(self, bare_root_logger, tmp_path):
        """A console handler and a file handler are attached."""
        logfile = tmp_path / "logs" / "app.log"
        setup_logging("debug", str(logfile))

        assert bare_root_logger.level == logging.DEBUG
        assert len(bare_root_logger.handlers) == 2
        assert any(isinstance(h, logging.FileHandler) for h in bare_root_logger.handlers)

        logging.getLogger("portfolio_backend.test").info("hello")
        for handler in bare_root_logger.handlers:
            handler.flush()
        assert "[INFO] portfolio_backend.test: hello" in logfile.read_text(encoding="utf-8")

    def test_second_call_is_noop(self, bare_root_logger):
        """Calling twice does not duplicate handlers."""
        setup_logging("INFO")
        setup_logging("DEBUG")
        assert len(bare_root_logger.handlers) == 1
        assert bare_root_logger.level == logging.INFO

    def test_unknown_level_falls_back_to_info(self, bare_root_logger):
        """Unrecognized level names default to INFO."""
        setup_logging("LOUD")
        assert bare_root_logger.level == logging.INFO
