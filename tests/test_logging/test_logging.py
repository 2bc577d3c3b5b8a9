"""
Tests for structured logging.
"""

import io
import json
import logging
import sys

import pytest

from schemagen.codegen import generate_storage_schema
from schemagen.core.errors import ValidationError
from schemagen.core.types import FieldDescriptor
from schemagen.editor import SchemaEditor
from schemagen.logging import (
    JSONFormatter,
    LogContext,
    TextFormatter,
    configure_logging,
    get_logger,
    with_log_context,
)
from schemagen.logging.context import get_log_context


@pytest.fixture
def stream():
    """Capture schemagen logs as JSON lines."""
    output = io.StringIO()
    configure_logging(level="DEBUG", format="json", output=output)
    yield output
    logging.getLogger("schemagen").handlers.clear()


def read_lines(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


class TestLogContext:
    """Tests for context propagation."""

    def test_to_dict_skips_none(self):
        ctx = LogContext(model_name="user", extra={"attempt": 2})
        assert ctx.to_dict() == {"model_name": "user", "attempt": 2}

    def test_with_log_context_restores_previous(self):
        with with_log_context(model_name="outer"):
            with with_log_context(target="zod"):
                assert get_log_context() == {"model_name": "outer", "target": "zod"}
            assert get_log_context() == {"model_name": "outer"}
        assert get_log_context() == {}


class TestFormatters:
    """Tests for JSON and text formatting."""

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord("schemagen.test", logging.INFO, __file__, 1, "hello", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_json_promotes_context_fields(self):
        data = json.loads(JSONFormatter().format(self._record(model_name="user", attempt=1)))

        assert data["message"] == "hello"
        assert data["model_name"] == "user"
        assert data["extra"] == {"attempt": 1}

    def test_json_includes_exception(self):
        try:
            raise ValidationError()
        except ValidationError:
            record = self._record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))

        assert data["exception"]["type"] == "ValidationError"
        assert "extra" not in data

    def test_text_without_colors(self):
        line = TextFormatter(use_colors=False).format(self._record(record_id="abc"))

        assert "INFO" in line
        assert line.endswith("schemagen.test [record_id=abc]: hello")
        assert "\033[" not in line


class TestConfiguredLogging:
    """Tests for logs emitted by the package."""

    def test_logger_accepts_fields(self, stream: io.StringIO):
        get_logger("schemagen.test").info("Something happened", property_count=3)

        (line,) = read_lines(stream)
        assert line["logger"] == "schemagen.test"
        assert line["extra"]["property_count"] == 3

    def test_generation_logs_without_changing_output(self, stream: io.StringIO):
        props = [FieldDescriptor(name="title")]
        first = generate_storage_schema("post", props)
        second = generate_storage_schema("post", props)

        assert first == second
        rendered = [line for line in read_lines(stream) if line["message"] == "Rendered artifact"]
        assert rendered[0]["target"] == "mongoose"
        assert rendered[0]["model_name"] == "post"

    def test_editor_logs_rejection(self, stream: io.StringIO):
        editor = SchemaEditor()
        with pytest.raises(ValidationError):
            editor.generate()

        levels = [line["level"] for line in read_lines(stream)]
        assert "WARNING" in levels

    def test_editor_context_is_injected(self, stream: io.StringIO):
        editor = SchemaEditor()
        editor.model_name = "user"
        editor.update_property(0, name="email")
        editor.generate()

        generated = [line for line in read_lines(stream) if line["message"] == "Generated schemas"]
        assert generated[0]["model_name"] == "user"
