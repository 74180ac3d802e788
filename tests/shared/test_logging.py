import json
import logging

from app.shared.utils.logging import (
    ContextualFormatter,
    JSONFormatter,
    get_logger,
    log_context,
    request_id_var,
)


def make_record(message="hola", extra_fields=None):
    record = logging.LogRecord("plantitas.test", logging.INFO, __file__, 10, message, None, None)
    if extra_fields:
        record.extra_fields = extra_fields
    return record


def test_get_logger_is_cached():
    assert get_logger("a.b") is get_logger("a.b")


def test_log_context_sets_and_resets_request_id():
    with log_context(request_id="req-1") as context:
        assert context["request_id"] == "req-1"
        assert request_id_var.get() == "req-1"
    assert request_id_var.get() == ""


def test_log_context_generates_request_id():
    with log_context() as context:
        assert context["request_id"]


def test_json_formatter_nests_extra_fields():
    formatter = JSONFormatter("%(message)s")

    with log_context(request_id="req-2"):
        output = json.loads(formatter.format(make_record(extra_fields={"agent": "species"})))

    assert output["message"] == "hola"
    assert output["level"] == "INFO"
    assert output["service"] == "plantitas-ai"
    assert output["request_id"] == "req-2"
    assert output["extra"] == {"agent": "species"}


def test_contextual_formatter():
    formatter = ContextualFormatter("%(service)s [%(request_id)s] %(message)s")

    with log_context(request_id="req-3"):
        output = formatter.format(make_record())

    assert output == "plantitas-ai [req-3] hola"


def test_structured_logger_passes_extra_fields(caplog):
    logger = get_logger("plantitas.test.structured")

    with caplog.at_level(logging.INFO, logger="plantitas.test.structured"):
        logger.info("Agent done", extra={"agent": "care"}, cost=120)

    record = caplog.records[-1]
    assert record.getMessage() == "Agent done"
    assert record.extra_fields == {"agent": "care", "cost": 120}


def test_performance_logger_levels(caplog):
    logger = get_logger("plantitas.test.performance")

    with caplog.at_level(logging.INFO, logger="plantitas.test.performance"):
        logger.performance.log_ai_operation("chat_completion", "gpt-4o", True, 12.5, tokens_used=90)
        logger.performance.log_ai_operation("chat_completion", "gpt-4o", False, 3.0, error="timeout")

    ok, failed = caplog.records[-2:]
    assert ok.levelno == logging.INFO
    assert ok.extra_fields["tokens_used"] == 90
    assert failed.levelno == logging.WARNING
    assert failed.extra_fields["error"] == "timeout"
