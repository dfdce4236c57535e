from json_classifier.logging_utils import PipelineLogger


def test_pipeline_logger_promotes_stage_field() -> None:
    logger = PipelineLogger("tests.logging", context={"request_id": "req-1"})

    logger.info("Rejected input", stage="validate", reason="empty")

    entry = logger.as_entries()[-1]
    assert entry.stage == "validate"
    assert entry.level == "INFO"
    assert entry.metadata == {"request_id": "req-1", "reason": "empty"}
    assert "stage" not in entry.metadata


def test_pipeline_logger_renders_text_and_markdown() -> None:
    logger = PipelineLogger("tests.logging")
    logger.warning("Gemini request failed", stage="classify")

    line = logger.as_text_lines()[0]
    assert "[WARNING] Gemini request failed" in line
    assert "stage=classify" in line
    assert "**Gemini request failed** (stage `classify`)" in logger.as_markdown()


def test_empty_logger_has_no_markdown() -> None:
    assert PipelineLogger("tests.logging").as_markdown() == ""


def test_pipeline_logger_mirrors_to_stdlib(caplog) -> None:
    logger = PipelineLogger("tests.logging.mirror", context={"request_id": "req-2"})

    with caplog.at_level("INFO", logger="tests.logging.mirror"):
        logger.error("Classification failed", stage="respond", error_type="transport")

    record = caplog.records[-1]
    assert record.levelname == "ERROR"
    assert "Classification failed" in record.getMessage()
    assert "'error_type': 'transport'" in record.getMessage()
    assert "stage" not in record.getMessage()


def test_entry_without_stage_renders_metadata_only() -> None:
    logger = PipelineLogger("tests.logging", context={"request_id": "req-3"})
    logger.info("Received classification request")

    entry = logger.as_entries()[0]
    assert entry.stage is None
    assert entry.as_text().endswith("Received classification request | {'request_id': 'req-3'}")
    assert entry.as_markdown_line().endswith("**Received classification request** (meta {'request_id': 'req-3'})")
