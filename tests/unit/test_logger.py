from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

from studyplan.logger import setup_logger


def test_console_sink_shows_structured_fields(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logger(level="INFO")

    logger.info("Generating study plan", subjects=2, study_days=7)

    err = capsys.readouterr().err
    assert "Generating study plan" in err
    assert "'subjects': 2" in err
    assert "'study_days': 7" in err


def test_file_sink_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "studyplan.log"
    setup_logger(level="DEBUG", log_file=log_file)

    logger.info("Plan written", path="out.json")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "Logger initialized with level=DEBUG" in text
    assert "Plan written | {'path': 'out.json'}" in text
