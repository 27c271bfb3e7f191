from __future__ import annotations

from loguru import logger
import pytest

from waldhari.core.logging import LoguruLogService, LogLevel, MemoryLogService, setup_logging
from waldhari.core.testing import StubLogService


@pytest.fixture
def loguru_sink():
    messages = []
    handler_id = logger.add(
        lambda msg: messages.append(msg.record),
        level="DEBUG",
        format="{message}",
    )
    yield messages
    logger.remove(handler_id)


def test_loguru_service_forwards_with_channel(loguru_sink):
    service = LoguruLogService("TestMod")

    service.warn("vehicle missing")

    assert len(loguru_sink) == 1
    record = loguru_sink[0]
    assert record["level"].name == "WARNING"
    assert record["message"] == "vehicle missing"
    assert record["extra"]["channel"] == "TestMod"


def test_loguru_service_filters_below_level(loguru_sink):
    service = LoguruLogService("TestMod", LogLevel.INFO)

    service.debug("hidden")
    service.info("shown")

    assert [record["message"] for record in loguru_sink] == ["shown"]


def test_loguru_service_attaches_exception(loguru_sink):
    service = LoguruLogService("TestMod")
    try:
        raise RuntimeError("boom")
    except RuntimeError as exc:
        service.error("failed", exc)

    record = loguru_sink[0]
    assert record["level"].name == "ERROR"
    assert record["exception"].type is RuntimeError


def test_loguru_service_appends_text_error(loguru_sink):
    service = LoguruLogService("TestMod")

    service.error("failed", "disk full")

    assert loguru_sink[0]["message"] == "failed\ndisk full"


def test_setup_logging_writes_to_stderr(capsys):
    setup_logging("debug")
    LoguruLogService("Console").info("hello console")

    captured = capsys.readouterr()
    assert "hello console" in captured.err
    assert "Console" in captured.err
    logger.remove()


def test_memory_service_records_and_filters():
    service = MemoryLogService(LogLevel.INFO)

    service.debug("hidden")
    service.info("one")
    service.error("two", ValueError("bad"))

    assert service.messages() == ["one", "two"]
    assert service.messages(LogLevel.ERROR) == ["two"]
    assert "ValueError: bad" in service.at_level(LogLevel.ERROR)[0].error

    service.clear()
    assert service.records == []


def test_stub_service_accepts_every_call():
    stub = StubLogService()

    stub.debug("a")
    stub.info("b")
    stub.warn("c")
    stub.error("d", ValueError("e"))

    assert stub.is_enabled(LogLevel.DEBUG)
