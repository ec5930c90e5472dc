import asyncio
import logging
from collections.abc import Callable
from typing import Any

import pytest
from loguru import logger

from errwhat.application.reporting import get_logging_info
from errwhat.domain.chain import is_error
from errwhat.domain.collection import InfoCollection
from errwhat.domain.info import str_info
from errwhat.domain.structured_error import StructuredError
from errwhat.infrastructure.error_utils import log_and_wrap, wrap_exceptions
from errwhat.infrastructure.logs import log_error

SENTINEL = KeyError("missing")


def test_wrap_exceptions_sync(make_context: Callable[..., Any]) -> None:
    ctx = make_context(str_info("span", "load"))

    @wrap_exceptions(str_info("step", "load"), context=ctx)
    def load() -> None:
        raise SENTINEL

    with pytest.raises(StructuredError) as exc:
        load()

    assert is_error(exc.value, SENTINEL)
    assert exc.value.get_additional_info() == InfoCollection(
        [str_info("span", "load"), str_info("step", "load")]
    )
    assert load.__name__ == "load"


def test_wrap_exceptions_passes_results_through() -> None:
    @wrap_exceptions(str_info("step", "add"))
    def add(a: int, b: int) -> int:
        return a + b

    assert add(1, 2) == 3


def test_wrap_exceptions_keeps_inner_callstack() -> None:
    inner = StructuredError(SENTINEL, str_info("inner", "1"))

    @wrap_exceptions(str_info("outer", "2"))
    def fail() -> None:
        raise inner

    with pytest.raises(StructuredError) as exc:
        fail()

    assert exc.value.callstack == ()
    assert exc.value.get_callstack() == inner.get_callstack()
    assert get_logging_info(exc.value).additional_info == InfoCollection(
        [str_info("outer", "2"), str_info("inner", "1")]
    )


@pytest.mark.asyncio
async def test_wrap_exceptions_async() -> None:
    @wrap_exceptions(str_info("step", "fetch"))
    async def fetch() -> None:
        raise SENTINEL

    with pytest.raises(StructuredError) as exc:
        await fetch()
    assert is_error(exc.value, SENTINEL)


@pytest.mark.asyncio
async def test_wrap_exceptions_async_lets_cancellation_through() -> None:
    @wrap_exceptions()
    async def cancelled() -> None:
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await cancelled()


def test_log_error_binds_callstack_and_info() -> None:
    records: list[dict] = []
    sink_id = logger.add(lambda message: records.append(message.record), level="ERROR")
    try:
        err = StructuredError(RuntimeError("boom"), str_info("user", "alice"))
        log_error(err)
    finally:
        logger.remove(sink_id)

    (record,) = records
    assert record["message"] == "boom"
    assert record["extra"]["info"] == {"user": "alice"}
    assert record["extra"]["callstack"] == err.get_callstack()


def test_log_and_wrap_logs_and_raises(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR)
    sink_id = logger.add(caplog.handler, level="ERROR", format="{message}")
    try:
        with pytest.raises(StructuredError) as exc:
            try:
                raise ValueError("bad value")
            except ValueError as err:
                log_and_wrap(err, str_info("field", "age"))
    finally:
        logger.remove(sink_id)

    assert "bad value" in caplog.text
    assert exc.value.additional_info == InfoCollection([str_info("field", "age")])
