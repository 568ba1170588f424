"""Streaming test fixtures."""

from __future__ import annotations

from typing import Any, Iterable

import pytest

from chat_providers.base.logging import LogContext, get_logger
from chat_providers.base.streaming import StreamDriver


@pytest.fixture()
def make_driver():
    """Build a driver over a scripted native iterable (or a failing opener)."""

    def _make(script: Iterable[Any] = (), *, open_error: Exception | None = None) -> StreamDriver:
        def _opener():
            if open_error is not None:
                raise open_error
            return script

        return StreamDriver(
            ctx=LogContext(provider="openai", model="gpt-test", wire_family="openai_compatible"),
            opener=_opener,
            logger=get_logger("chat_providers.tests.streaming"),
        )

    return _make
