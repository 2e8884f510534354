"""Pytest configuration helpers for the creator discovery project."""

from __future__ import annotations

import asyncio
import inspect
from typing import Any

import pytest

from tests import _ensure_repo_on_path


class _AsyncioCompatPlugin:
    """Minimal fallback runner for ``async def`` tests."""

    def pytest_pyfunc_call(self, pyfuncitem: Any) -> bool | None:
        """Execute coroutine-based tests when ``pytest-asyncio`` is unavailable."""

        test_function = pyfuncitem.obj
        if inspect.iscoroutinefunction(test_function):
            asyncio.run(test_function(**pyfuncitem.funcargs))
            return True
        return None


def pytest_configure(config: pytest.Config) -> None:
    """Hook executed by pytest prior to running any tests."""

    _ensure_repo_on_path()

    # ``pytest-asyncio`` registers itself under the ``asyncio`` plugin name. When
    # it is missing, fall back to running coroutine tests with ``asyncio.run``.
    if not config.pluginmanager.hasplugin("asyncio"):
        config.addinivalue_line(
            "markers",
            "asyncio: fallback marker handled by tests.conftest when pytest-asyncio is absent",
        )
        config.pluginmanager.register(_AsyncioCompatPlugin(), name="asyncio_compat")
