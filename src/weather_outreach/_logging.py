"""Call logging for the forecast client and service layers."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "weather_outreach.api"

LOG_DIR_ENV_VAR = "WEATHER_OUTREACH_LOG_DIR"
LOG_FILE_NAME = "api_calls.log"

# Explicit override; when None the directory comes from the environment at first use.
_LOG_DIR: str | None = None

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        log_dir = _LOG_DIR or os.environ.get(LOG_DIR_ENV_VAR) or "logs"
        os.makedirs(log_dir, exist_ok=True)

        _logger = logging.getLogger(LOGGER_NAME)
        _logger.setLevel(logging.DEBUG)
        _logger.propagate = False

        if not _logger.handlers:
            handler = logging.FileHandler(os.path.join(log_dir, LOG_FILE_NAME), encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def _arg_summary(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _item_count(result: Any) -> int:
    return len(result) if isinstance(result, (list, dict)) else 1


def log_api_call(fn: F) -> F:
    """Decorator that logs client endpoint calls (sync or async) to the API log file."""

    def _ok(arg_str: str, result: Any, start: float) -> None:
        get_logger().info(
            "OK: %s(%s) -> %d items (%.3fs)",
            fn.__qualname__, arg_str, _item_count(result), time.monotonic() - start,
        )

    def _fail(arg_str: str, exc: Exception, start: float) -> None:
        get_logger().error(
            "FAIL: %s(%s) -> %s: %s (%.3fs)",
            fn.__qualname__, arg_str, type(exc).__name__, exc, time.monotonic() - start,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            arg_str = _arg_summary(args, kwargs)
            get_logger().info("CALL: %s(%s)", fn.__qualname__, arg_str)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _fail(arg_str, exc, start)
                raise
            _ok(arg_str, result, start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        arg_str = _arg_summary(args, kwargs)
        get_logger().info("CALL: %s(%s)", fn.__qualname__, arg_str)
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _fail(arg_str, exc, start)
            raise
        _ok(arg_str, result, start)
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Decorator that logs service-layer method calls (sync or async) to the API log file."""

    def _fail(exc: Exception, start: float) -> None:
        get_logger().error(
            "SERVICE FAIL: %s -> %s: %s (%.3fs)",
            fn.__qualname__, type(exc).__name__, exc, time.monotonic() - start,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            get_logger().info("SERVICE CALL: %s(%s)", fn.__qualname__, _arg_summary(args, kwargs))
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                _fail(exc, start)
                raise
            get_logger().info("SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        get_logger().info("SERVICE CALL: %s(%s)", fn.__qualname__, _arg_summary(args, kwargs))
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _fail(exc, start)
            raise
        get_logger().info("SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start)
        return result

    return wrapper  # type: ignore[return-value]
