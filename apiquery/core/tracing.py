"""
Tracing Context - Thread-safe context management for query tracing.

Holds the identifiers of the request being served so that every log line
emitted while querying the defect database can be correlated.

Usage:
    TracingContext.set(correlation_id="abc-123", task_id="1001")
    ctx = TracingContext.get()
    TracingContext.clear()
"""

import uuid
from contextvars import ContextVar
from typing import Dict

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_task_id: ContextVar[str] = ContextVar("task_id", default="")
_build_id: ContextVar[str] = ContextVar("build_id", default="")


class TracingContext:
    """Thread-safe tracing context."""

    @staticmethod
    def set(
        correlation_id: str = "",
        task_id: str = "",
        build_id: str = "",
    ) -> None:
        """Set tracing context for current execution."""
        if correlation_id:
            _correlation_id.set(correlation_id)
        if task_id:
            _task_id.set(task_id)
        if build_id:
            _build_id.set(build_id)

    @staticmethod
    def get() -> Dict[str, str]:
        """Get current tracing context as dict."""
        return {
            "correlation_id": _correlation_id.get(),
            "task_id": _task_id.get(),
            "build_id": _build_id.get(),
        }

    @staticmethod
    def get_or_create_correlation_id() -> str:
        """Get current correlation ID or create a new one."""
        corr_id = _correlation_id.get()
        if not corr_id:
            corr_id = str(uuid.uuid4())
            _correlation_id.set(corr_id)
        return corr_id

    @staticmethod
    def get_log_prefix() -> str:
        """Get a formatted prefix for manual logging."""
        corr_id = _correlation_id.get()
        if corr_id:
            return f"[corr={corr_id[:8]}]"
        return ""

    @staticmethod
    def clear() -> None:
        """Clear all tracing context."""
        _correlation_id.set("")
        _task_id.set("")
        _build_id.set("")
