"""Storage errors: raised by adapters, passed through the journal unchanged."""

from __future__ import annotations

from typing import Any

from event_journal.kernel.errors.base import JournalError


class ConflictError(JournalError):
    """Optimistic-concurrency loss on ``(ref, version)``.

    Another writer already stored ``expected_version + 1`` for *ref*.
    ``actual_version`` is the latest version re-read after the failed write.
    The caller decides whether to re-read and retry.
    """

    default_code = "version_conflict"

    def __init__(self, ref: str, expected_version: int, actual_version: int, **kwargs: Any) -> None:
        super().__init__(
            f"Version conflict on ref '{ref}': "
            f"expected version {expected_version}, latest is {actual_version}",
            detail={
                "ref": ref,
                "expected_version": expected_version,
                "actual_version": actual_version,
            },
            **kwargs,
        )
        self.ref = ref
        self.expected_version = expected_version
        self.actual_version = actual_version


class AdapterError(JournalError):
    """A backend failure that is not a version conflict."""

    default_code = "adapter_error"

    def __init__(
        self,
        adapter: str,
        message: str | None = None,
        *,
        ref: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = {"adapter": adapter}
        if ref is not None:
            detail["ref"] = ref
        super().__init__(message or f"{adapter} adapter error", detail=detail, **kwargs)
        self.adapter = adapter
        self.ref = ref


__all__ = ["AdapterError", "ConflictError"]
