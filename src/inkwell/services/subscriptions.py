"""Cancellation handles for live listeners."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType


class Subscription:
    """Handle returned by every ``subscribe``-style call.

    The owner must release it with :meth:`unsubscribe`, or use it as a
    context manager so teardown always happens::

        with layer.subscribe_chat(render) as sub:
            ...
    """

    def __init__(self, cancel: Callable[[Subscription], None]) -> None:
        self._cancel: Callable[[Subscription], None] | None = cancel

    @property
    def active(self) -> bool:
        return self._cancel is not None

    def unsubscribe(self) -> None:
        """Stop delivery. Calling it again is a no-op."""
        cancel, self._cancel = self._cancel, None
        if cancel is not None:
            cancel(self)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unsubscribe()
