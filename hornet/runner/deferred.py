"""Single-resolution completion handle for deferred runs."""

from collections.abc import Callable

from hornet.runner.errors import DeferredAlreadyResolvedError


class Deferred:
    """Completion signal handed to ``test_async`` hooks.

    The hook owns the handle and must call ``resolve()`` exactly once, in the
    same turn or later. Callbacks added after resolution run immediately.
    """

    def __init__(self) -> None:
        self._resolved = False
        self._callbacks: list[Callable[[], None]] = []

    @property
    def resolved(self) -> bool:
        return self._resolved

    def add_callback(self, callback: Callable[[], None]) -> None:
        if self._resolved:
            callback()
        else:
            self._callbacks.append(callback)

    def resolve(self) -> None:
        """Signal completion.

        Raises:
            DeferredAlreadyResolvedError: On a second call.
        """
        if self._resolved:
            raise DeferredAlreadyResolvedError()
        self._resolved = True
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()
