from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Protocol, runtime_checkable


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator


@runtime_checkable
class IDisposable(Protocol):
    """An object which implements the disposable pattern.

    If `dispose` is called more than once, all calls made after the first
    are a no-op. It is generally unsafe to use the object after it is disposed.
    """

    @property
    def is_disposed(self) -> bool: ...

    def dispose(self) -> None: ...


class ObjectDisposedError(RuntimeError):
    pass


def _disposed_error(obj: object) -> ObjectDisposedError:
    msg = f"{type(obj).__name__} object is disposed"
    return ObjectDisposedError(msg)


class DisposableDelegate:
    """A disposable object which delegates to a callback."""

    def __init__(self, callback: Callable[[], object] | None) -> None:
        self._callback = callback
        self._disposed = False
        self._lock = threading.RLock()

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Invoke the callback on the first call; later calls are no-ops.

        The delegate is marked disposed before the callback runs, so an error
        raised by the callback propagates without leaving it half-disposed.
        """
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            callback, self._callback = self._callback, None

        logger.debug("Disposing %r", self)
        if callback is not None:
            callback()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(disposed={self._disposed})"


class DisposableSet:
    """An object which manages a collection of disposables.

    - members are unique by identity
    - members are disposed in the order they were first added
    - add/remove/clear raise `ObjectDisposedError` once the set is disposed.
    """

    def __init__(self, items: Iterable[IDisposable] | None = None) -> None:
        # keyed by id() so members need not be hashable
        self._items: dict[int, IDisposable] | None = {}
        self._lock = threading.RLock()
        if items is not None:
            for item in items:
                self.add(item)

    @property
    def is_disposed(self) -> bool:
        return self._items is None

    def dispose(self) -> None:
        """Dispose every member in insertion order.

        Fail-fast: if a member raises, the error propagates at once and the
        members after it are never disposed. The set itself stays disposed.
        """
        with self._lock:
            if self._items is None:
                return
            items = list(self._items.values())
            self._items = None

        logger.debug("Disposing %s with %d item(s)", type(self).__name__, len(items))
        for item in items:
            try:
                item.dispose()
            except Exception:
                logger.warning("Error disposing %r; remaining items are not disposed", item)
                raise

    def add(self, item: IDisposable) -> None:
        """Add a disposable item to the set. Adding an existing item is a no-op."""
        with self._lock:
            if self._items is None:
                raise _disposed_error(self)
            self._items.setdefault(id(item), item)

    def remove(self, item: IDisposable) -> None:
        """Remove a disposable item from the set. Removing a missing item is a no-op."""
        with self._lock:
            if self._items is None:
                raise _disposed_error(self)
            self._items.pop(id(item), None)

    def clear(self) -> None:
        """Forget all items without disposing them."""
        with self._lock:
            if self._items is None:
                raise _disposed_error(self)
            self._items.clear()

    def __len__(self) -> int:
        items = self._items
        return 0 if items is None else len(items)

    def __contains__(self, item: object) -> bool:
        items = self._items
        return items is not None and items.get(id(item)) is item

    def __iter__(self) -> Iterator[IDisposable]:
        with self._lock:
            snapshot = [] if self._items is None else list(self._items.values())
        return iter(snapshot)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(items={len(self)}, disposed={self.is_disposed})"
