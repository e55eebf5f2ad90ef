"""Minimal disposable object library.

This package provides a uniform contract for deterministic resource cleanup,
plus two building blocks for composing it.

Exports:
- `IDisposable`: Runtime-checkable protocol with an `is_disposed` property and
  an idempotent `dispose()` method.
- `DisposableDelegate`: Disposable which invokes a callback on first disposal.
- `DisposableSet`: Ordered, identity-unique collection of disposables which
  disposes its members together, in insertion order.
- `ObjectDisposedError`: Raised when a disposed set is mutated.
"""

from ._disposable import DisposableDelegate, DisposableSet, IDisposable, ObjectDisposedError


__all__ = ["DisposableDelegate", "DisposableSet", "IDisposable", "ObjectDisposedError"]
