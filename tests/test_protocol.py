from litedispose import DisposableDelegate, DisposableSet, IDisposable


def test_delegate_conforms_to_protocol():
    assert isinstance(DisposableDelegate(None), IDisposable)


def test_set_conforms_to_protocol():
    assert isinstance(DisposableSet(), IDisposable)


def test_unrelated_class_conforms_structurally():
    class Handle:
        def __init__(self) -> None:
            self.closed = False

        @property
        def is_disposed(self) -> bool:
            return self.closed

        def dispose(self) -> None:
            self.closed = True

    handle = Handle()
    assert isinstance(handle, IDisposable)

    s = DisposableSet([handle])
    s.dispose()
    assert handle.is_disposed


def test_object_without_dispose_does_not_conform():
    class NotDisposable:
        is_disposed = False

    assert not isinstance(NotDisposable(), IDisposable)
