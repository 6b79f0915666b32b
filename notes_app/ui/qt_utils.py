from __future__ import annotations

from contextlib import contextmanager


@contextmanager
def blocked_signals(*objs):
    """
    Временно выключает Qt-сигналы у виджетов и гарантированно включает
    их обратно (нужно при программном заполнении полей формы).
    """
    previous = [obj.blockSignals(True) for obj in objs]
    try:
        yield
    finally:
        for obj, was_blocked in zip(objs, previous):
            obj.blockSignals(was_blocked)
