from filed_recipes.app.core.events import ChangeSignal


def test_listeners_called_in_order():
    signal = ChangeSignal()
    calls = []
    signal.subscribe(lambda: calls.append("first"))
    signal.subscribe(lambda: calls.append("second"))

    signal.emit()

    assert calls == ["first", "second"]


def test_unsubscribe():
    signal = ChangeSignal()
    calls = []
    unsubscribe = signal.subscribe(lambda: calls.append(1))

    signal.emit()
    unsubscribe()
    signal.emit()
    unsubscribe()

    assert calls == [1]
    assert len(signal) == 0


def test_listener_can_unsubscribe_itself():
    signal = ChangeSignal()
    calls = []

    def once():
        calls.append("once")
        signal.unsubscribe(once)

    signal.subscribe(once)
    signal.subscribe(lambda: calls.append("always"))

    signal.emit()
    signal.emit()

    assert calls == ["once", "always", "always"]
