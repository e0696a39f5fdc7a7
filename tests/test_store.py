"""
Tests para store.py - Contenedor observable.
"""

from reactform.store import Store


class TestStore:
    """Tests para Store."""

    def test_get_set(self):
        store = Store(1)
        store.set(2)
        assert store.get() == 2

    def test_update(self):
        store = Store({"a": 1})
        store.update(lambda v: {**v, "b": 2})
        assert store.get() == {"a": 1, "b": 2}

    def test_subscriber_receives_current_value_immediately(self):
        """Test la suscripción entrega el valor actual."""
        seen = []
        Store("x").subscribe(seen.append)
        assert seen == ["x"]

    def test_subscribers_notified_in_order(self):
        """Test notificación síncrona en orden de suscripción."""
        store = Store(0)
        calls = []
        store.subscribe(lambda v: calls.append(("a", v)))
        store.subscribe(lambda v: calls.append(("b", v)))
        store.set(1)
        assert calls == [("a", 0), ("b", 0), ("a", 1), ("b", 1)]

    def test_unsubscribe(self):
        """Test cancelar la suscripción detiene las notificaciones."""
        store = Store(0)
        seen = []
        unsubscribe = store.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        store.set(5)
        assert seen == [0]
        assert store.subscriber_count == 0

    def test_unsubscribe_during_notification(self):
        """Test un suscriptor puede cancelarse mientras se notifica."""
        store = Store(0)
        seen = []
        holder = {}

        def once(value):
            seen.append(value)
            if value == 1:
                holder["unsubscribe"]()

        holder["unsubscribe"] = store.subscribe(once)
        store.set(1)
        store.set(2)
        assert seen == [0, 1]

    def test_stores_are_independent(self):
        """Test dos stores no comparten estado."""
        a, b = Store({}), Store({})
        a.update(lambda v: {**v, "x": 1})
        assert b.get() == {}
