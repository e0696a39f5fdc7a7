"""
Contenedor observable de valores.

Cada controlador de formulario posee sus propios stores; no existe
estado global compartido entre formularios.
"""

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

Subscriber = Callable[[Any], None]


class Store(Generic[T]):
    """
    Valor observable con suscripción.

    Los suscriptores reciben el valor actual al suscribirse y luego tras
    cada set/update, de forma síncrona y en orden de suscripción.
    """

    def __init__(self, initial: T):
        self._value = initial
        self._subscribers: dict[int, Subscriber] = {}
        self._next_id = 0

    def get(self) -> T:
        """Retorna el valor actual."""
        return self._value

    def set(self, value: T) -> None:
        """Reemplaza el valor y notifica."""
        self._value = value
        self._notify()

    def update(self, fn: Callable[[T], T]) -> None:
        """Reemplaza el valor por fn(valor_actual) y notifica."""
        self.set(fn(self._value))

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Registra un suscriptor.

        Returns:
            Función que cancela la suscripción (idempotente)
        """
        sub_id = self._next_id
        self._next_id += 1
        self._subscribers[sub_id] = callback
        callback(self._value)

        def unsubscribe() -> None:
            self._subscribers.pop(sub_id, None)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _notify(self) -> None:
        # Copia: un suscriptor puede cancelarse durante la notificación
        for callback in list(self._subscribers.values()):
            callback(self._value)
