"""
Contrato de enlace entre el controlador y una capa de interfaz.

El controlador nunca descubre ni referencia elementos concretos: trabaja
con un Container que resuelve rutas de campo a elementos y expone
eventos por ruta. MemoryContainer es una implementación en memoria, sin
interfaz gráfica, útil para pruebas y para la línea de comandos.
"""

from typing import Any, Callable, Iterable, Optional, Protocol

from reactform.core.paths import PathLike, join_path

EVENT_INPUT = "input"
EVENT_PASTE = "paste"
EVENT_SUBMIT = "submit"

# Eventos que transportan un valor crudo de un campo
FIELD_EVENTS = (EVENT_INPUT, EVENT_PASTE)

Remover = Callable[[], None]


class Container(Protocol):
    """Capacidad mínima que el controlador requiere de una capa de interfaz."""

    def field_paths(self) -> Iterable[str]:
        """Rutas de los campos presentes en el contenedor."""
        ...

    def write(self, path: str, value: Any) -> bool:
        """Muestra un valor; False si no existe elemento para la ruta."""
        ...

    def write_error(self, path: str, message: str) -> bool:
        """Muestra un mensaje de error; False si no existe elemento."""
        ...

    def listen(self, event: str, path: Optional[str], callback: Callable[[Any], Any]) -> Remover:
        """Registra un callback y retorna la función que lo elimina."""
        ...


class DetachHandle:
    """
    Resultado de enlazar un controlador a un contenedor.

    ``release()`` elimina todos los listeners y suscripciones; llamarlo más
    de una vez no tiene efecto. También puede usarse como context manager.
    """

    def __init__(self, removers: Iterable[Remover]):
        self._removers = list(removers)

    @property
    def released(self) -> bool:
        return not self._removers

    def release(self) -> None:
        removers, self._removers = self._removers, []
        for remove in removers:
            remove()

    def __enter__(self) -> "DetachHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()


class MemoryContainer:
    """
    Contenedor en memoria.

    Cada campo es un elemento con valor de texto, como un input HTML.
    Los métodos type/paste/submit simulan eventos del usuario.
    """

    def __init__(self, paths: Iterable[PathLike]):
        self._elements: dict[str, str] = {join_path(p): "" for p in paths}
        self._errors: dict[str, str] = {}
        self._listeners: dict[tuple[str, Optional[str]], dict[int, Callable]] = {}
        self._next_id = 0

    # ------------------------------------------------------------------
    # Container
    # ------------------------------------------------------------------

    def field_paths(self) -> list[str]:
        return list(self._elements)

    def write(self, path: str, value: Any) -> bool:
        if path not in self._elements:
            return False
        self._elements[path] = "" if value is None else str(value)
        return True

    def write_error(self, path: str, message: str) -> bool:
        if path not in self._elements:
            return False
        if message:
            self._errors[path] = message
        else:
            self._errors.pop(path, None)
        return True

    def listen(self, event: str, path: Optional[str], callback: Callable[[Any], Any]) -> Remover:
        listener_id = self._next_id
        self._next_id += 1
        bucket = self._listeners.setdefault((event, path), {})
        bucket[listener_id] = callback

        def remove() -> None:
            bucket.pop(listener_id, None)
            if not bucket:
                self._listeners.pop((event, path), None)

        return remove

    # ------------------------------------------------------------------
    # Simulación de eventos
    # ------------------------------------------------------------------

    def _dispatch(self, event: str, path: Optional[str], payload: Any) -> None:
        for callback in list(self._listeners.get((event, path), {}).values()):
            callback(payload)

    def type(self, path: PathLike, text: str) -> str:
        """Reemplaza el texto del elemento y emite ``input``. Retorna lo mostrado."""
        key = join_path(path)
        self._elements[key] = text
        self._dispatch(EVENT_INPUT, key, text)
        return self._elements[key]

    def paste(self, path: PathLike, text: str) -> str:
        """Pega texto al final del elemento y emite ``paste``."""
        key = join_path(path)
        raw = self._elements.get(key, "") + text
        self._elements[key] = raw
        self._dispatch(EVENT_PASTE, key, raw)
        return self._elements[key]

    def submit(self) -> dict[str, str]:
        """Emite ``submit`` con la instantánea plana de los elementos."""
        snapshot = dict(self._elements)
        self._dispatch(EVENT_SUBMIT, None, snapshot)
        return snapshot

    # ------------------------------------------------------------------
    # Inspección
    # ------------------------------------------------------------------

    def displayed(self, path: PathLike) -> str:
        return self._elements[join_path(path)]

    def displayed_error(self, path: PathLike) -> str:
        return self._errors.get(join_path(path), "")

    def listener_count(self) -> int:
        return sum(len(bucket) for bucket in self._listeners.values())
