"""
Utilidades de rutas de campos (FieldPath).

Un campo anidado se identifica por una secuencia de segmentos
(``("address", "city")``) cuya forma externa es la cadena con puntos
``"address.city"``. Este módulo convierte entre ambas formas y recorre
árboles de valores anidados leyendo y escribiendo por ruta.
"""

from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Iterable, Union

Segment = Union[str, int]
FieldPath = tuple[Segment, ...]
PathLike = Union[str, int, Iterable[Segment]]

SEPARATOR = "."

_MISSING = object()


def to_path(path: PathLike) -> FieldPath:
    """
    Normaliza una ruta a tupla de segmentos.

    Args:
        path: Cadena con puntos, entero o secuencia de segmentos

    Returns:
        Tupla de segmentos sin segmentos vacíos
    """
    if isinstance(path, str):
        return tuple(s for s in path.split(SEPARATOR) if s)
    if isinstance(path, int):
        return (path,)
    segments = []
    for seg in path:
        if isinstance(seg, int):
            segments.append(seg)
        elif seg is not None and str(seg) != "":
            segments.append(str(seg))
    return tuple(segments)


def join_path(path: PathLike) -> str:
    """Retorna la forma con puntos de una ruta."""
    return SEPARATOR.join(str(s) for s in to_path(path))


def _index(node: list, seg: Segment) -> int | None:
    """Índice de lista para un segmento, o None si no aplica."""
    if isinstance(seg, bool):
        return None
    if isinstance(seg, int):
        idx = seg
    elif isinstance(seg, str) and seg.isdigit():
        idx = int(seg)
    else:
        return None
    return idx if 0 <= idx < len(node) else None


def _child(node: Any, seg: Segment) -> Any:
    if isinstance(node, Mapping):
        if seg in node:
            return node[seg]
        # Claves numéricas escritas como enteros o como texto
        alt = str(seg) if isinstance(seg, int) else (int(seg) if seg.isdigit() else _MISSING)
        if alt is not _MISSING and alt in node:
            return node[alt]
        return _MISSING
    if isinstance(node, list):
        idx = _index(node, seg)
        return _MISSING if idx is None else node[idx]
    return _MISSING


def get_in(tree: Any, path: PathLike, default: Any = None) -> Any:
    """
    Lee el valor en una ruta.

    Args:
        tree: Árbol de valores (dicts anidados, listas como hojas o índices)
        path: Ruta del campo
        default: Valor retornado si algún segmento no existe

    Returns:
        Valor encontrado o default
    """
    node = tree
    for seg in to_path(path):
        node = _child(node, seg)
        if node is _MISSING:
            return default
    return node


def set_in(tree: dict, path: PathLike, value: Any) -> dict:
    """
    Escribe un valor en una ruta, creando contenedores intermedios.

    Los hermanos existentes nunca se pierden. Un valor intermedio que no es
    contenedor se reemplaza por un dict nuevo.
    Un índice más allá del final de una lista la extiende con None; un
    segmento que no es índice convierte la lista en dict.

    Returns:
        El mismo árbol recibido (modificado en el lugar)
    """
    segments = to_path(path)
    if not segments:
        raise ValueError("La ruta no puede estar vacía")

    node: Any = tree
    parent: Any = None
    parent_seg: Segment = ""
    for seg in segments[:-1]:
        if parent is not None:
            node = _writable(parent, parent_seg, node, seg)
        child = _child(node, seg)
        if not isinstance(child, (dict, list)):
            child = {}
            _assign(node, seg, child)
        parent, parent_seg = node, seg
        node = child
    if parent is not None:
        node = _writable(parent, parent_seg, node, segments[-1])
    _assign(node, segments[-1], value)
    return tree


def _is_list_key(seg: Segment) -> bool:
    if isinstance(seg, bool):
        return False
    if isinstance(seg, int):
        return seg >= 0
    return seg.isdigit()


def _writable(parent: Any, parent_seg: Segment, node: Any, seg: Segment) -> Any:
    """Convierte una lista en dict cuando el segmento no es un índice."""
    if isinstance(node, list) and not _is_list_key(seg):
        node = {str(i): item for i, item in enumerate(node)}
        _assign(parent, parent_seg, node)
    return node


def _assign(node: Any, seg: Segment, value: Any) -> None:
    if isinstance(node, list):
        idx = _index(node, seg)
        if idx is not None:
            node[idx] = value
            return
        if str(seg).isdigit():
            # Índice más allá del final: se rellena con None
            node.extend([None] * (int(seg) - len(node) + 1))
            node[int(seg)] = value
            return
        raise IndexError(f"Índice de lista inválido: {seg}")
    if isinstance(seg, str) and seg not in node and seg.isdigit() and int(seg) in node:
        node[int(seg)] = value
    else:
        node[seg] = value


def delete_in(tree: Any, path: PathLike) -> bool:
    """Elimina la hoja en una ruta. Retorna True si existía."""
    segments = to_path(path)
    if not segments:
        return False
    parent = get_in(tree, segments[:-1], _MISSING) if len(segments) > 1 else tree
    last = segments[-1]
    if isinstance(parent, dict):
        for key in (last, str(last)):
            if key in parent:
                del parent[key]
                return True
    return False


def flatten(tree: Mapping, prefix: str = "") -> dict[str, Any]:
    """
    Aplana un árbol a un dict ruta -> hoja, en orden de inserción.

    Las listas se consideran hojas; un dict vacío también se emite como hoja.
    """
    flat: dict[str, Any] = {}
    for key, value in tree.items():
        path = f"{prefix}{SEPARATOR}{key}" if prefix else str(key)
        if isinstance(value, Mapping) and value:
            flat.update(flatten(value, path))
        else:
            flat[path] = value
    return flat


def unflatten(flat: Mapping) -> dict:
    """
    Reconstruye un árbol a partir de claves con puntos.

    Los dicts anidados se combinan recursivamente, de modo que una mezcla
    de claves planas y anidadas produce un único árbol.
    """
    tree: dict = {}
    for key, value in flat.items():
        if not to_path(key):
            continue
        if isinstance(value, Mapping) and value:
            value = unflatten(value)
            current = get_in(tree, key)
            if isinstance(current, dict):
                value = deep_merge(current, value)
        set_in(tree, key, value)
    return tree


def deep_merge(base: Mapping, patch: Mapping) -> dict:
    """Combina patch sobre base sin modificar ninguno de los dos."""
    merged = deepcopy(dict(base))
    for key, value in patch.items():
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged


def build_tree(path: PathLike, value: Any) -> dict:
    """Árbol mínimo que contiene un único valor en la ruta dada."""
    return set_in({}, path, value)
