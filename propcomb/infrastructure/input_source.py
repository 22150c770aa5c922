"""
input_source.py — Vistas perezosas de code points sobre la entrada
=====================================================================

Responsabilidad única: presentar la entrada del parser como una secuencia
de code points que se avanza construyendo vistas nuevas.

Cada vista responde dos preguntas:

    current_code_point()  ->  el code point bajo el cursor, o
                              END_OF_INPUT si la vista está agotada.
    remaining_input()     ->  la vista tras ese code point, o None
                              cuando ya no queda nada.

Dos realizaciones:

    ArrayInput   vista inmutable y posicional sobre una tupla de code
                 points. Reiniciable: las vistas anteriores siguen válidas.
    StreamInput  cursor de una sola pasada sobre una fuente de texto. Cada
                 nodo memoiza su sucesor, así la fuente se lee una vez por
                 posición.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Protocol, Tuple

END_OF_INPUT = "\x00"


class TextReader(Protocol):
    def read(self, size: int = -1) -> str: ...


class InputSource(ABC):
    """Clase base de todas las vistas de entrada."""

    @abstractmethod
    def current_code_point(self) -> str:
        ...

    @abstractmethod
    def remaining_input(self) -> Optional["InputSource"]:
        ...

    @abstractmethod
    def rest(self) -> str:
        """Texto desde el code point actual hasta el final de la entrada."""


# ============================================================================
# 1. ENTRADA SOBRE ARREGLO
# ============================================================================

class ArrayInput(InputSource):
    """Vista posicional sobre una tupla compartida de code points que nunca se modifica."""

    __slots__ = ("text", "position")

    def __init__(self, text: Tuple[str, ...], position: int = 0):
        self.text = text
        self.position = position

    def current_code_point(self) -> str:
        if self.position >= len(self.text):
            return END_OF_INPUT
        return self.text[self.position]

    def remaining_input(self) -> Optional[InputSource]:
        if self.position + 1 >= len(self.text):
            return None
        return ArrayInput(self.text, self.position + 1)

    def rest(self) -> str:
        return "".join(self.text[self.position:])

    def __repr__(self) -> str:
        return f"ArrayInput(position={self.position}, rest={self.rest()!r})"


# ============================================================================
# 2. ENTRADA SOBRE STREAM
# ============================================================================

_UNREAD = object()


class StreamInput(InputSource):
    """
    Cursor de una sola pasada sobre una fuente legible.

    El code point de un nodo se lee al crearlo. Su sucesor se lee en la
    primera llamada a `remaining_input()` y se guarda en `_next`: todos
    los que piden la misma continuación reciben el mismo nodo.
    """

    __slots__ = ("_reader", "_current", "_next")

    def __init__(self, reader: TextReader, current: str):
        self._reader = reader
        self._current = current
        self._next = _UNREAD

    def current_code_point(self) -> str:
        return self._current

    def remaining_input(self) -> Optional[InputSource]:
        if self._next is _UNREAD:
            code_point = self._reader.read(1)
            self._next = StreamInput(self._reader, code_point) if code_point else None
        return self._next

    def rest(self) -> str:
        chars = []
        node: Optional[InputSource] = self
        while node is not None:
            chars.append(node.current_code_point())
            node = node.remaining_input()
        return "".join(chars)

    def __repr__(self) -> str:
        return f"StreamInput(current={self._current!r})"


class _ExhaustedStream(InputSource):
    """Vista de un stream que estaba vacío desde el principio."""

    def current_code_point(self) -> str:
        return END_OF_INPUT

    def remaining_input(self) -> Optional[InputSource]:
        return None

    def rest(self) -> str:
        return ""


# ============================================================================
# 3. CONSTRUCTORES Y AUXILIARES
# ============================================================================

def string_to_input(text: str) -> InputSource:
    return ArrayInput(tuple(text), 0)


def stream_to_input(reader: TextReader) -> InputSource:
    """
    Envuelve un lector de texto. El primer code point se lee enseguida
    para saber si el stream ya está agotado.
    """
    code_point = reader.read(1)
    if not code_point:
        return _ExhaustedStream()
    return StreamInput(reader, code_point)


@contextmanager
def open_file_input(path: str | Path) -> Iterator[InputSource]:
    """
    Abre un archivo de texto UTF-8 como entrada del parser.

    Raises:
        FileNotFoundError: Si el archivo no existe
    """
    with open(path, "r", encoding="utf-8") as f:
        yield stream_to_input(f)


def peek(source: Optional[InputSource]) -> str:
    """Code point actual; `None` cuenta como entrada vacía."""
    if source is None:
        return END_OF_INPUT
    return source.current_code_point()


def advance(source: Optional[InputSource]) -> Optional[InputSource]:
    if source is None:
        return None
    return source.remaining_input()


def remaining_text(source: Optional[InputSource]) -> Optional[str]:
    """Texto sin consumir, o None si no sobra nada."""
    if source is None:
        return None
    text = source.rest()
    return text or None
