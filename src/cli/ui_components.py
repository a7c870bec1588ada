"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- `colorize` es una función pura: no lee estado global de la terminal.
"""

from __future__ import annotations

from types import TracebackType

from rich.console import Console, RenderableType
from rich.status import Status
from rich.text import Text

from core.domain.models import LookupResult

DISAMBIGUATION_STYLE = "yellow"
INITIAL_MESSAGE = "Parsing input..."


def colorize(text: str, style: str) -> Text:
    """Devuelve `text` como `Text` de Rich con `style` aplicado (sin markup)."""

    return Text(text, style=style)


def render_result(result: LookupResult, highlight: str) -> Text:
    """Texto final: aviso de desambiguación en amarillo, extract en `highlight`."""

    style = DISAMBIGUATION_STYLE if result.disambiguation else highlight
    return colorize(result.text, style)


def searching_message(title: str) -> Text:
    return Text(f'Searching "{title}"')


class ProgressReporter:
    """Spinner transitorio mientras corren las peticiones HTTP.

    La animación la refresca el hilo interno de Rich, así que el hilo que
    hace I/O nunca se bloquea. Como context manager garantiza que el spinner
    se detiene también cuando el pipeline falla.
    """

    def __init__(
        self,
        console: Console,
        *,
        interval_ms: int = 100,
        message: RenderableType = INITIAL_MESSAGE,
    ) -> None:
        self._console = console
        self._status = Status(
            message,
            console=console,
            spinner="dots",
            refresh_per_second=1000 / interval_ms,
        )
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if not self._running:
            self._status.start()
            self._running = True

    def set_message(self, text: RenderableType) -> None:
        self._status.update(text)

    def stop(self) -> None:
        if self._running:
            self._status.stop()
            self._running = False

    def finish(self, final: RenderableType) -> None:
        """Detiene el spinner y deja `final` impreso en su lugar."""

        self.stop()
        self._console.print(final, soft_wrap=True)

    def __enter__(self) -> "ProgressReporter":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()
