"""Reference renderers for structured entry labels.

``render_label_markup`` produces Pango-style ``<b>`` markup for GTK hosts;
``render_label_ansi`` produces terminal text for the command line.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from pygments.console import ansiformat, colorize

from ..entries.types import Label

HIGHLIGHT_ATTR = "*yellow*"
DIM_COLOR = "gray"


def render_label_markup(label: Label) -> str:
    """Render ``label`` as markup with the highlighted run wrapped in ``<b>``."""
    out: list[str] = []
    for text, is_highlighted in label.segments():
        escaped = escape(text)
        out.append(f"<b>{escaped}</b>" if is_highlighted else escaped)
    return "".join(out)


def render_label_ansi(label: Label, no_color: bool = False) -> str:
    """Render ``label`` for a terminal, emphasizing the highlighted run in bold."""
    if no_color:
        return label.text
    return "".join(
        ansiformat(HIGHLIGHT_ATTR, text) if is_highlighted else text
        for text, is_highlighted in label.segments()
    )


def dim(text: str, no_color: bool = False) -> str:
    return text if no_color else colorize(DIM_COLOR, text)


__all__ = ["dim", "render_label_ansi", "render_label_markup"]
