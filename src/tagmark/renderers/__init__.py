"""Output renderers for tagmark."""

from tagmark.renderers.base import Renderer
from tagmark.renderers.html import HTMLRenderer
from tagmark.renderers.markup import MarkupRenderer
from tagmark.renderers.plain import PlainTextRenderer

__all__ = [
    "Renderer",
    "HTMLRenderer",
    "MarkupRenderer",
    "PlainTextRenderer",
]

# Map dialect names to renderers
RENDERER_MAP: dict[str, type[Renderer]] = {
    "html": HTMLRenderer,
    "markup": MarkupRenderer,
    "plain": PlainTextRenderer,
}

SUPPORTED_DIALECTS = tuple(RENDERER_MAP.keys())


def get_renderer(dialect: str) -> type[Renderer]:
    """Get the renderer class for an output dialect."""
    key = dialect.lower()
    if key not in RENDERER_MAP:
        raise ValueError(
            f"Unsupported output dialect: {dialect}. "
            f"Supported dialects: {', '.join(SUPPORTED_DIALECTS)}"
        )
    return RENDERER_MAP[key]
