from book_gen.errors import UnknownRendererError
from book_gen.renderer.base import RenderContext, Renderer
from book_gen.renderer.markdown import MarkdownRenderer

RENDERERS: dict[str, type[Renderer]] = {
    MarkdownRenderer.name: MarkdownRenderer,
}

DEFAULT_RENDERER = "markdown"


def get_renderer(name: str, **kwargs) -> Renderer:
    """Create the renderer registered under `name`.

    Raises:
        UnknownRendererError: If no renderer has that name
    """
    try:
        renderer_cls = RENDERERS[name]
    except KeyError:
        raise UnknownRendererError(name, sorted(RENDERERS)) from None
    return renderer_cls(**kwargs)


__all__ = [
    "DEFAULT_RENDERER",
    "RENDERERS",
    "MarkdownRenderer",
    "RenderContext",
    "Renderer",
    "get_renderer",
]
