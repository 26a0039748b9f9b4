"""Abstract base class for component renderers."""

from abc import ABC, abstractmethod
from typing import Iterable

from tagmark.formatting.ir import Component


class Renderer(ABC):
    """Abstract base class for output dialect renderers.

    Each renderer turns one component into a string of its dialect;
    rendering a sequence concatenates the rendered components in order.
    Rendering is total: it never fails for a parsed component.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the registry name of this dialect (e.g., 'html')."""
        ...

    @abstractmethod
    def render_component(self, component: Component) -> str:
        """Render a single styled component.

        Args:
            component: The component to render

        Returns:
            The component in this renderer's dialect
        """
        ...

    def render(self, components: Iterable[Component]) -> str:
        """Render a sequence of components.

        Args:
            components: Components in source order

        Returns:
            The concatenated rendering
        """
        return "".join(self.render_component(component) for component in components)
