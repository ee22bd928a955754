"""Renderer interface, concrete renderers, and factories that create them by name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, ClassVar


class Renderer(ABC):
    """A scene renderer."""

    @abstractmethod
    def load_scene(self, file_name: str) -> bool:
        """Load the scene in ``file_name``; return True on success."""

    @abstractmethod
    def set_viewport_size(self, width: int, height: int) -> None:
        """Set the size of the drawing area."""

    @abstractmethod
    def set_camera_position(self, x: float, y: float, z: float) -> None:
        """Place the camera."""

    @abstractmethod
    def set_look_at(self, x: float, y: float, z: float) -> None:
        """Point the camera at a location."""

    @abstractmethod
    def render(self) -> None:
        """Draw one frame."""


class _SceneRenderer(Renderer):
    """Keeps the settings it is given and counts the frames it draws."""

    def __init__(self) -> None:
        self.scene: str | None = None
        self.viewport_size: tuple[int, int] = (0, 0)
        self.camera_position: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.look_at: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self.frames = 0

    def load_scene(self, file_name: str) -> bool:
        self.scene = file_name
        return True

    def set_viewport_size(self, width: int, height: int) -> None:
        self.viewport_size = (width, height)

    def set_camera_position(self, x: float, y: float, z: float) -> None:
        self.camera_position = (x, y, z)

    def set_look_at(self, x: float, y: float, z: float) -> None:
        self.look_at = (x, y, z)

    def render(self) -> None:
        self.frames += 1


class OpenGlRenderer(_SceneRenderer):
    """Renderer backed by OpenGL."""


class DirectxRenderer(_SceneRenderer):
    """Renderer backed by DirectX."""


class MesaRenderer(_SceneRenderer):
    """Renderer backed by Mesa."""


class UserRenderer(_SceneRenderer):
    """A renderer defined outside the factory and registered with it."""

    @classmethod
    def create(cls) -> UserRenderer:
        """Build a new instance; suitable for :meth:`RenderFactory.register_renderer`."""
        return cls()


_BUILTIN: dict[str, type[Renderer]] = {
    "opengl": OpenGlRenderer,
    "directx": DirectxRenderer,
    "mesa": MesaRenderer,
}


def create_renderer(kind: str) -> Renderer:
    """Create one of the built-in renderers: ``opengl``, ``directx`` or ``mesa``.

    Raises ValueError for any other kind.
    """
    try:
        renderer_class = _BUILTIN[kind]
    except KeyError:
        raise ValueError(f"unknown renderer type: {kind!r}") from None
    return renderer_class()


class RenderFactory:
    """A factory that renderers are registered with at run time."""

    _renderers: ClassVar[dict[str, Callable[[], Renderer]]] = {}

    @classmethod
    def register_renderer(cls, kind: str, factory: Callable[[], Renderer]) -> None:
        """Register ``factory`` under ``kind``; an existing registration is kept."""
        cls._renderers.setdefault(kind, factory)

    @classmethod
    def unregister_renderer(cls, kind: str) -> None:
        """Remove the registration for ``kind``, if there is one."""
        cls._renderers.pop(kind, None)

    @classmethod
    def create_renderer(cls, kind: str) -> Renderer:
        """Create a renderer of a registered kind; raise ValueError if none is registered."""
        try:
            factory = cls._renderers[kind]
        except KeyError:
            raise ValueError(f"no renderer registered for {kind!r}") from None
        return factory()


def main(argv: list[str] | None = None) -> int:
    """Render with each built-in renderer, then with a registered one."""
    for kind in _BUILTIN:
        create_renderer(kind).render()
    RenderFactory.register_renderer("user", UserRenderer.create)
    RenderFactory.create_renderer("user").render()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())