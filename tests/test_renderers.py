import pytest

from apidesign.renderers import (
    DirectxRenderer,
    MesaRenderer,
    OpenGlRenderer,
    RenderFactory,
    Renderer,
    UserRenderer,
    create_renderer,
    main,
)


@pytest.fixture
def clean_factory():
    yield RenderFactory
    for kind in ("user", "other"):
        RenderFactory.unregister_renderer(kind)


@pytest.mark.parametrize(
    "kind, expected",
    [("opengl", OpenGlRenderer), ("directx", DirectxRenderer), ("mesa", MesaRenderer)],
)
def test_create_builtin(kind, expected):
    assert type(create_renderer(kind)) is expected


def test_create_unknown_raises():
    with pytest.raises(ValueError):
        create_renderer("vulkan")


def test_renderer_is_abstract():
    with pytest.raises(TypeError):
        Renderer()


def test_renderer_keeps_settings():
    renderer = create_renderer("opengl")
    assert renderer.load_scene("scene.obj") is True
    renderer.set_viewport_size(640, 480)
    renderer.set_camera_position(1.0, 2.0, 3.0)
    renderer.set_look_at(0.5, 0.0, -1.0)
    renderer.render()
    renderer.render()
    assert renderer.scene == "scene.obj"
    assert renderer.viewport_size == (640, 480)
    assert renderer.camera_position == (1.0, 2.0, 3.0)
    assert renderer.look_at == (0.5, 0.0, -1.0)
    assert renderer.frames == 2


def test_register_and_create(clean_factory):
    clean_factory.register_renderer("user", UserRenderer.create)
    first = clean_factory.create_renderer("user")
    second = clean_factory.create_renderer("user")
    assert type(first) is UserRenderer
    assert first is not second


def test_register_keeps_existing(clean_factory):
    clean_factory.register_renderer("other", UserRenderer.create)
    clean_factory.register_renderer("other", MesaRenderer)
    renderer = clean_factory.create_renderer("other")
    assert isinstance(renderer, UserRenderer)
    assert not isinstance(renderer, MesaRenderer)
    assert renderer.load_scene("kept.obj") is True
    assert renderer.scene == "kept.obj"


def test_unregister(clean_factory):
    clean_factory.register_renderer("user", UserRenderer.create)
    clean_factory.unregister_renderer("user")
    with pytest.raises(ValueError):
        clean_factory.create_renderer("user")
    clean_factory.unregister_renderer("user")
    with pytest.raises(ValueError):
        clean_factory.create_renderer("user")


def test_main_registers_user(clean_factory):
    assert main([]) == 0
    assert type(clean_factory.create_renderer("user")) is UserRenderer