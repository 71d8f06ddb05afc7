from PIL import Image

from tower_of_hanoi.renderer import BoardRenderer


def test_render_returns_rgb_image(controller):
    renderer = BoardRenderer(image_size=(400, 300))
    image = renderer.render(controller.view())
    assert isinstance(image, Image.Image)
    assert image.mode == "RGB"
    assert image.size == (400, 300)


def test_render_is_cached_per_board(controller):
    renderer = BoardRenderer(image_size=(200, 150))
    first = renderer.render(controller.view())
    assert renderer.render(controller.view()) is first
    controller.attempt_move(0, 2)
    assert renderer.render(controller.view()) is not first


def test_hint_changes_rendering(controller):
    renderer = BoardRenderer(image_size=(200, 150))
    plain = renderer.render(controller.view())
    controller.request_hint()
    assert renderer.render(controller.view()) is not plain


def test_save_png(controller, tmp_path):
    controller.reset(12)
    path = BoardRenderer(image_size=(300, 200)).save(controller.view(), tmp_path / "out" / "board.png")
    assert path.exists()
    with Image.open(path) as img:
        assert img.format == "PNG"
