import pytest
from PIL import Image

from sparkler import NotEnoughTextError, render
from sparkler.compositor import active_sparkles
from sparkler.errors import FontLoadError, ImageOperationError
from sparkler.layout import measure_line
from sparkler.resources import load_font, load_sparkles


@pytest.fixture(autouse=True)
def _clear_resource_env(monkeypatch):
    monkeypatch.delenv("SPARKLER_FONT_PATH", raising=False)
    monkeypatch.delenv("SPARKLER_SPARKLES_PATH", raising=False)


@pytest.fixture(scope="module")
def font():
    return load_font()


def _sparkles(count=12, size=4):
    return [Image.new("RGBA", (size, size), (tick * 20, 255 - tick * 20, 128, 255)) for tick in range(count)]


def test_render_frame_count_matches_sparkle_asset():
    frames = render("pigeon")

    assert len(frames) == len(load_sparkles())
    assert len({frame.size for frame in frames}) == 1
    assert {frame.duration_ms for frame in frames} == {30}


def test_render_pigeon_is_one_line_tall(font):
    _, line_height = measure_line(font, "pigeon")

    frames = render("pigeon", font=font)

    assert frames[0].image.height == line_height + 48


def test_render_wraps_long_text(font):
    text = "the quick brown fox jumps over lazy dogs"
    lines = ["the quick brown", "fox jumps over", "lazy dogs"]

    frames = render(text, font=font, sparkles=_sparkles(3))

    assert frames[0].image.height == sum(measure_line(font, line)[1] for line in lines) + 48


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_render_rejects_blank_text(text):
    with pytest.raises(NotEnoughTextError):
        render(text)


def test_render_is_deterministic(font):
    first = render("sparkle sparkle", font=font)
    second = render("sparkle sparkle", font=font)

    assert len(first) == len(second)
    for a, b in zip(first, second):
        assert a.image.tobytes() == b.image.tobytes()


def test_render_surfaces_font_errors(tmp_path, monkeypatch):
    bogus = tmp_path / "bogus.otf"
    bogus.write_bytes(b"not a font")
    monkeypatch.setenv("SPARKLER_FONT_PATH", str(bogus))

    with pytest.raises(FontLoadError):
        render("pigeon")


def test_render_wraps_imaging_failures(font, monkeypatch):
    import sparkler.pipeline as pipeline

    def _boom(image):
        raise OSError("allocation failed")

    monkeypatch.setattr(pipeline, "outline", _boom)

    with pytest.raises(ImageOperationError, match="allocation failed"):
        render("pigeon", font=font)


def _varying_slots(frames):
    width, height = frames[0].size
    interior_w, interior_h = width - 32, height - 32
    positions = [(10, 10), (interior_w - 42, interior_h - 42), (interior_w // 3, 2 * interior_h // 3)]
    return [
        len({frame.image.getpixel((x + 1, y + 1)) for frame in frames}) > 1
        for x, y in positions
    ]


def test_render_short_text_uses_one_sparkle(font):
    frames = render("a", font=font, sparkles=_sparkles())

    assert frames[0].size[0] < 200
    assert active_sparkles(frames[0].size[0]) == 1
    assert _varying_slots(frames) == [True, False, False]


def test_render_wide_text_uses_three_sparkles(font):
    frames = render("pigeon pigeon", font=font, sparkles=_sparkles())

    assert frames[0].size[0] >= 200
    assert _varying_slots(frames) == [True, True, True]
    width, height = frames[0].size
    slot_one = (width - 32 - 42 + 1, height - 32 - 42 + 1)
    # slot 1 runs a third of the loop ahead of slot 0
    assert frames[0].image.getpixel(slot_one) == frames[4].image.getpixel((11, 11))


def test_render_keeps_background_transparent(font):
    frames = render("pigeon", font=font, sparkles=_sparkles())

    for frame in frames:
        assert frame.image.getpixel((0, 0))[3] == 0
        assert frame.image.getchannel("A").getextrema() == (0, 255)
