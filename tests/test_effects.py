from PIL import Image

from sparkler.effects import invert, outline


def _block(size=40, start=15, end=25):
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    for x in range(start, end):
        for y in range(start, end):
            img.putpixel((x, y), (0, 0, 0, 255))
    return img


def test_invert_flips_colour_and_keeps_alpha():
    img = Image.new("RGBA", (2, 2), (10, 20, 30, 40))

    assert invert(img).getpixel((1, 1)) == (245, 235, 225, 40)


def test_outline_preserves_size():
    img = _block().crop((0, 0, 40, 25))

    assert outline(img).size == (40, 25)


def test_outline_does_not_modify_input():
    img = _block()
    before = img.tobytes()

    outline(img)

    assert img.tobytes() == before


def test_outline_of_empty_canvas_stays_transparent():
    result = outline(Image.new("RGBA", (12, 12), (0, 0, 0, 0)))

    alpha_min, alpha_max = result.getchannel("A").getextrema()
    assert alpha_min == alpha_max == 0


def test_outline_keeps_opaque_text_on_transparent_background():
    result = outline(_block())

    assert result.getpixel((20, 20)) == (0, 0, 0, 255)
    assert result.getpixel((0, 0))[3] == 0


def test_outline_halo_is_white_and_fades_with_distance():
    result = outline(_block())

    near, mid, far = (result.getpixel((x, 20)) for x in (14, 12, 10))
    assert near[:3] == (255, 255, 255)
    assert near[3] > mid[3] > far[3] > 0
    assert result.getpixel((2, 20))[3] == 0
