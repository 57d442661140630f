import io
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from PIL import Image

from sparkler.encode import encode_gif, save_gif
from sparkler.frames import Frame


def _frames(count=3, size=8):
    colours = [(255, 0, 0, 255), (0, 255, 0, 255), (0, 0, 255, 255), (255, 255, 0, 255)]
    return [Frame(Image.new("RGBA", (size, size), colours[idx % len(colours)])) for idx in range(count)]


def test_encode_gif_loops_forever_with_frame_delay():
    data = encode_gif(_frames(3))

    with Image.open(io.BytesIO(data)) as payload:
        assert payload.is_animated
        assert payload.n_frames == 3
        assert payload.info["loop"] == 0
        assert payload.info["duration"] == 30
        assert payload.size == (8, 8)


def test_encode_gif_rejects_empty_sequence():
    with pytest.raises(ValueError):
        encode_gif([])


def test_save_gif_creates_parent_directories(tmp_path):
    out = tmp_path / "nested" / "out.gif"

    path = save_gif(_frames(2), str(out))

    assert path == str(out)
    with Image.open(out) as payload:
        assert payload.n_frames == 2


def test_save_gif_rejects_empty_sequence_without_writing(tmp_path):
    out = tmp_path / "empty.gif"

    with pytest.raises(ValueError):
        save_gif([], str(out))
    assert not out.exists()
