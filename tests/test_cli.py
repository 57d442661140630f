import pytest
from PIL import Image

from sparkler import cli


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level=None: None)
    monkeypatch.delenv("SPARKLER_FONT_PATH", raising=False)
    monkeypatch.delenv("SPARKLER_SPARKLES_PATH", raising=False)


def test_cli_writes_gif(tmp_path, capsys):
    out = tmp_path / "pigeon.gif"

    code = cli.main(["pigeon", "--output", str(out)])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["generating animation...", "rendering gif...", "done!"]
    with Image.open(out) as payload:
        assert payload.is_animated
        assert payload.info["loop"] == 0


def test_cli_default_output_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert cli.main(["hi"]) == 0
    assert (tmp_path / "output.gif").is_file()


def test_cli_reports_blank_text(tmp_path, capsys):
    out = tmp_path / "blank.gif"

    code = cli.main(["   ", "-o", str(out)])

    assert code == 1
    assert "error: Not enough text." in capsys.readouterr().err
    assert not out.exists()


def test_cli_requires_text():
    with pytest.raises(SystemExit):
        cli.main([])
