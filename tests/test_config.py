import pytest
from pydantic import ValidationError

from curvekit.config import AppConfig, load_config


def test_load_config(tmp_path):
    path = tmp_path / "curves.yaml"
    path.write_text(
        "width: 320\n"
        "steps: 50\n"
        "curves:\n"
        "  springy:\n"
        "    factory: elasticIn\n"
        "    params: [7, 3]\n"
        "  slide:\n"
        "    name: cubicOut\n"
        "    start: 0\n"
        "    end: 200\n",
        encoding="utf-8",
    )
    cfg = load_config(str(path))
    assert cfg.width == 320
    assert cfg.steps == 50
    assert cfg.height is None
    assert cfg.curves["springy"].params == [7.0, 3.0]
    assert cfg.curves["slide"].end == 200.0


def test_empty_config(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == AppConfig()


def test_invalid_mode_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("curves:\n  x:\n    factory: polyIn\n    params: [2]\n    mode: sideways\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))
