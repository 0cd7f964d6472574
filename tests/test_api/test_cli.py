"""Tests for the command line entry point."""

import json

from PIL import Image

from collider_gen.cli import main


def test_prints_colliders(tmp_path, capsys, two_squares_image):
    path = tmp_path / "sprite.png"
    two_squares_image.save(path)
    assert main([str(path), "--kind", "convex_hull", "--multi"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["regions"] == 2
    assert all(c["kind"] == "convex_hull" for c in data["colliders"])


def test_raw_frame(tmp_path, capsys, two_squares_image):
    path = tmp_path / "sprite.png"
    two_squares_image.save(path)
    assert main([str(path), "--raw", "--indent", "2"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["colliders"][0]["points"][0] == [1.0, 1.0]


def test_unsupported_format_exit_code(tmp_path, capsys):
    path = tmp_path / "opaque.jpg"
    Image.new("RGB", (4, 4)).save(path)
    assert main([str(path)]) == 2
    assert "collider-gen:" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.png")]) == 1
    assert "cannot read" in capsys.readouterr().err
