"""Tests for output format selection and collage persistence."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

import image_summarizer.collage.encoding as is_encoding
from image_summarizer.errors import OutputWriteError, UnsupportedFormatError

_JPEG_MEAN_ABS_TOLERANCE = 4.0


@pytest.fixture
def gradient_image() -> Image.Image:
    """A small RGB image with varied pixel values."""
    xs = np.linspace(0, 255, 64, dtype=np.uint8)
    arr = np.stack(
        [np.tile(xs, (48, 1)),
         np.tile(xs[::-1], (48, 1)),
         np.full((48, 64), 128, dtype=np.uint8)],
        axis=-1,
    )
    return Image.fromarray(arr)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("out.png", "PNG"),
        ("OUT.PNG", "PNG"),
        ("out.jpg", "JPEG"),
        ("out.jpeg", "JPEG"),
        ("dir/out.JPG", "JPEG"),
    ],
)
def test_resolve_output_format(name: str, expected: str) -> None:
    """Known suffixes map to Pillow format names."""
    assert is_encoding.resolve_output_format(name) == expected


@pytest.mark.parametrize("name", ["out.gif", "out.bmp", "out", "out.png.txt"])
def test_unsupported_format_rejected(name: str) -> None:
    """Anything but png/jpg/jpeg is refused."""
    with pytest.raises(UnsupportedFormatError, match="Unsupported output"):
        is_encoding.resolve_output_format(name)


def test_unsupported_format_writes_nothing(
    tmp_path: Path,
    gradient_image: Image.Image,
) -> None:
    """The format is checked before any file is created."""
    target = tmp_path / "sub" / "out.gif"
    with pytest.raises(UnsupportedFormatError):
        is_encoding.save_collage(gradient_image, target)
    assert not target.exists()
    assert not target.parent.exists()


def test_png_round_trip_is_lossless(
    tmp_path: Path,
    gradient_image: Image.Image,
) -> None:
    """PNG output decodes to exactly the same pixels."""
    saved = is_encoding.save_collage(gradient_image, tmp_path / "c.png")
    with Image.open(saved) as reloaded:
        assert reloaded.format == "PNG"
        assert reloaded.convert("RGB").tobytes() == gradient_image.tobytes()


def test_jpeg_round_trip_is_close(
    tmp_path: Path,
    gradient_image: Image.Image,
) -> None:
    """JPEG output is lossy but visually similar."""
    saved = is_encoding.save_collage(gradient_image, tmp_path / "c.jpg")
    with Image.open(saved) as reloaded:
        assert reloaded.format == "JPEG"
        assert reloaded.size == gradient_image.size
        diff = np.abs(
            np.asarray(reloaded.convert("RGB"), dtype=np.int16)
            - np.asarray(gradient_image, dtype=np.int16),
        )
    assert diff.mean() < _JPEG_MEAN_ABS_TOLERANCE


def test_creates_parent_directories(
    tmp_path: Path,
    gradient_image: Image.Image,
) -> None:
    """Missing parent directories are created."""
    target = tmp_path / "a" / "b" / "collage.png"
    assert is_encoding.save_collage(gradient_image, target) == target
    assert target.is_file()


def test_unwritable_target(tmp_path: Path, gradient_image: Image.Image) -> None:
    """Failing to open the output is reported as a write error."""
    target = tmp_path / "taken.png"
    target.mkdir()
    with pytest.raises(OutputWriteError, match="taken.png"):
        is_encoding.save_collage(gradient_image, target)
    assert target.is_dir()


def test_failed_encode_removes_partial_file(
    tmp_path: Path,
    gradient_image: Image.Image,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """An encoder failure leaves no half-written file behind."""

    def broken_save(*_args: object, **_kwargs: object) -> None:
        msg = "disk full"
        raise OSError(msg)

    monkeypatch.setattr(gradient_image, "save", broken_save)
    target = tmp_path / "partial.png"
    with pytest.raises(OutputWriteError, match="disk full"):
        is_encoding.save_collage(gradient_image, target)
    assert not target.exists()
