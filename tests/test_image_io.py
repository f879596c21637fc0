"""
Tests for image loading in image_summarizer.

Covers:
- Decoding each supported input format
- Display names and RGBA conversion
- Error handling for missing and corrupt files
"""

from pathlib import Path

import pytest
from PIL import Image

import image_summarizer.image_io as is_image_io
from image_summarizer.errors import ImageLoadError


class TestImageLoading:
    """Test single image loading and format auto-detection."""

    @pytest.mark.parametrize(
        ("ext", "fmt"),
        [
            (".png", "PNG"),
            (".jpg", "JPEG"),
            (".gif", "GIF"),
            (".bmp", "BMP"),
        ],
    )
    def test_load_supported_formats(
        self,
        tmp_path: Path,
        ext: str,
        fmt: str,
    ) -> None:
        """Each supported format decodes to an RGBA image of the same size."""
        path = tmp_path / f"photo{ext}"
        Image.new("RGB", (40, 30), "blue").save(path, format=fmt)

        loaded = is_image_io.load_image(path)

        assert loaded.name == f"photo{ext}"
        assert loaded.size == (40, 30)
        assert loaded.image.mode == "RGBA"

    def test_format_detected_from_content(self, tmp_path: Path) -> None:
        """A PNG with a .jpg suffix still loads."""
        path = tmp_path / "mislabelled.jpg"
        Image.new("RGB", (8, 8), "green").save(path, format="PNG")
        assert is_image_io.load_image(path).size == (8, 8)

    def test_transparency_is_kept(self, tmp_path: Path) -> None:
        """Alpha survives loading so the composer can blend it."""
        path = tmp_path / "clear.png"
        Image.new("RGBA", (10, 10), (255, 0, 0, 0)).save(path)
        loaded = is_image_io.load_image(path)
        assert loaded.image.getpixel((5, 5))[3] == 0

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises ImageLoadError, which is an OSError."""
        with pytest.raises(ImageLoadError, match="not found") as excinfo:
            is_image_io.load_image(tmp_path / "nope.png")
        assert isinstance(excinfo.value, OSError)

    def test_corrupt_file(self, tmp_path: Path) -> None:
        """Undecodable content raises ImageLoadError naming the path."""
        path = tmp_path / "broken.jpg"
        path.write_bytes(b"not an image data")
        with pytest.raises(ImageLoadError, match="Failed to load image"):
            is_image_io.load_image(path)

    def test_oversized_image(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Pixel counts past Pillow's bomb limit are a load error."""
        path = tmp_path / "huge.png"
        Image.new("RGB", (400, 400), "red").save(path)
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10_000)
        with pytest.raises(ImageLoadError, match="huge.png"):
            is_image_io.load_image(path)


class TestBatchLoading:
    """Test loading a list of selected paths."""

    def test_order_preserved(self, make_image_dir) -> None:  # noqa: ANN001
        """Images come back in the order of the input paths."""
        root = make_image_dir(3)
        paths = [root / "img_02.png", root / "img_00.png", root / "img_01.png"]
        loaded = is_image_io.load_images(paths)
        assert [item.name for item in loaded] == [
            "img_02.png", "img_00.png", "img_01.png",
        ]

    def test_first_failure_aborts(self, make_image_dir) -> None:  # noqa: ANN001
        """One bad file fails the whole batch."""
        root = make_image_dir(2)
        bad = root / "bad.png"
        bad.write_bytes(b"\x89PNG garbage")
        with pytest.raises(ImageLoadError, match="bad.png"):
            is_image_io.load_images([root / "img_00.png", bad,
                                     root / "img_01.png"])
