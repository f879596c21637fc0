"""
Test configuration and shared fixtures for image_summarizer.

This module defines reusable pytest fixtures for building directories of
small synthetic images and for resetting shared state between tests.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from PIL import Image

import image_summarizer.random_utils as is_random_utils
from image_summarizer.constants import COLOR_MODE_RGB
from image_summarizer.logging_utils import logger

# Distinct, saturated colors so cells can be told apart by a single pixel
PALETTE = [
    (220, 20, 60),
    (30, 144, 255),
    (50, 205, 50),
    (255, 215, 0),
    (138, 43, 226),
    (255, 140, 0),
    (0, 206, 209),
    (199, 21, 133),
    (139, 69, 19),
    (112, 128, 144),
    (0, 100, 0),
    (70, 130, 180),
]


@pytest.fixture
def sample_image() -> Image.Image:
    """Create a sample 100x100 red RGB PIL image."""
    return Image.new(COLOR_MODE_RGB, (100, 100), color="red")


@pytest.fixture
def make_image_dir(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory writing ``count`` solid-color images into a fresh directory.

    Files are named ``img_00<ext>``, ``img_01<ext>``... and take their
    colors from PALETTE in order, so the i-th file is easy to recognize.
    """

    def _make(
        count: int,
        *,
        name: str = "images",
        ext: str = ".png",
        size: tuple[int, int] = (64, 48),
    ) -> Path:
        target = tmp_path / name
        target.mkdir(parents=True, exist_ok=True)
        for i in range(count):
            color = PALETTE[i % len(PALETTE)]
            Image.new(COLOR_MODE_RGB, size, color).save(
                target / f"img_{i:02d}{ext}",
            )
        return target

    return _make


@pytest.fixture
def image_dir(make_image_dir: Callable[..., Path]) -> Path:
    """Directory holding exactly nine PNG images."""
    return make_image_dir(9)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Provide a reusable temporary directory for output files."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture(autouse=True)
def restore_rng_state() -> Generator[None, None, None]:
    """Keep the shared NumPy generator from leaking between tests."""
    state = is_random_utils._STATE  # type: ignore[attr-defined]
    prev_seed, prev_gen = state.seed, state.generator
    yield
    state.seed, state.generator = prev_seed, prev_gen


@pytest.fixture(autouse=True)
def enable_logger_propagation(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Enable propagation for the package logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
    prev_level = logger.level
    yield
    logger.setLevel(prev_level)
