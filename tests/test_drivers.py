"""
Tests for the PNG and Dummy drivers.
"""

import io
import os
from pathlib import Path

import pytest
from PIL import Image as PILImage

from imagebox.drivers import DummyImageDriver, PngImageDriver
from imagebox.exceptions import ImageFormatError, InvalidArgumentError

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def png_driver():
    return PngImageDriver()


@pytest.fixture
def dummy_driver():
    return DummyImageDriver()


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    path = tmp_path / "photo.png"
    PILImage.new("RGB", (6, 4), (10, 20, 30)).save(path, format="PNG")
    return path


class TestPngImageDriver:

    def test_load(self, png_driver, png_file):
        handle = png_driver.load(png_file)
        assert isinstance(handle, PILImage.Image)
        assert handle.size == (6, 4)
        assert handle.getpixel((0, 0)) == (10, 20, 30)

    def test_load_accepts_str_path(self, png_driver, png_file):
        assert png_driver.load(str(png_file)).size == (6, 4)

    def test_load_missing_file(self, png_driver, tmp_path):
        with pytest.raises(FileNotFoundError):
            png_driver.load(tmp_path / "missing.png")

    def test_load_not_an_image(self, png_driver, tmp_path):
        path = tmp_path / "notes.png"
        path.write_text("definitely not a png", encoding="utf-8")
        with pytest.raises(ImageFormatError):
            png_driver.load(path)

    def test_load_truncated_file(self, png_driver, tmp_path):
        path = tmp_path / "noise.png"
        PILImage.frombytes("RGB", (64, 64), os.urandom(64 * 64 * 3)).save(path, format="PNG")
        data = path.read_bytes()
        path.write_bytes(data[: len(data) // 2])
        with pytest.raises(ImageFormatError, match="Broken"):
            png_driver.load(path)

    def test_load_other_format(self, png_driver, tmp_path):
        path = tmp_path / "photo.bmp"
        PILImage.new("RGB", (2, 2)).save(path, format="BMP")
        with pytest.raises(ImageFormatError, match="BMP"):
            png_driver.load(path)

    def test_store_writes_png(self, png_driver, tmp_path):
        target = tmp_path / "out.png"
        png_driver.store(target, PILImage.new("RGBA", (3, 3), (1, 2, 3, 4)))
        assert target.read_bytes().startswith(PNG_SIGNATURE)
        assert png_driver.load(target).getpixel((2, 2)) == (1, 2, 3, 4)

    def test_store_invalid_handle(self, png_driver, tmp_path):
        with pytest.raises(InvalidArgumentError):
            png_driver.store(tmp_path / "out.png", "not a handle")
        assert not (tmp_path / "out.png").exists()

    def test_store_closed_handle(self, png_driver, tmp_path):
        handle = PILImage.new("RGB", (1, 1))
        handle.close()
        with pytest.raises(InvalidArgumentError):
            png_driver.store(tmp_path / "out.png", handle)
        assert not (tmp_path / "out.png").exists()

    def test_store_unwritable_target(self, png_driver, tmp_path):
        with pytest.raises(FileNotFoundError):
            png_driver.store(tmp_path / "missing_dir" / "out.png", PILImage.new("RGB", (1, 1)))

    def test_store_unencodable_mode(self, png_driver, tmp_path):
        with pytest.raises(ImageFormatError):
            png_driver.store(tmp_path / "out.png", PILImage.new("CMYK", (1, 1)))

    def test_display(self, png_driver):
        stream = io.BytesIO()
        png_driver.display(PILImage.new("L", (2, 2)), stream)
        assert stream.getvalue().startswith(PNG_SIGNATURE)

    def test_display_invalid_handle(self, png_driver):
        with pytest.raises(InvalidArgumentError):
            png_driver.display(None, io.BytesIO())

    def test_release(self, png_driver, png_file):
        handle = png_driver.load(png_file)
        png_driver.release(handle)
        assert not png_driver.accepts(handle)
        with pytest.raises(ValueError):
            handle.getpixel((0, 0))


class TestDummyImageDriver:

    def test_load_does_not_touch_files(self, dummy_driver, tmp_path):
        handle = dummy_driver.load(tmp_path / "does-not-exist.dummy")
        assert dummy_driver.accepts(handle)
        assert handle.size == (1, 1)

    def test_store_then_load(self, dummy_driver, tmp_path):
        target = tmp_path / "out.dummy"
        dummy_driver.store(target, dummy_driver.load(target))
        assert not target.exists()
        assert dummy_driver.accepts(dummy_driver.load(target))

    def test_store_invalid_handle(self, dummy_driver):
        with pytest.raises(InvalidArgumentError):
            dummy_driver.store("out.dummy", object())

    def test_display_writes_nothing(self, dummy_driver):
        stream = io.BytesIO()
        dummy_driver.display(dummy_driver.load("x"), stream)
        assert stream.getvalue() == b""

    def test_display_invalid_handle(self, dummy_driver):
        with pytest.raises(InvalidArgumentError):
            dummy_driver.display(None)


if __name__ == "__main__":
    pytest.main()
