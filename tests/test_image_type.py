"""
Tests for the image type registry.
"""

import pytest

from imagebox.domain.types import ImageType
from imagebox.drivers import DummyImageDriver, PngImageDriver


def test_variants():
    assert [t.value for t in ImageType] == ["PNG", "Dummy"]


def test_drivers_are_bound_once():
    assert isinstance(ImageType.PNG.driver, PngImageDriver)
    assert isinstance(ImageType.DUMMY.driver, DummyImageDriver)
    assert ImageType.PNG.driver is ImageType.PNG.driver


@pytest.mark.parametrize("name", ["PNG", "png", "Png"])
def test_lookup_by_name_is_case_insensitive(name):
    assert ImageType(name) is ImageType.PNG


def test_lookup_dummy():
    assert ImageType("Dummy") is ImageType.DUMMY
    assert ImageType("DUMMY") is ImageType.DUMMY


def test_unknown_name():
    with pytest.raises(ValueError):
        ImageType("GIF")


def test_png_descriptions():
    assert ImageType.PNG.file_extension == ".png"
    assert ImageType.PNG.mime_type == "image/png"


def test_dummy_descriptions():
    assert ImageType.DUMMY.file_extension == ".dummy"
    assert ImageType.DUMMY.mime_type == "image/dummy"


@pytest.mark.parametrize(
    "extension, expected",
    [(".png", ImageType.PNG), ("png", ImageType.PNG), (".PNG", ImageType.PNG), (".dummy", ImageType.DUMMY)],
)
def test_for_extension(extension, expected):
    assert ImageType.for_extension(extension) is expected


def test_for_unknown_extension():
    with pytest.raises(ValueError, match="No image type"):
        ImageType.for_extension(".jpg")


def test_str_is_name():
    assert str(ImageType.DUMMY) == "Dummy"


def test_registry_is_read_only():
    from imagebox.domain.types.image_type import _DRIVERS

    with pytest.raises(TypeError):
        _DRIVERS[ImageType.PNG] = DummyImageDriver()


if __name__ == "__main__":
    pytest.main()
