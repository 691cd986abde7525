from imagebox.drivers.base import ImageDriver
from imagebox.drivers.dummy import DummyImageDriver
from imagebox.drivers.png import PngImageDriver

__all__ = ["ImageDriver", "DummyImageDriver", "PngImageDriver"]
