from __future__ import annotations

import logging
from typing import Any, BinaryIO, Optional

from PIL import Image as PILImage

from imagebox.drivers.base import ImageDriver, PathLike

logger = logging.getLogger(__name__)

PLACEHOLDER_SIZE = (1, 1)
PLACEHOLDER_MODE = "RGBA"


class DummyImageDriver(ImageDriver):
    """
    Driver that never encodes or decodes anything.

    ``load`` hands out a 1x1 transparent placeholder without reading the file,
    ``store`` and ``display`` only validate the handle. Meant for tests.
    """

    name = "Dummy"
    file_extension = ".dummy"
    mime_type = "image/dummy"

    def load(self, path: PathLike) -> PILImage.Image:
        logger.debug(f"Dummy load of {path}")
        return PILImage.new(PLACEHOLDER_MODE, PLACEHOLDER_SIZE)

    def store(self, path: PathLike, handle: Any) -> None:
        self.check_handle(handle)
        logger.debug(f"Dummy store to {path}")

    def display(self, handle: Any, stream: Optional[BinaryIO] = None) -> None:
        self.check_handle(handle)
