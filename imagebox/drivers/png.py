from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, BinaryIO, Optional

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from imagebox.drivers.base import ImageDriver, PathLike
from imagebox.exceptions import ImageFormatError

logger = logging.getLogger(__name__)

_FILESYSTEM_ERRORS = (FileNotFoundError, PermissionError, IsADirectoryError)


class PngImageDriver(ImageDriver):
    """Driver for PNG images backed by the Pillow PNG codec."""

    name = "PNG"
    file_extension = ".png"
    mime_type = "image/png"
    pil_format = "PNG"

    def load(self, path: PathLike) -> PILImage.Image:
        """
        Decode a PNG file into an in-memory Pillow image.

        :raises FileNotFoundError: if ``path`` is not an existing file.
        :raises ImageFormatError: if the file is not a decodable PNG image.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Image file not found: {path}")

        try:
            with PILImage.open(path) as img:
                if img.format != self.pil_format:
                    raise ImageFormatError(f"File is not a {self.name} image ({img.format}): {path}")
                img.load()
                handle = img.copy()
        except UnidentifiedImageError as exc:
            raise ImageFormatError(f"File is not a {self.name} image: {path}") from exc
        except SyntaxError as exc:
            # Pillow reports broken PNG chunks as SyntaxError
            raise ImageFormatError(f"Broken {self.name} image: {path}") from exc
        except ImageFormatError:
            raise
        except OSError as exc:
            if isinstance(exc, _FILESYSTEM_ERRORS):
                raise
            # truncated or corrupt pixel data
            raise ImageFormatError(f"Broken {self.name} image: {path} ({exc})") from exc

        logger.debug(f"Loaded {self.name} image {path} ({handle.width}x{handle.height}, {handle.mode})")
        return handle

    def store(self, path: PathLike, handle: Any) -> None:
        handle = self.check_handle(handle)
        try:
            handle.save(path, format=self.pil_format)
        except (KeyError, ValueError) as exc:
            raise ImageFormatError(f"Cannot encode image as {self.name}: {exc}") from exc
        except OSError as exc:
            if isinstance(exc, _FILESYSTEM_ERRORS):
                raise
            raise ImageFormatError(f"Cannot encode image as {self.name}: {exc}") from exc
        logger.debug(f"Stored {self.name} image at {path}")

    def display(self, handle: Any, stream: Optional[BinaryIO] = None) -> None:
        handle = self.check_handle(handle)
        out = self._output_stream(stream)
        handle.save(out, format=self.pil_format)
        out.flush()
