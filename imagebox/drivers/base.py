from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, BinaryIO, Optional, Union

from PIL import Image as PILImage

from imagebox.exceptions import InvalidArgumentError

PathLike = Union[str, Path]


def _is_closed(handle: PILImage.Image) -> bool:
    # Pillow swaps the core image for a stand-in raising ValueError on close
    try:
        core = handle.im
        if core is None:
            return False
        core.mode
    except ValueError:
        return True
    return False


class ImageDriver(ABC):
    """Base class for drivers that load, store and display one image format."""

    #: Symbolic name of the format handled by the driver.
    name: str
    #: Canonical file extension, including the leading dot.
    file_extension: str
    #: MIME type of encoded images.
    mime_type: str

    @abstractmethod
    def load(self, path: PathLike) -> PILImage.Image:
        """Load the image stored at ``path`` and return its handle."""

    @abstractmethod
    def store(self, path: PathLike, handle: Any) -> None:
        """Store the image behind ``handle`` at ``path``."""

    @abstractmethod
    def display(self, handle: Any, stream: Optional[BinaryIO] = None) -> None:
        """Write the encoded image to ``stream`` (stdout by default)."""

    def accepts(self, handle: Any) -> bool:
        """Whether ``handle`` is an open image handle this driver can work with."""
        return isinstance(handle, PILImage.Image) and not _is_closed(handle)

    def check_handle(self, handle: Any) -> PILImage.Image:
        if not self.accepts(handle):
            raise InvalidArgumentError(f"Given handle is not a valid {self.name} image handle.")
        return handle

    def release(self, handle: Any) -> None:
        """Release the native resources held by ``handle``."""
        if self.accepts(handle):
            handle.close()

    @staticmethod
    def _output_stream(stream: Optional[BinaryIO]) -> BinaryIO:
        if stream is not None:
            return stream
        return getattr(sys.stdout, "buffer", sys.stdout)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return (
            f"{self.__class__.__name__}"
            f"(name={self.name}, file_extension={self.file_extension}, mime_type={self.mime_type})"
        )


__all__ = ["ImageDriver", "PathLike"]
