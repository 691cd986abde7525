"""
Container binding a file name and an image type to a native image handle.

All operations are forwarded to the driver of the bound :class:`ImageType`;
errors raised there reach the caller unchanged.
"""

from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING, BinaryIO, Optional, Union

from PIL import Image as PILImage

from imagebox.config.settings import get_settings
from imagebox.domain.types.image_info import ImageInfo
from imagebox.domain.types.image_type import ImageType
from imagebox.drivers.base import PathLike
from imagebox.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from imagebox.io.resources import Resolver

logger = logging.getLogger(__name__)

ImageTypeLike = Union[ImageType, str]


def _resolve_type(image_type: Optional[ImageTypeLike]) -> ImageType:
    if image_type is None:
        return ImageType(get_settings().DEFAULT_IMAGE_TYPE)
    return ImageType(image_type)


def _deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"Image.{old}() is deprecated, use Image.{new} instead",
        DeprecationWarning,
        stacklevel=3,
    )


class Image:
    """
    Container for an image.

    :param file_name: File name of the image.
    :type file_name: str or Path
    :param image_type: Image type, defaults to ``ImageType.PNG``.
    :type image_type: ImageType or str, optional
    :param handle: Already loaded image handle.
    :type handle: PIL.Image.Image, optional
    :raises InvalidArgumentError: if ``handle`` is not a valid handle for the image type.
    :Usage example:

     .. code-block:: python

        from imagebox import Image, ImageType

        with Image.load("photo.png") as img:
            print(img.type, img.mime_type)
            img.store("copy.png")
    """

    def __init__(
        self,
        file_name: PathLike,
        image_type: Optional[ImageTypeLike] = None,
        handle: Optional[PILImage.Image] = None,
    ):
        self._file_name = file_name
        self._type = _resolve_type(image_type)
        if handle is not None and not self._type.accepts(handle):
            raise InvalidArgumentError(f"Given handle is not a valid {self._type} image handle.")
        self._handle = handle

    @classmethod
    def load(cls, file_name: PathLike, image_type: Optional[ImageTypeLike] = None) -> "Image":
        """Load an image from file."""
        image = cls(file_name, image_type)
        image._handle = image._type.load(file_name)
        return image

    @classmethod
    def load_from_resource(
        cls,
        resource: str,
        resource_loader: "Resolver",
        image_type: Optional[ImageTypeLike] = None,
    ) -> "Image":
        """
        Load an image from a resource URI.

        :param resource: Resource URI, e.g. ``classpath://img/logo.png``.
        :param resource_loader: Object resolving the URI to a local file path.
        :raises ResourceNotFoundError: if the loader cannot resolve the URI.
        """
        file_name = resource_loader.resolve(resource)
        logger.debug(f"Resolved {resource} to {file_name}")
        return cls.load(file_name, image_type)

    @property
    def file_name(self) -> PathLike:
        return self._file_name

    @property
    def type(self) -> ImageType:
        return self._type

    @property
    def handle(self) -> Optional[PILImage.Image]:
        return self._handle

    def store(self, file_name: PathLike) -> "Image":
        """Store the image under the given file name."""
        self._type.store(file_name, self._handle)
        return self

    def display(self, stream: Optional[BinaryIO] = None) -> None:
        self._type.display(self._handle, stream)

    @property
    def file_extension(self) -> str:
        """Default extension for this type of image (e.g. '.png')."""
        return self._type.file_extension

    @property
    def mime_type(self) -> str:
        return self._type.mime_type

    def info(self) -> ImageInfo:
        handle = self._handle
        return ImageInfo(
            file_name=str(self._file_name),
            type=self._type,
            file_extension=self.file_extension,
            mime_type=self.mime_type,
            width=handle.width if handle is not None else None,
            height=handle.height if handle is not None else None,
            mode=handle.mode if handle is not None else None,
            loaded=handle is not None,
        )

    def close(self) -> None:
        """Release the image handle. The image can not be stored or displayed afterwards."""
        if self._handle is not None:
            self._type.release(self._handle)
            self._handle = None

    def __enter__(self) -> "Image":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Image(file_name={self._file_name!r}, type={self._type.value}, loaded={self._handle is not None})"

    # --- Deprecated aliases ---

    def get_name(self) -> PathLike:
        _deprecated("get_name", "file_name")
        return self.file_name

    def get_type(self) -> ImageType:
        _deprecated("get_type", "type")
        return self.type

    def get_handle(self) -> Optional[PILImage.Image]:
        _deprecated("get_handle", "handle")
        return self.handle

    def get_extension(self) -> str:
        _deprecated("get_extension", "file_extension")
        return self.file_extension

    def get_content_type(self) -> str:
        _deprecated("get_content_type", "mime_type")
        return self.mime_type
