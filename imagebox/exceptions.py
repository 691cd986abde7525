"""
Exceptions raised by imagebox.

Driver and file system errors are not caught by the container; they reach the
caller as raised.
"""


class ImageBoxError(Exception):
    """Base class for all imagebox errors."""


class InvalidArgumentError(ImageBoxError, ValueError):
    """A handle is not a valid image handle for the selected image type."""


class ImageFormatError(ImageBoxError, OSError):
    """A file or handle cannot be decoded or encoded as the image type's format."""


class ResourceNotFoundError(ImageBoxError, LookupError):
    """A resource URI cannot be resolved to a local file."""


__all__ = [
    "ImageBoxError",
    "InvalidArgumentError",
    "ImageFormatError",
    "ResourceNotFoundError",
]
