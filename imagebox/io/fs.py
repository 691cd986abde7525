import os
from pathlib import Path
from typing import Union


def silent_remove(file_path: Union[str, Path]) -> None:
    """
    Remove a file, ignoring it if it is already gone.

    :param file_path: Path to the file.
    :type file_path: Union[str, Path]
    :raises OSError: for any failure other than a missing file.
    :Usage example:

     .. code-block:: python

        from imagebox.io.fs import silent_remove
        silent_remove('/tmp/imagebox/logo.png')
    """
    try:
        os.remove(file_path)
    except FileNotFoundError:
        pass


def get_file_ext(path: Union[str, Path]) -> str:
    """
    Extracts file extension from a given path or URL path.

    :param path: Path to file.
    :type path: Union[str, Path]
    :returns: File extension including the dot, empty if there is none
    :rtype: :class:`str`
    :Usage example:

     .. code-block::

        from imagebox.io.fs import get_file_ext

        get_file_ext("/home/admin/images/logo.png")
        # Output: .png
    """
    return os.path.splitext(os.path.basename(path))[1]


def get_file_name(path: Union[str, Path]) -> str:
    """Extracts file name without extension from a given path."""
    return os.path.splitext(os.path.basename(path))[0]
