"""
Resolution of resource URIs to local file paths.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Protocol, Sequence, Union

import requests

from imagebox.config.settings import get_settings
from imagebox.exceptions import ResourceNotFoundError
from imagebox.io.fs import get_file_ext, get_file_name, silent_remove
from imagebox.io.url import LOCAL_SCHEMES, REMOTE_SCHEMES, RESOURCE_SCHEMES, parse_resource_uri

if TYPE_CHECKING:
    from imagebox.config.settings import ImageBoxSettings

logger = logging.getLogger(__name__)

DOWNLOAD_CHUNK_SIZE = 1024 * 1024  # 1 MiB


class Resolver(Protocol):
    """Anything that can turn a resource URI into a local file path."""

    def resolve(self, uri: str) -> str: ...


class ResourceLoader:
    """
    Resolves resource URIs to local file paths.

    Supported URIs:

    * plain paths and ``file://`` URIs, which must point to an existing file;
    * ``classpath://`` and ``resource://`` URIs, searched relative to the
      resource roots in order;
    * ``http://`` and ``https://`` URLs, downloaded into a temporary file which
      is removed by :meth:`cleanup`.

    :param roots: Resource roots, defaults to ``IMAGEBOX_RESOURCE_PATHS``.
    :param download_dir: Directory for downloads, defaults to ``IMAGEBOX_DOWNLOAD_DIR``
        or the system temp directory.
    :param timeout: Download timeout in seconds, defaults to ``IMAGEBOX_HTTP_TIMEOUT``.
    :param session: ``requests`` session (or compatible object) used for downloads.
    """

    def __init__(
        self,
        roots: Optional[Sequence[Union[str, Path]]] = None,
        download_dir: Optional[Union[str, Path]] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        settings: Optional["ImageBoxSettings"] = None,
    ):
        settings = settings or get_settings()
        if roots is None:
            self._roots = settings.get_resource_paths()
        else:
            self._roots = [Path(r) for r in roots]
        self._download_dir = download_dir if download_dir is not None else settings.DOWNLOAD_DIR
        self._timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self._session = session
        self._downloads: List[str] = []

    @property
    def roots(self) -> List[Path]:
        return list(self._roots)

    @property
    def downloads(self) -> List[str]:
        """Local paths of files downloaded by this loader and not yet cleaned up."""
        return list(self._downloads)

    def resolve(self, uri: str) -> str:
        """
        Resolve ``uri`` to a local file path.

        :raises ResourceNotFoundError: if the URI can not be resolved.
        """
        scheme, location = parse_resource_uri(uri)
        if scheme in LOCAL_SCHEMES:
            path = self._resolve_local(uri, location)
        elif scheme in RESOURCE_SCHEMES:
            path = self._resolve_resource(uri, location)
        elif scheme in REMOTE_SCHEMES:
            path = self._download(location)
        else:
            raise ResourceNotFoundError(f"Unsupported resource scheme '{scheme}': {uri}")
        logger.debug(f"Resolved resource {uri} to {path}")
        return path

    def cleanup(self) -> None:
        """Remove all files downloaded by this loader."""
        while self._downloads:
            silent_remove(self._downloads.pop())

    def __enter__(self) -> "ResourceLoader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def _resolve_local(self, uri: str, location: str) -> str:
        path = Path(location).expanduser()
        if not path.is_file():
            raise ResourceNotFoundError(f"Resource not found: {uri}")
        return str(path)

    def _resolve_resource(self, uri: str, location: str) -> str:
        if not location:
            raise ResourceNotFoundError(f"Empty resource path: {uri}")
        for root in self._roots:
            candidate = root / location
            if not candidate.resolve().is_relative_to(root.resolve()):
                logger.warning(f"Ignoring resource {uri} outside of root {root}")
                continue
            if candidate.is_file():
                return str(candidate)
        raise ResourceNotFoundError(
            f"Resource {uri} not found in any of: {', '.join(str(r) for r in self._roots) or '<no roots>'}"
        )

    def _download(self, url: str) -> str:
        """Download resource file and return path to it"""
        session = self._session if self._session is not None else requests
        logger.info(f"GET {url}")
        try:
            response = session.get(url, stream=True, timeout=self._timeout)
        except requests.exceptions.RequestException as exc:
            raise ResourceNotFoundError(f"Resource could not be downloaded: {url} ({exc})") from exc
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            response.close()
            raise ResourceNotFoundError(f"Resource could not be downloaded: {url} ({exc})") from exc

        url_path = url.split("?", 1)[0]
        prefix = f"Resource_{get_file_name(url_path)}_"
        suffix = get_file_ext(url_path)
        temp_file = tempfile.NamedTemporaryFile(
            prefix=prefix, suffix=suffix, dir=self._download_dir, delete=False
        )
        file_path = temp_file.name
        self._downloads.append(file_path)
        try:
            with temp_file:
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    if chunk:
                        temp_file.write(chunk)
        except requests.exceptions.RequestException as exc:
            self._downloads.remove(file_path)
            silent_remove(file_path)
            raise ResourceNotFoundError(f"Resource could not be downloaded: {url} ({exc})") from exc
        finally:
            response.close()
        return file_path
