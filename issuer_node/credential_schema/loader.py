"""Schema document loaders.

A loader retrieves the raw bytes of a credential JSON schema from wherever it
is published: an HTTP(S) server, IPFS through an HTTP gateway, or the local
filesystem.
"""

import logging
import string
import urllib.parse as urllib_parse
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import requests

from ..version import __version__
from .error import SchemaLoadError

LOGGER = logging.getLogger(__name__)

HOST_CHARACTERS = set(string.ascii_letters + string.digits + "-._:")


class BaseSchemaLoader(ABC):
    """Base class for schema loaders."""

    @abstractmethod
    def load(self) -> bytes:
        """Retrieve the raw schema document.

        :raises SchemaLoadError: if the document cannot be retrieved
        :returns: the document bytes
        """


def validate_http_url(url: str):
    """Check the URL can be dereferenced over HTTP."""
    try:
        pieces = urllib_parse.urlparse(url)
        host = pieces.hostname
        pieces.port  # raises on a malformed port
    except ValueError as err:
        raise SchemaLoadError(f"Malformed URL: {url}") from err
    if (
        pieces.scheme not in ["http", "https"]
        or not host
        or "@" in pieces.netloc
        or not set(host) <= HOST_CHARACTERS
    ):
        raise SchemaLoadError(
            'URL could not be dereferenced; only "http" and "https" '
            f"URLs are supported: {url}"
        )


def download(url: str, **kwargs) -> bytes:
    """Retrieve a JSON document from the given URL.

    :param url: the URL of the document to download
    :return: the response body
    """
    validate_http_url(url)
    headers = {
        "Accept": "application/json",
        "User-Agent": f"IssuerNode/{__version__}",
    }

    LOGGER.debug("Downloading schema from %s", url)
    try:
        response = requests.get(url, headers=headers, **kwargs)
        response.raise_for_status()
    except requests.exceptions.ConnectionError as e:
        raise SchemaLoadError(f"A connection error occurred: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise SchemaLoadError(f"An HTTP error occurred: {url}") from e
    except requests.exceptions.Timeout as e:
        raise SchemaLoadError(f"The request timed out: {url}") from e
    except requests.exceptions.RequestException as e:
        raise SchemaLoadError(f"An error occurred: {url}") from e
    return response.content


class HTTPSchemaLoader(BaseSchemaLoader):
    """Load a schema published over HTTP(S)."""

    def __init__(self, url: str, **kwargs):
        """Initialize the loader; extra arguments are passed to `requests.get`."""
        validate_http_url(url)
        self.url = url
        self.request_args = kwargs

    def load(self) -> bytes:
        """Download the schema."""
        return download(self.url, **self.request_args)


class IPFSSchemaLoader(BaseSchemaLoader):
    """Load a schema stored on IPFS through an HTTP gateway."""

    def __init__(self, url: str, gateway: Optional[str], **kwargs):
        """Initialize the loader for an `ipfs://<cid>[/path]` URL."""
        pieces = urllib_parse.urlparse(url)
        if pieces.scheme != "ipfs" or not pieces.netloc:
            raise SchemaLoadError(f"Invalid IPFS URL: {url}")
        if not gateway:
            raise SchemaLoadError(f"An IPFS gateway is required to load {url}")
        self.url = url
        self.gateway = gateway
        self.request_args = kwargs

    @property
    def gateway_url(self) -> str:
        """HTTP URL of the document on the gateway."""
        pieces = urllib_parse.urlparse(self.url)
        return f"{self.gateway.rstrip('/')}/ipfs/{pieces.netloc}{pieces.path}"

    def load(self) -> bytes:
        """Download the schema from the gateway."""
        return download(self.gateway_url, **self.request_args)


class FileSchemaLoader(BaseSchemaLoader):
    """Load a schema from the local filesystem."""

    def __init__(self, path):
        """Initialize the loader with a filesystem path."""
        self.path = Path(path)

    def load(self) -> bytes:
        """Read the schema file."""
        try:
            return self.path.read_bytes()
        except OSError as e:
            raise SchemaLoadError(f"Cannot read schema file: {self.path}") from e


def loader_for(url: str, ipfs_gateway: Optional[str] = None) -> BaseSchemaLoader:
    """Instantiate the loader supporting the scheme of a schema URL.

    :param url: location of the schema
    :param ipfs_gateway: HTTP gateway used for `ipfs://` URLs
    :returns: BaseSchemaLoader the appropriate loader for the URL
    """
    try:
        scheme = urllib_parse.urlparse(url).scheme
    except ValueError as err:
        raise SchemaLoadError(f"Malformed URL: {url}") from err
    if scheme in ("http", "https"):
        return HTTPSchemaLoader(url)
    if scheme == "ipfs":
        return IPFSSchemaLoader(url, ipfs_gateway)
    if scheme == "file":
        return FileSchemaLoader(urllib_parse.unquote(urllib_parse.urlparse(url).path))
    raise SchemaLoadError(f"Unsupported schema URL scheme: {url}")
