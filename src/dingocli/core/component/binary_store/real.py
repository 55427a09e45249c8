"""Filesystem binary store that downloads artifacts over HTTP."""

import logging
import shutil
from pathlib import Path

import httpx

from dingocli.core.component.binary_store.abc import BinaryStore
from dingocli.core.component.errors import FetchError
from dingocli.core.component.fetcher.real import DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

EXECUTABLE_MODE = 0o755


class RealBinaryStore(BinaryStore):
    """Streams artifacts to a temporary file, then renames into place."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    def download(self, url: str, destination: Path) -> None:
        destination.parent.mkdir(parents=True, exist_ok=True)
        temp_path = destination.with_name(destination.name + ".part")
        logger.debug("Downloading %s to %s", url, destination)

        try:
            with httpx.Client(
                timeout=self._timeout, transport=self._transport, follow_redirects=True
            ) as client:
                with client.stream("GET", url) as response:
                    if not response.is_success:
                        raise FetchError(
                            f"download {url} failed: {response.status_code} "
                            f"{response.reason_phrase}",
                            url=url,
                            status_code=response.status_code,
                        )
                    with temp_path.open("wb") as f:
                        for chunk in response.iter_bytes():
                            f.write(chunk)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            temp_path.unlink(missing_ok=True)
            raise FetchError(f"download {url} failed: {e}", url=url) from e
        except FetchError:
            temp_path.unlink(missing_ok=True)
            raise

        temp_path.chmod(EXECUTABLE_MODE)
        temp_path.replace(destination)

    def remove(self, path: Path) -> None:
        if path.is_dir():
            shutil.rmtree(path)
        elif path.exists():
            path.unlink()
        else:
            logger.debug("Binary %s already absent", path)
            return

        # Drop the per-version directory once it is empty
        parent = path.parent
        if parent.exists() and not any(parent.iterdir()):
            parent.rmdir()
