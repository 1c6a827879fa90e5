"""Network download helpers."""

import http.client
import logging
import os
import shutil
import urllib.request
from pathlib import Path
from tempfile import NamedTemporaryFile

logger = logging.getLogger(__name__)


def _discard(tmp_path: Path | None) -> None:
    """Remove a partially written temp file, if any."""
    if tmp_path is not None and tmp_path.exists():
        tmp_path.unlink()


def _check_length(response: http.client.HTTPResponse, written: int) -> None:
    """Verify a body against its declared Content-Length.

    Raises:
        OSError: If fewer or more bytes arrived than announced.
    """
    declared = response.headers.get("Content-Length")
    if declared is None:
        return
    if int(declared) != written:
        msg = f"Incomplete download: received {written} of {declared} bytes"
        raise OSError(msg)


def download_file(url: str, dest: Path) -> None:
    """Download a URL to a local file, replacing any existing copy.

    The payload is streamed into a temporary file next to ``dest`` and moved
    into place with os.replace() only once the whole body has arrived, so a
    failed or truncated download leaves the previous file (or no file).

    Args:
        url: Source URL.
        dest: Destination file path. Its parent directory must exist.

    Raises:
        OSError: If the URL is malformed, the transfer fails or is cut
            short, or the write fails.
    """
    tmp_path: Path | None = None
    try:
        with urllib.request.urlopen(url) as response:  # nosec: B310
            with NamedTemporaryFile(mode="wb", dir=dest.parent, delete=False, suffix=".tmp") as f:
                tmp_path = Path(f.name)
                shutil.copyfileobj(response, f)
                written = f.tell()
            _check_length(response, written)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(dest))
    except (ValueError, http.client.HTTPException) as e:
        _discard(tmp_path)
        raise OSError(f"Failed to download {url}: {e}") from e
    except OSError:
        _discard(tmp_path)
        raise

    logger.debug("Downloaded %s to %s", url, dest)
