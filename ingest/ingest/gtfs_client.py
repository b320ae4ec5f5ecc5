from __future__ import annotations

import io
import logging
import zipfile
from urllib.error import URLError
from urllib.request import Request, urlopen

from .config import feed_user_agent, gtfs_archive_url, gtfs_download_timeout_seconds
from .errors import ArchiveError, FeedTransportError

logger = logging.getLogger(__name__)


def download_archive(url: str | None = None, timeout: float | None = None) -> bytes:
    url = url or gtfs_archive_url()
    if timeout is None:
        timeout = gtfs_download_timeout_seconds()
    logger.info("Downloading GTFS archive from %s", url)
    request = Request(url, headers={"User-Agent": feed_user_agent()})
    try:
        with urlopen(request, timeout=timeout) as response:
            payload = response.read()
    except (URLError, TimeoutError) as exc:
        raise FeedTransportError(f"Failed to download GTFS archive: {exc}") from exc
    logger.info("Downloaded GTFS archive (%d bytes)", len(payload))
    return payload


def read_entry_lines(archive: bytes, entry: str) -> list[str]:
    try:
        bundle = zipfile.ZipFile(io.BytesIO(archive))
    except zipfile.BadZipFile as exc:
        raise ArchiveError("GTFS download is not a zip archive") from exc

    with bundle:
        try:
            raw = bundle.read(entry)
        except KeyError as exc:
            logger.error(
                "%s not found in GTFS archive; entries: %s",
                entry,
                ", ".join(bundle.namelist()),
            )
            raise ArchiveError(f"{entry} not found in GTFS archive") from exc
    return raw.decode("utf-8-sig").splitlines()
