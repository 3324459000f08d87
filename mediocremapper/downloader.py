"""Download a file over HTTP and save it locally, reporting progress and outcome."""

from __future__ import annotations

import http.client
import os
import urllib.error
import urllib.request
from enum import Enum
from typing import Callable, Optional, Union

_CHUNK_SIZE = 8192

ResultCallback = Callable[["DownloadResult"], None]
ProgressCallback = Callable[[int, int, int], None]


class DownloadResult(Enum):
    """Possible outcomes of a download."""

    SUCCESS = "success"
    DOWNLOAD_FAILED = "download_failed"
    SAVE_FAILED = "save_failed"
    DIRECTORY_CREATION_FAILED = "directory_creation_failed"


class FileDownloader:
    """Fetches a URL and writes the body to a file.

    Every callable in ``on_progress`` is called as
    ``(bytes_sent, bytes_received, content_length)`` while data arrives, and
    every callable in ``on_result`` receives the final :class:`DownloadResult`,
    also when the download fails.
    """

    timeout: float = 60.0

    def __init__(self) -> None:
        self.file_url = ""
        self.save_path = ""
        self.result: Optional[DownloadResult] = None
        self.on_result: list[ResultCallback] = []
        self.on_progress: list[ProgressCallback] = []

    def download_file(
        self, url: str, save_path: Union[str, "os.PathLike[str]"]
    ) -> "FileDownloader":
        """Download ``url`` into ``save_path`` and return this downloader."""
        self.file_url = url
        self.save_path = os.fspath(save_path)
        content = self._fetch(url)
        if content is None:
            self._finish(DownloadResult.DOWNLOAD_FAILED)
        else:
            self._finish(self._save(content))
        return self

    def _fetch(self, url: str) -> Optional[bytes]:
        try:
            request = urllib.request.Request(url, method="GET")
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                status = getattr(response, "status", None)
                if status is None or not 200 <= status < 300:
                    return None
                total = _content_length(response.headers.get("Content-Length"))
                chunks: list[bytes] = []
                received = 0
                while chunk := response.read(_CHUNK_SIZE):
                    chunks.append(chunk)
                    received += len(chunk)
                    for callback in self.on_progress:
                        callback(0, received, total)
                return b"".join(chunks)
        except (OSError, ValueError, http.client.HTTPException):
            return None

    def _save(self, content: bytes) -> DownloadResult:
        directory = os.path.dirname(self.save_path)
        if directory and not os.path.isdir(directory):
            try:
                os.makedirs(directory, exist_ok=True)
            except OSError:
                return DownloadResult.DIRECTORY_CREATION_FAILED
        try:
            with open(self.save_path, "wb") as handle:
                handle.write(content)
        except OSError:
            return DownloadResult.SAVE_FAILED
        return DownloadResult.SUCCESS

    def _finish(self, result: DownloadResult) -> None:
        self.result = result
        for callback in self.on_result:
            callback(result)


def _content_length(header: Optional[str]) -> int:
    if not header:
        return 0
    try:
        return int(header)
    except ValueError:
        return 0