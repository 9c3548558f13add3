"""Load fragment markup from a URL or a local file."""

from __future__ import annotations

import asyncio
from pathlib import Path

from fragedit.exceptions import InputReadError
from fragedit.http_utils import fetch_markup


async def load_html(*, url: str | None = None, file_path: str | Path | None = None) -> str:
    """Return markup from exactly one of ``url`` or ``file_path``.

    Raises:
        ValueError: If neither or both sources are given.
        FileNotFoundError: If ``file_path`` does not name a file.
        InputReadError: If the file cannot be read or is not valid UTF-8.
        FetchError: If the URL cannot be fetched.
    """
    if (url is None) == (file_path is None):
        raise ValueError("Provide exactly one of url or file_path")
    if url is not None:
        return await fetch_markup(url)

    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {path}")
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InputReadError(f"{path} is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc
    except OSError as exc:
        raise InputReadError(f"Cannot read {path}: {exc.strerror or exc}") from exc
