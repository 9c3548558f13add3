"""Tests for input loading."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from fragedit.exceptions import InputReadError
from fragedit.fetch import load_html


class TestLoadHtml:
    """Tests for load_html."""

    @pytest.mark.asyncio
    async def test_reads_file(self, tmp_path: Path) -> None:
        """Reads a local file as UTF-8."""
        path = tmp_path / "frag.html"
        path.write_text("<p>café</p>", encoding="utf-8")

        assert await load_html(file_path=path) == "<p>café</p>"

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="HTML file not found"):
            await load_html(file_path=tmp_path / "nope.html")

    @pytest.mark.asyncio
    async def test_invalid_utf8_raises_input_error(self, tmp_path: Path) -> None:
        """Undecodable bytes raise InputReadError chained to the decode error."""
        path = tmp_path / "latin1.html"
        path.write_bytes(b"<p>caf\xe9</p>")

        with pytest.raises(InputReadError, match="not valid UTF-8") as exc_info:
            await load_html(file_path=path)

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    @pytest.mark.asyncio
    async def test_fetches_url(self) -> None:
        """URLs go through fetch_markup."""
        with patch("fragedit.fetch.fetch_markup", new=AsyncMock(return_value="<b>x</b>")) as mock_fetch:
            result = await load_html(url="https://example.com/frag")

        assert result == "<b>x</b>"
        mock_fetch.assert_awaited_once_with("https://example.com/frag")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs",
        [{}, {"url": "https://example.com", "file_path": "x.html"}],
    )
    async def test_requires_exactly_one_source(self, kwargs: dict) -> None:
        """Neither or both sources is a usage error."""
        with pytest.raises(ValueError, match="exactly one"):
            await load_html(**kwargs)
