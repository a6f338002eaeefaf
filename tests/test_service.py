"""Tests for service layer."""

import re

import pytest
from shortlink.service import ShortLinkService
from shortlink.shortcode import ShortCodeGenerator
from shortlink.errors import ShortLinkError, InvalidInputError, NotFoundError

HEX8 = re.compile(r"^[0-9a-f]{8}$")


class ScriptedGenerator(ShortCodeGenerator):
    """Hands out a fixed sequence of codes."""

    def __init__(self, codes):
        super().__init__()
        self._codes = iter(codes)

    def generate_random(self, length=None):
        return next(self._codes)


class TestShortLinkService:
    """Test short-link service."""

    @pytest.mark.asyncio
    async def test_create_short_link(self, service, sample_urls):
        """Test creating short URL."""
        result = await service.create_short_link(sample_urls[0], "u1")

        assert HEX8.match(result["short_code"])
        assert result["original_url"] == sample_urls[0]
        assert result["owner_id"] == "u1"
        assert "created_at" in result

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url, owner", [
        (None, "u1"),
        ("", "u1"),
        ("https://example.com", None),
        ("https://example.com", ""),
    ])
    async def test_missing_fields(self, service, store, url, owner):
        """Missing URL or owner is invalid input and stores nothing."""
        with pytest.raises(InvalidInputError, match="required"):
            await service.create_short_link(url, owner)

        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_blank_owner_is_an_owner(self, service, sample_urls):
        """A whitespace-only userId is kept as given, not treated as missing."""
        result = await service.create_short_link(sample_urls[0], " ")

        assert result["owner_id"] == " "
        listed = await service.list_short_links(" ")
        assert [r["short_code"] for r in listed] == [result["short_code"]]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url", ["not-a-url", "ftp://example.com/file", "https://", "   "])
    async def test_invalid_url(self, service, store, url):
        """Test invalid URL rejection."""
        with pytest.raises(InvalidInputError, match="Invalid URL"):
            await service.create_short_link(url, "u1")

        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_resolve_short_link(self, service, sample_urls):
        """Resolving right after creation returns the original URL."""
        result = await service.create_short_link(sample_urls[0], "u1")

        original = await service.resolve_short_link(result["short_code"])
        assert original == sample_urls[0]

    @pytest.mark.asyncio
    async def test_resolve_is_repeatable(self, service, sample_urls):
        """Repeated resolves keep returning the same URL."""
        code = (await service.create_short_link(sample_urls[1], "u1"))["short_code"]

        resolved = [await service.resolve_short_link(code) for _ in range(5)]
        assert resolved == [sample_urls[1]] * 5

    @pytest.mark.asyncio
    async def test_resolve_unknown(self, service):
        """Test getting nonexistent URL."""
        with pytest.raises(NotFoundError) as exc_info:
            await service.resolve_short_link("deadbeef")

        assert exc_info.value.short_code == "deadbeef"

    @pytest.mark.asyncio
    async def test_list_short_links(self, service, sample_urls):
        """Listing returns exactly the owner's codes, oldest first."""
        mine = [
            (await service.create_short_link(sample_urls[0], "u1"))["short_code"],
            (await service.create_short_link(sample_urls[2], "u1"))["short_code"],
        ]
        other = (await service.create_short_link(sample_urls[1], "u2"))["short_code"]

        listed = await service.list_short_links("u1")
        assert [item["short_code"] for item in listed] == mine
        assert other not in [item["short_code"] for item in listed]
        assert [item["original_url"] for item in listed] == [sample_urls[0], sample_urls[2]]

    @pytest.mark.asyncio
    async def test_list_empty(self, service):
        """An owner with no links gets an empty list."""
        assert await service.list_short_links("nobody") == []

    @pytest.mark.asyncio
    async def test_list_requires_owner(self, service):
        """Listing without owner id is invalid input."""
        with pytest.raises(InvalidInputError, match="userId"):
            await service.list_short_links(None)

    @pytest.mark.asyncio
    async def test_collision_retries(self, store, logger):
        """A taken code is skipped and the next candidate used."""
        service = ShortLinkService(
            store=store,
            short_code_generator=ScriptedGenerator(["aaaaaaaa", "aaaaaaaa", "bbbbbbbb"]),
            logger=logger,
        )

        first = await service.create_short_link("https://example.com/1", "u1")
        second = await service.create_short_link("https://example.com/2", "u1")

        assert first["short_code"] == "aaaaaaaa"
        assert second["short_code"] == "bbbbbbbb"
        assert await service.resolve_short_link("aaaaaaaa") == "https://example.com/1"

    @pytest.mark.asyncio
    async def test_collision_retries_exhausted(self, store, logger):
        """Running out of retries is an internal error, not an overwrite."""
        service = ShortLinkService(
            store=store,
            short_code_generator=ScriptedGenerator(["aaaaaaaa"] * 4),
            logger=logger,
            max_collision_retries=2,
        )

        await service.create_short_link("https://example.com/1", "u1")

        with pytest.raises(ShortLinkError, match="unique short code"):
            await service.create_short_link("https://example.com/2", "u2")

        assert await service.resolve_short_link("aaaaaaaa") == "https://example.com/1"

    @pytest.mark.asyncio
    async def test_statistics(self, service, sample_urls):
        """Statistics reflect created links."""
        await service.create_short_link(sample_urls[0], "u1")
        await service.create_short_link(sample_urls[1], "u2")

        stats = await service.get_statistics()
        assert stats["total_urls"] == 2
        assert stats["total_owners"] == 2

    @pytest.mark.asyncio
    async def test_health_check(self, service):
        """Test health check."""
        health = await service.health_check()

        assert health == {"store": True, "overall": True}
