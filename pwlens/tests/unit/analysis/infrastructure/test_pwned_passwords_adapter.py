"""
Test cases for the Pwned Passwords range adapter.

HTTP traffic is intercepted with httpx.MockTransport.
"""

import httpx
import pytest

from pwlens.core.config import BreachCheckConfig
from pwlens.core.errors import ExternalServiceError, ValidationError
from pwlens.modules.analysis.infrastructure.adapters.pwned_passwords_adapter import (
    PwnedPasswordsAdapter,
)

SUFFIX = "1E4C9B93F3F0682250B6CF8331B7EE68FD8"
PADDING_SUFFIX = "0018A45C4D1DEF81644B54AB7F969B88D65"
OTHER_SUFFIX = "00D4F6E8FA6EECAD2A3AA415EEC418D38EC"

CONFIG = BreachCheckConfig(api_url="https://range.example")


def make_adapter(handler, config=CONFIG):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return PwnedPasswordsAdapter(config, client=client), client


class TestLookup:
    """Test successful lookups."""

    @pytest.mark.asyncio
    async def test_parses_suffix_counts(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            body = f"{SUFFIX}:3861493\r\n{OTHER_SUFFIX}:2\r\n{PADDING_SUFFIX}:0\r\n"
            return httpx.Response(200, text=body)

        adapter, _ = make_adapter(handler)
        suffixes = await adapter.lookup("5BAA6")

        assert suffixes == {SUFFIX: 3861493, OTHER_SUFFIX: 2}
        assert str(requests[0].url) == "https://range.example/range/5BAA6"
        assert requests[0].method == "GET"

    @pytest.mark.asyncio
    async def test_sends_padding_header(self):
        headers = []

        def handler(request: httpx.Request) -> httpx.Response:
            headers.append(request.headers)
            return httpx.Response(200, text="")

        adapter, _ = make_adapter(handler)
        await adapter.lookup("5BAA6")

        assert headers[0]["Add-Padding"] == "true"

    @pytest.mark.asyncio
    async def test_padding_header_can_be_disabled(self):
        headers = []

        def handler(request: httpx.Request) -> httpx.Response:
            headers.append(request.headers)
            return httpx.Response(200, text="")

        config = BreachCheckConfig(api_url="https://range.example", add_padding=False)
        adapter, _ = make_adapter(handler, config)
        await adapter.lookup("5BAA6")

        assert "Add-Padding" not in headers[0]

    @pytest.mark.asyncio
    async def test_blank_lines_and_lowercase_suffixes(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text=f"\n{SUFFIX.lower()}:7\n\n")

        adapter, _ = make_adapter(handler)

        assert await adapter.lookup("5BAA6") == {SUFFIX: 7}


class TestLookupFailures:
    """Test failure reporting."""

    @pytest.mark.asyncio
    async def test_invalid_prefix(self):
        adapter, _ = make_adapter(lambda request: httpx.Response(200))

        with pytest.raises(ValidationError):
            await adapter.lookup("5baa6")

        with pytest.raises(ValidationError):
            await adapter.lookup("5BAA61E4")

    @pytest.mark.asyncio
    async def test_error_status(self):
        adapter, _ = make_adapter(lambda request: httpx.Response(503))

        with pytest.raises(ExternalServiceError) as exc_info:
            await adapter.lookup("5BAA6")

        assert exc_info.value.details["service_status_code"] == 503

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        adapter, _ = make_adapter(handler)

        with pytest.raises(ExternalServiceError):
            await adapter.lookup("5BAA6")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        ["<html>oops</html>", f"{SUFFIX}", f"{SUFFIX}:many", f"{SUFFIX}:-1", "ABC:1"],
    )
    async def test_malformed_body(self, body):
        adapter, _ = make_adapter(lambda request: httpx.Response(200, text=body))

        with pytest.raises(ExternalServiceError):
            await adapter.lookup("5BAA6")


class TestClientLifecycle:
    """Test client ownership."""

    @pytest.mark.asyncio
    async def test_injected_client_left_open(self):
        adapter, client = make_adapter(lambda request: httpx.Response(200))

        await adapter.close()

        assert client.is_closed is False
        await client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_closed(self):
        async with PwnedPasswordsAdapter(CONFIG) as adapter:
            client = adapter._get_client()
            assert client.headers["User-Agent"] == CONFIG.user_agent

        assert client.is_closed is True
