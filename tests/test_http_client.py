# ABOUTME: Tests for the httpx transport using httpx.MockTransport.
# ABOUTME: Covers auth headers, envelope decoding, and translation of HTTP and network failures.

import json

import httpx
import pytest

from linkedapi.transport import LinkedApiHttpClient


def make_client(handler) -> LinkedApiHttpClient:
    return LinkedApiHttpClient(
        "api-token",
        "id-token",
        base_url="https://api.test",
        transport=httpx.MockTransport(handler),
    )


class TestRequests:
    """Tests for outgoing requests."""

    @pytest.mark.asyncio
    async def test_sends_auth_and_client_headers(self) -> None:
        """Test that every request carries both tokens and the client name."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"success": True, "result": {"cancelled": True}})

        client = make_client(handler)
        await client.delete("/workflows/wf-1")
        await client.aclose()

        request = seen[0]
        assert request.method == "DELETE"
        assert str(request.url) == "https://api.test/workflows/wf-1"
        assert request.headers["linked-api-token"] == "api-token"
        assert request.headers["identification-token"] == "id-token"
        assert request.headers["client"] == "python"
        assert request.headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self) -> None:
        """Test that the body is sent as JSON."""
        bodies: list[object] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"success": True, "result": {"workflowId": "w"}})

        client = make_client(handler)
        response = await client.post("/workflows", {"actionType": "st.retrieveSSI"})
        await client.aclose()

        assert bodies == [{"actionType": "st.retrieveSSI"}]
        assert response.success is True
        assert response.result == {"workflowId": "w"}

    @pytest.mark.asyncio
    async def test_get_keeps_query_string(self) -> None:
        """Test that query parameters in the path reach the server."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"success": True, "result": []})

        client = make_client(handler)
        await client.get("/stats/actions?start=a&end=b")
        await client.aclose()

        assert seen[0].url.path == "/stats/actions"
        assert seen[0].url.params["start"] == "a"


class TestFailureTranslation:
    """Tests for turning failures into envelopes."""

    @pytest.mark.asyncio
    async def test_error_body_on_non_2xx_is_kept(self) -> None:
        """Test that an API error body is returned as-is."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                401,
                json={
                    "success": False,
                    "error": {"type": "invalidLinkedApiToken", "message": "Invalid token"},
                },
            )

        client = make_client(handler)
        response = await client.get("/workflows/wf-1")
        await client.aclose()

        assert response.success is False
        assert response.error.type == "invalidLinkedApiToken"

    @pytest.mark.asyncio
    async def test_non_2xx_without_error_body_is_http_error(self) -> None:
        """Test that a bare server error becomes httpError with details."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        client = make_client(handler)
        response = await client.get("/workflows/wf-1")
        await client.aclose()

        assert response.success is False
        assert response.error.type == "httpError"
        assert response.error.details == {
            "status": 502,
            "reason": "Bad Gateway",
            "url": "/workflows/wf-1",
        }

    @pytest.mark.asyncio
    async def test_network_failure_is_network_error(self) -> None:
        """Test that connection failures never raise."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        response = await client.get("/workflows/wf-1")
        await client.aclose()

        assert response.success is False
        assert response.error.type == "networkError"
        assert "connection refused" in response.error.message

    @pytest.mark.asyncio
    async def test_success_with_invalid_body_is_unknown_error(self) -> None:
        """Test that a 200 response that is not an envelope is reported."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>maintenance</html>")

        client = make_client(handler)
        response = await client.get("/workflows/wf-1")
        await client.aclose()

        assert response.error.type == "unknownError"
