"""
Tests for the Judge0 client.
The HTTP side is served by httpx.MockTransport.
"""

import json

import httpx
import pytest

from codearena.errors import InternalError
from codearena.models.submission import SubmissionResult
from codearena.services.judge_client import JudgeClient


def make_client(handler, max_poll_attempts=4):
    return JudgeClient(
        base_url="https://judge.example.com",
        api_key="key-123",
        api_host="judge.example.com",
        timeout=5,
        poll_interval=0,
        poll_backoff=2,
        max_poll_attempts=max_poll_attempts,
        transport=httpx.MockTransport(handler),
    )


def judge0(statuses, token="tok-1"):
    """Handler that issues a token, then reports the given status ids in turn."""
    calls = {"post": 0, "get": 0, "requests": []}
    remaining = list(statuses)

    def handler(request: httpx.Request) -> httpx.Response:
        calls["requests"].append(request)
        if request.method == "POST":
            calls["post"] += 1
            return httpx.Response(201, json={"token": token})
        calls["get"] += 1
        status_id = remaining.pop(0) if len(remaining) > 1 else remaining[0]
        return httpx.Response(200, json={"token": token, "status": {"id": status_id, "description": "x"}})

    return handler, calls


async def run(client):
    return await client.judge(
        source_code="print(5)",
        language_id=71,
        stdin="2 3",
        expected_output="5",
    )


class TestJudge:
    """Tests for JudgeClient.judge."""

    @pytest.mark.asyncio
    async def test_accepted_is_passed(self):
        handler, calls = judge0([3])

        result = await run(make_client(handler))

        assert result.verdict is SubmissionResult.PASSED
        assert result.passed
        assert result.token == "tok-1"
        assert result.status_id == 3
        assert calls["post"] == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_id", [4, 5, 6, 11, 13])
    async def test_other_terminal_statuses_fail(self, status_id):
        handler, _ = judge0([status_id])

        result = await run(make_client(handler))

        assert result.verdict is SubmissionResult.FAILED
        assert not result.passed

    @pytest.mark.asyncio
    async def test_polls_past_pending_statuses(self):
        handler, calls = judge0([1, 2, 2, 3])

        result = await run(make_client(handler))

        assert result.passed
        assert calls["get"] == 4

    @pytest.mark.asyncio
    async def test_request_shape(self):
        handler, calls = judge0([3])

        await run(make_client(handler))

        create, poll = calls["requests"]
        assert create.url.path == "/submissions"
        assert create.url.params["base64_encoded"] == "false"
        assert create.headers["x-rapidapi-key"] == "key-123"
        assert json.loads(create.content) == {
            "language_id": 71,
            "source_code": "print(5)",
            "stdin": "2 3",
            "expected_output": "5",
        }
        assert poll.url.path == "/submissions/tok-1"

    @pytest.mark.asyncio
    async def test_never_finishing_gives_up(self):
        handler, calls = judge0([1])

        with pytest.raises(InternalError) as exc_info:
            await run(make_client(handler, max_poll_attempts=3))

        assert calls["get"] == 3
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_create_error_status(self):
        def handler(request):
            return httpx.Response(503, json={"error": "down"})

        with pytest.raises(InternalError):
            await run(make_client(handler))

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(InternalError) as exc_info:
            await run(make_client(handler))

        assert "connection refused" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_missing_token(self):
        def handler(request):
            return httpx.Response(201, json={})

        with pytest.raises(InternalError):
            await run(make_client(handler))

    @pytest.mark.asyncio
    async def test_malformed_status(self):
        def handler(request):
            if request.method == "POST":
                return httpx.Response(201, json={"token": "tok-1"})
            return httpx.Response(200, json={"token": "tok-1", "status": "done"})

        with pytest.raises(InternalError):
            await run(make_client(handler))

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        def handler(request):
            return httpx.Response(201, content=b"<html>oops</html>")

        with pytest.raises(InternalError):
            await run(make_client(handler))


class TestFromSettings:
    def test_uses_configured_values(self):
        from codearena.config import Settings

        settings = Settings(
            judge_api_url="https://judge0.internal/",
            judge_poll_max_attempts=9,
        )
        client = JudgeClient.from_settings(settings)

        assert client.base_url == "https://judge0.internal"
        assert client.max_poll_attempts == 9
