"""
Client for the Judge0 code execution service.

A submission is created with the candidate's code and the problem's
stdin / expected output, then polled by token until Judge0 reports a
terminal status. Status 3 ("Accepted") is a pass; every other terminal
status is a failure.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from codearena.config import Settings, get_settings
from codearena.errors import InternalError
from codearena.models.submission import SubmissionResult

logger = logging.getLogger(__name__)

# Judge0 status ids
STATUS_IN_QUEUE = 1
STATUS_PROCESSING = 2
STATUS_ACCEPTED = 3

PENDING_STATUSES = {STATUS_IN_QUEUE, STATUS_PROCESSING}


@dataclass(frozen=True)
class JudgeResult:
    """Outcome of one judged run."""
    verdict: SubmissionResult
    token: str
    status_id: int
    status_description: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.verdict is SubmissionResult.PASSED


class JudgeClient:
    """
    Async Judge0 client.

    Polling uses exponential backoff and gives up after a fixed number of
    attempts; every HTTP request is bounded by a timeout.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        api_host: str = "",
        timeout: float = 10.0,
        poll_interval: float = 1.0,
        poll_backoff: float = 2.0,
        max_poll_attempts: int = 6,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.api_host = api_host
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.poll_backoff = poll_backoff
        self.max_poll_attempts = max_poll_attempts
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "JudgeClient":
        """Build a client from application settings."""
        settings = settings or get_settings()
        return cls(
            base_url=settings.judge_api_url,
            api_key=settings.judge_api_key,
            api_host=settings.judge_api_host,
            timeout=settings.judge_timeout_seconds,
            poll_interval=settings.judge_poll_interval_seconds,
            poll_backoff=settings.judge_poll_backoff,
            max_poll_attempts=settings.judge_poll_max_attempts,
        )

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["x-rapidapi-key"] = self.api_key
        if self.api_host:
            headers["x-rapidapi-host"] = self.api_host
        return headers

    async def judge(
        self,
        source_code: str,
        language_id: int,
        stdin: Optional[str],
        expected_output: Optional[str],
    ) -> JudgeResult:
        """
        Run source code against a stdin / expected output fixture.

        Args:
            source_code: Program text
            language_id: Judge0 language id
            stdin: Input fed to the program
            expected_output: Output the program must print

        Returns:
            JudgeResult with the verdict and Judge0 token

        Raises:
            InternalError: On any HTTP failure, malformed response or if
                the submission does not finish within the poll budget
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers(),
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                token = await self._create_submission(
                    client, source_code, language_id, stdin, expected_output
                )
                status_data = await self._poll_status(client, token)
        except httpx.HTTPError as e:
            logger.error(f"Judge request failed: {e}")
            raise InternalError(f"judge service request failed: {e}") from e

        status_id = status_data["id"]
        verdict = SubmissionResult.PASSED if status_id == STATUS_ACCEPTED else SubmissionResult.FAILED
        logger.info(f"Judge verdict for token={token}: {verdict.value} (status {status_id})")
        return JudgeResult(
            verdict=verdict,
            token=token,
            status_id=status_id,
            status_description=status_data.get("description"),
        )

    async def _create_submission(
        self,
        client: httpx.AsyncClient,
        source_code: str,
        language_id: int,
        stdin: Optional[str],
        expected_output: Optional[str],
    ) -> str:
        response = await client.post(
            "/submissions",
            params={"base64_encoded": "false", "wait": "false"},
            json={
                "language_id": language_id,
                "source_code": source_code,
                "stdin": stdin,
                "expected_output": expected_output,
            },
        )
        response.raise_for_status()
        body = self._json(response)
        token = body.get("token") if isinstance(body, dict) else None
        if not token:
            raise InternalError("judge service returned no submission token")
        return token

    async def _poll_status(self, client: httpx.AsyncClient, token: str) -> dict:
        delay = self.poll_interval
        for attempt in range(1, self.max_poll_attempts + 1):
            await asyncio.sleep(delay)
            response = await client.get(
                f"/submissions/{token}",
                params={"base64_encoded": "false", "fields": "token,status"},
            )
            response.raise_for_status()
            body = self._json(response)
            status_data = body.get("status") if isinstance(body, dict) else None
            if not isinstance(status_data, dict) or not isinstance(status_data.get("id"), int):
                raise InternalError("judge service returned a malformed status")

            if status_data["id"] not in PENDING_STATUSES:
                return status_data

            logger.debug(f"Judge token={token} still pending (attempt {attempt}/{self.max_poll_attempts})")
            delay *= self.poll_backoff

        raise InternalError(
            f"judge service did not finish submission {token} after {self.max_poll_attempts} polls"
        )

    @staticmethod
    def _json(response: httpx.Response):
        try:
            return response.json()
        except ValueError as e:
            raise InternalError(f"judge service returned invalid JSON: {e}") from e


def get_judge_client() -> JudgeClient:
    """FastAPI dependency providing a configured judge client."""
    return JudgeClient.from_settings()
