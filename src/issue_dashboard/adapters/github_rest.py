"""GitHub REST API fetcher for repository issues."""

from __future__ import annotations

import json
import logging
from http.client import HTTPException, responses
from typing import Any, Callable, Mapping
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from issue_dashboard.core.models import DashboardConfig, split_repository
from issue_dashboard.errors import ConfigurationError, FetchFailed

PAGE_SIZE = 100
API_VERSION = "2022-11-28"

logger = logging.getLogger("issue_dashboard")

RequestFn = Callable[[str, Mapping[str, str]], tuple[int, dict[str, str], str]]


class GitHubRestFetcher:
    """Fetch every issue of a repository through the REST API."""

    def __init__(
        self,
        config: DashboardConfig,
        *,
        request_fn: RequestFn | None = None,
    ) -> None:
        self._token = config.token
        self._base_url = config.api_url
        self._timeout_seconds = config.timeout_seconds
        self._request_fn = request_fn or self._default_request

    def fetch_issues(self, repository: str) -> list[dict[str, Any]]:
        """Fetch all issues and pull requests in every state, following pagination.

        Items are returned in API order. A page shorter than ``PAGE_SIZE`` ends
        the walk.
        """
        try:
            owner, name = split_repository(repository)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc

        items: list[dict[str, Any]] = []
        page = 1
        while True:
            query = urlencode({"state": "all", "per_page": PAGE_SIZE, "page": page})
            url = f"{self._base_url}/repos/{owner}/{name}/issues?{query}"
            logger.debug("Requesting page %d: %s", page, url)
            payload = self._request_json(url)
            if not isinstance(payload, list):
                raise FetchFailed(f"Unexpected payload when listing issues for {repository}: {payload!r}")
            items.extend(payload)
            if len(payload) < PAGE_SIZE:
                break
            page += 1

        logger.info("Fetched %d items from %s in %d page(s)", len(items), repository, page)
        return items

    def _request_json(self, url: str) -> object:
        headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self._token}",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": "issue-dashboard",
        }

        try:
            status, _, body = self._request_fn(url, headers)
        except (URLError, HTTPException, OSError) as exc:
            raise FetchFailed(f"Failed to fetch issues: {_transport_reason(exc)}") from exc
        except UnicodeDecodeError as exc:
            raise FetchFailed(f"Failed to decode response from {url}: {exc}") from exc

        if status >= 400:
            raise FetchFailed(f"Failed to fetch issues: {_status_text(status, body)}")

        try:
            return json.loads(body)
        except ValueError as exc:
            raise FetchFailed(f"Failed to decode response from {url}: {exc}") from exc

    def _default_request(self, url: str, headers: Mapping[str, str]) -> tuple[int, dict[str, str], str]:
        request = Request(url=url, headers=dict(headers), method="GET")
        kwargs: dict[str, Any] = {}
        if self._timeout_seconds is not None:
            kwargs["timeout"] = self._timeout_seconds
        try:
            with urlopen(request, **kwargs) as response:
                return response.status, dict(response.headers.items()), response.read().decode("utf-8")
        except HTTPError as exc:
            body = exc.read().decode("utf-8", errors="replace")
            return exc.code, dict(exc.headers.items()) if exc.headers else {}, body


def _status_text(status: int, body: str) -> str:
    text = f"{status} {responses.get(status, 'Unknown Status')}"
    try:
        message = json.loads(body).get("message")
    except (ValueError, AttributeError):
        message = None
    if message:
        text = f"{text} ({message})"
    return text


def _transport_reason(exc: BaseException) -> str:
    reason = getattr(exc, "reason", None)
    return str(reason) if reason is not None else str(exc)
