"""HTTP adapter for the GitHub REST API v3 (github.com and GitHub Enterprise)."""

from typing import Protocol

import httpx
import pydantic
import structlog

from composite.adapters.github_models import Comparison

logger = structlog.get_logger(__name__)


class GitHubClientError(Exception):
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.method = method
        self.url = url


class GitHubGateway(Protocol):
    """The GitHub capabilities the check resolver and matcher depend on."""

    async def get_file_contents(self, org: str, repo: str, path: str, ref: str) -> bytes: ...

    async def compare_commits(self, org: str, repo: str, base: str, head: str) -> list[str]: ...


class GitHubClient:
    _DEFAULT_BASE_URL = "https://api.github.com"
    _RAW_MEDIA_TYPE = "application/vnd.github.raw+json"

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float = 30.0,
        page_size: int = 100,
    ) -> None:
        headers: dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._base_url = (base_url or self._DEFAULT_BASE_URL).rstrip("/")
        self._page_size = page_size
        self._http = httpx.AsyncClient(base_url=self._base_url, headers=headers, timeout=timeout)

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        if not self._http.is_closed:
            await self._http.aclose()

    async def get_file_contents(self, org: str, repo: str, path: str, ref: str) -> bytes:
        """Download the raw contents of a repository file.

        Args:
            org: Repository owner or organization.
            repo: Repository name.
            path: File path relative to the repository root.
            ref: Commit SHA, branch or tag to read the file at.

        Returns:
            The file contents, undecoded.

        Raises:
            GitHubClientError: On any non-2xx response or transport failure.
        """
        resp = await self._request(
            "GET",
            f"/repos/{org}/{repo}/contents/{path.lstrip('/')}",
            params={"ref": ref},
            headers={"Accept": self._RAW_MEDIA_TYPE},
        )
        return resp.content

    async def compare_commits(self, org: str, repo: str, base: str, head: str) -> list[str]:
        """Return the names of the files changed between ``base`` and ``head``, in API order.

        Pages through the comparison until a page comes back short.
        """
        filenames: list[str] = []
        page = 1
        while True:
            resp = await self._request(
                "GET",
                f"/repos/{org}/{repo}/compare/{base}...{head}",
                params={"per_page": self._page_size, "page": page},
            )
            try:
                comparison = Comparison.model_validate(resp.json())
            except (ValueError, pydantic.ValidationError) as exc:
                raise GitHubClientError(
                    f"{resp.request.method} {resp.request.url}: unexpected response body; {exc}",
                    status_code=resp.status_code,
                    method=resp.request.method,
                    url=str(resp.request.url),
                ) from exc
            filenames.extend(f.filename for f in comparison.files)
            if len(comparison.files) < self._page_size:
                break
            page += 1
        logger.debug("compare_pages_fetched", repository=f"{org}/{repo}", pages=page, files=len(filenames))
        return filenames

    async def _request(self, method: str, url: str, **kwargs: object) -> httpx.Response:
        try:
            resp = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            request_url = str(exc.request.url) if _has_request(exc) else f"{self._base_url}{url}"
            raise GitHubClientError(f"{method} {request_url}: {exc}", method=method, url=request_url) from exc
        self._raise_for_status(resp)
        return resp

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if resp.is_error:
            method = resp.request.method
            url = str(resp.request.url)
            raise GitHubClientError(
                f"{method} {url}: {resp.status_code} {_error_detail(resp)}",
                status_code=resp.status_code,
                method=method,
                url=url,
            )


def _has_request(exc: httpx.HTTPError) -> bool:
    try:
        exc.request
    except RuntimeError:
        return False
    return True


def _error_detail(resp: httpx.Response) -> str:
    """Prefer GitHub's JSON ``message`` field, falling back to the raw body."""
    try:
        data = resp.json()
    except ValueError:
        return resp.text.strip()
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return resp.text.strip()
