"""HTTP client for the Obsidian Local REST API.

:class:`ObsidianClient` is the only component that talks to the vault server.
Every request carries the bearer credential and asks for the note-JSON
representation; every response goes through :meth:`ObsidianClient._call`,
which checks the status, then decodes the body into the operation's result
type with pydantic.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, Mapping, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from obsidian_rest.constants import (
    DEFAULT_TIMEOUT,
    NOTE_JSON_MEDIA_TYPE,
    QUERY_CONTENT_TYPES,
)
from obsidian_rest.core.paths import date_path, encode_vault_path
from obsidian_rest.data_models import ApiConfiguration
from obsidian_rest.errors import BackendError
from obsidian_rest.models.base import format_validation_error
from obsidian_rest.models.response_models import (
    ApiErrorBody,
    ComplexResult,
    FileContents,
    FileListing,
    SearchResult,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def _error_message(response: httpx.Response) -> str:
    """Best-effort extraction of the server's error message."""
    try:
        body = ApiErrorBody.model_validate_json(response.content)
    except ValidationError:
        body = None
    if body is not None and body.message:
        return body.message
    text = response.text.strip()
    return text[:200] if text else response.reason_phrase


class ObsidianClient:
    """Authenticated gateway to one vault server.

    The client holds a single connection pool that is safe to share between
    concurrent tool invocations. Use it as an async context manager, or call
    :meth:`aclose` when done.
    """

    def __init__(
        self,
        api_key: str,
        api_host: str,
        *,
        verify: bool | str = True,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_host = api_host.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.api_host,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Accept": NOTE_JSON_MEDIA_TYPE,
            },
            verify=verify,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: ApiConfiguration, **kwargs: Any) -> "ObsidianClient":
        """Build a client from the fields of ``config`` it needs."""
        return cls(
            config.api_key,
            config.api_host,
            verify=config.verify,
            timeout=config.timeout,
            **kwargs,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ObsidianClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ==========================================================================
    # VAULT FILES
    # ==========================================================================

    async def list_files_in_vault(self) -> list[str]:
        """List files and directories in the vault root."""
        path = "/vault/"
        logger.info("Listing files in vault path=%s", path)

        result = await self._call("GET", path, FileListing)

        logger.info("Successfully listed files in vault path=%s result=%s", path, result.files)
        return result.files

    async def list_files_in_dir(self, dir: str) -> list[str]:
        """List files and directories inside ``dir`` (relative to the vault root)."""
        path = f"/vault/{encode_vault_path(dir)}"
        if not path.endswith("/"):
            path += "/"
        logger.info("Listing files in directory path=%s", path)

        result = await self._call("GET", path, FileListing)

        logger.info("Successfully listed files in directory path=%s result=%s", path, result.files)
        return result.files

    async def get_file_contents(self, filepath: str) -> FileContents:
        """Fetch one note with its frontmatter, tags and stat."""
        path = f"/vault/{encode_vault_path(filepath)}"
        logger.info("Getting file contents path=%s", path)

        result = await self._call("GET", path, FileContents)

        logger.info("Successfully retrieved file contents path=%s result=%s", path, result.summary())
        return result

    async def get_file_by_name(self, filename: str, include_content: bool) -> list[FileContents]:
        """Resolve a bare note name to every matching note.

        Looks the name up with a Dataview query, then fetches each match. The
        note body is always downloaded; when ``include_content`` is false it is
        cleared before returning. The first failed fetch aborts the lookup.

        Args:
            filename: Note name without folder or extension.
            include_content: Keep the note bodies in the result.

        Returns:
            The matching notes in the order the query returned them, or an
            empty list when nothing matches.

        Raises:
            BackendError: If the query or any fetch fails.
        """
        query = f"TABLE WHERE file.name = {json.dumps(filename, ensure_ascii=False)}"
        matches = await self.complex_search(query, "dataview-dql")

        results: list[FileContents] = []
        for match in matches:
            contents = await self.get_file_contents(match.filename)
            if not include_content:
                contents.content = ""
            results.append(contents)

        return results

    # ==========================================================================
    # SEARCH
    # ==========================================================================

    async def simple_search(self, query: str, context_length: int) -> list[SearchResult]:
        """Full-text search returning ranked hits with context around each match."""
        path = "/search/simple/"
        params = {"query": query, "contextLength": context_length}
        logger.info("Searching in vault path=%s query=%r", path, query)

        try:
            result = await self._call("POST", path, list[SearchResult], params=params)
        except BackendError as exc:
            logger.error("Failed to search in vault path=%s error=%s", path, exc)
            raise

        logger.info("Successfully searched in vault path=%s results=%d", path, len(result))
        return result

    async def complex_search(self, query: str, query_type: str) -> list[ComplexResult]:
        """Run a structured query server-side.

        Args:
            query: Query text, sent as the request body verbatim.
            query_type: ``jsonlogic``, ``dataview-dql`` (or ``dataview``), or a
                media type that is passed through as the Content-Type.
        """
        path = "/search/"
        content_type = QUERY_CONTENT_TYPES.get(query_type, query_type)
        logger.info("Searching in vault path=%s content_type=%s", path, content_type)

        try:
            result = await self._call(
                "POST",
                path,
                list[ComplexResult],
                content=query.encode("utf-8"),
                content_type=content_type,
            )
        except BackendError as exc:
            logger.error("Failed to search in vault path=%s error=%s", path, exc)
            raise

        logger.info("Successfully searched in vault path=%s results=%d", path, len(result))
        return result

    # ==========================================================================
    # PERIODIC NOTES
    # ==========================================================================

    async def get_periodic_note(self, period: str) -> FileContents:
        """Fetch the current note for ``period``."""
        path = f"/periodic/{period}"
        logger.info("Getting periodic note path=%s", path)

        result = await self._call("GET", path, FileContents)

        logger.info("Successfully retrieved periodic note path=%s result=%s", path, result.summary())
        return result

    async def get_periodic_note_by_date(self, period: str, date: str) -> FileContents:
        """Fetch the ``period`` note covering ``date`` (``YYYY-MM-DD``)."""
        path = f"/periodic/{period}/{date_path(date)}"
        logger.info("Getting periodic note by date path=%s", path)

        result = await self._call("GET", path, FileContents)

        logger.info(
            "Successfully retrieved periodic note by date path=%s result=%s",
            path,
            result.summary(),
        )
        return result

    async def get_periodic_note_recent(
        self,
        period: str,
        limit: int,
        include_content: bool,
    ) -> list[FileContents]:
        """Fetch up to ``limit`` most recent notes for ``period``."""
        path = f"/periodic/{period}/recent"
        params = {"limit": limit, "includeContent": "true" if include_content else "false"}
        logger.info("Getting recent periodic notes path=%s limit=%d", path, limit)

        result = await self._call("GET", path, list[FileContents], params=params)

        logger.info("Successfully retrieved recent periodic notes path=%s results=%d", path, len(result))
        return result

    # ==========================================================================
    # REQUEST HANDLING
    # ==========================================================================

    async def _call(
        self,
        method: str,
        path: str,
        result_type: type[T],
        *,
        params: Optional[Mapping[str, Any]] = None,
        content: Optional[bytes] = None,
        content_type: Optional[str] = None,
    ) -> T:
        """Execute one request and decode its JSON body into ``result_type``.

        Raises:
            BackendError: On transport failure, a non-2xx status, or a body that
                is not JSON of the expected shape.
        """
        headers = {"Content-Type": content_type} if content_type else None

        try:
            response = await self._client.request(
                method,
                path,
                params=params,
                content=content,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            logger.error("Failed to execute request path=%s error=%s", path, exc)
            raise BackendError(f"{method} {path} failed: {exc}", path=path) from exc

        if not response.is_success:
            message = _error_message(response)
            logger.error(
                "Request returned an error status path=%s status=%d error=%s",
                path,
                response.status_code,
                message,
            )
            raise BackendError(
                f"{method} {path} returned {response.status_code}: {message}",
                path=path,
                status_code=response.status_code,
            )

        try:
            return _adapter(result_type).validate_json(response.content)
        except ValidationError as exc:
            logger.error("Failed to decode response path=%s error=%s", path, exc)
            raise BackendError(
                f"failed to decode response from {path}: {format_validation_error(exc)}",
                path=path,
                status_code=response.status_code,
            ) from exc
