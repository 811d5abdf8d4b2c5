from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypeVar

import httpx

from botcraft.codec import CodecError, decode_record
from botcraft.config import ApiConfig
from botcraft.methods.base import Method
from botcraft.request import Request
from botcraft.types.media import File

logger = logging.getLogger(__name__)

R = TypeVar("R")


class ApiError(Exception):
    """Transport failure or a response that is not a Bot API envelope."""


@dataclass(frozen=True, slots=True)
class ResponseParameters:
    """Hints attached to a failed call on how it can be retried."""

    migrate_to_chat_id: int | None = None
    retry_after: int | None = None


class ResponseError(ApiError):
    """Call rejected by the server (`ok: false`)."""

    def __init__(
        self,
        description: str,
        error_code: int | None = None,
        parameters: ResponseParameters | None = None,
    ) -> None:
        if error_code is not None:
            super().__init__(f"{description} (error_code={error_code})")
        else:
            super().__init__(description)
        self.description = description
        self.error_code = error_code
        self.parameters = parameters

    @property
    def can_retry(self) -> bool:
        return self.parameters is not None and self.parameters.retry_after is not None

    @property
    def retry_after(self) -> int | None:
        return self.parameters.retry_after if self.parameters is not None else None


def _parse_parameters(value: Any) -> ResponseParameters | None:
    if not isinstance(value, dict):
        return None
    try:
        return decode_record(ResponseParameters, value)
    except CodecError:
        logger.debug("Ignoring malformed response parameters: %r", value)
        return None


class Api:
    """
    Executes methods against the Bot API over an `httpx.AsyncClient`.

    A client passed in is borrowed and left open by `aclose()`; otherwise
    one is created from the config and owned by this instance.
    """

    def __init__(self, config: ApiConfig | str, *, client: httpx.AsyncClient | None = None) -> None:
        self._config = ApiConfig(config) if isinstance(config, str) else config
        if client is None:
            client = httpx.AsyncClient(timeout=self._config.timeout, proxy=self._config.proxy)
            self._owns_client = True
        else:
            self._owns_client = False
        self._client = client

    @property
    def config(self) -> ApiConfig:
        return self._config

    async def execute(self, method: Method[R]) -> R:
        request = method.into_request()
        result = await self._send(request)
        return method.parse_response(result)

    async def _send(self, request: Request) -> Any:
        url = request.build_url(self._config.base_url, self._config.token)
        body = request.body
        logger.debug("Calling %s (%s)", request.method_name, request.http_method.value)
        try:
            if body.json_data is not None:
                resp = await self._client.request(
                    request.http_method.value,
                    url,
                    content=body.json_data.encode("utf-8"),
                    headers={"Content-Type": "application/json"},
                )
            elif body.form is not None:
                data, files = body.form.to_multipart()
                resp = await self._client.request(
                    request.http_method.value,
                    url,
                    data=data,
                    files=files or None,
                )
            else:
                resp = await self._client.request(request.http_method.value, url)
        except httpx.HTTPError as e:
            raise ApiError(f"{request.method_name} failed: {e}") from e
        return self._unwrap(request.method_name, resp)

    def _unwrap(self, method_name: str, resp: httpx.Response) -> Any:
        try:
            payload = resp.json()
        except ValueError as e:
            raise ApiError(
                f"{method_name}: non-JSON response (HTTP {resp.status_code})"
            ) from e
        if not isinstance(payload, dict) or "ok" not in payload:
            raise ApiError(f"{method_name}: unexpected response shape (HTTP {resp.status_code})")
        if payload["ok"] is True:
            return payload.get("result")

        description = payload.get("description")
        error_code = payload.get("error_code")
        err = ResponseError(
            description if isinstance(description, str) else "Unknown error",
            error_code if isinstance(error_code, int) else None,
            _parse_parameters(payload.get("parameters")),
        )
        logger.warning("%s rejected: %s", method_name, err)
        raise err

    async def download_file(self, file: File | str) -> bytes:
        """Fetch file contents by `File` (from GetFile) or its `file_path`."""
        path = file.file_path if isinstance(file, File) else file
        if not path:
            raise ApiError("File has no file_path; request it with GetFile first")
        url = f"{self._config.base_url}/file/bot{self._config.token}/{path}"
        logger.info("Downloading file %s", path)
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise ApiError(f"Failed to download {path}: {e}") from e
        return resp.content

    async def aclose(self) -> None:
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> Api:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()
