"""Shared REST helper used by every resource service.

Each call is exactly one HTTP round trip. Successful bodies are decoded from
JSON (optionally validated into a pydantic model) or returned as text; any
other status becomes a :class:`~teamcity_client.client.errors.RestError`.
Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
import pydantic

from teamcity_client.client.errors import (
    DecodeError,
    TeamCityConnectionError,
    rest_error,
)

logger = logging.getLogger(__name__)

_GET_OK = frozenset({200})
_WRITE_OK = frozenset({200, 201})
_DELETE_OK = frozenset({200, 204})

TEXT_PLAIN = "text/plain; charset=utf-8"


class RestHelper:
    """Issues requests relative to *base_path* on a shared ``httpx.Client``."""

    def __init__(self, http: httpx.Client, base_path: str = "") -> None:
        self.http = http
        self.base_path = base_path

    def _url(self, path: str) -> str:
        return f"{self.base_path}{path}"

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self._url(path)
        try:
            response = self.http.request(method, url, **kwargs)
        except httpx.ConnectError as exc:
            raise TeamCityConnectionError(
                f"Cannot connect to TeamCity at {self.http.base_url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise TeamCityConnectionError(
                f"{method} {url} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise TeamCityConnectionError(
                f"Invalid URL {self.http.base_url}{url}: {exc}"
            ) from exc
        except httpx.TransportError as exc:
            raise TeamCityConnectionError(f"{method} {url} failed: {exc}") from exc
        logger.debug("%s %s -> %d", method, response.request.url, response.status_code)
        return response

    def _check(
        self,
        response: httpx.Response,
        ok: frozenset[int],
        method: str,
        resource: str,
    ) -> httpx.Response:
        if response.status_code in ok:
            return response
        raise rest_error(response.status_code, method, resource, response.text)

    def _decode(
        self,
        response: httpx.Response,
        resource: str,
        model: type[pydantic.BaseModel] | None,
    ) -> Any:
        data: Any = {}
        if response.content:
            try:
                data = response.json()
            except ValueError as exc:
                raise DecodeError(
                    f"Invalid JSON in {resource} response: {response.text[:200]!r}"
                ) from exc
        if model is None:
            return data
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as exc:
            raise DecodeError(f"Unexpected {resource} payload: {exc}") from exc

    def get(
        self,
        path: str,
        resource: str,
        model: type[pydantic.BaseModel] | None = None,
    ) -> Any:
        return self.get_with_fields(path, "", resource, model)

    def get_with_fields(
        self,
        path: str,
        fields: str,
        resource: str,
        model: type[pydantic.BaseModel] | None = None,
    ) -> Any:
        """GET *path*, asking the server for the *fields* selection when given."""
        params = {"fields": fields} if fields else None
        response = self._send("GET", path, params=params)
        self._check(response, _GET_OK, "GET", resource)
        return self._decode(response, resource, model)

    def post(
        self,
        path: str,
        data: Any,
        resource: str,
        model: type[pydantic.BaseModel] | None = None,
    ) -> Any:
        response = self._send("POST", path, json=data)
        self._check(response, _WRITE_OK, "POST", resource)
        return self._decode(response, resource, model)

    def put(
        self,
        path: str,
        data: Any,
        resource: str,
        model: type[pydantic.BaseModel] | None = None,
    ) -> Any:
        response = self._send("PUT", path, json=data)
        self._check(response, _WRITE_OK, "PUT", resource)
        return self._decode(response, resource, model)

    def put_text_plain(self, path: str, value: str, resource: str) -> str:
        """PUT a single field as text/plain and return the server's echo."""
        response = self._send(
            "PUT",
            path,
            content=value.encode("utf-8"),
            headers={"Content-Type": TEXT_PLAIN, "Accept": "text/plain"},
        )
        self._check(response, _WRITE_OK, "PUT", resource)
        return response.text

    def delete(self, path: str, resource: str) -> None:
        response = self._send("DELETE", path)
        self._check(response, _DELETE_OK, "DELETE", resource)
