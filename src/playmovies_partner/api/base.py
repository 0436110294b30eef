"""Generic call builder shared by every API method.

Each API method is described by a ``MethodSpec`` (id, path template, ordered
query parameters, response model). ``CallBuilder`` accumulates parameters
through fluent setters and performs exactly one request/response cycle in
``execute()``:

    token -> GET -> (delegate-approved retry) -> decode

Per-method subclasses only add typed setters.
"""

from __future__ import annotations

import asyncio
import copy
import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import aclosing
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Self, TypeVar
from urllib.parse import quote, urlencode

import httpx
from pydantic import BaseModel, ValidationError
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_never,
)

from playmovies_partner.auth.scopes import Scope
from playmovies_partner.delegate import DefaultDelegate, Delegate, MethodInfo
from playmovies_partner.exceptions import (
    BadRequestError,
    CallReusedError,
    FieldClashError,
    HttpError,
    JsonDecodeError,
    MissingTokenError,
    RequestFailedError,
)

if TYPE_CHECKING:
    from playmovies_partner.client import PlayMovies

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QueryParam:
    """A named query parameter a method accepts."""

    name: str  # wire name, e.g. "pageSize"
    repeated: bool = False


@dataclass(frozen=True, slots=True)
class MethodSpec:
    """Static description of one API method."""

    id: str
    path: str  # relative to base_url, with {placeholders}
    path_params: tuple[str, ...]
    query_params: tuple[QueryParam, ...]
    response_model: type[BaseModel]
    http_method: str = "GET"

    @property
    def owned_params(self) -> tuple[str, ...]:
        """Parameter names that additional parameters may not reuse."""
        return ("alt", *self.path_params, *(p.name for p in self.query_params))


class _RetryRequested(Exception):
    """Raised inside an attempt when the delegate asked for a retry."""

    def __init__(self, delay: float, reason: str) -> None:
        self.delay = delay
        self.reason = reason
        super().__init__(reason)


def _wait_for_delegate(retry_state: RetryCallState) -> float:
    """Wait exactly as long as the delegate asked."""
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    delay = exception.delay if isinstance(exception, _RetryRequested) else 0.0
    logger.info(
        "Retrying after %s, waiting %.1f seconds (attempt %d)",
        exception,
        delay,
        retry_state.attempt_number,
    )
    return max(delay, 0.0)


async def _sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


def _parse_error(response: httpx.Response) -> tuple[bool, Any]:
    """Decode a failure body. Returns ``(is_json, payload)``."""
    try:
        return True, response.json()
    except ValueError:
        return False, None


T = TypeVar("T", bound=BaseModel)


class CallBuilder(Generic[T]):
    """Accumulates parameters for one API call, then executes it once.

    Subclasses set ``spec`` and expose typed setters. A builder is consumed
    by ``execute()``; calling it again raises ``CallReusedError``.
    """

    spec: ClassVar[MethodSpec]

    def __init__(self, hub: PlayMovies, **path_values: str) -> None:
        self._hub = hub
        self._path: dict[str, str] = {}
        self._query: dict[str, Any] = {}
        self._additional: dict[str, str] = {}
        self._scopes: set[str] | None = None  # None -> default scope
        self._delegate: Delegate | None = None
        self._executed = False

        for name, value in path_values.items():
            self._set_path(name, value)

    # Parameter storage used by subclass setters

    def _set_path(self, name: str, value: str) -> None:
        self._path[name] = value

    def _set_query(self, name: str, value: str | int) -> None:
        self._query[name] = str(value)

    def _add_query(self, name: str, value: str) -> None:
        self._query.setdefault(name, []).append(value)

    # Common fluent setters

    def param(self, name: str, value: str) -> Self:
        """Set an additional query parameter not covered by a typed setter.

        Useful for standard Google API parameters such as ``fields``,
        ``quotaUser``, ``prettyPrint`` or ``key``. Names owned by this call
        (path parameters, typed query parameters, ``alt``) make ``execute()``
        fail with ``FieldClashError``.
        """
        self._additional[name] = value
        return self

    def delegate(self, delegate: Delegate) -> Self:
        """Set the delegate consulted during ``execute()``."""
        self._delegate = delegate
        return self

    def add_scope(self, scope: str | Scope) -> Self:
        """Request a token for this scope instead of the default one.

        Scopes form a set; adding the same scope twice has no effect.
        """
        if self._scopes is None:
            self._scopes = set()
        self._scopes.add(str(scope))
        return self

    def add_scopes(self, scopes: Iterable[str | Scope]) -> Self:
        """Request a token covering all of the given scopes."""
        for scope in scopes:
            self.add_scope(scope)
        return self

    def clear_scopes(self) -> Self:
        """Remove all scopes; no default scope is used either.

        Without scopes the request needs an API key, set with
        ``param("key", ...)``.
        """
        self._scopes = set()
        return self

    # Request assembly

    @property
    def scopes(self) -> frozenset[str]:
        """Scopes the token will be requested for."""
        if self._scopes is None:
            return frozenset({Scope.default().value})
        return frozenset(self._scopes)

    def _check_field_clash(self) -> None:
        for field in self.spec.owned_params:
            if field in self._additional:
                raise FieldClashError(field)

    def _query_items(self) -> list[tuple[str, str]]:
        items: list[tuple[str, str]] = []
        for param in self.spec.query_params:
            value = self._query.get(param.name)
            if value is None:
                continue
            if param.repeated:
                items.extend((param.name, v) for v in value)
            else:
                items.append((param.name, value))
        items.extend(self._additional.items())
        items.append(("alt", "json"))
        return items

    def build_url(self) -> str:
        """Full request URL: path parameters substituted, query appended."""
        url = self._hub.base_url + self.spec.path
        for name in self.spec.path_params:
            url = url.replace(f"{{{name}}}", quote(self._path[name], safe=""))
        return f"{url}?{urlencode(self._query_items())}"

    # Execution

    async def execute(self) -> tuple[httpx.Response, T]:
        """Perform the request.

        Returns:
            The raw (fully read) response and the decoded response model.

        Raises:
            FieldClashError: An additional parameter reuses an owned name
            MissingTokenError: No token and no replacement from the delegate
            HttpError: Transport failure the delegate did not retry
            BadRequestError: Non-2xx with a JSON body
            RequestFailedError: Non-2xx with a non-JSON body
            JsonDecodeError: 2xx body did not match the response model
            CallReusedError: The builder was already executed
        """
        if self._executed:
            raise CallReusedError(self.spec.id)
        self._executed = True

        dlg = self._delegate or DefaultDelegate()
        dlg.begin(MethodInfo(id=self.spec.id, http_method=self.spec.http_method))

        success = False
        try:
            self._check_field_clash()
            url = self.build_url()
            scopes = sorted(self.scopes)

            retrying = AsyncRetrying(
                retry=retry_if_exception_type(_RetryRequested),
                wait=_wait_for_delegate,
                stop=stop_never,
                sleep=_sleep,
                reraise=True,
            )
            result: tuple[httpx.Response, T] = await retrying(self._attempt, url, scopes, dlg)
            success = True
            return result
        finally:
            dlg.finished(success)

    async def _attempt(
        self,
        url: str,
        scopes: list[str],
        dlg: Delegate,
    ) -> tuple[httpx.Response, T]:
        """Single token -> request -> decode pass."""
        try:
            token = await self._hub.token_provider.get_token(scopes)
        except Exception as exc:
            logger.warning("Token acquisition failed for %s: %s", self.spec.id, exc)
            token = dlg.token(exc)
            if token is None:
                raise MissingTokenError(exc) from exc

        headers = {"User-Agent": self._hub.user_agent}
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"

        dlg.pre_request()
        logger.debug("Request: %s %s", self.spec.http_method, url)

        try:
            response = await self._send(url, headers)
        except httpx.TransportError as exc:
            delay = dlg.http_error(exc)
            if delay is not None:
                raise _RetryRequested(delay, f"transport error: {exc!r}") from exc
            raise HttpError(exc) from exc

        logger.debug("Response: %s %s", response.status_code, self.spec.id)

        if not response.is_success:
            is_json, payload = _parse_error(response)
            delay = dlg.http_failure(response, payload)
            if delay is not None:
                raise _RetryRequested(delay, f"HTTP {response.status_code}")
            if is_json:
                raise BadRequestError(payload, status_code=response.status_code, response=response)
            raise RequestFailedError(status_code=response.status_code, response=response)

        model = self.spec.response_model
        try:
            decoded = model.model_validate_json(response.content)
        except ValidationError as exc:
            body = response.text
            dlg.response_json_decode_error(body, exc)
            raise JsonDecodeError(body, exc) from exc

        return response, decoded  # type: ignore[return-value]

    async def _send(self, url: str, headers: dict[str, str]) -> httpx.Response:
        http_client = self._hub.http_client
        if http_client is not None:
            # Use shared connection pool
            request = http_client.build_request(self.spec.http_method, url, headers=headers)
            return await http_client.send(request)

        # Fallback: create per-request client (no pooling)
        async with httpx.AsyncClient(timeout=self._hub.config.timeout) as client:
            request = client.build_request(self.spec.http_method, url, headers=headers)
            return await client.send(request)


class ListCallBuilder(CallBuilder[T]):
    """Call builder for paginated ``list`` methods.

    ``items_field`` names the response attribute holding the page items.
    """

    items_field: ClassVar[str]

    def _fresh_copy(self) -> Self:
        clone = copy.copy(self)
        clone._path = dict(self._path)
        clone._query = {k: list(v) if isinstance(v, list) else v for k, v in self._query.items()}
        clone._additional = dict(self._additional)
        clone._scopes = None if self._scopes is None else set(self._scopes)
        clone._executed = False
        return clone

    async def iter_pages(self) -> AsyncIterator[T]:
        """Iterate over result pages, following ``nextPageToken``.

        Pages are fetched lazily; each one is a separate ``execute()`` of a
        copy of this builder. Consumes the builder.
        """
        if self._executed:
            raise CallReusedError(self.spec.id)
        self._executed = True

        page_token = self._query.get("pageToken")
        while True:
            call = self._fresh_copy()
            if page_token:
                call._query["pageToken"] = page_token
            _, page = await call.execute()
            yield page

            page_token = getattr(page, "next_page_token", None)
            if not page_token:
                break

    async def iter_items(self, *, limit: int | None = None) -> AsyncIterator[Any]:
        """Iterate over the items of every page.

        Args:
            limit: Maximum items to yield (None = unlimited)
        """
        if limit is not None and limit <= 0:
            return

        yielded = 0
        async with aclosing(self.iter_pages()) as pages:
            async for page in pages:
                for item in getattr(page, self.items_field) or []:
                    yield item
                    yielded += 1
                    if limit is not None and yielded >= limit:
                        return
