"""Composable request options.

An option mutates the ``RequestBuilder`` of a single call: it sets a query
parameter, a header, a top-level body field or the cancellation context.
Options are applied left to right, so the last one to touch a parameter wins.

Usage:
    api.user.list(page(2), per_page(100), query('email:"alice@example.com"'))
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional

from .context import Context

DEFAULT_PER_PAGE = 50


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RequestBuilder:
    """Mutable description of an outgoing call, before it is sent."""

    def __init__(self, method: str, url: str):
        self.method = method
        self.url = url
        self.params: Dict[str, str] = {}
        self.headers: Dict[str, str] = {}
        self.body_fields: Dict[str, Any] = {}
        self.context: Context = Context.background()


class RequestOption:
    """A single mutation applied to a ``RequestBuilder``."""

    def __init__(self, fn: Callable[[RequestBuilder], None], name: str = "option"):
        self._fn = fn
        self.name = name

    def apply(self, request: RequestBuilder) -> None:
        self._fn(request)

    def __repr__(self) -> str:
        return f"RequestOption({self.name})"


class RequestOptions(RequestOption):
    """An ordered group of options applied as one."""

    def __init__(self, options: Iterable[RequestOption]):
        self.options: List[RequestOption] = list(options)
        super().__init__(self._apply_all, "options")

    def _apply_all(self, request: RequestBuilder) -> None:
        for option in self.options:
            option.apply(request)


def parameter(key: str, value: Any) -> RequestOption:
    """Set an arbitrary query parameter."""

    def apply(r: RequestBuilder) -> None:
        r.params[key] = _format(value)

    return RequestOption(apply, f"{key}={value}")


def header(key: str, value: str) -> RequestOption:
    """Set an arbitrary request header."""

    def apply(r: RequestBuilder) -> None:
        r.headers[key] = value

    return RequestOption(apply, f"header {key}")


def body_field(key: str, value: Any) -> RequestOption:
    """Merge a top-level field into a JSON object body."""

    def apply(r: RequestBuilder) -> None:
        r.body_fields[key] = value

    return RequestOption(apply, f"body {key}")


def page(n: int) -> RequestOption:
    """Page index of the results, starting at 0."""
    return parameter("page", n)


def per_page(n: int) -> RequestOption:
    """Number of results per page."""
    return parameter("page_size", n)


def include_totals(include: bool) -> RequestOption:
    """Wrap list results in an envelope with paging totals."""
    return parameter("include_totals", include)


def take(n: int) -> RequestOption:
    """Number of entries to retrieve with checkpoint pagination."""
    return parameter("take", n)


def from_checkpoint(cursor: str) -> RequestOption:
    """Opaque checkpoint id to resume checkpoint pagination from."""
    return parameter("from", cursor)


def query(q: str) -> RequestOption:
    """Search query in Lucene syntax."""
    return parameter("q", q)


def _fields(include: bool, names: Iterable[str]) -> RequestOption:
    names = list(names)

    def apply(r: RequestBuilder) -> None:
        if names:
            r.params["fields"] = ",".join(names)
        r.params["include_fields"] = _format(include)

    return RequestOption(apply, f"fields include={include}")


def include_fields(*names: str) -> RequestOption:
    """Only return the named fields."""
    return _fields(True, names)


def exclude_fields(*names: str) -> RequestOption:
    """Return everything except the named fields."""
    return _fields(False, names)


def context(ctx: Context) -> RequestOption:
    """Bind a cancellation context to the call."""

    def apply(r: RequestBuilder) -> None:
        r.context = ctx

    return RequestOption(apply, "context")


def apply_list_defaults(options: Iterable[RequestOption]) -> RequestOptions:
    """Prefix the caller's options with the list defaults.

    The defaults come first so that a caller supplied ``per_page`` or
    ``include_totals`` overrides them.
    """
    return RequestOptions([per_page(DEFAULT_PER_PAGE), include_totals(True), *options])


def build(
    method: str,
    url: str,
    options: Iterable[Optional[RequestOption]],
    ctx: Optional[Context] = None,
) -> RequestBuilder:
    """Create a builder and apply every option in order."""
    request = RequestBuilder(method, url)
    if ctx is not None:
        request.context = ctx
    for option in options:
        if option is not None:
            option.apply(request)
    return request
