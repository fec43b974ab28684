"""Tests for request option composition."""
from authok.management.context import Context
from authok.management.request import (
    DEFAULT_PER_PAGE,
    RequestOptions,
    apply_list_defaults,
    body_field,
    build,
    context,
    exclude_fields,
    from_checkpoint,
    header,
    include_fields,
    include_totals,
    page,
    parameter,
    per_page,
    query,
    take,
)


def _params(*options):
    return build("GET", "https://example.authok.cn/api/v1/users", options).params


def test_paging_options():
    assert _params(page(2), per_page(25)) == {"page": "2", "page_size": "25"}


def test_checkpoint_options():
    assert _params(from_checkpoint("cp_1"), take(10)) == {"from": "cp_1", "take": "10"}


def test_include_totals_formats_booleans():
    assert _params(include_totals(True)) == {"include_totals": "true"}
    assert _params(include_totals(False)) == {"include_totals": "false"}


def test_include_fields_joins_names():
    assert _params(include_fields("name", "email")) == {"fields": "name,email", "include_fields": "true"}


def test_exclude_fields():
    assert _params(exclude_fields("identities")) == {"fields": "identities", "include_fields": "false"}


def test_fields_without_names_only_sets_flag():
    assert _params(include_fields()) == {"include_fields": "true"}


def test_query_and_parameter():
    assert _params(query('email:"a@b.c"'), parameter("search_engine", "v3")) == {
        "q": 'email:"a@b.c"',
        "search_engine": "v3",
    }


def test_last_option_wins():
    assert _params(page(1), page(3)) == {"page": "3"}


def test_none_options_are_ignored():
    assert _params(None, page(1)) == {"page": "1"}


def test_header_and_body_field():
    req = build("POST", "https://x", [header("X-Request-Id", "abc"), body_field("connection", "db")])
    assert req.headers == {"X-Request-Id": "abc"}
    assert req.body_fields == {"connection": "db"}


def test_context_option_overrides_default():
    default, ctx = Context.background(), Context.with_cancel()
    assert build("GET", "https://x", [], ctx=default).context is default
    assert build("GET", "https://x", [context(ctx)], ctx=default).context is ctx


def test_list_defaults():
    assert _params(apply_list_defaults([])) == {
        "page_size": str(DEFAULT_PER_PAGE),
        "include_totals": "true",
    }


def test_list_defaults_can_be_overridden():
    params = _params(apply_list_defaults([per_page(5), include_totals(False), page(1)]))
    assert params == {"page_size": "5", "include_totals": "false", "page": "1"}


def test_request_options_group():
    group = RequestOptions([page(1), per_page(2)])
    assert _params(group) == {"page": "1", "page_size": "2"}
