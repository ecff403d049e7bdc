# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from apihelper.http import (
    RequestDescriptor,
    body_length,
    build_url,
    copy_headers,
    merge_headers,
    normalize_path,
    parse_body,
    serialize_body,
)


def test_serialize_body_passes_strings_and_bytes_through():
    assert serialize_body("a=1") == "a=1"
    assert serialize_body(b"\x00raw") == b"\x00raw"
    assert serialize_body("") == ""
    assert serialize_body(None) == ""


def test_serialize_body_encodes_structures_compactly():
    assert serialize_body({"name": "x"}) == '{"name":"x"}'
    assert serialize_body([1, {"b": None}]) == '[1,{"b":null}]'
    assert serialize_body(42) == "42"
    assert serialize_body(True) == "true"


def test_body_length_counts_utf8_bytes():
    assert body_length("") == 0
    assert body_length("abc") == 3
    assert body_length("é€") == 5
    assert body_length(b"abcd") == 4


def test_parse_body_best_effort():
    assert parse_body('{"a":1}') == {"a": 1}
    assert parse_body(" [1, 2] ") == [1, 2]
    assert parse_body("null") is None
    assert parse_body("not-json") == "not-json"
    assert parse_body("") == ""
    assert parse_body("Infinity") == "Infinity"


def test_normalize_path():
    assert normalize_path("users") == "/users"
    assert normalize_path("/users") == "/users"
    assert normalize_path("users?page=2") == "/users?page=2"


def test_build_url_handles_ports():
    assert build_url("http", "api.test", None, "/x") == "http://api.test/x"
    assert build_url("http", "api.test", "", "/x") == "http://api.test/x"
    assert build_url("https", "api.test", 8443, "/x") == "https://api.test:8443/x"
    assert build_url("https", "api.test", "8443", "/x?y=1") == "https://api.test:8443/x?y=1"


def test_merge_headers_later_layers_win():
    merged = merge_headers({"Content-Length": "3"}, {"A": "1", "B": "1"}, {"B": "2"}, None)
    assert merged == {"Content-Length": "3", "A": "1", "B": "2"}


def test_copy_headers_accepts_header_containers():
    assert copy_headers(None) == {}
    assert copy_headers([("X-A", "1")]) == {"X-A": "1"}
    assert copy_headers(httpx.Headers({"X-B": "2"})) == {"x-b": "2"}
    assert copy_headers({"X-N": 5, "X-None": None}) == {"X-N": "5"}


@pytest.mark.parametrize(
    ("protocol", "scheme"),
    [("https", "https"), ("http", "http"), ("ftp", "http")],
)
def test_descriptor_scheme_and_url(protocol, scheme):
    descriptor = RequestDescriptor(protocol=protocol, hostname="api.test", path="/p")
    assert descriptor.scheme == scheme
    assert descriptor.url == f"{scheme}://api.test/p"
    assert descriptor.has_body is False


def test_merge_headers_replaces_names_case_insensitively():
    merged = merge_headers(
        {"Content-Length": "3"},
        {"content-length": "9", "authorization": "Bearer default", "X-Keep": "1"},
        {"Authorization": "Bearer call"},
    )
    assert merged == {"content-length": "9", "X-Keep": "1", "Authorization": "Bearer call"}


def test_parse_body_falls_back_on_deeply_nested_json():
    text = "[" * 100000 + "]" * 100000
    assert parse_body(text) == text
