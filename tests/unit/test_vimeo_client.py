"""Tests for request building, response handling and error classification."""

from __future__ import annotations

import io
import json
from datetime import datetime, timezone

import httpx
import pytest
import respx
from pydantic import BaseModel, ConfigDict

from vimeo_client.client.errors import (
    APIError,
    AuthenticationError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    RequestBuildError,
    SerializationError,
    TransportError,
)
from vimeo_client.client.vimeo import (
    Client,
    ClientConfig,
    Response,
    is_success,
    parse_rate,
    sanitize_url,
)
from vimeo_client.config.constants import DEFAULT_BASE_URL, MEDIA_TYPE_VERSION
from vimeo_client.models.category import Category
from vimeo_client.models.common import Pagination
from vimeo_client.models.user import User

BASE = "https://api.vimeo.test/"


class _Opaque:
    pass


class _OpaqueBody(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    thing: _Opaque


class TestNewRequest:
    def test_resolves_relative_path(self, client: Client):
        req = client.new_request("GET", "categories?page=1")
        assert str(req.url) == f"{BASE}categories?page=1"

    def test_absolute_path_replaces_base_path(self):
        c = Client(config=ClientConfig(base_url="https://api.vimeo.test/v3/"))
        assert str(c.new_request("GET", "/me").url) == "https://api.vimeo.test/me"
        c.close()

    def test_default_base_url(self):
        with Client() as c:
            assert str(c.base_url) == DEFAULT_BASE_URL

    def test_headers_without_body(self, client: Client):
        req = client.new_request("GET", "me")
        assert req.headers["Accept"] == MEDIA_TYPE_VERSION
        assert req.headers["User-Agent"] == "test-agent/1.0"
        assert "Content-Type" not in req.headers

    def test_headers_with_body(self, client: Client):
        req = client.new_request("POST", "channels", {"name": "x"})
        assert req.headers["Content-Type"] == "application/json"
        assert json.loads(req.content) == {"name": "x"}

    def test_model_body_drops_unset_fields(self, client: Client):
        from vimeo_client.models.channel import ChannelRequest

        req = client.new_request("POST", "channels", ChannelRequest(name="Test"))
        assert json.loads(req.content) == {"name": "Test"}

    def test_empty_user_agent_omitted(self):
        with Client(config=ClientConfig(base_url=BASE, user_agent="")) as c:
            req = c.new_request("GET", "me")
        assert "User-Agent" not in req.headers

    def test_bad_path(self, client: Client):
        with pytest.raises(RequestBuildError):
            client.new_request("GET", ":")

    def test_unserializable_body(self, client: Client):
        with pytest.raises(SerializationError):
            client.new_request("POST", "x", {("a", "b"): 1})

    def test_unserializable_model_body(self, client: Client):
        with pytest.raises(SerializationError):
            client.new_request("POST", "x", _OpaqueBody(thing=_Opaque()))

    def test_unserializable_nested_model_body(self, client: Client):
        with pytest.raises(SerializationError):
            client.new_request("POST", "x", {"k": _OpaqueBody(thing=_Opaque())})

    def test_circular_body(self, client: Client):
        body: dict = {}
        body["self"] = body
        with pytest.raises(SerializationError):
            client.new_request("POST", "x", body)

    def test_nan_body(self, client: Client):
        with pytest.raises(SerializationError):
            client.new_request("POST", "x", {"v": float("nan")})


class TestDo:
    @respx.mock
    def test_decodes_json(self, client: Client):
        respx.get(f"{BASE}me").mock(
            return_value=httpx.Response(200, json={"uri": "/users/42", "name": "Ann"})
        )
        user, resp = client.do(client.new_request("GET", "me"), User)
        assert user.name == "Ann"
        assert user.id == "42"
        assert resp.status_code == 200

    @respx.mock
    def test_empty_body_yields_zero_value(self, client: Client):
        respx.get(f"{BASE}me").mock(return_value=httpx.Response(200, content=b""))
        user, _ = client.do(client.new_request("GET", "me"), User)
        assert user == User()

    @respx.mock
    def test_no_target_discards_body(self, client: Client):
        respx.delete(f"{BASE}channels/1").mock(return_value=httpx.Response(204))
        result, resp = client.do(client.new_request("DELETE", "channels/1"))
        assert result is None
        assert resp.status_code == 204

    @respx.mock
    def test_raw_sink(self, client: Client):
        respx.get(f"{BASE}raw").mock(return_value=httpx.Response(200, content=b"not json"))
        sink = io.BytesIO()
        result, _ = client.do(client.new_request("GET", "raw"), sink)
        assert result is sink
        assert sink.getvalue() == b"not json"

    @respx.mock
    def test_malformed_json(self, client: Client):
        respx.get(f"{BASE}me").mock(return_value=httpx.Response(200, content=b"{oops"))
        with pytest.raises(DecodeError):
            client.do(client.new_request("GET", "me"), User)

    @respx.mock
    def test_error_message_from_envelope(self, client: Client):
        respx.get(f"{BASE}categories").mock(
            return_value=httpx.Response(400, json={"error": "Invalid type for field [field]"})
        )
        with pytest.raises(APIError) as excinfo:
            client.do(client.new_request("GET", "categories"), Category)
        exc = excinfo.value
        assert exc.message == "Invalid type for field [field]"
        assert exc.status_code == 400
        assert exc.response.status_code == 400
        assert str(exc) == f"GET {BASE}categories: 400 Invalid type for field [field]"

    @respx.mock
    def test_error_without_envelope(self, client: Client):
        respx.get(f"{BASE}me").mock(return_value=httpx.Response(500, content=b"<html>"))
        with pytest.raises(APIError) as excinfo:
            client.do(client.new_request("GET", "me"), User)
        assert excinfo.value.message == ""

    @respx.mock
    @pytest.mark.parametrize(
        "status, exc_type",
        [(401, AuthenticationError), (403, AuthenticationError), (404, NotFoundError)],
    )
    def test_error_subclasses(self, client: Client, status, exc_type):
        respx.get(f"{BASE}me").mock(return_value=httpx.Response(status, json={"error": "no"}))
        with pytest.raises(exc_type):
            client.do(client.new_request("GET", "me"), User)

    @respx.mock
    def test_rate_limited(self, client: Client):
        respx.get(f"{BASE}me").mock(
            return_value=httpx.Response(
                429,
                json={"error": "slow down"},
                headers={
                    "X-RateLimit-Limit": "100",
                    "X-RateLimit-Remaining": "0",
                    "X-RateLimit-Reset": "2024-01-01T12:00:00+00:00",
                },
            )
        )
        with pytest.raises(RateLimitError) as excinfo:
            client.do(client.new_request("GET", "me"), User)
        assert excinfo.value.rate.limit == 100
        assert "Reset in 2024-01-01 12:00:00+00:00." in str(excinfo.value)

    @respx.mock
    def test_429_with_quota_left_is_plain_api_error(self, client: Client):
        respx.get(f"{BASE}me").mock(
            return_value=httpx.Response(429, headers={"X-RateLimit-Remaining": "5"})
        )
        with pytest.raises(APIError) as excinfo:
            client.do(client.new_request("GET", "me"), User)
        assert not isinstance(excinfo.value, RateLimitError)

    @respx.mock
    def test_308_is_success(self, client: Client):
        respx.put(f"{BASE}upload").mock(
            return_value=httpx.Response(308, headers={"Range": "bytes=0-99"})
        )
        _, resp = client.do(client.new_request("PUT", "upload"))
        assert resp.headers["Range"] == "bytes=0-99"

    @respx.mock
    def test_transport_failure(self, client: Client):
        respx.get(f"{BASE}me").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(TransportError) as excinfo:
            client.do(client.new_request("GET", "me"), User)
        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)

    @respx.mock
    def test_secret_redacted_in_error(self, client: Client):
        respx.get(f"{BASE}oauth").mock(return_value=httpx.Response(401))
        with pytest.raises(AuthenticationError) as excinfo:
            client.do(client.new_request("GET", "oauth?client_secret=hunter2"))
        assert "hunter2" not in str(excinfo.value)
        assert "client_secret=REDACTED" in str(excinfo.value)


class TestClassification:
    def test_totality(self):
        for code in range(100, 600):
            assert is_success(code) == (200 <= code <= 299 or code == 308)

    @pytest.mark.parametrize("code", [199, 300, 304, 307, 309, 400, 500])
    def test_failures(self, code):
        assert not is_success(code)


class TestSanitizeUrl:
    def test_redacts_secret(self):
        url = "https://api.vimeo.com/oauth?client_id=1&client_secret=abc"
        assert sanitize_url(url) == "https://api.vimeo.com/oauth?client_id=1&client_secret=REDACTED"

    def test_idempotent(self):
        once = sanitize_url("https://x/y?client_secret=abc&a=1")
        assert sanitize_url(once) == once

    @pytest.mark.parametrize(
        "url",
        [
            "https://api.vimeo.com/me",
            "https://api.vimeo.com/me?page=2&per_page=10",
            "https://api.vimeo.com/me?b=2&a=1",
        ],
    )
    def test_unchanged_without_secret(self, url):
        assert sanitize_url(url) == url


class TestPaging:
    def test_set_paging(self):
        p = Pagination.model_validate_json(
            '{"total":10,"page":1,"paging":{"next":"/page=3","previous":"/page=1",'
            '"first":"/page=1","last":"/page=10"}}'
        )
        resp = Response()
        resp.set_paging(p)
        assert (resp.page, resp.total, resp.total_pages) == (1, 10, 10)
        assert resp.next_page == "/page=3"
        assert resp.prev_page == "/page=1"
        assert resp.first_page == "/page=1"
        assert resp.last_page == "/page=10"
        before = (resp.page, resp.total, resp.next_page, resp.last_page)
        resp.set_paging(p)
        assert (resp.page, resp.total, resp.next_page, resp.last_page) == before

    def test_null_paging(self):
        p = Pagination.model_validate({"total": None, "page": None, "paging": None})
        resp = Response()
        resp.set_paging(p)
        assert (resp.page, resp.total, resp.next_page) == (0, 0, "")


class TestParseRate:
    def test_missing_headers(self):
        rate = parse_rate(httpx.Headers())
        assert (rate.limit, rate.remaining, rate.reset) == (0, 0, None)

    def test_malformed_values(self):
        rate = parse_rate(httpx.Headers({"X-RateLimit-Limit": "lots", "X-RateLimit-Reset": "soon"}))
        assert rate.limit == 0
        assert rate.reset is None

    def test_utc_z_suffix(self):
        rate = parse_rate(httpx.Headers({"X-RateLimit-Reset": "2024-01-01T12:00:00Z"}))
        assert rate.reset == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
