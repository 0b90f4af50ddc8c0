"""Tests for resource services."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from vimeo_client.client.errors import NotFoundError
from vimeo_client.client.options import Fields, Page, PerPage, Query
from vimeo_client.client.vimeo import Client
from vimeo_client.models.channel import ChannelRequest
from vimeo_client.models.collection import AlbumRequest
from vimeo_client.models.interaction import CommentRequest
from vimeo_client.services.base import user_path

BASE = "https://api.vimeo.test/"

PAGED = {
    "total": 10,
    "page": 1,
    "per_page": 2,
    "paging": {"next": "/categories?page=2", "previous": None, "first": "/categories?page=1", "last": "/categories?page=5"},
    "data": [{"name": "Animation", "uri": "/categories/animation"}, {"name": "Music"}],
}


class TestUserPath:
    @pytest.mark.parametrize(
        "uid, suffix, expected",
        [
            ("", "", "me"),
            ("", "videos", "me/videos"),
            ("42", "", "users/42"),
            ("42", "albums/7", "users/42/albums/7"),
        ],
    )
    def test_paths(self, uid, suffix, expected):
        assert user_path(uid, suffix) == expected


class TestCategories:
    @respx.mock
    def test_list_scenario(self, client: Client):
        route = respx.get(f"{BASE}categories", params={"page": "1", "per_page": "2"}).mock(
            return_value=httpx.Response(200, json={"data": [{"name": "Test"}]})
        )
        cats, resp = client.categories.list(Page(1), PerPage(2))
        assert route.called
        assert str(route.calls.last.request.url) == f"{BASE}categories?page=1&per_page=2"
        assert [c.name for c in cats] == ["Test"]
        assert resp.total == 0

    @respx.mock
    def test_list_sets_paging(self, client: Client):
        respx.get(f"{BASE}categories").mock(return_value=httpx.Response(200, json=PAGED))
        cats, resp = client.categories.list()
        assert len(cats) == 2
        assert (resp.page, resp.total, resp.total_pages) == (1, 10, 10)
        assert resp.next_page == "/categories?page=2"
        assert resp.prev_page == ""
        assert resp.last_page == "/categories?page=5"

    @respx.mock
    def test_get(self, client: Client):
        respx.get(f"{BASE}categories/animation").mock(
            return_value=httpx.Response(200, json={"name": "Animation", "top_level": True})
        )
        cat, _ = client.categories.get("animation")
        assert cat.top_level is True

    @respx.mock
    def test_videos_with_fields(self, client: Client, video_payload: dict):
        route = respx.get(f"{BASE}categories/animation/videos").mock(
            return_value=httpx.Response(200, json={"data": [video_payload]})
        )
        vids, _ = client.categories.list_video("animation", Fields(["uri", "name"]))
        assert vids[0].id == 12345
        assert route.calls.last.request.url.params["fields"] == "uri,name"


class TestChannels:
    @respx.mock
    def test_create(self, client: Client):
        route = respx.post(f"{BASE}channels").mock(
            return_value=httpx.Response(201, json={"uri": "/channels/99", "name": "Test"})
        )
        ch, resp = client.channels.create(ChannelRequest(name="Test", privacy="anybody"))
        assert json.loads(route.calls.last.request.content) == {"name": "Test", "privacy": "anybody"}
        assert ch.name == "Test"
        assert resp.status_code == 201

    @respx.mock
    def test_edit_uses_patch(self, client: Client):
        route = respx.patch(f"{BASE}channels/99").mock(
            return_value=httpx.Response(200, json={"name": "Renamed"})
        )
        ch, _ = client.channels.edit("99", ChannelRequest(name="Renamed"))
        assert route.called
        assert ch.name == "Renamed"

    @respx.mock
    def test_delete(self, client: Client):
        respx.delete(f"{BASE}channels/99").mock(return_value=httpx.Response(204))
        resp = client.channels.delete("99")
        assert resp.status_code == 204

    @respx.mock
    def test_add_video(self, client: Client):
        route = respx.put(f"{BASE}channels/99/videos/5").mock(return_value=httpx.Response(204))
        client.channels.add_video("99", 5)
        assert route.called
        assert "Content-Type" not in route.calls.last.request.headers

    @respx.mock
    def test_get_missing(self, client: Client):
        respx.get(f"{BASE}channels/nope").mock(
            return_value=httpx.Response(404, json={"error": "The requested channel couldn't be found."})
        )
        with pytest.raises(NotFoundError) as excinfo:
            client.channels.get("nope")
        assert excinfo.value.message == "The requested channel couldn't be found."


class TestGroupsAndTags:
    @respx.mock
    def test_groups_list_query(self, client: Client):
        route = respx.get(f"{BASE}groups").mock(
            return_value=httpx.Response(200, json={"data": [{"name": "Drones"}]})
        )
        groups, _ = client.groups.list(Query("drones"))
        assert groups[0].name == "Drones"
        assert route.calls.last.request.url.params["query"] == "drones"

    @respx.mock
    def test_tag(self, client: Client):
        respx.get(f"{BASE}tags/cats").mock(
            return_value=httpx.Response(200, json={"name": "cats", "canonical": "cats"})
        )
        tag, _ = client.tags.get("cats")
        assert tag.canonical == "cats"


class TestMetadata:
    @respx.mock
    def test_languages(self, client: Client):
        respx.get(f"{BASE}languages").mock(
            return_value=httpx.Response(200, json={"data": [{"code": "en", "name": "English"}]})
        )
        langs, _ = client.languages.list()
        assert langs[0].code == "en"

    @respx.mock
    def test_creative_commons_null_data(self, client: Client):
        respx.get(f"{BASE}creativecommons").mock(
            return_value=httpx.Response(200, json={"data": None})
        )
        items, _ = client.creative_commons.list()
        assert items == []


class TestUsers:
    @respx.mock
    def test_get_me(self, client: Client):
        route = respx.get(f"{BASE}me").mock(
            return_value=httpx.Response(200, json={"uri": "/users/1", "name": "Me"})
        )
        user, _ = client.users.get("")
        assert route.called
        assert user.id == "1"

    @respx.mock
    def test_get_by_id(self, client: Client):
        route = respx.get(f"{BASE}users/42").mock(
            return_value=httpx.Response(200, json={"name": "Other"})
        )
        client.users.get("42")
        assert route.called

    @respx.mock
    def test_create_album(self, client: Client):
        route = respx.post(f"{BASE}users/42/albums").mock(
            return_value=httpx.Response(201, json={"uri": "/users/42/albums/7", "name": "Trip"})
        )
        album, _ = client.users.create_album("42", AlbumRequest(name="Trip"))
        assert album.name == "Trip"
        assert json.loads(route.calls.last.request.content) == {"name": "Trip"}

    @respx.mock
    def test_watched_targets_me(self, client: Client):
        route = respx.delete(f"{BASE}me/watched/videos").mock(return_value=httpx.Response(204))
        client.users.clear_watched_list()
        assert route.called

    @respx.mock
    def test_follow(self, client: Client):
        route = respx.put(f"{BASE}me/following/7").mock(return_value=httpx.Response(204))
        client.users.follow_user("", "7")
        assert route.called


class TestVideos:
    @respx.mock
    def test_add_comment(self, client: Client):
        route = respx.post(f"{BASE}videos/5/comments").mock(
            return_value=httpx.Response(201, json={"text": "nice"})
        )
        comment, _ = client.videos.add_comment(5, CommentRequest(text="nice"))
        assert comment.text == "nice"
        assert json.loads(route.calls.last.request.content) == {"text": "nice"}

    @respx.mock
    def test_assign_tag(self, client: Client):
        route = respx.put(f"{BASE}videos/5/tags/cats").mock(return_value=httpx.Response(204))
        client.videos.assign_tag(5, "cats")
        assert route.called

    @respx.mock
    def test_related(self, client: Client, video_payload: dict):
        respx.get(f"{BASE}videos/5/videos").mock(
            return_value=httpx.Response(200, json={"data": [video_payload], "total": 1})
        )
        vids, resp = client.videos.list_related_video(5)
        assert vids[0].name == "Sample Video"
        assert resp.total == 1
