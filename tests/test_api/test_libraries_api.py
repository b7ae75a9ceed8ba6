"""API tests for the /libraries/:library and /libraries/:library/:version endpoints."""

import pytest

LIBRARY_CACHE = "public, max-age=21600"
VERSION_CACHE = "public, max-age=30672000, immutable"
ERROR_CACHE = "public, max-age=3600"


def assert_headers(response, cache_control):
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Cache-Control"] == cache_control


def assert_not_found(response, message):
    assert response.status_code == 404
    assert_headers(response, ERROR_CACHE)
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"error": True, "status": 404, "message": message}


class TestVersionEndpoint:
    """GET /libraries/:library/:version"""

    @pytest.mark.parametrize("query", ["", "?fields=*"])
    def test_full_version_object(self, test_client, query):
        response = test_client.get(f"/libraries/backbone.js/1.1.0{query}")

        assert response.status_code == 200
        assert_headers(response, VERSION_CACHE)
        body = response.json()
        assert isinstance(body, dict)
        assert body["name"] == "backbone.js"
        assert body["version"] == "1.1.0"
        assert isinstance(body["files"], list)
        assert isinstance(body["rawFiles"], list)
        assert isinstance(body["sri"], dict)
        assert len(body) == 5

    def test_sri_covers_every_file(self, test_client):
        body = test_client.get("/libraries/backbone.js/1.1.0").json()

        assert set(body["sri"]) == set(body["files"])

    def test_single_field(self, test_client):
        response = test_client.get("/libraries/backbone.js/1.1.0?fields=files")

        assert response.status_code == 200
        assert_headers(response, VERSION_CACHE)
        assert response.json() == {"files": ["backbone-min.js", "backbone.js"]}

    def test_unknown_fields_are_ignored(self, test_client):
        response = test_client.get(
            "/libraries/backbone.js/1.1.0?fields=version,nope,sri"
        )

        assert response.status_code == 200
        assert set(response.json()) == {"version", "sri"}

    def test_field_names_are_case_sensitive(self, test_client):
        response = test_client.get("/libraries/backbone.js/1.1.0?fields=rawfiles")

        assert response.status_code == 200
        assert response.json() == {}

    def test_missing_version(self, test_client):
        response = test_client.get("/libraries/backbone.js/this-version-doesnt-exist")

        assert_not_found(response, "Version not found")

    def test_missing_library_masks_version(self, test_client):
        response = test_client.get("/libraries/this-library-doesnt-exist/1.1.0")

        assert_not_found(response, "Library not found")


class TestLibraryEndpoint:
    """GET /libraries/:library"""

    @pytest.mark.parametrize("query", ["", "?fields=*", "?fields="])
    def test_full_library_object(self, test_client, query):
        response = test_client.get(f"/libraries/backbone.js{query}")

        assert response.status_code == 200
        assert_headers(response, LIBRARY_CACHE)
        body = response.json()
        assert body["name"] == "backbone.js"
        for key in ("latest", "sri", "filename", "version", "description",
                    "homepage", "license", "author"):
            assert isinstance(body[key], str)
        for key in ("keywords", "assets", "tutorials"):
            assert isinstance(body[key], list)
        assert isinstance(body["repository"], dict)
        assert isinstance(body["autoupdate"], dict)

    def test_latest_is_cdn_url_of_current_version(self, test_client):
        body = test_client.get("/libraries/backbone.js").json()

        assert body["latest"] == (
            "https://cdnjs.cloudflare.com/ajax/libs/backbone.js/1.1.2/backbone-min.js"
        )
        current = next(a for a in body["assets"] if a["version"] == body["version"])
        assert body["sri"] == current["sri"][body["filename"]]

    def test_nested_objects(self, test_client):
        body = test_client.get("/libraries/backbone.js").json()

        assert set(body["repository"]) == {"type", "url"}
        assert set(body["autoupdate"]) == {"type", "target"}
        for asset in body["assets"]:
            assert set(asset) == {"version", "files", "rawFiles", "sri"}
        for tutorial in body["tutorials"]:
            assert isinstance(tutorial["id"], str)
            assert isinstance(tutorial["name"], str)
            assert isinstance(tutorial["content"], str)

    def test_assets_keep_store_order(self, test_client):
        body = test_client.get("/libraries/backbone.js").json()

        assert [a["version"] for a in body["assets"]] == ["1.1.2", "1.1.0", "1.0.0"]

    def test_single_field(self, test_client):
        response = test_client.get("/libraries/backbone.js?fields=assets")

        assert response.status_code == 200
        assert_headers(response, LIBRARY_CACHE)
        body = response.json()
        assert isinstance(body["assets"], list)
        assert len(body) == 1

    def test_optional_fields_are_not_fabricated(self, test_client):
        body = test_client.get("/libraries/underscore.js").json()

        assert "author" not in body
        assert "repository" not in body
        assert body["tutorials"] == []
        assert body["latest"] == (
            "https://cdn.example.com/underscore.js/1.13.6/underscore-min.js"
        )

    def test_missing_library(self, test_client):
        response = test_client.get("/libraries/this-library-doesnt-exist")

        assert_not_found(response, "Library not found")

    def test_library_names_match_exactly(self, test_client):
        response = test_client.get("/libraries/Backbone.js")

        assert_not_found(response, "Library not found")

    def test_repeated_requests_are_identical(self, test_client):
        first = test_client.get("/libraries/backbone.js?fields=name,assets")
        second = test_client.get("/libraries/backbone.js?fields=name,assets")

        assert first.content == second.content
        assert first.headers["Cache-Control"] == second.headers["Cache-Control"]
