"""Tests for the FastAPI surface and environment options."""

from fastapi.testclient import TestClient

from main import app
from models.options import FormatOptions

client = TestClient(app)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_format_removes_and_reports():
    resp = client.post(
        "/format",
        json={"html": "<p>a</p><script>x</script>", "remove": ["script"]},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["html"] == "<p>a</p>"
    assert body["removed"] == ["<script>x</script>"]


def test_format_flatten_all_and_element_id():
    resp = client.post(
        "/format",
        json={
            "html": '<div id="keep"><b>x</b></div><p>drop</p>',
            "flatten_all": True,
            "element_id": "keep",
        },
    )
    assert resp.status_code == 200
    assert resp.json() == {"html": "x", "removed": []}


def test_format_rejects_invalid_selector():
    resp = client.post("/format", json={"html": "<p>a</p>", "remove": ["a[href]"]})
    assert resp.status_code == 422
    assert "a[href]" in resp.json()["detail"]


def test_format_rejects_extra_fields():
    resp = client.post("/format", json={"html": "<p>a</p>", "bogus": 1})
    assert resp.status_code == 422


class TestFormatOptions:
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HTMLFORMATTER_REMOVE", "script, .navbox,,#toc")
        monkeypatch.setenv("HTMLFORMATTER_FLATTEN", "span")
        monkeypatch.setenv("HTMLFORMATTER_FLATTEN_ALL", "no")
        monkeypatch.setenv("HTMLFORMATTER_REMOVE_MEDIA", "TRUE")
        options = FormatOptions.from_env()
        assert options.remove == ["script", ".navbox", "#toc"]
        assert options.flatten == ["span"]
        assert options.flatten_all is False
        assert options.remove_media is True

    def test_from_env_defaults(self, monkeypatch):
        for name in (
            "HTMLFORMATTER_REMOVE",
            "HTMLFORMATTER_FLATTEN",
            "HTMLFORMATTER_FLATTEN_ALL",
            "HTMLFORMATTER_REMOVE_MEDIA",
        ):
            monkeypatch.delenv(name, raising=False)
        assert FormatOptions.from_env() == FormatOptions()

    def test_merged(self):
        base = FormatOptions(remove=["script"], remove_media=True)
        merged = base.merged(FormatOptions(remove=[".nav"], flatten_all=True))
        assert merged.remove == ["script", ".nav"]
        assert merged.remove_media is True
        assert merged.flatten_all is True
