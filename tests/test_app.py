import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


def _run_app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    return at


def test_bundled_dataset_shows_summary_and_legend(monkeypatch):
    monkeypatch.delenv("TRACKMAP_DATA", raising=False)

    at = _run_app()

    assert not at.exception
    assert not at.error
    assert at.title[0].value == "Map"
    assert at.sidebar.subheader[0].value == "Railway Tracks"

    sidebar_text = [md.value for md in at.sidebar.markdown]
    assert "5 segments, 5 track types" in sidebar_text
    assert any("#E69F00" in text and "1100 UP MAIN FAST" in text for text in sidebar_text)


def test_data_path_comes_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "tracks.json"
    path.write_text(json.dumps({
        "type": "FeatureCollection",
        "features": [{
            "type": "Feature",
            "properties": {"TRACK_ID": 2200, "ELR": "XYZ"},
            "geometry": {"type": "LineString", "coordinates": [[530000, 180000], [531000, 181000]]},
        }],
    }), encoding="utf-8")
    monkeypatch.setenv("TRACKMAP_DATA", str(path))

    at = _run_app()

    assert not at.error
    sidebar_text = [md.value for md in at.sidebar.markdown]
    assert "1 segments, 1 track types" in sidebar_text
    assert any("2200 DOWN SLOW" in text for text in sidebar_text)


@pytest.mark.parametrize("content, message", [
    ("{not json", "not valid JSON"),
    (json.dumps({"features": [{
        "type": "Feature",
        "properties": {"TRACK_ID": 1100},
        "geometry": {"type": "LineString", "coordinates": [["bad", 180000]]},
    }]}), "Feature 0"),
])
def test_bad_dataset_shows_error_and_stops(tmp_path, monkeypatch, content, message):
    path = tmp_path / "tracks.json"
    path.write_text(content, encoding="utf-8")
    monkeypatch.setenv("TRACKMAP_DATA", str(path))

    at = _run_app()

    assert not at.exception
    assert len(at.error) == 1
    assert "Could not load railway tracks" in at.error[0].value
    assert message in at.error[0].value
    # Page stopped before the sidebar was drawn
    assert len(at.sidebar.subheader) == 0


def test_missing_dataset_shows_error(tmp_path, monkeypatch):
    monkeypatch.setenv("TRACKMAP_DATA", str(tmp_path / "missing.json"))

    at = _run_app()

    assert len(at.error) == 1
    assert "not found" in at.error[0].value
