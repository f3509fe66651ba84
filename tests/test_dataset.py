import json
from pathlib import Path

import pytest

from trackmap.dataset import load_feature_collection
from trackmap.errors import DatasetError
from trackmap.presenter import TrackPresenter
from trackmap.reprojection import Reprojector

BUNDLED_DATA = Path(__file__).resolve().parent.parent / "data" / "trackcentral2.json"


def test_load_valid_collection(tmp_path, bng_collection):
    path = tmp_path / "tracks.json"
    path.write_text(json.dumps(bng_collection), encoding="utf-8")

    assert load_feature_collection(path) == bng_collection


def test_missing_file(tmp_path):
    with pytest.raises(DatasetError, match="not found"):
        load_feature_collection(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "tracks.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(DatasetError, match="not valid JSON"):
        load_feature_collection(path)


@pytest.mark.parametrize("data", [
    [],
    {"type": "FeatureCollection"},
    {"features": {"a": 1}},
    {"features": [1, 2]},
    {"features": [{"properties": ["TRACK_ID"]}]},
])
def test_wrong_structure(tmp_path, data):
    path = tmp_path / "tracks.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(DatasetError):
        load_feature_collection(path)


def test_bundled_dataset_renders_around_london():
    collection = load_feature_collection(BUNDLED_DATA)

    reprojected = Reprojector().reproject_collection(collection)
    presenter = TrackPresenter(reprojected)

    assert len(reprojected["features"]) == len(collection["features"])
    assert presenter.color_map[1100] == "#E69F00"
    bounds = presenter.bounds
    assert 51.4 < bounds.south < bounds.north < 51.6
    assert -0.3 < bounds.west < bounds.east < 0.0


def test_non_utf8_file(tmp_path):
    path = tmp_path / "tracks.json"
    path.write_bytes(b'{"features": [], "name": "\xff\xfe"}')

    with pytest.raises(DatasetError, match="could not be read"):
        load_feature_collection(path)


def test_directory_instead_of_file(tmp_path):
    with pytest.raises(DatasetError, match="could not be read"):
        load_feature_collection(tmp_path)
