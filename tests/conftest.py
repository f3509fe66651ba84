import pytest

from trackmap.reprojection import Reprojector


def make_feature(track_id, elr, coordinates, geom_type="LineString", **properties):
    properties.update({"TRACK_ID": track_id, "ELR": elr})
    return {
        "type": "Feature",
        "properties": properties,
        "geometry": {"type": geom_type, "coordinates": coordinates},
    }


def make_collection(*features):
    return {"type": "FeatureCollection", "features": list(features)}


@pytest.fixture(scope="session")
def reprojector():
    return Reprojector()


@pytest.fixture
def bng_collection():
    """Two features in British National Grid around central London"""
    return make_collection(
        make_feature(1100, "ABC1", [[530000, 180000], [531000, 181000]]),
        make_feature(
            2100,
            "XYZ2",
            [[[529000, 179000], [529500, 179500]], [[529500, 179500], [530000, 180500]]],
            geom_type="MultiLineString",
        ),
    )


@pytest.fixture
def wgs84_collection():
    """Already reprojected collection for presenter tests"""
    return make_collection(
        make_feature(1100, "ABC1", [[-0.12, 51.50], [-0.11, 51.51]]),
        make_feature(2100, "ABC1", [[-0.13, 51.49], [-0.12, 51.50]]),
        make_feature(1100, "DEF3", [[-0.10, 51.52], [-0.09, 51.53]]),
        make_feature(9999, "GHI4", [[-0.14, 51.48], [-0.13, 51.49]], color="#FF0000"),
    )
