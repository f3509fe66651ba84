import copy
import math
import numbers

import numpy as np
from pyproj import Transformer

from trackmap.config import DEFAULT_CONFIG
from trackmap.errors import MalformedGeometryError
from trackmap.logging_config import get_logger

logger = get_logger(__name__)

LINE_TYPES = ("LineString", "MultiLineString")


class Reprojector:
    """
    Reprojects GeoJSON track geometry from a planar CRS to longitude/latitude.

    The default source is British National Grid (EPSG:27700) and the default
    target is WGS84 (EPSG:4326). Axis order is always (x, y) on both sides, so
    eastings/northings come in and [lon, lat] pairs come out.

    Only LineString and MultiLineString coordinates are transformed. Other
    geometry types are copied through untouched and will be misplaced on a
    lon/lat map; a warning is logged for each one.
    """

    def __init__(self, source_crs=None, target_crs=None):
        self.source_crs = source_crs or DEFAULT_CONFIG.source_crs
        self.target_crs = target_crs or DEFAULT_CONFIG.target_crs
        self.transformer = Transformer.from_crs(self.source_crs, self.target_crs, always_xy=True)

    @classmethod
    def from_config(cls, config):
        return cls(source_crs=config.source_crs, target_crs=config.target_crs)

    def transform_point(self, coord):
        """
        Transform one coordinate pair.

        Args:
            coord: Sequence [x, y] or [x, y, z] in the source CRS; z is dropped

        Returns:
            List [lon, lat] in the target CRS
        """
        x, y = _validate_coordinate(coord)
        lon, lat = self.transformer.transform(x, y)
        if not (np.isfinite(lon) and np.isfinite(lat)):
            raise MalformedGeometryError(f"Coordinate {list(coord)!r} is outside the source projection")
        return [lon, lat]

    def transform_line(self, line):
        if not isinstance(line, (list, tuple)):
            raise MalformedGeometryError(f"Expected a list of coordinates, got {type(line).__name__}")
        return [self.transform_point(coord) for coord in line]

    def reproject_geometry(self, geometry):
        """Return a reprojected copy of a GeoJSON geometry dict."""
        if geometry is not None and not isinstance(geometry, dict):
            raise MalformedGeometryError(f"Expected a geometry object, got {type(geometry).__name__}")
        if not geometry or not geometry.get("coordinates"):
            # Nothing to transform
            return copy.deepcopy(geometry)

        geom_type = geometry.get("type")
        new_geometry = {k: copy.deepcopy(v) for k, v in geometry.items() if k != "coordinates"}

        if geom_type == "LineString":
            new_geometry["coordinates"] = self.transform_line(geometry["coordinates"])
        elif geom_type == "MultiLineString":
            lines = geometry["coordinates"]
            if not isinstance(lines, (list, tuple)):
                raise MalformedGeometryError(f"Expected a list of lines, got {type(lines).__name__}")
            new_geometry["coordinates"] = [self.transform_line(line) for line in lines]
        else:
            logger.warning(f"Geometry type {geom_type!r} is not reprojected; passing coordinates through")
            new_geometry["coordinates"] = copy.deepcopy(geometry["coordinates"])

        return new_geometry

    def reproject_feature(self, feature, index=None):
        """
        Return a copy of a feature with its geometry reprojected.

        Args:
            feature: GeoJSON feature dict; never modified
            index: Position of the feature in its collection, used in error messages

        Raises:
            MalformedGeometryError: if any coordinate is malformed
        """
        new_feature = {k: copy.deepcopy(v) for k, v in feature.items() if k != "geometry"}
        if "geometry" in feature:
            try:
                new_feature["geometry"] = self.reproject_geometry(feature["geometry"])
            except MalformedGeometryError as e:
                if index is None or e.feature_index is not None:
                    raise
                raise MalformedGeometryError(str(e), feature_index=index) from e
        return new_feature

    def reproject_collection(self, collection):
        """
        Reproject every feature of a FeatureCollection.

        The result has the same feature count, order and properties as the
        input. A ``crs`` member on the input is dropped because it describes
        the source projection.
        """
        new_collection = {
            k: copy.deepcopy(v) for k, v in collection.items() if k not in ("features", "crs")
        }
        features = collection.get("features", [])
        new_collection["features"] = [
            self.reproject_feature(feature, index=i) for i, feature in enumerate(features)
        ]

        transformed = sum(1 for f in features if (f.get("geometry") or {}).get("type") in LINE_TYPES)
        logger.info(f"Reprojected {transformed} of {len(features)} features to {self.target_crs}")
        return new_collection


def _validate_coordinate(coord):
    if not isinstance(coord, (list, tuple)) or len(coord) not in (2, 3):
        raise MalformedGeometryError(f"Expected [x, y] coordinate, got {coord!r}")

    values = []
    for value in coord[:2]:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise MalformedGeometryError(f"Non-numeric coordinate value {value!r} in {coord!r}")
        try:
            value = float(value)
        except OverflowError as e:
            raise MalformedGeometryError(f"Coordinate value too large in {coord!r}") from e
        if not math.isfinite(value):
            raise MalformedGeometryError(f"Non-finite coordinate value {value!r} in {coord!r}")
        values.append(value)

    return values[0], values[1]


def reproject_geojson(collection, reprojector=None):
    """Reprojects a FeatureCollection from EPSG:27700 to EPSG:4326 (or the reprojector's CRSs)."""
    if reprojector is None:
        reprojector = Reprojector()
    return reprojector.reproject_collection(collection)
