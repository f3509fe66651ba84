import numbers
from dataclasses import dataclass

import numpy as np

from trackmap.config import DEFAULT_CONFIG
from trackmap.errors import ConfigurationError


@dataclass(frozen=True)
class Bounds:
    """Bounding box in degrees"""

    south: float
    west: float
    north: float
    east: float

    def to_folium(self):
        """Return [[south, west], [north, east]] as expected by Map.fit_bounds"""
        return [[self.south, self.west], [self.north, self.east]]


@dataclass(frozen=True)
class LegendEntry:
    track_id: object
    name: str
    color: str


def build_color_map(features, palette, track_id_key="TRACK_ID"):
    """
    Assign a palette colour to each track id in first-seen order.

    Colours wrap around once the palette is used up, so with 12 colours the
    13th track id shares the first id's colour. Features with no track id
    (None, 0 or empty) get no entry.

    Args:
        features: Iterable of GeoJSON feature dicts, in load order
        palette: Non-empty sequence of colour strings
        track_id_key: Property holding the track id

    Returns:
        Dict mapping track id to colour
    """
    if not palette:
        raise ConfigurationError("Colour palette must contain at least one colour")

    color_map = {}
    seen = 0
    for feature in features:
        tid = normalize_track_id(_properties(feature).get(track_id_key))
        if tid and tid not in color_map:
            color_map[tid] = palette[seen % len(palette)]
            seen += 1
    return color_map


def compute_bounds(collection):
    """
    Smallest box enclosing every coordinate of every feature.

    Returns None when the collection is empty or holds no finite coordinate
    pairs, so callers can skip fitting the viewport.
    """
    positions = []
    for feature in collection.get("features", []):
        geometry = feature.get("geometry")
        if not isinstance(geometry, dict):
            continue
        positions.extend(_iter_positions(geometry.get("coordinates")))

    if not positions:
        return None

    points = np.asarray(positions, dtype=float)
    points = points[np.isfinite(points).all(axis=1)]
    if len(points) == 0:
        return None

    # Positions are [lon, lat]
    west, south = points.min(axis=0)
    east, north = points.max(axis=0)
    return Bounds(south=float(south), west=float(west), north=float(north), east=float(east))


def _iter_positions(coords):
    if not isinstance(coords, (list, tuple)) or not coords:
        return
    if _is_position(coords):
        yield (coords[0], coords[1])
        return
    for item in coords:
        yield from _iter_positions(item)


def _is_position(coords):
    if len(coords) < 2:
        return False
    return all(isinstance(v, numbers.Real) and not isinstance(v, bool) for v in coords[:2])


def normalize_track_id(value):
    """Treat a numeric string id such as "1100" as the integer 1100"""
    if isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdigit():
            return int(text)
    return value


def _properties(feature):
    if not feature:
        return {}
    return feature.get("properties") or {}


class TrackPresenter:
    """
    Derives colours, styles, labels and the initial viewport for a reprojected
    FeatureCollection.

    The colour map and bounds are computed once at construction; the collection
    is treated as read-only afterwards.
    """

    def __init__(self, collection, config=DEFAULT_CONFIG):
        self.collection = collection
        self.config = config
        self.color_map = build_color_map(
            collection.get("features", []),
            config.palette,
            track_id_key=config.track_id_property,
        )
        self.bounds = compute_bounds(collection)

    def track_id(self, feature):
        return normalize_track_id(_properties(feature).get(self.config.track_id_property))

    def track_name(self, track_id):
        """Descriptive name for a track id, or an empty string if unknown"""
        return self.config.track_names.get(normalize_track_id(track_id), "")

    def style(self, feature):
        """Leaflet path style for a feature: its track colour, or the fallback"""
        tid = self.track_id(feature)
        if tid and tid in self.color_map:
            return {"color": self.color_map[tid], "weight": self.config.track_weight}
        return {"color": self.config.default_color, "weight": self.config.default_weight}

    def label(self, feature):
        """
        Text drawn along a track line: name, two spaces, track id, then the ELR
        on a new line. Unknown ids leave the name segment empty.
        """
        properties = _properties(feature)
        tid = self.track_id(feature)
        elr = properties.get(self.config.elr_property)
        tid_text = "" if tid is None else str(tid)
        elr_text = "" if elr is None else str(elr)
        return f"{self.track_name(tid)}  {tid_text}\n{elr_text}"

    def label_attributes(self, feature):
        """SVG text attributes for the label"""
        fill = _properties(feature).get(self.config.color_property) or self.config.label_fill
        return {
            "fill": fill,
            "font-weight": self.config.label_font_weight,
            "font-size": self.config.label_font_size,
        }

    def has_bounds(self):
        return self.bounds is not None

    def legend(self):
        return [
            LegendEntry(track_id=tid, name=self.track_name(tid), color=color)
            for tid, color in self.color_map.items()
        ]
