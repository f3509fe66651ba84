import copy

import folium
from folium.plugins import PolyLineTextPath

from trackmap.config import DEFAULT_CONFIG
from trackmap.logging_config import get_logger

logger = get_logger(__name__)


def feature_lines(geometry):
    """
    Return the [lon, lat] lines of a LineString or MultiLineString.

    Other geometry types give None; a missing geometry gives an empty list.
    """
    if not geometry or not geometry.get("coordinates"):
        return []
    if geometry.get("type") == "LineString":
        return [geometry["coordinates"]]
    if geometry.get("type") == "MultiLineString":
        return [line for line in geometry["coordinates"] if line]
    return None


def add_tile_layers(m, tile_sources):
    """Add each tile source as a selectable base layer"""
    for source in tile_sources:
        folium.TileLayer(
            tiles=source.url,
            attr=source.attribution,
            name=source.name,
            overlay=False,
            control=True,
            show=source.checked,
        ).add_to(m)


def add_track_to_map(m, feature, presenter, label_offset=None):
    """
    Add one track feature to a Folium map or feature group.

    Line geometries are drawn as one PolyLine per line, each carrying the
    feature's label as text along the path. Other geometry types are drawn
    with a GeoJson layer in the same style and without a label.

    Args:
        m: Folium map or FeatureGroup
        feature: Reprojected GeoJSON feature dict
        presenter: TrackPresenter supplying style and label
        label_offset: Pixel offset of the label from the line

    Returns:
        List of (lat, lon) lists that were drawn as lines
    """
    if label_offset is None:
        label_offset = presenter.config.label_offset

    geometry = feature.get("geometry")
    lines = feature_lines(geometry)

    if lines is None:
        folium.GeoJson(
            {
                "type": "Feature",
                "geometry": copy.deepcopy(geometry),
                "properties": copy.deepcopy(feature.get("properties") or {}),
            },
            style_function=presenter.style,
        ).add_to(m)
        return []

    style = presenter.style(feature)
    label = presenter.label(feature)
    attributes = presenter.label_attributes(feature)

    drawn = []
    for line in lines:
        # GeoJSON is [lon, lat]; Folium wants (lat, lon)
        locations = [(lat, lon) for lon, lat in line]
        polyline = folium.PolyLine(
            locations=locations,
            color=style["color"],
            weight=style["weight"],
            tooltip=label.replace("\n", " "),
        ).add_to(m)

        PolyLineTextPath(
            polyline,
            label,
            repeat=False,
            center=True,
            offset=label_offset,
            attributes=attributes,
        ).add_to(m)
        drawn.append(locations)

    return drawn


def add_tracks_to_map(m, collection, presenter):
    """Add every feature of a reprojected collection; returns the number of lines drawn"""
    line_count = 0
    for feature in collection.get("features", []):
        if not feature.get("geometry"):
            continue
        line_count += len(add_track_to_map(m, feature, presenter))
    return line_count


def apply_viewport(m, presenter):
    """
    Fit the map to the tracks' bounds.

    Returns False, leaving the map at its default centre and zoom, when the
    presenter has no valid bounds.
    """
    if presenter.bounds is None:
        logger.info("No valid track bounds; keeping the default viewport")
        return False

    m.fit_bounds(presenter.bounds.to_folium())
    return True


def build_track_map(collection, presenter, config=None):
    """
    Build a Folium map showing the reprojected tracks.

    Args:
        collection: Reprojected FeatureCollection (EPSG:4326)
        presenter: TrackPresenter built from the same collection
        config: TrackMapConfig; defaults to the presenter's

    Returns:
        folium.Map with base tile layers, a track overlay and a layer control
    """
    config = config or presenter.config or DEFAULT_CONFIG

    m = folium.Map(location=config.default_center, zoom_start=config.default_zoom, tiles=None)
    add_tile_layers(m, config.tile_sources)

    tracks = folium.FeatureGroup(name=config.overlay_name, overlay=True, show=True)
    line_count = add_tracks_to_map(tracks, collection, presenter)
    tracks.add_to(m)

    folium.LayerControl(position="topright").add_to(m)

    apply_viewport(m, presenter)
    logger.info(f"Drew {line_count} track lines in {len(presenter.color_map)} colours")
    return m
