from trackmap.config import DEFAULT_CONFIG, TrackMapConfig, TileSource
from trackmap.dataset import load_feature_collection
from trackmap.errors import TrackMapError, DatasetError, ConfigurationError, MalformedGeometryError
from trackmap.reprojection import Reprojector, reproject_geojson
from trackmap.presenter import TrackPresenter, Bounds, LegendEntry, build_color_map, compute_bounds
from trackmap.track_layer import add_tile_layers, add_track_to_map, add_tracks_to_map, apply_viewport, build_track_map

__all__ = [
    'DEFAULT_CONFIG',
    'TrackMapConfig',
    'TileSource',
    'load_feature_collection',
    'TrackMapError',
    'DatasetError',
    'ConfigurationError',
    'MalformedGeometryError',
    'Reprojector',
    'reproject_geojson',
    'TrackPresenter',
    'Bounds',
    'LegendEntry',
    'build_color_map',
    'compute_bounds',
    'add_tile_layers',
    'add_track_to_map',
    'add_tracks_to_map',
    'apply_viewport',
    'build_track_map',
]
