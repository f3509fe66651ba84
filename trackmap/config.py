from dataclasses import dataclass, field
from types import MappingProxyType

# British National Grid. The datum term pulls in PROJ's OSGB36 Helmert
# parameters; no OSTN grid shift is applied.
EPSG_27700 = (
    "+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 +x_0=400000 +y_0=-100000 "
    "+ellps=airy +datum=OSGB36 +units=m +no_defs"
)
EPSG_4326 = "EPSG:4326"

# Colour-blind-friendly palette, assigned to track ids in first-seen order
COLOR_PALETTE = (
    "#E69F00",  # Orange
    "#56B4E9",  # Sky Blue
    "#009E73",  # Bluish Green
    "#F0E442",  # Yellow
    "#0072B2",  # Blue
    "#D55E00",  # Vermillion
    "#CC79A7",  # Reddish Purple
    "#000000",  # Black
    "#FFB6C1",  # Light Pink
    "#FFA500",  # Orange (alternative)
    "#800080",  # Purple
    "#00FFFF",  # Cyan
)

# TRACK_ID classification codes -> descriptive name
TRACK_NAME_MAP = {
    1100: "UP MAIN FAST",
    1200: "UP SLOW",
    1300: "UP GOODS",
    1400: "UP SINGLE",
    1500: "UP LOOP",
    1600: "UP TERMINAL",
    1700: "UP CROSSOVER",
    1800: "UP OTHER/ENGINE",
    1900: "UP SIDING",

    2100: "DOWN MAIN FAST",
    2200: "DOWN SLOW",
    2300: "DOWN GOODS",
    2400: "DOWN SINGLE",
    2500: "DOWN LOOP",
    2600: "DOWN TERMINAL",
    2700: "DOWN CROSSOVER",
    2800: "DOWN OTHER/ENGINE",
    2900: "DOWN SIDING",

    3100: "REVERSIBLE/BI-DIRECTIONAL MAIN FAST",
    3200: "REVERSIBLE/BI-DIRECTIONAL SLOW",
    3300: "REVERSIBLE/BI-DIRECTIONAL GOODS",
    3400: "REVERSIBLE/BI-DIRECTIONAL SINGLE",
    3500: "REVERSIBLE/BI-DIRECTIONAL LOOP",
    3600: "REVERSIBLE/BI-DIRECTIONAL TERMINAL",
    3700: "REVERSIBLE/BI-DIRECTIONAL CROSSOVER",
    3800: "REVERSIBLE/BI-DIRECTIONAL OTHER/ENGINE",
    3900: "REVERSIBLE/BI-DIRECTIONAL SIDING",
}


@dataclass(frozen=True)
class TileSource:
    name: str
    url: str
    attribution: str
    checked: bool = False  # shown as the active base layer


TILE_SOURCES = (
    TileSource(
        name="OpenStreetMap",
        url="https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
        attribution='&copy; <a href="https://www.openstreetmap.org/">OpenStreetMap</a> contributors',
        checked=True,
    ),
    TileSource(
        name="Satellite",
        url="https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
        attribution='&copy; <a href="https://www.esri.com/">Esri</a>',
    ),
)


@dataclass(frozen=True)
class TrackMapConfig:
    """Settings handed to the reprojector, presenter and map builder.

    Build a new instance (or use ``dataclasses.replace``) to swap the palette,
    name table or viewport without touching module globals.
    """

    source_crs: str = EPSG_27700
    target_crs: str = EPSG_4326
    palette: tuple = COLOR_PALETTE
    track_names: MappingProxyType = field(default_factory=lambda: MappingProxyType(dict(TRACK_NAME_MAP)))

    # GeoJSON property keys
    track_id_property: str = "TRACK_ID"
    elr_property: str = "ELR"
    color_property: str = "color"

    # Line styling
    track_weight: int = 4
    default_color: str = "#3388ff"
    default_weight: int = 3

    # Label styling
    label_fill: str = "black"
    label_font_weight: str = "bold"
    label_font_size: str = "12px"
    label_offset: int = 5

    # Viewport used when the tracks have no valid bounds (lat, lon)
    default_center: tuple = (51.5, -0.1)
    default_zoom: int = 9

    tile_sources: tuple = TILE_SOURCES
    overlay_name: str = "Railway Tracks"

    def __post_init__(self):
        # Copy caller-supplied tables so later edits to them cannot leak in
        object.__setattr__(self, "palette", tuple(self.palette))
        object.__setattr__(self, "track_names", MappingProxyType(dict(self.track_names)))


DEFAULT_CONFIG = TrackMapConfig()
