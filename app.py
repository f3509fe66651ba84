# app.py
import os
from pathlib import Path

import streamlit as st
from streamlit_folium import st_folium

from trackmap import (
    DEFAULT_CONFIG,
    Reprojector,
    TrackMapError,
    TrackPresenter,
    build_track_map,
    load_feature_collection,
)

BASE_DIR = Path(__file__).resolve().parent
DATA_PATH = os.environ.get("TRACKMAP_DATA", str(BASE_DIR / "data" / "trackcentral2.json"))

# Set page config first
st.set_page_config(layout="wide")

st.markdown(
    """
    <style>
    footer {visibility: hidden;}
    iframe {
        height: calc(100vh - 160px) !important;
    }
    </style>
    """,
    unsafe_allow_html=True
)

st.title("Map")


@st.cache_data
def load_tracks(path):
    """Load the dataset and reproject it to WGS84 once per file."""
    collection = load_feature_collection(path)
    reprojector = Reprojector.from_config(DEFAULT_CONFIG)
    return reprojector.reproject_collection(collection)


# --- 1. load and reproject the tracks ---
try:
    railway_geojson_4326 = load_tracks(DATA_PATH)
except TrackMapError as e:
    st.error(f"Could not load railway tracks: {e}")
    st.stop()

presenter = TrackPresenter(railway_geojson_4326, DEFAULT_CONFIG)

# --- 2. sidebar summary and legend ---
st.sidebar.subheader("Railway Tracks")
st.sidebar.write(f"{len(railway_geojson_4326['features'])} segments, {len(presenter.color_map)} track types")

if not presenter.has_bounds():
    st.sidebar.warning("No track coordinates to show; using the default view")

with st.sidebar.expander("Track Colours", expanded=True):
    for entry in presenter.legend():
        st.markdown(
            f"<span style='color:{entry.color}; font-weight:bold;'>&#9632;</span> "
            f"{entry.track_id} {entry.name}",
            unsafe_allow_html=True
        )

# --- 3. build and render the Folium map ---
m = build_track_map(railway_geojson_4326, presenter, DEFAULT_CONFIG)
st_folium(m, width="100%")
