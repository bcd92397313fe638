"""Frontend components for the C-squares map viewer.

This module contains reusable UI pieces for the Streamlit interface: the
folium map with the cell drawn on it and the panel describing the cell.
"""

from typing import Any, cast

import folium
import streamlit as st
from streamlit_folium import st_folium

from csquares.codec import CSquare

_SATELLITE_TILES = "https://mt1.google.com/vt/lyrs=y&x={x}&y={y}&z={z}"


def build_cell_map(square: CSquare, zoom_start: int = 6) -> folium.Map:
    """Build a folium map centered on a cell, with the cell outlined.

    Args:
        square: The cell to draw.
        zoom_start: Initial zoom level. Defaults to 6.

    Returns:
        The folium map, ready to be rendered.
    """
    center = square.center
    folium_map = folium.Map(
        location=[float(center.latitude), float(center.longitude)],
        zoom_start=zoom_start,
        tiles=None,  # Disable default OpenStreetMap tiles
    )

    folium.TileLayer(
        tiles=_SATELLITE_TILES,
        attr="Google",
        name="Google Satellite",
        overlay=False,
        control=True,
    ).add_to(folium_map)

    lat = square.latitude_boundary
    lng = square.longitude_boundary
    folium.Rectangle(
        bounds=[[float(lat.lower), float(lng.lower)], [float(lat.upper), float(lng.upper)]],
        tooltip=square.identifier,
        color="#ffcc00",
        weight=2,
        fill=True,
        fill_opacity=0.2,
    ).add_to(folium_map)

    folium.Marker(
        location=[float(center.latitude), float(center.longitude)],
        tooltip=f"Center of {square.identifier}",
    ).add_to(folium_map)

    return folium_map


def display_cell_map(square: CSquare, zoom_start: int = 6) -> dict[str, Any]:
    """Render the map for a cell in the Streamlit page.

    Args:
        square: The cell to draw.
        zoom_start: Initial zoom level. Defaults to 6.

    Returns:
        Data returned by st_folium, containing map interaction details like center and zoom.
    """
    folium_map = build_cell_map(square, zoom_start)
    return cast(
        dict[str, Any], st_folium(folium_map, returned_objects=["center", "zoom"], height=400)
    )


def render_cell_details(square: CSquare) -> None:
    """Show the identifier, resolution, boundaries and center of a cell.

    Args:
        square: The cell to describe.
    """
    summary = square.summary()
    st.markdown(f"### `{summary.identifier}`")

    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"**Resolution**: {square.resolution}")
        st.markdown(f"**Latitude boundary**: {summary.latitude_boundary}")
        st.markdown(f"**Longitude boundary**: {summary.longitude_boundary}")
    with col2:
        st.markdown(f"**Center latitude**: {summary.center_latitude}")
        st.markdown(f"**Center longitude**: {summary.center_longitude}")

    with st.expander("Raw summary"):
        st.json(summary.to_dict())
