"""Streamlit map viewer for C-squares cells."""

import logging

import streamlit as st

from csquares.codec import CSquare, encode
from csquares.config import Settings, get_settings
from csquares.frontend.components import display_cell_map, render_cell_details
from csquares.logger import configure_logging
from csquares.resolution import MAX_DECIMALS

logger = logging.getLogger(__name__)


def load_config() -> Settings:
    """Loads the application configuration.

    Returns:
        Settings: The application settings object.

    Raises:
        RuntimeError: If the configuration cannot be loaded.
    """
    try:
        return get_settings()
    except Exception as e:
        raise RuntimeError(f"Failed to load configuration: {e}") from e


def _init_session_state(settings: Settings) -> None:
    """Initialize the point shown when the page first opens."""
    if "lat" not in st.session_state:
        st.session_state["lat"] = settings.viewer.default_latitude
        st.session_state["lng"] = settings.viewer.default_longitude


def _parse_coordinates(input_str: str) -> tuple[float, float] | None:
    """Parses a string input "lat, lng" into a tuple of floats.

    Args:
        input_str: A string containing comma-separated latitude and longitude.

    Returns:
        tuple[float, float] | None: A tuple (lat, lng) if parsing is successful,
        None otherwise. Displays an error in Streamlit if parsing fails.
    """
    try:
        parts = input_str.split(",")
        if len(parts) != 2:
            raise ValueError("Exactly two comma-separated values required.")
        lat = float(parts[0].strip())
        lng = float(parts[1].strip())
        return lat, lng
    except (ValueError, IndexError):
        st.error("Invalid coordinates format. Please provide 'lat, lng'.")
        return None


def _encode_or_report(lat: float, lng: float, decimals: int) -> CSquare | None:
    try:
        return encode(lat, lng, decimals)
    except ValueError as exception:
        logger.warning(f"Could not encode ({lat}, {lng}): {exception}")
        st.error(str(exception))
        return None


def main() -> None:
    """Entry point for the application.

    Checks if running within Streamlit and relaunches if necessary.
    """
    if st.runtime.exists():
        _main_app_logic()
    else:
        import sys

        from streamlit.web import cli as stcli

        sys.argv = ["streamlit", "run", __file__] + sys.argv[1:]
        sys.exit(stcli.main())


def _main_app_logic() -> None:
    """Core logic for the Streamlit application."""
    st.set_page_config(layout="wide", page_title="C-squares")
    configure_logging()
    st.title("C-squares Viewer")

    try:
        settings = load_config()
    except RuntimeError as e:
        st.error(str(e))
        st.stop()

    _init_session_state(settings)

    col1, col2 = st.columns([1, 3])

    with col1:
        coordinates = st.text_input(
            "Point (lat, lng)", f"{st.session_state['lat']}, {st.session_state['lng']}"
        )
        decimals = st.slider(
            "Decimal places",
            min_value=0,
            max_value=MAX_DECIMALS,
            value=settings.codec.default_decimals,
        )

    lat_lng = _parse_coordinates(coordinates)
    if lat_lng is None:
        return

    square = _encode_or_report(*lat_lng, decimals)
    if square is None:
        return

    with col1:
        render_cell_details(square)
    with col2:
        display_cell_map(square, zoom_start=settings.viewer.zoom_start)


if __name__ == "__main__":
    main()
