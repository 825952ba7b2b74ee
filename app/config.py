from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from rps_arena.arena import SnapshotArena
from rps_arena.renderer.colors import DEFAULT_BRIGHTNESS, DEFAULT_SATURATION
from rps_arena.view.terrain_view import TerrainRenderer

DEFAULT_RESOLUTION = 640


@dataclass(frozen=True)
class ViewerConfig:
    arena_size: int = 32
    num_breeds: int = 3
    resolution: int = DEFAULT_RESOLUTION
    saturation: float = DEFAULT_SATURATION
    brightness: float = DEFAULT_BRIGHTNESS
    seed: Optional[int] = 0


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = ViewerConfig()


def get_config_from_widgets() -> ViewerConfig:
    current: ViewerConfig = st.session_state["config"]

    st.subheader("Arena")
    arena_size = st.number_input(
        "Arena size", min_value=1, max_value=256, value=current.arena_size
    )
    num_breeds = st.number_input(
        "Breeds", min_value=1, max_value=256, value=current.num_breeds
    )

    st.subheader("Rendering")
    resolution = st.number_input(
        "Resolution (px)", min_value=16, max_value=2048, value=current.resolution
    )
    saturation = st.slider("Saturation", 0.0, 1.0, current.saturation)
    brightness = st.slider("Brightness", 0.0, 1.0, current.brightness)

    st.subheader("Random seed")
    seed = st.number_input("Random seed", min_value=0, value=current.seed or 0)

    return ViewerConfig(
        arena_size=int(arena_size),
        num_breeds=int(num_breeds),
        resolution=int(resolution),
        saturation=float(saturation),
        brightness=float(brightness),
        seed=int(seed),
    )


def make_view_and_attach(config: ViewerConfig) -> None:
    """Build a fresh arena and view for ``config`` and store them in session state."""
    previous: Optional[TerrainRenderer] = st.session_state.get("view")
    if previous is not None:
        previous.close()

    arena = SnapshotArena.random(config.arena_size, config.num_breeds, config.seed)
    view = TerrainRenderer(saturation=config.saturation, brightness=config.brightness)
    view.attach(arena)
    st.session_state["arena"] = arena
    st.session_state["view"] = view
    st.session_state["generation"] = 0
