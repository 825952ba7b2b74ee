import logging
from dataclasses import replace

import numpy as np
import streamlit as st
from PIL import Image

from config import (
    ViewerConfig,
    get_config_from_widgets,
    make_view_and_attach,
    set_default_config,
)
from rps_arena.arena import SnapshotArena, terrain_rows
from rps_arena.view.measure import MeasureSpec
from rps_arena.view.terrain_view import TerrainRenderer

logging.basicConfig(level=logging.INFO)

st.set_page_config(layout="wide", page_title="RPS Arena")

REFRESH_TIMEOUT = 5.0


def shuffle_terrain(arena: SnapshotArena, seed: int) -> None:
    rng = np.random.default_rng(seed)
    arena.replace_terrain(
        rng.integers(0, arena.num_breeds, size=arena.terrain.shape)
    )


def render_frame(view: TerrainRenderer, resolution: int) -> Image.Image:
    """Play the host's part: measure, lay out and draw into a fresh canvas."""
    width, height = view.measure(
        MeasureSpec.exactly(resolution), MeasureSpec.unspecified()
    )
    view.layout((0, 0, width, height))
    canvas = Image.new("RGB", (width, height), view.background)
    view.draw(canvas)
    return canvas


# --------- Main App ---------

set_default_config()
tab_arena, tab_config, tab_state = st.tabs(["Arena", "Config", "State"])

with tab_config:
    config: ViewerConfig = get_config_from_widgets()

    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = config
        make_view_and_attach(config)
    st.divider()

with tab_arena:
    if "view" not in st.session_state:
        make_view_and_attach(st.session_state["config"])

    current: ViewerConfig = st.session_state["config"]
    view: TerrainRenderer = st.session_state["view"]
    arena: SnapshotArena = st.session_state["arena"]

    left_col, right_col = st.columns([0.75, 0.25])

    with right_col:
        if st.button("🔀 Shuffle", key="shuffle_btn", use_container_width=True):
            generation = st.session_state["generation"] + 1
            base_seed = current.seed if current.seed is not None else 0
            shuffle_terrain(arena, base_seed + generation)
            st.session_state["generation"] = generation
            view.notify_generation(generation)
            if not view.wait_idle(REFRESH_TIMEOUT):
                st.warning("Refresh is taking longer than expected.")

        if st.button("🎨 New Seed", key="seed_btn", use_container_width=True):
            base_seed = current.seed if current.seed is not None else 0
            st.session_state["config"] = replace(current, seed=base_seed + 1)
            make_view_and_attach(st.session_state["config"])
            view = st.session_state["view"]
            arena = st.session_state["arena"]

        st.info(f"**Generation:** {view.generation}", icon="🧬")
        st.info(
            f"**Arena:** {arena.arena_size} x {arena.arena_size}, "
            f"{arena.num_breeds} breeds",
            icon="🗺️",
        )
        for breed, color in enumerate(view.breed_colors):
            hex_color = "#{:02x}{:02x}{:02x}".format(*color)
            st.markdown(
                f"<span style='color:{hex_color}'>⬤</span> Breed {breed}",
                unsafe_allow_html=True,
            )

    with left_col:
        img = render_frame(view, st.session_state["config"].resolution)
        st.image(img, use_container_width=True)

with tab_state:
    st.json(
        {
            "generation": view.generation,
            "phase": type(view.phase).__name__,
            "measured_size": view.measured_size,
            "terrain": terrain_rows(arena.terrain),
        },
        expanded=1,
    )
