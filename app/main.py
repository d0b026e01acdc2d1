import streamlit as st

from dataclasses import replace
from typing import List, Optional

from infiniship.config import GeneratorConfig
from infiniship.generator import ShipGenerator
from infiniship.raster import PixelBuffer
from infiniship.seed import SeedPair, random_seed_fn
DEFAULT_SCALE: int = 8

st.set_page_config(layout="wide", page_title="Infiniship")


def set_default_state() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = GeneratorConfig(scale=DEFAULT_SCALE)
        st.session_state["seed_fn"] = random_seed_fn()
        st.session_state["seed_pair"] = None
        st.session_state["sheet"] = None
        st.session_state["sheet_seeds"] = []


def new_ship() -> None:
    generator = ShipGenerator(st.session_state["config"], st.session_state["seed_fn"])
    _, seed_pair = generator.ship()
    st.session_state["seed_pair"] = seed_pair
    # Keyed widgets keep their own value; push the new seeds into them.
    st.session_state["color_seed"] = seed_pair.color
    st.session_state["shape_seed"] = seed_pair.shape


def new_sheet() -> None:
    generator = ShipGenerator(st.session_state["config"], st.session_state["seed_fn"])
    sheet, seeds = generator.sheet()
    st.session_state["sheet"] = sheet
    st.session_state["sheet_seeds"] = seeds


def get_config_from_widgets(current: GeneratorConfig) -> GeneratorConfig:
    st.subheader("Rendering")
    monochrome: bool = st.toggle("Monochrome", value=current.monochrome, key="mono")
    st.subheader("Sheet")
    tiles_x: int = st.slider("Ships per row", 1, 16, current.tiles_x, key="tiles_x")
    tiles_y: int = st.slider("Ships per column", 1, 16, current.tiles_y, key="tiles_y")
    scale: int = st.slider("Preview scale", 1, 32, current.scale, key="scale")
    return replace(
        current, monochrome=monochrome, tiles_x=tiles_x, tiles_y=tiles_y, scale=scale
    )


def get_seed_pair_from_widgets() -> SeedPair:
    # Widget values live under their keys, seeded by new_ship().
    st.subheader("Seeds")
    color: int = st.number_input(
        "Color seed",
        min_value=0,
        max_value=2**32 - 1,
        key="color_seed",
    )
    shape: int = st.number_input(
        "Shape seed",
        min_value=0,
        max_value=2**32 - 1,
        key="shape_seed",
    )
    return SeedPair(color=int(color), shape=int(shape))


# --------- Main App ---------

set_default_state()
if st.session_state["seed_pair"] is None:
    new_ship()

tab_ship, tab_sheet = st.tabs(["Ship", "Sheet"])

with tab_ship:
    left_col, right_col = st.columns([0.3, 0.7])

    with left_col:
        st.session_state["config"] = get_config_from_widgets(st.session_state["config"])
        if st.button("🚀 New Ship", key="new_ship_btn", use_container_width=True):
            new_ship()
        seed_pair = get_seed_pair_from_widgets()
        st.session_state["seed_pair"] = seed_pair

    with right_col:
        config: GeneratorConfig = st.session_state["config"]
        generator = ShipGenerator(config)
        ship, _ = generator.tile(seed_pair)
        st.image(generator.preview(ship))
        st.code(f"color={seed_pair.color:#010x} shape={seed_pair.shape:#010x}")

with tab_sheet:
    if st.button("🎲 New Sheet", key="new_sheet_btn", use_container_width=True):
        new_sheet()

    sheet: Optional[PixelBuffer] = st.session_state["sheet"]
    if sheet is not None:
        st.image(ShipGenerator(st.session_state["config"]).preview(sheet))
        seeds: List[SeedPair] = st.session_state["sheet_seeds"]
        st.json([{"color": s.color, "shape": s.shape} for s in seeds], expanded=False)
