"""
Image Mosaic — Gallery Edition

Run with:
    streamlit run streamlit_app.py
"""

from __future__ import annotations

import io
import time

import streamlit as st
from PIL import Image, ImageDraw

from image_mosaic.config import MosaicConfig
from image_mosaic.errors import MosaicError
from image_mosaic.image_io import encode_image
from image_mosaic.renderer import image_size, render
from image_mosaic.selector import choose_layout

# -- Page config -------------------------------------------------------
st.set_page_config(
    page_title="Image Mosaic",
    page_icon=None,
    layout="wide",
    initial_sidebar_state="collapsed",
)

_DEFAULTS = MosaicConfig()

# -- CSS ---------------------------------------------------------------
st.markdown("""
<style>
    @import url('https://fonts.googleapis.com/css2?family=Cormorant+Garamond:ital,wght@0,300;0,400;1,300&family=Inter:wght@200;300;400&display=swap');

    .stApp {
        background-color: #faf9f6;
        color: #2a2a2a;
        font-family: 'Inter', 'Helvetica Neue', sans-serif;
    }
    .block-container {
        max-width: 1000px;
        padding-top: 3.5rem;
        padding-bottom: 4rem;
    }
    .gallery-title {
        font-family: 'Cormorant Garamond', 'Georgia', serif;
        font-size: 2.8rem;
        font-weight: 300;
        letter-spacing: 0.06em;
        text-align: center;
        color: #1a1a1a;
        border-bottom: 1px solid #1a1a1a;
        padding-bottom: 0.6rem;
        margin-bottom: 0.5rem;
    }
    .gallery-subtitle {
        font-family: 'Inter', sans-serif;
        font-size: 0.75rem;
        font-weight: 300;
        line-height: 1.8;
        margin-bottom: 3.5rem;
    }
    .slider-desc {
        font-family: 'Cormorant Garamond', 'Georgia', serif;
        font-size: 0.95rem;
        font-style: italic;
        color: #6a6a64;
    }
    .catalogue-detail {
        font-family: 'Cormorant Garamond', serif;
        font-size: 0.95rem;
        font-style: italic;
        text-align: center;
        color: #6a6a64;
        margin: 0.6rem 0 1.5rem;
    }
    .processing-text {
        font-family: 'Cormorant Garamond', serif;
        font-size: 1rem;
        font-style: italic;
        color: #a0a09a;
        padding: 1.5rem 0;
    }
    hr { border: none; border-top: 1px solid #e0ded8; margin: 2.5rem 0; }

    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
    header {visibility: hidden;}
</style>
""", unsafe_allow_html=True)


# -- Helpers -----------------------------------------------------------
def _add_passepartout(img: Image.Image, border: int = 20) -> Image.Image:
    w, h = img.size
    bg = (250, 249, 246)
    canvas = Image.new("RGB", (w + border * 2, h + border * 2), bg)
    canvas.paste(img, (border, border))
    draw = ImageDraw.Draw(canvas)
    draw.rectangle(
        [border - 1, border - 1, border + w, border + h],
        outline=(224, 222, 216), width=1,
    )
    return canvas


# -- Title -------------------------------------------------------------
st.markdown(
    '<div class="gallery-title">Mosaic Composer</div>',
    unsafe_allow_html=True,
)
st.markdown(
    '<div class="gallery-subtitle">'
    "Upload two to four pictures and they are arranged into a single frame, "
    "separated by thin black gutters. Every candidate arrangement is scored on "
    "how far it has to stretch or shrink each picture and on how close the "
    "finished frame is to a square; the arrangement that keeps pictures "
    "nearest their own resolution while staying squarest wins."
    "</div>",
    unsafe_allow_html=True,
)

# -- Controls ----------------------------------------------------------
ctrl1, ctrl2 = st.columns(2)
with ctrl1:
    max_dimension = st.slider(
        "Max dimension (px)", 500, 4000, _DEFAULTS.max_dimension, step=100,
    )
    st.markdown(
        '<div class="slider-desc">'
        "The longest side the finished mosaic may have. Larger mosaics are "
        "scaled down uniformly, gutters included."
        "</div>",
        unsafe_allow_html=True,
    )
with ctrl2:
    tolerance = st.slider(
        "Tolerance", 0.0, 2.0, _DEFAULTS.ratio_tolerance, step=0.1,
    )
    st.markdown(
        '<div class="slider-desc">'
        "How much extra relative scaling a layout may use and still compete "
        "on squareness. Zero always keeps the most faithful scaling."
        "</div>",
        unsafe_allow_html=True,
    )

column_variants = st.checkbox(
    "Try column layouts for four images", _DEFAULTS.include_column_variants,
)

st.markdown("---")

# -- Upload ------------------------------------------------------------
uploaded = st.file_uploader(
    "Select pictures",
    type=["jpg", "jpeg", "png", "webp", "bmp", "jfif"],
    accept_multiple_files=True,
)

if uploaded:
    st.session_state.uploaded_data = [u.getvalue() for u in uploaded]
elif "uploaded_data" not in st.session_state:
    st.session_state.uploaded_data = []

if st.session_state.uploaded_data:
    sources = [
        Image.open(io.BytesIO(data)).convert("RGB")
        for data in st.session_state.uploaded_data
    ]
    cfg = MosaicConfig(
        max_dimension=max_dimension,
        ratio_tolerance=tolerance,
        include_column_variants=column_variants,
    )

    if st.button("COMPOSE", type="primary", use_container_width=True):
        progress = st.empty()
        progress.markdown(
            '<div class="processing-text">Composing ...</div>',
            unsafe_allow_html=True,
        )
        try:
            t0 = time.perf_counter()
            chosen = choose_layout([image_size(im) for im in sources], cfg)
            mosaic = render(chosen, sources, cfg)
            elapsed = time.perf_counter() - t0
        except MosaicError as exc:
            progress.empty()
            st.error(str(exc))
            st.stop()
        progress.empty()

        st.markdown("---")
        st.image(_add_passepartout(mosaic, border=28), use_container_width=True)
        st.markdown(
            f'<div class="catalogue-detail">'
            f"{mosaic.width} &times; {mosaic.height}, "
            f"{chosen.name.replace('_', ' ')}, {len(sources)} pictures, "
            f"{elapsed:.1f} s"
            f"</div>",
            unsafe_allow_html=True,
        )

        _, dl_col, _ = st.columns([1, 2, 1])
        with dl_col:
            st.download_button(
                "SAVE MOSAIC",
                data=encode_image(mosaic, "png"),
                file_name="mosaic.png",
                mime="image/png",
                use_container_width=True,
            )
