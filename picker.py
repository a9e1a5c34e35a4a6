import io

import streamlit as st
from PIL import Image, ImageOps, UnidentifiedImageError

import config
from logger import logger


def decode_image(data):
    image = Image.open(io.BytesIO(data))
    image = ImageOps.exif_transpose(image)
    return image.convert("RGB")


def read_upload(uploaded):
    """Decode an uploaded file, or return None when it is not a usable photo."""
    try:
        return decode_image(uploaded.getvalue())
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        logger.warning("Could not decode %s: %s", uploaded.name, e)
        return None


@st.dialog("Choose a photo")
def open_picker(request):
    uploaded = st.file_uploader(
        "Photo library",
        type=config.PICKER_TYPES,
        key=f"picker-{request.id}",
        label_visibility="collapsed"
    )

    if uploaded is not None:
        image = read_upload(uploaded)
        if image is None:
            st.error(f"Could not open {uploaded.name}. Please choose another photo.")
        else:
            request.resolve(image)
            st.rerun()

    if st.button("Cancel", key=f"picker-cancel-{request.id}"):
        request.cancel()
        st.rerun()
