import html
from concurrent.futures import ThreadPoolExecutor

import streamlit as st

import config
import effects
from classifier import load_classifier
from logger import logger
from picker import open_picker
from screen import ClassifierScreen

STYLE = """
<style>
.stApp {{
    background: linear-gradient(135deg, rgb(77, 128, 204), rgb(26, 77, 153));
}}
.app-title {{
    color: white;
    text-align: center;
    font-weight: 700;
    padding-top: 50px;
    text-shadow: 0 0 5px rgba(0, 0, 0, 0.4);
    transform: scale({scale});
    transition: transform 0.3s ease-in-out;
}}
[data-testid="stImage"] {{
    display: flex;
    justify-content: center;
    filter: drop-shadow(0 0 10px rgba(0, 0, 0, 0.35));
}}
.st-key-upload {{
    display: flex;
    justify-content: center;
    padding-top: 20px;
}}
.st-key-upload button {{
    width: 250px;
    border: none;
    border-radius: 15px;
    color: white;
    font-weight: 700;
    background: linear-gradient(90deg, rgba(0, 122, 255, 0.8), rgba(175, 82, 222, 0.8));
    box-shadow: 0 0 5px rgba(0, 0, 0, 0.35);
    transform: scale({scale});
    transition: transform 0.3s ease-in-out;
}}
.prediction {{
    margin: 20px 20px 0 20px;
    padding: 16px;
    border-radius: 15px;
    color: white;
    font-size: 1.4rem;
    font-weight: 500;
    text-align: center;
    background: rgba(255, 255, 255, 0.18);
    backdrop-filter: blur(20px);
    -webkit-backdrop-filter: blur(20px);
    box-shadow: 0 0 5px rgba(0, 0, 0, 0.25);
    transform: scale({scale});
    transition: transform 0.3s ease-in-out;
}}
</style>
"""


@st.cache_resource(show_spinner="Loading model …")
def get_classifier():
    return load_classifier()


@st.cache_resource
def get_inference_pool():
    return ThreadPoolExecutor(
        max_workers=config.INFERENCE_WORKERS,
        thread_name_prefix="inference"
    )


def get_screen():
    if "screen" not in st.session_state:
        st.session_state.screen = ClassifierScreen(get_classifier, get_inference_pool())
    return st.session_state.screen


def apply_style(uploaded):
    st.markdown(STYLE.format(scale=effects.scale_for(uploaded)), unsafe_allow_html=True)


def display_image_well(state):
    if state.image is not None:
        st.image(effects.render_image_well(state.image, state.is_image_uploaded))
    else:
        st.image(effects.render_placeholder())


def display_prediction(screen):
    run_every = config.POLL_INTERVAL if screen.in_flight else None

    @st.fragment(run_every=run_every)
    def prediction_panel():
        if screen.poll_labels():
            st.rerun()
        st.markdown(
            f'<div class="prediction">{html.escape(screen.state.prediction)}</div>',
            unsafe_allow_html=True
        )

    prediction_panel()


def main():
    st.set_page_config(page_title=config.APP_TITLE, page_icon=config.PAGE_ICON, layout="centered")

    screen = get_screen()

    screen.start_run()

    state = screen.state
    apply_style(state.is_image_uploaded)

    st.markdown(f'<h1 class="app-title">{html.escape(config.APP_TITLE)}</h1>', unsafe_allow_html=True)
    display_image_well(state)
    st.button("Upload Image", key="upload", on_click=screen.choose_image)
    display_prediction(screen)

    request = screen.present_pick()
    if request is not None:
        open_picker(request)


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        logger.exception("Unhandled error while rendering the screen")
        st.error(f"An error occurred: {str(e)}")
