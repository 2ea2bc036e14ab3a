"""
University Smart Assistant Intake Form
======================================

Bilingual (Arabic / English) requirements questionnaire for universities
considering an AI call assistant.

Single page:
- Branding + language switch (Arabic by default)
- Thirteen form sections rendered from one bilingual definition
- Submit: collected values are reported on the application log
- Print: browser print dialog + blank / filled PDF download

Run with:
    streamlit run app.py
"""

import logging

import streamlit as st

from config import get_config
from components.home_page import render_home_page
from handlers.state_manager import provide_language_state


# Page config
st.set_page_config(
    page_title="University Assistant Intake Form",
    page_icon="🎓",
    layout="wide",
    initial_sidebar_state="collapsed"
)

config = get_config()
logging.getLogger().setLevel(config.log_level)

# Custom CSS
st.markdown("""
<style>
    .stApp {
        background: linear-gradient(135deg, #020917 0%, #021f2f 55%, #001019 100%);
        color: #ffffff;
    }
    h1, h2, h3 {
        color: #6ee7b7 !important;
    }
    [data-testid="stVerticalBlockBorderWrapper"] {
        border-color: rgba(16, 185, 129, 0.35) !important;
        border-radius: 1.25rem;
        box-shadow: 0 0 35px rgba(16, 185, 129, 0.15);
    }
    .stButton button[kind="primary"], .stFormSubmitButton button {
        background-color: #34d399;
        color: #020917;
        border: none;
        font-weight: 600;
    }
    @media print {
        .stButton, .stDownloadButton, .stFormSubmitButton, header {
            display: none !important;
        }
        .stApp {
            -webkit-print-color-adjust: exact;
            print-color-adjust: exact;
        }
    }
</style>
""", unsafe_allow_html=True)


def main():
    """Main application entry point"""
    state = provide_language_state(default=config.default_language)
    render_home_page(state, config)


if __name__ == "__main__":
    main()
