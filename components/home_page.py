"""
Home Page Component
===================

Branding, the Arabic/English switch and exactly one intake form variant.
"""

import streamlit as st
from typing import Optional

from config import Config, get_config
from components.intake_form import render_intake_form
from handlers.state_manager import LanguageState
from handlers.submission_handler import SubmissionRecord
from templates.form_schema import FormDefinition
from templates.intake_sections import INTAKE_FORM


# Toggle buttons, in display order
LANGUAGE_BUTTONS = [
    ("ar", "عربي"),
    ("en", "English"),
]


def render_language_toggle(state: LanguageState):
    """Two buttons; the active language is highlighted"""
    _, *columns = st.columns([8, 1, 1])
    for column, (code, label) in zip(columns, LANGUAGE_BUTTONS):
        with column:
            st.button(
                label,
                key=f"lang_{code}",
                type="primary" if state.language == code else "secondary",
                on_click=state.set_language,
                args=(code,),
            )


def render_branding(definition: FormDefinition, language: str, config: Config):
    """Logo, title and intro text"""
    if config.logo_url:
        st.image(config.logo_url, caption=config.brand_name or None, width=96)
    st.title(definition.title.get(language))
    st.markdown(definition.intro.get(language))


def render_home_page(
    state: LanguageState,
    config: Optional[Config] = None,
    definition: FormDefinition = INTAKE_FORM
) -> Optional[SubmissionRecord]:
    """
    Render the single page of the application.

    Args:
        state: Session language state
        config: Application config, the global one by default
        definition: Form to render

    Returns:
        SubmissionRecord when the form was submitted in this run
    """
    config = config or get_config()
    render_language_toggle(state)
    render_branding(definition, state.language, config)
    return render_intake_form(state.language, definition, config)
