"""
Yes/No Group Component
======================

Two mutually exclusive choices sharing one field name, no default.
"""

import streamlit as st
from typing import Optional

from templates.form_schema import YES_NO_OPTIONS, LocalizedText


YES_NO_LABELS = {option.value: option.label for option in YES_NO_OPTIONS}


def render_yes_no_group(
    name: str,
    language: str,
    key_prefix: str,
    label: Optional[LocalizedText] = None,
    show_label: bool = False
) -> Optional[str]:
    """
    Render the yes/no radio pair.

    Args:
        name: Field name the choice is submitted under
        language: Display language for the option labels
        key_prefix: Widget key namespace (one per form variant)
        label: Accessible label, defaults to the field name
        show_label: Show the label above the choices

    Returns:
        "yes", "no", or None while nothing is selected
    """
    return st.radio(
        label.get(language) if label else name,
        options=[option.value for option in YES_NO_OPTIONS],
        format_func=lambda value: YES_NO_LABELS[value].get(language),
        index=None,
        horizontal=True,
        key=f"{key_prefix}:{name}",
        label_visibility="visible" if show_label else "collapsed",
    )
