"""
Form Section Component
======================

Card chrome shared by every section of the intake form.
"""

import streamlit as st
from contextlib import contextmanager
from typing import Iterator, Optional


@contextmanager
def form_section(title: str, description: Optional[str] = None) -> Iterator[None]:
    """
    Render a titled card; whatever is rendered inside the ``with`` block
    becomes the card body.

    Args:
        title: Section title shown in the card header
        description: Optional short text under the title
    """
    with st.container(border=True):
        st.subheader(title)
        if description:
            st.caption(description)
        yield
