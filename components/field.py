"""
Field Component
===============

Label (with optional required marker and hint) above the input control(s)
of one field descriptor. Every render returns the (name, value) entries
the controls hold in this run, in document order, for the submission
handler to collect.

"Required" is a visual marker only; nothing is enforced.
"""

import streamlit as st
from typing import List, Optional

from components.yes_no_group import render_yes_no_group
from handlers.submission_handler import FormEntry
from templates.form_schema import FieldDescriptor, FieldKind, TEXT_KINDS


REQUIRED_MARKER = " :green[*]"

# Text area sizing in pixels; 68 is the smallest collapsed-label text area
TEXTAREA_LINE_HEIGHT = 24
TEXTAREA_PADDING = 20
TEXTAREA_MIN_HEIGHT = 68


def _label_visibility(show_label: bool) -> str:
    return "visible" if show_label else "collapsed"


def _placeholder(control: FieldDescriptor, language: str) -> Optional[str]:
    return control.placeholder.get(language) if control.placeholder else None


def textarea_height(rows: int) -> int:
    """Pixel height showing roughly `rows` lines of text"""
    return max(TEXTAREA_MIN_HEIGHT, rows * TEXTAREA_LINE_HEIGHT + TEXTAREA_PADDING)


def render_field_label(label: str, hint: Optional[str] = None, required: bool = False):
    """Render a field's label line and optional hint"""
    st.markdown(f"**{label}**" + (REQUIRED_MARKER if required else ""))
    if hint:
        st.caption(hint)


def render_control(
    control: FieldDescriptor,
    language: str,
    key_prefix: str,
    show_label: bool = False
) -> List[FormEntry]:
    """
    Render one named control.

    Args:
        control: Descriptor of a non-group field
        language: Display language
        key_prefix: Widget key namespace for the form variant
        show_label: Show the control's own label (group rows)

    Returns:
        List of (name, value) entries
    """
    label = control.label.get(language)
    key = f"{key_prefix}:{control.name}"
    visibility = _label_visibility(show_label)

    if control.kind in TEXT_KINDS and control.kind != FieldKind.TEXTAREA:
        value = st.text_input(
            label,
            key=key,
            placeholder=_placeholder(control, language),
            label_visibility=visibility,
        )
        return [(control.name, value)]

    if control.kind == FieldKind.TEXTAREA:
        value = st.text_area(
            label,
            key=key,
            height=textarea_height(control.rows),
            placeholder=_placeholder(control, language),
            label_visibility=visibility,
        )
        return [(control.name, value)]

    if control.kind == FieldKind.NUMBER:
        value = st.number_input(
            label,
            min_value=control.min_value,
            max_value=control.max_value,
            value=None,
            step=1,
            key=key,
            placeholder=_placeholder(control, language),
            label_visibility=visibility,
        )
        return [(control.name, value)]

    if control.kind == FieldKind.DATE:
        value = st.date_input(
            label,
            value=None,
            key=key,
            format="YYYY-MM-DD",
            label_visibility=visibility,
        )
        return [(control.name, value)]

    if control.kind in (FieldKind.CHECKBOX_GROUP, FieldKind.CHECKBOX):
        entries: List[FormEntry] = []
        columns = st.columns(2) if len(control.options) > 1 else [st.container()]
        for index, option in enumerate(control.options):
            with columns[index % len(columns)]:
                checked = st.checkbox(
                    option.label.get(language),
                    key=f"{key}:{option.key}",
                )
            if checked:
                entries.append((control.name, option.submitted_value(language)))
        return entries

    if control.kind == FieldKind.YES_NO:
        value = render_yes_no_group(
            control.name, language, key_prefix, label=control.label, show_label=show_label
        )
        return [(control.name, value)]

    if control.kind == FieldKind.RADIO:
        labels = {option.submitted_value(language): option.label.get(language)
                  for option in control.options}
        value = st.radio(
            label,
            options=list(labels),
            format_func=lambda v: labels[v],
            index=None,
            horizontal=True,
            key=key,
            label_visibility=visibility,
        )
        return [(control.name, value)]

    raise ValueError(f"Cannot render field kind {control.kind!r} as a single control")


def render_field(descriptor: FieldDescriptor, language: str, key_prefix: str) -> List[FormEntry]:
    """
    Render a labeled field: one control, or a row of child controls for groups.

    Returns:
        List of (name, value) entries in document order
    """
    hint = descriptor.hint.get(language) if descriptor.hint else None
    render_field_label(descriptor.label.get(language), hint, descriptor.required)

    if descriptor.kind == FieldKind.HEADING:
        return []
    if descriptor.kind != FieldKind.GROUP:
        return render_control(descriptor, language, key_prefix)

    entries: List[FormEntry] = []
    columns = st.columns(len(descriptor.children))
    for column, child in zip(columns, descriptor.children):
        with column:
            # a lone checkbox already shows its option label
            show_label = child.kind != FieldKind.CHECKBOX
            entries.extend(render_control(child, language, key_prefix, show_label=show_label))
    return entries
