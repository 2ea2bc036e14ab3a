"""
Intake Form Component
=====================

Generic renderer for a bilingual ``FormDefinition``. The Arabic (RTL) and
English (LTR) variants are the same definition rendered in a different
language; widget keys are namespaced per language so the two variants
never share input state.

On submit the entries of every named control are collected into a
``SubmissionRecord`` and reported on the developer log. The print action
opens the browser's print dialog and offers the form as a PDF, blank or
filled with the last submission.
"""

import streamlit as st
from typing import Any, Dict, List, Optional
import logging

from config import Config, get_config
from components.field import render_field
from components.form_section import form_section
from handlers.submission_handler import (
    FormEntry,
    SubmissionRecord,
    get_last_submission,
    handle_submission,
)
from pdf_handler import build_printable_form, printable_filename
from templates.form_schema import FormDefinition, LocalizedText
from templates.intake_sections import INTAKE_FORM

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


PRINT_REQUEST_KEY = "print_requested"
PRINTABLES_KEY = "printable_forms"

SUBMITTED_MESSAGE = LocalizedText(
    "تم استلام البيانات، شكرًا لكم.",
    "Your information has been received. Thank you.",
)
BLANK_PDF_LABEL = LocalizedText("نموذج فارغ (PDF)", "Blank form (PDF)")
FILLED_PDF_LABEL = LocalizedText("النموذج المعبأ (PDF)", "Filled form (PDF)")
PDF_UNAVAILABLE_MESSAGE = LocalizedText(
    "تعذر إنشاء ملف PDF، يمكنكم استخدام الطباعة من المتصفح.",
    "The PDF could not be created; you can still print from the browser.",
)

PRINT_SCRIPT = """
<script>
  try {
    var host = window.parent || window;
    if (host && typeof host.print === "function") { host.print(); }
  } catch (e) {}
</script>
"""


def apply_text_direction(direction: str):
    """Lay the page out right-to-left or left-to-right"""
    align = "right" if direction == "rtl" else "left"
    st.markdown(
        f"""
        <style>
        .block-container, [data-testid="stMainBlockContainer"] {{
            direction: {direction};
            text-align: {align};
        }}
        </style>
        """,
        unsafe_allow_html=True
    )


def render_form_body(definition: FormDefinition, language: str, key_prefix: str) -> List[FormEntry]:
    """Render all sections; returns the entries of every control in order"""
    entries: List[FormEntry] = []
    for section in definition.sections:
        description = section.description.get(language) if section.description else None
        with form_section(section.title.get(language), description):
            for descriptor in section.fields:
                entries.extend(render_field(descriptor, language, key_prefix))
    return entries


def request_print(language: str):
    """Print button callback"""
    st.session_state[PRINT_REQUEST_KEY] = language


def trigger_browser_print():
    """Open the host print dialog; a no-op where no browser is attached"""
    try:
        st.iframe(PRINT_SCRIPT, height=1)
    except Exception as e:
        logger.warning(f"Browser print unavailable: {e}")


def prepare_printables(
    definition: FormDefinition,
    language: str,
    config: Config
) -> Dict[str, Any]:
    """Build the blank and (when a submission exists) filled PDFs"""
    record = get_last_submission(language)
    printables: Dict[str, Any] = {
        'language': language,
        'blank': build_printable_form(
            definition, language, None, config.pdf_font_path, config.pdf_font_bold_path
        ),
        'filled': None,
    }
    if record is not None:
        printables['filled'] = build_printable_form(
            definition, language, record, config.pdf_font_path, config.pdf_font_bold_path
        )
    return printables


def render_print_actions(definition: FormDefinition, language: str, config: Config):
    """Print button plus the PDF downloads it produces"""
    st.caption(definition.footer_note.get(language))
    st.button(
        definition.print_label.get(language),
        key=f"print_{language}",
        on_click=request_print,
        args=(language,),
    )

    if st.session_state.get(PRINT_REQUEST_KEY) == language:
        st.session_state[PRINT_REQUEST_KEY] = None
        if config.enable_browser_print:
            trigger_browser_print()
        if config.enable_pdf_export:
            st.session_state[PRINTABLES_KEY] = prepare_printables(definition, language, config)

    printables = st.session_state.get(PRINTABLES_KEY)
    if not printables or printables.get('language') != language:
        return

    if printables.get('blank') is None:
        st.warning(PDF_UNAVAILABLE_MESSAGE.get(language))
        return

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            BLANK_PDF_LABEL.get(language),
            data=printables['blank'],
            file_name=printable_filename(definition, language, filled=False),
            mime="application/pdf",
            key=f"download_blank_{language}",
        )
    if printables.get('filled') is not None:
        with col2:
            st.download_button(
                FILLED_PDF_LABEL.get(language),
                data=printables['filled'],
                file_name=printable_filename(definition, language, filled=True),
                mime="application/pdf",
                key=f"download_filled_{language}",
            )


def render_intake_form(
    language: str,
    definition: FormDefinition = INTAKE_FORM,
    config: Optional[Config] = None
) -> Optional[SubmissionRecord]:
    """
    Render one language variant of the intake form.

    Args:
        language: 'ar' or 'en'
        definition: Form to render
        config: Application config, the global one by default

    Returns:
        SubmissionRecord when the form was submitted in this run, else None
    """
    config = config or get_config()
    apply_text_direction(definition.direction(language))

    record = None
    with st.form(key=f"intake_form_{language}"):
        entries = render_form_body(definition, language, key_prefix=language)
        submitted = st.form_submit_button(definition.submit_label.get(language), type="primary")

    if submitted:
        record = handle_submission(entries, language, definition.multi_value_names())
        # PDFs built before this submission are stale
        st.session_state.pop(PRINTABLES_KEY, None)
        st.success(SUBMITTED_MESSAGE.get(language))

    render_print_actions(definition, language, config)
    return record
