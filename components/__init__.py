"""
Intake Form Components
======================

Render functions for the single-page intake form:
- form_section: titled card around a group of fields
- field: label + hint + input control(s)
- yes_no_group: exclusive yes/no choice
- intake_form: generic renderer for a bilingual form definition
- home_page: branding, language switch, active form variant
"""

from .form_section import form_section
from .field import render_field, render_control
from .yes_no_group import render_yes_no_group
from .intake_form import render_intake_form
from .home_page import render_home_page, render_language_toggle

__all__ = [
    'form_section',
    'render_field',
    'render_control',
    'render_yes_no_group',
    'render_intake_form',
    'render_home_page',
    'render_language_toggle',
]
