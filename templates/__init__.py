"""
Templates Package
=================
Declarative form definitions.

- form_schema: sections, fields, options and localized text
- intake_sections: the university AI assistant intake form

All user-facing text is declared once per language; structure is shared.
"""

from .form_schema import (
    FieldDescriptor,
    FieldKind,
    FormDefinition,
    LocalizedText,
    Option,
    SectionDescriptor,
    DuplicateFieldNameError,
)
from .intake_sections import INTAKE_FORM

__all__ = [
    'FieldDescriptor',
    'FieldKind',
    'FormDefinition',
    'LocalizedText',
    'Option',
    'SectionDescriptor',
    'DuplicateFieldNameError',
    'INTAKE_FORM',
]
