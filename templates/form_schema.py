"""
Form Schema
===========

Declarative building blocks for bilingual forms.

A form is a tuple of sections, a section is a tuple of fields and a field
is either a single named control or a ``group`` row of child controls.
All user-facing text is a ``LocalizedText`` so one definition serves
both the Arabic (RTL) and English (LTR) renditions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple


SUPPORTED_LANGUAGES = ("ar", "en")
TEXT_DIRECTIONS = {"ar": "rtl", "en": "ltr"}


class LocalizedText(NamedTuple):
    """Same text in every supported language"""
    ar: str
    en: str

    def get(self, language: str) -> str:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {language!r}")
        return getattr(self, language)


class FieldKind(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    TEL = "tel"
    EMAIL = "email"
    TEXTAREA = "textarea"
    CHECKBOX_GROUP = "checkbox-group"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    YES_NO = "yes-no"
    GROUP = "group"
    HEADING = "heading"


# Kinds whose controls may share one name and submit several values
MULTI_VALUE_KINDS = (FieldKind.CHECKBOX_GROUP, FieldKind.CHECKBOX)
TEXT_KINDS = (FieldKind.TEXT, FieldKind.TEL, FieldKind.EMAIL, FieldKind.TEXTAREA)


class DuplicateFieldNameError(ValueError):
    """Two controls of one form would submit under the same name"""


@dataclass(frozen=True)
class Option:
    """
    One entry of an enumerated option list.

    ``key`` is language-neutral and stable; it is used for widget keys and
    derived field names. ``value`` fixes the submitted value (radio
    choices); when unset the localized label is submitted.
    """
    key: str
    label: LocalizedText
    value: Optional[str] = None

    def submitted_value(self, language: str) -> str:
        return self.value if self.value is not None else self.label.get(language)


YES_NO_OPTIONS: Tuple[Option, ...] = (
    Option("yes", LocalizedText("نعم", "Yes"), value="yes"),
    Option("no", LocalizedText("لا", "No"), value="no"),
)


@dataclass(frozen=True)
class FieldDescriptor:
    """A labeled input (or row of inputs) inside a section"""
    name: str
    kind: FieldKind
    label: LocalizedText
    hint: Optional[LocalizedText] = None
    placeholder: Optional[LocalizedText] = None
    required: bool = False
    min_value: Optional[int] = None
    max_value: Optional[int] = None
    options: Tuple[Option, ...] = ()
    children: Tuple["FieldDescriptor", ...] = ()
    rows: int = 3

    def controls(self) -> Iterator["FieldDescriptor"]:
        """Yield the named controls this field renders, groups flattened"""
        if self.kind == FieldKind.HEADING:
            return
        if self.kind == FieldKind.GROUP:
            for child in self.children:
                yield from child.controls()
        else:
            yield self


@dataclass(frozen=True)
class SectionDescriptor:
    """A titled card holding a fixed list of fields"""
    key: str
    title: LocalizedText
    fields: Tuple[FieldDescriptor, ...]
    description: Optional[LocalizedText] = None


@dataclass(frozen=True)
class FormDefinition:
    """Complete bilingual form plus the copy shown around it"""
    key: str
    title: LocalizedText
    intro: LocalizedText
    sections: Tuple[SectionDescriptor, ...]
    submit_label: LocalizedText
    print_label: LocalizedText
    footer_note: LocalizedText

    @staticmethod
    def direction(language: str) -> str:
        if language not in TEXT_DIRECTIONS:
            raise ValueError(f"Unsupported language: {language!r}")
        return TEXT_DIRECTIONS[language]

    def iter_controls(self) -> Iterator[FieldDescriptor]:
        for section in self.sections:
            for descriptor in section.fields:
                yield from descriptor.controls()

    def field_names(self) -> List[str]:
        """Distinct submission names in document order"""
        names: List[str] = []
        for control in self.iter_controls():
            if control.name not in names:
                names.append(control.name)
        return names

    def multi_value_names(self) -> List[str]:
        return [
            control.name for control in self.iter_controls()
            if control.kind in MULTI_VALUE_KINDS
        ]

    def get_control(self, name: str) -> Optional[FieldDescriptor]:
        for control in self.iter_controls():
            if control.name == name:
                return control
        return None

    def validate(self) -> "FormDefinition":
        """
        Check that submitted names cannot collide.

        Checkbox controls may share a name with each other (they form one
        multi-valued group); any other repeat raises
        ``DuplicateFieldNameError``.

        Returns:
            self, so a definition can be validated where it is declared
        """
        seen: Dict[str, FieldKind] = {}
        for control in self.iter_controls():
            previous = seen.get(control.name)
            if previous is not None:
                both_multi = previous in MULTI_VALUE_KINDS and control.kind in MULTI_VALUE_KINDS
                if not both_multi:
                    raise DuplicateFieldNameError(
                        f"Field name {control.name!r} is used by more than one control"
                    )
            seen[control.name] = control.kind
        section_keys = [section.key for section in self.sections]
        if len(section_keys) != len(set(section_keys)):
            raise DuplicateFieldNameError("Section keys must be unique")
        return self


# Shorthand constructors used by the form tables

def text(name: str, label: LocalizedText, **kwargs) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=FieldKind.TEXT, label=label, **kwargs)


def number(name: str, label: LocalizedText, min_value: int = 0,
           max_value: Optional[int] = None, **kwargs) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=FieldKind.NUMBER, label=label,
                           min_value=min_value, max_value=max_value, **kwargs)


def percent(name: str, label: LocalizedText, **kwargs) -> FieldDescriptor:
    return number(name, label, min_value=0, max_value=100, **kwargs)


def textarea(name: str, label: LocalizedText, rows: int = 3, **kwargs) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=FieldKind.TEXTAREA, label=label, rows=rows, **kwargs)


def yes_no(name: str, label: LocalizedText, **kwargs) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=FieldKind.YES_NO, label=label,
                           options=YES_NO_OPTIONS, **kwargs)


def group(name: str, label: LocalizedText, *children: FieldDescriptor, **kwargs) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=FieldKind.GROUP, label=label,
                           children=tuple(children), **kwargs)


def heading(name: str, label: LocalizedText, **kwargs) -> FieldDescriptor:
    """Label line introducing the rows that follow; submits nothing"""
    return FieldDescriptor(name=name, kind=FieldKind.HEADING, label=label, **kwargs)
