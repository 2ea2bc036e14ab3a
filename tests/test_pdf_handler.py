import pytest

from handlers.submission_handler import SubmissionRecord
from pdf_handler import (
    IntakeFormPDF,
    build_printable_form,
    printable_filename,
    shape_text,
)
from templates.intake_sections import INTAKE_FORM


@pytest.mark.parametrize("language", ["ar", "en"])
def test_blank_form(language):
    pdf = build_printable_form(INTAKE_FORM, language)
    assert pdf is not None
    assert pdf.startswith(b"%PDF")


def test_filled_form():
    record = SubmissionRecord(language="en", values={
        "universityName": "Future University",
        "projectGoals": ["Reduce staff workload", "24/7 availability"],
        "scenarios": ["Fees / Payments / Overdues"],
        "scenario-fees-identity": "yes",
        "callcenterScope": "assistant",
        "totalDailyCalls": "250",
    })
    pdf = IntakeFormPDF().build(INTAKE_FORM, "en", record)
    assert pdf.startswith(b"%PDF")


def test_field_values():
    renderer = IntakeFormPDF()
    record = SubmissionRecord(language="en", values={
        "universityName": "Future University",
        "projectGoals": ["Improve service quality"],
        "callcenterScope": "assistant",
    })
    assert renderer._field_value(INTAKE_FORM.get_control("universityName"), record, "en") == "Future University"
    goals = renderer._field_value(INTAKE_FORM.get_control("projectGoals"), record, "en").split("\n")
    assert goals[0] == "[ ] Reduce staff workload"
    assert goals[1] == "[x] Improve service quality"
    scope = renderer._field_value(INTAKE_FORM.get_control("callcenterScope"), record, "en")
    assert "[x] AI assistant beside agents" in scope
    assert "[ ] Full call center replacement" in scope


def test_blank_values():
    renderer = IntakeFormPDF()
    assert set(renderer._field_value(INTAKE_FORM.get_control("email"), None, "en")) == {"_"}


def test_build_never_raises(monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("no fonts today")

    monkeypatch.setattr(IntakeFormPDF, "build", broken)
    assert build_printable_form(INTAKE_FORM, "en") is None


def test_shape_text_leaves_english_alone():
    assert shape_text("University name", "en") == "University name"
    assert shape_text("", "ar") == ""
    assert shape_text("اسم الجامعة", "ar") != "اسم الجامعة"


def test_printable_filename():
    assert printable_filename(INTAKE_FORM, "ar", filled=False) == "university-intake-ar-blank.pdf"
    assert printable_filename(INTAKE_FORM, "en", filled=True) == "university-intake-en-filled.pdf"


def test_blank_textarea_spans_its_rows():
    renderer = IntakeFormPDF()
    short = renderer._field_value(INTAKE_FORM.get_control("otherScenarios"), None, "en")
    tall = renderer._field_value(INTAKE_FORM.get_control("scenariosDetails"), None, "en")
    assert short.count("\n") == 1
    assert tall.count("\n") == 3


def test_heading_row_has_no_value():
    scenarios_heading = INTAKE_FORM.sections[6].fields[0]
    assert IntakeFormPDF()._field_value(scenarios_heading, None, "ar") == ""
