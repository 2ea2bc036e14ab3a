from components.field import TEXTAREA_MIN_HEIGHT, textarea_height
from templates.intake_sections import INTAKE_FORM


def test_textarea_height_grows_with_rows():
    assert textarea_height(2) == TEXTAREA_MIN_HEIGHT
    assert textarea_height(2) < textarea_height(3) < textarea_height(4)


def test_textarea_height_never_below_streamlit_floor():
    assert textarea_height(0) == TEXTAREA_MIN_HEIGHT
    assert textarea_height(1) == TEXTAREA_MIN_HEIGHT


def test_form_textareas_differ_in_height():
    short = INTAKE_FORM.get_control("otherScenarios")
    tall = INTAKE_FORM.get_control("scenariosDetails")
    assert textarea_height(short.rows) < textarea_height(tall.rows)
