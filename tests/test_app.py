from datetime import date

import pytest
from streamlit.testing.v1 import AppTest

from handlers.state_manager import LANGUAGE_STATE_KEY
from handlers.submission_handler import LAST_SUBMISSION_KEY
from templates.intake_sections import INTAKE_FORM


ARABIC_TITLES = [section.title.ar for section in INTAKE_FORM.sections]
ENGLISH_TITLES = [section.title.en for section in INTAKE_FORM.sections]


@pytest.fixture
def at(app_path):
    app = AppTest.from_file(app_path, default_timeout=60)
    app.run()
    assert not app.exception
    return app


def subheaders(app):
    return [element.value for element in app.subheader]


def markdown(app):
    return [element.value for element in app.markdown]


def click_label(app, label):
    button = next(b for b in app.button if b.label == label)
    button.click().run()
    assert not app.exception
    return app


def switch_to(app, language):
    app.button(key=f"lang_{language}").click().run()
    assert not app.exception
    return app


def test_arabic_form_mounted_by_default(at):
    assert subheaders(at) == ARABIC_TITLES
    assert at.session_state[LANGUAGE_STATE_KEY].language == "ar"
    assert at.title[0].value == INTAKE_FORM.title.ar


def test_toggle_mounts_only_english(at):
    switch_to(at, "en")
    assert subheaders(at) == ENGLISH_TITLES
    assert not set(ARABIC_TITLES) & set(subheaders(at))
    assert at.title[0].value == INTAKE_FORM.title.en


def test_last_toggle_wins(at):
    for language in ["en", "ar", "en", "en"]:
        switch_to(at, language)
    assert at.session_state[LANGUAGE_STATE_KEY].language == "en"
    assert subheaders(at) == ENGLISH_TITLES


def test_switching_back_restores_labels(at):
    titles, labels = subheaders(at), markdown(at)
    switch_to(at, "en")
    switch_to(at, "ar")
    assert subheaders(at) == titles
    assert markdown(at) == labels


def test_submit_empty_arabic_form(at):
    click_label(at, INTAKE_FORM.submit_label.ar)
    record = at.session_state[LAST_SUBMISSION_KEY]
    assert record.language == "ar"
    assert record.values == {}


def test_submit_filled_text_fields(at):
    switch_to(at, "en")
    at.text_input(key="en:universityName").input("Future University")
    at.text_input(key="en:cityCountry").input("Riyadh, Saudi Arabia")
    click_label(at, INTAKE_FORM.submit_label.en)
    record = at.session_state[LAST_SUBMISSION_KEY]
    assert record.language == "en"
    assert record.values == {
        "universityName": "Future University",
        "cityCountry": "Riyadh, Saudi Arabia",
    }


def test_submit_arabic_text(at):
    at.text_input(key="ar:universityName").input("جامعة المستقبل")
    click_label(at, INTAKE_FORM.submit_label.ar)
    assert at.session_state[LAST_SUBMISSION_KEY].values == {"universityName": "جامعة المستقبل"}


def test_checkbox_group_is_multi_valued(at):
    switch_to(at, "en")
    at.checkbox(key="en:projectGoals:reduce-workload").check()
    at.checkbox(key="en:projectGoals:service-quality").check()
    click_label(at, INTAKE_FORM.submit_label.en)
    record = at.session_state[LAST_SUBMISSION_KEY]
    assert record.values["projectGoals"] == ["Reduce staff workload", "Improve service quality"]


def test_scenario_rows_share_one_name(at):
    at.checkbox(key="ar:scenarios:fees").check()
    at.radio(key="ar:scenario-fees-identity").set_value("yes")
    click_label(at, INTAKE_FORM.submit_label.ar)
    record = at.session_state[LAST_SUBMISSION_KEY]
    assert record.values["scenarios"] == ["رسوم / سداد / متأخرات"]
    assert record.values["scenario-fees-identity"] == "yes"


def test_number_date_and_choice_fields(at):
    switch_to(at, "en")
    at.number_input(key="en:totalDailyCalls").set_value(250)
    at.date_input(key="en:deadline").set_value(date(2026, 12, 1))
    at.radio(key="en:callcenterScope").set_value("assistant")
    at.radio(key="en:security-api").set_value("no")
    click_label(at, INTAKE_FORM.submit_label.en)
    assert at.session_state[LAST_SUBMISSION_KEY].values == {
        "totalDailyCalls": "250",
        "deadline": "2026-12-01",
        "callcenterScope": "assistant",
        "security-api": "no",
    }


def test_language_variants_do_not_share_values(at):
    at.text_input(key="ar:universityName").input("جامعة المستقبل")
    switch_to(at, "en")
    assert at.text_input(key="en:universityName").value == ""


@pytest.mark.parametrize("language", ["ar", "en"])
def test_print_action_never_throws(at, language):
    switch_to(at, language)
    at.button(key=f"print_{language}").click().run()
    assert not at.exception
    printables = at.session_state["printable_forms"]
    assert printables["language"] == language


def test_print_after_submit_offers_filled_copy(at):
    switch_to(at, "en")
    at.text_input(key="en:universityName").input("Future University")
    click_label(at, INTAKE_FORM.submit_label.en)
    at.button(key="print_en").click().run()
    assert not at.exception
    printables = at.session_state["printable_forms"]
    assert printables["blank"].startswith(b"%PDF")
    assert printables["filled"].startswith(b"%PDF")


def test_new_submission_discards_stale_pdfs(at):
    switch_to(at, "en")
    at.text_input(key="en:universityName").input("Alpha University")
    click_label(at, INTAKE_FORM.submit_label.en)
    at.button(key="print_en").click().run()
    stale = at.session_state["printable_forms"]["filled"]

    at.text_input(key="en:universityName").input("Beta University")
    click_label(at, INTAKE_FORM.submit_label.en)
    assert at.session_state[LAST_SUBMISSION_KEY].values == {"universityName": "Beta University"}
    assert "printable_forms" not in at.session_state
    assert not at.download_button

    at.button(key="print_en").click().run()
    assert not at.exception
    fresh = at.session_state["printable_forms"]["filled"]
    assert fresh.startswith(b"%PDF")
    assert fresh != stale


def test_print_embeds_browser_print_script(at):
    assert not at.get("iframe")
    at.button(key="print_ar").click().run()
    frames = at.get("iframe")
    assert any("print()" in frame.proto.srcdoc for frame in frames)


def test_logo_captioned_with_brand_name(at):
    assert at.image[0].captions == ["OverZaki"]


@pytest.mark.parametrize("language", ["ar", "en"])
def test_scenarios_heading_shown(at, language):
    switch_to(at, language)
    heading = INTAKE_FORM.sections[6].fields[0].label.get(language)
    assert f"**{heading}**" in markdown(at)
