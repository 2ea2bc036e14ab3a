from templates.form_schema import FieldKind
from templates.intake_sections import (
    CHANNELS,
    DEPARTMENTS,
    INTAKE_FORM,
    KNOWLEDGE_BASE_ITEMS,
    LANGUAGES,
    PROJECT_GOALS,
    SCENARIOS,
)


def test_thirteen_numbered_sections():
    assert len(INTAKE_FORM.sections) == 13
    for index, section in enumerate(INTAKE_FORM.sections, start=1):
        assert section.title.ar.startswith(f"{index})")
        assert section.title.en.startswith(f"{index})")


def test_option_list_sizes():
    assert len(DEPARTMENTS) == 20
    assert len(LANGUAGES) == 6
    assert len(CHANNELS) == 5
    assert len(SCENARIOS) == 9
    assert len(KNOWLEDGE_BASE_ITEMS) == 9
    assert len(PROJECT_GOALS) == 5


def test_option_keys_unique_per_list():
    for options in (DEPARTMENTS, LANGUAGES, CHANNELS, SCENARIOS, KNOWLEDGE_BASE_ITEMS, PROJECT_GOALS):
        keys = [option.key for option in options]
        assert len(keys) == len(set(keys))


def test_every_text_is_present_in_both_languages():
    for section in INTAKE_FORM.sections:
        assert section.title.ar and section.title.en
        for control in (c for f in section.fields for c in f.controls()):
            assert control.label.ar and control.label.en
            for option in control.options:
                assert option.label.ar and option.label.en


def test_definition_validates():
    assert INTAKE_FORM.validate() is INTAKE_FORM


def test_known_field_names():
    names = INTAKE_FORM.field_names()
    for expected in (
        "universityName", "cityCountry", "contactName", "jobTitle", "phone", "email",
        "bestTimeToContact", "deadline", "projectGoals", "callcenterScope", "mvpScope",
        "dept-admissions-daily", "dept-research-center-offhours", "otherDepartments",
        "totalDailyCalls", "missedCallsPercent", "lang-arabic", "otherLanguageName",
        "otherLanguagePercent", "channels", "channelsOther", "numbersPreference",
        "scenarios", "scenario-fees-identity", "otherScenarios", "scenariosDetails",
        "kb-faq", "kb-files-exist", "kb-files-count", "kb-other", "kb-languageUpdate",
        "systems-academic", "systems-crm", "security-api", "security-sso",
        "security-constraints", "pricing-deployment", "pricing-247",
        "pricing-escalation-percent", "ux-greeting-script", "ux-ticket-number",
        "additional-notes",
    ):
        assert expected in names


def test_general_information_required_fields():
    general = INTAKE_FORM.sections[0]
    required = [field.name for field in general.fields if field.required]
    assert required == ["universityName", "cityCountry", "contactName", "jobTitle", "phone", "email"]


def test_percentage_fields_capped_at_100():
    for name in ("missedCallsPercent", "lang-english", "pricing-escalation-percent",
                 "dept-finance-offhours"):
        control = INTAKE_FORM.get_control(name)
        assert control.kind == FieldKind.NUMBER
        assert control.max_value == 100


def test_checkbox_groups_are_multi_valued():
    multi = set(INTAKE_FORM.multi_value_names())
    assert multi == {"projectGoals", "channels", "scenarios"}


def test_callcenter_scope_values_are_language_neutral():
    control = INTAKE_FORM.get_control("callcenterScope")
    assert [option.submitted_value("ar") for option in control.options] == ["full-replacement", "assistant"]
    assert [option.submitted_value("en") for option in control.options] == ["full-replacement", "assistant"]


def test_scenarios_section_opens_with_heading():
    first = INTAKE_FORM.sections[6].fields[0]
    assert first.kind == FieldKind.HEADING
    assert first.label.en == "Required scenarios + whether identity verification is needed"
    assert first.label.ar == "السيناريوهات المطلوبة + هل تحتاج تحقق هوية؟"
