"""
University AI Assistant Intake Form
===================================

The thirteen sections of the requirements questionnaire sent to
universities before a technical and commercial proposal is prepared.

Every option list is declared once with a language-neutral key, so the
Arabic and English renditions always share structure and cardinality.
Checkbox options submit the label the user saw; per-item fields
(departments, languages, knowledge-base items, scenarios) derive their
names from the option key.
"""

from typing import Tuple

from .form_schema import (
    FieldDescriptor,
    FieldKind,
    FormDefinition,
    LocalizedText as T,
    Option,
    SectionDescriptor,
    group,
    heading,
    number,
    percent,
    text,
    textarea,
    yes_no,
)


# ---------------------------------------------------------------------------
# Option lists
# ---------------------------------------------------------------------------

PROJECT_GOALS: Tuple[Option, ...] = (
    Option("reduce-workload", T("تقليل ضغط الموظفين", "Reduce staff workload")),
    Option("service-quality", T("رفع جودة الخدمة", "Improve service quality")),
    Option("always-available", T("توفر 24/7", "24/7 availability")),
    Option("waiting-time", T("تقليل وقت الانتظار", "Reduce waiting time")),
    Option("standard-responses", T("توحيد الردود", "Standardize responses")),
)

CALLCENTER_SCOPES: Tuple[Option, ...] = (
    Option("full-replacement",
           T("استبدال الكول سنتر بالكامل", "Full call center replacement"),
           value="full-replacement"),
    Option("assistant",
           T("مساعد ذكي بجانب الموظفين", "AI assistant beside agents"),
           value="assistant"),
)

DEPARTMENTS: Tuple[Option, ...] = (
    Option("admissions", T("القبول", "Admissions")),
    Option("finance", T("المالية", "Finance")),
    Option("student-affairs", T("شؤون الطلبة", "Student Affairs")),
    Option("graduate-studies", T("الدراسات العليا", "Graduate Studies")),
    Option("public-relations", T("العلاقات العامة", "Public Relations")),
    Option("community-service", T("خدمة المجتمع", "Community Service")),
    Option("staff-affairs", T("شؤون الموظفين", "HR / Staff Affairs")),
    Option("it", T("IT", "IT")),
    Option("library", T("المكتبة", "Library")),
    Option("examinations", T("الامتحانات", "Examinations")),
    Option("facilities", T("المرافق", "Facilities")),
    Option("security-safety", T("الأمن والسلامة", "Security & Safety")),
    Option("clinic", T("العيادة الطبية", "Clinic / Medical Center")),
    Option("advisory-center", T("مركز الاستشارات", "Advisory Center")),
    Option("language-center", T("مركز اللغات", "Language Center")),
    Option("training-center", T("مركز التدريب", "Training Center")),
    Option("career-center", T("مركز التوظيف", "Career Center")),
    Option("innovation-center", T("مركز الابتكار", "Innovation Center")),
    Option("quality-center", T("مركز الجودة", "Quality Center")),
    Option("research-center", T("مركز البحث العلمي", "Research Center")),
)

LANGUAGES: Tuple[Option, ...] = (
    Option("arabic", T("العربية", "Arabic")),
    Option("english", T("الإنجليزية", "English")),
    Option("french", T("الفرنسية", "French")),
    Option("turkish", T("التركية", "Turkish")),
    Option("hindi", T("الهندية", "Hindi")),
    Option("urdu", T("الأردية", "Urdu")),
)

CHANNELS: Tuple[Option, ...] = (
    Option("voice-ivr", T("صوت فقط (IVR ذكي)", "Voice only (smart IVR)")),
    Option("voice-sms", T("صوت + SMS", "Voice + SMS")),
    Option("voice-whatsapp", T("صوت + WhatsApp", "Voice + WhatsApp")),
    Option("voice-email", T("صوت + Email", "Voice + Email")),
    Option("voice-web", T("صوت + بوابة إلكترونية / Chat Widget",
                          "Voice + Web portal / Chat widget")),
)

SCENARIOS: Tuple[Option, ...] = (
    Option("fees", T("رسوم / سداد / متأخرات", "Fees / Payments / Overdues")),
    Option("registration", T("تسجيل مواد / حذف وإضافة", "Course registration / Add & Drop")),
    Option("admissions", T("قبول / حالة طلب", "Admissions / Application status")),
    Option("ticket-follow-up", T("متابعة معاملة / رقم طلب", "Follow-up on a request / ticket")),
    Option("certificates", T("طلب شهادة / إفادة", "Certificates / Letters")),
    Option("appointments", T("مواعيد (عيادة/استشارات/مقابلات)",
                             "Appointments (clinic / advisory / interviews)")),
    Option("exams", T("امتحانات / جداول / قاعات", "Exams / schedules / halls")),
    Option("complaints", T("شكاوى / تصعيد", "Complaints / escalation")),
    Option("tech-support", T("دعم فني (L1)", "Technical support (L1)")),
)

KNOWLEDGE_BASE_ITEMS: Tuple[Option, ...] = (
    Option("faq", T("الأسئلة الشائعة FAQ", "FAQ")),
    Option("student-handbook", T("دليل الطالب", "Student handbook")),
    Option("academic-calendar", T("التقويم الأكاديمي", "Academic calendar")),
    Option("admission-requirements", T("شروط القبول", "Admission requirements")),
    Option("tuition-fees", T("الرسوم الدراسية", "Tuition fees")),
    Option("academic-programs", T("البرامج الأكاديمية", "Academic programs")),
    Option("policies", T("السياسات واللوائح", "Policies and regulations")),
    Option("staff-directory", T("دليل الموظفين", "Staff directory")),
    Option("system-links", T("روابط الأنظمة", "System links")),
)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def _department_row(dept: Option) -> FieldDescriptor:
    return group(
        f"dept-{dept.key}",
        dept.label,
        number(f"dept-{dept.key}-daily", T("مكالمات/يوم", "Calls / day")),
        percent(f"dept-{dept.key}-offhours", T("خارج الدوام %", "After-hours %")),
    )


def _scenario_row(scenario: Option) -> FieldDescriptor:
    return group(
        f"scenario-{scenario.key}",
        scenario.label,
        FieldDescriptor(
            name="scenarios",
            kind=FieldKind.CHECKBOX,
            label=scenario.label,
            options=(scenario,),
        ),
        yes_no(f"scenario-{scenario.key}-identity",
               T("يحتاج تحقق هوية؟", "Requires identity verification?")),
    )


GENERAL_INFORMATION = SectionDescriptor(
    key="general",
    title=T("1) معلومات عامة", "1) General Information"),
    fields=(
        text("universityName", T("اسم الجامعة", "University name"), required=True,
             placeholder=T("مثال: جامعة المستقبل", "e.g. Future University")),
        text("cityCountry", T("المدينة / الدولة", "City / Country"), required=True,
             placeholder=T("مثال: الرياض، السعودية", "e.g. Riyadh, Saudi Arabia")),
        text("contactName", T("اسم الشخص المسؤول", "Contact person name"), required=True),
        text("jobTitle", T("المسمى الوظيفي", "Job title"), required=True),
        FieldDescriptor(
            name="phone", kind=FieldKind.TEL,
            label=T("رقم التواصل", "Phone number"), required=True,
            placeholder=T("مثال: +966xxxxxxxxx", "e.g. +966xxxxxxxxx"),
        ),
        FieldDescriptor(
            name="email", kind=FieldKind.EMAIL,
            label=T("البريد الإلكتروني", "Email"), required=True,
        ),
        text("bestTimeToContact", T("أفضل وقت للتواصل", "Best time to contact"),
             placeholder=T("مثال: 10 صباحًا – 2 ظهرًا", "e.g. 10 AM – 2 PM")),
        FieldDescriptor(
            name="deadline", kind=FieldKind.DATE,
            label=T("هل يوجد موعد نهائي لاستلام العرض؟ (تاريخ)",
                    "Deadline to receive proposal (date)"),
        ),
    ),
)

PROJECT_OBJECTIVE = SectionDescriptor(
    key="objective",
    title=T("2) الهدف من المشروع", "2) Project Objective"),
    fields=(
        FieldDescriptor(
            name="projectGoals", kind=FieldKind.CHECKBOX_GROUP,
            label=T("ما الهدف الرئيسي؟", "What is the primary objective?"),
            hint=T("يمكن اختيار أكثر من هدف إن رغبت.",
                   "You can select more than one objective."),
            options=PROJECT_GOALS,
        ),
        FieldDescriptor(
            name="callcenterScope", kind=FieldKind.RADIO,
            label=T("هل المطلوب استبدال كول سنتر بالكامل أم مساعد ذكي بجانب الموظفين؟",
                    "Do you want to fully replace the call center or add an AI assistant beside agents?"),
            options=CALLCENTER_SCOPES,
        ),
        textarea("mvpScope", T("ما نطاق المرحلة الأولى (MVP)؟",
                               "What is the scope of phase one (MVP)?"),
                 hint=T("مثال: القبول + المالية فقط، أو أقسام محددة.",
                        "Example: Admissions + Finance only, or selected departments.")),
    ),
)

DEPARTMENT_CALL_VOLUME = SectionDescriptor(
    key="departments",
    title=T("3) الأقسام المطلوبة + حجم المكالمات لكل قسم",
            "3) Required Departments + Call Volume per Department"),
    description=T(
        "يرجى إدخال عدد المكالمات اليومية لكل قسم + نسبة المكالمات المتوقعة خارج أوقات الدوام.",
        "Please enter the average daily calls per department and the percentage "
        "of calls expected outside working hours.",
    ),
    fields=tuple(_department_row(dept) for dept in DEPARTMENTS) + (
        textarea("otherDepartments", T("أقسام أخرى (اذكرها)", "Other departments (please list)"),
                 rows=2,
                 placeholder=T("مثال: مركز ريادة الأعمال، مركز الاختبارات الدولية...",
                               "e.g. Entrepreneurship Center, International Testing Center...")),
    ),
)

OVERALL_CALL_VOLUME = SectionDescriptor(
    key="volume",
    title=T("4) حجم المكالمات الكلي", "4) Overall Call Volume"),
    fields=(
        number("totalDailyCalls", T("متوسط عدد المكالمات اليومية (كل الجامعة)",
                                    "Average total daily calls (all university)")),
        number("peakDailyCalls", T("أعلى ذروة للمكالمات (Peak/يوم)",
                                   "Peak daily calls (max in a single day)")),
        text("peakHours", T("ساعات الذروة", "Peak hours"),
             placeholder=T("مثال: 10–12 صباحًا، 1–3 ظهرًا", "e.g. 10–12 AM, 1–3 PM")),
        number("currentAgents", T("عدد موظفي الكول سنتر الحاليين",
                                  "Current number of call center agents")),
        number("avgCallDuration", T("متوسط مدة المكالمة الحالية (إن وجد) - دقيقة",
                                    "Average handling time per call (if known) - minutes")),
        percent("missedCallsPercent", T("نسبة المكالمات الفائتة/المعلقة (إن وجد) %",
                                        "Missed / abandoned calls (if known) %")),
    ),
)

REQUIRED_LANGUAGES = SectionDescriptor(
    key="languages",
    title=T("5) اللغات المطلوبة", "5) Required Languages"),
    fields=tuple(
        percent(f"lang-{lang.key}", T(f"{lang.label.ar} (%)", f"{lang.label.en} (%)"))
        for lang in LANGUAGES
    ) + (
        group(
            "otherLanguage",
            T("لغات أخرى", "Other languages"),
            text("otherLanguageName", T("اسم اللغة", "Language name"),
                 placeholder=T("اسم اللغة", "Language name")),
            percent("otherLanguagePercent", T("%", "%"), placeholder=T("%", "%")),
        ),
    ),
)

REQUIRED_CHANNELS = SectionDescriptor(
    key="channels",
    title=T("6) نوع القنوات المطلوبة", "6) Required Channels"),
    fields=(
        FieldDescriptor(
            name="channels", kind=FieldKind.CHECKBOX_GROUP,
            label=T("القنوات المطلوبة", "Preferred channels"),
            options=CHANNELS,
        ),
        text("channelsOther", T("أخرى", "Other"),
             placeholder=T("اذكر القنوات الإضافية إن وجدت", "List any additional channels")),
        text("numbersPreference",
             T("هل تريدون رقم موحد واحد أم أرقام متعددة لكل قسم؟",
               "Do you prefer a single unified number or multiple numbers per department?"),
             placeholder=T("مثال: رقم موحد واحد + تحويلات داخلية",
                           "e.g. one unified number with internal extensions")),
    ),
)

CALL_SCENARIOS = SectionDescriptor(
    key="scenarios",
    title=T("7) سيناريوهات المكالمات (Use Cases)", "7) Call Scenarios (Use Cases)"),
    description=T(
        "حدد السيناريوهات المطلوبة وهل تحتاج تحقق هوية، واذكر أهم الأسئلة إن أمكن.",
        "Specify the scenarios you need, whether identity verification is required, "
        "and list key questions when possible.",
    ),
    fields=(
        heading("scenarios-heading", T("السيناريوهات المطلوبة + هل تحتاج تحقق هوية؟",
                                      "Required scenarios + whether identity verification is needed")),
    ) + tuple(_scenario_row(scenario) for scenario in SCENARIOS) + (
        textarea("otherScenarios", T("سيناريوهات أخرى", "Other scenarios"), rows=2,
                 placeholder=T("اذكر أي سيناريوهات إضافية مطلوبة",
                               "List any additional scenarios you require")),
        textarea("scenariosDetails",
                 T("لكل سيناريو: هل الرد معلومة عامة أم يحتاج بيانات طالب/موظف؟ وما أهم 20 سؤال؟",
                   "For each scenario: is the answer general information or does it require "
                   "student/staff data? What are the top 20 questions?"),
                 rows=4,
                 placeholder=T("مثال: سيناريو الرسوم يحتاج رقم جامعي + تفاصيل الرصيد، وأهم الأسئلة هي...",
                               "Example: Fees scenario requires student ID + balance details. "
                               "Key questions are...")),
    ),
)

KNOWLEDGE_BASE = SectionDescriptor(
    key="knowledge-base",
    title=T("8) البيانات المتاحة لتغذية النظام (Knowledge Base)",
            "8) Available Data for Knowledge Base"),
    fields=tuple(yes_no(f"kb-{item.key}", item.label) for item in KNOWLEDGE_BASE_ITEMS) + (
        group(
            "kb-files",
            T("ملفات (PDF/Excel/Word)", "Files (PDF/Excel/Word)"),
            yes_no("kb-files-exist", T("متوفرة؟", "Available?")),
            number("kb-files-count", T("كم ملف؟", "How many?"),
                   placeholder=T("كم ملف؟", "How many?")),
        ),
        textarea("kb-other", T("أخرى", "Other sources"), rows=2),
        text("kb-languageUpdate", T("لغة المحتوى وتحديثه", "Content language and update frequency"),
             placeholder=T("مثال: عربي/إنجليزي ويتم التحديث شهريًا",
                           "e.g. Arabic/English and updated monthly")),
    ),
)

EXISTING_SYSTEMS = SectionDescriptor(
    key="systems",
    title=T("9) الأنظمة الموجودة داخل الجامعة (Integrations)",
            "9) Existing University Systems (Integrations)"),
    fields=(
        text("systems-academic", T("الأنظمة الأكاديمية", "Academic systems"),
             placeholder=T("مثال: Banner, PeopleSoft, EduWave, نظام داخلي...",
                           "e.g. Banner, PeopleSoft, EduWave, in-house system...")),
        text("systems-callcenter", T("أنظمة الكول سنتر / السنترال", "Call center / PBX systems"),
             placeholder=T("مثال: Avaya, Cisco, Asterisk, 3CX...",
                           "e.g. Avaya, Cisco, Asterisk, 3CX...")),
        text("systems-crm", T("CRM", "CRM")),
        textarea("systems-other", T("أنظمة إضافية (LMS / ERP / بوابة الطالب ...)",
                                    "Additional systems (LMS / ERP / Student portal...)"), rows=2),
    ),
)

ACCESS_AND_SECURITY = SectionDescriptor(
    key="security",
    title=T("10) صلاحيات الوصول والقيود الأمنية", "10) Access and Security Constraints"),
    fields=(
        yes_no("security-api", T("API", "API access")),
        yes_no("security-webhooks", T("Webhooks", "Webhooks")),
        yes_no("security-readonly-db", T("قاعدة بيانات للقراءة فقط", "Read-only database")),
        yes_no("security-sso", T("SSO (Azure AD / Google / LDAP)", "SSO (Azure AD / Google / LDAP)")),
        textarea("security-constraints",
                 T("قيود أمنية / امتثال إضافية", "Additional security / compliance requirements"),
                 placeholder=T("مثال: استضافة داخلية، تشفير، سجلات تدقيق، منع خروج البيانات...",
                               "e.g. on-prem hosting, encryption, audit logs, data residency...")),
    ),
)

PRICING = SectionDescriptor(
    key="pricing",
    title=T("11) أسئلة تسعير أساسية", "11) Basic Pricing Questions"),
    fields=(
        text("pricing-deployment", T("هل تريدون الحل Cloud أم On-Premise داخل الجامعة؟",
                                     "Preferred deployment: Cloud or on-premise (inside university)?")),
        number("pricing-campuses", T("عدد الفروع / الحرم الجامعي إن وجد",
                                     "Number of campuses / branches (if any)")),
        yes_no("pricing-247", T("هل المطلوب 24/7؟", "Is 24/7 operation required?")),
        percent("pricing-escalation-percent", T("نسبة التحويل لموظف (Escalation) المتوقعة %",
                                                "Expected escalation rate to human agents %")),
        text("pricing-recording", T("هل تريدون تسجيل المكالمات والاحتفاظ بها؟ (اذكر المدة)",
                                    "Do you require call recording? For how long?"),
             placeholder=T("مثال: نعم، 90 يوم", "e.g. Yes, 90 days")),
        yes_no("pricing-dashboard", T("هل مطلوب لوحة تحكم وتقارير؟ (يومي/أسبوعي/شهري + KPIs)",
                                      "Do you need dashboard and reports? (daily/weekly/monthly + KPIs)")),
        yes_no("pricing-sla", T("هل مطلوب SLA؟ (مثلاً 99.9%)", "Do you require an SLA? (e.g. 99.9%)")),
    ),
)

USER_EXPERIENCE = SectionDescriptor(
    key="user-experience",
    title=T("12) تجربة المستخدم (Voice & Flow)", "12) User Experience (Voice & Flow)"),
    fields=(
        yes_no("ux-greeting-script", T("هل يوجد سكربت ترحيبي رسمي؟",
                                       "Do you already have an official greeting script?")),
        text("ux-voice-type", T("نوع الصوت المطلوب", "Preferred voice type"),
             placeholder=T("مثال: عربي فصيح / لهجة محلية (خليجية، شامية...)",
                           "e.g. Modern Standard Arabic / local dialect (Gulf, Levant, ...)")),
        text("ux-ivr-type", T("خيارات IVR تقليدية + ذكاء اصطناعي أم ذكاء فقط؟",
                              "Traditional IVR options + AI, or AI only?")),
        yes_no("ux-ticket-number", T("هل تريدون رقم تذكرة تلقائي للشكاوى والمتابعة؟",
                                     "Do you want automatic ticket numbers for complaints and follow-up?")),
    ),
)

ADDITIONAL_NOTES = SectionDescriptor(
    key="notes",
    title=T("13) ملاحظات إضافية", "13) Additional Notes"),
    fields=(
        textarea("additional-notes", T("أي ملاحظات أو متطلبات إضافية",
                                       "Any additional notes or requirements"), rows=4),
    ),
)


INTAKE_FORM = FormDefinition(
    key="university-intake",
    title=T("نموذج جمع معلومات مشروع المساعد الذكي الجامعي",
            "University Smart Assistant Project Intake Form"),
    intro=T(
        "يرجى تعبئة الحقول التالية بدقة قدر الإمكان حتى نتمكن من إعداد "
        "عرض فني ومالي مناسب لاحتياجات الجامعة.",
        "Please fill in the following fields as accurately as possible so we can "
        "prepare a tailored technical and commercial proposal for your university.",
    ),
    sections=(
        GENERAL_INFORMATION,
        PROJECT_OBJECTIVE,
        DEPARTMENT_CALL_VOLUME,
        OVERALL_CALL_VOLUME,
        REQUIRED_LANGUAGES,
        REQUIRED_CHANNELS,
        CALL_SCENARIOS,
        KNOWLEDGE_BASE,
        EXISTING_SYSTEMS,
        ACCESS_AND_SECURITY,
        PRICING,
        USER_EXPERIENCE,
        ADDITIONAL_NOTES,
    ),
    submit_label=T("إرسال", "Submit"),
    print_label=T("تحميل كنموذج PDF", "Download as PDF form"),
    footer_note=T(
        "عند الإرسال سيقوم الفريق بمراجعة البيانات والتواصل معكم لتحضير العرض الأنسب. "
        "يمكنكم أيضًا حفظ النموذج كملف PDF وملؤه لاحقًا من زر \"تحميل كنموذج PDF\".",
        "Once you complete this form, our team will review the information and contact "
        "you with a tailored technical and commercial proposal. You can also save the "
        "form as a PDF and fill it later using the \"Download as PDF form\" button.",
    ),
).validate()
