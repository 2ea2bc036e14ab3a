"""
PDF Handler - Printable intake form
Renders a form definition, blank or filled, as an A4 PDF for offline use
"""

import os
import logging
from io import BytesIO
from typing import Dict, List, Optional, Tuple
from datetime import datetime
from xml.sax.saxutils import escape

import arabic_reshaper
from bidi.algorithm import get_display
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from handlers.submission_handler import SubmissionRecord
from templates.form_schema import FieldDescriptor, FieldKind, FormDefinition, Option

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


FONT_NAME = "IntakeSans"
FONT_NAME_BOLD = "IntakeSans-Bold"
FALLBACK_FONT = "Helvetica"
FALLBACK_FONT_BOLD = "Helvetica-Bold"

# Fonts with Arabic glyphs, regular then bold
SYSTEM_FONT_CANDIDATES: List[Tuple[str, str]] = [
    ('/usr/share/fonts/truetype/noto/NotoNaskhArabic-Regular.ttf',
     '/usr/share/fonts/truetype/noto/NotoNaskhArabic-Bold.ttf'),
    ('/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
     '/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf'),
    ('/usr/share/fonts/truetype/freefont/FreeSerif.ttf',
     '/usr/share/fonts/truetype/freefont/FreeSerifBold.ttf'),
    ('/Library/Fonts/Arial Unicode.ttf', '/Library/Fonts/Arial Unicode.ttf'),
    ('C:/Windows/Fonts/arial.ttf', 'C:/Windows/Fonts/arialbd.ttf'),
]

BLANK_LINE = "_" * 32
CHECKED = "[x]"
UNCHECKED = "[ ]"
ACCENT = colors.HexColor('#047857')


def register_fonts(font_path: str = "", bold_path: str = "") -> Tuple[str, str]:
    """
    Register a TTF font able to draw Arabic.

    Tries the configured paths first, then well-known system locations.

    Returns:
        (regular, bold) font names, Helvetica when nothing usable exists
    """
    registered = pdfmetrics.getRegisteredFontNames()
    if FONT_NAME in registered and FONT_NAME_BOLD in registered:
        return FONT_NAME, FONT_NAME_BOLD

    candidates = []
    if font_path:
        candidates.append((font_path, bold_path or font_path))
    candidates.extend(SYSTEM_FONT_CANDIDATES)

    for regular, bold in candidates:
        if not os.path.exists(regular):
            continue
        try:
            pdfmetrics.registerFont(TTFont(FONT_NAME, regular))
            bold_file = bold if os.path.exists(bold) else regular
            pdfmetrics.registerFont(TTFont(FONT_NAME_BOLD, bold_file))
            logger.info(f"Registered PDF font: {regular}")
            return FONT_NAME, FONT_NAME_BOLD
        except Exception as e:
            logger.warning(f"Could not register font {regular}: {e}")

    logger.warning("No Arabic-capable font found, falling back to Helvetica")
    return FALLBACK_FONT, FALLBACK_FONT_BOLD


def shape_text(text: str, language: str) -> str:
    """Reshape and reorder Arabic text for left-to-right PDF drawing"""
    if not text:
        return ""
    if language != "ar":
        return text
    return get_display(arabic_reshaper.reshape(text))


class IntakeFormPDF:
    """Render a FormDefinition as a printable PDF"""

    def __init__(self, font_path: str = "", bold_path: str = ""):
        """
        Initialize the renderer

        Args:
            font_path: Optional TTF used for all text
            bold_path: Optional bold companion of font_path
        """
        self.font, self.font_bold = register_fonts(font_path, bold_path)

    def _styles(self, language: str) -> Dict[str, ParagraphStyle]:
        styles = getSampleStyleSheet()
        align = TA_RIGHT if language == "ar" else TA_LEFT
        return {
            'title': ParagraphStyle(
                'IntakeTitle', parent=styles['Heading1'], fontName=self.font_bold,
                fontSize=17, leading=24, alignment=TA_CENTER, textColor=ACCENT, spaceAfter=8
            ),
            'intro': ParagraphStyle(
                'IntakeIntro', parent=styles['Normal'], fontName=self.font,
                fontSize=9.5, leading=14, alignment=TA_CENTER, spaceAfter=6
            ),
            'section': ParagraphStyle(
                'IntakeSection', parent=styles['Heading2'], fontName=self.font_bold,
                fontSize=13, leading=18, alignment=align, textColor=ACCENT,
                spaceBefore=10, spaceAfter=4
            ),
            'description': ParagraphStyle(
                'IntakeDescription', parent=styles['Normal'], fontName=self.font,
                fontSize=8.5, leading=12, alignment=align, textColor=colors.HexColor('#555555'),
                spaceAfter=4
            ),
            'label': ParagraphStyle(
                'IntakeLabel', parent=styles['Normal'], fontName=self.font_bold,
                fontSize=9, leading=13, alignment=align
            ),
            'value': ParagraphStyle(
                'IntakeValue', parent=styles['Normal'], fontName=self.font,
                fontSize=9, leading=13, alignment=align
            ),
        }

    def _p(self, text: str, style: ParagraphStyle, language: str) -> Paragraph:
        lines = [escape(shape_text(line, language)) for line in text.split("\n")]
        return Paragraph("<br/>".join(lines), style)

    @staticmethod
    def _option_lines(options: Tuple[Option, ...], selected: List[str], language: str) -> List[str]:
        lines = []
        for option in options:
            mark = CHECKED if option.submitted_value(language) in selected else UNCHECKED
            lines.append(f"{mark} {option.label.get(language)}")
        return lines

    def _control_value(self, control: FieldDescriptor, record: Optional[SubmissionRecord],
                       language: str) -> str:
        selected = record.get_list(control.name) if record else []

        if control.kind in (FieldKind.CHECKBOX_GROUP, FieldKind.CHECKBOX,
                            FieldKind.RADIO, FieldKind.YES_NO):
            separator = "   " if control.kind == FieldKind.YES_NO else "\n"
            return separator.join(self._option_lines(control.options, selected, language))

        if selected:
            return ", ".join(selected)
        if control.kind == FieldKind.TEXTAREA:
            return "\n".join([BLANK_LINE] * control.rows)
        return BLANK_LINE

    def _field_value(self, descriptor: FieldDescriptor, record: Optional[SubmissionRecord],
                     language: str) -> str:
        if descriptor.kind == FieldKind.HEADING:
            return ""
        if descriptor.kind != FieldKind.GROUP:
            return self._control_value(descriptor, record, language)

        lines = []
        for child in descriptor.children:
            if child.kind == FieldKind.CHECKBOX:
                # the row label already names the option
                selected = record.get_list(child.name) if record else []
                chosen = any(option.submitted_value(language) in selected for option in child.options)
                value = CHECKED if chosen else UNCHECKED
            else:
                value = self._control_value(child, record, language)
            lines.append(f"{child.label.get(language)}: {value}")
        return "\n".join(lines)

    def build(self, definition: FormDefinition, language: str,
              record: Optional[SubmissionRecord] = None) -> bytes:
        """
        Build the PDF

        Args:
            definition: Form to render
            language: 'ar' or 'en'
            record: Submitted values, None for a blank form

        Returns:
            PDF file content
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=1.6 * cm,
            leftMargin=1.6 * cm,
            topMargin=1.5 * cm,
            bottomMargin=1.5 * cm,
            title=definition.title.get(language),
        )
        styles = self._styles(language)
        rtl = definition.direction(language) == "rtl"
        label_width, value_width = 7.5 * cm, 10.3 * cm

        elements = [
            self._p(definition.title.get(language), styles['title'], language),
            self._p(definition.intro.get(language), styles['intro'], language),
        ]
        stamp = record.submitted_at if record else datetime.now().isoformat(timespec='minutes')
        elements.append(self._p(stamp, styles['intro'], "en"))
        elements.append(Spacer(1, 0.3 * cm))

        for section in definition.sections:
            elements.append(self._p(section.title.get(language), styles['section'], language))
            if section.description:
                elements.append(self._p(section.description.get(language), styles['description'], language))

            rows = []
            for descriptor in section.fields:
                label = descriptor.label.get(language) + (" *" if descriptor.required else "")
                label_cell = self._p(label, styles['label'], language)
                value_cell = self._p(self._field_value(descriptor, record, language),
                                     styles['value'], language)
                rows.append([value_cell, label_cell] if rtl else [label_cell, value_cell])

            widths = [value_width, label_width] if rtl else [label_width, value_width]
            table = Table(rows, colWidths=widths)
            table.setStyle(TableStyle([
                ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor('#a7f3d0')),
                ('VALIGN', (0, 0), (-1, -1), 'TOP'),
                ('LEFTPADDING', (0, 0), (-1, -1), 6),
                ('RIGHTPADDING', (0, 0), (-1, -1), 6),
                ('TOPPADDING', (0, 0), (-1, -1), 4),
                ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
            ]))
            elements.append(table)

        elements.append(Spacer(1, 0.4 * cm))
        elements.append(self._p(definition.footer_note.get(language), styles['description'], language))

        doc.build(elements)
        return buffer.getvalue()


def build_printable_form(
    definition: FormDefinition,
    language: str,
    record: Optional[SubmissionRecord] = None,
    font_path: str = "",
    bold_path: str = ""
) -> Optional[bytes]:
    """
    Build the printable PDF without ever raising.

    Returns:
        PDF bytes, or None when rendering failed (logged)
    """
    try:
        return IntakeFormPDF(font_path, bold_path).build(definition, language, record)
    except Exception as e:
        logger.error(f"Error building printable form ({language}): {e}")
        return None


def printable_filename(definition: FormDefinition, language: str, filled: bool) -> str:
    kind = "filled" if filled else "blank"
    return f"{definition.key}-{language}-{kind}.pdf"
