"""
Submission Handler
==================

Turns the name/value entries produced by a rendered form into a
``SubmissionRecord`` and reports it to the application log.

Entries behave like browser form data: empty values are skipped, a name
seen more than once becomes a list, and checkbox groups are always lists
so consumers never have to guess. Nothing is validated, sent or stored
beyond the session's last submission.
"""

import streamlit as st
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, MutableMapping, Optional, Tuple, Union
import json
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


LAST_SUBMISSION_KEY = "last_submission"

SubmittedValue = Union[str, List[str]]
FormEntry = Tuple[str, Any]


@dataclass
class SubmissionRecord:
    """Values submitted from one form in one language"""
    language: str
    values: Dict[str, SubmittedValue] = field(default_factory=dict)
    submitted_at: str = field(default_factory=lambda: datetime.now().isoformat())

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def get_list(self, name: str) -> List[str]:
        """Value(s) under a name as a list, empty when absent"""
        value = self.values.get(name)
        if value is None:
            return []
        return list(value) if isinstance(value, list) else [value]

    def is_empty(self) -> bool:
        return not self.values

    def to_dict(self) -> Dict[str, Any]:
        return {
            'language': self.language,
            'submitted_at': self.submitted_at,
            'values': dict(self.values),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)


def normalize_value(value: Any) -> Optional[str]:
    """
    Convert a widget value to its submitted string form.

    Returns:
        The string, or None when the control holds nothing to submit
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    text = str(value)
    return text if text.strip() else None


def collect_submission(
    entries: Iterable[FormEntry],
    language: str,
    multi_value_names: Iterable[str] = ()
) -> SubmissionRecord:
    """
    Build a submission record from rendered form entries.

    Args:
        entries: (name, value) pairs in document order
        language: Language the form was rendered in
        multi_value_names: Names that always collect into a list

    Returns:
        SubmissionRecord with empty values omitted
    """
    forced = set(multi_value_names)
    values: Dict[str, SubmittedValue] = {}

    for name, raw in entries:
        value = normalize_value(raw)
        if value is None:
            continue
        if name in values:
            existing = values[name]
            if isinstance(existing, list):
                existing.append(value)
            else:
                values[name] = [existing, value]
        elif name in forced:
            values[name] = [value]
        else:
            values[name] = value

    return SubmissionRecord(language=language, values=values)


def report_submission(record: SubmissionRecord):
    """Report a submission on the developer channel"""
    suffix = "" if record.language == "ar" else f" ({record.language.upper()})"
    logger.info(
        f"Submitted intake form{suffix}: "
        f"{json.dumps(record.values, ensure_ascii=False, sort_keys=False)}"
    )


def handle_submission(
    entries: Iterable[FormEntry],
    language: str,
    multi_value_names: Iterable[str] = (),
    session: Optional[MutableMapping[str, Any]] = None
) -> SubmissionRecord:
    """Collect, report and remember a submission for this session"""
    record = collect_submission(entries, language, multi_value_names)
    report_submission(record)
    scope = st.session_state if session is None else session
    scope[LAST_SUBMISSION_KEY] = record
    return record


def get_last_submission(
    language: Optional[str] = None,
    session: Optional[MutableMapping[str, Any]] = None
) -> Optional[SubmissionRecord]:
    """Last record submitted in this session, optionally only for one language"""
    scope = st.session_state if session is None else session
    record = scope.get(LAST_SUBMISSION_KEY)
    if not isinstance(record, SubmissionRecord):
        return None
    if language is not None and record.language != language:
        return None
    return record
