from typing import Pattern

from app.constants import EMAIL_PATTERN, LINKEDIN_PATTERN, NOT_FOUND, PHONE_PATTERN
from app.models import ContactInfo


def _first_match(pattern: Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(0) if match else NOT_FOUND


def extract_contact(text: str) -> ContactInfo:
    return ContactInfo(
        email=_first_match(EMAIL_PATTERN, text),
        phone=_first_match(PHONE_PATTERN, text),
        linkedin=_first_match(LINKEDIN_PATTERN, text),
    )
