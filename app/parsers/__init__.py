from app.parsers.read_pdf import extract_text
from app.parsers.sections import extract_section, extract_sections
from app.parsers.contact import extract_contact

__all__ = [
    "extract_text",
    "extract_section",
    "extract_sections",
    "extract_contact",
]
