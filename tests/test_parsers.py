import pytest

from app.constants import NOT_FOUND
from app.errors import ExtractionError
from app.parsers import extract_contact, extract_section, extract_sections, extract_text


# --- extract_text ---


def test_extract_text_returns_page_text(pdf_factory):
    pdf = pdf_factory("Jane Doe\njane@example.com\n555-123-4567")

    text = extract_text(pdf)

    assert "Jane Doe" in text
    assert "jane@example.com" in text
    assert "555-123-4567" in text


def test_extract_text_joins_pages(pdf_factory):
    text = extract_text(pdf_factory("First page", "Second page"))

    assert text.index("First page") < text.index("Second page")


def test_extracted_text_behaves_like_the_source_string(pdf_factory):
    source = "Contact: jane@example.com, 555-123-4567"

    text = extract_text(pdf_factory(source))

    assert text.strip()
    assert extract_contact(text) == extract_contact(source)


def test_extract_text_rejects_non_pdf_bytes():
    with pytest.raises(ExtractionError):
        extract_text(b"this is not a pdf")


def test_extract_text_rejects_empty_bytes():
    with pytest.raises(ExtractionError):
        extract_text(b"")


def test_extract_text_rejects_pdf_without_text_layer(pdf_factory):
    with pytest.raises(ExtractionError) as exc_info:
        extract_text(pdf_factory(""))

    assert exc_info.value.message == "Failed to process file"


# --- extract_contact ---


def test_extract_contact_scenario():
    contact = extract_contact("Contact: jane@example.com, 555-123-4567")

    assert contact.email == "jane@example.com"
    assert contact.phone == "555-123-4567"
    assert contact.linkedin == NOT_FOUND


def test_extract_contact_defaults_every_field():
    contact = extract_contact("no contact details here")

    assert contact.model_dump() == {
        "email": NOT_FOUND,
        "phone": NOT_FOUND,
        "linkedin": NOT_FOUND,
    }


def test_extract_contact_takes_first_match():
    contact = extract_contact("a@one.io 555.111.2222 b@two.io 555.333.4444")

    assert contact.email == "a@one.io"
    assert contact.phone == "555.111.2222"


def test_extract_contact_linkedin_is_case_insensitive():
    contact = extract_contact("Profile: HTTPS://WWW.LinkedIn.com/in/jane-doe-42/ (open)")

    assert contact.linkedin == "HTTPS://WWW.LinkedIn.com/in/jane-doe-42/"


def test_extract_contact_linkedin_company_page():
    contact = extract_contact("see linkedin.com/company/acme-corp")

    assert contact.linkedin == "linkedin.com/company/acme-corp"


def test_extract_contact_phone_needs_three_groups():
    assert extract_contact("call 55-123-4567").phone == NOT_FOUND
    assert extract_contact("call 5551234567").phone == "5551234567"


def test_extract_contact_phone_ignores_non_ascii_digits():
    assert extract_contact("Tel ٥٥٥-١٢٣-٤٥٦٧").phone == NOT_FOUND


def test_extract_contact_word_boundaries_are_ascii():
    contact = extract_contact("éjane@example.com é5551234567")

    assert contact.email == "jane@example.com"
    assert contact.phone == "5551234567"


def test_extract_contact_is_idempotent(sample_resume):
    assert extract_contact(sample_resume) == extract_contact(sample_resume)


# --- extract_section ---


def test_extract_sections_from_sample(sample_resume):
    sections = extract_sections(sample_resume)

    assert sections == {
        "education": ["B.Sc. Computer Science", "State University, 2019"],
        "experience": ["Software Engineer, Acme Corp", "Built billing services in Python"],
        "skills": ["Python, SQL, Docker"],
        "projects": ["Resume matcher"],
    }


def test_extract_section_without_header_is_empty():
    assert extract_section("Jane Doe\nPython developer\n", "education") == []


def test_extract_section_header_followed_by_blank_line_is_empty():
    assert extract_section("Skills\n\nPython\n", "skills") == []


def test_extract_section_whitespace_line_ends_section():
    assert extract_section("Skills\nPython\n   \nGo\n", "skills") == ["Python"]


def test_extract_section_runs_to_end_without_blank_line():
    assert extract_section("Projects\nMatcher\nParser", "projects") == ["Matcher", "Parser"]


def test_extract_section_only_first_header_is_used():
    text = "Skills\nPython\n\nHobbies\nChess\n\nSkills\nGo\n"

    assert extract_section(text, "skills") == ["Python"]


def test_extract_section_skips_repeated_header_inside_section():
    text = "Skills\nPython\nTechnical Skills\nGo\n"

    assert extract_section(text, "skills") == ["Python", "Go"]


def test_extract_section_header_keywords_are_case_insensitive():
    text = "ACADEMIC QUALIFICATIONS\nMSc Data Science\n"

    assert extract_section(text, "education") == ["MSc Data Science"]


def test_extract_section_unknown_kind():
    with pytest.raises(ValueError):
        extract_section("Hobbies\nChess", "hobbies")
