import re

NOT_FOUND = "Not found"

PDF_MIME_TYPE = "application/pdf"

# Header keywords that open each resume section. Matched anywhere in a line.
SECTION_PATTERNS = {
    "education": re.compile(r"education|academic|qualification", re.IGNORECASE),
    "experience": re.compile(r"experience|work history|employment", re.IGNORECASE),
    "skills": re.compile(r"skills|technical skills|competencies", re.IGNORECASE),
    "projects": re.compile(r"projects|portfolio|work samples", re.IGNORECASE),
}

SECTION_KINDS = tuple(SECTION_PATTERNS)

# \b and \d match ASCII only
EMAIL_PATTERN = re.compile(
    r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b", re.ASCII
)
PHONE_PATTERN = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b", re.ASCII)
LINKEDIN_PATTERN = re.compile(
    r"(?:https?://)?(?:www\.)?linkedin\.com/(?:in|company)/[a-zA-Z0-9-]+/?",
    re.IGNORECASE,
)

MIN_SCORE = 0
MAX_SCORE = 100
