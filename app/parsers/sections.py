from typing import Dict, List

from app.constants import SECTION_KINDS, SECTION_PATTERNS


def extract_section(text: str, kind: str) -> List[str]:
    """
    Collect the lines under the first header of the given section kind.

    The header line itself is dropped and the section ends at the first
    blank line. Later headers of the same kind are never revisited.
    """
    pattern = SECTION_PATTERNS.get(kind)
    if pattern is None:
        raise ValueError(f"Unknown section kind: {kind!r}")

    section_lines: List[str] = []
    in_section = False

    for line in text.splitlines():
        if pattern.search(line):
            in_section = True
            continue
        if in_section:
            if not line.strip():
                break
            section_lines.append(line.strip())

    return section_lines


def extract_sections(text: str) -> Dict[str, List[str]]:
    return {kind: extract_section(text, kind) for kind in SECTION_KINDS}
