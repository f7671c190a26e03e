"""Text normalization, resume section segmentation and contact extraction.

Identity fields (name, email, phone) and section headers are read from
the original-case text: capitalization is a signal for name detection.
Everything keyword-based runs on :func:`normalize_text` output.
"""

import re

from services.taxonomy import CANONICAL_HEADERS

# Contact info patterns
EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_STRICT_EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

# Tried in order, loosest last
PHONE_PATTERNS: list[re.Pattern] = [
    re.compile(r"\+?\d{1,3}[-.\s]?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"),  # +1 (555) 123-4567
    re.compile(r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"),  # (555) 123-4567
    re.compile(r"\+?\d{1,3}[-.\s]?\d{10}"),  # +91 9876543210
    re.compile(r"\d{10}"),  # 9876543210
]
MIN_PHONE_DIGITS = 10

# Lines that carry contact details or links are never the candidate name
_NAME_SKIP_RE = re.compile(r"@|http|www|\+?\d{10}|linkedin|github", re.IGNORECASE)
_STRICT_NAME_RE = re.compile(r"^([A-Z][a-z]+(?:\s+[A-Z][a-z]+){1,3})$")
_NAME_WORD_RE = re.compile(r"^[A-Z][a-z]+$")
NAME_SCAN_LINES = 5
NAME_LOOSE_SCAN_LINES = 3


def normalize_text(text: str) -> str:
    """Collapse whitespace runs and lowercase.

    Runs of spaces/tabs become one space, runs of newlines one newline.
    """
    text = re.sub(r"[^\S\n]+", " ", text)
    text = re.sub(r" *\n *", "\n", text)
    text = re.sub(r"\n+", "\n", text)
    return text.strip().lower()


def _header_pattern(header: str) -> re.Pattern:
    """Match a line equal to ``header``, or ``header:`` followed by inline content."""
    return re.compile(
        rf"^\s*{re.escape(header)}\s*(?::\s*(.*?))?\s*$", re.IGNORECASE
    )


_CANONICAL_COMPILED = [_header_pattern(h) for h in CANONICAL_HEADERS]


def is_section_header(line: str) -> bool:
    """True if the line opens one of the canonical resume sections."""
    return any(p.match(line) for p in _CANONICAL_COMPILED)


def _read_section(lines: list[str], index: int, match: re.Match) -> tuple[str, str]:
    """Collect lines after the header at ``index`` up to the next canonical header."""
    following: list[str] = []
    for line in lines[index + 1:]:
        stripped = line.strip()
        if is_section_header(stripped):
            break
        following.append(stripped)

    body = following if not match.group(1) else [match.group(1).strip(), *following]
    block = "\n".join([lines[index].strip(), *following]).strip()
    return block, "\n".join(body).strip()


def extract_sections(text: str, headers: list[str]) -> list[str]:
    """Return the body of each section whose header matches a synonym.

    Each synonym contributes at most one section (its first occurrence).
    A body runs from the line after the header up to the next canonical
    header. Content on the header line after a colon ("Skills: Python, Go")
    is kept as the first body line.
    """
    lines = text.split("\n")
    sections: list[str] = []
    seen: set[int] = set()

    for header in headers:
        pattern = _header_pattern(header)
        for index, line in enumerate(lines):
            match = pattern.match(line)
            if match:
                break
        else:
            continue

        if index in seen:
            continue
        seen.add(index)

        _, content = _read_section(lines, index, match)
        if content:
            sections.append(content)

    return sections


def find_first_section(text: str, headers: list[str]) -> tuple[str, str] | None:
    """Section opened by the earliest line in the text matching any synonym.

    Returns ``(block, body)``: ``block`` is the header line plus the lines
    under it, ``body`` is what :func:`extract_sections` would return for it.
    None when no line matches.
    """
    lines = text.split("\n")
    patterns = [_header_pattern(h) for h in headers]
    for index, line in enumerate(lines):
        for pattern in patterns:
            match = pattern.match(line)
            if match:
                return _read_section(lines, index, match)
    return None


def extract_email(text: str) -> str | None:
    """First well-formed email address in the text, lowercased."""
    for candidate in EMAIL_RE.findall(text):
        if _STRICT_EMAIL_RE.match(candidate):
            return candidate.lower()
    return None


def extract_phone(text: str) -> str | None:
    """First phone-like match with at least 10 digits, trying looser patterns last."""
    for pattern in PHONE_PATTERNS:
        match = pattern.search(text)
        if match:
            phone = match.group().strip()
            if len(re.sub(r"\D", "", phone)) >= MIN_PHONE_DIGITS:
                return phone
    return None


def extract_name(text: str) -> str | None:
    """Guess the candidate name from the first few non-empty lines."""
    lines = [line.strip() for line in text.split("\n") if line.strip()]

    for i, line in enumerate(lines[:NAME_SCAN_LINES]):
        if _NAME_SKIP_RE.search(line):
            continue

        match = _STRICT_NAME_RE.match(line)
        if match and 4 <= len(match.group(1)) <= 50:
            return match.group(1)

        # More permissive: 2-4 Title-Case words near the top
        if i < NAME_LOOSE_SCAN_LINES:
            words = line.split()
            if 2 <= len(words) <= 4 and all(_NAME_WORD_RE.match(w) for w in words):
                return " ".join(words)

    return None


def extract_contact_info(text: str) -> dict[str, str | None]:
    """Extract name, email and phone from original-case resume text."""
    return {
        "name": extract_name(text),
        "email": extract_email(text),
        "phone": extract_phone(text),
    }
