from __future__ import annotations

from dataclasses import dataclass

from .patterns import (
    EMAIL_RE,
    GITHUB_RE,
    LINKEDIN_RE,
    MAX_WEBSITES,
    NAME_SCAN_LINES,
    NAME_TOKEN_RE,
    PHONE_RE,
    WEBSITE_EXCLUDE_MARKERS,
    WEBSITE_RE,
)
from .utils import unique_in_order


@dataclass(frozen=True, slots=True)
class ContactInfo:
    emails: tuple[str, ...] = ()
    phones: tuple[str, ...] = ()
    linkedin: tuple[str, ...] = ()
    github: tuple[str, ...] = ()
    websites: tuple[str, ...] = ()

    @property
    def has_email(self) -> bool:
        return bool(self.emails)

    @property
    def has_phone(self) -> bool:
        return bool(self.phones)

    @property
    def has_linkedin(self) -> bool:
        return bool(self.linkedin)

    @property
    def has_github(self) -> bool:
        return bool(self.github)


def _is_website(candidate: str) -> bool:
    if any(marker in candidate for marker in WEBSITE_EXCLUDE_MARKERS):
        return False
    return "." in candidate


def extract_contact_info(text: str) -> ContactInfo:
    """Collect raw contact mentions from resume text.

    Matches are returned exactly as found and are not validated; the phone
    pattern in particular also picks up unrelated digit runs.
    """
    websites = [hit for hit in WEBSITE_RE.findall(text) if _is_website(hit)]
    return ContactInfo(
        emails=tuple(unique_in_order(EMAIL_RE.findall(text))),
        phones=tuple(unique_in_order(PHONE_RE.findall(text))),
        linkedin=tuple(unique_in_order(LINKEDIN_RE.findall(text))),
        github=tuple(unique_in_order(GITHUB_RE.findall(text))),
        websites=tuple(unique_in_order(websites)[:MAX_WEBSITES]),
    )


def _looks_like_name(line: str) -> bool:
    if not (3 < len(line) < 50):
        return False
    words = line.split()
    if not 2 <= len(words) <= 4:
        return False
    if "@" in line:
        return False
    return all(NAME_TOKEN_RE.match(word) for word in words)


def extract_name(text: str) -> str | None:
    """Return the first of the opening lines that reads like a person's name."""
    for line in text.split("\n")[:NAME_SCAN_LINES]:
        trimmed = line.strip()
        if trimmed and _looks_like_name(trimmed):
            return trimmed
    return None
