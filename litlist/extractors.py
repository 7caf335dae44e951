#!/usr/bin/env python3
"""
Field extractors for literature.list entry text

Every extractor takes the remaining entry text and returns a tuple of
(value, remaining_text), where remaining_text has the matched field removed
and is stripped. When the field is absent the zero value is returned and the
text is left as it was.

Extractors that look for a literal marker (ISBN:, Pg., Vol., ...) remove
every occurrence of their pattern. The positional extractors (author, title,
publisher, notes) only look at the start or end of the text, so they must
run AFTER all marker-based fields are gone - see litlist/parser.py for the order.

The compiled patterns below are module constants: built once at import,
never mutated, safe to share between threads.
"""

import re
from typing import Tuple

from litlist.constants import MONTHS, PAGE_RANGE_PREFIXES, RANDOM_MARKERS
from litlist.models import Date, Publisher

# Marker-based patterns
RANDOM_TEXT_RE = re.compile(
    r', *(?:' + '|'.join(RANDOM_MARKERS) + r')(?= *(?:,|$))', re.IGNORECASE
)
IN_RE = re.compile(r'In: "(.+?)"(?:, *)?')
VOLUME_RE = re.compile(r', *Vol\. *#? *([0-9]+)(?:st|nd|rd|th)?')
ISSUE_RE = re.compile(r', *Iss\. *#? *([0-9]+)(?:st|nd|rd|th)?')
IDENTIFIER_RE = re.compile(r', *IS[BS]N(?:-\d\d)?: ([0-9X-]+)')
PAGE_COUNT_RE = re.compile(r', *Pg\. *([0-9]+)(?= *(?:,|$))')
PAGE_RANGE_CLEANUP_RE = re.compile(
    r', *Pg\. *(?:' + '|'.join(PAGE_RANGE_PREFIXES) + r') *', re.IGNORECASE
)
PAGE_RANGE_RE = re.compile(
    r', *Pg\. *((?:[a-z]?[0-9]+)(?:(?:-|\+|, *| *to *)[a-z]?[0-9]+)*)', re.IGNORECASE
)
FIRST_PUBLISHED_RE = re.compile(r'First published.+?(\d{4}).?', re.IGNORECASE)
PUBLISHED_DATE_RE = re.compile(r'\(?((?:\d{1,2} +)?(?:[JFMASOND][a-z]+ +)?\d{4})\)?')
QUOTED_RE = re.compile(r'("[^"]*")')

# Positional patterns
AUTHOR_RE = re.compile(r'^(.+?)\. +"')  # NOTE: also consumes the title's opening quote
TITLE_RE = re.compile(r'^"([^"]+?)"\.? *')
PUBLISHER_LOCATION_RE = re.compile(r'^\(([^)]+?)\)(?:, *)?|^([^:]+?): *')
PUBLISHER_NAME_RE = re.compile(r'^([^,]+)(?:, *)?')
NOTES_RE = re.compile(r'\((.+?)\)$')


def _extract(pattern: re.Pattern, text: str) -> Tuple[str, str]:
    """Return the first capture of pattern and text with all matches removed"""
    match = pattern.search(text)
    value = match.group(1).strip() if match else ''
    return value, pattern.sub('', text).strip()


def month_as_number(name: str) -> int:
    """Map an English month name to 1-12, anything else to 0"""
    try:
        return MONTHS.index(name.lower()) + 1
    except ValueError:
        return 0


def unwrap_braces(text: str) -> str:
    """
    Remove one pair of parentheses wrapping the whole entry (rare)

    '(London, UK), Berkley, (note)' starts and ends with a parenthesis but
    is not wrapped, so the closing match of the first '(' must be the
    last character.
    """
    if not (text.startswith('(') and text.endswith(')')):
        return text

    depth = 0
    for i, char in enumerate(text):
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
            if depth == 0:
                if i != len(text) - 1:
                    return text
                return text[1:-1].strip()

    # unbalanced
    return text



def strip_random_markers(text: str) -> str:
    """Remove boilerplate clauses such as ', (BK)' or ', NONE'"""
    return RANDOM_TEXT_RE.sub('', text).strip()


def extract_in(text: str) -> Tuple[str, str]:
    """The quoted collection/publication name following 'In:'"""
    return _extract(IN_RE, text)


def extract_volume(text: str) -> Tuple[str, str]:
    return _extract(VOLUME_RE, text)


def extract_issue(text: str) -> Tuple[str, str]:
    return _extract(ISSUE_RE, text)


def extract_identifier(text: str) -> Tuple[str, str]:
    """ISBN (any -NN suffix) or ISSN value"""
    return _extract(IDENTIFIER_RE, text)


def extract_page_count(text: str) -> Tuple[int, str]:
    """
    Book page count from a purely numeric ', Pg. N' clause

    Ranges like 'Pg. 288-94' are not counts and are left in the text.
    """
    count, remaining = _extract(PAGE_COUNT_RE, text)
    return (int(count) if count else 0), remaining


def extract_page_range(text: str) -> Tuple[str, str]:
    """
    Article page range following ', Pg.'

    The many misspelled prefixes (pgs., pg;, pags., Pages: ...) are first
    rewritten to the canonical ', Pg.' marker. The range itself is returned
    verbatim, e.g. '213 to 222, 224, 383' or 'W20+W21'.
    """
    text = PAGE_RANGE_CLEANUP_RE.sub(', Pg.', text)
    return _extract(PAGE_RANGE_RE, text)


def extract_first_published(text: str) -> Tuple[int, str]:
    """
    Year of a 'First published ... YYYY' phrase

    NOTE: must run before extract_published_date, which would otherwise
    swallow the year as a plain publication date.
    """
    year, remaining = _extract(FIRST_PUBLISHED_RE, text)
    return (int(year) if year else 0), remaining


def extract_published_date(text: str) -> Tuple[Date, str]:
    """
    Date in the form '[day] [Month] YYYY', optionally parenthesised

    Double-quoted text is skipped, so a title such as "1984" keeps its
    digits. An unpaired quote does not hide the text after it.
    """
    date = Date()

    # odd indices hold the quoted segments
    segments = QUOTED_RE.split(text)
    for segment in segments[::2]:
        match = PUBLISHED_DATE_RE.search(segment)
        if match:
            parts = match.group(1).split()

            # year is mandatory, so always last
            date.year = int(parts[-1])
            if len(parts) == 3:
                date.day = int(parts[0])
                date.month = month_as_number(parts[1])
            elif len(parts) == 2:
                date.month = month_as_number(parts[0])
            break

    remaining = ''.join(
        segment if i % 2 else PUBLISHED_DATE_RE.sub('', segment)
        for i, segment in enumerate(segments)
    )
    return date, remaining.strip()



def extract_author(text: str) -> Tuple[str, str]:
    """
    Author name - everything before the '. "' that opens the title

    The match consumes the title's opening quote, so it is put back. This is
    also done when there is no author, which is harmless for entries that
    already start with the title quote.
    """
    author, remaining = _extract(AUTHOR_RE, text)
    if remaining and not remaining.startswith('"'):
        remaining = '"' + remaining
    return author, remaining


def extract_title(text: str) -> Tuple[str, str]:
    """Double-quoted title at the start of the text"""
    return _extract(TITLE_RE, text)


def extract_publisher(text: str) -> Tuple[Publisher, str]:
    """
    Publisher location and name at the start of the text

    Location is either '(City, State, Country)' or a 'City, Country:'
    prefix. The last location token is the country; with three or more
    tokens the first is the city and the rest form the state/region.
    The first comma-terminated segment after the location is the name.
    """
    publisher = Publisher()

    match = PUBLISHER_LOCATION_RE.search(text)
    if match:
        location = match.group(1) or match.group(2)
        parts = [p.strip() for p in location.split(',')]
        publisher.country = parts[-1]
        if len(parts) >= 2:
            publisher.city = parts[0]
        if len(parts) >= 3:
            publisher.state = ', '.join(parts[1:-1])
    text = PUBLISHER_LOCATION_RE.sub('', text).strip()

    publisher.name, remaining = _extract(PUBLISHER_NAME_RE, text)
    return publisher, remaining


def extract_notes(text: str) -> Tuple[str, str]:
    """Trailing parenthesised note - always the last book field"""
    return _extract(NOTES_RE, text)
