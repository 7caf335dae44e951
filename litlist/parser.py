#!/usr/bin/env python3
"""
Record parsers for literature.list movie records

Two entry pipelines are built from litlist/extractors.py:

  Book pipeline         ADPT, BOOK, NOVL
  Publication pipeline  CRIT, ESSY, IVIW, OTHR, PROT, SCRP

IMPORTANT: step order is load-bearing. Fields with a knowable marker
(ISBN:, Pg., Vol., First published) are removed first so the positional
fields (author, title, publisher, notes) only see what is left.

parse_full_record() assembles a Movie from every entry type;
parse_book_record() only reads MOVI + the book-like entries, which is all the
adaptation search needs and skips the publication parsing cost.
"""

import logging
import re
from typing import Dict, List

from litlist import extractors as ex
from litlist.constants import ROMAN_NUMERALS, Tag
from litlist.grouper import group_entries
from litlist.models import (
    Adaptation, Book, BookEntry, Critique, Essay, Interview, Movie,
    MovieTitle, NovelEntry, Other, ProductionProtocol, Publication, Screenplay,
)

logger = logging.getLogger(__name__)

# Title (quotes removed when paired) up to " (YYYY)" / " (????)" with optional "/ROMAN"
MOVIE_TITLE_RE = re.compile(
    r'^(?P<title>.*?) \((?P<year>[0-9?]{4})(?:/(?P<roman>[IVX]+))?\)(?P<rest>.*)$'
)
# {Series Name (#1.5)}, {Series Name} or {(#1.5)}
SERIES_RE = re.compile(
    r'\{(?P<name>[^{}]*?)\s*(?:\(#(?P<season>\d+)\.(?P<episode>\d+)\))?\}'
)
TV_MARKER = '(TV)'


def parse_movie_title(text: str) -> MovieTitle:
    """
    Parse the value of a MOVI line

    Examples:
        >>> parse_movie_title('Creature from the Black Lagoon (1954/XI) (TV)').month
        11
        >>> parse_movie_title('"A Shared House" (2015) {(#1.4)}').episode_number
        4
    """
    details = MovieTitle()

    match = MOVIE_TITLE_RE.match(text.strip())
    if not match:
        logger.debug(f"Unrecognised MOVI line: {text!r}")
        return details

    title = match.group('title').strip()
    if len(title) > 1 and title.startswith('"') and title.endswith('"'):
        title = title[1:-1].strip()
    details.title = title

    year = match.group('year')
    details.year = int(year) if year.isdigit() else 0

    # The roman numeral only tells apart same-titled releases of one year.
    # It is stored as the month, see DESIGN.md.
    roman = match.group('roman')
    if roman:
        details.month = ROMAN_NUMERALS.get(roman.lower(), 0)

    rest = match.group('rest')
    details.is_television = TV_MARKER in rest

    series = SERIES_RE.search(rest)
    if series:
        details.series_name = series.group('name').strip()
        if series.group('season'):
            details.series_number = int(series.group('season'))
            details.episode_number = int(series.group('episode'))

    return details


def parse_book(text: str) -> Book:
    """
    Run the Book pipeline over one ADPT/BOOK/NOVL value

    Marker-based fields go first, then the positional ones. First published
    must come before the general date, and the notes are always last.
    """
    book = Book()

    text = ex.unwrap_braces(text)
    text = ex.strip_random_markers(text)

    book.misc_info, text = ex.extract_in(text)
    book.volume, text = ex.extract_volume(text)
    book.issue, text = ex.extract_issue(text)

    book.isbn, text = ex.extract_identifier(text)
    book.page_count, text = ex.extract_page_count(text)

    book.first_published, text = ex.extract_first_published(text)
    book.date, text = ex.extract_published_date(text)

    # positional
    book.author, text = ex.extract_author(text)
    book.title, text = ex.extract_title(text)
    book.publisher, text = ex.extract_publisher(text)
    book.note, text = ex.extract_notes(text)

    if text:
        logger.debug(f"Unparsed book text left over: {text!r}")
    return book


def parse_publication(text: str) -> Publication:
    """Run the Publication pipeline over one CRIT/ESSY/IVIW/OTHR/PROT/SCRP value"""
    pub = Publication()

    text = ex.unwrap_braces(text)
    text = ex.strip_random_markers(text)

    pub.volume, text = ex.extract_volume(text)
    pub.issue, text = ex.extract_issue(text)
    pub.issn, text = ex.extract_identifier(text)
    pub.article_pages, text = ex.extract_page_range(text)

    pub.name, text = ex.extract_in(text)
    pub.date, text = ex.extract_published_date(text)

    # positional
    pub.article_author, text = ex.extract_author(text)
    pub.article_title, text = ex.extract_title(text)
    pub.publisher, text = ex.extract_publisher(text)

    if text:
        logger.debug(f"Unparsed publication text left over: {text!r}")
    return pub


# Tag -> (entry factory, Movie attribute). The factory wraps the parsed shape.
_BOOK_ASSEMBLY: Dict[Tag, tuple] = {
    Tag.ADPT: (lambda text: Adaptation(book=parse_book(text)), 'adaptations'),
    Tag.BOOK: (lambda text: BookEntry(book=parse_book(text)), 'books'),
    Tag.NOVL: (lambda text: NovelEntry(book=parse_book(text)), 'novels'),
}

_PUBLICATION_ASSEMBLY: Dict[Tag, tuple] = {
    Tag.CRIT: (lambda text: Critique(publication=parse_publication(text)), 'critiques'),
    Tag.ESSY: (lambda text: Essay(publication=parse_publication(text)), 'essays'),
    Tag.IVIW: (lambda text: Interview(publication=parse_publication(text)), 'interviews'),
    Tag.OTHR: (lambda text: Other(publication=parse_publication(text)), 'others'),
    Tag.PROT: (lambda text: ProductionProtocol(publication=parse_publication(text)), 'production_protocols'),
    Tag.SCRP: (lambda text: Screenplay(publication=parse_publication(text)), 'screenplays'),
}


def _assemble(text: str, assembly: Dict[Tag, tuple]) -> Movie:
    entries = group_entries(text)
    movie = Movie()

    titles: List[str] = entries.get(Tag.MOVI, [])
    if titles:
        if len(titles) > 1:
            logger.debug(f"Record has {len(titles)} MOVI lines, using the first")
        details = parse_movie_title(titles[0])
        movie.title = details.title
        movie.year = details.year
        movie.month = details.month
        movie.is_television = details.is_television
        movie.series_name = details.series_name
        movie.series_number = details.series_number
        movie.episode_number = details.episode_number

    for tag, (factory, attr) in assembly.items():
        collection = getattr(movie, attr)
        for value in entries.get(tag, []):
            collection.append(factory(value))

    return movie


def parse_full_record(text: str) -> Movie:
    """Assemble a Movie from every entry type in the record"""
    return _assemble(text, {**_BOOK_ASSEMBLY, **_PUBLICATION_ASSEMBLY})


def parse_book_record(text: str) -> Movie:
    """Assemble a Movie from the MOVI line and the book-like entries only"""
    return _assemble(text, _BOOK_ASSEMBLY)
