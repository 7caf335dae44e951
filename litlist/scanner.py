#!/usr/bin/env python3
"""
Record scanner for the IMDb literature.list database file

Reads the header banner (remembering when the dump was created), then splits
the rest of the stream into one text block per movie record. Records are
separated by a line of 79 dashes; the divider straight after the header is
a leading artifact and never closes a record.

Counting rule: total_records counts every non-blank block, whether it was
closed by a divider or by the end of the stream. Blank blocks - the leading
divider, or a divider right before EOF - are never counted.

The official file is Windows-1252 encoded; open_database() handles the
decoding so the parsers only ever see str.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

from litlist.constants import (
    DEFAULT_ENCODING, HEADER_DATE_FORMAT, HEADER_DATE_MARKER, HEADER_TITLE,
    RECORD_DIVIDER,
)
from litlist.matcher import movie_is_adaptation_of
from litlist.models import Movie
from litlist.parser import parse_book_record, parse_full_record

logger = logging.getLogger(__name__)


class DatabaseHeaderError(Exception):
    """The stream ended before the LITERATURE LIST header was complete"""


def open_database(path: Path, encoding: str = DEFAULT_ENCODING) -> TextIO:
    """
    Open a literature.list file for reading

    Bytes that are undefined in the legacy encoding are replaced rather than
    aborting the whole scan.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Database file not found: {path}")
    return open(path, 'r', encoding=encoding, errors='replace')


class LiteratureListScanner:
    """Iterate over the movie records of a literature.list text stream"""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.created_on: Optional[datetime] = None
        self.total_records = 0
        self._header_read = False

    def read_header(self):
        """
        Consume the header banner up to and including the '====' underline

        Raises:
            DatabaseHeaderError: if the stream ends inside the header
        """
        for line in self.stream:
            line = line.rstrip('\r\n')

            if HEADER_DATE_MARKER in line:
                stamp = line.split(HEADER_DATE_MARKER)[-1].strip()
                try:
                    self.created_on = datetime.strptime(stamp, HEADER_DATE_FORMAT)
                except ValueError:
                    logger.warning(f"Unreadable database date: {stamp!r}")

            if line == HEADER_TITLE:
                # the next line is the ==== underline
                if next(self.stream, None) is None:
                    raise DatabaseHeaderError("stream ended after the header title")
                self._header_read = True
                return

        raise DatabaseHeaderError(f"stream ended before the {HEADER_TITLE!r} header")

    def iter_records(self) -> Iterator[str]:
        """Yield the raw text of each movie record, in file order"""
        if not self._header_read:
            self.read_header()

        lines: List[str] = []
        for line in self.stream:
            line = line.rstrip('\r\n')
            if line == RECORD_DIVIDER:
                record = self._complete(lines)
                lines = []
                if record is not None:
                    yield record
                continue
            lines.append(line)

        record = self._complete(lines)
        if record is not None:
            yield record

    def _complete(self, lines: List[str]) -> Optional[str]:
        text = '\n'.join(lines) + '\n'
        if not text.strip():
            return None
        self.total_records += 1
        return text

    def find_movie_adaptations(self, title: str, author: str, full: bool = False) -> List[Movie]:
        """
        Return the movies adapted from the given book, newest first

        Only the book-like entries are parsed, which speeds up the scan
        considerably. Pass full=True to parse every entry type.
        """
        parse = parse_full_record if full else parse_book_record
        movies: List[Movie] = []

        for text in self.iter_records():
            movie = parse(text)
            if movie_is_adaptation_of(movie, title, author):
                movies.append(movie)

        logger.info(
            f"Scanned {self.total_records} records, "
            f"{len(movies)} adaptations of '{title}' by {author}"
        )

        movies.sort(key=lambda m: m.year, reverse=True)
        return movies
