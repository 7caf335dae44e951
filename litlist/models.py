#!/usr/bin/env python3
"""
Value types the literature.list records are parsed into

Book-like entries (ADPT, BOOK, NOVL) wrap a Book, publication-like entries
(CRIT, ESSY, IVIW, OTHR, PROT, SCRP) wrap a Publication. A Movie owns its
entry lists; nothing here is shared between movies.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Date:
    """Partial date - any unknown component is 0"""
    year: int = 0
    month: int = 0  # 1-12
    day: int = 0    # 1-31, not validated against the month


@dataclass
class Publisher:
    """Publisher details shared by books and publications"""
    name: str = ''
    city: str = ''
    state: str = ''  # province, county, state, region
    country: str = ''


@dataclass
class Book:
    """Fields of a monographic book entry"""
    title: str = ''
    author: str = ''
    publisher: Publisher = field(default_factory=Publisher)
    date: Date = field(default_factory=Date)
    first_published: int = 0
    page_count: int = 0
    volume: str = ''
    issue: str = ''
    isbn: str = ''
    note: str = ''
    misc_info: str = ''  # the "In:" text, usually links or random remarks


@dataclass
class Publication:
    """Fields of a magazine/newspaper style entry"""
    name: str = ''  # the magazine or collection, taken from "In:"
    publisher: Publisher = field(default_factory=Publisher)
    date: Date = field(default_factory=Date)
    volume: str = ''
    issue: str = ''
    issn: str = ''  # sometimes holds an ISBN
    article_author: str = ''
    article_title: str = ''
    article_pages: str = ''  # kept verbatim: "1-17", "56", "213 to 222, 224"
    article_interviewee: str = ''  # IVIW only


@dataclass
class Adaptation:
    """ADPT - adapted literary source"""
    book: Book = field(default_factory=Book)


@dataclass
class BookEntry:
    """BOOK - monographic book"""
    book: Book = field(default_factory=Book)


@dataclass
class NovelEntry:
    """NOVL - original literary source"""
    book: Book = field(default_factory=Book)


@dataclass
class Critique:
    """CRIT - printed media review"""
    publication: Publication = field(default_factory=Publication)


@dataclass
class Essay:
    """ESSY - printed essay"""
    publication: Publication = field(default_factory=Publication)


@dataclass
class Interview:
    """IVIW - interview with cast or crew"""
    publication: Publication = field(default_factory=Publication)


@dataclass
class Other:
    """OTHR - other literature"""
    publication: Publication = field(default_factory=Publication)


@dataclass
class ProductionProtocol:
    """PROT - production protocol"""
    publication: Publication = field(default_factory=Publication)


@dataclass
class Screenplay:
    """SCRP - published screenplay"""
    publication: Publication = field(default_factory=Publication)


@dataclass
class MovieTitle:
    """Fields read from the MOVI line"""
    title: str = ''
    year: int = 0
    month: int = 0  # roman numeral disambiguator, see DESIGN.md
    is_television: bool = False
    series_name: str = ''
    series_number: int = 0
    episode_number: int = 0


@dataclass
class Movie:
    """One literature.list record"""
    title: str = ''
    year: int = 0
    month: int = 0
    is_television: bool = False
    series_name: str = ''
    series_number: int = 0
    episode_number: int = 0

    adaptations: List[Adaptation] = field(default_factory=list)
    books: List[BookEntry] = field(default_factory=list)
    novels: List[NovelEntry] = field(default_factory=list)
    critiques: List[Critique] = field(default_factory=list)
    essays: List[Essay] = field(default_factory=list)
    interviews: List[Interview] = field(default_factory=list)
    others: List[Other] = field(default_factory=list)
    production_protocols: List[ProductionProtocol] = field(default_factory=list)
    screenplays: List[Screenplay] = field(default_factory=list)

    def book_sources(self) -> List[Book]:
        """All Book-shaped entries in ADPT, BOOK, NOVL order"""
        return (
            [a.book for a in self.adaptations]
            + [b.book for b in self.books]
            + [n.book for n in self.novels]
        )
