#!/usr/bin/env python3
"""
Shared constants for the literature.list parser

Single source of truth for entry tags, month names and the record layout
markers. DO NOT duplicate these tables in other modules - import from here.
"""

from enum import Enum


class Tag(str, Enum):
    """Entry-type prefixes recognised inside a movie record"""
    ADPT = 'ADPT'  # adapted literary source
    BOOK = 'BOOK'  # monographic book
    CRIT = 'CRIT'  # printed media review
    ESSY = 'ESSY'  # printed essay
    IVIW = 'IVIW'  # interview with cast or crew
    MOVI = 'MOVI'  # movie title line
    NOVL = 'NOVL'  # original literary source
    OTHR = 'OTHR'  # other literature
    PROT = 'PROT'  # production protocol
    SCRP = 'SCRP'  # published screenplay


MONTHS = [
    'january', 'february', 'march', 'april', 'may', 'june',
    'july', 'august', 'september', 'october', 'november', 'december',
]

# Roman numeral disambiguators seen in MOVI lines, e.g. "(1954/XI)"
ROMAN_NUMERALS = {
    'i': 1, 'ii': 2, 'iii': 3, 'iv': 4, 'v': 5, 'vi': 6,
    'vii': 7, 'viii': 8, 'ix': 9, 'x': 10, 'xi': 11, 'xii': 12,
}

# Boilerplate tokens stripped from entries before field extraction.
# Each is only removed when it forms its own comma-separated clause.
RANDOM_MARKERS = [
    r'\(BK\)',
    r'\(HB\)',
    r'\(MG\)',
    r'\(NP\)',
    r'\(Novel\)',
    r'NONE',
    r'Pg\. N/?A',
    r'\(tme\d+\)',
]

# Inconsistent page-range prefixes that follow the canonical ", Pg." marker
PAGE_RANGE_PREFIXES = [
    r'pg[ds]?[.;?]',   # pg. pgs. pgd. pg; pgs; pg?
    r'pg>\.',
    r'p/ n(?:Â)?°\.',  # also the mis-decoded UTF-8 spelling
    r'p[a^]gs\.',      # pags. p^gs.
    r'Pages: *',
]

# Record layout of literature.list
RECORD_DIVIDER = '-' * 79
HEADER_TITLE = 'LITERATURE LIST'
HEADER_DATE_MARKER = ' Date: '
HEADER_DATE_FORMAT = '%a %b %d %H:%M:%S %Y'

# Legacy single-byte encoding of the official IMDb dump
DEFAULT_ENCODING = 'cp1252'
