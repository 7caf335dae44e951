#!/usr/bin/env python3
"""
Test suite for litlist/scanner.py - header reading, record splitting, search
"""

import io
import pytest
import sys
import tempfile
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from litlist.scanner import DatabaseHeaderError, LiteratureListScanner, open_database

DIVIDER = '-' * 79
HEADER_RULE = '-' * 77

HEADER = f'''CRC: 0x527C5E79  File: literature.list  Date: Fri Dec 22 00:00:00 2017

Copyright 1991-2017 The Internet Movie Database Ltd. All rights reserved.

http://www.imdb.com

literature.list

2017-12-19

{HEADER_RULE}

LITERATURE LIST
===============
'''

RECORDS = f'''{DIVIDER}
MOVI: Dissonances (2003)

NOVL: Dixon, Stephen. "Interstate". (BK)

{DIVIDER}
MOVI: "The Last of the Mohicans" (1971)

NOVL: Cooper, James Fenimore. "Last of the Mohicans, The". Bantam New York, 1982, ISBN-10: 0553213296, (originally published 1826)

{DIVIDER}
MOVI: Mansfield Park (1983)

NOVL: Austen, Jane. "Mansfield Park"

{DIVIDER}
MOVI: Mansfield Park (2007) (TV)

NOVL: Austen, Jane. "Mansfield Park"

PROT: Glendinning, Lee. "New Generation Of Teenagers Prepare To Be Seduced With Rebirth Of Austen". In: "The Independent" (UK), Independent News & Media Ltd, Vol. 6345, 16 February 2007, Pg. 3, (NP)

{DIVIDER}
MOVI: Mansion of the Doomed (1976)

CRIT: Relizzo, Donald. In: "Demonique" (Los Angeles, California, USA), FantaCo Enterprises Inc., Vol. 4, 1983, Pg. 20, (MG)
'''

SAMPLE = HEADER + RECORDS


@pytest.fixture
def scanner():
    return LiteratureListScanner(io.StringIO(SAMPLE))


class TestHeader:

    def test_creation_date(self, scanner):
        scanner.read_header()
        assert scanner.created_on == datetime(2017, 12, 22, 0, 0, 0)

    def test_header_dashes_are_not_a_record(self, scanner):
        records = list(scanner.iter_records())
        assert records[0].startswith('MOVI: Dissonances (2003)')

    def test_truncated_header_raises(self):
        scanner = LiteratureListScanner(io.StringIO('CRC: 0x0  File: literature.list\n\n'))
        with pytest.raises(DatabaseHeaderError):
            list(scanner.iter_records())

    def test_missing_underline_raises(self):
        scanner = LiteratureListScanner(io.StringIO('LITERATURE LIST\n'))
        with pytest.raises(DatabaseHeaderError):
            scanner.read_header()

    def test_unreadable_date_is_not_fatal(self):
        text = 'CRC: 0x0  File: literature.list  Date: yesterday\nLITERATURE LIST\n=====\n'
        scanner = LiteratureListScanner(io.StringIO(text))
        scanner.read_header()
        assert scanner.created_on is None


class TestRecordCounting:

    def test_sample_has_five_records(self, scanner):
        records = list(scanner.iter_records())
        assert len(records) == 5
        assert scanner.total_records == 5

    def test_trailing_divider_not_counted(self):
        scanner = LiteratureListScanner(io.StringIO(SAMPLE + DIVIDER + '\n'))
        assert len(list(scanner.iter_records())) == 5
        assert scanner.total_records == 5

    def test_blank_blocks_not_counted(self):
        text = HEADER + f'{DIVIDER}\n\n\n{DIVIDER}\nMOVI: Only (2000)\n'
        scanner = LiteratureListScanner(io.StringIO(text))
        assert list(scanner.iter_records()) == ['MOVI: Only (2000)\n']
        assert scanner.total_records == 1

    def test_empty_database(self):
        scanner = LiteratureListScanner(io.StringIO(HEADER))
        assert list(scanner.iter_records()) == []
        assert scanner.total_records == 0


class TestFindMovieAdaptations:

    def test_mansfield_park(self, scanner):
        movies = scanner.find_movie_adaptations('Mansfield Park', 'Jane Austen')
        assert len(movies) == 2
        assert scanner.total_records == 5

    def test_newest_first(self, scanner):
        movies = scanner.find_movie_adaptations('Mansfield Park', 'Jane Austen')
        assert movies[0].title == 'Mansfield Park'
        assert movies[0].year == 2007
        assert movies[0].is_television is True
        assert movies[1].year == 1983

    def test_restricted_parse_skips_publications(self, scanner):
        movies = scanner.find_movie_adaptations('Mansfield Park', 'Jane Austen')
        assert movies[0].production_protocols == []

    def test_full_parse(self, scanner):
        movies = scanner.find_movie_adaptations('Mansfield Park', 'Jane Austen', full=True)
        assert len(movies[0].production_protocols) == 1
        assert movies[0].production_protocols[0].publication.name == 'The Independent'

    def test_trailing_article_title(self, scanner):
        movies = scanner.find_movie_adaptations('The Last of the Mohicans', 'James Fenimore Cooper')
        assert [m.year for m in movies] == [1971]

    def test_no_match(self, scanner):
        assert scanner.find_movie_adaptations('Emma', 'Jane Austen') == []


class TestOpenDatabase:

    def test_decodes_legacy_encoding(self):
        text = HEADER + f'{DIVIDER}\nMOVI: Jeune Cinéma (1966)\n'
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'literature.list'
            path.write_bytes(text.encode('cp1252'))

            with open_database(path) as stream:
                records = list(LiteratureListScanner(stream).iter_records())

        assert records == ['MOVI: Jeune Cinéma (1966)\n']

    def test_undecodable_bytes_replaced(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'literature.list'
            # 0x81 is undefined in cp1252
            path.write_bytes(HEADER.encode('cp1252') + DIVIDER.encode() + b'\nMOVI: Bad \x81 (2000)\n')

            with open_database(path) as stream:
                records = list(LiteratureListScanner(stream).iter_records())

        assert records == ['MOVI: Bad \ufffd (2000)\n']

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            open_database(Path('/nonexistent/literature.list'))
