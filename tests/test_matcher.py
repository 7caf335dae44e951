#!/usr/bin/env python3
"""
Test suite for litlist/matcher.py - deciding whether a movie adapts a book
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from litlist.matcher import author_matches, movie_is_adaptation_of, title_matches
from litlist.parser import parse_full_record


class TestTitleMatching:

    def test_leading_article_ignored(self):
        assert title_matches('The Food of the Gods', 'Food of the Gods')

    def test_trailing_article_ignored(self):
        assert title_matches('Last of the Mohicans, The', 'The Last of the Mohicans')

    def test_case_insensitive(self):
        assert title_matches('MANSFIELD PARK', 'mansfield park')

    def test_target_must_be_contained(self):
        assert not title_matches('Oliver Twist', 'Ollies Twist')


class TestAuthorMatching:

    def test_either_name_order(self):
        assert author_matches('Austen, Jane', 'Jane Austen')
        assert author_matches('H.P. Lovecraft', 'Lovecraft, H.P.')

    def test_every_word_required(self):
        assert not author_matches('P.H. Lovecraft', 'Lovecraft, H.P.')

    def test_partial_words_match(self):
        assert author_matches('Wellsley, Herbert', 'Wells')


class TestMovieIsAdaptation:

    @pytest.mark.parametrize('record,title,author', [
        ('ADPT: H.P. Lovecraft. "The Thing on the Doorstep"', 'The Thing on the Doorstep', 'Lovecraft, H.P.'),
        ('BOOK: Dickens, Charles. "A Christmas Carol"', 'A Christmas Carol', 'Dickens, Charles'),
        ('NOVL: Wells, H.G.. "The Food of the Gods"', 'Food of the Gods', 'H.G. Wells'),
    ])
    def test_is_adaptation(self, record, title, author):
        assert movie_is_adaptation_of(parse_full_record(record), title, author)

    @pytest.mark.parametrize('record,title,author', [
        ('ADPT: P.H. Lovecraft. "Nyarlathotep"', 'Nyarlathotep', 'Lovecraft, H.P.'),
        ('BOOK: Charles Dickens. "Oliver Twist"', 'Ollies Twist', 'Dickens, Charles'),
        ('NOVL: H.G. Wells. "The War of the Words"', 'War of the Worlds', 'H.G. Wells'),
    ])
    def test_is_not_adaptation(self, record, title, author):
        assert not movie_is_adaptation_of(parse_full_record(record), title, author)

    def test_publication_entries_not_checked(self):
        movie = parse_full_record('CRIT: Austen, Jane. "Mansfield Park". In: "Sight and Sound" (UK), 1983')
        assert not movie_is_adaptation_of(movie, 'Mansfield Park', 'Jane Austen')

    def test_title_and_author_must_match_same_entry(self):
        movie = parse_full_record(
            'NOVL: Austen, Jane. "Emma"\n'
            'BOOK: Smith, John. "Mansfield Park Revisited"'
        )
        assert not movie_is_adaptation_of(movie, 'Mansfield Park', 'Jane Austen')

    def test_numeric_title(self):
        movie = parse_full_record(
            'MOVI: 1984 (1956)\n'
            'NOVL: Orwell, George. "1984". (London, UK), Secker & Warburg, 8 June 1949, Pg. 326'
        )
        assert movie.year == 1956
        assert movie_is_adaptation_of(movie, '1984', 'George Orwell')
