#!/usr/bin/env python3
"""
Adaptation matcher - is this movie based on a given book?

Only the book-like entries (ADPT, BOOK, NOVL) are checked. Matching is
deliberately loose because the database spells names both ways round:
"Austen, Jane" must match a search for "Jane Austen".
"""

import logging

from litlist.models import Movie

logger = logging.getLogger(__name__)


def title_matches(source_title: str, target_title: str) -> bool:
    """
    Target title contained in the source title, ignoring case and "the "

    Examples:
        >>> title_matches("Last of the Mohicans, The", "The Last of the Mohicans")
        True
    """
    source = source_title.lower().replace('the ', '')
    target = target_title.lower().replace('the ', '')
    return target in source


def author_matches(source_author: str, target_author: str) -> bool:
    """
    Every word of the target author appears somewhere in the source author

    Commas are ignored and word order does not matter. There is no word
    boundary check, so "wells" also matches inside "Wellsley".
    """
    source = source_author.lower().replace(',', '')
    target = target_author.lower().replace(',', '')
    return all(name in source for name in target.split())


def movie_is_adaptation_of(movie: Movie, title: str, author: str) -> bool:
    """Return True if any adaptation, book or novel entry matches title and author"""
    for book in movie.book_sources():
        if title_matches(book.title, title) and author_matches(book.author, author):
            logger.debug(f"Match: '{movie.title}' ({movie.year}) <- '{book.title}' by {book.author}")
            return True
    return False
