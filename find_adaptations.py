#!/usr/bin/env python3
"""
find_adaptations.py - Find the movies adapted from a book

Read-only. Scans the IMDb literature.list database and writes a CSV of every
movie whose ADPT/BOOK/NOVL entries match the given title and author.

Usage:
  python find_adaptations.py "Mansfield Park" "Jane Austen"
  python find_adaptations.py "Mansfield Park" "Jane Austen" --database data/literature.list
  python find_adaptations.py "Dracula" "Bram Stoker" --output output/dracula.csv
  python find_adaptations.py "Dracula" "Bram Stoker" --full   # parse every entry type
"""

import sys
import csv
import logging
import argparse
from pathlib import Path
from typing import List, Tuple

from litlist.config import DEFAULTS, load_config
from litlist.matcher import author_matches, title_matches
from litlist.models import Movie
from litlist.scanner import DatabaseHeaderError, LiteratureListScanner, open_database

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

FIELDNAMES = [
    'title', 'year', 'month', 'tv', 'series_name', 'series_number',
    'episode_number', 'source_title', 'source_author', 'source_isbn',
]


def movie_to_row(movie: Movie, title: str, author: str) -> dict:
    """Flatten a matched movie and its first matching source into a CSV row"""
    row = {
        'title': movie.title,
        'year': movie.year or '',
        'month': movie.month or '',
        'tv': 'yes' if movie.is_television else '',
        'series_name': movie.series_name,
        'series_number': movie.series_number or '',
        'episode_number': movie.episode_number or '',
    }
    for book in movie.book_sources():
        if title_matches(book.title, title) and author_matches(book.author, author):
            row['source_title'] = book.title
            row['source_author'] = book.author
            row['source_isbn'] = book.isbn
            break
    return row


def write_report(movies: List[Movie], title: str, author: str, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES, restval='')
        writer.writeheader()
        for movie in movies:
            writer.writerow(movie_to_row(movie, title, author))


def run_search(database: Path, title: str, author: str, encoding: str,
               full: bool = False) -> Tuple[LiteratureListScanner, List[Movie]]:
    """Scan the database, returning the scanner (for its counters) and the matches"""
    with open_database(database, encoding) as stream:
        scanner = LiteratureListScanner(stream)
        matches = scanner.find_movie_adaptations(title, author, full=full)
    return scanner, matches


def print_summary(scanner: LiteratureListScanner, matches: List[Movie], output_path: Path) -> None:
    print()
    print("=" * 60)
    print("ADAPTATION SEARCH COMPLETE")
    print("=" * 60)
    if scanner.created_on:
        print(f"Database created:  {scanner.created_on:%Y-%m-%d %H:%M:%S}")
    print(f"Records scanned:   {scanner.total_records}")
    print(f"Adaptations found: {len(matches)}")
    for movie in matches[:20]:
        tv = ' (TV)' if movie.is_television else ''
        print(f"  {movie.year or '????'}  {movie.title}{tv}")
    if len(matches) > 20:
        print(f"  ... and {len(matches) - 20} more")
    print(f"\nReport written to: {output_path}")
    print()


def main() -> int:
    parser = argparse.ArgumentParser(
        description='Find movies adapted from a book in the IMDb literature.list database',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument('title', help='Book title to search for')
    parser.add_argument('author', help='Book author, in any name order')
    parser.add_argument('--database', '-d', type=Path, default=None,
                        help='Path to literature.list (default: from config)')
    parser.add_argument('--config', type=Path, default=None,
                        help='Configuration file (default: config.yaml if present)')
    parser.add_argument('--output', '-o', type=Path, default=None,
                        help=f"Output CSV path (default: {DEFAULTS['output_path']})")
    parser.add_argument('--full', action='store_true', default=False,
                        help='Parse every entry type, not just ADPT/BOOK/NOVL')
    parser.add_argument('--verbose', '-v', action='store_true', default=False,
                        help='Log per-record debug output')

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config_path = args.config
    if config_path is None and Path('config.yaml').exists():
        config_path = Path('config.yaml')

    config = dict(DEFAULTS)
    if config_path is not None:
        try:
            config = load_config(config_path)
        except (FileNotFoundError, ValueError) as e:
            logger.error(str(e))
            return 1

    database = args.database or config['database_path']
    if not database:
        logger.error("No database given. Pass --database or set database_path in the config")
        return 1

    output_path = args.output or Path(config['output_path'])
    full = args.full or bool(config['full_parse'])

    logger.info(f"Searching {database} for '{args.title}' by {args.author}")
    try:
        scanner, matches = run_search(Path(database), args.title, args.author,
                             encoding=config['encoding'], full=full)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except DatabaseHeaderError as e:
        logger.error(f"Not a literature.list file: {e}")
        return 1

    write_report(matches, args.title, args.author, output_path)
    print_summary(scanner, matches, output_path)

    return 0


if __name__ == '__main__':
    sys.exit(main())
