#!/usr/bin/env python3
"""Populate the database with generated translation data.

Usage:
    python scripts/populate_translations.py [count]   (default 1000)
"""

import sys
import os

# Add parent directory to path to import localehub modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from localehub import create_app
from localehub.services.seeding import populate_translations


def _print_progress(done, total):
    width = 40
    filled = int(width * done / total) if total else width
    print(f"\r[{'#' * filled}{'.' * (width - filled)}] {done}/{total}", end='', flush=True)


def main():
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 1000
    app = create_app(os.getenv('FLASK_ENV', 'development'))

    with app.app_context():
        print(f"Creating {count} translations...")
        tagged = populate_translations(count, progress=_print_progress)
        print()
        print(f"Attached tags to {tagged} translations")
        print(f"Successfully created {count} translations with tags!")


if __name__ == '__main__':
    main()
