#!/usr/bin/env python3
"""Seed the standard tag set (web, mobile, auth, ...)."""

import sys
import os

# Add parent directory to path to import localehub modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from localehub import create_app
from localehub.services.seeding import seed_tags


def main():
    app = create_app(os.getenv('FLASK_ENV', 'development'))
    with app.app_context():
        tags = seed_tags()
        print(f"Seeded {len(tags)} tags: {', '.join(tag.name for tag in tags)}")


if __name__ == '__main__':
    main()
