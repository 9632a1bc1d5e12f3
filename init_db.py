#!/usr/bin/env python
"""Database initialization script for the localization API.

Creates all database tables from the SQLAlchemy models. Use this for local
development; deployed databases are managed with `flask db upgrade`.

Usage:
    python init_db.py
"""

import os
import sys
from localehub import create_app, db


def init_database():
    """Initialize the database by creating all tables."""
    config_name = os.getenv('FLASK_ENV', 'development')
    app = create_app(config_name)
    
    print(f"\n{'='*60}")
    print(f"Database Initialization for {config_name.upper()} Environment")
    print(f"{'='*60}\n")
    
    with app.app_context():
        try:
            print(f"Database URI: {app.config['SQLALCHEMY_DATABASE_URI']}\n")
            
            db.create_all()
            
            tables_info = [
                ("users", "API consumer accounts"),
                ("translations", "Key/locale/content strings"),
                ("tags", "Labels for filtering translations"),
                ("tag_translation", "Translation <-> tag links"),
            ]
            
            print("Created tables:")
            for table_name, description in tables_info:
                print(f"  - {table_name:<25} {description}")
            
            print("\nNext steps:")
            print("  1. Seed tags: python scripts/seed_tags.py")
            print("  2. Start the server: python wsgi.py")
            print("  3. Register: POST /api/auth/register\n")
            
            return True
            
        except Exception as e:
            print(f"Error creating database: {type(e).__name__}: {e}\n")
            return False


if __name__ == '__main__':
    success = init_database()
    sys.exit(0 if success else 1)
