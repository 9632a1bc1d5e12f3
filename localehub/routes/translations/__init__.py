"""Translation routes package.

This package organizes translation routes into logical submodules:
- crud: list, create, show, update, delete
- search: filtered search and repository statistics
- export: flat/nested export for client applications
- helpers: shared request parsing and validation
"""

from flask import Blueprint

translations_bp = Blueprint('translations', __name__)

# Import and register all route modules
from localehub.routes.translations import crud
from localehub.routes.translations import search
from localehub.routes.translations import export
