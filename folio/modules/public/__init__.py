"""
Public Module
=============

Visitor-facing pages and API.
Two blueprints: the portfolio site and a health check for uptime monitors.

Provides:
- Landing page with personal info, featured projects, skills and experience
- Project detail page
- /api/projects JSON for embedding on other sites (CORS enabled)
- /health
"""

from flask import Blueprint

public_bp = Blueprint(
    'public',
    __name__,
    template_folder='templates',
)

health_bp = Blueprint(
    'health',
    __name__,
    url_prefix='/health',
)

from . import routes

__all__ = ['public_bp', 'health_bp']
