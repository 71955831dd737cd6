"""
Projects Admin Module
=====================

Admin interface for portfolio projects.
Plugs into the admin dashboard module.

Provides:
- Project creation and editing with inline validation
- Comma-separated tech stack stored as a JSON array
- Featured toggle and deletion from the list page
"""

from flask import Blueprint

from ..auth.gate import install_admin_gate

projects_bp = Blueprint(
    'projects_admin',
    __name__,
    url_prefix='/admin/projects',
    template_folder='templates',
)
install_admin_gate(projects_bp)

from . import routes

__all__ = ['projects_bp']
