"""
Skills Admin Module
===================

Add and remove skills shown on the portfolio, grouped by category with a
1-4 proficiency level and an optional simpleicons.org icon slug.
"""

from flask import Blueprint

from ..auth.gate import install_admin_gate

skills_bp = Blueprint(
    'skills_admin',
    __name__,
    url_prefix='/admin/skills',
    template_folder='templates',
)
install_admin_gate(skills_bp)

from . import routes

__all__ = ['skills_bp']
