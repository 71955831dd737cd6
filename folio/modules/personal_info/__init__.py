"""
Personal Info Module
====================

Admin form for the name, headline, bio and contact links shown on the
landing page. Stored as key/value rows so new fields need no migration.
"""

from flask import Blueprint

from ..auth.gate import install_admin_gate

personal_info_bp = Blueprint(
    'personal_info_admin',
    __name__,
    url_prefix='/admin/personalInfo',
    template_folder='templates',
)
install_admin_gate(personal_info_bp)

from . import routes

__all__ = ['personal_info_bp']
