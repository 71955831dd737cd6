"""
Experiences Admin Module
========================

Work history entries. Current positions sort first and never carry an
end date.
"""

from flask import Blueprint

from ..auth.gate import install_admin_gate

experiences_bp = Blueprint(
    'experiences_admin',
    __name__,
    url_prefix='/admin/experiences',
    template_folder='templates',
)
install_admin_gate(experiences_bp)

from . import routes

__all__ = ['experiences_bp']
