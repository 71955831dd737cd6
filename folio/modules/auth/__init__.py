"""
Auth Module
===========

Admin authentication for Folio.

Provides:
- Password login issuing the encrypted __admin_session cookie
- Logout (from any admin page via _action=logout)
- The admin dashboard with content counts
- AdminAuth gate and decorators used by every admin module
"""

from flask import Blueprint

# Note: Blueprint name is 'admin' so templates can use url_for('admin.login')
auth_bp = Blueprint(
    'admin',
    __name__,
    url_prefix='/admin',
    template_folder='templates',
)

from . import routes
from .gate import AdminAuth, admin_required, install_admin_gate

__all__ = ['auth_bp', 'AdminAuth', 'admin_required', 'install_admin_gate']
