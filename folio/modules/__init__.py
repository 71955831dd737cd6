"""
Folio Modules
=============

Each module is a Flask blueprint. Admin modules are gated by the admin
session cookie; the public module serves visitors.
"""

from . import auth, experiences, personal_info, projects, public, skills

__all__ = ['auth', 'experiences', 'personal_info', 'projects', 'public', 'skills']
