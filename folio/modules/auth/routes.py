"""
Admin Auth Routes
=================

Login page, dashboard and recent log feed.
"""

from flask import jsonify, redirect, render_template, request, url_for

from . import auth_bp
from .gate import admin_required, get_auth
from ...core.logging_service import logger
from ...core.store import StoreError, get_store


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login route"""
    auth = get_auth()

    if request.method == 'GET':
        # Already signed in: nothing to do here
        if auth.is_logged_in(request):
            return redirect(url_for('admin.dashboard'))
        return render_template('admin/login.html')

    password = request.form.get('password', '')
    if not password:
        return render_template('admin/login.html', error='Please enter the password.')

    result = auth.login(request, password)
    if result.get('error'):
        return render_template('admin/login.html', error=result['error'])

    response = redirect(url_for('admin.dashboard'))
    for name, value in result['headers'].items():
        response.headers.add(name, value)
    return response


@auth_bp.route('/', methods=['GET', 'POST'])
@auth_bp.route('', methods=['GET', 'POST'])
@admin_required
def dashboard():
    """Admin dashboard with content counts"""
    store = get_store()
    try:
        stats = {
            'total_projects': store.count('projects'),
            'featured_projects': store.count('projects', where={'featured': True}),
            'total_skills': store.count('skills'),
            'total_experiences': store.count('experiences'),
        }
    except StoreError as e:
        logger.log_error_with_traceback('admin', e)
        stats = None

    return render_template('admin/dashboard.html', stats=stats)


@auth_bp.route('/api/logs')
@admin_required
def recent_logs():
    """Recent application log entries"""
    level = request.args.get('level')
    limit = max(1, min(request.args.get('limit', 50, type=int), 500))
    return jsonify({'success': True, 'logs': logger.get_recent_logs(limit=limit, level=level)})


@auth_bp.route('/api/logs/cleanup', methods=['POST'])
@admin_required
def cleanup_logs():
    """Delete log entries older than ?days= (default 30)"""
    days = max(request.args.get('days', 30, type=int), 1)
    deleted = logger.cleanup_old_logs(days_to_keep=days)
    logger.log_admin_action('admin', f"cleaned up logs older than {days} days", {'deleted': deleted})
    return jsonify({'success': True, 'deleted': deleted})
