"""
Public Routes
=============

Public-facing portfolio pages, projects API and health check.
"""

from datetime import datetime

from flask import abort, jsonify, render_template, request
from flask_cors import cross_origin

from . import health_bp, public_bp
from ..experiences.handlers import description_lines, format_period
from ..projects.handlers import decode_tech_stack, parse_image_urls
from ..skills.handlers import group_by_category
from ...core.choices import SKILL_CATEGORIES, category_label, proficiency_label, status_label
from ...core.config import Config
from ...core.logging_service import logger
from ...core.store import StoreError, get_store

FEATURED_LIMIT = 6
SIMPLE_ICONS_CDN = 'https://cdn.simpleicons.org'


# ===== Template filters =====

@public_bp.app_template_filter('tech_stack')
def tech_stack_filter(value):
    return decode_tech_stack(value)


@public_bp.app_template_filter('image_urls')
def image_urls_filter(value):
    return parse_image_urls(value)


@public_bp.app_template_filter('category_label')
def category_label_filter(value):
    return category_label(value)


@public_bp.app_template_filter('status_label')
def status_label_filter(value):
    return status_label(value)


@public_bp.app_template_filter('proficiency_label')
def proficiency_label_filter(value):
    return proficiency_label(value)


@public_bp.app_template_filter('skill_category_label')
def skill_category_label_filter(value):
    return SKILL_CATEGORIES.get(value, value)


@public_bp.app_template_filter('experience_period')
def experience_period_filter(experience):
    return format_period(experience)


@public_bp.app_template_filter('bullet_lines')
def bullet_lines_filter(value):
    return description_lines(value)


@public_bp.app_template_filter('icon_url')
def icon_url_filter(icon_name):
    return f"{SIMPLE_ICONS_CDN}/{icon_name}" if icon_name else None


# ===== Routes =====

@public_bp.route('/')
def index():
    """Landing page"""
    store = get_store()
    return render_template(
        'public/index.html',
        personal_info=store.get_personal_info(),
        projects=store.list('projects', where={'featured': True}, limit=FEATURED_LIMIT),
        skills_by_category=group_by_category(store.list('skills')),
        experiences=store.list('experiences'),
    )


@public_bp.route('/projects/<int:project_id>')
def project_detail(project_id):
    """Single project page"""
    project = get_store().get_by_id('projects', project_id)
    if project is None:
        abort(404, description='Project not found.')
    return render_template('public/project_detail.html', project=project)


@public_bp.route('/api/projects')
@cross_origin(origins=Config.CORS_ORIGINS)
def projects_api():
    """
    Projects as JSON for embedding on other sites.
    ?featured=1 limits to featured projects, ?limit=N caps the count.
    """
    where = {'featured': True} if request.args.get('featured') in ('1', 'true') else None
    limit = request.args.get('limit', type=int)
    if limit is not None:
        limit = max(1, min(limit, 50))

    try:
        projects = get_store().list('projects', where=where, limit=limit)
    except StoreError as e:
        logger.log_error_with_traceback('public', e)
        return jsonify({'error': 'Failed to load projects'}), 500

    for project in projects:
        project['tech_stack'] = decode_tech_stack(project.get('tech_stack'))
        project['images'] = parse_image_urls(project.get('image_url'))
    return jsonify(projects)


@health_bp.route('/')
@health_bp.route('')
def health_check():
    """Uptime check: 200 when the database answers, 503 otherwise"""
    checks = {'timestamp': datetime.now().isoformat()}
    try:
        checks['database'] = {'ok': True, 'projects': get_store().count('projects')}
        status, code = 'ok', 200
    except StoreError as e:
        checks['database'] = {'ok': False, 'error': 'unavailable'}
        logger.error('system', f"Health check failed: {e}")
        status, code = 'critical', 503
    return jsonify({'status': status, 'checks': checks}), code
