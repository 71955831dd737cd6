"""
Project mutation handlers: validate -> transform -> persist -> report.

Every handler returns a plain dict:
    {'success': True, 'id': ...}        persisted
    {'errors': {field: message}}        nothing was written
    {'not_found': True}                 the id doesn't exist
"""

import json

from ...core.choices import ProjectStatus, project_categories, project_statuses
from ...core.logging_service import logger
from ...core.store import StoreError

SAVE_FAILED_MESSAGE = 'An error occurred while saving the project.'


# ===== Tech stack codec =====

def parse_tech_stack_input(text):
    """'React, TypeScript ,  Vite' -> ['React', 'TypeScript', 'Vite']"""
    if not text:
        return []
    return [token.strip() for token in text.split(',') if token.strip()]


def encode_tech_stack(items):
    return json.dumps(list(items), ensure_ascii=False)


def decode_tech_stack(stored):
    """Stored JSON array -> list of strings. Anything unparseable reads as []."""
    if not stored:
        return []
    if isinstance(stored, list):
        return [str(item) for item in stored]
    try:
        parsed = json.loads(stored)
    except (ValueError, TypeError):
        return []
    if not isinstance(parsed, list):
        return []
    return [str(item) for item in parsed]


def tech_stack_to_form(stored):
    """Stored JSON array -> 'React, TypeScript, Vite' for the edit form"""
    return ', '.join(decode_tech_stack(stored))


def parse_image_urls(value):
    """image_url may hold one URL, several newline-separated URLs, or a JSON array"""
    if not value:
        return []
    value = value.strip()
    if value.startswith('['):
        try:
            parsed = json.loads(value)
            if isinstance(parsed, list):
                return [str(u).strip() for u in parsed if str(u).strip()]
        except ValueError:
            pass
    return [line.strip() for line in value.splitlines() if line.strip()]


# ===== Validation =====

def _optional(form, field):
    value = (form.get(field) or '').strip()
    return value or None


def validate_project_form(form):
    """
    Validate a submitted project form.

    Returns (values, errors). values is ready for the store only when
    errors is empty.
    """
    errors = {}

    title = (form.get('title') or '').strip()
    description = (form.get('description') or '').strip()
    tech_stack_raw = form.get('tech_stack') or ''
    category = (form.get('category') or '').strip()
    status = (form.get('status') or '').strip() or ProjectStatus.COMPLETED.value

    if not title:
        errors['title'] = 'A project title is required.'

    if not description:
        errors['description'] = 'A project description is required.'

    tech_items = parse_tech_stack_input(tech_stack_raw)
    if not tech_stack_raw.strip():
        errors['tech_stack'] = 'Tech stack is required.'
    elif not tech_items:
        errors['tech_stack'] = 'At least one tech stack item is required.'

    if not category:
        errors['category'] = 'Please choose a category.'
    elif category not in project_categories():
        errors['category'] = 'Unknown category.'

    if status not in project_statuses():
        errors['status'] = 'Unknown status.'

    order_raw = (form.get('order_index') or '').strip()
    order_index = 0
    if order_raw:
        try:
            order_index = int(order_raw)
        except ValueError:
            errors['order_index'] = 'Order must be a whole number.'

    values = {
        'title': title,
        'description': description,
        'long_description': _optional(form, 'long_description'),
        'image_url': _optional(form, 'image_url'),
        'tech_stack': encode_tech_stack(tech_items),
        'github_url': _optional(form, 'github_url'),
        'demo_url': _optional(form, 'demo_url'),
        'category': category,
        'status': status,
        'featured': form.get('featured') in ('on', 'true', '1'),
        'order_index': order_index,
    }
    return values, errors


# ===== Handlers =====

def create_project(store, form):
    values, errors = validate_project_form(form)
    if errors:
        return {'errors': errors}

    try:
        project_id = store.insert('projects', values)
    except StoreError as e:
        logger.log_error_with_traceback('projects', e, {'action': 'create'})
        return {'errors': {'title': SAVE_FAILED_MESSAGE}}

    logger.log_admin_action('projects', f"created project {project_id}", {'title': values['title']})
    return {'success': True, 'id': project_id}


def update_project(store, project_id, form):
    values, errors = validate_project_form(form)
    if errors:
        return {'errors': errors}

    try:
        updated = store.update('projects', project_id, values)
    except StoreError as e:
        logger.log_error_with_traceback('projects', e, {'action': 'update', 'id': project_id})
        return {'errors': {'title': SAVE_FAILED_MESSAGE}}

    if not updated:
        return {'not_found': True}

    logger.log_admin_action('projects', f"updated project {project_id}")
    return {'success': True, 'id': project_id}


def delete_project(store, project_id):
    """Deleting a missing id succeeds without effect"""
    try:
        deleted = store.delete('projects', project_id)
    except StoreError as e:
        logger.log_error_with_traceback('projects', e, {'action': 'delete', 'id': project_id})
        return {'error': 'An error occurred while deleting the project.'}

    if deleted:
        logger.log_admin_action('projects', f"deleted project {project_id}")
    return {'success': True, 'deleted': deleted}


def toggle_featured(store, project_id):
    """Flip the stored featured flag. Twice returns the original value."""
    try:
        featured = store.toggle('projects', project_id, 'featured')
    except StoreError as e:
        logger.log_error_with_traceback('projects', e, {'action': 'toggle-featured', 'id': project_id})
        return {'error': 'An error occurred while updating the project.'}

    if featured is None:
        return {'success': True, 'featured': None}

    logger.log_admin_action('projects', f"project {project_id} featured={featured}")
    return {'success': True, 'featured': featured}


def get_project_for_form(store, project_id):
    """Stored row with tech_stack turned back into comma text; None if missing"""
    project = store.get_by_id('projects', project_id)
    if project is None:
        return None
    project['tech_stack'] = tech_stack_to_form(project.get('tech_stack'))
    return project
