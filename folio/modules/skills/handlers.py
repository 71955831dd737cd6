"""Skill mutation handlers"""

from ...core.choices import DEFAULT_PROFICIENCY, PROFICIENCY_LABELS, PROFICIENCY_LEVELS
from ...core.logging_service import logger
from ...core.store import DuplicateError, StoreError

SKILL_FAILED_MESSAGE = 'An error occurred while processing the skill.'


def parse_proficiency(value):
    """
    Accepts a number 1-4 or a label (beginner, intermediate, advanced,
    expert). Anything else falls back to intermediate.
    """
    if value is None:
        return DEFAULT_PROFICIENCY
    value = str(value).strip().lower()
    if value in PROFICIENCY_LEVELS:
        return PROFICIENCY_LEVELS[value]
    try:
        number = int(value)
    except ValueError:
        return DEFAULT_PROFICIENCY
    return number if number in PROFICIENCY_LABELS else DEFAULT_PROFICIENCY


def add_skill(store, form):
    name = (form.get('name') or '').strip()
    category = (form.get('category') or '').strip()

    if not name or not category:
        return {'error': 'Skill name and category are required.'}

    proficiency = parse_proficiency(form.get('proficiency') or form.get('proficiencyLevel'))
    icon_name = (form.get('icon_name') or '').strip().lower() or None

    try:
        order_index = int((form.get('order_index') or '0').strip() or 0)
    except ValueError:
        return {'error': 'Order must be a whole number.'}

    try:
        if store.exists('skills', 'name', name):
            return {'error': f'A skill named "{name}" already exists.'}

        skill_id = store.insert('skills', {
            'name': name,
            'category': category,
            'proficiency': proficiency,
            'icon_name': icon_name,
            'order_index': order_index,
        })
    except DuplicateError:
        # Lost a race with a concurrent insert of the same name
        return {'error': f'A skill named "{name}" already exists.'}
    except StoreError as e:
        logger.log_error_with_traceback('skills', e, {'action': 'add'})
        return {'error': SKILL_FAILED_MESSAGE}

    logger.log_admin_action('skills', f"added skill {skill_id}", {'name': name})
    return {'success': True, 'id': skill_id, 'action': 'add'}


def delete_skill(store, skill_id):
    if skill_id is None:
        return {'error': 'A skill id is required.'}

    try:
        deleted = store.delete('skills', skill_id)
    except StoreError as e:
        logger.log_error_with_traceback('skills', e, {'action': 'delete', 'id': skill_id})
        return {'error': SKILL_FAILED_MESSAGE}

    if deleted:
        logger.log_admin_action('skills', f"deleted skill {skill_id}")
    return {'success': True, 'action': 'delete', 'deleted': deleted}


def group_by_category(skills):
    """{category: [skill, ...]} preserving the store's order"""
    grouped = {}
    for skill in skills:
        grouped.setdefault(skill['category'], []).append(skill)
    return grouped
