"""Experience mutation handlers"""

import re

from ...core.logging_service import logger
from ...core.store import StoreError

EXPERIENCE_FAILED_MESSAGE = 'An error occurred while processing the experience.'

_YEAR_MONTH = re.compile(r'^\d{4}-(0[1-9]|1[0-2])$')


def is_year_month(value):
    return bool(value) and bool(_YEAR_MONTH.match(value))


def add_experience(store, form):
    company_name = (form.get('company_name') or '').strip()
    position = (form.get('position') or '').strip()
    start_date = (form.get('start_date') or '').strip()
    end_date = (form.get('end_date') or '').strip() or None
    is_current = form.get('is_current') in ('on', 'true', '1')

    if not company_name or not position or not start_date:
        return {'error': 'Company name, position and start date are required.'}

    if not is_year_month(start_date):
        return {'error': 'Start date must be in YYYY-MM format.'}

    # A current position has no end date, whatever was submitted
    if is_current:
        end_date = None
    elif end_date and not is_year_month(end_date):
        return {'error': 'End date must be in YYYY-MM format.'}
    elif end_date and end_date < start_date:
        return {'error': 'End date cannot be before the start date.'}

    try:
        order_index = int((form.get('order_index') or '0').strip() or 0)
    except ValueError:
        return {'error': 'Order must be a whole number.'}

    try:
        experience_id = store.insert('experiences', {
            'company_name': company_name,
            'position': position,
            'description': (form.get('description') or '').strip() or None,
            'start_date': start_date,
            'end_date': end_date,
            'is_current': is_current,
            'location': (form.get('location') or '').strip() or None,
            'order_index': order_index,
        })
    except StoreError as e:
        logger.log_error_with_traceback('experiences', e, {'action': 'add'})
        return {'error': EXPERIENCE_FAILED_MESSAGE}

    logger.log_admin_action('experiences', f"added experience {experience_id}", {'company': company_name})
    return {'success': True, 'id': experience_id, 'action': 'add'}


def delete_experience(store, experience_id):
    if experience_id is None:
        return {'error': 'An experience id is required.'}

    try:
        deleted = store.delete('experiences', experience_id)
    except StoreError as e:
        logger.log_error_with_traceback('experiences', e, {'action': 'delete', 'id': experience_id})
        return {'error': EXPERIENCE_FAILED_MESSAGE}

    if deleted:
        logger.log_admin_action('experiences', f"deleted experience {experience_id}")
    return {'success': True, 'action': 'delete', 'deleted': deleted}


def format_year_month(value):
    """'2023-1' or '2023-01' -> '2023.01'"""
    if not value:
        return ''
    year, _, month = value.partition('-')
    return f"{year}.{month.zfill(2)}" if month else year


def format_period(experience):
    start = format_year_month(experience.get('start_date'))
    if experience.get('is_current') or not experience.get('end_date'):
        return f"{start} - Present"
    return f"{start} - {format_year_month(experience['end_date'])}"


def description_lines(description):
    """Newline-delimited bullet text -> non-empty lines"""
    if not description:
        return []
    lines = (line.strip().lstrip('-•').strip() for line in description.splitlines())
    return [line for line in lines if line]
