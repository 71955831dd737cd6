"""Personal info upsert handler"""

from ...core.choices import PERSONAL_INFO_FIELDS
from ...core.logging_service import logger
from ...core.store import StoreError


def collect_personal_info(form):
    """Known keys only; a missing field is stored as an empty string"""
    return {field: (form.get(field) or '').strip() for field in PERSONAL_INFO_FIELDS}


def update_personal_info(store, form):
    values = collect_personal_info(form)

    try:
        saved = store.upsert_personal_info(values)
    except StoreError as e:
        logger.log_error_with_traceback('personal_info', e, {'action': 'update'})
        return {'error': 'An error occurred while updating personal info.'}

    logger.log_admin_action('personal_info', 'updated personal info', {'fields': saved})
    return {'success': True}
