"""
Personal Info Admin Routes
==========================
"""

from flask import render_template, request

from . import personal_info_bp
from .handlers import update_personal_info
from ...core.choices import PERSONAL_INFO_FIELDS, PERSONAL_INFO_LABELS
from ...core.store import get_store


@personal_info_bp.route('/', methods=['GET', 'POST'])
@personal_info_bp.route('', methods=['GET', 'POST'])
def personal_info_page():
    """Edit every personal info field at once"""
    store = get_store()
    result = {}

    if request.method == 'POST':
        result = update_personal_info(store, request.form)

    if result.get('error'):
        # Keep what was typed
        personal_info = request.form.to_dict()
    else:
        personal_info = store.get_personal_info()

    return render_template(
        'personal_info/personal_info.html',
        personal_info=personal_info,
        fields=PERSONAL_INFO_FIELDS,
        labels=PERSONAL_INFO_LABELS,
        success=result.get('success', False),
        error=result.get('error'),
    )
