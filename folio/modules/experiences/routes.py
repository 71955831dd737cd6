"""
Experiences Admin Routes
========================
"""

from flask import flash, redirect, render_template, request, url_for

from . import experiences_bp
from .handlers import add_experience, delete_experience
from ...core.store import get_store


def _render_page(error=None, form=None):
    experiences = get_store().list('experiences')
    return render_template(
        'experiences/experiences.html',
        experiences=experiences,
        error=error,
        form=form or {},
    )


@experiences_bp.route('/', methods=['GET', 'POST'])
@experiences_bp.route('', methods=['GET', 'POST'])
def experiences_page():
    """Experience list and add form; POST handles add and delete"""
    if request.method == 'GET':
        return _render_page()

    store = get_store()
    intent = request.form.get('intent') or request.form.get('_action')

    if intent == 'add':
        result = add_experience(store, request.form)
    elif intent == 'delete':
        try:
            experience_id = int(request.form.get('experienceId', ''))
        except ValueError:
            experience_id = None
        result = delete_experience(store, experience_id)
    else:
        result = {'error': 'Invalid request.'}

    if result.get('error'):
        return _render_page(error=result['error'], form=request.form.to_dict())

    flash('Experience added.' if intent == 'add' else 'Experience deleted.', 'success')
    return redirect(url_for('experiences_admin.experiences_page'))
