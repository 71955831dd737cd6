"""
Skills Admin Routes
===================
"""

from flask import flash, redirect, render_template, request, url_for

from . import skills_bp
from .handlers import add_skill, delete_skill, group_by_category
from ...core.choices import PROFICIENCY_LEVELS, SKILL_CATEGORIES
from ...core.store import get_store


def _render_page(error=None, form=None, status=200):
    skills = get_store().list('skills')
    return render_template(
        'skills/skills.html',
        skills_by_category=group_by_category(skills),
        total=len(skills),
        categories=SKILL_CATEGORIES,
        levels=PROFICIENCY_LEVELS,
        error=error,
        form=form or {},
    ), status


@skills_bp.route('/', methods=['GET', 'POST'])
@skills_bp.route('', methods=['GET', 'POST'])
def skills_page():
    """Skill list and add form; POST handles add and delete"""
    if request.method == 'GET':
        return _render_page()

    store = get_store()
    action = request.form.get('_action') or request.form.get('intent')

    if action == 'add':
        result = add_skill(store, request.form)
    elif action == 'delete':
        try:
            skill_id = int(request.form.get('skillId', ''))
        except ValueError:
            skill_id = None
        result = delete_skill(store, skill_id)
    else:
        result = {'error': 'Invalid request.'}

    if result.get('error'):
        return _render_page(error=result['error'], form=request.form.to_dict())

    flash('Skill added.' if action == 'add' else 'Skill deleted.', 'success')
    return redirect(url_for('skills_admin.skills_page'))
