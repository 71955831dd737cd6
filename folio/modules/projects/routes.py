"""
Projects Admin Routes
=====================

List, create, edit, delete and feature projects. Authentication is
enforced for the whole blueprint by the admin gate.
"""

from flask import abort, flash, redirect, render_template, request, url_for

from . import projects_bp
from .handlers import (
    create_project, delete_project, get_project_for_form, toggle_featured, update_project,
)
from ...core.choices import PROJECT_CATEGORY_LABELS, PROJECT_STATUS_LABELS
from ...core.store import get_store


def _parse_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _render_form(template, project, errors=None, status=200):
    return render_template(
        template,
        project=project,
        errors=errors or {},
        categories=PROJECT_CATEGORY_LABELS,
        statuses=PROJECT_STATUS_LABELS,
    ), status


@projects_bp.route('/', methods=['GET', 'POST'])
@projects_bp.route('', methods=['GET', 'POST'])
def project_list():
    """Project list; POST handles delete and toggle-featured"""
    store = get_store()

    if request.method == 'POST':
        action = request.form.get('_action')
        project_id = _parse_id(request.form.get('projectId'))

        if project_id is None:
            flash('A project id is required.', 'error')
        elif action == 'delete':
            result = delete_project(store, project_id)
            flash(result.get('error') or 'Project deleted.', 'error' if result.get('error') else 'success')
        elif action == 'toggle-featured':
            result = toggle_featured(store, project_id)
            if result.get('error'):
                flash(result['error'], 'error')
        else:
            flash('Invalid request.', 'error')

        return redirect(url_for('projects_admin.project_list'))

    projects = store.list('projects')
    return render_template('projects/project_list.html', projects=projects)


@projects_bp.route('/new', methods=['GET', 'POST'])
def new_project():
    """Create a project"""
    if request.method == 'GET':
        return _render_form('projects/project_form.html', project={})

    result = create_project(get_store(), request.form)
    if result.get('errors'):
        # Re-render with what the user typed
        return _render_form('projects/project_form.html', request.form.to_dict(), result['errors'])

    flash('Project created.', 'success')
    return redirect(url_for('projects_admin.project_list'))


@projects_bp.route('/<int:project_id>/edit', methods=['GET', 'POST'])
def edit_project(project_id):
    """Edit a project"""
    store = get_store()

    if request.method == 'GET':
        project = get_project_for_form(store, project_id)
        if project is None:
            abort(404, description='Project not found.')
        return _render_form('projects/project_form.html', project)

    result = update_project(store, project_id, request.form)
    if result.get('not_found'):
        abort(404, description='Project not found.')
    if result.get('errors'):
        project = request.form.to_dict()
        project['id'] = project_id
        return _render_form('projects/project_form.html', project, result['errors'])

    flash('Project updated.', 'success')
    return redirect(url_for('projects_admin.project_list'))
