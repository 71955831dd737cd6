"""
Closed value sets shared by the store, the handlers and the templates.
Edit the lists here to fit your own portfolio.
"""

from enum import Enum


class ProjectCategory(str, Enum):
    PERSONAL = 'personal'
    CLIENT = 'client'
    WORK = 'work'
    STUDY = 'study'
    TEAM = 'team'


class ProjectStatus(str, Enum):
    COMPLETED = 'completed'
    IN_PROGRESS = 'in_progress'
    ARCHIVED = 'archived'


PROJECT_CATEGORY_LABELS = {
    ProjectCategory.PERSONAL.value: 'Personal project',
    ProjectCategory.CLIENT.value: 'Client project',
    ProjectCategory.WORK.value: 'Company project',
    ProjectCategory.STUDY.value: 'Study project',
    ProjectCategory.TEAM.value: 'Team project',
}

PROJECT_STATUS_LABELS = {
    ProjectStatus.COMPLETED.value: 'Completed',
    ProjectStatus.IN_PROGRESS.value: 'In progress',
    ProjectStatus.ARCHIVED.value: 'Archived',
}

SKILL_CATEGORIES = {
    'frontend': 'Frontend',
    'backend': 'Backend',
    'database': 'Database',
    'tools': 'Tools',
    'others': 'Others',
}

# Stored as integers 1-4
PROFICIENCY_LEVELS = {
    'beginner': 1,
    'intermediate': 2,
    'advanced': 3,
    'expert': 4,
}
PROFICIENCY_LABELS = {number: label for label, number in PROFICIENCY_LEVELS.items()}
DEFAULT_PROFICIENCY = PROFICIENCY_LEVELS['intermediate']

# The only keys ever written to personal_info
PERSONAL_INFO_FIELDS = (
    'name',
    'title',
    'bio',
    'email',
    'github',
    'velog',
    'linkedin',
    'location',
)

PERSONAL_INFO_LABELS = {
    'name': 'Name',
    'title': 'Headline',
    'bio': 'Bio',
    'email': 'Email',
    'github': 'GitHub URL',
    'velog': 'Velog URL',
    'linkedin': 'LinkedIn URL',
    'location': 'Location',
}


def project_categories():
    return [c.value for c in ProjectCategory]


def project_statuses():
    return [s.value for s in ProjectStatus]


def category_label(value):
    return PROJECT_CATEGORY_LABELS.get(value, value)


def status_label(value):
    return PROJECT_STATUS_LABELS.get(value, value)


def proficiency_label(value):
    try:
        return PROFICIENCY_LABELS.get(int(value), 'intermediate')
    except (TypeError, ValueError):
        return 'intermediate'
