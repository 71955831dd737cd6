"""
Content Store
=============

Single access point for the portfolio tables. Table names, column names and
sort orders come from the ENTITIES registry below and never from request
data; every value reaches SQLite as a bound parameter.
"""

import sqlite3
from contextlib import contextmanager

from flask import current_app

from .choices import PERSONAL_INFO_FIELDS, PROFICIENCY_LABELS, project_categories, project_statuses
from .database import Database


class StoreError(Exception):
    """Base class for every storage-layer failure"""


class UnknownEntityError(StoreError):
    pass


class UnknownColumnError(StoreError):
    pass


class InvalidValueError(StoreError):
    pass


class DuplicateError(StoreError):
    pass


ENTITIES = {
    'projects': {
        'columns': ('title', 'description', 'long_description', 'image_url', 'tech_stack',
                    'github_url', 'demo_url', 'category', 'status', 'featured', 'order_index'),
        'booleans': ('featured',),
        'orders': {
            'default': 'order_index ASC, created_at DESC, id DESC',
            'newest': 'created_at DESC, id DESC',
        },
        'touch_updated_at': True,
    },
    'skills': {
        'columns': ('name', 'category', 'proficiency', 'icon_name', 'order_index'),
        'booleans': (),
        'orders': {
            'default': 'category ASC, proficiency DESC, name ASC',
            'name': 'name ASC',
            'manual': 'order_index ASC, name ASC',
        },
        'touch_updated_at': True,
    },
    'experiences': {
        'columns': ('company_name', 'position', 'description', 'start_date', 'end_date',
                    'is_current', 'location', 'order_index'),
        'booleans': ('is_current',),
        'orders': {
            'default': 'is_current DESC, start_date DESC, id DESC',
            'manual': 'order_index ASC, start_date DESC',
        },
        'touch_updated_at': True,
    },
}


def _entity(name):
    try:
        return ENTITIES[name]
    except KeyError:
        raise UnknownEntityError(f"Unknown entity: {name}")


def _check_columns(entity_name, columns, extra=()):
    allowed = set(_entity(entity_name)['columns']) | set(extra)
    unknown = [c for c in columns if c not in allowed]
    if unknown:
        raise UnknownColumnError(f"Unknown column(s) for {entity_name}: {', '.join(unknown)}")


def _row_to_dict(entity_name, row):
    d = dict(row)
    for col in _entity(entity_name)['booleans']:
        if col in d:
            d[col] = bool(d[col])
    return d


def _normalise(entity_name, values):
    """Boundary rules that hold no matter which handler is writing"""
    values = dict(values)
    spec = _entity(entity_name)

    for col in spec['booleans']:
        if col in values:
            values[col] = 1 if values[col] else 0

    if entity_name == 'projects':
        if 'category' in values and values['category'] not in project_categories():
            raise InvalidValueError(f"Invalid project category: {values['category']!r}")
        if 'status' in values and values['status'] not in project_statuses():
            raise InvalidValueError(f"Invalid project status: {values['status']!r}")

    elif entity_name == 'skills':
        if 'proficiency' in values:
            try:
                proficiency = int(values['proficiency'])
            except (TypeError, ValueError):
                raise InvalidValueError(f"Invalid proficiency: {values['proficiency']!r}")
            if proficiency not in PROFICIENCY_LABELS:
                raise InvalidValueError(f"Proficiency must be between 1 and 4, got {proficiency}")
            values['proficiency'] = proficiency

    elif entity_name == 'experiences':
        # Current employment and an end date are mutually exclusive
        if values.get('is_current'):
            values['end_date'] = None

    return values


def get_store():
    """The ContentStore of the running app"""
    return current_app.extensions['folio'].store


class ContentStore:

    def __init__(self, db_path):
        self.db_path = db_path

    @contextmanager
    def _connect(self):
        conn = Database.connect(self.db_path)
        try:
            with conn:
                yield conn
        except sqlite3.IntegrityError as e:
            if 'UNIQUE' in str(e):
                raise DuplicateError(str(e)) from e
            raise StoreError(str(e)) from e
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        finally:
            conn.close()

    # ===== Reads =====

    def list(self, entity_name, order_by='default', where=None, limit=None):
        """All rows of an entity, optionally filtered by column equality"""
        spec = _entity(entity_name)
        if order_by not in spec['orders']:
            raise StoreError(f"Unknown order '{order_by}' for {entity_name}")

        params = []
        sql = f'SELECT * FROM {entity_name}'
        if where:
            _check_columns(entity_name, where.keys(), extra=('id',))
            conditions = []
            for col, value in where.items():
                conditions.append(f'{col} = ?')
                params.append(int(value) if col in spec['booleans'] else value)
            sql += f' WHERE {" AND ".join(conditions)}'
        sql += f" ORDER BY {spec['orders'][order_by]}"
        if limit is not None:
            sql += ' LIMIT ?'
            params.append(int(limit))

        with self._connect() as conn:
            rows = conn.execute(sql, params).fetchall()
        return [_row_to_dict(entity_name, row) for row in rows]

    def get_by_id(self, entity_name, entity_id):
        _entity(entity_name)
        with self._connect() as conn:
            row = conn.execute(f'SELECT * FROM {entity_name} WHERE id = ?', (entity_id,)).fetchone()
        return _row_to_dict(entity_name, row) if row else None

    def count(self, entity_name, where=None):
        spec = _entity(entity_name)
        params = []
        sql = f'SELECT COUNT(*) FROM {entity_name}'
        if where:
            _check_columns(entity_name, where.keys())
            sql += ' WHERE ' + ' AND '.join(f'{col} = ?' for col in where)
            params = [int(v) if c in spec['booleans'] else v for c, v in where.items()]
        with self._connect() as conn:
            return conn.execute(sql, params).fetchone()[0]

    def exists(self, entity_name, column, value):
        _check_columns(entity_name, [column])
        with self._connect() as conn:
            row = conn.execute(
                f'SELECT 1 FROM {entity_name} WHERE {column} = ? LIMIT 1', (value,)
            ).fetchone()
        return row is not None

    # ===== Writes =====

    def insert(self, entity_name, values):
        """Insert one row and return its id"""
        _check_columns(entity_name, values.keys())
        values = _normalise(entity_name, values)
        columns = list(values.keys())
        placeholders = ', '.join('?' for _ in columns)

        with self._connect() as conn:
            cursor = conn.execute(
                f'INSERT INTO {entity_name} ({", ".join(columns)}) VALUES ({placeholders})',
                [values[c] for c in columns]
            )
            return cursor.lastrowid

    def update(self, entity_name, entity_id, values):
        """Update one row; False when the id doesn't exist"""
        _check_columns(entity_name, values.keys())
        values = _normalise(entity_name, values)
        if not values:
            return self.get_by_id(entity_name, entity_id) is not None

        set_clauses = [f'{col} = ?' for col in values]
        if _entity(entity_name)['touch_updated_at']:
            set_clauses.append('updated_at = CURRENT_TIMESTAMP')

        with self._connect() as conn:
            cursor = conn.execute(
                f'UPDATE {entity_name} SET {", ".join(set_clauses)} WHERE id = ?',
                list(values.values()) + [entity_id]
            )
            return cursor.rowcount > 0

    def delete(self, entity_name, entity_id):
        """Delete one row; deleting a missing id is a no-op returning False"""
        _entity(entity_name)
        with self._connect() as conn:
            cursor = conn.execute(f'DELETE FROM {entity_name} WHERE id = ?', (entity_id,))
            return cursor.rowcount > 0

    def toggle(self, entity_name, entity_id, column):
        """Flip a boolean column in one statement. Returns the new value, or None if the row is missing."""
        if column not in _entity(entity_name)['booleans']:
            raise UnknownColumnError(f"{column} is not a boolean column of {entity_name}")

        with self._connect() as conn:
            cursor = conn.execute(f'''
                UPDATE {entity_name}
                SET {column} = CASE WHEN {column} THEN 0 ELSE 1 END,
                    updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
            ''', (entity_id,))
            if cursor.rowcount == 0:
                return None
            row = conn.execute(f'SELECT {column} FROM {entity_name} WHERE id = ?', (entity_id,)).fetchone()
            return bool(row[0])

    # ===== Personal info (key/value) =====

    def get_personal_info(self):
        """Collapse the key/value rows into one dict"""
        with self._connect() as conn:
            rows = conn.execute('SELECT key, value FROM personal_info').fetchall()
        return {row['key']: row['value'] for row in rows}

    def upsert_personal_info(self, mapping):
        """Insert-or-update each key. All keys commit together or not at all."""
        unknown = [k for k in mapping if k not in PERSONAL_INFO_FIELDS]
        if unknown:
            raise InvalidValueError(f"Unknown personal info key(s): {', '.join(unknown)}")

        with self._connect() as conn:
            for key, value in mapping.items():
                conn.execute('''
                    INSERT INTO personal_info (key, value, created_at, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = CURRENT_TIMESTAMP
                ''', (key, value))
        return len(mapping)
