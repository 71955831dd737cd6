import os
import sqlite3


class Database:

    @staticmethod
    def connect(path):
        conn = sqlite3.connect(path)
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def init_schema(path):
        """Create every portfolio table if it doesn't exist, then migrate missing columns."""
        db_dir = os.path.dirname(path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

        conn = Database.connect(path)
        try:
            with conn:
                cursor = conn.cursor()

                cursor.execute('''
                    CREATE TABLE IF NOT EXISTS projects (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        title TEXT NOT NULL,
                        description TEXT NOT NULL,
                        long_description TEXT,
                        image_url TEXT,
                        tech_stack TEXT,
                        github_url TEXT,
                        demo_url TEXT,
                        category TEXT NOT NULL,
                        status TEXT NOT NULL DEFAULT 'completed',
                        featured INTEGER NOT NULL DEFAULT 0,
                        order_index INTEGER NOT NULL DEFAULT 0,
                        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                ''')

                # Migration: add columns introduced after the first schema
                cursor.execute("PRAGMA table_info(projects)")
                columns = [column[1] for column in cursor.fetchall()]

                new_columns = [
                    ('long_description', 'TEXT'),
                    ('demo_url', 'TEXT'),
                    ('status', "TEXT NOT NULL DEFAULT 'completed'"),
                    ('order_index', 'INTEGER NOT NULL DEFAULT 0'),
                ]
                for col_name, col_type in new_columns:
                    if col_name not in columns:
                        print(f"Adding {col_name} column to projects table...")
                        cursor.execute(f'ALTER TABLE projects ADD COLUMN {col_name} {col_type}')

                cursor.execute('''
                    CREATE TABLE IF NOT EXISTS skills (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        name TEXT NOT NULL UNIQUE,
                        category TEXT NOT NULL,
                        proficiency INTEGER NOT NULL DEFAULT 2,
                        icon_name TEXT,
                        order_index INTEGER NOT NULL DEFAULT 0,
                        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                ''')

                cursor.execute('''
                    CREATE TABLE IF NOT EXISTS experiences (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        company_name TEXT NOT NULL,
                        position TEXT NOT NULL,
                        description TEXT,
                        start_date TEXT NOT NULL,
                        end_date TEXT,
                        is_current INTEGER NOT NULL DEFAULT 0,
                        location TEXT,
                        order_index INTEGER NOT NULL DEFAULT 0,
                        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                ''')

                cursor.execute('''
                    CREATE TABLE IF NOT EXISTS personal_info (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        key TEXT NOT NULL UNIQUE,
                        value TEXT,
                        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                ''')

                cursor.execute('CREATE INDEX IF NOT EXISTS idx_projects_order ON projects(order_index)')
                cursor.execute('CREATE INDEX IF NOT EXISTS idx_projects_featured ON projects(featured)')
                cursor.execute('CREATE INDEX IF NOT EXISTS idx_skills_category ON skills(category)')
                cursor.execute('CREATE INDEX IF NOT EXISTS idx_experiences_start ON experiences(start_date)')
        finally:
            conn.close()
