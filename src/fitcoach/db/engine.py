"""Database engine setup and initialization."""

import os
from pathlib import Path

import aiosqlite

# Default data directory, overridable with FITCOACH_DATA_DIR
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"


def get_data_dir() -> Path:
    """Get the data directory path."""
    override = os.environ.get("FITCOACH_DATA_DIR")
    return Path(override) if override else DATA_DIR


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "fitcoach.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Accounts and their profile details
        await db.execute("""
            CREATE TABLE IF NOT EXISTS profiles (
                id TEXT PRIMARY KEY,
                email TEXT UNIQUE NOT NULL,
                first_name TEXT NOT NULL,
                last_name TEXT NOT NULL,
                role TEXT NOT NULL DEFAULT 'client',
                active INTEGER NOT NULL DEFAULT 1,
                disabled_at TEXT,
                disabled_duration_days INTEGER,
                created_by TEXT,
                birth_date TEXT,
                height REAL,
                body_weight REAL,
                objectives TEXT DEFAULT '',
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Coach -> client links, created when a coach provisions a client
        await db.execute("""
            CREATE TABLE IF NOT EXISTS coach_clients (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                coach_id TEXT NOT NULL,
                client_id TEXT NOT NULL,
                UNIQUE (coach_id, client_id),
                FOREIGN KEY (coach_id) REFERENCES profiles(id),
                FOREIGN KEY (client_id) REFERENCES profiles(id)
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS goals (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                owner_id TEXT NOT NULL,
                name TEXT NOT NULL,
                notes TEXT,
                start_date TEXT NOT NULL,
                target_date TEXT NOT NULL,
                completed INTEGER DEFAULT 0,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (owner_id) REFERENCES profiles(id)
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                description TEXT DEFAULT '',
                duration_minutes INTEGER DEFAULT 30,
                difficulty TEXT DEFAULT 'beginner',
                category TEXT DEFAULT 'cardio',
                coach_id TEXT NOT NULL,
                is_public INTEGER DEFAULT 1,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (coach_id) REFERENCES profiles(id)
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_sessions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                workout_id INTEGER NOT NULL,
                started_at TIMESTAMP NOT NULL,
                completed INTEGER DEFAULT 0,
                FOREIGN KEY (user_id) REFERENCES profiles(id),
                FOREIGN KEY (workout_id) REFERENCES workouts(id) ON DELETE CASCADE
            )
        """)

        # Body measurements; every measurement column is optional
        await db.execute("""
            CREATE TABLE IF NOT EXISTS progress_entries (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                recorded_on TEXT NOT NULL,
                weight REAL,
                muscle_mass REAL,
                body_fat REAL,
                waist INTEGER,
                chest INTEGER,
                arms INTEGER,
                notes TEXT,
                FOREIGN KEY (user_id) REFERENCES profiles(id)
            )
        """)

        # Built-in exercise library, seeded by seed_exercises
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT UNIQUE NOT NULL,
                muscle_group TEXT NOT NULL,
                description TEXT DEFAULT '',
                duration_seconds INTEGER DEFAULT 45,
                difficulty TEXT DEFAULT 'intermediate'
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_profiles_active
            ON profiles(active)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_goals_owner
            ON goals(owner_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_public
            ON workouts(is_public, category)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_progress_entries_user
            ON progress_entries(user_id)
        """)

        await db.commit()


async def seed_exercises(db_path: Path | None = None) -> int:
    """Seed the database with the built-in exercise library.

    Exercises already present (by name) are left alone. Returns the
    number of exercises added.
    """
    from ..models.exercise import COMMON_EXERCISES

    if db_path is None:
        db_path = get_db_path()

    added = 0
    async with aiosqlite.connect(db_path) as db:
        for exercise in COMMON_EXERCISES:
            data = exercise.to_dict()
            cursor = await db.execute(
                """
                INSERT OR IGNORE INTO exercises
                (name, muscle_group, description, duration_seconds, difficulty)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    data["name"],
                    data["muscle_group"],
                    data["description"],
                    data["duration_seconds"],
                    data["difficulty"],
                ),
            )
            added += cursor.rowcount
        await db.commit()

    return added
