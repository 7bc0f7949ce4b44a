"""Data access layer for fitcoach."""

from datetime import datetime
from pathlib import Path

import aiosqlite

from ..models.account import CoachClientLink, UserAccount
from ..models.exercise import Exercise, MuscleGroup
from ..models.goal import Goal
from ..models.progress import MEASUREMENT_FIELDS, ProgressEntry
from ..models.workout import Workout, WorkoutCategory, WorkoutSession
from .engine import get_db_path


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class AccountRepository:
    """Repository for accounts (the ``profiles`` table)."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, account: UserAccount) -> str:
        """Create a new account. The id comes from the identity service."""
        data = account.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO profiles
                (id, email, first_name, last_name, role, active, disabled_at,
                 disabled_duration_days, created_by, birth_date, height,
                 body_weight, objectives)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["id"],
                    data["email"],
                    data["first_name"],
                    data["last_name"],
                    data["role"],
                    int(data["active"]),
                    data["disabled_at"],
                    data["disabled_duration_days"],
                    data["created_by"],
                    data["birth_date"],
                    data["height"],
                    data["body_weight"],
                    data["objectives"],
                ),
            )
            await db.commit()
            return account.id

    async def get(self, account_id: str) -> UserAccount | None:
        """Get an account by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM profiles WHERE id = ?", (account_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_account(row)

    async def get_by_email(self, email: str) -> UserAccount | None:
        """Get an account by email address."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM profiles WHERE email = ?", (email,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_account(row)

    async def list_all(self) -> list[UserAccount]:
        """List all accounts, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM profiles ORDER BY created_at DESC, rowid DESC"
            )
            rows = await cursor.fetchall()
            return [self._row_to_account(row) for row in rows]

    async def list_disabled(self) -> list[UserAccount]:
        """List every account that is not active."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM profiles WHERE active = 0 ORDER BY disabled_at"
            )
            rows = await cursor.fetchall()
            return [self._row_to_account(row) for row in rows]

    async def update(self, account: UserAccount) -> UserAccount:
        """Write every mutable field of an existing account."""
        data = account.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE profiles SET
                    email = ?, first_name = ?, last_name = ?, active = ?,
                    disabled_at = ?, disabled_duration_days = ?, birth_date = ?,
                    height = ?, body_weight = ?, objectives = ?
                WHERE id = ?
                """,
                (
                    data["email"],
                    data["first_name"],
                    data["last_name"],
                    int(data["active"]),
                    data["disabled_at"],
                    data["disabled_duration_days"],
                    data["birth_date"],
                    data["height"],
                    data["body_weight"],
                    data["objectives"],
                    account.id,
                ),
            )
            await db.commit()
        return account

    async def delete(self, account_id: str) -> None:
        """Delete an account together with everything it owns.

        Goals, progress entries, workout sessions, coach links on either
        side and authored workouts (with every session of them) are
        removed in the same transaction as the profile.
        """
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                DELETE FROM workout_sessions
                WHERE user_id = ?
                   OR workout_id IN (SELECT id FROM workouts WHERE coach_id = ?)
                """,
                (account_id, account_id),
            )
            await db.execute("DELETE FROM workouts WHERE coach_id = ?", (account_id,))
            await db.execute("DELETE FROM goals WHERE owner_id = ?", (account_id,))
            await db.execute("DELETE FROM progress_entries WHERE user_id = ?", (account_id,))
            await db.execute(
                "DELETE FROM coach_clients WHERE coach_id = ? OR client_id = ?",
                (account_id, account_id),
            )
            await db.execute("DELETE FROM profiles WHERE id = ?", (account_id,))
            await db.commit()

    def _row_to_account(self, row: aiosqlite.Row) -> UserAccount:
        """Convert a database row to a UserAccount."""
        data = dict(row)
        data["active"] = bool(row["active"])
        return UserAccount.from_dict(data, created_at=_parse_timestamp(row["created_at"]))


class CoachClientRepository:
    """Repository for coach/client links."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, link: CoachClientLink) -> int:
        """Link a client to a coach (no-op if already linked)."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT OR IGNORE INTO coach_clients (coach_id, client_id)
                VALUES (?, ?)
                """,
                (link.coach_id, link.client_id),
            )
            await db.commit()
            return cursor.lastrowid

    async def list_clients(self, coach_id: str) -> list[CoachClientLink]:
        """Get all links for a coach."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM coach_clients WHERE coach_id = ? ORDER BY id",
                (coach_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_link(row) for row in rows]

    async def get_coach(self, client_id: str) -> CoachClientLink | None:
        """Get the link pointing at a client's coach."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM coach_clients WHERE client_id = ? LIMIT 1",
                (client_id,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_link(row)

    def _row_to_link(self, row: aiosqlite.Row) -> CoachClientLink:
        return CoachClientLink(
            id=row["id"], coach_id=row["coach_id"], client_id=row["client_id"]
        )


class GoalRepository:
    """Repository for goals."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, goal: Goal) -> int:
        """Create a new goal."""
        data = goal.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO goals
                (owner_id, name, notes, start_date, target_date, completed)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    data["owner_id"],
                    data["name"],
                    data["notes"],
                    data["start_date"],
                    data["target_date"],
                    int(data["completed"]),
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def get(self, goal_id: int) -> Goal | None:
        """Get a goal by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM goals WHERE id = ?", (goal_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_goal(row)

    async def list_by_owner(self, owner_id: str) -> list[Goal]:
        """List an account's goals, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM goals WHERE owner_id = ?
                ORDER BY created_at DESC, id DESC
                """,
                (owner_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_goal(row) for row in rows]

    async def update(self, goal: Goal) -> Goal:
        """Update an existing goal."""
        if goal.id is None:
            raise ValueError("Goal must have an ID to update")

        data = goal.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE goals SET
                    name = ?, notes = ?, start_date = ?, target_date = ?, completed = ?
                WHERE id = ?
                """,
                (
                    data["name"],
                    data["notes"],
                    data["start_date"],
                    data["target_date"],
                    int(data["completed"]),
                    goal.id,
                ),
            )
            await db.commit()
        return goal

    async def delete(self, goal_id: int) -> None:
        """Delete a goal."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM goals WHERE id = ?", (goal_id,))
            await db.commit()

    def _row_to_goal(self, row: aiosqlite.Row) -> Goal:
        """Convert a database row to a Goal."""
        return Goal.from_dict(
            dict(row),
            id=row["id"],
            created_at=_parse_timestamp(row["created_at"]),
        )


class WorkoutRepository:
    """Repository for workouts and workout sessions."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, workout: Workout) -> int:
        """Create a new workout."""
        data = workout.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO workouts
                (name, description, duration_minutes, difficulty, category, coach_id, is_public)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["name"],
                    data["description"],
                    data["duration_minutes"],
                    data["difficulty"],
                    data["category"],
                    data["coach_id"],
                    int(data["is_public"]),
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def get(self, workout_id: int) -> Workout | None:
        """Get a workout by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workouts WHERE id = ?", (workout_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout(row)

    async def list_public(
        self,
        category: WorkoutCategory | None = None,
        search: str | None = None,
    ) -> list[Workout]:
        """List public workouts, optionally by category and name search."""
        query = "SELECT * FROM workouts WHERE is_public = 1"
        params: list = []
        if category is not None:
            query += " AND category = ?"
            params.append(category.value)
        if search:
            query += " AND LOWER(name) LIKE ? ESCAPE '\\'"
            params.append(f"%{_escape_like(search.lower())}%")
        query += " ORDER BY created_at DESC, id DESC"

        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_workout(row) for row in rows]

    async def list_by_coach(self, coach_id: str) -> list[Workout]:
        """List every workout a coach authored, private ones included."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workouts WHERE coach_id = ?
                ORDER BY created_at DESC, id DESC
                """,
                (coach_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_workout(row) for row in rows]

    async def create_session(self, session: WorkoutSession) -> int:
        """Record that an account started a workout."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO workout_sessions (user_id, workout_id, started_at, completed)
                VALUES (?, ?, ?, ?)
                """,
                (
                    session.user_id,
                    session.workout_id,
                    session.started_at.isoformat(),
                    int(session.completed),
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def list_sessions(self, user_id: str) -> list[WorkoutSession]:
        """List an account's workout sessions, most recent first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workout_sessions WHERE user_id = ?
                ORDER BY started_at DESC, id DESC
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [
                WorkoutSession(
                    id=row["id"],
                    user_id=row["user_id"],
                    workout_id=row["workout_id"],
                    started_at=datetime.fromisoformat(row["started_at"]),
                    completed=bool(row["completed"]),
                )
                for row in rows
            ]

    def _row_to_workout(self, row: aiosqlite.Row) -> Workout:
        """Convert a database row to a Workout."""
        return Workout.from_dict(
            dict(row),
            id=row["id"],
            created_at=_parse_timestamp(row["created_at"]),
        )


class ProgressEntryRepository:
    """Repository for body measurement entries."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, entry: ProgressEntry) -> int:
        """Store an entry, writing only the measurements provided."""
        data = entry.to_dict()
        columns = list(data.keys())
        placeholders = ", ".join("?" for _ in columns)
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                f"INSERT INTO progress_entries ({', '.join(columns)}) VALUES ({placeholders})",
                [data[c] for c in columns],
            )
            await db.commit()
            return cursor.lastrowid

    async def list_by_user(self, user_id: str) -> list[ProgressEntry]:
        """List an account's entries, most recent first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM progress_entries WHERE user_id = ?
                ORDER BY recorded_on DESC, id DESC
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_entry(row) for row in rows]

    def _row_to_entry(self, row: aiosqlite.Row) -> ProgressEntry:
        """Convert a database row to a ProgressEntry."""
        data = {k: row[k] for k in ("user_id", "recorded_on", "notes", *MEASUREMENT_FIELDS)}
        return ProgressEntry.from_dict(data, id=row["id"])


class ExerciseRepository:
    """Repository for the built-in exercise library."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, exercise_id: int) -> Exercise | None:
        """Get an exercise by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def list_all(self, muscle_group: MuscleGroup | None = None) -> list[Exercise]:
        """List exercises in library order, optionally for one muscle group."""
        query = "SELECT * FROM exercises"
        params: list = []
        if muscle_group is not None:
            query += " WHERE muscle_group = ?"
            params.append(muscle_group.value)
        query += " ORDER BY id"

        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise."""
        return Exercise.from_dict(dict(row), id=row["id"])
