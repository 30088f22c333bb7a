"""SQLAlchemy ORM models for the quiz app.

Tables
------
- users    – student / admin accounts
- quizzes  – authored quizzes; questions are embedded as a JSON document
- results  – one immutable row per graded submission
"""

import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quizapp.db.session import Base


# ── helpers ───────────────────────────────────────────────────────────────────


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _uuid() -> uuid.UUID:
    return uuid.uuid4()


# ── Enums (stored as VARCHAR via SQLAlchemy Enum) ─────────────────────────────


class RoleEnum(str, enum.Enum):
    STUDENT = "student"
    ADMIN = "admin"


class ResultStatusEnum(str, enum.Enum):
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"


# ── Users ─────────────────────────────────────────────────────────────────────


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=_uuid
    )
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255))
    role: Mapped[RoleEnum] = mapped_column(
        Enum(RoleEnum, name="role_enum"), default=RoleEnum.STUDENT
    )
    # bcrypt hash of the admin key; NULL for students
    hashed_admin_key: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    results: Mapped[list["Result"]] = relationship(back_populates="user")


# ── Quizzes ───────────────────────────────────────────────────────────────────


class Quiz(Base):
    """An authored quiz.

    ``questions`` is an ordered list of embedded documents::

        {"question": str, "options": [str, ...], "correct_answer": int}

    A question's position in the list is its identity within the quiz.
    """

    __tablename__ = "quizzes"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=_uuid
    )
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    time_limit: Mapped[int] = mapped_column(Integer)  # minutes
    questions: Mapped[list[dict]] = mapped_column(JSON, default=list)
    created_by: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    creator: Mapped["User | None"] = relationship("User")


# ── Results ───────────────────────────────────────────────────────────────────


class Result(Base):
    """One graded submission. Written once by the grading service, never updated.

    ``quiz_id`` is a weak reference: there is no foreign key, so deleting a quiz
    leaves its results in place and readers fall back to a placeholder title.
    """

    __tablename__ = "results"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=_uuid
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), index=True
    )
    quiz_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), index=True)
    score: Mapped[int] = mapped_column(Integer, default=0)
    total: Mapped[int] = mapped_column(Integer)
    correct_count: Mapped[int] = mapped_column(Integer, default=0)
    wrong_count: Mapped[int] = mapped_column(Integer, default=0)
    percentage: Mapped[float] = mapped_column(Float, default=0.0)
    status: Mapped[ResultStatusEnum] = mapped_column(
        Enum(ResultStatusEnum, name="result_status_enum"),
        default=ResultStatusEnum.COMPLETED,
    )
    # {"0": 1, "1": null, ...}: JSON object keys are always strings
    user_answers: Mapped[dict] = mapped_column(JSON)
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    user: Mapped["User"] = relationship(back_populates="results")

    def answers_by_index(self) -> dict[int, int | None]:
        """Return ``user_answers`` as an int-keyed mapping in question order."""
        return {
            int(key): value
            for key, value in sorted(
                (self.user_answers or {}).items(), key=lambda kv: int(kv[0])
            )
        }

    def answer_for(self, index: int) -> int | None:
        return (self.user_answers or {}).get(str(index))
