"""
SQLAlchemy ORM Models for FSRS Database

Defines UserCharacter (card state) and ReviewEvent (review log) tables.
"""

from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class UserCharacter(Base):
    """
    Persistent memory state for one character in one learner's notebook.
    """
    __tablename__ = 'user_character'

    # Primary key: composite of user_id and character
    user_id = Column(String(255), primary_key=True, nullable=False)
    character = Column(String(16), primary_key=True, nullable=False)

    # Memory model parameters (NULL until first grade)
    stability = Column(Float, nullable=True)
    difficulty = Column(Float, nullable=True)

    # Lifecycle: 0=new, 1=learning, 2=review, 3=relearning
    state = Column(Integer, nullable=False, default=0)
    reps = Column(Integer, nullable=False, default=0)
    lapses = Column(Integer, nullable=False, default=0)
    last_review = Column(DateTime(timezone=True), nullable=True)
    next_review = Column(DateTime(timezone=True), nullable=True)

    # When the character entered the notebook
    first_seen = Column(DateTime(timezone=True), nullable=True)

    # Cached display tier, recomputed on every save
    familiarity = Column(Integer, nullable=False, default=1)

    # Optimistic lock, bumped on every save
    version = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<UserCharacter({self.user_id}, {self.character}, state={self.state})>"


class ReviewEvent(Base):
    """
    Log entry for a single review of a character.

    Captures memory state before/after the review for analytics.
    """
    __tablename__ = 'review_events'

    # Primary key
    id = Column(Integer, primary_key=True, autoincrement=True)

    user_id = Column(String(255), nullable=False, index=True)
    character = Column(String(16), nullable=False)

    timestamp = Column(DateTime(timezone=True), nullable=False)
    grade = Column(Integer, nullable=False)  # 1=AGAIN, 2=HARD, 3=GOOD, 4=EASY

    # State before review
    state_before = Column(Integer, nullable=False)
    stability_before = Column(Float, nullable=True)
    difficulty_before = Column(Float, nullable=True)
    retrievability_before = Column(Float, nullable=True)

    # State after review
    state_after = Column(Integer, nullable=False)
    stability_after = Column(Float, nullable=False)
    difficulty_after = Column(Float, nullable=False)
    interval_days = Column(Float, nullable=False)

    def __repr__(self):
        return f"<ReviewEvent(id={self.id}, {self.user_id}/{self.character}, grade={self.grade})>"
