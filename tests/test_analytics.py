from datetime import timedelta

import pytest

from hanzi_srs.analytics import NotebookStats, build_notebook_stats, summarize_notebook
from hanzi_srs.analytics.queries import cards_to_df
from hanzi_srs.fsrs.constants import CardPhase, Grade
from hanzi_srs.fsrs.memory_state import CardState, new_card


@pytest.fixture
def notebook(now):
    return [
        new_card("learner-1", "新"),
        CardState(
            user_id="learner-1", character="好", state=CardPhase.REVIEW,
            stability=40.0, difficulty=4.0, reps=6, lapses=0,
            last_review=now - timedelta(days=2), next_review=now + timedelta(days=38),
        ),
        CardState(
            user_id="learner-1", character="难", state=CardPhase.RELEARNING,
            stability=0.2, difficulty=8.0, reps=3, lapses=1,
            last_review=now - timedelta(days=1), next_review=now - timedelta(hours=23),
        ),
        CardState(
            user_id="learner-1", character="学", state=CardPhase.REVIEW,
            stability=5.0, difficulty=6.0, reps=2, lapses=0,
            last_review=now - timedelta(days=20), next_review=now - timedelta(days=15),
        ),
    ]


def test_summarize_notebook(notebook, now):
    stats = summarize_notebook(notebook, now)

    assert stats == NotebookStats(
        total=4,
        new=1,
        learning=2,
        known=1,
        due=3,
        recent_reviews=2,
        by_state={0: 1, 2: 2, 3: 1},
        by_familiarity={1: 1, 2: 1, 3: 1, 5: 1},
    )


def test_recent_window_is_configurable(notebook, now):
    assert summarize_notebook(notebook, now, recent_days=30).recent_reviews == 3


def test_empty_notebook(now):
    stats = summarize_notebook([], now)

    assert stats.total == 0
    assert stats.due == 0
    assert stats.by_state == {}
    assert stats.by_familiarity == {}


def test_cards_to_df_columns(notebook, now):
    df = cards_to_df(notebook, now)

    assert list(df["character"]) == ["新", "好", "难", "学"]
    assert list(df["is_due"]) == [True, False, True, True]
    assert df["last_review"].isna().sum() == 1


def test_build_notebook_stats_from_database(db, now):
    db.add_character("learner-1", "新")
    db.review_character("learner-1", "学", Grade.GOOD, now - timedelta(days=10))

    stats = build_notebook_stats("learner-1", now)

    assert stats.total == 2
    assert stats.new == 1
    assert stats.due == 2
    assert stats.by_state == {int(CardPhase.NEW): 1, int(CardPhase.REVIEW): 1}
