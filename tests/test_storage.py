"""Tests shared by both storage backends."""

import pytest

from calmmind.auth.schemas import UserCreate
from calmmind.core.database import create_tables, make_engine, make_session_factory
from calmmind.journals.schemas import DailyTipCreate, Emotion, JournalEntryCreate, MoodHistoryCreate
from calmmind.storage.database import DatabaseStorage
from calmmind.storage.memory import MemStorage


@pytest.fixture(params=["memory", "database"])
def store(request):
    if request.param == "memory":
        return MemStorage()
    engine = make_engine("sqlite://")
    create_tables(engine)
    return DatabaseStorage(make_session_factory(engine))


def _entry(user_id, text="Dear diary"):
    return JournalEntryCreate(
        user_id=user_id,
        text=text,
        date="2024-05-01",
        mood="happy",
        mood_score=0.7,
        emotions=[Emotion(name="Joy", percentage=70)],
        language="en",
    )


def test_create_then_list_journal_entry(store):
    created = store.create_journal_entry(_entry(1))
    entries = store.get_journal_entries_by_user_id(1)

    assert len(entries) == 1
    assert entries[0].id == created.id
    assert entries[0].id is not None
    assert entries[0].created_at is not None
    assert entries[0].text == "Dear diary"
    assert entries[0].emotions == [Emotion(name="Joy", percentage=70)]


def test_get_by_id(store):
    created = store.create_journal_entry(_entry(1))
    assert store.get_journal_entry(created.id) == created
    assert store.get_journal_entry(created.id + 100) is None


def test_ids_strictly_increase(store):
    first = store.create_journal_entry(_entry(1, "one"))
    second = store.create_journal_entry(_entry(1, "two"))
    assert second.id > first.id


def test_user_filter(store):
    store.create_journal_entry(_entry(1, "mine"))
    store.create_journal_entry(_entry(2, "theirs"))
    store.create_journal_entry(_entry(1, "also mine"))

    texts = sorted(e.text for e in store.get_journal_entries_by_user_id(1))
    assert texts == ["also mine", "mine"]
    assert store.get_journal_entries_by_user_id(3) == []


def test_mood_history(store):
    entry = store.create_journal_entry(_entry(1))
    history = store.create_mood_history(
        MoodHistoryCreate(user_id=1, date="2024-05-01", mood="happy", score=0.7, journal_entry_id=entry.id)
    )
    assert store.get_mood_history(history.id) == history
    assert [h.journal_entry_id for h in store.get_mood_history_by_user_id(1)] == [entry.id]


def test_daily_tips(store):
    tip = store.create_daily_tip(
        DailyTipCreate(
            user_id=1,
            date="2024-05-01",
            affirmation="I am enough.",
            self_care=["Walk", "Hydrate"],
            mood="neutral",
        )
    )
    assert tip.meditation is None
    assert store.get_daily_tip(tip.id).self_care == ["Walk", "Hydrate"]
    assert len(store.get_daily_tips_by_user_id(1)) == 1


def test_users(store):
    user = store.create_user(UserCreate(username="kasun", password="hash", name="Kasun"))
    assert user.id is not None
    assert user.language == "en"
    assert store.get_user(user.id).username == "kasun"
    assert store.get_user_by_username("kasun").id == user.id
    assert store.get_user_by_username("nobody") is None


def test_entities_have_independent_counters():
    store = MemStorage()
    tip = store.create_daily_tip(
        DailyTipCreate(user_id=1, date="2024-05-01", affirmation="a", self_care=[])
    )
    entry = store.create_journal_entry(_entry(1))
    assert tip.id == 1
    assert entry.id == 1


def test_returned_records_are_detached(store):
    created = store.create_journal_entry(_entry(1))
    created.text = "changed"
    created.emotions.append(Emotion(name="Fear", percentage=10))

    fetched = store.get_journal_entry(created.id)
    fetched.text = "changed again"
    store.get_journal_entries_by_user_id(1)[0].emotions.clear()

    stored = store.get_journal_entry(created.id)
    assert stored.text == "Dear diary"
    assert stored.emotions == [Emotion(name="Joy", percentage=70)]


def test_returned_users_are_detached(store):
    store.create_user(UserCreate(username="kasun", password="hash"))
    store.get_user_by_username("kasun").name = "Someone else"
    assert store.get_user_by_username("kasun").name is None
