"""
Unit tests for the SQLite application tracker.

Each test gets its own database under pytest's tmp_path.
"""

from datetime import date

import pytest

from shared.schemas.application import ApplicationCreate, ApplicationUpdate, status_label
from shared.tracker import ApplicationNotFoundError, ApplicationStore


@pytest.fixture
def store(tmp_path):
    return ApplicationStore(tmp_path / "tracker" / "applications.db")


def add(store, company, applied, status="applied", **fields):
    return store.create_application(
        ApplicationCreate(company_name=company, position="Front-End Engineer", status=status,
                          date_applied=applied, **fields)
    )


# ============================================================================
# CRUD Tests
# ============================================================================

class TestApplicationStore:
    """Tests for create, read, update and delete."""

    def test_create_and_get(self, store):
        created = add(
            store, "Acme", date(2024, 5, 1),
            salary="$120k", interview_dates=[date(2024, 5, 10), date(2024, 5, 17)],
        )
        fetched = store.get_application(created.id)
        assert fetched == created
        assert fetched.interview_dates == [date(2024, 5, 10), date(2024, 5, 17)]
        assert fetched.salary == "$120k"
        assert fetched.created_at == fetched.updated_at

    def test_ids_are_unique(self, store):
        first = add(store, "Acme", date(2024, 5, 1))
        second = add(store, "Acme", date(2024, 5, 1))
        assert first.id != second.id

    def test_list_newest_first(self, store):
        add(store, "Old", date(2024, 1, 1))
        add(store, "New", date(2024, 6, 1))
        add(store, "Middle", date(2024, 3, 1))
        assert [a.company_name for a in store.list_applications()] == ["New", "Middle", "Old"]

    def test_list_by_status(self, store):
        add(store, "Acme", date(2024, 1, 1))
        add(store, "Globex", date(2024, 1, 2), status="interview")
        assert [a.company_name for a in store.list_applications(status="interview")] == ["Globex"]

    def test_partial_update(self, store):
        created = add(store, "Acme", date(2024, 5, 1), notes="Referred by Sam")
        updated = store.update_application(created.id, ApplicationUpdate(status="interview"))
        assert updated.status == "interview"
        assert updated.notes == "Referred by Sam"
        assert updated.company_name == "Acme"
        assert updated.updated_at >= created.updated_at

    def test_update_interview_dates(self, store):
        created = add(store, "Acme", date(2024, 5, 1))
        updated = store.update_application(created.id, ApplicationUpdate(interview_dates=[date(2024, 6, 3)]))
        assert updated.interview_dates == [date(2024, 6, 3)]

    def test_null_does_not_clear_required_fields(self, store):
        created = add(store, "Acme", date(2024, 5, 1))
        updated = store.update_application(created.id, ApplicationUpdate(company_name=None, notes=None))
        assert updated.company_name == "Acme"

    def test_delete(self, store):
        created = add(store, "Acme", date(2024, 5, 1))
        store.delete_application(created.id)
        with pytest.raises(ApplicationNotFoundError):
            store.get_application(created.id)

    @pytest.mark.parametrize("operation", ["get", "update", "delete"])
    def test_missing_id(self, store, operation):
        with pytest.raises(ApplicationNotFoundError):
            if operation == "get":
                store.get_application("missing")
            elif operation == "update":
                store.update_application("missing", ApplicationUpdate(status="offer"))
            else:
                store.delete_application("missing")

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "applications.db"
        created = add(ApplicationStore(path), "Acme", date(2024, 5, 1))
        assert ApplicationStore(path).get_application(created.id).company_name == "Acme"


# ============================================================================
# Stats Tests
# ============================================================================

class TestStats:
    """Tests for per-status counts."""

    def test_empty(self, store):
        stats = store.get_stats()
        assert stats.total == 0
        assert stats.offer == 0

    def test_counts(self, store):
        add(store, "A", date(2024, 1, 1))
        add(store, "B", date(2024, 1, 2))
        add(store, "C", date(2024, 1, 3), status="interview")
        add(store, "D", date(2024, 1, 4), status="rejected")
        stats = store.get_stats()
        assert stats.total == 4
        assert stats.applied == 2
        assert stats.interview == 1
        assert stats.rejected == 1
        assert stats.screening == 0

    def test_status_labels(self, store):
        assert status_label("applied") == "Applied"
        labels = store.get_stats().labels
        assert labels["withdrawn"] == "Withdrawn"
        assert set(labels) == {"applied", "screening", "interview", "offer", "rejected", "withdrawn"}
