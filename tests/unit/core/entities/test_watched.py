"""
Tests pour les entites de la liste des films vus.
"""

import pytest

from popcorn.core.entities.watched import WatchedEntry, WatchedSummary


class TestWatchedEntry:
    """Tests pour WatchedEntry."""

    def test_to_dict_contains_all_fields(self):
        entry = WatchedEntry(
            id="tt1375666",
            title="Inception",
            user_rating=9,
            release_year="2010",
            external_rating=8.8,
            runtime_minutes=148,
        )

        assert entry.to_dict() == {
            "id": "tt1375666",
            "title": "Inception",
            "user_rating": 9,
            "release_year": "2010",
            "poster_url": None,
            "external_rating": 8.8,
            "runtime_minutes": 148,
        }

    def test_from_dict_tolerates_missing_optional_fields(self):
        entry = WatchedEntry.from_dict({"id": "tt1", "title": "X", "user_rating": 7.5})

        assert entry == WatchedEntry(id="tt1", title="X", user_rating=7.5)

    def test_from_dict_requires_id(self):
        with pytest.raises(KeyError):
            WatchedEntry.from_dict({"title": "X", "user_rating": 7})

    def test_from_dict_rejects_non_dict(self):
        with pytest.raises(TypeError):
            WatchedEntry.from_dict(["tt1"])

    def test_entry_is_immutable(self):
        entry = WatchedEntry(id="tt1", title="X", user_rating=7)
        with pytest.raises(AttributeError):
            entry.user_rating = 3


class TestWatchedSummary:
    def test_defaults_are_zero(self):
        summary = WatchedSummary()
        assert summary.count == 0
        assert summary.avg_user_rating == 0.0


class TestWatchedEntryFromDictTypes:
    """from_dict refuse les champs de type invalide."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"user_rating": "8"},
            {"user_rating": None},
            {"user_rating": False},
            {"runtime_minutes": "148 min"},
            {"external_rating": "8.8"},
            {"poster_url": 12},
        ],
    )
    def test_invalid_types_raise_type_error(self, overrides):
        data = {"id": "tt1", "title": "X", "user_rating": 7}
        data.update(overrides)

        with pytest.raises(TypeError):
            WatchedEntry.from_dict(data)

    def test_numeric_optional_fields_accepted(self):
        entry = WatchedEntry.from_dict(
            {"id": "tt1", "title": "X", "user_rating": 7, "external_rating": 8, "runtime_minutes": 90}
        )
        assert entry.external_rating == 8
        assert entry.runtime_minutes == 90
