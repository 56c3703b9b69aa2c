# tests/test_candidates.py
"""Tests for candidate store operations."""

from kastenator import candidates as store
from kastenator.candidates import suggest_title
from kastenator.models import CandidatePatch
from kastenator.workflow import start_session


class TestSuggestTitle:
    def test_capitalises_first_letter(self):
        assert suggest_title("testing is important") == "Testing is important"

    def test_trims_whitespace(self):
        assert suggest_title("  spaced repetition  ") == "Spaced repetition"

    def test_truncates_long_titles(self):
        title = suggest_title("a" * 100)
        assert len(title) == 80
        assert title.endswith("...")
        assert title == "A" + "a" * 76 + "..."

    def test_exactly_80_chars_is_kept(self):
        concept = "b" * 80
        assert suggest_title(concept) == "B" + "b" * 79

    def test_empty_concept(self):
        assert suggest_title("") == ""


class TestAddCandidate:
    def test_adds_candidate_with_generated_id(self, source_note):
        session = start_session(source_note)
        candidate = store.add_candidate(session, "testing is important")

        assert candidate.id.startswith("atom-")
        assert candidate.concept == "testing is important"
        assert candidate.suggested_title == "Testing is important"
        assert candidate.approved is False
        assert session.candidates == [candidate]

    def test_preserves_identification_order(self, source_note):
        session = start_session(source_note)
        for concept in ("first", "second", "third"):
            store.add_candidate(session, concept)
        assert [c.concept for c in session.candidates] == ["first", "second", "third"]

    def test_ids_unique_within_session(self, source_note):
        session = start_session(source_note)
        ids = {store.add_candidate(session, "same").id for _ in range(20)}
        assert len(ids) == 20


class TestUpdateCandidate:
    def test_updates_given_fields_only(self, source_note):
        session = start_session(source_note)
        candidate = store.add_candidate(session, "testing")

        updated = store.update_candidate(
            session, candidate.id, {"explanation": "Tests catch regressions", "approved": True}
        )

        assert updated is candidate
        assert candidate.explanation == "Tests catch regressions"
        assert candidate.approved is True
        assert candidate.concept == "testing"
        assert candidate.suggested_title == "Testing"

    def test_accepts_patch_model(self, source_note):
        session = start_session(source_note)
        candidate = store.add_candidate(session, "testing")

        store.update_candidate(session, candidate.id, CandidatePatch(tags=["qa"]))

        assert candidate.tags == ["qa"]

    def test_unknown_id_returns_none(self, source_note):
        session = start_session(source_note)
        store.add_candidate(session, "testing")
        assert store.update_candidate(session, "missing", {"approved": True}) is None

    def test_id_cannot_be_patched(self, source_note):
        session = start_session(source_note)
        candidate = store.add_candidate(session, "testing")
        original_id = candidate.id

        store.update_candidate(session, candidate.id, {"id": "hijacked", "approved": True})

        assert candidate.id == original_id

    def test_none_leaves_field_untouched(self, source_note):
        session = start_session(source_note)
        candidate = store.add_candidate(session, "testing")
        store.update_candidate(session, candidate.id, {"explanation": "Kept", "tags": ["qa"]})

        store.update_candidate(session, candidate.id, {"explanation": None, "tags": None})

        assert candidate.explanation == "Kept"
        assert candidate.tags == ["qa"]


class TestRemoveCandidate:
    def test_removes_by_id(self, source_note):
        session = start_session(source_note)
        first = store.add_candidate(session, "first")
        second = store.add_candidate(session, "second")

        assert store.remove_candidate(session, first.id) is True
        assert session.candidates == [second]

    def test_unknown_id_returns_false(self, source_note):
        session = start_session(source_note)
        store.add_candidate(session, "first")
        assert store.remove_candidate(session, "missing") is False
        assert len(session.candidates) == 1


class TestApprovedCandidates:
    def test_filters_in_order(self, source_note):
        session = start_session(source_note)
        a = store.add_candidate(session, "a")
        store.add_candidate(session, "b")
        c = store.add_candidate(session, "c")
        a.approved = True
        c.approved = True

        assert store.approved_candidates(session) == [a, c]
