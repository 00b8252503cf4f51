"""
Tests for the subway domain layer.

Tests Section, Sections and Line in isolation.
No external dependencies or IO required.
"""

import random

import pytest

from app.domain.subway.entities import Line, Section, Sections, Station
from app.domain.subway.errors import (
    BrokenChainError,
    DuplicateStationError,
    InvalidSectionError,
    NonContiguousSectionError,
    NotTerminalStationError,
    SectionErrorKind,
    SectionIntegrityError,
    SectionRuleError,
    SectionsAlreadyInitializedError,
    SectionsNotInitializedError,
    SingleSectionRemovalError,
)

A = Station(1, "Banghwa")
B = Station(2, "Gangdong")
C = Station(3, "Macheon")
D = Station(4, "Sangil")
E = Station(5, "Hanam")


def _sections(*path: Station, distance: int = 10) -> Sections:
    """Build a section list visiting ``path`` in order."""
    sections = Sections()
    sections.initialize(Section(path[0], path[1], distance))
    for up, down in zip(path[1:], path[2:]):
        sections.append(up, down, distance)
    return sections


def _assert_invariants(sections: Sections) -> None:
    items = list(sections)
    for current, following in zip(items, items[1:]):
        assert current.down_station == following.up_station
    path = sections.station_path()
    assert len(path) == len(set(path))
    assert len(path) == len(items) + 1


class TestSection:
    """Tests for the Section value type."""

    def test_valid_section(self) -> None:
        section = Section(A, B, 10)
        assert section.up_station == A
        assert section.down_station == B
        assert section.distance == 10

    def test_equal_endpoints_rejected(self) -> None:
        with pytest.raises(InvalidSectionError) as exc_info:
            Section(A, A, 10)
        assert exc_info.value.kind is SectionErrorKind.INVALID_SECTION

    @pytest.mark.parametrize("distance", [0, -5])
    def test_non_positive_distance_rejected(self, distance: int) -> None:
        with pytest.raises(InvalidSectionError, match="distance must be positive"):
            Section(A, B, distance)

    def test_persisted_id_ignored_in_equality(self) -> None:
        assert Section(A, B, 10, line_id=1, id=7) == Section(A, B, 10, line_id=1)

    def test_section_is_immutable(self) -> None:
        section = Section(A, B, 10)
        with pytest.raises(AttributeError):
            section.distance = 20  # type: ignore[misc]


class TestStation:
    """Stations compare by identifier."""

    def test_same_id_different_name_equal(self) -> None:
        assert Station(1, "Banghwa") == Station(1, "renamed")

    def test_different_id_not_equal(self) -> None:
        assert Station(1, "Banghwa") != Station(2, "Banghwa")


class TestSectionsInitialize:
    """Tests for the Uninitialized -> Active transition."""

    def test_empty_list_has_empty_path(self) -> None:
        sections = Sections()
        assert sections.is_empty
        assert sections.station_path() == []
        assert not sections.contains_station(A)

    def test_initialize_sets_first_section(self) -> None:
        sections = Sections()
        sections.initialize(Section(A, B, 10))
        assert sections.station_path() == [A, B]
        assert sections.terminus == B

    def test_initialize_twice_rejected(self) -> None:
        sections = _sections(A, B)
        with pytest.raises(SectionsAlreadyInitializedError):
            sections.initialize(Section(C, D, 5))
        assert sections.station_path() == [A, B]

    def test_append_on_empty_list_rejected(self) -> None:
        with pytest.raises(SectionsNotInitializedError):
            Sections().append(A, B, 10)

    def test_remove_on_empty_list_rejected(self) -> None:
        with pytest.raises(SectionsNotInitializedError):
            Sections().remove_terminal(A)


class TestSectionsAppend:
    """Tests for appending at the down terminus."""

    def test_append_extends_path(self) -> None:
        sections = _sections(A, B)
        created = sections.append(B, C, 10)
        assert created == Section(B, C, 10)
        assert sections.station_path() == [A, B, C]
        assert sections.total_distance == 20

    def test_append_keeps_existing_sections(self) -> None:
        sections = _sections(A, B)
        first = sections.last_section
        sections.append(B, C, 10)
        assert list(sections)[0] is first

    def test_non_contiguous_append_rejected(self) -> None:
        sections = _sections(A, B)
        with pytest.raises(NonContiguousSectionError) as exc_info:
            sections.append(C, D, 10)
        assert exc_info.value.kind is SectionErrorKind.NON_CONTIGUOUS_APPEND
        assert "down terminus" in exc_info.value.message
        assert sections.station_path() == [A, B]

    def test_append_from_interior_station_rejected(self) -> None:
        sections = _sections(A, B, C)
        with pytest.raises(NonContiguousSectionError):
            sections.append(B, D, 10)

    def test_revisit_up_terminus_rejected(self) -> None:
        sections = _sections(A, B)
        with pytest.raises(DuplicateStationError) as exc_info:
            sections.append(B, A, 10)
        assert exc_info.value.kind is SectionErrorKind.DUPLICATE_TERMINUS
        assert exc_info.value.station_id == A.id
        assert sections.station_path() == [A, B]

    def test_revisit_interior_station_rejected(self) -> None:
        sections = _sections(A, B, C)
        with pytest.raises(DuplicateStationError):
            sections.append(C, B, 10)

    def test_self_loop_reports_invalid_section(self) -> None:
        sections = _sections(A, B)
        with pytest.raises(InvalidSectionError):
            sections.append(B, B, 10)
        assert len(sections) == 1

    def test_non_positive_distance_rejected(self) -> None:
        sections = _sections(A, B)
        with pytest.raises(InvalidSectionError):
            sections.append(B, C, 0)
        assert sections.station_path() == [A, B]

    def test_line_id_carried_to_section(self) -> None:
        sections = _sections(A, B)
        assert sections.append(B, C, 3, line_id=9).line_id == 9


class TestSectionsRemoveTerminal:
    """Tests for removing the down terminus."""

    def test_remove_terminus(self) -> None:
        sections = _sections(A, B, C)
        removed = sections.remove_terminal(C)
        assert removed == Section(B, C, 10)
        assert sections.station_path() == [A, B]

    def test_remove_after_shrink_requires_new_terminus(self) -> None:
        sections = _sections(A, B, C)
        sections.remove_terminal(C)
        with pytest.raises(SingleSectionRemovalError):
            sections.remove_terminal(B)

    def test_remove_non_terminal_rejected(self) -> None:
        sections = _sections(A, B, C)
        with pytest.raises(NotTerminalStationError) as exc_info:
            sections.remove_terminal(B)
        assert exc_info.value.kind is SectionErrorKind.NOT_TERMINAL_STATION
        assert sections.station_path() == [A, B, C]

    def test_remove_up_terminus_rejected(self) -> None:
        with pytest.raises(NotTerminalStationError):
            _sections(A, B, C).remove_terminal(A)

    def test_remove_unknown_station_rejected(self) -> None:
        with pytest.raises(NotTerminalStationError):
            _sections(A, B, C).remove_terminal(E)

    def test_single_section_unremovable(self) -> None:
        sections = _sections(A, B)
        with pytest.raises(SingleSectionRemovalError) as exc_info:
            sections.remove_terminal(B)
        assert exc_info.value.kind is SectionErrorKind.SINGLE_SECTION_UNREMOVABLE
        assert sections.station_path() == [A, B]

    def test_not_terminal_checked_before_single_section(self) -> None:
        with pytest.raises(NotTerminalStationError):
            _sections(A, B).remove_terminal(A)


class TestSectionsQueries:
    """Queries never change state."""

    def test_station_path_is_repeatable(self) -> None:
        sections = _sections(A, B, C)
        first = sections.station_path()
        first.append(D)
        assert sections.station_path() == [A, B, C]
        assert sections.station_path() == sections.station_path()

    def test_contains_station(self) -> None:
        sections = _sections(A, B, C)
        assert sections.contains_station(A)
        assert sections.contains_station(C)
        assert not sections.contains_station(D)
        assert len(sections) == 2


class TestSectionsFromUnordered:
    """Chain order is rebuilt from the head section."""

    def test_rebuilds_order(self) -> None:
        shuffled = [Section(C, D, 1), Section(A, B, 1), Section(B, C, 1)]
        assert Sections.from_unordered(shuffled).station_path() == [A, B, C, D]

    def test_empty(self) -> None:
        assert Sections.from_unordered([]).is_empty

    def test_branch_rejected(self) -> None:
        with pytest.raises(BrokenChainError):
            Sections.from_unordered([Section(A, B, 1), Section(A, C, 1)])

    def test_split_chain_rejected(self) -> None:
        with pytest.raises(BrokenChainError):
            Sections.from_unordered([Section(A, B, 1), Section(C, D, 1)])

    def test_loop_rejected(self) -> None:
        with pytest.raises(BrokenChainError):
            Sections.from_unordered([Section(A, B, 1), Section(B, A, 1)])

    def test_loop_behind_head_rejected(self) -> None:
        with pytest.raises(BrokenChainError):
            Sections.from_unordered(
                [Section(A, B, 1), Section(B, C, 1), Section(C, B, 1)]
            )


class TestInvariantPreservation:
    """Random valid operation sequences keep the chain intact."""

    @pytest.mark.parametrize("seed", range(5))
    def test_random_append_remove_sequence(self, seed: int) -> None:
        rng = random.Random(seed)
        pool = [Station(i, f"S{i}") for i in range(1, 30)]
        sections = Sections()
        sections.initialize(Section(pool[0], pool[1], 1))

        for _ in range(200):
            path = sections.station_path()
            unused = [s for s in pool if s not in path]
            if unused and (len(sections) == 1 or rng.random() < 0.6):
                sections.append(sections.terminus, rng.choice(unused), rng.randint(1, 9))
            else:
                sections.remove_terminal(sections.terminus)
            _assert_invariants(sections)


class TestLine:
    """Tests for the Line aggregate root."""

    def test_create_initializes_sections(self) -> None:
        line = Line.create("Line 5", "bg-purple-600", A, B, 10)
        assert line.stations() == [A, B]
        assert line.sections.total_distance == 10

    def test_create_with_invalid_section_rejected(self) -> None:
        with pytest.raises(InvalidSectionError):
            Line.create("Line 5", "bg-purple-600", A, A, 10)

    def test_add_and_remove_delegate(self) -> None:
        line = Line.create("Line 5", "bg-purple-600", A, B, 10)
        line.id = 3
        section = line.add_section(B, C, 5)
        assert section.line_id == 3
        assert line.stations() == [A, B, C]
        assert line.contains_station(C)

        line.remove_station(C)
        assert line.stations() == [A, B]

    def test_update_info_touches_modified_at(self) -> None:
        line = Line.create("Line 5", "bg-purple-600", A, B, 10)
        before = line.modified_at
        line.update_info("Line 9", "bg-gold-600")
        assert (line.name, line.color) == ("Line 9", "bg-gold-600")
        assert line.modified_at >= before
        assert line.stations() == [A, B]

    def test_rule_errors_share_base(self) -> None:
        line = Line.create("Line 5", "bg-purple-600", A, B, 10)
        with pytest.raises(SectionRuleError):
            line.remove_station(B)

    def test_integrity_errors_are_not_rule_errors(self) -> None:
        errors = [
            SectionsNotInitializedError(),
            SectionsAlreadyInitializedError(),
            BrokenChainError("two heads"),
        ]
        for error in errors:
            assert isinstance(error, SectionIntegrityError)
            assert not isinstance(error, SectionRuleError)
        assert errors[2].kind is SectionErrorKind.BROKEN_CHAIN
