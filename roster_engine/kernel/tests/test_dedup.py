"""
Duplicate name resolution.

The guarantee under test: whatever the existing roster looks like, the
name handed back never collides with an entry (after the promotion rename).
"""

import random

import pytest

from roster_engine.kernel.dedup import apply_dedup, collapse_singleton, resolve_name
from roster_engine.kernel.types import Name, parse_name


def names(*displays):
    return [parse_name(d) for d in displays]


class TestResolveName:
    def test_no_collision_returns_bare_name(self):
        r = resolve_name("Kim", names("Lee", "Park"))
        assert r.name == Name("Kim")
        assert r.promote_index is None

    def test_empty_roster(self):
        assert resolve_name("Kim", []).name == Name("Kim")

    def test_first_duplicate_promotes_existing(self):
        r = resolve_name("Kim", names("Lee", "Kim"))
        assert r.name == Name("Kim", 2)
        assert r.promote_index == 1

    def test_next_suffix_after_max(self):
        r = resolve_name("Kim", names("Kim-1", "Kim-2"))
        assert r.name == Name("Kim", 3)
        assert r.promote_index is None

    def test_gaps_use_max_not_count(self):
        r = resolve_name("Kim", names("Kim-1", "Kim-7"))
        assert r.name == Name("Kim", 8)

    def test_text_suffix_still_collides(self):
        r = resolve_name("Kim", names("Kim-backend"))
        assert r.name == Name("Kim", 2)
        assert r.promote_index is None

    def test_text_suffix_ignored_for_max(self):
        r = resolve_name("Kim", names("Kim-backend", "Kim-3"))
        assert r.name == Name("Kim", 4)

    def test_unsuffixed_with_higher_numbers(self):
        r = resolve_name("Kim", names("Kim", "Kim-4"))
        assert r.name == Name("Kim", 5)
        assert r.promote_index == 0

    def test_no_promotion_when_suffix_one_taken(self):
        r = resolve_name("Kim", names("Kim", "Kim-1"))
        assert r.promote_index is None
        assert r.name == Name("Kim", 2)

    def test_prefix_is_not_a_collision(self):
        r = resolve_name("Kim", names("Kimberly", "Kimberly-2"))
        assert r.name == Name("Kim")


class TestApplyDedup:
    def test_two_adds_yield_one_and_two(self):
        members = apply_dedup("Kim", ())
        members = apply_dedup("Kim", members)
        assert [m.display for m in members] == ["Kim-1", "Kim-2"]

    def test_insert_order_preserved(self):
        members = apply_dedup("Kim", tuple(names("Kim", "Lee")))
        assert [m.display for m in members] == ["Kim-1", "Lee", "Kim-2"]

    def test_dashed_input_is_parsed(self):
        assert apply_dedup("Kim-2", ()) == (Name("Kim", 2),)
        assert apply_dedup("Jean-Luc", ()) == (Name("Jean", "Luc"),)

    def test_generated_suffix_steps_past_typed_suffix(self):
        members = apply_dedup("Kim-2", ())
        members = apply_dedup("Kim", members)
        members = apply_dedup("Kim", members)
        assert [m.display for m in members] == ["Kim-2", "Kim-3", "Kim-4"]

    def test_same_dashed_name_twice(self):
        members = apply_dedup("Jean-Luc", ())
        members = apply_dedup("Jean-Luc", members)
        assert members == (Name("Jean-Luc", 1), Name("Jean-Luc", 2))

    def test_typed_suffix_already_held(self):
        members = apply_dedup("Kim", ())
        members = apply_dedup("Kim", members)
        members = apply_dedup("Kim-2", members)
        assert [m.display for m in members] == ["Kim-1", "Kim-2-1", "Kim-2-2"]

    def test_result_never_collides(self):
        rng = random.Random(7)
        pool = ["Kim", "Lee", "Kim-1", "Kim-2", "Kim-x", "Lee-2", "Jean-Luc", "Kim-2-1", "Park"]
        for _ in range(200):
            members = ()
            for _ in range(rng.randint(1, 8)):
                typed = rng.choice(pool)
                result = resolve_name(typed, members)
                renamed = list(members)
                if result.promote_index is not None:
                    renamed[result.promote_index] = result.name.with_suffix(1)

                assert result.name not in members
                assert result.name not in renamed

                members = apply_dedup(typed, members)
                displays = [m.display for m in members]
                assert len(set(displays)) == len(displays)
                # Every member survives a trip through its display string
                assert all(parse_name(d) == m for d, m in zip(displays, members))


class TestCollapseSingleton:
    def test_lone_suffix_one_is_stripped(self):
        assert collapse_singleton(names("A-1"), "A") == (Name("A"),)

    def test_other_suffix_kept(self):
        assert collapse_singleton(names("A-2"), "A") == (Name("A", 2),)

    def test_multiple_holders_untouched(self):
        assert collapse_singleton(names("A-1", "A-3"), "A") == (Name("A", 1), Name("A", 3))

    def test_other_bases_untouched(self):
        assert collapse_singleton(names("B-1", "A-1"), "A") == (Name("B", 1), Name("A"))

    def test_dashed_base_collapses_to_parsed_form(self):
        assert collapse_singleton((Name("Jean-Luc", 1),), "Jean-Luc") == (Name("Jean", "Luc"),)

    def test_bare_name_already_taken(self):
        members = (Name("Kim-2", 1), Name("Kim", 2))
        assert collapse_singleton(members, "Kim-2") == members


class TestParseName:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Kim", Name("Kim")),
            ("  Kim  ", Name("Kim")),
            ("Kim-2", Name("Kim", 2)),
            ("Jean-Luc-3", Name("Jean-Luc", 3)),
            ("Kim-backend", Name("Kim", "backend")),
            ("Kim-", Name("Kim-")),
            ("-Kim", Name("-Kim")),
            ("Kim-0", Name("Kim", "0")),
        ],
    )
    def test_parse(self, text, expected):
        assert parse_name(text) == expected

    def test_display_round_trip(self):
        for text in ["Kim", "Kim-2", "Kim-backend", "Jean-Luc-3"]:
            assert parse_name(text).display == text
