"""Tests for the class grouping engine."""

import pytest

from tailwind_classifier.group_classes import (
    Category,
    RULES,
    bucket_classes,
    category_of,
    group_classes,
    split_classes,
)


MIXED = (
    "hover:bg-blue-600 flex w-full p-4 text-lg rounded absolute bg-white "
    "transition sr-only foo w-1/2 mt-2 font-bold"
)


class TestGroupClasses:
    """Tests for the grouped output."""

    def test_empty_input(self):
        assert group_classes("") == []

    def test_whitespace_only_input(self):
        assert group_classes("  \t\n  ") == []

    def test_single_category(self):
        assert group_classes("w-4 h-4 min-w-0") == ["w-4 h-4 min-w-0"]

    def test_multi_category_fixed_order(self):
        """Groups follow category order, not input order."""
        assert group_classes("flex bg-red-500 p-2 text-sm") == [
            "p-2", "text-sm", "flex", "bg-red-500",
        ]

    def test_breakpoint_kept_state_variant_diverted(self):
        """sm: keeps the sizing root; hover: sends the token to pseudo-state."""
        assert group_classes("hover:bg-blue-500 sm:w-full") == [
            "sm:w-full", "hover:bg-blue-500",
        ]

    def test_unmatched_token(self):
        assert group_classes("foo-bar") == ["foo-bar"]

    def test_mixed_input(self):
        assert group_classes(MIXED) == [
            "w-full w-1/2",
            "p-4 mt-2",
            "text-lg font-bold",
            "flex",
            "absolute",
            "rounded",
            "bg-white",
            "transition",
            "sr-only",
            "hover:bg-blue-600",
            "foo",
        ]

    def test_irregular_whitespace_is_collapsed(self):
        assert group_classes("  p-2\t\tm-1\n flex ") == ["p-2 m-1", "flex"]


class TestGroupingProperties:
    """Invariants that hold for any input."""

    SAMPLES = [
        MIXED,
        "flex flex flex",
        "z-10 -mt-4 md:!w-1/2 group peer/menu aria-expanded:rotate-180",
        "a b c d",
        "text-sm sm:text-lg lg:text-xl hover:text-red-500",
    ]

    @pytest.mark.parametrize("classes", SAMPLES)
    def test_totality(self, classes):
        """Every token lands in exactly one group."""
        tokens = split_classes(classes)
        out = [t for g in group_classes(classes) for t in g.split(" ")]
        assert sorted(out) == sorted(tokens)

    @pytest.mark.parametrize("classes", SAMPLES)
    def test_order_within_group(self, classes):
        tokens = split_classes(classes)
        for g in group_classes(classes):
            members = g.split(" ")
            positions = []
            used = set()
            for m in members:
                idx = next(i for i, t in enumerate(tokens) if t == m and i not in used)
                used.add(idx)
                positions.append(idx)
            assert positions == sorted(positions)

    @pytest.mark.parametrize("classes", SAMPLES)
    def test_category_order(self, classes):
        order = list(Category)
        cats = [category_of(g.split(" ")[0]) for g in group_classes(classes)]
        assert cats == sorted(cats, key=order.index)

    @pytest.mark.parametrize("classes", SAMPLES)
    def test_regrouping_is_stable(self, classes):
        first = group_classes(classes)
        assert group_classes(" ".join(first)) == first

    def test_calls_do_not_share_state(self):
        group_classes("p-2 flex")
        assert group_classes("text-sm") == ["text-sm"]


class TestCategoryOf:
    """Tests for single-token classification."""

    @pytest.mark.parametrize("token,expected", [
        ("w-4", Category.SIZING),
        ("max-h-screen", Category.SIZING),
        ("size-8", Category.SIZING),
        ("md:!w-1/2", Category.SIZING),
        ("w-4!", Category.SIZING),
        ("!md:w-4", Category.SIZING),
        ("max-md:w-4", Category.OTHER),
        ("2xl:h-[calc(100vh-4rem)]", Category.SIZING),
        ("p-2", Category.SPACING),
        ("mx-auto", Category.SPACING),
        ("-mt-4", Category.SPACING),
        ("gap-x-2", Category.SPACING),
        ("space-y-4", Category.SPACING),
        ("text-sm", Category.TYPOGRAPHY),
        ("font-bold", Category.TYPOGRAPHY),
        ("uppercase", Category.TYPOGRAPHY),
        ("truncate", Category.TYPOGRAPHY),
        ("flex", Category.LAYOUT),
        ("inline-flex", Category.LAYOUT),
        ("hidden", Category.LAYOUT),
        ("block", Category.LAYOUT),
        ("grid-cols-3", Category.LAYOUT),
        ("lg:flex-row", Category.LAYOUT),
        ("items-center", Category.LAYOUT),
        ("absolute", Category.POSITIONING),
        ("top-0", Category.POSITIONING),
        ("z-10", Category.POSITIONING),
        ("-translate-x-1/2", Category.POSITIONING),
        ("border", Category.BORDERS),
        ("rounded-lg", Category.BORDERS),
        ("ring-2", Category.BORDERS),
        ("divide-y", Category.BORDERS),
        ("bg-[#fff]", Category.BACKGROUND),
        ("shadow", Category.BACKGROUND),
        ("opacity-50", Category.BACKGROUND),
        ("to-blue-500", Category.BACKGROUND),
        ("transition-all", Category.ANIMATION),
        ("duration-300", Category.ANIMATION),
        ("animate-spin", Category.ANIMATION),
        ("sr-only", Category.ACCESSIBILITY),
        ("invisible", Category.ACCESSIBILITY),
        ("aria-checked:bg-blue-500", Category.ACCESSIBILITY),
        ("focus:outline-none", Category.PSEUDO),
        ("group-hover:text-white", Category.PSEUDO),
        ("sm:hover:underline", Category.PSEUDO),
        ("group", Category.PSEUDO),
        ("peer/menu", Category.PSEUDO),
        ("odd:bg-gray-50", Category.PSEUDO),
        ("flexible", Category.OTHER),
        ("dark:bg-black", Category.OTHER),
        ("btn-primary", Category.OTHER),
    ])
    def test_category(self, token, expected):
        assert category_of(token) == expected

    def test_gap_prefers_spacing_over_layout(self):
        assert category_of("gap-4") == Category.SPACING


class TestRules:
    """Tests for the rule table itself."""

    def test_rules_follow_category_order(self):
        assert [c for c, _ in RULES] == list(Category)

    def test_catch_all_is_last_and_accepts_anything(self):
        category, pred = RULES[-1]
        assert category == Category.OTHER
        assert pred("") and pred("anything:at-all")

    def test_buckets_cover_every_category(self):
        buckets = bucket_classes("p-2")
        assert list(buckets) == list(Category)
        assert buckets[Category.SPACING] == ["p-2"]
        assert sum(len(v) for v in buckets.values()) == 1
