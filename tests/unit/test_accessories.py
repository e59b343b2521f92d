"""Unit tests for the lounger and recliner normalizers."""

import pytest

from seating.domain.catalog import OptionCatalog, OptionField
from seating.domain.services import (
    LoungerNormalizer,
    ReclinerNormalizer,
    normalize_lounger,
    normalize_recliner,
)
from seating.domain.value_objects import (
    BaseShape,
    LoungerConfig,
    ReclinerSectionConfig,
    ReclinerZone,
    Side,
)


@pytest.fixture
def lounger_normalizer() -> LoungerNormalizer:
    return LoungerNormalizer()


class TestLoungerNormalizer:
    """Tests for LoungerNormalizer.normalize."""

    @pytest.mark.parametrize("required", [False, "no", None, "", 0])
    def test_not_required_returns_full_default(
        self, lounger_normalizer: LoungerNormalizer, required: object
    ) -> None:
        raw = {
            "required": required,
            "numberOfLoungers": 2,
            "size": "Lounger-7 ft",
            "placement": "Both",
            "storage": "Yes",
        }
        lounger = lounger_normalizer.normalize(raw, BaseShape.STANDARD)
        assert lounger == lounger_normalizer.default()
        assert lounger.size == "Lounger-5 ft 6 in"
        assert lounger.quantity == 0

    @pytest.mark.parametrize("shape", [BaseShape.STANDARD, BaseShape.U_SHAPE, BaseShape.COMBO])
    def test_two_loungers_force_both(
        self, lounger_normalizer: LoungerNormalizer, shape: BaseShape
    ) -> None:
        lounger = lounger_normalizer.normalize(
            {"required": "Yes", "numberOfLoungers": "2 Nos.", "placement": "LHS"}, shape
        )
        assert lounger.number_of_loungers == 2
        assert lounger.placement is Side.BOTH
        assert lounger.quantity == 2

    def test_l_shape_clamps_to_one_on_left(self, lounger_normalizer: LoungerNormalizer) -> None:
        lounger = lounger_normalizer.normalize(
            {"required": True, "numberOfLoungers": "2 Nos.", "placement": "Both"},
            BaseShape.L_SHAPE,
        )
        assert lounger.number_of_loungers == 1
        assert lounger.placement is Side.LHS

    def test_l_shape_forbids_rhs(self, lounger_normalizer: LoungerNormalizer) -> None:
        lounger = lounger_normalizer.normalize(
            {"required": True, "placement": "RHS"}, BaseShape.L_SHAPE
        )
        assert lounger.placement is Side.LHS

    def test_single_lounger_keeps_legal_side(self, lounger_normalizer: LoungerNormalizer) -> None:
        lounger = lounger_normalizer.normalize(
            {"required": "true", "numberOfLoungers": 1, "placement": "rhs"}, BaseShape.STANDARD
        )
        assert lounger.placement is Side.RHS

    def test_both_with_one_lounger_defaults(self, lounger_normalizer: LoungerNormalizer) -> None:
        lounger = lounger_normalizer.normalize(
            {"required": True, "numberOfLoungers": 1, "placement": "Both"}, BaseShape.STANDARD
        )
        assert lounger.placement is Side.LHS

    @pytest.mark.parametrize("count,expected", [(0, 1), (-1, 1), (5, 2), ("junk", 1)])
    def test_count_clamped(
        self, lounger_normalizer: LoungerNormalizer, count: object, expected: int
    ) -> None:
        lounger = lounger_normalizer.normalize(
            {"required": True, "numberOfLoungers": count}, BaseShape.STANDARD
        )
        assert lounger.number_of_loungers == expected

    def test_size_matched_loosely(self, lounger_normalizer: LoungerNormalizer) -> None:
        lounger = lounger_normalizer.normalize(
            {"required": True, "size": "lounger 6 ft"}, BaseShape.STANDARD
        )
        assert lounger.size == "Lounger-6 ft"

    def test_unknown_size_defaults(self, lounger_normalizer: LoungerNormalizer) -> None:
        lounger = lounger_normalizer.normalize(
            {"required": True, "size": "Lounger-12 ft"}, BaseShape.STANDARD
        )
        assert lounger.size == "Lounger-5 ft 6 in"

    def test_catalog_sizes(self) -> None:
        options = OptionCatalog(
            fields={
                "lounger_size": OptionField.from_values(
                    "lounger_size", ("Lounger-6 ft", "Lounger-7 ft"), "Lounger-7 ft"
                )
            }
        )
        lounger = normalize_lounger({"required": True}, BaseShape.STANDARD, options)
        assert lounger.size == "Lounger-7 ft"

    def test_storage_flag(self, lounger_normalizer: LoungerNormalizer) -> None:
        lounger = lounger_normalizer.normalize({"required": True, "storage": "Yes"}, BaseShape.STANDARD)
        assert lounger.storage is True

    def test_accepts_normalized_value(self, lounger_normalizer: LoungerNormalizer) -> None:
        lounger = LoungerConfig(True, 2, "Lounger-6 ft", Side.BOTH, True)
        assert lounger_normalizer.normalize(lounger, BaseShape.U_SHAPE) == lounger

    def test_string_shape(self) -> None:
        lounger = normalize_lounger({"required": True, "numberOfLoungers": 2}, "L SHAPE")
        assert lounger.number_of_loungers == 1
        assert lounger.placement is Side.LHS

    def test_unknown_shape_is_standard(self, lounger_normalizer: LoungerNormalizer) -> None:
        lounger = lounger_normalizer.normalize(
            {"required": True, "numberOfLoungers": 3, "placement": "RHS"}, "hexagon"
        )
        assert lounger.number_of_loungers == 2
        assert lounger.placement is Side.BOTH


class TestReclinerNormalizer:
    """Tests for ReclinerNormalizer.normalize."""

    def test_every_zone_present(self) -> None:
        recliners = normalize_recliner(BaseShape.STANDARD, None)
        assert set(recliners) == set(ReclinerZone)
        assert all(config == ReclinerSectionConfig() for config in recliners.values())

    def test_inactive_zone_reset(self) -> None:
        recliners = normalize_recliner(
            BaseShape.STANDARD, {"R": {"required": True, "numberOfRecliners": 2}}
        )
        assert recliners[ReclinerZone.R] == ReclinerSectionConfig()

    def test_not_required_reset(self) -> None:
        recliners = normalize_recliner(
            BaseShape.STANDARD,
            {"F": {"required": "no", "numberOfRecliners": 2, "positioning": "RHS"}},
        )
        assert recliners[ReclinerZone.F] == ReclinerSectionConfig()

    def test_required_zone(self) -> None:
        recliners = ReclinerNormalizer().normalize(
            BaseShape.L_SHAPE,
            {"l": {"required": "Yes", "numberOfRecliners": "2", "positioning": "Both"}},
        )
        assert recliners[ReclinerZone.L] == ReclinerSectionConfig(True, 2, Side.BOTH)

    def test_count_raised_to_one(self) -> None:
        recliners = normalize_recliner(
            BaseShape.STANDARD, {"F": {"required": True, "numberOfRecliners": 0}}
        )
        assert recliners[ReclinerZone.F].number_of_recliners == 1
        assert recliners[ReclinerZone.F].positioning is Side.LHS

    def test_enum_keys(self) -> None:
        recliners = normalize_recliner(
            BaseShape.COMBO, {ReclinerZone.C: ReclinerSectionConfig(True, 1, Side.RHS)}
        )
        assert recliners[ReclinerZone.C] == ReclinerSectionConfig(True, 1, Side.RHS)

    def test_unknown_zone_ignored(self) -> None:
        recliners = normalize_recliner(BaseShape.STANDARD, {"X": {"required": True}})
        assert set(recliners) == set(ReclinerZone)

    def test_string_shape(self) -> None:
        recliners = normalize_recliner(
            "standard", {"F": {"required": True}, "R": {"required": True, "numberOfRecliners": 2}}
        )
        assert recliners[ReclinerZone.F] == ReclinerSectionConfig(True, 1, Side.LHS)
        assert recliners[ReclinerZone.R] == ReclinerSectionConfig()

    def test_unknown_shape_is_standard(self) -> None:
        recliners = ReclinerNormalizer().normalize("oval", {"L": {"required": True}})
        assert recliners[ReclinerZone.L] == ReclinerSectionConfig()
