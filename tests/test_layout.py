"""Tests de la disposition complète : placement, ordre canonique, attribution."""

import itertools
import math

import pytest

from parliament_chart.config import DEFAULT_HOUSE, HOUSE_SEATS
from parliament_chart.engine.errors import ConfigurationError, DegenerateInputError
from parliament_chart.engine.layout import compute_layout, layout
from parliament_chart.engine.rows import Row
from parliament_chart.engine.seats import (
    Cartesian,
    Polar,
    Seat,
    assign_groups,
    canonical_order,
    place_row,
    place_seats,
)


def _runs(seats, key="party"):
    return [(k, len(list(g))) for k, g in itertools.groupby(s.group[key] for s in seats)]


class TestPlaceSeats:
    """Tests du placement des sièges dans une rangée."""

    def test_even_spacing(self):
        """Les sièges d'une rangée sont espacés de π/k, centrés dans leur secteur."""
        seats = place_row(Row(index=0, radius=2.0, seat_count=4))
        thetas = [s.polar.theta for s in seats]
        assert thetas[0] == pytest.approx(-math.pi + math.pi / 8)
        assert thetas[-1] == pytest.approx(-math.pi / 8)
        for a, b in zip(thetas, thetas[1:]):
            assert b - a == pytest.approx(math.pi / 4)

    def test_cartesian(self):
        seat = place_row(Row(index=0, radius=3.0, seat_count=1))[0]
        assert seat.polar.theta == pytest.approx(-math.pi / 2)
        assert seat.cartesian.x == pytest.approx(0.0, abs=1e-12)
        assert seat.cartesian.y == pytest.approx(-3.0)

    def test_empty_row_skipped(self):
        """Une rangée sans siège ne produit rien (pas de division par zéro)."""
        assert place_row(Row(index=0, radius=1.0, seat_count=0)) == []
        seats = place_seats([Row(0, 1.0, 0), Row(1, 2.0, 3)])
        assert len(seats) == 3
        assert all(s.row == 1 for s in seats)


class TestCanonicalOrder:
    """Tests de l'ordre de remplissage."""

    def test_sorted_by_angle(self):
        seats = canonical_order(place_seats([Row(0, 1.0, 3), Row(1, 2.0, 5)]))
        thetas = [s.polar.theta for s in seats]
        assert thetas == sorted(thetas)

    def test_ties_outer_first(self):
        """À angle égal, le siège de la rangée extérieure passe en premier."""
        inner = Seat(Polar(1.0, -1.0), Cartesian(0, 0), row=0)
        outer = Seat(Polar(2.0, -1.0), Cartesian(0, 0), row=1)
        left = Seat(Polar(1.0, -2.0), Cartesian(0, 0), row=0)
        assert canonical_order([inner, outer, left]) == [left, outer, inner]


class TestAssignGroups:
    """Tests de l'attribution des groupes."""

    def test_single_pass(self):
        seats = place_row(Row(0, 1.0, 5))
        groups = [{"party": "a", "seats": 2}, {"party": "b", "seats": 3}]
        assigned = assign_groups(seats, groups)
        assert [s.group["party"] for s in assigned] == ["a", "a", "b", "b", "b"]

    def test_insufficient_capacity(self):
        seats = place_row(Row(0, 1.0, 3))
        with pytest.raises(DegenerateInputError):
            assign_groups(seats, [{"party": "a", "seats": 2}])


class TestLayout:
    """Scénarios de bout en bout."""

    def test_two_groups(self):
        """138 + 45 sièges : blocs contigus dans l'ordre canonique."""
        groups = [{"party": "d", "seats": 138}, {"party": "r", "seats": 45}]
        seats = layout(groups, radius_coef=0.4)
        assert len(seats) == 183
        assert all(s.group["party"] == "d" for s in seats[:138])
        assert all(s.group["party"] == "r" for s in seats[138:])

    def test_zero_group_excluded(self):
        groups = [{"party": "a", "seats": 0}, {"party": "b", "seats": 10}]
        seats = layout(groups)
        assert len(seats) == 10
        assert {s.group["party"] for s in seats} == {"b"}

    @pytest.mark.parametrize("groups", [[], [{"party": "a", "seats": 0}, {"party": "b", "seats": 0}]])
    def test_empty(self, groups):
        """Aucun siège : séquence vide, sans erreur."""
        result = compute_layout(groups)
        assert result.seats == []
        assert result.n_rows == 0
        assert result.row_width == 0.0

    def test_single_seat(self):
        result = compute_layout([{"party": "a", "seats": 1}], radius_coef=0.4, outer_radius=1.0)
        assert result.n_rows == 1
        assert len(result.seats) == 1
        seat = result.seats[0]
        assert seat.polar.theta == pytest.approx(-math.pi / 2)
        assert seat.polar.r == pytest.approx(0.7)

    def test_near_degenerate_radius_coef(self):
        """Rapport très proche de 1 : une seule rangée, effectifs valides."""
        result = compute_layout([{"party": "a", "seats": 5}], radius_coef=0.999999)
        assert result.n_rows == 1
        assert [r.seat_count for r in result.rows] == [5]
        assert len(result.seats) == 5

    def test_degenerate_raises(self):
        with pytest.raises(DegenerateInputError):
            layout([{"party": "a", "seats": 2}], radius_coef=0.1)

    @pytest.mark.parametrize("outer_radius", [0, -1.0, float("inf")])
    def test_invalid_outer_radius(self, outer_radius):
        with pytest.raises(ConfigurationError):
            layout([{"party": "a", "seats": 2}], outer_radius=outer_radius)

    def test_invalid_radius_coef(self):
        with pytest.raises(ConfigurationError):
            layout([{"party": "a", "seats": 2}], radius_coef=1.0)

    def test_conservation_default_house(self):
        result = compute_layout(DEFAULT_HOUSE)
        assert len(result.seats) == HOUSE_SEATS
        assert sum(r.seat_count for r in result.rows) == HOUSE_SEATS
        assert result.n_seats == HOUSE_SEATS

    def test_contiguity(self):
        """Chaque groupe occupe une suite contiguë de longueur égale à son effectif."""
        seats = layout(DEFAULT_HOUSE, radius_coef=0.5)
        assert _runs(seats) == [(g["party"], g["seats"]) for g in DEFAULT_HOUSE]

    def test_angular_coverage(self):
        result = compute_layout(DEFAULT_HOUSE, outer_radius=250.0)
        for seat in result.seats:
            assert -math.pi <= seat.polar.theta <= 0
            assert seat.cartesian.y <= 0
        for row in result.rows:
            thetas = sorted(s.polar.theta for s in result.seats if s.row == row.index)
            assert len(thetas) == row.seat_count
            for a, b in zip(thetas, thetas[1:]):
                assert b - a == pytest.approx(math.pi / row.seat_count)

    def test_determinism(self):
        groups = [{"party": "a", "seats": 57}, {"party": "b", "seats": 31}]
        assert layout(groups, 0.35, 10.0) == layout(groups, 0.35, 10.0)

    def test_groups_are_copies(self):
        """Modifier les groupes source n'affecte pas les sièges produits."""
        groups = [{"party": "a", "seats": 3, "label": "Alpha"}]
        seats = layout(groups)
        groups[0]["label"] = "Changed"
        assert all(s.group["label"] == "Alpha" for s in seats)
        assert seats[0].group is not seats[1].group

    def test_custom_accessor(self):
        groups = [{"party": "a", "count": 4}, {"party": "b", "count": 6}]
        seats = layout(groups, seats_accessor=lambda g: g["count"])
        assert _runs(seats) == [("a", 4), ("b", 6)]

    def test_seat_radius(self):
        result = compute_layout(DEFAULT_HOUSE, radius_coef=0.4, outer_radius=100.0)
        assert result.inner_radius == pytest.approx(40.0)
        assert result.row_width == pytest.approx(60.0 / result.n_rows)
        assert result.seat_radius == pytest.approx(0.4 * result.row_width)
