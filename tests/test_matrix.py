"""Tests for rcsgeom.geom.matrix"""

from __future__ import annotations

import dataclasses
import math

import pytest

from rcsgeom.geom.matrix import IDENTITY, Matrix
from rcsgeom.geom.mathutil import transform
from rcsgeom.geom.point import Point
from rcsgeom.utils.errors import RcsGeomValidationError

A = Matrix(2, 1, -1, 3, 4, -2)
B = Matrix(0.5, 0, 0.25, 2, -3, 7)
C = Matrix(1, -2, 0.75, 1.5, 0, 10)


class TestMatrixConstruction:
    def test_default_is_identity(self) -> None:
        assert Matrix().values == (1, 0, 0, 1, 0, 0)
        assert Matrix() == IDENTITY

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            A.a = 10  # type: ignore[misc]

    def test_from_values(self) -> None:
        m = Matrix.from_values([1, 2, 3, 4, 5, 6])
        assert m == Matrix(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)

    def test_from_values_wrong_length(self) -> None:
        with pytest.raises(RcsGeomValidationError):
            Matrix.from_values([1, 2, 3])

    def test_from_values_non_numeric(self) -> None:
        with pytest.raises(RcsGeomValidationError):
            Matrix.from_values([1, 2, 3, 4, 5, "x"])


class TestMatrixDot:
    def test_explicit_product(self) -> None:
        m = Matrix(1, 2, 3, 4, 5, 6).dot(Matrix(7, 8, 9, 1, 2, 1))
        assert m.values == (31, 46, 12, 22, 10, 14)

    def test_identity_law(self) -> None:
        assert A.dot(Matrix()) == A
        assert Matrix().dot(A) == A

    def test_associative(self) -> None:
        left = A.dot(B).dot(C)
        right = A.dot(B.dot(C))
        assert left.is_close(right, tol=1e-9)

    def test_not_commutative(self) -> None:
        assert not A.dot(B).is_close(B.dot(A))

    def test_operands_untouched(self) -> None:
        before = (A.values, B.values)
        A.dot(B)
        assert (A.values, B.values) == before

    def test_matmul_alias(self) -> None:
        assert A @ B == A.dot(B)

    def test_product_applies_right_operand_first(self) -> None:
        p = Point(1, 2)
        assert transform(p, A.dot(B)) == transform(p, B, A)


class TestMatrixInvert:
    def test_known_inverse(self) -> None:
        inv = Matrix(2, 0, 0, 3, 5, 7).invert()
        assert inv.is_close(Matrix(0.5, 0, 0, 1 / 3, -2.5, -7 / 3))

    def test_round_trip_point(self) -> None:
        m = Matrix(2, 0, 0, 3, 5, 7)
        p = Point(1, 1)
        back = transform(p, m, m.invert())
        assert back.equals(p, tol=1e-6)

    @pytest.mark.parametrize("m", [A, B, C])
    def test_product_with_inverse_is_identity(self, m: Matrix) -> None:
        assert m.dot(m.invert()).is_identity(tol=1e-9)
        assert m.invert().dot(m).is_identity(tol=1e-9)

    def test_singular_gives_non_finite_without_raising(self) -> None:
        m = Matrix(1, 2, 2, 4, 3, 3)
        assert m.determinant() == 0
        inv = m.invert()
        assert not all(math.isfinite(v) for v in inv.values)

    def test_zero_matrix(self) -> None:
        inv = Matrix(0, 0, 0, 0, 0, 0).invert()
        assert all(math.isnan(v) for v in inv.values)


class TestMatrixGetScale:
    @pytest.mark.parametrize("k", [0.5, 1.0, 2.0, 3.0, 4.0])
    def test_uniform_scale(self, k: float) -> None:
        assert Matrix(k, 0, 0, k, 0, 0).get_scale() == k

    def test_zero_matrix(self) -> None:
        assert Matrix(0, 0, 0, 0, 0, 0).get_scale() == 0

    def test_collapsed_axis(self) -> None:
        assert Matrix(2, 0, 0, 0, 0, 0).get_scale() == 0

    def test_non_uniform_takes_min(self) -> None:
        assert Matrix(2, 0, 0, 5, 0, 0).get_scale() == pytest.approx(2.0)

    def test_translation_ignored(self) -> None:
        assert Matrix(3, 0, 0, 3, 100, -50).get_scale() == pytest.approx(3.0)

    def test_rotation(self) -> None:
        angle = math.radians(30)
        cos, sin = math.cos(angle), math.sin(angle)
        assert Matrix(cos, sin, -sin, cos, 0, 0).get_scale() == pytest.approx(1.0)

    def test_reflection(self) -> None:
        assert Matrix(-2, 0, 0, 2, 0, 0).get_scale() == pytest.approx(2.0)

    def test_skew_uses_parallelogram_height(self) -> None:
        # Unit square -> parallelogram with bases 1 and sqrt(2), area 1.
        assert Matrix(1, 0, 1, 1, 0, 0).get_scale() == pytest.approx(1 / math.sqrt(2))


class TestMatrixHelpers:
    def test_determinant(self) -> None:
        assert Matrix(2, 1, -1, 3).determinant() == 7

    def test_is_close(self) -> None:
        assert A.is_close(Matrix(*[v + 1e-9 for v in A.values]))
        assert not A.is_close(Matrix(*[v + 1e-6 for v in A.values]))

    def test_is_identity(self) -> None:
        assert Matrix().is_identity()
        assert not A.is_identity()
