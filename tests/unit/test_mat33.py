"""
Тесты для Mat33

Проверяет:
1. Конструирование и row-major раскладку
2. Фабрики преобразований (scale / translate / rotate) для вектора-строки
3. Произведения и транспонирование
4. Извлечение строк/столбцов/элементов
5. Применение к векторам (столбец справа, строка слева)
6. Округление half-away-from-zero
7. Определитель и обратную матрицу
8. Операторы
"""

import math

import pytest

from graphmath.core.errors import ArityError, ElementIndexError, SingularMatrixError
from graphmath.core.matrix import mat33
from graphmath.core.matrix.mat33 import Mat33
from graphmath.core.vector import vec3

SEQ = (1, 2, 3, 4, 5, 6, 7, 8, 9)
A = (2.0, -1.0, 0.5, 3.0, 4.0, -2.0, 0.0, 1.5, 1.0)
B = (1.0, 0.0, 2.0, -3.0, 1.0, 0.25, 4.0, -1.0, 0.0)


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


class TestCreate:
    """Тесты для create / identity / zero"""

    def test_from_sequence(self) -> None:
        m = mat33.create(SEQ)
        assert m.as_tuple() == tuple(float(x) for x in SEQ)

    def test_from_components(self) -> None:
        assert mat33.create(*SEQ) == mat33.create(SEQ)

    def test_oversized_sequence_truncated(self) -> None:
        assert mat33.create(range(20)).as_tuple() == tuple(float(x) for x in range(9))

    def test_undersized_sequence_raises(self) -> None:
        with pytest.raises(ArityError, match="Mat33 requires 9 components, got 8"):
            mat33.create(range(8))

    def test_row_major_layout(self) -> None:
        """at(i, j) == m[3*i + j]"""
        m = mat33.create(SEQ)
        assert m.as_rows() == ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0))
        assert mat33.at(m, 1, 2) == 6.0

    def test_identity_and_zero(self) -> None:
        assert mat33.identity().as_tuple() == (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
        assert mat33.zero().as_tuple() == (0.0,) * 9


# =============================================================================
# ФАБРИКИ ПРЕОБРАЗОВАНИЙ
# =============================================================================


class TestFactories:
    """Тесты для make_scale / make_translate / make_rotate"""

    def test_uniform_scale(self) -> None:
        assert mat33.diag(mat33.make_scale(2)).as_tuple() == (2.0, 2.0, 2.0)

    def test_per_axis_scale(self) -> None:
        m = mat33.make_scale(1, 2, 3)
        assert m.as_tuple() == (1.0, 0.0, 0.0, 0.0, 2.0, 0.0, 0.0, 0.0, 3.0)

    @pytest.mark.parametrize("factors", [(), (1, 2), (1, 2, 3, 4)])
    def test_scale_reports_argument_count(self, factors) -> None:
        """ArityError называет реальное число аргументов"""
        with pytest.raises(ArityError, match=f"Mat33.make_scale requires 3 components, got {len(factors)}"):
            mat33.make_scale(*factors)

    def test_translate_in_last_row(self) -> None:
        """Перенос лежит в последней строке"""
        m = mat33.make_translate(2, 3)
        assert mat33.row2(m).as_tuple() == (2.0, 3.0, 1.0)

    def test_translate_point_via_apply_left(self) -> None:
        point = vec3.create(1, 0, 1)
        assert mat33.apply_left(point, mat33.make_translate(2, 3)).as_tuple() == (3.0, 3.0, 1.0)

    def test_translate_direction_unaffected(self) -> None:
        """Вектор с однородной компонентой 0 не переносится"""
        direction = vec3.create(1, 0, 0)
        assert mat33.apply_left(direction, mat33.make_translate(2, 3)).as_tuple() == (1.0, 0.0, 0.0)

    def test_rotate_quarter_turn(self) -> None:
        """(1, 0, 0) при θ = π/2 → (0, 1, 0)"""
        result = mat33.apply_left([1, 0, 0], mat33.make_rotate(math.pi / 2))
        assert result.as_tuple() == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)

    def test_rotate_layout(self) -> None:
        st = math.sin(0.3)
        ct = math.cos(0.3)
        assert mat33.make_rotate(0.3).as_tuple() == (ct, st, 0.0, -st, ct, 0.0, 0.0, 0.0, 1.0)

    def test_rotate_preserves_length(self) -> None:
        v = (3.0, 4.0, 0.0)
        rotated = mat33.apply_left(v, mat33.make_rotate(1.234))
        assert vec3.length(rotated) == pytest.approx(5.0)

    def test_rotate_zero_is_identity(self) -> None:
        assert mat33.make_rotate(0.0) == mat33.identity()


# =============================================================================
# ПРОИЗВЕДЕНИЯ
# =============================================================================


class TestMultiply:
    """Тесты для multiply / multiply_transpose / transpose"""

    def test_identity_is_neutral(self) -> None:
        assert mat33.multiply(mat33.identity(), A) == mat33.create(A)
        assert mat33.multiply(A, mat33.identity()) == mat33.create(A)

    def test_known_product(self) -> None:
        result = mat33.multiply(SEQ, mat33.make_scale(1, 2, 3))
        assert result.as_tuple() == (1.0, 4.0, 9.0, 4.0, 10.0, 18.0, 7.0, 16.0, 27.0)

    def test_multiply_transpose_matches_explicit(self) -> None:
        assert mat33.multiply_transpose(A, B) == mat33.multiply(A, mat33.transpose(B))

    def test_transpose_involution(self) -> None:
        assert mat33.transpose(mat33.transpose(A)) == mat33.create(A)

    def test_transpose_swaps_rows_and_columns(self) -> None:
        t = mat33.transpose(SEQ)
        assert mat33.row0(t) == mat33.column0(SEQ)
        assert mat33.column2(t) == mat33.row2(SEQ)

    def test_add_subtract_scale(self) -> None:
        assert mat33.add(SEQ, SEQ) == mat33.scale(SEQ, 2)
        assert mat33.subtract(SEQ, SEQ) == mat33.zero()


# =============================================================================
# ИЗВЛЕЧЕНИЕ
# =============================================================================


class TestExtraction:
    """Тесты для row*/column*/diag/at"""

    def test_rows(self) -> None:
        assert mat33.row0(SEQ).as_tuple() == (1.0, 2.0, 3.0)
        assert mat33.row1(SEQ).as_tuple() == (4.0, 5.0, 6.0)
        assert mat33.row2(SEQ).as_tuple() == (7.0, 8.0, 9.0)

    def test_columns(self) -> None:
        assert mat33.column0(SEQ).as_tuple() == (1.0, 4.0, 7.0)
        assert mat33.column1(SEQ).as_tuple() == (2.0, 5.0, 8.0)
        assert mat33.column2(SEQ).as_tuple() == (3.0, 6.0, 9.0)

    def test_diag(self) -> None:
        assert mat33.diag(SEQ).as_tuple() == (1.0, 5.0, 9.0)

    def test_at_identity(self) -> None:
        assert mat33.at(mat33.identity(), 1, 1) == 1.0
        assert mat33.at(mat33.identity(), 0, 1) == 0.0

    @pytest.mark.parametrize("i, j", [(3, 0), (0, 3), (-1, 0), (0, -1)])
    def test_at_out_of_range(self, i, j) -> None:
        """Отрицательные индексы не оборачиваются"""
        with pytest.raises(ElementIndexError):
            mat33.at(mat33.identity(), i, j)

    def test_at_error_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            mat33.at(mat33.identity(), 5, 5)

    def test_at_non_int_index(self) -> None:
        with pytest.raises(ElementIndexError, match="must be an int"):
            mat33.at(mat33.identity(), 1.0, 0)


# =============================================================================
# ПРИМЕНЕНИЕ К ВЕКТОРАМ
# =============================================================================


class TestApply:
    """Тесты для apply / apply_transpose / apply_left / apply_left_transpose"""

    def test_identity_apply(self) -> None:
        """apply(identity, (1,2,3)) == (1,2,3)"""
        assert mat33.apply(mat33.identity(), (1, 2, 3)).as_tuple() == (1.0, 2.0, 3.0)

    def test_apply_column_vector(self) -> None:
        assert mat33.apply(SEQ, (1, 0, 0)).as_tuple() == (1.0, 4.0, 7.0)

    def test_apply_left_row_vector(self) -> None:
        assert mat33.apply_left((1, 0, 0), SEQ).as_tuple() == (1.0, 2.0, 3.0)

    def test_apply_left_equals_apply_transpose(self) -> None:
        v = (1.5, -2.0, 0.25)
        assert mat33.apply_left(v, A) == mat33.apply_transpose(A, v)
        assert mat33.apply(A, v) == mat33.apply_left_transpose(v, A)

    def test_apply_transpose_matches_explicit(self) -> None:
        v = (1.0, 2.0, 3.0)
        assert mat33.apply_transpose(A, v) == mat33.apply(mat33.transpose(A), v)

    def test_apply_is_associative(self) -> None:
        """apply(A, apply(B, v)) ≈ apply(multiply(A, B), v)"""
        v = (0.5, -1.0, 2.0)
        nested = mat33.apply(A, mat33.apply(B, v))
        combined = mat33.apply(mat33.multiply(A, B), v)
        assert nested.as_tuple() == pytest.approx(combined.as_tuple())

    def test_apply_left_composition_order(self) -> None:
        """Для вектора-строки: сначала A, затем B → multiply(A, B)"""
        v = (1.0, 1.0, 1.0)
        step = mat33.apply_left(mat33.apply_left(v, A), B)
        combined = mat33.apply_left(v, mat33.multiply(A, B))
        assert step.as_tuple() == pytest.approx(combined.as_tuple())

    def test_short_vector_raises(self) -> None:
        with pytest.raises(ArityError, match="Vec3"):
            mat33.apply(mat33.identity(), (1, 2))


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


class TestRound:
    """Тесты для round"""

    def test_half_away_from_zero(self) -> None:
        m = mat33.create(0.125, -0.125, 1.0049, 0, 0, 0, 0, 0, 0)
        assert mat33.row0(mat33.round(m, 2)).as_tuple() == (0.13, -0.13, 1.0)

    def test_negative_half_to_integer(self) -> None:
        m = mat33.create(-2.5, 2.5, 0.4, 0, 0, 0, 0, 0, 0)
        assert mat33.row0(mat33.round(m, 0)).as_tuple() == (-3.0, 3.0, 0.0)

    def test_rotation_rounding_cleans_noise(self) -> None:
        m = mat33.round(mat33.make_rotate(math.pi / 2), 10)
        assert m.as_tuple() == (0.0, 1.0, 0.0, -1.0, 0.0, 0.0, 0.0, 0.0, 1.0)

    @pytest.mark.parametrize("digits", [-1, 16])
    def test_invalid_digits(self, digits) -> None:
        with pytest.raises(ValueError, match="digits"):
            mat33.round(mat33.identity(), digits)


# =============================================================================
# ОПРЕДЕЛИТЕЛЬ И ОБРАТНАЯ
# =============================================================================


class TestDeterminantInverse:
    """Тесты для determinant / inverse"""

    def test_determinant(self) -> None:
        assert mat33.determinant(mat33.identity()) == 1.0
        assert mat33.determinant(SEQ) == 0.0
        assert mat33.determinant(mat33.make_scale(2, 3, 4)) == 24.0

    def test_inverse_of_diagonal(self) -> None:
        inv = mat33.inverse(mat33.make_scale(2, 4, 8))
        assert mat33.diag(inv).as_tuple() == (0.5, 0.25, 0.125)

    def test_inverse_times_matrix_is_identity(self) -> None:
        product = mat33.multiply(A, mat33.inverse(A))
        assert product.as_tuple() == pytest.approx(mat33.identity().as_tuple(), abs=1e-12)

    def test_inverse_translate_undoes_translation(self) -> None:
        point = (5.0, -1.0, 1.0)
        moved = mat33.apply_left(point, mat33.make_translate(2, 3))
        back = mat33.apply_left(moved, mat33.inverse(mat33.make_translate(2, 3)))
        assert back.as_tuple() == pytest.approx(point)

    def test_singular_raises(self) -> None:
        with pytest.raises(SingularMatrixError):
            mat33.inverse(SEQ)


# =============================================================================
# ОПЕРАТОРЫ
# =============================================================================


class TestOperators:
    """Тесты операторов модели Mat33"""

    def test_add_sub(self) -> None:
        a = mat33.create(A)
        b = mat33.create(B)
        assert a + b == mat33.add(a, b)
        assert a - b == mat33.subtract(a, b)

    def test_scalar_multiplication(self) -> None:
        a = mat33.create(A)
        assert a * 2 == mat33.scale(a, 2)
        assert 2 * a == mat33.scale(a, 2)

    def test_matmul(self) -> None:
        a = mat33.create(A)
        b = mat33.create(B)
        v = vec3.create(1, 2, 3)
        assert a @ b == mat33.multiply(a, b)
        assert a @ v == mat33.apply(a, v)
        assert v @ a == mat33.apply_left(v, a)

    def test_non_scalar_multiplication_unsupported(self) -> None:
        with pytest.raises(TypeError):
            mat33.identity() * "2"

    def test_model_type(self) -> None:
        assert isinstance(mat33.identity(), Mat33)
