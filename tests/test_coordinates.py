import pytest

from conftest import matrix
from sfconv.core.errors import ShapeError
from sfconv.core.models import Coordinate, Point
from sfconv.core.nodes import ListNode, MatrixNode, sfg_class
from sfconv.parsers.coordinates import matrix_rows, matrix_to_array, matrix_to_coords, matrix_to_points


def test_column_major_decoding(linestring_node):
    coords = matrix_to_coords(linestring_node)
    assert coords == (Coordinate(0, 10), Coordinate(1, 11), Coordinate(2, 12))


def test_matrix_to_points_wraps_each_coordinate():
    node = matrix([(3, 4), (5, 6)], 'MULTIPOINT')
    assert matrix_to_points(node) == (Point(Coordinate(3, 4)), Point(Coordinate(5, 6)))


def test_array_has_one_row_per_coordinate(linestring_node):
    array = matrix_to_array(linestring_node)
    assert array.shape == (3, 2)
    assert array[:, 0].tolist() == [0.0, 1.0, 2.0]
    assert array[:, 1].tolist() == [10.0, 11.0, 12.0]


def test_zero_rows_decode_to_nothing():
    assert matrix_to_coords(matrix([])) == ()


@pytest.mark.parametrize('nrow', [0, 1, 4])
@pytest.mark.parametrize('ncol', [1, 3])
def test_wrong_column_count_is_a_shape_error(nrow, ncol):
    node = MatrixNode(values=(0.0,) * (nrow * ncol), dim=(nrow, ncol), classes=sfg_class('LINESTRING'))
    with pytest.raises(ShapeError) as excinfo:
        matrix_to_coords(node)
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == ncol


def test_missing_dimensions_is_a_shape_error():
    node = MatrixNode(values=(1.0, 2.0), dim=None, classes=sfg_class('POINT'))
    with pytest.raises(ShapeError, match='expected 2 dimensions, got 0'):
        matrix_rows(node)


def test_three_dimensions_is_a_shape_error():
    node = MatrixNode(values=(0.0,) * 8, dim=(2, 2, 2))
    with pytest.raises(ShapeError, match='got 3'):
        matrix_rows(node)


def test_buffer_length_must_match_rows():
    node = MatrixNode(values=(0.0, 1.0, 2.0), dim=(2, 2))
    with pytest.raises(ShapeError) as excinfo:
        matrix_rows(node)
    assert excinfo.value.expected == 4
    assert excinfo.value.actual == 3


def test_list_node_is_not_a_matrix():
    with pytest.raises(ShapeError, match='Not a matrix'):
        matrix_rows(ListNode(children=()))
