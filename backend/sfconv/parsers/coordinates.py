import numpy as np
from sfconv.core.constants import COORDINATE_COLUMNS
from sfconv.core.errors import ShapeError
from sfconv.core.models import Coordinate, Point, coordinates_from_array
from sfconv.core.nodes import MatrixNode


def node_type_name(node) -> str:
    return type(node).__name__


def matrix_rows(node: MatrixNode) -> int:
    if not isinstance(node, MatrixNode):
        raise ShapeError(f'Not a matrix: got {node_type_name(node)}', expected='MatrixNode', actual=node_type_name(node))

    dim = node.dim
    if dim is None or len(dim) != 2:
        ndim = 0 if dim is None else len(dim)
        raise ShapeError(f'Not a matrix: expected 2 dimensions, got {ndim}', expected=2, actual=ndim)

    nrow, ncol = dim
    if ncol != COORDINATE_COLUMNS:
        raise ShapeError(
            f'Matrix should have only {COORDINATE_COLUMNS} columns for x and y coordinates, got {ncol}',
            expected=COORDINATE_COLUMNS,
            actual=ncol,
        )
    if nrow < 0:
        raise ShapeError(f'Matrix row count must not be negative, got {nrow}', expected='>= 0', actual=nrow)

    expected_length = nrow * COORDINATE_COLUMNS
    if len(node.values) != expected_length:
        raise ShapeError(
            f'Matrix buffer holds {len(node.values)} values, {nrow} rows need {expected_length}',
            expected=expected_length,
            actual=len(node.values),
        )
    return nrow


def matrix_to_array(node: MatrixNode) -> np.ndarray:
    nrow = matrix_rows(node)
    return np.asarray(node.values, dtype=np.float64).reshape((nrow, COORDINATE_COLUMNS), order='F')


def matrix_to_coords(node: MatrixNode) -> tuple[Coordinate, ...]:
    return coordinates_from_array(matrix_to_array(node))


def matrix_to_points(node: MatrixNode) -> tuple[Point, ...]:
    return tuple(Point(coord) for coord in matrix_to_coords(node))
