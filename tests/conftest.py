"""
Pytest configuration and fixtures for the sfconv test suite.

Nodes are built the way a host runtime hands them over: column-major buffers
with an ``("XY", <KIND>, "sfg")`` class stack.
"""
import pytest

from sfconv.core.nodes import ListNode, MatrixNode, sfg_class


def matrix(rows, tag='LINESTRING', ncol=2):
    """Column-major matrix node from a list of row tuples."""
    columns = [[row[j] for row in rows] for j in range(ncol)]
    values = tuple(float(v) for column in columns for v in column)
    return MatrixNode(values=values, dim=(len(rows), ncol), classes=sfg_class(tag))


def rings(*ring_rows, tag='POLYGON'):
    return ListNode(
        children=tuple(matrix(r, 'LINESTRING') for r in ring_rows),
        classes=sfg_class(tag),
    )


SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]
HOLE = [(2, 2), (4, 2), (4, 4), (2, 2)]


@pytest.fixture
def point_node():
    return matrix([(1.5, -2.5)], 'POINT')


@pytest.fixture
def multipoint_node():
    return matrix([(0, 0), (1, 1), (1, 1)], 'MULTIPOINT')


@pytest.fixture
def linestring_node():
    return MatrixNode(
        values=(0.0, 1.0, 2.0, 10.0, 11.0, 12.0),
        dim=(3, 2),
        classes=sfg_class('LINESTRING'),
    )


@pytest.fixture
def multilinestring_node():
    return ListNode(
        children=(matrix([(0, 0), (1, 1)]), matrix([(5, 5)]), matrix([])),
        classes=sfg_class('MULTILINESTRING'),
    )


@pytest.fixture
def square_polygon_node():
    return rings(SQUARE)


@pytest.fixture
def multipolygon_node():
    shifted = [[(x + 100 * i, y) for x, y in ring] for i, ring in enumerate([SQUARE, SQUARE, SQUARE])]
    holes = [[(x + 100 * i, y) for x, y in HOLE] for i in range(3)]
    return ListNode(
        children=tuple(rings(shifted[i], holes[i], list(reversed(holes[i]))) for i in range(3)),
        classes=sfg_class('MULTIPOLYGON'),
    )
