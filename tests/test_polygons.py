"""Unit tests for vertex-list primitives.

Tests cover:
- Fixed-count Polyline2d[N] / Polygon[N] construction and count checks
- Boxed runtime-count shapes, including the empty shape
- Conversion between the fixed and boxed families
- Triangle and Rectangle convenience shapes
"""

import copy
import pickle

import numpy as np
import pytest

from primitives2d import (
    BoxedPolygon,
    BoxedPolyline2d,
    MalformedVertexError,
    Polygon,
    Polyline2d,
    Quad,
    Rectangle,
    Triangle,
    VertexCountError,
)

SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


class TestFixedCount:
    """Tests for Polyline2d[N] and Polygon[N]."""

    def test_polyline_stores_vertices_in_order(self):
        """Test a 3-vertex polyline keeps exactly its vertices."""
        path = Polyline2d[3]([(0, 0), (1, 0), (1, 1)])
        assert path.vertices == ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0))
        assert len(path) == 3
        assert path[2] == (1.0, 1.0)
        assert list(path) == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]

    def test_class_is_cached(self):
        """Test subscripting with the same count returns the same class."""
        assert Polyline2d[3] is Polyline2d[3]
        assert Polyline2d[3] is not Polyline2d[4]
        assert Polyline2d[3] is not Polygon[3]
        assert Polyline2d[3].N == 3
        assert Polyline2d[3].__name__ == "Polyline2d[3]"

    def test_isinstance_of_family(self):
        """Test parameterized instances belong to their family."""
        path = Polyline2d[2]([(0, 0), (1, 1)])
        assert isinstance(path, Polyline2d)
        assert not isinstance(path, Polygon)

    @pytest.mark.parametrize("count", [0, 1, 2, 4, 10])
    def test_wrong_count_raises(self, count):
        """Test any count other than N is rejected at construction."""
        vertices = [(float(i), 0.0) for i in range(count)]
        with pytest.raises(VertexCountError) as excinfo:
            Polygon[3](vertices)
        assert excinfo.value.expected == 3
        assert excinfo.value.actual == count

    @pytest.mark.parametrize("n", [0, 1, 3, 8])
    def test_exact_count_succeeds(self, n):
        """Test a sequence of exactly N vertices always constructs."""
        vertices = [(float(i), float(i * i)) for i in range(n)]
        shape = Polygon[n](vertices)
        assert list(shape.vertices) == vertices

    def test_unparameterized_family_rejected(self):
        """Test the bare family cannot be instantiated."""
        with pytest.raises(TypeError, match=r"Polyline2d\[N\]"):
            Polyline2d([(0, 0), (1, 1)])

    @pytest.mark.parametrize("n", [-1, 2.0, "3", True])
    def test_invalid_count_parameter(self, n):
        """Test only non-negative ints can parameterize the family."""
        with pytest.raises(TypeError):
            Polygon[n]

    def test_cannot_reparameterize(self):
        """Test a parameterized class cannot be subscripted again."""
        with pytest.raises(TypeError):
            Polygon[3][4]

    def test_malformed_vertices(self):
        """Test points without two components are rejected."""
        with pytest.raises(MalformedVertexError):
            Polyline2d[2]([(0, 0, 0), (1, 1, 1)])

    def test_open_and_closed(self):
        """Test the closed flag of each family."""
        assert Polyline2d[2].closed is False
        assert Polygon[3].closed is True

    def test_degeneracy(self):
        """Test degeneracy follows the family's minimum vertex count."""
        assert Polyline2d[1]([(0, 0)]).is_degenerate()
        assert not Polyline2d[2]([(0, 0), (1, 0)]).is_degenerate()
        assert Polygon[2]([(0, 0), (1, 0)]).is_degenerate()
        assert not Polygon[4](SQUARE).is_degenerate()

    def test_immutable(self):
        """Test vertices cannot be replaced."""
        square = Polygon[4](SQUARE)
        with pytest.raises(AttributeError):
            square._vertices = ()
        with pytest.raises(TypeError):
            square.vertices[0] = (5.0, 5.0)

    def test_input_not_aliased(self):
        """Test mutating the input array does not change the shape."""
        source = np.array(SQUARE)
        square = Polygon[4](source)
        source[0] = (9.0, 9.0)
        assert square[0] == (0.0, 0.0)

    def test_equality_and_hash(self):
        """Test value equality within a class, inequality across families."""
        a = Polygon[4](SQUARE)
        b = Polygon[4](np.array(SQUARE))
        assert a == b
        assert hash(a) == hash(b)
        assert a != Polygon[4](SQUARE[::-1])
        assert a != Polyline2d[4](SQUARE)

    def test_to_numpy(self):
        """Test to_numpy returns a writeable (N, 2) copy."""
        arr = Polygon[4](SQUARE).to_numpy()
        assert arr.shape == (4, 2)
        arr[0, 0] = 7.0
        assert Polygon[0]([]).to_numpy().shape == (0, 2)

    def test_pickle_and_copy(self):
        """Test parameterized shapes survive pickling."""
        square = Polygon[4](SQUARE)
        restored = pickle.loads(pickle.dumps(square))
        assert restored == square
        assert type(restored) is Polygon[4]
        assert copy.deepcopy(square) == square

    def test_repr(self):
        """Test the repr names the parameterized class."""
        assert repr(Polyline2d[2]([(0, 0), (1, 1)])) == "Polyline2d[2]([(0.0, 0.0), (1.0, 1.0)])"


class TestBoxed:
    """Tests for BoxedPolyline2d and BoxedPolygon."""

    @pytest.mark.parametrize("k", [0, 1, 2, 3, 17])
    def test_length_and_order(self, k):
        """Test k vertices are stored with length k in input order."""
        vertices = [(float(i), float(-i)) for i in range(k)]
        shape = BoxedPolyline2d(vertices)
        assert len(shape) == k
        assert shape.vertices.shape == (k, 2)
        assert list(shape) == vertices

    def test_empty_polygon_constructs(self):
        """Test an empty polygon is accepted and reported degenerate."""
        empty = BoxedPolygon([])
        assert len(empty) == 0
        assert empty.is_degenerate()

    def test_buffer_is_read_only(self):
        """Test the exposed buffer cannot be written."""
        shape = BoxedPolygon(SQUARE)
        with pytest.raises(ValueError):
            shape.vertices[0, 0] = 5.0
        with pytest.raises(ValueError):
            shape.vertices.flags.writeable = True
        with pytest.raises(AttributeError):
            shape._vertices = np.zeros((4, 2))

    def test_buffer_is_owned(self):
        """Test the shape copies its input."""
        source = np.array(SQUARE)
        shape = BoxedPolygon(source)
        source[:] = 0.0
        assert shape[2] == (1.0, 1.0)
        assert not np.shares_memory(shape.vertices, source)

    def test_to_numpy_copy(self):
        """Test to_numpy is writeable and detached."""
        shape = BoxedPolyline2d(SQUARE)
        arr = shape.to_numpy()
        arr[0] = (3.0, 3.0)
        assert shape[0] == (0.0, 0.0)

    def test_closed_flags(self):
        """Test the closed flag of each boxed family."""
        assert BoxedPolyline2d.closed is False
        assert BoxedPolygon.closed is True

    def test_degeneracy(self):
        """Test degeneracy thresholds match the fixed families."""
        assert BoxedPolyline2d([(0, 0)]).is_degenerate()
        assert not BoxedPolyline2d([(0, 0), (1, 0)]).is_degenerate()
        assert BoxedPolygon([(0, 0), (1, 0)]).is_degenerate()
        assert not BoxedPolygon(SQUARE).is_degenerate()

    def test_equality_and_hash(self):
        """Test value equality on vertices in order."""
        a = BoxedPolygon(SQUARE)
        assert a == BoxedPolygon(np.array(SQUARE))
        assert hash(a) == hash(BoxedPolygon(SQUARE))
        assert a != BoxedPolygon(SQUARE[1:] + SQUARE[:1])
        assert a != BoxedPolyline2d(SQUARE)
        assert BoxedPolygon([]) == BoxedPolygon([])

    def test_signed_zero_hashes_alike(self):
        """Test shapes equal up to the sign of a zero share a hash."""
        a = BoxedPolygon([(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)])
        b = BoxedPolygon([(-0.0, 0.0), (1.0, 0.0), (0.0, 1.0)])
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1
        assert len({Polygon[3](a), Polygon[3](b)}) == 1

    def test_pickle(self):
        """Test boxed shapes survive pickling."""
        shape = BoxedPolyline2d(SQUARE)
        assert pickle.loads(pickle.dumps(shape)) == shape

    def test_repr(self):
        """Test the repr lists the vertices."""
        assert repr(BoxedPolygon([(1, 2)])) == "BoxedPolygon(((1.0, 2.0),))"


class TestFixedBoxedConversion:
    """Tests for moving between the fixed and boxed families."""

    @pytest.mark.parametrize(
        "shape", [Polygon[4](SQUARE), BoxedPolygon(SQUARE)], ids=["fixed", "boxed"]
    )
    def test_indexing_and_slicing(self, shape):
        """Test both families index and slice into (x, y) tuples."""
        assert shape[1] == (1.0, 0.0)
        assert shape[-1] == (0.0, 1.0)
        assert shape[1:3] == ((1.0, 0.0), (1.0, 1.0))
        assert shape[::-1] == tuple(SQUARE[::-1])
        assert shape[4:] == ()

    def test_from_fixed(self):
        """Test boxing a fixed-count shape keeps its vertices in order."""
        fixed = Polygon[4](SQUARE)
        boxed = BoxedPolygon.from_fixed(fixed)
        assert list(boxed) == SQUARE

    def test_to_fixed(self):
        """Test unboxing picks the class matching the vertex count."""
        boxed = BoxedPolyline2d(SQUARE)
        fixed = boxed.to_fixed()
        assert type(fixed) is Polyline2d[4]
        assert list(fixed) == SQUARE
        assert type(BoxedPolygon([]).to_fixed()) is Polygon[0]

    def test_from_fixed_rejects_other_family(self):
        """Test a polyline cannot be boxed as a polygon."""
        with pytest.raises(TypeError):
            BoxedPolygon.from_fixed(Polyline2d[4](SQUARE))


class TestTriangle:
    """Tests for Triangle."""

    def test_named_vertices(self):
        """Test a, b, c are stored as float pairs."""
        tri = Triangle((0, 0), (2, 0), [0, 1])
        assert tri.a == (0.0, 0.0)
        assert tri.b == (2.0, 0.0)
        assert tri.c == (0.0, 1.0)
        assert tri.vertices == (tri.a, tri.b, tri.c)
        assert Triangle.closed is True

    def test_from_vertices(self):
        """Test construction from a sequence of exactly three points."""
        tri = Triangle.from_vertices([(0, 0), (1, 0), (0, 1)])
        assert tri == Triangle((0, 0), (1, 0), (0, 1))

    @pytest.mark.parametrize("count", [0, 2, 4])
    def test_from_vertices_wrong_count(self, count):
        """Test other counts are rejected."""
        with pytest.raises(VertexCountError):
            Triangle.from_vertices([(float(i), 0.0) for i in range(count)])

    def test_no_winding_enforced(self):
        """Test clockwise and collinear triangles are stored as given."""
        cw = Triangle((0, 0), (0, 1), (1, 0))
        assert cw.vertices == ((0.0, 0.0), (0.0, 1.0), (1.0, 0.0))
        flat = Triangle((0, 0), (1, 1), (2, 2))
        assert flat.c == (2.0, 2.0)

    def test_to_polygon(self):
        """Test a triangle converts to Polygon[3] with the same vertices."""
        tri = Triangle((0, 0), (1, 0), (0, 1))
        assert tri.to_polygon() == Polygon[3]([(0, 0), (1, 0), (0, 1)])

    def test_malformed_vertex(self):
        """Test a vertex with the wrong arity is rejected."""
        with pytest.raises(MalformedVertexError):
            Triangle((0, 0, 0), (1, 0), (0, 1))


class TestRectangle:
    """Tests for Rectangle and its Quad alias."""

    def test_half_extents(self):
        """Test a 2 x 1 half-extent rectangle spans [-2, 2] x [-1, 1]."""
        rect = Rectangle(half_width=2.0, half_height=1.0)
        assert rect.half_width == 2.0
        assert rect.half_height == 1.0
        assert rect.size() == (4.0, 2.0)
        assert not rect.is_degenerate()

    def test_from_size(self):
        """Test construction from full width and height."""
        assert Rectangle.from_size(4.0, 2.0) == Rectangle(2.0, 1.0)

    def test_quad_alias(self):
        """Test Quad is the same type as Rectangle."""
        assert Quad is Rectangle
        assert Quad(1.0, 1.0) == Rectangle(1.0, 1.0)

    @pytest.mark.parametrize("hw, hh", [(0.0, 1.0), (1.0, -1.0), (float("nan"), 1.0)])
    def test_degenerate_extents_are_accepted(self, hw, hh):
        """Test non-positive extents construct and are reported degenerate."""
        assert Rectangle(hw, hh).is_degenerate()
