"""Unit tests for the shared Shape plumbing.

Tests cover:
- Default and replaced transforms, and the inverse cache
- Object-space ray handoff to local_intersect
- Identity handles, equality, hashing and pickling
- The error raised for a singular transform
"""

import logging
import math
import pickle

import pytest

from whitted.core.matrix import IDENTITY, SingularMatrixError
from whitted.core.ray import Ray
from whitted.core.transform import rotation_z, scaling, translation
from whitted.core.tuples import point, vector
from whitted.geometry.shape import Shape
from whitted.geometry.sphere import Sphere
from whitted.materials.material import Material


class RecordingShape(Shape):
    """Shape that remembers the last object-space ray it saw."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.saved_ray = None

    def local_intersect(self, local_ray):
        self.saved_ray = local_ray
        return []

    def local_normal_at(self, local_point):
        return vector(local_point.x, local_point.y, local_point.z)


class TestTransform:
    """Tests for shape transforms."""

    def test_default_transform_is_identity(self):
        """Test that new shapes start with the identity transform."""
        assert RecordingShape().transform == IDENTITY

    def test_set_transform(self):
        """Test replacing the transform through the setter and the method."""
        s = RecordingShape()
        s.transform = translation(2.0, 3.0, 4.0)
        assert s.transform == translation(2.0, 3.0, 4.0)
        s.set_transform(scaling(2.0, 2.0, 2.0))
        assert s.transform == scaling(2.0, 2.0, 2.0)

    def test_set_transform_resets_inverse_cache(self):
        """Test that the cached inverse follows a new transform."""
        s = RecordingShape(transform=translation(1.0, 0.0, 0.0))
        assert s.inverse_transform == translation(-1.0, 0.0, 0.0)
        s.set_transform(translation(0.0, 5.0, 0.0))
        assert s.inverse_transform == translation(0.0, -5.0, 0.0)

    def test_scaled_shape_sees_scaled_ray(self):
        """Test that local_intersect receives the object-space ray."""
        s = RecordingShape(transform=scaling(2.0, 2.0, 2.0))
        s.intersects(Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0)))
        assert s.saved_ray.origin == point(0.0, 0.0, -2.5)
        assert s.saved_ray.direction == vector(0.0, 0.0, 0.5)

    def test_translated_shape_sees_translated_ray(self):
        """Test that translation only moves the local ray origin."""
        s = RecordingShape(transform=translation(5.0, 0.0, 0.0))
        s.intersects(Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0)))
        assert s.saved_ray.origin == point(-5.0, 0.0, -5.0)
        assert s.saved_ray.direction == vector(0.0, 0.0, 1.0)

    def test_normal_on_transformed_shape(self):
        """Test that normals come back through the inverse transpose."""
        s = RecordingShape(transform=scaling(1.0, 0.5, 1.0) @ rotation_z(math.pi / 5.0))
        half = math.sqrt(2.0) / 2.0
        n = s.normal_at(point(0.0, half, -half))
        assert n.approx_equals(vector(0.0, 0.97014, -0.24254), tolerance=1e-4)

    def test_singular_transform_is_deferred(self):
        """Test that a singular transform is accepted until first use."""
        s = RecordingShape()
        s.set_transform(scaling(0.0, 1.0, 1.0))
        with pytest.raises(SingularMatrixError):
            s.intersects(Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0)))

    def test_singular_transform_error_names_shape(self, caplog):
        """Test that the error message and log identify the shape."""
        s = Sphere(transform=scaling(1.0, 0.0, 1.0))
        with caplog.at_level(logging.ERROR, logger="whitted.geometry.shape"):
            with pytest.raises(SingularMatrixError, match="Sphere"):
                s.normal_at(point(0.0, 0.0, 1.0))
        assert "singular" in caplog.text


class TestIdentity:
    """Tests for identity handles."""

    def test_default_material(self):
        """Test that shapes get a default material."""
        assert RecordingShape().material == Material()

    def test_handles_are_unique(self):
        """Test that separately built shapes never compare equal."""
        a = Sphere()
        b = Sphere()
        assert a.handle != b.handle
        assert a != b

    def test_equality_ignores_transform(self):
        """Test that equality follows the handle, not the state."""
        s = Sphere()
        handle = s.handle
        s.set_transform(translation(1.0, 2.0, 3.0))
        assert s.handle == handle
        assert s == s

    def test_hashable(self):
        """Test that shapes work as set members."""
        a = Sphere()
        b = Sphere()
        assert len({a, b, a}) == 2

    def test_pickle_keeps_identity(self):
        """Test that a pickled copy still equals the original."""
        s = Sphere(transform=translation(1.0, 0.0, 0.0))
        copy = pickle.loads(pickle.dumps(s))
        assert copy is not s
        assert copy == s
        assert copy.transform == s.transform
