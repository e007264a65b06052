"""Tests for instances and headers."""

import numpy as np
import pytest

from tinyknn.core.data_structures import Instance, InstanceHeader, Neighbour
from tinyknn.utils.errors import InvalidInputError, SchemaError


class TestInstanceHeader:

    def test_valid_header(self):
        InstanceHeader(num_features=3, num_classes=2, feature_names=["a", "b", "c"]).validate()

    @pytest.mark.parametrize("num_features,num_classes", [
        (0, 2),
        (3, 0),
        ("3", 2),
        (3, None),
        (True, 2),
    ])
    def test_malformed_header_raises(self, num_features, num_classes):
        with pytest.raises(SchemaError):
            InstanceHeader(num_features=num_features, num_classes=num_classes).validate()

    def test_name_count_mismatch_raises(self):
        with pytest.raises(SchemaError):
            InstanceHeader(num_features=2, num_classes=2, class_names=["only_one"]).validate()

    def test_dict_round_trip(self):
        header = InstanceHeader(num_features=2, num_classes=3, feature_names=["x", "y"], relation="sensors")

        assert InstanceHeader.from_dict(header.to_dict()) == header


class TestInstance:

    def test_features_become_float_array(self, header):
        instance = Instance(features=[1, 2], label=1, header=header)

        assert instance.features.dtype == float
        assert instance.num_features == 2
        assert instance.num_classes == 3
        assert instance.class_value == 1
        assert instance.weight == 1.0

    def test_num_classes_without_header(self):
        assert Instance(features=[1.0], label=0).num_classes == 0

    @pytest.mark.parametrize("label", [-1, 1.5, "cat", True])
    def test_invalid_label_raises(self, label):
        with pytest.raises(InvalidInputError):
            Instance(features=[1.0], label=label)

    def test_float_label_with_integer_value_is_accepted(self):
        assert Instance(features=[1.0], label=2.0).label == 2

    def test_missing_label_has_no_class_value(self):
        with pytest.raises(InvalidInputError):
            Instance(features=[1.0]).class_value

    def test_two_dimensional_features_raise(self):
        with pytest.raises(InvalidInputError):
            Instance(features=[[1.0, 2.0]], label=0)

    def test_set_features_overwrites_in_place(self, make_instance):
        instance = make_instance([1.0, 2.0], label=0)
        original = instance.features

        instance.set_features([0.5, -0.5])

        assert instance.features is original
        np.testing.assert_array_equal(instance.features, [0.5, -0.5])

    def test_set_features_shape_mismatch_raises(self, make_instance):
        instance = make_instance([1.0, 2.0], label=0)

        with pytest.raises(InvalidInputError):
            instance.set_features([1.0])

    def test_copy_does_not_share_features(self, make_instance):
        instance = make_instance([1.0, 2.0], label=0)
        clone = instance.copy()
        clone.set_features([9.0, 9.0])

        np.testing.assert_array_equal(instance.features, [1.0, 2.0])
        assert clone.header is instance.header

    def test_neighbour_class_value(self, make_instance):
        neighbour = Neighbour(instance=make_instance([0.0, 0.0], label=2), distance=1.5)

        assert neighbour.class_value == 2
