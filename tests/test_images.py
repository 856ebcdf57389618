"""
Unit tests for raster image variants.

Covers: construction validation, flat row-major storage, signed byte
mapping, and complex magnitude.
"""

import numpy as np
import pytest

from imaging import (
    Complex32Image,
    Gray8Image,
    Gray32Image,
    Image,
    ImageVariant,
    InvalidDimension,
)


class TestConstruction:
    """Tests for building images."""

    def test_zero_filled_by_default(self):
        img = Gray8Image(3, 2)
        assert img.data.shape == (6,)
        assert img.data.dtype == np.uint8
        assert np.all(img.data == 0)

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError, match="Image is abstract"):
            Image(2, 2)

    def test_variant_tags(self):
        assert Gray8Image.variant is ImageVariant.GRAY8
        assert Gray32Image.variant is ImageVariant.GRAY32
        assert Complex32Image.variant is ImageVariant.COMPLEX32

    @pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-3, 2), (2, -1)])
    def test_non_positive_size_raises(self, width, height):
        with pytest.raises(InvalidDimension):
            Gray8Image(width, height)

    def test_invalid_dimension_carries_value(self):
        with pytest.raises(InvalidDimension) as excinfo:
            Gray32Image(4, -7)
        assert excinfo.value.name == "height"
        assert excinfo.value.value == -7
        assert "-7" in str(excinfo.value)

    def test_non_integer_size_raises(self):
        with pytest.raises(TypeError, match="width must be int"):
            Gray8Image(2.5, 1)

    def test_wrong_pixel_count_raises(self):
        with pytest.raises(ValueError, match="needs 6 pixels, got 5"):
            Gray8Image(3, 2, [1, 2, 3, 4, 5])

    def test_gray8_out_of_range_raises(self):
        with pytest.raises(ValueError, match=r"\[0, 255\]"):
            Gray8Image(2, 1, [0, 256])
        with pytest.raises(ValueError):
            Gray8Image(2, 1, [-1, 0])

    def test_gray8_rejects_float_pixels(self):
        with pytest.raises(TypeError, match="integer pixels"):
            Gray8Image(2, 1, np.array([0.5, 1.0]))

    def test_construction_copies_data(self):
        pixels = np.array([1, 2, 3, 4], dtype=np.uint8)
        img = Gray8Image(2, 2, pixels)
        pixels[0] = 99
        assert img.data[0] == 1


class TestLayout:
    """Tests for row-major addressing."""

    def test_pixel_uses_row_major_index(self):
        img = Gray8Image(3, 2, [0, 1, 2, 10, 11, 12])
        assert img.pixel(0, 2) == 2
        assert img.pixel(1, 0) == 10
        assert img.pixel(1, 2) == 12

    def test_pixel_out_of_range_raises(self):
        img = Gray8Image(3, 2)
        with pytest.raises(IndexError):
            img.pixel(2, 0)
        with pytest.raises(IndexError):
            img.pixel(0, 3)

    def test_from_array_and_to_array(self):
        arr = np.array([[1, 2, 3], [4, 5, 6]], dtype=np.uint8)
        img = Gray8Image.from_array(arr)
        assert img.size == (3, 2)
        assert img.data.tolist() == [1, 2, 3, 4, 5, 6]
        assert np.array_equal(img.to_array(), arr)

    def test_from_array_requires_2d(self):
        with pytest.raises(ValueError, match="2D"):
            Gray8Image.from_array(np.zeros(4, dtype=np.uint8))

    def test_to_array_is_a_copy(self):
        img = Gray8Image(2, 2, [1, 2, 3, 4])
        arr = img.to_array()
        arr[0, 0] = 200
        assert img.data[0] == 1

    def test_equality(self):
        assert Gray8Image(2, 1, [1, 2]) == Gray8Image(2, 1, [1, 2])
        assert Gray8Image(2, 1, [1, 2]) != Gray8Image(2, 1, [1, 3])
        assert Gray8Image(2, 1, [1, 2]) != Gray8Image(1, 2, [1, 2])
        assert Gray8Image(2, 1, [1, 2]) != Gray32Image(2, 1, [1, 2])

    def test_str_names_type_and_size(self):
        assert str(Gray8Image(4, 3)) == "Gray8Image (4,3)"


class TestSignedBytes:
    """Tests for the gray-8 signed byte mapping."""

    def test_high_values_map_to_negative_bytes(self):
        img = Gray8Image(4, 1, [0, 127, 128, 255])
        assert img.to_signed_bytes().tolist() == [0, 127, -128, -1]

    def test_negative_bytes_map_to_high_values(self):
        img = Gray8Image.from_signed_bytes(3, 1, [-128, -1, 5])
        assert img.data.tolist() == [128, 255, 5]

    def test_mapping_is_lossless(self):
        every_value = np.arange(256, dtype=np.uint8)
        img = Gray8Image(16, 16, every_value)
        restored = Gray8Image.from_signed_bytes(16, 16, img.to_signed_bytes())
        assert restored == img


class TestComplexMagnitude:
    """Tests for Complex32Image.magnitude."""

    def test_three_four_five(self):
        img = Complex32Image(1, 1, [3 + 4j])
        assert img.magnitude().tolist() == [5]

    def test_magnitude_dtype_and_shape(self):
        img = Complex32Image(3, 2)
        mag = img.magnitude()
        assert mag.dtype == np.int32
        assert mag.shape == (6,)

    def test_truncates_toward_zero(self):
        # sqrt(2) and sqrt(8) are 1.41 and 2.83
        img = Complex32Image(2, 1, [1 + 1j, 2 - 2j])
        assert img.magnitude().tolist() == [1, 2]

    def test_negative_components(self):
        img = Complex32Image(2, 1, [-3 - 4j, -6 + 8j])
        assert img.magnitude().tolist() == [5, 10]

    def test_saturates_at_int32_max(self):
        img = Complex32Image(1, 1, [3e38 + 0j])
        assert img.magnitude().tolist() == [2**31 - 1]

    def test_value_beyond_single_precision_raises(self):
        with pytest.raises(ValueError, match="single precision"):
            Complex32Image(1, 1, np.array([1e39]))
        with pytest.raises(ValueError, match="single precision"):
            Complex32Image(2, 1, np.array([1 + 1j, 1j * 1e40]))

    def test_non_finite_input_is_kept(self):
        img = Complex32Image(2, 1, np.array([np.inf, np.nan]))
        assert img.magnitude().tolist() == [2**31 - 1, 0]

    def test_real_and_imag_parts(self):
        img = Complex32Image(2, 1, [1 + 2j, 3 - 4j])
        assert img.real.tolist() == [1.0, 3.0]
        assert img.imag.tolist() == [2.0, -4.0]

    def test_real_input_gets_zero_imaginary_part(self):
        img = Complex32Image(2, 1, [3, 4])
        assert img.magnitude().tolist() == [3, 4]
