"""Tests for product and category business rules."""

import copy
import math

import pytest

from storefront.errors import ValidationError
from storefront.validation import (
    DEFAULT_PRODUCT_CONSTRAINTS,
    ProductConstraints,
    validate_category_input,
    validate_product_input,
)


def product(**overrides):
    data = {
        'name': 'Rose Vase',
        'description': 'Terracotta, hand painted.',
        'price': 9.99,
        'images': ['url1'],
    }
    data.update(overrides)
    return data


def failure(data, constraints=DEFAULT_PRODUCT_CONSTRAINTS) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        validate_product_input(data, constraints)
    return exc_info.value


class TestValidateProductInput:

    def test_valid_record_passes(self):
        assert validate_product_input(product()) is None

    def test_valid_record_with_offer_passes(self):
        validate_product_input(product(price=10, offer_price=7.5))

    def test_input_is_not_mutated(self):
        data = product(name='  Rose Vase  ', offer_price=None)
        before = copy.deepcopy(data)
        validate_product_input(data)
        assert data == before

    def test_name_is_checked_before_description(self):
        err = failure(product(name='', description=''))
        assert err.field == 'name'
        assert str(err) == 'Product name is required'

    @pytest.mark.parametrize('name', ['', '   ', None, 42])
    def test_name_required(self, name):
        assert failure(product(name=name)).message == 'Product name is required'

    def test_name_too_long(self):
        err = failure(product(name='x' * 201))
        assert err.message == 'Product name must be less than 200 characters'

    def test_name_length_is_measured_after_trimming(self):
        validate_product_input(product(name='  ' + 'x' * 200 + '  '))

    def test_description_required(self):
        err = failure(product(description='  '))
        assert err.field == 'description'
        assert err.message == 'Product description is required'

    def test_description_too_long(self):
        err = failure(product(description='d' * 5001))
        assert err.message == 'Product description must be less than 5000 characters'

    def test_price_required(self):
        data = product()
        del data['price']
        assert failure(data).message == 'Product price is required'

    @pytest.mark.parametrize('price', [0, 0.001, -5, '10', True, math.nan, math.inf])
    def test_price_must_be_a_number_at_least_minimum(self, price):
        err = failure(product(price=price))
        assert err.field == 'price'
        assert err.message == 'Price must be at least 0.01'

    def test_minimum_price_is_allowed(self):
        validate_product_input(product(price=0.01))

    @pytest.mark.parametrize('offer', [0, -1, '5', False])
    def test_offer_price_minimum(self, offer):
        err = failure(product(price=10, offer_price=offer))
        assert err.message == 'Offer price must be at least 0.01'

    def test_offer_equal_to_price_is_rejected(self):
        err = failure({'name': 'A', 'description': 'd', 'price': 10, 'offer_price': 10, 'images': ['x']})
        assert err.field == 'offer_price'
        assert err.message == 'Offer price must be less than regular price'

    def test_offer_above_price_is_rejected(self):
        err = failure(product(price=10, offer_price=12))
        assert err.message == 'Offer price must be less than regular price'

    def test_empty_images_rejected(self):
        err = failure({'name': 'A', 'description': 'd', 'price': 10, 'images': []})
        assert err.field == 'images'
        assert err.message == 'At least one image is required'

    @pytest.mark.parametrize('images', [None, 'url1', {'a': 1}])
    def test_images_must_be_a_list(self, images):
        assert failure(product(images=images)).message == 'At least one image is required'

    def test_too_many_images(self):
        err = failure(product(images=[f'url{i}' for i in range(6)]))
        assert err.message == 'Maximum 5 images allowed'

    def test_five_images_allowed(self):
        validate_product_input(product(images=[f'url{i}' for i in range(5)]))

    @pytest.mark.parametrize('images', [['url1', ''], ['  '], ['url1', None], [3]])
    def test_every_image_must_be_a_non_empty_string(self, images):
        assert failure(product(images=images)).message == 'All images must be valid URLs'

    def test_price_checked_before_images(self):
        err = failure(product(price=None, images=[]))
        assert err.field == 'price'

    def test_custom_constraints(self):
        constraints = ProductConstraints(name_max_length=5, min_price=1, max_images=1)
        assert failure(product(name='Too long'), constraints).message == \
            'Product name must be less than 5 characters'
        assert failure(product(name='Vase', price=0.5), constraints).message == 'Price must be at least 1'
        assert failure(product(name='Vase', images=['a', 'b']), constraints).message == 'Maximum 1 images allowed'

    def test_constraints_from_config(self):
        constraints = ProductConstraints.from_config({
            'PRODUCT_NAME_MAX_LENGTH': '50',
            'PRODUCT_MAX_IMAGES': 3,
        })
        assert constraints.name_max_length == 50
        assert constraints.max_images == 3
        assert constraints.description_max_length == 5000
        assert constraints.min_price == 0.01


class TestValidateCategoryInput:

    def test_valid_category(self):
        validate_category_input({'name': 'Pottery', 'description': None})

    @pytest.mark.parametrize('name', ['', '  ', None])
    def test_name_required(self, name):
        with pytest.raises(ValidationError, match='Category name is required'):
            validate_category_input({'name': name})

    def test_name_too_long(self):
        with pytest.raises(ValidationError, match='less than 100 characters'):
            validate_category_input({'name': 'n' * 101})

    def test_description_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_category_input({'name': 'Pottery', 'description': 'd' * 501})
        assert exc_info.value.field == 'description'
