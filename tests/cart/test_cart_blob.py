"""
Tests for the persisted cart blob codec.
"""
import json

import pytest

from apps.cart.domain.entities import CartLine
from apps.cart.domain.exceptions import MalformedCartBlobError
from apps.cart.domain.services import deserialize_cart, serialize_cart
from apps.cart.domain.value_objects import normalize_attributes

SIZE_L = '4a5aabbb61f7def9a7b4bb4dfb0bba7a'


class TestSerializeCart:

    def test_omits_empty_groups(self):
        blob = serialize_cart({
            'gone': [],
            'shirt': [CartLine(quantity=2, fingerprint=SIZE_L, attributes={'size': 'L'})],
        })
        assert blob == '{"shirt":[{"quantity":2,"hash":"%s","attributes":{"size":"L"}}]}' % SIZE_L

    def test_empty_cart(self):
        assert serialize_cart({}) == '{}'


class TestDeserializeCart:

    @pytest.mark.parametrize('blob', [None, '', '   ', '[]', '{}'])
    def test_nothing_stored(self, blob):
        assert deserialize_cart(blob) == {}

    @pytest.mark.parametrize('blob', ['{oops', '"cart"', '[1, 2]', '42'])
    def test_malformed(self, blob):
        with pytest.raises(MalformedCartBlobError) as exc_info:
            deserialize_cart(blob)
        assert exc_info.value.code == 'MALFORMED_CART_BLOB'

    def test_reads_lines_in_order(self):
        groups = deserialize_cart(json.dumps({
            'shirt': [
                {'quantity': 2, 'hash': SIZE_L, 'attributes': {'size': 'L'}},
                {'quantity': 1, 'hash': 'abc', 'attributes': {'size': 'M'}},
            ],
        }))
        assert groups == {
            'shirt': [
                CartLine(quantity=2, fingerprint=SIZE_L, attributes={'size': 'L'}),
                CartLine(quantity=1, fingerprint='abc', attributes={'size': 'M'}),
            ],
        }

    def test_group_stored_as_object_with_holes(self):
        groups = deserialize_cart(
            '{"shirt":{"0":{"quantity":1,"hash":"a","attributes":{"size":"L"}},'
            '"2":{"quantity":3,"hash":"b","attributes":{"size":"S"}}}}'
        )
        assert [line.fingerprint for line in groups['shirt']] == ['a', 'b']
        assert [line.quantity for line in groups['shirt']] == [1, 3]

    def test_digit_string_quantity(self):
        groups = deserialize_cart('{"x":[{"quantity":"3","hash":"h","attributes":[]}]}')
        assert groups['x'][0].quantity == 3
        assert groups['x'][0].attributes == {}

    @pytest.mark.parametrize('line', [
        {'quantity': 0, 'hash': 'h', 'attributes': {}},
        {'quantity': -2, 'hash': 'h', 'attributes': {}},
        {'quantity': 1.5, 'hash': 'h', 'attributes': {}},
        {'quantity': True, 'hash': 'h', 'attributes': {}},
        {'hash': 'h', 'attributes': {}},
        {'quantity': 1, 'hash': 'h', 'attributes': 'red'},
        'not a line',
    ])
    def test_unreadable_lines_are_skipped(self, line):
        blob = json.dumps({'x': [line], 'y': [{'quantity': 1, 'hash': 'h', 'attributes': {}}]})
        assert list(deserialize_cart(blob)) == ['y']

    def test_missing_hash_is_recomputed(self):
        groups = deserialize_cart('{"x":[{"quantity":1,"attributes":{"size":"L"}}]}')
        assert groups['x'][0].fingerprint == normalize_attributes({'size': 'L'}).fingerprint

    def test_duplicate_fingerprints_are_merged(self):
        groups = deserialize_cart(json.dumps({
            'x': [
                {'quantity': 2, 'hash': 'h', 'attributes': {}},
                {'quantity': 5, 'hash': 'h', 'attributes': {}},
            ],
        }))
        assert groups['x'] == [CartLine(quantity=7, fingerprint='h', attributes={})]

    def test_non_list_group_is_skipped(self):
        assert deserialize_cart('{"x": 5}') == {}
