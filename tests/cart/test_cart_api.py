"""
Tests for the cart REST API.
"""
import pytest

from apps.cart.infrastructure.store_key import derive_store_key

CART_URL = '/api/v1/cart/'
SHOP_KEY = derive_store_key('shop.example.com')


def item_url(product_id):
    return f'/api/v1/cart/items/{product_id}/'


def add(api_client, product_id, quantity=1, attributes=None):
    payload = {'product_id': product_id, 'quantity': quantity}
    if attributes is not None:
        payload['attributes'] = attributes
    return api_client.post(CART_URL, payload, format='json')


class TestCartView:

    def test_empty_cart(self, api_client):
        response = api_client.get(CART_URL)

        assert response.status_code == 200
        assert response.data['is_empty'] is True
        assert response.data['lines'] == []
        assert response.data['total_items'] == 0

    def test_add_and_read_back(self, api_client):
        response = add(api_client, 'shirt', 2, {'size': 'L', 'price': 10})

        assert response.status_code == 201
        assert response.data['total_quantity'] == 2
        assert response.data['total_price'] == '20.00'

        response = api_client.get(CART_URL)
        line = response.data['lines'][0]
        assert line['product_id'] == 'shirt'
        assert line['quantity'] == 2
        assert line['attributes'] == {'size': 'L', 'price': 10}

    def test_huge_price_total_is_rendered(self, api_client):
        response = add(api_client, 'yacht', 200000, {'price': '1e20'})

        assert response.status_code == 201
        assert response.data['total_price'] == '2' + '0' * 25 + '.00'
        assert api_client.get(CART_URL).data['total_price'] == response.data['total_price']

    def test_same_variant_merges(self, api_client):
        add(api_client, 'shirt', 2, {'size': 'L'})
        response = add(api_client, 'shirt', 3, {'size': 'L'})

        assert response.data['total_items'] == 1
        assert response.data['total_quantity'] == 5

    def test_invalid_quantity_falls_back(self, api_client):
        response = add(api_client, 'shirt', 'abc')
        assert response.data['total_quantity'] == 1

    def test_missing_product_id(self, api_client):
        response = api_client.post(CART_URL, {'quantity': 1}, format='json')
        assert response.status_code == 400

    def test_clear(self, api_client):
        add(api_client, 'shirt', 2)

        response = api_client.delete(CART_URL)

        assert response.status_code == 204
        assert api_client.get(CART_URL).data['is_empty'] is True

    def test_destroy(self, api_client):
        add(api_client, 'shirt', 2)

        response = api_client.delete(f'{CART_URL}?destroy=true')

        assert response.status_code == 204
        assert api_client.get(CART_URL).data['is_empty'] is True


class TestCartItemView:

    def test_update_quantity(self, api_client):
        add(api_client, 'shirt', 2, {'size': 'L'})

        response = api_client.patch(
            item_url('shirt'), {'quantity': 7, 'attributes': {'size': 'L'}}, format='json'
        )

        assert response.status_code == 200
        assert response.data['total_quantity'] == 7

    def test_update_unknown_variant(self, api_client):
        add(api_client, 'shirt', 2, {'size': 'L'})

        response = api_client.patch(
            item_url('shirt'), {'quantity': 7, 'attributes': {'size': 'S'}}, format='json'
        )

        assert response.status_code == 404
        assert response.data['code'] == 'CART_LINE_NOT_FOUND'

    def test_update_to_zero_removes(self, api_client):
        add(api_client, 'shirt', 2, {'size': 'L'})

        response = api_client.patch(
            item_url('shirt'), {'quantity': 0, 'attributes': {'size': 'L'}}, format='json'
        )

        assert response.status_code == 200
        assert response.data['is_empty'] is True

    def test_remove_variant(self, api_client):
        add(api_client, 'shirt', 1, {'size': 'L'})
        add(api_client, 'shirt', 1, {'size': 'M'})

        response = api_client.delete(item_url('shirt'), {'attributes': {'size': 'L'}}, format='json')

        assert response.status_code == 204
        lines = api_client.get(CART_URL).data['lines']
        assert [line['attributes'] for line in lines] == [{'size': 'M'}]

    def test_remove_whole_product(self, api_client):
        add(api_client, 'shirt', 1, {'size': 'L'})
        add(api_client, 'shirt', 1, {'size': 'M'})

        response = api_client.delete(item_url('shirt'))

        assert response.status_code == 204
        assert api_client.get(CART_URL).data['is_empty'] is True

    def test_remove_unknown_product(self, api_client):
        response = api_client.delete(item_url('ghost'))

        assert response.status_code == 404
        assert response.data['entity_id'] == 'ghost'


class TestCookieStorage:

    @pytest.fixture(autouse=True)
    def use_cookie(self, settings):
        settings.CART = {'use_cookie': True}

    def test_cart_travels_in_cookie(self, api_client):
        response = add(api_client, 'shirt', 2, {'size': 'L'})

        assert response.cookies[SHOP_KEY]['max-age'] == 604800
        assert api_client.get(CART_URL).data['total_quantity'] == 2

    def test_destroy_expires_cookie(self, api_client):
        add(api_client, 'shirt', 2)

        response = api_client.delete(f'{CART_URL}?destroy=1')

        assert response.cookies[SHOP_KEY]['max-age'] == 0
        assert api_client.get(CART_URL).data['is_empty'] is True

    def test_hosts_keep_separate_carts(self, api_client):
        add(api_client, 'shirt', 2)

        response = api_client.get(CART_URL, HTTP_HOST='other.example.com')

        assert response.data['is_empty'] is True
