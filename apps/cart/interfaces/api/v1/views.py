"""
Cart API v1 views.
"""
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ....application.dtos.cart_dto import (
    CartDTO,
    CartItemAddDTO,
    CartItemRemoveDTO,
    CartItemUpdateDTO,
)
from ....application.use_cases import (
    AddCartItemUseCase,
    RemoveCartItemUseCase,
    UpdateCartItemUseCase,
)
from ....domain.exceptions import CartLineNotFoundError
from ....infrastructure.factory import build_cart_store
from ...serializers.cart_serializer import (
    CartItemCreateSerializer,
    CartItemRemoveSerializer,
    CartItemUpdateSerializer,
    CartSerializer,
)

TRUTHY_QUERY_VALUES = ('1', 'true', 'yes', 'on')


def _cart_response(cart, data=None, status_code=status.HTTP_200_OK) -> Response:
    """Build a response and flush any pending cart cookie onto it."""
    body = CartSerializer(data).data if data is not None else None
    response = Response(body, status=status_code)
    cart.adapter.apply_to_response(response)
    return response


@extend_schema(tags=['Cart'])
class CartView(APIView):
    """Cart endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CartSerializer},
        summary="Get the visitor's cart",
    )
    def get(self, request):
        cart = build_cart_store(request)
        return _cart_response(cart, CartDTO.from_store(cart))

    @extend_schema(
        request=CartItemCreateSerializer,
        responses={201: CartSerializer},
        summary="Add item to cart",
    )
    def post(self, request):
        serializer = CartItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cart = build_cart_store(request)
        use_case = AddCartItemUseCase(cart=cart)
        result = use_case.execute(CartItemAddDTO(**serializer.validated_data))

        return _cart_response(cart, result.data, status.HTTP_201_CREATED)

    @extend_schema(
        parameters=[
            OpenApiParameter(
                'destroy',
                OpenApiTypes.BOOL,
                description="Drop the stored cart entry instead of saving an empty cart",
            ),
        ],
        summary="Clear cart",
    )
    def delete(self, request):
        cart = build_cart_store(request)
        if request.query_params.get('destroy', '').lower() in TRUTHY_QUERY_VALUES:
            cart.destroy()
        else:
            cart.clear()
        return _cart_response(cart, status_code=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Cart'])
class CartItemView(APIView):
    """Cart item endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=CartItemUpdateSerializer,
        responses={200: CartSerializer},
        summary="Update cart item quantity",
    )
    def patch(self, request, product_id: str):
        serializer = CartItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cart = build_cart_store(request)
        use_case = UpdateCartItemUseCase(cart=cart)
        result = use_case.execute(
            CartItemUpdateDTO(product_id=product_id, **serializer.validated_data)
        )
        if not result:
            raise CartLineNotFoundError(product_id)

        return _cart_response(cart, result.data)

    @extend_schema(
        request=CartItemRemoveSerializer,
        summary="Remove item from cart",
    )
    def delete(self, request, product_id: str):
        serializer = CartItemRemoveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cart = build_cart_store(request)
        use_case = RemoveCartItemUseCase(cart=cart)
        result = use_case.execute(
            CartItemRemoveDTO(product_id=product_id, **serializer.validated_data)
        )
        if not result:
            raise CartLineNotFoundError(product_id)

        return _cart_response(cart, status_code=status.HTTP_204_NO_CONTENT)
