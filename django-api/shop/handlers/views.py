"""HTTP handlers (views) for the catalogue, cart and checkout.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to the exception handler
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from common.storage import SessionStorage
from shop.domain import CartItem, CustomerInfo
from shop.domain.errors import ProductNotFoundError
from shop.handlers.serializers import (
    AddCartItemSerializer,
    CartItemSerializer,
    CustomerInfoSerializer,
    OrderSerializer,
    PlacedOrderSerializer,
    ProductSerializer,
    SetQuantitySerializer,
)
from shop.services.cart_store import CartStore
from shop.services.checkout_service import CheckoutService, payment_instructions_from_settings
from shop.stores import get_product_store


def cart_for(request: Request) -> CartStore:
    return CartStore(SessionStorage(request.session))


def cart_response(cart: list[CartItem], status_code: int = status.HTTP_200_OK) -> Response:
    return Response(
        {
            "items": CartItemSerializer(cart, many=True).data,
            "total": str(CartStore.total(cart)),
            "item_count": CartStore.item_count(cart),
        },
        status=status_code,
    )


class ProductListView(APIView):
    """Handler for GET /api/products"""

    def get(self, request: Request) -> Response:
        category = request.query_params.get("category") or None
        products = get_product_store().list_products(category)
        return Response(ProductSerializer(products, many=True).data)


class CartView(APIView):
    """Handler for GET and DELETE /api/cart"""

    def get(self, request: Request) -> Response:
        return cart_response(cart_for(request).get())

    def delete(self, request: Request) -> Response:
        return cart_response(cart_for(request).clear())


class CartItemListView(APIView):
    """Handler for POST /api/cart/items"""

    def post(self, request: Request) -> Response:
        payload = AddCartItemSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        product_id = payload.validated_data["product_id"]
        product = get_product_store().get_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        cart = cart_for(request).add(product, payload.validated_data["quantity"])
        return cart_response(cart, status.HTTP_201_CREATED)


class CartItemDetailView(APIView):
    """Handler for PATCH and DELETE /api/cart/items/{product_id}"""

    def patch(self, request: Request, product_id: str) -> Response:
        payload = SetQuantitySerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        cart = cart_for(request).set_quantity(product_id, payload.validated_data["quantity"])
        return cart_response(cart)

    def delete(self, request: Request, product_id: str) -> Response:
        return cart_response(cart_for(request).remove(product_id))


class CheckoutView(APIView):
    """Handler for GET and POST /api/checkout"""

    def _service(self, request: Request) -> CheckoutService:
        storage = SessionStorage(request.session)
        return CheckoutService(CartStore(storage), storage, payment_instructions_from_settings())

    def get(self, request: Request) -> Response:
        order = self._service(request).preview()
        return Response(OrderSerializer(order).data)

    def post(self, request: Request) -> Response:
        payload = CustomerInfoSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        placed = self._service(request).place_order(CustomerInfo(**payload.validated_data))
        return Response(PlacedOrderSerializer(placed).data, status=status.HTTP_201_CREATED)
