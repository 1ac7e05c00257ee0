"""Serializers for transforming shop domain models to API responses."""

from rest_framework import serializers


class MoneyField(serializers.Field):
    """Renders Money as a two-place decimal string."""

    def to_representation(self, value):
        return str(value)


class ProductSerializer(serializers.Serializer):
    """Serializer for Product domain model."""

    id = serializers.CharField()
    sku = serializers.CharField()
    title = serializers.CharField()
    variant = serializers.CharField()
    price_cad = MoneyField(source="price")
    image = serializers.CharField()
    category = serializers.CharField(allow_null=True)


class CartItemSerializer(serializers.Serializer):
    """Serializer for CartItem domain model."""

    product = ProductSerializer()
    quantity = serializers.IntegerField()
    line_total = MoneyField()


class OrderLineSerializer(serializers.Serializer):
    title = serializers.CharField()
    sku = serializers.CharField()
    quantity = serializers.IntegerField()
    unit_price = MoneyField()
    line_total = MoneyField()


class OrderSerializer(serializers.Serializer):
    """Serializer for a pending Order."""

    order_id = serializers.CharField()
    lines = OrderLineSerializer(many=True)
    grand_total = MoneyField()


class PlacedOrderSerializer(serializers.Serializer):
    order_id = serializers.CharField()
    subject = serializers.CharField()
    body = serializers.CharField()
    mailto_url = serializers.CharField()


# Input


class AddCartItemSerializer(serializers.Serializer):
    product_id = serializers.CharField()
    quantity = serializers.IntegerField(min_value=1, default=1)


class SetQuantitySerializer(serializers.Serializer):
    quantity = serializers.IntegerField()


class CustomerInfoSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=True)
    email = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=True)
    phone = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=True)
