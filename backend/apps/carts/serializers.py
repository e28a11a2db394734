from rest_framework import serializers

from .codec import MAX_LINE_QUANTITY, PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS, json_number
from .state import CartLineItem, CartState, ShippingAddress


class CartLineItemSerializer(serializers.Serializer):
    _id = serializers.CharField()
    title = serializers.CharField(required=False, allow_blank=True, default="")
    slug = serializers.CharField(required=False, allow_blank=True, default="")
    image = serializers.CharField(required=False, allow_blank=True, default="")
    gender = serializers.CharField(required=False, allow_blank=True, default="")
    size = serializers.CharField(required=False, allow_null=True, default=None)
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES, min_value=0
    )
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_LINE_QUANTITY)
    inStock = serializers.IntegerField(required=False, min_value=0, default=0)

    def to_line_item(self) -> CartLineItem:
        data = self.validated_data
        return CartLineItem(
            product_id=data["_id"],
            size=data.get("size"),
            price=data["price"],
            quantity=data["quantity"],
            title=data.get("title", ""),
            slug=data.get("slug", ""),
            image=data.get("image", ""),
            gender=data.get("gender", ""),
            in_stock=data.get("inStock", 0),
        )


class CartQuantitySerializer(CartLineItemSerializer):
    # Zero is accepted here and removes the line.
    quantity = serializers.IntegerField(min_value=0, max_value=MAX_LINE_QUANTITY)


class CartLineRemoveSerializer(serializers.Serializer):
    _id = serializers.CharField()
    size = serializers.CharField(required=False, allow_null=True, default=None)


class ShippingAddressSerializer(serializers.Serializer):
    firstName = serializers.CharField(max_length=128)
    lastName = serializers.CharField(max_length=128)
    address = serializers.CharField(max_length=255)
    address2 = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    zip = serializers.CharField(max_length=32)
    city = serializers.CharField(max_length=128)
    country = serializers.CharField(max_length=64)
    phone = serializers.CharField(max_length=32)

    def to_address(self) -> ShippingAddress:
        data = self.validated_data
        return ShippingAddress(
            first_name=data["firstName"],
            last_name=data["lastName"],
            address=data["address"],
            address2=data.get("address2", ""),
            zip=data["zip"],
            city=data["city"],
            country=data["country"],
            phone=data["phone"],
        )


class CartLineReadSerializer(serializers.Serializer):
    _id = serializers.CharField(source="product_id")
    title = serializers.CharField()
    slug = serializers.CharField()
    image = serializers.CharField()
    gender = serializers.CharField()
    size = serializers.CharField(allow_null=True)
    price = serializers.SerializerMethodField()
    quantity = serializers.IntegerField()
    inStock = serializers.IntegerField(source="in_stock")

    def get_price(self, obj: CartLineItem):
        return json_number(obj.price)


class ShippingAddressReadSerializer(serializers.Serializer):
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    address = serializers.CharField()
    address2 = serializers.CharField()
    zip = serializers.CharField()
    city = serializers.CharField()
    country = serializers.CharField()
    phone = serializers.CharField()


class CartStateSerializer(serializers.Serializer):
    isLoaded = serializers.BooleanField(source="is_loaded")
    cart = CartLineReadSerializer(source="lines", many=True)
    numberOfItems = serializers.IntegerField(source="number_of_items")
    subTotal = serializers.SerializerMethodField()
    tax = serializers.SerializerMethodField()
    total = serializers.SerializerMethodField()
    shippingAddress = ShippingAddressReadSerializer(
        source="shipping_address", allow_null=True
    )

    def get_subTotal(self, obj: CartState):
        return json_number(obj.sub_total)

    def get_tax(self, obj: CartState):
        return json_number(obj.tax)

    def get_total(self, obj: CartState):
        return json_number(obj.total)


class OrderResultSerializer(serializers.Serializer):
    hasError = serializers.BooleanField(source="has_error")
    message = serializers.CharField()
