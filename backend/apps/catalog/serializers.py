from rest_framework import serializers


class ProductReadSerializer(serializers.Serializer):
    # Matches ProductDTO; keys follow the storefront's document field names
    _id = serializers.CharField(source="id")
    slug = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    images = serializers.ListField(child=serializers.CharField())
    inStock = serializers.IntegerField(source="in_stock")
    price = serializers.CharField()
    sizes = serializers.ListField(child=serializers.CharField())
    tags = serializers.ListField(child=serializers.CharField())
    type = serializers.CharField(allow_blank=True)
    gender = serializers.CharField()
    createdAt = serializers.CharField(source="created_at", allow_blank=True)
    updatedAt = serializers.CharField(source="updated_at", allow_blank=True)


class ProductSlugSerializer(serializers.Serializer):
    slug = serializers.CharField()


class ProductSummarySerializer(serializers.Serializer):
    title = serializers.CharField()
    images = serializers.ListField(child=serializers.CharField())
    price = serializers.CharField()
    inStock = serializers.IntegerField(source="in_stock")
    slug = serializers.CharField()
