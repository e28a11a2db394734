from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.exceptions import ApplicationError
from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response
from apps.common import get_logger
from .container import build_catalog_service
from .serializers import (
    ProductReadSerializer,
    ProductSlugSerializer,
    ProductSummarySerializer,
)

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    service = build_catalog_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List all products",
        responses={200: ProductReadSerializer(many=True)},
    )
    def get(self, request):
        self.log.debug("Handling product list request")
        data = self.service.get_all_products()
        return Response(ProductReadSerializer(data, many=True).data)


@extend_schema(tags=["Catalog"])
class ProductSlugListView(APIView):
    service = build_catalog_service()
    log = logger.bind(view="ProductSlugListView")

    @extend_schema(
        operation_id="products_slugs",
        summary="List product slugs",
        description="Slug-only projection used to enumerate static product pages.",
        responses={200: ProductSlugSerializer(many=True)},
    )
    def get(self, request):
        data = self.service.get_all_product_slugs()
        return Response(ProductSlugSerializer(data, many=True).data)


@extend_schema(tags=["Catalog"])
class ProductDetailView(APIView):
    service = build_catalog_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product by slug",
        parameters=[OpenApiParameter("slug", str, OpenApiParameter.PATH)],
        responses={
            200: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, slug: str):
        self.log.debug("Fetching product detail", slug=slug)
        dto = self.service.get_product_by_slug(slug)
        if not dto:
            raise ApplicationError(
                "NOT_FOUND",
                "Product not found",
                status_code=status.HTTP_404_NOT_FOUND,
                details={"slug": slug},
            )
        return Response(ProductReadSerializer(dto).data)


@extend_schema(tags=["Catalog"])
class ProductSearchView(APIView):
    service = build_catalog_service()
    log = logger.bind(view="ProductSearchView")

    @extend_schema(
        operation_id="products_search",
        summary="Search products",
        description="Case-insensitive search over product titles and tags.",
        parameters=[OpenApiParameter("term", str, OpenApiParameter.PATH)],
        responses={
            200: ProductSummarySerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, term: str):
        if not term.strip():
            return error_response("VALIDATION_ERROR", "A search term is required")
        self.log.debug("Handling product search", term=term)
        data = self.service.get_products_by_term(term)
        return Response(ProductSummarySerializer(data, many=True).data)
