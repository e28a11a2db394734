from django.urls import path
from .views import ProductListView, ProductSlugListView, ProductDetailView, ProductSearchView

urlpatterns = [
    path('products/', ProductListView.as_view(), name='catalog-products-list'),
    path('products/slugs/', ProductSlugListView.as_view(), name='catalog-products-slugs'),
    path('products/<slug:slug>/', ProductDetailView.as_view(), name='catalog-products-detail'),
    path('search/<str:term>/', ProductSearchView.as_view(), name='catalog-products-search'),
]
