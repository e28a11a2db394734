from django.urls import path, include

urlpatterns = [
    path("", include("apps.catalog.urls")),
    path("cart/", include("apps.carts.urls")),
    path("ui/", include("apps.ui.urls")),
]
