from django.urls import path
from .views import CartView, CartItemsView, CartAddressView, CartOrderView

urlpatterns = [
    path('', CartView.as_view(), name='cart-detail'),
    path('items/', CartItemsView.as_view(), name='cart-items'),
    path('address/', CartAddressView.as_view(), name='cart-address'),
    path('orders/', CartOrderView.as_view(), name='cart-orders'),
]
