from django.urls import path
from .views import NavbarView, SideMenuToggleView

urlpatterns = [
    path('navbar/', NavbarView.as_view(), name='ui-navbar'),
    path('side-menu/toggle/', SideMenuToggleView.as_view(), name='ui-side-menu-toggle'),
]
