from rest_framework import serializers


class NavbarSerializer(serializers.Serializer):
    brandTitle = serializers.CharField(source="brand_title")
    brandSubtitle = serializers.CharField(source="brand_subtitle")
    homeHref = serializers.CharField(source="home_href")
    menuLabel = serializers.CharField(source="menu_label")
    isSideMenuOpen = serializers.BooleanField(source="is_side_menu_open")


class SideMenuStateSerializer(serializers.Serializer):
    isMenuOpen = serializers.BooleanField()
