from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from apps.common import get_logger
from .context import UiContext
from .navbar import build_admin_navbar
from .serializers import NavbarSerializer, SideMenuStateSerializer

logger = get_logger(__name__).bind(component="ui", layer="view")


@extend_schema(tags=["UI"])
class NavbarView(APIView):
    log = logger.bind(view="NavbarView")

    @extend_schema(
        operation_id="ui_navbar",
        summary="Admin navbar",
        description="Brand, home link and menu button for the admin layout.",
        responses={200: NavbarSerializer},
    )
    def get(self, request):
        navbar = build_admin_navbar(UiContext.from_request(request))
        return Response(NavbarSerializer(navbar).data)


@extend_schema(tags=["UI"])
class SideMenuToggleView(APIView):
    log = logger.bind(view="SideMenuToggleView")

    @extend_schema(
        operation_id="ui_side_menu_toggle",
        summary="Toggle side menu",
        request=None,
        responses={200: SideMenuStateSerializer},
    )
    def post(self, request):
        is_open = UiContext.from_request(request).toggle_side_menu()
        self.log.debug("Side menu toggled", open=is_open)
        return Response(SideMenuStateSerializer({"isMenuOpen": is_open}).data)
