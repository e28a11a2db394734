from dataclasses import dataclass

from .context import UiContext

BRAND_TITLE = "Teslo |"
BRAND_SUBTITLE = "Shop"
HOME_HREF = "/"
MENU_LABEL = "Menu"


@dataclass
class NavbarDTO:
    brand_title: str
    brand_subtitle: str
    home_href: str
    menu_label: str
    is_side_menu_open: bool


def build_admin_navbar(ui: UiContext) -> NavbarDTO:
    return NavbarDTO(
        brand_title=BRAND_TITLE,
        brand_subtitle=BRAND_SUBTITLE,
        home_href=HOME_HREF,
        menu_label=MENU_LABEL,
        is_side_menu_open=ui.is_side_menu_open,
    )
