from apps.common import get_logger

logger = get_logger(__name__).bind(component="ui", layer="context")

SIDE_MENU_SESSION_KEY = "ui.side_menu_open"


class UiContext:
    """Navigation shell state shared by every page of a visitor's session.

    Only the side-menu flag is tracked; it starts closed and lives as long as
    the Django session does.
    """

    def __init__(self, session):
        self.session = session

    @classmethod
    def from_request(cls, request) -> "UiContext":
        return cls(request.session)

    @property
    def is_side_menu_open(self) -> bool:
        return bool(self.session.get(SIDE_MENU_SESSION_KEY, False))

    def _set_side_menu(self, is_open: bool) -> bool:
        self.session[SIDE_MENU_SESSION_KEY] = is_open
        logger.debug("Side menu state changed", open=is_open)
        return is_open

    def toggle_side_menu(self) -> bool:
        return self._set_side_menu(not self.is_side_menu_open)

    def open_side_menu(self) -> bool:
        return self._set_side_menu(True)

    def close_side_menu(self) -> bool:
        return self._set_side_menu(False)
