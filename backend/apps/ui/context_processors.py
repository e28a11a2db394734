from .context import UiContext


def ui(request):
    session = getattr(request, "session", None)
    if session is None:
        return {}
    return {"ui": UiContext(session)}
