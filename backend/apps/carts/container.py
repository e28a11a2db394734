from .mirror import CookieMirror
from .store import CartStore


def build_cart_store(request) -> CartStore:
    """Hydrate a store for this request from its cookies."""
    return CartStore(CookieMirror.from_request(request))
