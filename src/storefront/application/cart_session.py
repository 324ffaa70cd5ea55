"""Loading and storing the cart that belongs to a session."""

from __future__ import annotations

from storefront.domain.model.cart import CartStore
from storefront.domain.repository.cart_repository import CartRepository


def load_cart(cart_repo: CartRepository, session_id: str) -> CartStore:
    """Restore the session's cart, or start an empty one."""
    return CartStore.restore(cart_repo.load(session_id) or [])


def store_cart(cart_repo: CartRepository, session_id: str, cart: CartStore) -> None:
    # An empty cart leaves nothing behind in session storage.
    if cart.is_empty:
        cart_repo.delete(session_id)
    else:
        cart_repo.save(session_id, cart.snapshot())
