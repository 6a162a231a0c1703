"""Cart storage"""

import threading
import weakref
from typing import Optional

from ..models.cart import Cart


class CartDatabase:
    """
    In-memory cart storage.

    Stored carts are treated as immutable snapshots: writers build a new
    Cart and hand it to save_cart, so readers never need the lock.
    Writers to the same cart ID serialize on lock(cart_id).
    """

    def __init__(self):
        self.carts: dict[str, Cart] = {}
        # Entries vanish once no writer holds or waits on the lock
        self._locks: weakref.WeakValueDictionary[str, threading.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._locks_guard = threading.Lock()

    def lock(self, cart_id: str) -> threading.Lock:
        """Get the write lock for a cart ID"""
        with self._locks_guard:
            lock = self._locks.get(cart_id)
            if lock is None:
                lock = self._locks[cart_id] = threading.Lock()
            return lock

    def get_cart(self, cart_id: str) -> Optional[Cart]:
        """Get a cart by ID"""
        return self.carts.get(cart_id)

    def save_cart(self, cart: Cart) -> Cart:
        """Insert or replace a cart"""
        self.carts[cart.id] = cart
        return cart

    def delete_cart(self, cart_id: str) -> bool:
        """Delete a cart"""
        if cart_id in self.carts:
            del self.carts[cart_id]
            return True
        return False

    def __len__(self) -> int:
        return len(self.carts)

    def active_locks(self) -> int:
        """Number of cart locks currently in use"""
        return len(self._locks)
