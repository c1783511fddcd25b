"""A restaurant where waiters take orders and chefs prepare them."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

Sleeper = Callable[[float], None]


class RestaurantError(RuntimeError):
    """An order could not be taken or served."""


@dataclass(eq=False)
class MenuItem:
    """A dish with its cost and preparation time in seconds."""

    name: str
    cost: int
    prep_time: int
    available: bool = True


@dataclass(eq=False)
class Order:
    """What was ordered, its price and time, and which chef cooks it."""

    item_number: int = -1
    name: str = ""
    total_price: int = 0
    total_prep_time: int = 0
    chef_id: int = -1

    def fill(self, item: MenuItem, chef: "Chef") -> None:
        """Record ``item`` as the dish and ``chef`` as its cook."""
        self.name = item.name
        self.total_price = item.cost
        self.total_prep_time = item.prep_time
        self.chef_id = chef.chef_id


@dataclass(eq=False)
class Chef:
    """A cook who is busy for the preparation time of each order."""

    chef_id: int
    available: bool = True
    prep_time: int = 0
    sleep: Sleeper = field(default=time.sleep, repr=False)

    def prepare(self, order: Order) -> None:
        """Cook ``order``, taking its preparation time, then become free."""
        self.prep_time = order.total_prep_time
        self.sleep(self.prep_time)
        self.available = True


class Waiter:
    """Serves one customer at a time, relaying orders to a free chef."""

    def __init__(self, customer: Optional["Customer"] = None) -> None:
        self.customer = customer
        self.available = customer is None
        self.restaurant: Optional[Restaurant] = None
        self.order: Optional[Order] = None
        self._lock = threading.Lock()

    def show_menu(self, restaurant: "Restaurant") -> list[str]:
        """Attach to ``restaurant`` and return its menu lines."""
        self.restaurant = restaurant
        return restaurant.menu_lines()

    def take_order(self, item_number: int, order: Optional[Order]) -> int:
        """Have a chef cook dish ``item_number`` into ``order``, deliver it and
        return its price."""
        with self._lock:
            if self.restaurant is None:
                raise RestaurantError("waiter is not assigned to any restaurant")
            chef = self.restaurant.available_chef()
            if chef is None:
                raise RestaurantError("no chef is available")
            item = self.restaurant.menu_item(item_number)
            if item is None or order is None:
                chef.available = True
                if order is None:
                    self.available = True
                    raise RestaurantError("there is no order to take")
                raise RestaurantError(f"no menu item {item_number}")
            order.item_number = item_number
            order.fill(item, chef)
            self.order = order
            chef.prepare(order)
            return self.deliver(order)

    def deliver(self, order: Order) -> int:
        """Hand over ``order``, become free again, and return its price."""
        self.available = True
        return order.total_price


class Restaurant:
    """Holds the menu, the waiters and the chefs."""

    def __init__(self, sleep: Sleeper = time.sleep) -> None:
        self.dishes: list[MenuItem] = []
        self.waiters: list[Waiter] = []
        self.chefs: list[Chef] = []
        self._sleep = sleep

    def menu_lines(self) -> list[str]:
        """``number----name cost prep_time`` for each dish on offer."""
        return [
            f"{number}----{dish.name} {dish.cost} {dish.prep_time}"
            for number, dish in enumerate(self.dishes)
            if dish.available
        ]

    def available_chef(self) -> Optional[Chef]:
        """Claim the first free chef, or None when all are busy."""
        for chef in self.chefs:
            if chef.available:
                chef.available = False
                return chef
        return None

    def add_menu(self, name: str, cost: int, prep_time: int) -> MenuItem:
        """Add a dish to the end of the menu."""
        item = MenuItem(name, cost, prep_time)
        self.dishes.append(item)
        return item

    def hire_waiters(self, count: int) -> None:
        """Add ``count`` free waiters."""
        self.waiters.extend(Waiter() for _ in range(count))

    def hire_chefs(self, count: int) -> None:
        """Add ``count`` free chefs with consecutive ids."""
        first = len(self.chefs)
        self.chefs.extend(
            Chef(first + i, sleep=self._sleep) for i in range(count)
        )

    def menu_item(self, number: int) -> Optional[MenuItem]:
        """The dish numbered ``number``, or None."""
        if 0 <= number < len(self.dishes):
            return self.dishes[number]
        return None

    def assign_waiter(self, customer: "Customer") -> Optional[Waiter]:
        """Give ``customer`` the first free waiter, or None when all are busy."""
        for waiter in self.waiters:
            if waiter.available:
                waiter.available = False
                waiter.customer = customer
                waiter.restaurant = self
                return waiter
        return None


@dataclass(eq=False)
class Customer:
    """A guest who orders one dish by its menu number."""

    customer_id: int
    item_number: int = 1
    order: Order = field(default_factory=Order)

    def order_dish(self, waiter: Waiter) -> int:
        """Order the chosen dish through ``waiter``; return its price."""
        return waiter.take_order(self.item_number, self.order)