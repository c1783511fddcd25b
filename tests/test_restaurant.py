import pytest

from dsakit.restaurant import (
    Chef,
    Customer,
    Order,
    Restaurant,
    RestaurantError,
    Waiter,
)


def _restaurant(waiters=1, chefs=1):
    slept = []
    restaurant = Restaurant(sleep=slept.append)
    restaurant.add_menu("Rice", 100, 30)
    restaurant.add_menu("Juice", 50, 10)
    restaurant.hire_waiters(waiters)
    restaurant.hire_chefs(chefs)
    return restaurant, slept


def test_menu_lines():
    restaurant, _ = _restaurant()
    assert Waiter().show_menu(restaurant) == ["0----Rice 100 30", "1----Juice 50 10"]


def test_unavailable_dish_is_hidden():
    restaurant, _ = _restaurant()
    restaurant.dishes[0].available = False
    assert [line.split("----")[0] for line in restaurant.menu_lines()] == ["1"]


def test_customer_order_is_cooked_and_delivered():
    restaurant, slept = _restaurant()
    customer = Customer(1)
    waiter = restaurant.assign_waiter(customer)
    price = customer.order_dish(waiter)
    assert price == restaurant.dishes[1].cost
    assert customer.order.name == "Juice"
    assert slept == [restaurant.dishes[1].prep_time]
    assert waiter.available and restaurant.chefs[0].available


def test_only_one_waiter_to_assign():
    restaurant, _ = _restaurant()
    first = restaurant.assign_waiter(Customer(1))
    assert first.customer.customer_id == 1
    assert restaurant.assign_waiter(Customer(2)) is None


def test_no_chef_raises():
    restaurant, _ = _restaurant(chefs=0)
    waiter = restaurant.assign_waiter(Customer(1))
    with pytest.raises(RestaurantError):
        waiter.take_order(0, Order())


def test_waiter_without_restaurant_raises():
    with pytest.raises(RestaurantError):
        Waiter().take_order(0, Order())


def test_missing_menu_item_raises_and_frees_chef():
    restaurant, _ = _restaurant()
    waiter = restaurant.assign_waiter(Customer(1))
    with pytest.raises(RestaurantError):
        waiter.take_order(7, Order())
    assert restaurant.chefs[0].available


def test_order_fill_records_chef():
    restaurant, _ = _restaurant(chefs=2)
    order = Order()
    order.fill(restaurant.dishes[0], restaurant.chefs[1])
    assert (order.name, order.total_price, order.chef_id) == ("Rice", 100, 1)


def test_chef_ids_continue_across_hires():
    restaurant, _ = _restaurant(chefs=2)
    restaurant.hire_chefs(1)
    assert [chef.chef_id for chef in restaurant.chefs] == [0, 1, 2]


def test_available_chef_claims_chef():
    restaurant, _ = _restaurant()
    chef = restaurant.available_chef()
    assert chef.available is False
    assert restaurant.available_chef() is None


def test_chef_prepare_waits_prep_time():
    waits = []
    chef = Chef(0, available=False, sleep=waits.append)
    order = Order(total_prep_time=4)
    chef.prepare(order)
    assert waits == [4] and chef.available and chef.prep_time == 4