import dataclasses

import pytest

from drillrunner.drills.structs import Order, Package, Rectangle, create_order_template


def test_order_template_values():
    template = create_order_template()
    assert template == Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


def test_your_order():
    template = create_order_template()
    your_order = dataclasses.replace(template, name="Hacker in Rust", count=1)
    assert your_order.name == "Hacker in Rust"
    assert your_order.year == template.year
    assert your_order.made_by_phone == template.made_by_phone
    assert your_order.made_by_mobile == template.made_by_mobile
    assert your_order.made_by_email == template.made_by_email
    assert your_order.item_number == template.item_number
    assert your_order.count == 1


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 5)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international() is True


def test_create_local_package():
    assert Package("Canada", "Canada", 1200).is_international() is False


def test_calculate_transport_fees():
    cents_per_gram = 3
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000


def test_package_minimum_weight_accepted():
    assert Package("Spain", "Spain", 10).get_fees(1) == 10


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError):
        Rectangle(10, -10)


def test_zero_side_rejected():
    with pytest.raises(ValueError):
        Rectangle(0, 5)