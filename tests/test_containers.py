import pytest

from drillrunner.drills.containers import (
    Cons,
    Nil,
    Wrapper,
    abs_all,
    create_empty_list,
    create_non_empty_list,
    maybe_icecream,
)


def test_check_icecream():
    assert maybe_icecream(9) == 5
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None


def test_raw_value():
    assert maybe_icecream(12) == 5


def test_negative_time_raises():
    with pytest.raises(ValueError):
        maybe_icecream(-1)


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty != create_empty_list()
    assert non_empty == Cons(1, Nil())


def test_reference_mutation_copies():
    borrowed = (-1, 0, 1)
    result = abs_all(borrowed)
    assert result is not borrowed
    assert list(result) == [1, 0, 1]
    assert borrowed == (-1, 0, 1)


def test_reference_no_mutation_keeps_original():
    borrowed = (0, 1, 2)
    assert abs_all(borrowed) is borrowed


def test_owned_no_mutation():
    owned = [0, 1, 2]
    result = abs_all(owned)
    assert result is owned
    assert result == [0, 1, 2]


def test_owned_mutation_in_place():
    owned = [-1, 0, 1]
    result = abs_all(owned)
    assert result is owned
    assert owned == [1, 0, 1]


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"