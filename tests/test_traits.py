import pytest

from drillrunner.drills.traits import (
    Licensed,
    OtherSoftware,
    SomeSoftware,
    append_bar,
    compare_license_types,
)


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"


def test_append_bar_rejects_other_types():
    with pytest.raises(TypeError):
        append_bar(42)


def test_is_licensing_info_the_same():
    licensing_info = "Some information"
    assert SomeSoftware(version_number=1).licensing_info() == licensing_info
    assert OtherSoftware(version_number="v2.0.0").licensing_info() == licensing_info


def test_compare_license_information():
    assert compare_license_types(SomeSoftware(1), OtherSoftware("v2.0.0")) is True


def test_compare_license_information_backwards():
    assert compare_license_types(OtherSoftware("v2.0.0"), SomeSoftware(1)) is True


def test_compare_different_license_information():
    class Custom(Licensed):
        def licensing_info(self) -> str:
            return "different"

    assert compare_license_types(SomeSoftware(1), Custom()) is False