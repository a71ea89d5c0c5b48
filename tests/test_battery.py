import pytest

from bsn.battery import Battery


@pytest.fixture
def resource():
    battery = Battery()
    battery.id = "Battery"
    battery.capacity = 10.0
    battery.current_level = 10.0
    battery.unit = 0.1
    return battery


def test_basic_construct():
    battery = Battery()
    assert battery.capacity == 100
    assert battery.current_level == 100
    assert battery.unit == 1


def test_construct(resource):
    assert resource.id == "Battery"
    assert resource.capacity == 10
    assert resource.current_level == 10
    assert resource.unit == 0.1


def test_invalid_argument_construct():
    with pytest.raises(ValueError):
        Battery("Battery", 10, 15, 0.1)


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Battery("Battery", 0, 0, 0)


def test_invalid_unit():
    with pytest.raises(ValueError):
        Battery("Battery", 10, 5, 11)


def test_resource_consume(resource):
    resource.consume(5)
    assert resource.current_level == 9.5


def test_resource_generation(resource):
    resource.consume(5)
    resource.generate(2)
    assert resource.current_level == 9.7


def test_consume_clamps_at_zero(resource):
    resource.consume(1000)
    assert resource.current_level == 0


def test_generate_clamps_at_capacity(resource):
    resource.generate(1000)
    assert resource.current_level == resource.capacity