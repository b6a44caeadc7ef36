import pytest

from collectionkit.core.model import Configuration
from collectionkit.core.sizes import power_set_size, product_size


def test_configuration_hash_and_eq():
    c1 = Configuration.bind(["a", "b"], [1, 2])
    c2 = Configuration(("a", "b"), (1, 2))
    assert c1 == c2
    assert hash(c1) == hash(c2)
    assert c1.value("b") == 2
    assert dict(c1) == {"a": 1, "b": 2}


def test_configuration_unknown_object():
    with pytest.raises(KeyError):
        Configuration.bind(["a"], [1]).value("z")


def test_configuration_length_mismatch():
    with pytest.raises(ValueError):
        Configuration.bind(["a", "b"], [1])


def test_sizes():
    assert product_size([(1, 2), ("a", "b", "c")]) == 6
    assert product_size([]) == 1
    assert product_size([(1,), ()]) == 0
    assert power_set_size(3) == 7
    assert power_set_size(3, include_empty=True) == 8
    assert power_set_size(0) == 0
    with pytest.raises(ValueError):
        power_set_size(-1)
