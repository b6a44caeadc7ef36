from collectionkit.util.reflexive import ReflexiveMap


def test_both_directions():
    m = ReflexiveMap()
    m["a"] = 1
    m["b"] = 2
    assert m.value_for("a") == 1
    assert m.key_for(2) == "b"
    assert m.key_for(3) is None
    assert list(m.items()) == [("a", 1), ("b", 2)]


def test_overwrite_drops_stale_reverse_entry():
    m = ReflexiveMap({"a": 1})
    m["a"] = 2
    assert m.key_for(1) is None
    assert m.key_for(2) == "a"


def test_value_moves_to_new_key():
    m = ReflexiveMap({"a": 1})
    m["b"] = 1
    assert "a" not in m
    assert m.key_for(1) == "b"


def test_reverse_is_live():
    m = ReflexiveMap({"a": 1})
    r = m.reverse()
    assert r[1] == "a"
    r[2] = "b"
    assert m["b"] == 2
    del m["a"]
    assert 1 not in r
    assert r.reverse() is m


def test_clear_and_len():
    m = ReflexiveMap({"a": 1, "b": 2})
    assert len(m) == 2
    m.clear()
    assert len(m) == 0
    assert len(m.reverse()) == 0
