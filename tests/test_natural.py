from collectionkit.util.natural import ChunkKind, chunks, natural_compare, natural_sorted


def test_letters():
    assert natural_compare("a1a", "a1a") == 0
    assert natural_compare("a1a", "b1a") < 0
    assert natural_compare("b1a", "a1a") > 0
    assert natural_compare("a1a", "a1b") < 0
    assert natural_compare("a1a", "a1aa") < 0


def test_numbers_compared_by_value():
    assert natural_compare("abc1def", "abc2def") < 0
    assert natural_compare("abc2def", "abc10def") < 0
    assert natural_compare("abc10def", "abc2def") > 0
    assert natural_compare("abc2def", "abc1E4def") < 0
    assert natural_compare("abc2def", "abc2.4def") < 0
    assert natural_compare("abc2.4def", "abc2.5def") < 0
    assert natural_compare("abc2.5def", "abc2.4E5def") < 0


def test_big_numbers():
    assert natural_compare(
        "abc123456789123456789123456788def", "abc123456789123456789123456789def"
    ) < 0
    assert natural_compare(
        "abc0.0000000000000000000000001def", "abc0.0000000000000000000000002def"
    ) < 0


def test_case_insensitive():
    assert natural_compare("a", "A") == 0
    assert natural_compare("aBc123dEf", "aBC123Def") == 0


def test_spaces_around_numbers_ignored():
    for other in ("abc 123def", "abc123 def", "abc 123 def"):
        assert natural_compare("abc123def", other) == 0
        assert natural_compare(other, "abc123def") == 0


def test_chunks_are_tagged():
    kinds = [chunk.kind for chunk in chunks("file 10.5 b")]
    assert kinds == [ChunkKind.TEXT, ChunkKind.NUMBER, ChunkKind.TEXT]


def test_sorting():
    assert natural_sorted(["file10", "File2", "file1"]) == ["file1", "File2", "file10"]
    assert natural_sorted([("b", 2), ("a", 10)], key=lambda item: item[0]) == [("a", 10), ("b", 2)]
