from hypothesis import given, strategies as st

from sortedarray import SortedStringArray, compare_strings_reversed

words = st.text(alphabet="abcde", max_size=4)
word_lists = st.lists(words, max_size=40)


def adjacent_pairs(values):
    return zip(values, values[1:])


@given(word_lists)
def test_add_keeps_sortedness(values):
    a = SortedStringArray()
    for v in values:
        a.add(v)
        assert all(x <= y for x, y in adjacent_pairs(a.slice()))
    assert len(a) == len(values)


@given(word_lists)
def test_custom_comparator_keeps_sortedness(values):
    a = SortedStringArray(comparator=compare_strings_reversed)
    a.add(*values)
    assert all(x >= y for x, y in adjacent_pairs(a.slice()))


@given(word_lists)
def test_unique_never_holds_equal_neighbours(values):
    a = SortedStringArray().set_unique(True)
    for v in values:
        before = len(a)
        present = a.contains(v)
        a.add(v)
        assert len(a) == before + (0 if present else 1)
    assert all(x < y for x, y in adjacent_pairs(a.slice()))
    assert a.slice() == sorted(set(values))


@given(word_lists, words)
def test_search(values, probe):
    a = SortedStringArray.from_list(list(values))
    s = a.slice()
    for v in values:
        index, res = a.search(v)
        assert res == 0
        assert s[index] == v
    if probe not in values:
        assert a.search(probe)[1] != 0
        assert not a.contains(probe)


@given(st.lists(words, min_size=1, max_size=40), st.data())
def test_remove(values, data):
    a = SortedStringArray.from_list(list(values))
    index = data.draw(st.integers(min_value=0, max_value=len(values) - 1))
    expected = a.slice()
    removed = expected.pop(index)
    assert a.remove(index) == removed
    assert a.slice() == expected
    assert len(a) == len(values) - 1


@given(word_lists, word_lists)
def test_merge(left, right):
    a = SortedStringArray.from_list(list(left))
    b = SortedStringArray.from_list(list(right))
    a.merge(b)
    assert len(a) == len(left) + len(right)
    assert a.slice() == sorted(left + right)


@given(word_lists, st.integers(min_value=1, max_value=10))
def test_chunk_concatenates_back(values, size):
    a = SortedStringArray.from_list(list(values))
    chunks = a.chunk(size)
    assert [v for c in chunks for v in c] == a.slice()
    assert all(len(c) == size for c in chunks[:-1])
