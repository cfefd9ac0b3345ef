import suite
from dgen import from_schema
from pinqa import A, P, from_range, empty, Group, batch_iterator, group_iterator

# --- setup ---
test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# --- test data & schemas ---
sales_schema = {
    'year': {'_qen_provider': 'choice', 'from': [2022, 2023]},
    'region': {'_qen_provider': 'choice', 'from': ['na', 'eu']},
    'product_id': ('pyint', {'min_value': 1, 'max_value': 3}),
    'sales': ('pyint', {'min_value': 100, 'max_value': 1000})
}

foo_bar = [
    {'foo': '1', 'bar': 'a'},
    {'foo': '1', 'bar': 'b'},
    {'foo': '2', 'bar': 'c'},
    {'foo': '3', 'bar': 'd'},
]


async def objects_sorted_by_key():
    for item in foo_bar:
        yield item


def flatten(chunks):
    return [item for chunk in chunks for item in chunk]


# --- batch ---

@test("batch splits a sequence into fixed size batches")
async def test_batch_core():
    result = await P([1, 2, 3, 4, 5]).batch(2).collect()
    assert_that(result == [[1, 2], [3, 4], [5]], f"expected [[1, 2], [3, 4], [5]], got {result}")


@test("batch_iterator works on a raw async generator")
async def test_batch_iterator():
    results = [batch async for batch in batch_iterator(A(x for x in [1, 2, 3, 4, 5]), 2)]
    assert_that(results == [[1, 2], [3, 4], [5]], f"got {results}")


@test("batch handles edge cases")
async def test_batch_edges():
    assert_that(await empty().batch(2).collect() == [], "batch on empty should produce zero batches")
    assert_that(await P([1, 2, 3, 4]).batch(2).collect() == [[1, 2], [3, 4]], "exact multiple has no short batch")
    assert_that(await P([1, 2]).batch(5).collect() == [[1, 2]], "size larger than source gives one batch")
    assert_that(await P([1, 2, 3]).batch(1).collect() == [[1], [2], [3]], "size one wraps every item")


@test("batch rejects non positive sizes immediately")
async def test_batch_invalid_size():
    await assert_raises(ValueError, lambda: from_range(0, 3).batch(0))
    await assert_raises(ValueError, lambda: from_range(0, 3).batch(-2))
    await assert_raises(ValueError, lambda: batch_iterator(empty(), 0))


@test("batch re-concatenates to the source and only the last batch is short")
async def test_batch_properties():
    provider = from_schema(sales_schema, seed=3)
    for size in (1, 3, 7, 50):
        batches = await provider.take(23).batch(size).collect()
        assert_that(flatten(batches) == provider.list(23), f"size {size}: concatenation should equal source")
        assert_that(all(len(b) == size for b in batches[:-1]), f"size {size}: inner batches should be full")
        assert_that(1 <= len(batches[-1]) <= size, f"size {size}: last batch length out of range")


@test("batch assembles each batch only when requested")
async def test_batch_lazy():
    pulled = []

    async def source():
        for x in range(10):
            pulled.append(x)
            yield x

    iterator = A(source()).batch(3).iterable()
    first = await anext(iterator)
    assert_that(first == [0, 1, 2], f"first batch was {first}")
    assert_that(pulled == [0, 1, 2], "only the first batch worth of items should have been pulled")


@test("errors discard the batch being filled")
async def test_batch_error():
    async def failing():
        yield 1
        yield 2
        yield 3
        raise RuntimeError("boom")

    delivered = []

    async def consume():
        async for batch in A(failing()).batch(2).iterable():
            delivered.append(batch)

    await assert_raises(RuntimeError, consume)
    assert_that(delivered == [[1, 2]], f"the partial batch should not be delivered, got {delivered}")


# --- group ---

@test("group groups sorted objects by a field name")
async def test_group_by_field():
    result = await A(objects_sorted_by_key()).group('foo').collect()
    assert_that(result == [
        Group('1', [{'foo': '1', 'bar': 'a'}, {'foo': '1', 'bar': 'b'}]),
        Group('2', [{'foo': '2', 'bar': 'c'}]),
        Group('3', [{'foo': '3', 'bar': 'd'}]),
    ], f"unexpected groups {result}")


@test("group_iterator yields groups as they are iterated")
async def test_group_iterator():
    results = [group async for group in group_iterator(objects_sorted_by_key(), lambda x: x['foo'])]
    assert_that([g.key for g in results] == ['1', '2', '3'], "keys should come out in first seen order")
    assert_that([len(g) for g in results] == [2, 1, 1], "group sizes should be 2, 1, 1")


@test("group reads fields from plain objects too")
async def test_group_attribute_key():
    class Row:
        def __init__(self, kind, value):
            self.kind, self.value = kind, value

    rows = [Row('x', 1), Row('x', 2), Row('y', 3)]
    result = await P(rows).group('kind').map(lambda g: (g.key, [r.value for r in g.group])).collect()
    assert_that(result == [('x', [1, 2]), ('y', [3])], f"got {result}")


@test("group handles edge cases")
async def test_group_edges():
    assert_that(await empty().group('foo').collect() == [], "group on empty should produce zero groups")

    all_same = await P([1, 1, 1]).group(lambda x: 'same').collect()
    assert_that(all_same == [Group('same', [1, 1, 1])], "one key should produce one group")

    all_diff = await from_range(0, 3).group(lambda x: x).collect()
    assert_that(all_diff == [Group(0, [0]), Group(1, [1]), Group(2, [2])], "distinct keys give singleton groups")


@test("group does not merge keys that reappear later")
async def test_group_non_contiguous():
    result = await P([1, 3, 5, 2, 4, 7]).group(lambda x: x % 2).collect()
    assert_that([g.key for g in result] == [1, 0, 1], "a returning key should open a new group")
    assert_that([g.group for g in result] == [[1, 3, 5], [2, 4], [7]], f"got {result}")


@test("group uses value equality for keys")
async def test_group_value_equality():
    data = [{'k': (1, 'a')}, {'k': (1, 'a')}, {'k': (2, 'b')}]
    result = await P(data).group(lambda d: (d['k'][0], d['k'][1])).collect()
    assert_that(len(result) == 2, "equal but distinct key objects belong to one group")


@test("group preserves the source and separates keys on generated data")
async def test_group_properties():
    provider = from_schema(sales_schema, seed=11)
    key = lambda s: (s['year'], s['region'])
    expected = sorted(provider.list(40), key=key)

    groups = await P(expected).group(key).collect()
    assert_that(flatten(g.group for g in groups) == expected, "concatenated members should equal source")
    assert_that(all(key(m) == g.key for g in groups for m in g.group), "members should share their group key")
    assert_that(all(a.key != b.key for a, b in zip(groups, groups[1:])), "consecutive groups should differ")


@test("group errors from the key selector propagate")
async def test_group_key_error():
    await assert_raises(KeyError, P([{'foo': 1}, {}]).group('foo').collect)


@test("errors discard the group being filled")
async def test_group_error():
    async def failing():
        yield {'k': 1}
        yield {'k': 1}
        yield {'k': 2}
        raise RuntimeError("boom")

    delivered = []

    async def consume():
        async for group in A(failing()).group('k').iterable():
            delivered.append(group)

    await assert_raises(RuntimeError, consume)
    assert_that(delivered == [Group(1, [{'k': 1}, {'k': 1}])],
                f"the open group should not be delivered, got {delivered}")


@test("group repr and equality")
def test_group_type():
    g = Group('k', [1, 2])
    assert_that(repr(g) == "Group(key='k', group=[1, 2])", f"unexpected repr {g!r}")
    assert_that(g == Group('k', [1, 2]), "groups with same key and members should be equal")
    assert_that(g != Group('k', [1]), "different members should not be equal")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="pinqa grouping test")
