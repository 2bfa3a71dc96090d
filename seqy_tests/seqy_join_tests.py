import suite
from dgen import from_schema
from seqy import S, Sequence, empty

test = suite.test
assert_that = suite.assert_that

# --- test data schemas ---
customer_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 5}),
    'name': 'first_name',
}

order_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 10000}),
    'customer_id': ('pyint', {'min_value': 1, 'max_value': 8}),  # includes customers who don't exist
    'amount': ('pyint', {'min_value': 100, 'max_value': 1000})
}

# --- helper data ---
people_data = [
    {'id': 1, 'name': 'alice'},
    {'id': 2, 'name': 'bob'},
    {'id': 3, 'name': 'charlie'}
]

orders_data = [
    {'id': 101, 'customer_id': 1, 'amount': 250},
    {'id': 102, 'customer_id': 1, 'amount': 150},
    {'id': 103, 'customer_id': 2, 'amount': 500},
    {'id': 104, 'customer_id': 4, 'amount': 300}  # no matching person
]


# --- join ---

@test("join of plain keys")
def test_join_simple():
    result = S([1, 2]).join.join([1, 3], lambda x: x, lambda y: y, lambda a, b: a + b).to.list()
    assert_that(result == [2], "only key 1 matches")


@test("join pairs matching records outer-major")
def test_join_basic():
    result = S(people_data).join.join(
        orders_data,
        lambda p: p['id'],
        lambda o: o['customer_id'],
        lambda p, o: (p['name'], o['id'])
    ).to.list()
    assert_that(result == [('alice', 101), ('alice', 102), ('bob', 103)], "inner join in outer-major order")


@test("join emits every pair for duplicate keys")
def test_join_duplicates():
    result = S([(1, 'a'), (1, 'b')]).join.join(
        [(1, 'x'), (1, 'y')], lambda t: t[0], lambda t: t[0], lambda l, r: l[1] + r[1]).to.list()
    assert_that(result == ['ax', 'ay', 'bx', 'by'], "cartesian product within a key")


@test("join with unhashable keys")
def test_join_unhashable_keys():
    result = S([{'k': [1, 2]}]).join.join(
        [{'k': [1, 2], 'v': 'hit'}, {'k': [3], 'v': 'miss'}],
        lambda a: a['k'], lambda b: b['k'], lambda a, b: b['v']).to.list()
    assert_that(result == ['hit'], "keys only need equality")


@test("join with empty inputs")
def test_join_empty():
    assert_that(empty().join.join([1], lambda x: x, lambda y: y, lambda a, b: a).to.list() == [], "empty outer")
    assert_that(S([1]).join.join([], lambda x: x, lambda y: y, lambda a, b: a).to.list() == [], "empty inner")


@test("join on generated data only pairs equal keys")
def test_join_generated():
    customers = from_schema(customer_schema, seed=11).take(5)
    orders = from_schema(order_schema, seed=12).take(25)
    joined = customers.join.join(orders, lambda c: c['id'], lambda o: o['customer_id'], lambda c, o: (c, o))
    assert_that(joined.query.true_for_all(lambda pair: pair[0]['id'] == pair[1]['customer_id']), "keys must match")
    expected = sum(1 for c in customers for o in orders if c['id'] == o['customer_id'])
    assert_that(len(joined) == expected, "one result per matching pair")


# --- group_join ---

@test("group_join collects results under the shared key")
def test_group_join_basic():
    result = S(people_data).join.group_join(
        orders_data,
        lambda p: p['id'],
        lambda o: o['customer_id'],
        lambda p, o: o['amount']
    )
    assert_that(list(result.keys()) == [1, 2], "only matched keys, in first-matched order")
    assert_that(result[1] == [250, 150], "alice's amounts in inner order")
    assert_that(result[2] == [500], "bob's amount")
    assert_that(isinstance(result[1], Sequence), "groups are sequences")


@test("group_join matches join followed by grouping")
def test_group_join_equivalence():
    outer = S([1, 2, 2, 3])
    inner = [2, 3, 3, 4]
    grouped = outer.join.group_join(inner, lambda x: x, lambda y: y, lambda a, b: (a, b))
    flat = outer.join.join(inner, lambda x: x, lambda y: y, lambda a, b: (a, b))
    regrouped = flat.group.group_by(lambda pair: pair[0])
    assert_that(grouped == regrouped, "one-pass grouping equals join then group_by")


@test("group_join with no matches is empty")
def test_group_join_empty():
    assert_that(S([1]).join.group_join([2], lambda x: x, lambda y: y, lambda a, b: a) == {}, "no keys")


if __name__ == "__main__":
    suite.main(title="seqy join test suite")
