import suite
from dgen import from_schema
from seqy import S, empty

test = suite.test
assert_that = suite.assert_that

# --- test data schemas ---
log_schema = {
    'line': ('pyint', {'min_value': 1, 'max_value': 5000}),
    'level': {'_qen_provider': 'choice', 'from': ['debug', 'info', 'warn', 'error']},
    'message': 'sentence'
}

letters = S(['a', 'b', 'c', 'd', 'e'])


# --- skip / take ---

@test("skip drops the first n elements")
def test_skip_basic():
    assert_that(letters.skip(2).to.list() == ['c', 'd', 'e'], "should skip a and b")


@test("skip boundaries")
def test_skip_boundaries():
    assert_that(letters.skip(0) == letters, "skip(0) is the whole sequence")
    assert_that(letters.skip(-3) == letters, "negative skip is the whole sequence")
    assert_that(letters.skip(5).to.list() == [], "skip(len) is empty")
    assert_that(letters.skip(50).to.list() == [], "oversized skip is empty")
    assert_that(letters.skip(0) is not letters, "a new sequence is returned")


@test("take keeps the first n elements")
def test_take_basic():
    assert_that(letters.take(3).to.list() == ['a', 'b', 'c'], "should take a, b, c")


@test("take boundaries")
def test_take_boundaries():
    assert_that(letters.take(0).to.list() == [], "take(0) is empty")
    assert_that(letters.take(-1).to.list() == [], "negative take is empty")
    assert_that(letters.take(5) == letters, "take(len) is the whole sequence")
    assert_that(letters.take(99) == letters, "oversized take is the whole sequence")


@test("take and skip recombine to the original")
def test_take_skip_recombine():
    for n in range(len(letters) + 1):
        recombined = letters.take(n).to.list() + letters.skip(n).to.list()
        assert_that(recombined == letters.to.list(), f"take/skip split at {n} should recombine")


@test("paging through generated records")
def test_paging_records():
    logs = from_schema(log_schema, seed=7).take(23)
    page_size = 5
    pages = [logs.skip(page * page_size).take(page_size) for page in range(5)]
    assert_that([len(p) for p in pages] == [5, 5, 5, 5, 3], "last page should be partial")
    flattened = [entry for page in pages for entry in page]
    assert_that(flattened == logs.to.list(), "pages should cover every record exactly once")


@test("skip and take on empty sequences")
def test_paging_empty():
    assert_that(empty().skip(1).to.list() == [], "skip on empty")
    assert_that(empty().take(1).to.list() == [], "take on empty")
    assert_that(empty().skip(0).to.list() == [], "skip(0) on empty")


# --- last ---

@test("last returns the final n elements")
def test_last_basic():
    assert_that(letters.last(2).to.list() == ['d', 'e'], "should return d, e")
    assert_that(letters.last(5) == letters, "last(len) is everything")


@test("last clamps oversized and non-positive counts")
def test_last_boundaries():
    assert_that(letters.last(8) == letters, "oversized last is the whole sequence")
    assert_that(letters.last(0).to.list() == [], "last(0) is empty")
    assert_that(letters.last(-2).to.list() == [], "negative last is empty")
    assert_that(empty().last(3).to.list() == [], "last on empty is empty")


# --- skip_while / take_while ---

@test("skip_while skips the matching prefix")
def test_skip_while_basic():
    result = S([1, 2, 5, 1, 7]).skip_while(lambda x: x < 3).to.list()
    assert_that(result == [5, 1, 7], "should resume at 5 and keep later small values")


@test("take_while takes the matching prefix")
def test_take_while_basic():
    result = S([1, 2, 5, 1, 7]).take_while(lambda x: x < 3).to.list()
    assert_that(result == [1, 2], "should stop before 5")


@test("skip_while and take_while when every element matches")
def test_while_all_match():
    assert_that(letters.skip_while(lambda x: True).to.list() == [], "skip_while over all is empty")
    assert_that(letters.take_while(lambda x: True) == letters, "take_while over all is everything")


@test("skip_while and take_while when the first element fails")
def test_while_first_fails():
    assert_that(letters.skip_while(lambda x: False) == letters, "nothing skipped")
    assert_that(letters.take_while(lambda x: False).to.list() == [], "nothing taken")


@test("take_while and skip_while partition the sequence")
def test_while_partition():
    data = S([2, 4, 6, 7, 8, 10])
    is_even = lambda x: x % 2 == 0
    combined = data.take_while(is_even).to.list() + data.skip_while(is_even).to.list()
    assert_that(combined == data.to.list(), "prefix and remainder should recombine")


@test("while operations stop calling the predicate at the first failure")
def test_while_short_circuit():
    calls = []
    def predicate(x):
        calls.append(x)
        return x < 2
    S([1, 2, 3, 4]).take_while(predicate)
    assert_that(calls == [1, 2], "predicate should not see elements after the first failure")


if __name__ == "__main__":
    suite.main(title="seqy paging test suite")
