from pipeconf.core.mutator.keys import candidate_keys, find_free_key


def test_candidate_sequence_starts_without_suffix():
    assert list(candidate_keys("example", 4)) == ["example", "example1", "example2", "example3"]


def test_default_bound_yields_ten_thousand_candidates():
    keys = list(candidate_keys("example", 10000))
    assert len(keys) == 10000
    assert keys[-1] == "example9999"
    assert len(set(keys)) == 10000


def test_find_free_key_picks_first_absent_candidate():
    assert find_free_key({}, prefix="example", limit=10000) == "example"
    assert find_free_key({"example": 1, "example2": 1}, prefix="example", limit=10000) == "example1"


def test_find_free_key_returns_none_when_exhausted():
    taken = set(candidate_keys("k", 3))
    assert find_free_key(taken, prefix="k", limit=3) is None


def test_unrelated_keys_do_not_count():
    assert find_free_key({"cache_a", "examples"}, prefix="example", limit=1) == "example"
