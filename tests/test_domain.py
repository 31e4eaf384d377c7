import pytest

from sudoku_csp.domain import Domain


def test_values_keep_order_and_drop_duplicates():
    domain = Domain([3, 1, 3, 2])
    assert list(domain) == [3, 1, 2]
    assert len(domain) == 3


def test_contains():
    domain = Domain([1, 2, 3])
    assert 2 in domain
    assert 7 not in domain


def test_empty_domain():
    domain = Domain()
    assert domain.is_empty()
    assert len(domain) == 0
    assert str(domain) == "{}"


def test_str_format():
    assert str(Domain([1, 2, 3])) == "{1,2,3}"


def test_add_ignores_existing_value():
    domain = Domain([1, 2])
    domain.add(2)
    domain.add(5)
    assert list(domain) == [1, 2, 5]


def test_remove_present_value_marks_modified():
    domain = Domain([1, 2, 3])
    assert domain.modified is False
    assert domain.remove(2) is True
    assert list(domain) == [1, 3]
    assert domain.modified is True


def test_remove_missing_value_leaves_domain_unchanged():
    domain = Domain([1, 2, 3])
    assert domain.remove(9) is False
    assert list(domain) == [1, 2, 3]
    assert domain.modified is False


def test_remove_last_value_leaves_empty():
    domain = Domain([4])
    domain.remove(4)
    assert domain.is_empty()


def test_copy_is_independent():
    original = Domain([1, 2, 3])
    original.remove(1)
    duplicate = original.copy()
    assert list(duplicate) == list(original)
    assert duplicate.modified is False
    duplicate.remove(2)
    assert 2 in original
    assert 2 not in duplicate


@pytest.mark.parametrize("values", [[1], [1, 2], [5, 4, 3, 2, 1]])
def test_iteration_matches_length(values):
    domain = Domain(values)
    assert len(list(domain)) == len(domain) == len(values)