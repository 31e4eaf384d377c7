from sudoku_csp.domain import Domain
from sudoku_csp.variable import Variable


def test_open_variable_starts_unassigned():
    var = Variable([1, 2, 3, 4], 0, 1, 0, "v1")
    assert var.assigned is False
    assert var.changeable is True
    assert var.modified is False
    assert var.assignment == 0
    assert var.size == 4


def test_given_variable_is_fixed():
    var = Variable([7], 2, 3, 1, "v2")
    assert var.assigned is True
    assert var.changeable is False
    assert var.modified is True
    assert var.assignment == 7


def test_position_is_kept():
    var = Variable([1, 2], 4, 5, 6, "v3")
    assert (var.row, var.col, var.block) == (4, 5, 6)


def test_default_names_are_distinct():
    first = Variable([1, 2], 0, 0, 0)
    second = Variable([1, 2], 0, 1, 0)
    assert first.name.startswith("v")
    assert first.name != second.name


def test_assign_value():
    var = Variable([1, 2, 3], 0, 0, 0, "v1")
    var.assign_value(2)
    assert var.assigned is True
    assert var.assignment == 2
    assert list(var.domain) == [2]
    assert var.modified is True


def test_assign_value_on_given_is_ignored():
    var = Variable([5], 0, 0, 0, "v1")
    var.assign_value(3)
    assert var.assignment == 5


def test_set_domain():
    var = Variable([1, 2, 3], 0, 0, 0, "v1")
    var.set_domain(Domain([2, 3]))
    assert list(var.domain) == [2, 3]
    assert var.modified is True


def test_set_domain_on_given_is_ignored():
    var = Variable([5], 0, 0, 0, "v1")
    var.set_domain(Domain([1, 2]))
    assert list(var.domain) == [5]


def test_remove_value():
    var = Variable([1, 2, 3], 0, 0, 0, "v1")
    var.remove_value(2)
    assert list(var.domain) == [1, 3]
    assert var.size == 2
    assert var.modified is True


def test_remove_missing_value_keeps_unmodified():
    var = Variable([1, 2, 3], 0, 0, 0, "v1")
    var.remove_value(9)
    assert var.size == 3
    assert var.modified is False


def test_remove_value_on_given_is_ignored():
    var = Variable([5], 0, 0, 0, "v1")
    var.remove_value(5)
    assert list(var.domain) == [5]


def test_unassign_makes_assignment_zero():
    var = Variable([1, 2, 3], 0, 0, 0, "v1")
    var.assign_value(3)
    var.unassign()
    assert var.assigned is False
    assert var.assignment == 0


def test_set_modified_reaches_domain():
    var = Variable([1, 2, 3], 0, 0, 0, "v1")
    var.remove_value(1)
    var.set_modified(False)
    assert var.modified is False
    assert var.domain.modified is False


def test_str_format():
    var = Variable([1, 2], 0, 0, 0, "v9")
    assert str(var) == " Name: v9\tdomain: {1,2}"