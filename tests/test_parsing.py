import pytest

from pushswap.parsing import (
    InputError,
    is_sorted,
    is_valid_int,
    parse_argument,
    parse_arguments,
)


@pytest.mark.parametrize(
    "token", ["0", "42", "-42", "+42", "007", "2147483647", "-2147483648"]
)
def test_valid_ints(token):
    assert is_valid_int(token) is True


@pytest.mark.parametrize(
    "token",
    ["", "-", "+", "4a", "--1", "+-1", "1-", "1.5", " 1", "\t1",
     "2147483648", "-2147483649", "١٢"],
)
def test_invalid_ints(token):
    assert is_valid_int(token) is False


def test_parse_argument_splits_on_spaces():
    assert parse_argument("3  -1 +2 ", []) == [3, -1, 2]


def test_parse_argument_empty_gives_nothing():
    assert parse_argument("", []) == []
    assert parse_argument("    ", []) == []


def test_parse_argument_does_not_modify_existing():
    existing = [10, 20]
    result = parse_argument("30", existing)
    assert result == [30]
    assert existing == [10, 20]


def test_parse_argument_rejects_garbage():
    with pytest.raises(InputError):
        parse_argument("1 two 3", [])


def test_parse_argument_rejects_tab_separator():
    with pytest.raises(InputError):
        parse_argument("1\t2", [])


def test_parse_argument_rejects_duplicate_within_argument():
    with pytest.raises(InputError):
        parse_argument("5 6 5", [])


def test_parse_argument_rejects_duplicate_of_existing():
    with pytest.raises(InputError):
        parse_argument("8", [1, 8])


def test_leading_zeros_count_as_duplicates():
    with pytest.raises(InputError):
        parse_arguments(["7", "007"])


def test_parse_arguments_concatenates_in_order():
    assert parse_arguments(["3 1", "2", "-4 9"]) == [3, 1, 2, -4, 9]


def test_parse_arguments_rejects_duplicate_across_arguments():
    with pytest.raises(InputError):
        parse_arguments(["1 2", "3 2"])


def test_parse_arguments_rejects_out_of_range():
    with pytest.raises(InputError):
        parse_arguments(["2147483648"])


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["x"])


@pytest.mark.parametrize(
    "values", [[], [5], [1, 2, 3], [-3, 0, 7, 100], [2, 2, 3]]
)
def test_is_sorted_true(values):
    assert is_sorted(values) is True


@pytest.mark.parametrize("values", [[2, 1], [1, 3, 2], [5, 4, 3, 2, 1]])
def test_is_sorted_false(values):
    assert is_sorted(values) is False