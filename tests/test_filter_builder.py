"""Tests unitaires de la lecture des paramètres et de la construction des filtres."""

import pytest

from exceptions import InvalidParameter
from schemas import SortBy, SortOrder, UserRole
from services.filter_builder import (
    ContainsIgnoreCase,
    Equals,
    Predicate,
    build,
    parse_params,
)


def names(users, predicate):
    return sorted(u.name for u in users if predicate.matches(u))


def test_no_params_means_no_constraint(users):
    predicate, directive = build({})
    assert predicate == Predicate()
    assert predicate.to_query() == {}
    assert names(users, predicate) == ["Chris", "Jamie", "Pat", "Sam"]
    assert directive.key is None
    assert directive.order == SortOrder.asc


def test_age_filter(users):
    predicate, _ = build({"age": ["37"]})
    assert predicate.to_query() == {"$and": [{"age": 37}]}
    assert names(users, predicate) == ["Jamie", "Pat"]


@pytest.mark.parametrize("raw", ["0", "150"])
def test_age_bounds_accepted(raw):
    assert parse_params({"age": [raw]}).age == int(raw)


@pytest.mark.parametrize("raw", ["-1", "151", "abc", "3.5"])
def test_age_rejected_with_raw_value_in_message(raw):
    with pytest.raises(InvalidParameter) as exc_info:
        build({"age": [raw]})
    assert exc_info.value.field == "age"
    assert exc_info.value.raw_value == raw
    assert raw in str(exc_info.value)


def test_empty_age_rejected():
    with pytest.raises(InvalidParameter) as exc_info:
        build({"age": [""]})
    assert str(exc_info.value) == "Invalid value for 'age': '' (must be an integer)"


@pytest.mark.parametrize("raw", ["9" * 5000, "-" + "9" * 5000, "0" * 4999 + "1" + "0" * 20])
def test_very_long_age_is_out_of_range(raw):
    with pytest.raises(InvalidParameter) as exc_info:
        build({"age": [raw]})
    assert exc_info.value.field == "age"
    assert exc_info.value.raw_value == raw
    assert "must be between 0 and 150" in str(exc_info.value)


def test_long_zero_padded_age_accepted():
    assert parse_params({"age": ["0" * 5000 + "42"]}).age == 42


def test_company_filter_is_case_insensitive_substring(users):
    predicate, _ = build({"company": ["ohm"]})
    assert predicate.clauses == (ContainsIgnoreCase("company", "ohm"),)
    assert names(users, predicate) == ["Jamie", "Sam"]


def test_company_pattern_is_escaped():
    predicate, _ = build({"company": ["a.b"]})
    assert predicate.to_query() == {"$and": [{"company": {"$regex": r"a\.b", "$options": "i"}}]}


def test_name_filter(users):
    predicate, _ = build({"name": ["AM"]})
    assert names(users, predicate) == ["Jamie", "Sam"]


def test_role_filter(users):
    predicate, _ = build({"role": ["viewer"]})
    assert predicate.clauses == (Equals("role", "viewer"),)
    assert names(users, predicate) == ["Jamie", "Sam"]


def test_invalid_role_rejected():
    with pytest.raises(InvalidParameter) as exc_info:
        build({"role": ["janitor"]})
    assert exc_info.value.field == "role"
    assert "janitor" in str(exc_info.value)


def test_filters_combine_with_and(users):
    predicate, _ = build({"company": ["OHMNET"], "age": ["37"]})
    assert predicate.to_query() == {"$and": [
        {"age": 37},
        {"company": {"$regex": "OHMNET", "$options": "i"}},
    ]}
    assert names(users, predicate) == ["Jamie"]


def test_first_value_of_repeated_parameter_is_used():
    assert parse_params({"age": ["25", "37"]}).age == 25


def test_plain_string_values_are_accepted():
    query = parse_params({"role": "admin", "company": "umm"})
    assert query.role == UserRole.admin
    assert query.company == "umm"


def test_unknown_parameters_ignored():
    predicate, _ = build({"favoriteColor": ["blue"]})
    assert predicate == Predicate()


def test_sort_directive():
    _, directive = build({"sortBy": ["count"], "sortOrder": ["desc"]})
    assert directive.key == SortBy.count
    assert directive.descending


@pytest.mark.parametrize("raw", [None, "sideways", "ASC"])
def test_sort_order_defaults_to_asc(raw):
    params = {} if raw is None else {"sortOrder": [raw]}
    assert parse_params(params).sort_order == SortOrder.asc


def test_invalid_sort_by_rejected():
    with pytest.raises(InvalidParameter) as exc_info:
        build({"sortBy": ["email"]})
    assert exc_info.value.field == "sortBy"


def test_build_is_pure():
    params = {"age": ["37"], "company": ["ohm"], "role": ["viewer"]}
    assert build(params) == build(dict(params))
