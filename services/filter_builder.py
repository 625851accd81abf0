"""
Construction des filtres de recherche d'utilisateurs.

Les paramètres de requête bruts (chaque nom pouvant être répété) sont
d'abord convertis en un objet ``UserQuery`` typé et validé, puis en un
prédicat composé (ET logique de sous-prédicats par champ). Le prédicat
peut être rendu en filtre MongoDB ou évalué directement sur un ``User``.
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from exceptions import InvalidParameter
from schemas import MAX_AGE, MIN_AGE, SortBy, SortDirective, SortOrder, UserQuery, UserRole
from services.validator import as_integer

AGE_KEY = "age"
COMPANY_KEY = "company"
NAME_KEY = "name"
ROLE_KEY = "role"
SORT_BY_KEY = "sortBy"
SORT_ORDER_KEY = "sortOrder"

QueryParams = Mapping[str, Union[str, Sequence[str]]]


def _field_value(record, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


@dataclass(frozen=True)
class Equals:
    field: str
    value: Any

    def to_query(self) -> dict:
        return {self.field: self.value}

    def matches(self, record) -> bool:
        return _field_value(record, self.field) == self.value


@dataclass(frozen=True)
class ContainsIgnoreCase:
    field: str
    text: str

    def to_query(self) -> dict:
        # Le texte est échappé : "a.b" doit correspondre littéralement
        return {self.field: {"$regex": re.escape(self.text), "$options": "i"}}

    def matches(self, record) -> bool:
        value = _field_value(record, self.field)
        return isinstance(value, str) and self.text.lower() in value.lower()


@dataclass(frozen=True)
class Predicate:
    """Conjonction de sous-prédicats ; vide = aucun filtre."""
    clauses: Tuple[Union[Equals, ContainsIgnoreCase], ...] = ()

    def to_query(self) -> dict:
        if not self.clauses:
            return {}
        return {"$and": [clause.to_query() for clause in self.clauses]}

    def matches(self, record) -> bool:
        return all(clause.matches(record) for clause in self.clauses)


def _first(params: QueryParams, name: str) -> Optional[str]:
    """Première valeur d'un paramètre éventuellement répété."""
    value = params.get(name)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return value[0] if len(value) > 0 else None


def parse_age(raw: str) -> int:
    age = as_integer(raw)
    if age is None:
        raise InvalidParameter(AGE_KEY, raw, "must be an integer")
    if age < MIN_AGE or age > MAX_AGE:
        raise InvalidParameter(AGE_KEY, raw, f"must be between {MIN_AGE} and {MAX_AGE}")
    return age


def parse_role(raw: str) -> UserRole:
    try:
        return UserRole(raw)
    except ValueError:
        allowed = ", ".join(r.value for r in UserRole)
        raise InvalidParameter(ROLE_KEY, raw, f"must be one of {allowed}")


def parse_sort_by(raw: str) -> SortBy:
    try:
        return SortBy(raw)
    except ValueError:
        allowed = ", ".join(s.value for s in SortBy)
        raise InvalidParameter(SORT_BY_KEY, raw, f"must be one of {allowed}")


def parse_sort_order(raw: Optional[str]) -> SortOrder:
    # Valeur absente ou inconnue : ordre croissant
    if raw is not None and raw.strip().lower() == SortOrder.desc.value:
        return SortOrder.desc
    return SortOrder.asc


def parse_params(params: QueryParams) -> UserQuery:
    """Valide les paramètres reconnus ; les noms inconnus sont ignorés."""
    raw_age = _first(params, AGE_KEY)
    raw_company = _first(params, COMPANY_KEY)
    raw_name = _first(params, NAME_KEY)
    raw_role = _first(params, ROLE_KEY)
    raw_sort_by = _first(params, SORT_BY_KEY)

    return UserQuery(
        age=parse_age(raw_age) if raw_age is not None else None,
        company=raw_company or None,
        name=raw_name or None,
        role=parse_role(raw_role) if raw_role is not None else None,
        sort_by=parse_sort_by(raw_sort_by) if raw_sort_by else None,
        sort_order=parse_sort_order(_first(params, SORT_ORDER_KEY)),
    )


def predicate_for(query: UserQuery) -> Predicate:
    clauses = []
    if query.age is not None:
        clauses.append(Equals(AGE_KEY, query.age))
    if query.company:
        clauses.append(ContainsIgnoreCase(COMPANY_KEY, query.company))
    if query.name:
        clauses.append(ContainsIgnoreCase(NAME_KEY, query.name))
    if query.role is not None:
        clauses.append(Equals(ROLE_KEY, query.role.value))
    return Predicate(tuple(clauses))


def build(params: QueryParams) -> Tuple[Predicate, SortDirective]:
    """Paramètres bruts -> (prédicat, directive de tri)."""
    query = parse_params(params)
    return predicate_for(query), SortDirective(key=query.sort_by, order=query.sort_order)
