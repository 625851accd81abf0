"""
Regroupement des utilisateurs par entreprise.

Chaque groupe donne la clé (nom exact de l'entreprise, sensible à la
casse), le nombre de membres et la liste des membres dans l'ordre
d'arrivée. Le tri porte sur la clé ou sur le nombre ; à nombre égal,
les groupes sont départagés par clé croissante quel que soit le sens.
"""

from collections import defaultdict
from typing import Iterable, List

from exceptions import InvalidParameter
from schemas import GroupSummary, SortBy, SortOrder, User

GROUP_KEY = "company"


def group_by_company(records: Iterable[User]) -> List[GroupSummary]:
    groups = defaultdict(list)
    for record in records:
        groups[getattr(record, GROUP_KEY)].append(record)
    return [GroupSummary(key=key, count=len(members), members=members) for key, members in groups.items()]


def aggregate(records: Iterable[User], sort_by: SortBy = SortBy.company,
              sort_order: SortOrder = SortOrder.asc) -> List[GroupSummary]:
    summaries = group_by_company(records)
    descending = sort_order == SortOrder.desc

    if sort_by == SortBy.count:
        # Tri stable : d'abord par clé croissante, puis par nombre
        summaries.sort(key=lambda g: g.key)
        summaries.sort(key=lambda g: g.count, reverse=descending)
    elif sort_by in (None, SortBy.company):
        summaries.sort(key=lambda g: g.key, reverse=descending)
    else:
        raise InvalidParameter("sortBy", sort_by.value, "groups can only be sorted by company or count")
    return summaries
