"""
Validation des nouveaux utilisateurs.

Toutes les règles sont évaluées, dans l'ordre name, age, company, email,
role, et chaque échec ajoute une violation : une liste vide signifie que
l'utilisateur peut être enregistré.
"""

import re
from typing import Any, List, Mapping, Union

from email_validator import EmailNotValidError, validate_email

from schemas import MAX_AGE, MIN_AGE, User, UserCandidate, UserRole, ValidationViolation

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
# Au-delà, int() peut refuser la conversion (limite de longueur de Python 3.11+)
MAX_INTEGER_DIGITS = 18
OUT_OF_RANGE = 10 ** MAX_INTEGER_DIGITS

Candidate = Union[UserCandidate, Mapping[str, Any]]


def _get(candidate: Candidate, field: str) -> Any:
    if isinstance(candidate, Mapping):
        return candidate.get(field)
    return getattr(candidate, field, None)


def _raw_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _non_empty_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def as_integer(value: Any):
    """Retourne la valeur entière, ou None si la valeur n'est pas un entier."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and INTEGER_PATTERN.match(value.strip()):
        text = value.strip()
        sign = -1 if text.startswith("-") else 1
        digits = text.lstrip("+-").lstrip("0")
        if len(digits) > MAX_INTEGER_DIGITS:
            # Nombre trop long : forcément hors bornes, sans conversion
            return sign * OUT_OF_RANGE
        return sign * int(digits or "0")
    return None


def _valid_age(value: Any) -> bool:
    age = as_integer(value)
    return age is not None and MIN_AGE <= age <= MAX_AGE


def _valid_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _valid_role(value: Any) -> bool:
    return isinstance(value, str) and value in {role.value for role in UserRole}


def validate(candidate: Candidate) -> List[ValidationViolation]:
    violations = []

    def reject(field: str, message: str):
        violations.append(ValidationViolation(
            field=field,
            message=message,
            rejected_value=_raw_text(_get(candidate, field)),
        ))

    name = _get(candidate, "name")
    if not _non_empty_text(name):
        reject("name", "non-empty user name required")

    age = _get(candidate, "age")
    if not _valid_age(age):
        reject("age", f"age must be an integer between {MIN_AGE} and {MAX_AGE}; got '{_raw_text(age)}'")

    company = _get(candidate, "company")
    if not _non_empty_text(company):
        reject("company", "non-empty company name required")

    email = _get(candidate, "email")
    if not _valid_email(email):
        reject("email", f"invalid email address: '{_raw_text(email)}'")

    role = _get(candidate, "role")
    if not _valid_role(role):
        allowed = ", ".join(r.value for r in UserRole)
        reject("role", f"role must be one of {allowed}; got '{_raw_text(role)}'")

    return violations


def to_user(candidate: Candidate) -> User:
    """Construit un User normalisé à partir d'un candidat déjà validé (sans id ni avatar)."""
    return User(
        name=_get(candidate, "name").strip(),
        age=as_integer(_get(candidate, "age")),
        company=_get(candidate, "company").strip(),
        email=_get(candidate, "email"),
        role=UserRole(_get(candidate, "role")),
    )
