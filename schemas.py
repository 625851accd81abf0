from pydantic import BaseModel, Field
from typing import Any, List, Optional
from enum import Enum

# Enum pour les rôles, miroir des valeurs stockées dans MongoDB
class UserRole(str, Enum):
    admin = "admin"
    editor = "editor"
    viewer = "viewer"

# Clés de tri acceptées par le paramètre sortBy
class SortBy(str, Enum):
    company = "company"
    count = "count"   # uniquement pour les regroupements
    name = "name"
    age = "age"

class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"

MIN_AGE = 0
MAX_AGE = 150

# Schéma pour la lecture d'un utilisateur (réponse API)
class User(BaseModel):
    id: Optional[str] = None  # ObjectId MongoDB en hexadécimal, absent avant insertion
    name: str
    age: int = Field(ge=MIN_AGE, le=MAX_AGE)
    company: str
    email: str
    role: UserRole
    avatar: Optional[str] = None

# Corps brut d'une demande de création : tout est optionnel et non typé
# pour que le validateur puisse signaler toutes les erreurs à la fois.
class UserCandidate(BaseModel):
    name: Any = None
    age: Any = None
    company: Any = None
    email: Any = None
    role: Any = None

    model_config = {"extra": "ignore"}

class ValidationViolation(BaseModel):
    field: str
    message: str
    rejected_value: str

# Résumé d'un groupe d'utilisateurs (jamais persisté)
class GroupSummary(BaseModel):
    key: str
    count: int = Field(ge=1)
    members: List[User]

# Critères de recherche déjà validés, un champ par paramètre reconnu
class UserQuery(BaseModel):
    age: Optional[int] = Field(None, ge=MIN_AGE, le=MAX_AGE)
    company: Optional[str] = None
    name: Optional[str] = None
    role: Optional[UserRole] = None
    sort_by: Optional[SortBy] = None
    sort_order: SortOrder = SortOrder.asc

    model_config = {"frozen": True}

class SortDirective(BaseModel):
    key: Optional[SortBy] = None
    order: SortOrder = SortOrder.asc

    model_config = {"frozen": True}

    @property
    def descending(self) -> bool:
        return self.order == SortOrder.desc

# --- Schémas de réponse ---

class UserCreated(BaseModel):
    id: str

class UserDeleted(BaseModel):
    deleted: str

class ErrorResponse(BaseModel):
    detail: str
    field: Optional[str] = None
    rejected_value: Optional[str] = None
    violations: List[ValidationViolation] = []
