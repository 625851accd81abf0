"""
Logique métier de l'annuaire des utilisateurs.

``UserService`` répond aux cinq opérations de l'annuaire sur une
collection MongoDB : liste filtrée, lecture par identifiant, regroupement
par entreprise, création validée et suppression. Les erreurs de la base
(``pymongo.errors.PyMongoError``) ne sont pas interceptées ici : elles
remontent telles quelles à l'appelant.
"""

import logging
from typing import List, Optional

from pymongo.collection import Collection

from exceptions import NotFound, ValidationFailed
from schemas import GroupSummary, SortBy, SortDirective, SortOrder, User, UserCandidate
from services import aggregator, filter_builder, validator
from utils import avatar, identifiers

logger = logging.getLogger(__name__)

# Clés de tri applicables à une liste simple ("count" n'a de sens que pour les groupes)
USER_SORT_FIELDS = {SortBy.company, SortBy.name, SortBy.age}


# Helper pour convertir un document MongoDB en schéma User
def user_helper(user_data: dict) -> User:
    return User(
        id=identifiers.encode(user_data["_id"]),
        name=user_data["name"],
        age=user_data["age"],
        company=user_data["company"],
        email=user_data["email"],
        role=user_data["role"],
        avatar=user_data.get("avatar"),
    )


def sort_users(users: List[User], directive: SortDirective) -> List[User]:
    if directive.key not in USER_SORT_FIELDS:
        return users
    return sorted(users, key=lambda u: getattr(u, directive.key.value), reverse=directive.descending)


class UserService:
    """Service pour l'annuaire des utilisateurs, sans état propre en dehors de la collection."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def _find(self, predicate: filter_builder.Predicate) -> List[User]:
        return [user_helper(doc) for doc in self.collection.find(predicate.to_query())]

    def list_users(self, params: filter_builder.QueryParams) -> List[User]:
        """Liste les utilisateurs correspondant à tous les critères fournis."""
        predicate, directive = filter_builder.build(params)
        users = sort_users(self._find(predicate), directive)
        logger.info(f"{len(users)} utilisateur(s) trouvé(s) pour le filtre {predicate.to_query()}")
        return users

    def get_user(self, token: str) -> User:
        user_id = identifiers.decode(token)
        user_data = self.collection.find_one({"_id": user_id})
        if user_data is None:
            logger.warning(f"Utilisateur {token} introuvable")
            raise NotFound(token)
        return user_helper(user_data)

    def grouped_summary(self, params: filter_builder.QueryParams,
                        sort_by: Optional[SortBy] = None,
                        sort_order: Optional[SortOrder] = None) -> List[GroupSummary]:
        """
        Regroupe par entreprise les utilisateurs filtrés.
        Les arguments explicites l'emportent sur sortBy/sortOrder des paramètres ;
        par défaut le tri se fait par entreprise, en ordre croissant.
        """
        predicate, directive = filter_builder.build(params)
        key = sort_by or directive.key or SortBy.company
        order = sort_order or directive.order
        groups = aggregator.aggregate(self._find(predicate), key, order)
        logger.info(f"{len(groups)} groupe(s) d'entreprise, tri {key.value} {order.value}")
        return groups

    def add_user(self, candidate: UserCandidate) -> str:
        """Valide puis enregistre un nouvel utilisateur ; retourne son identifiant."""
        violations = validator.validate(candidate)
        if violations:
            logger.warning(f"Création refusée : {len(violations)} violation(s) ({', '.join(v.field for v in violations)})")
            raise ValidationFailed(violations)

        new_user = validator.to_user(candidate)
        # L'avatar est toujours recalculé côté serveur
        new_user.avatar = avatar.generate(new_user.email)

        user_data = new_user.model_dump(mode="json", exclude={"id"})
        result = self.collection.insert_one(user_data)
        user_id = identifiers.encode(result.inserted_id)
        logger.info(f"Utilisateur {new_user.name} créé avec l'ID: {user_id}")
        return user_id

    def delete_user(self, token: str) -> None:
        user_id = identifiers.decode(token)
        result = self.collection.delete_one({"_id": user_id})
        if result.deleted_count == 0:
            logger.warning(f"Suppression impossible : utilisateur {token} introuvable")
            raise NotFound(token)
        logger.info(f"Utilisateur {token} supprimé")
