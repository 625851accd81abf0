from typing import Dict, List

from fastapi import Depends, Request
from pymongo.collection import Collection

from database import get_users_collection
from services.user_service import UserService

# --- DÉPENDANCES FASTAPI ---

def get_user_service(collection: Collection = Depends(get_users_collection)) -> UserService:
    """Fournit un UserService lié à la collection des utilisateurs."""
    return UserService(collection)

def get_query_params(request: Request) -> Dict[str, List[str]]:
    """
    Retourne les paramètres de la requête sous forme nom -> liste de valeurs,
    un même nom pouvant apparaître plusieurs fois dans l'URL.
    """
    return {key: request.query_params.getlist(key) for key in request.query_params.keys()}
