from fastapi import APIRouter, Depends, status
from typing import Dict, List

from dependencies import get_query_params, get_user_service
from services.user_service import UserService
import schemas

router = APIRouter()

@router.get("", summary="Lister les utilisateurs (filtres: age, company, name, role)", response_model=List[schemas.User])
def list_users(
    params: Dict[str, List[str]] = Depends(get_query_params),
    service: UserService = Depends(get_user_service)
):
    return service.list_users(params)

# Déclarée avant /{user_id} pour que "groups" ne soit pas pris pour un identifiant
@router.get("/groups", summary="Utilisateurs regroupés par entreprise", response_model=List[schemas.GroupSummary])
def get_users_grouped_by_company(
    params: Dict[str, List[str]] = Depends(get_query_params),
    service: UserService = Depends(get_user_service)
):
    return service.grouped_summary(params)

@router.get("/{user_id}", summary="Obtenir un utilisateur par son ID", response_model=schemas.User)
def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return service.get_user(user_id)

@router.post("", summary="Créer un nouvel utilisateur", response_model=schemas.UserCreated, status_code=status.HTTP_201_CREATED)
def add_new_user(candidate: schemas.UserCandidate, service: UserService = Depends(get_user_service)):
    return schemas.UserCreated(id=service.add_user(candidate))

@router.delete("/{user_id}", summary="Supprimer un utilisateur", response_model=schemas.UserDeleted)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    service.delete_user(user_id)
    return schemas.UserDeleted(deleted=user_id)
