"""Fixtures partagées : une collection MongoDB en mémoire (mongomock) peuplée de 4 utilisateurs."""

import mongomock
import pytest
from bson import ObjectId

from schemas import User
from services.user_service import UserService

SAM_ID = ObjectId()


@pytest.fixture
def user_documents():
    return [
        {"name": "Chris", "age": 25, "company": "UMM", "email": "chris@this.that", "role": "admin",
         "avatar": "https://gravatar.com/avatar/8c9616d6cc5de638ea6920fb5d65fc6c?d=identicon"},
        {"name": "Pat", "age": 37, "company": "IBM", "email": "pat@something.com", "role": "editor",
         "avatar": "https://gravatar.com/avatar/b42a11826c3bde672bce7e06ad729d44?d=identicon"},
        {"name": "Jamie", "age": 37, "company": "OHMNET", "email": "jamie@frogs.com", "role": "viewer",
         "avatar": "https://gravatar.com/avatar/d4a6c71dd9470ad4cf58f78c100258bf?d=identicon"},
        {"_id": SAM_ID, "name": "Sam", "age": 45, "company": "OHMNET", "email": "sam@frogs.com", "role": "viewer",
         "avatar": "https://gravatar.com/avatar/08b7610b558a4cbbd20ae99072801f4d?d=identicon"},
    ]


@pytest.fixture
def users_collection(user_documents):
    collection = mongomock.MongoClient().db.users
    collection.insert_many(user_documents)
    return collection


@pytest.fixture
def service(users_collection):
    return UserService(users_collection)


@pytest.fixture
def sam_id():
    return str(SAM_ID)


@pytest.fixture
def users(user_documents):
    """Les mêmes utilisateurs, sous forme de schémas User (sans passer par la base)."""
    return [User(**{k: v for k, v in doc.items() if k != "_id"}) for doc in user_documents]
