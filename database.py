# Base de données: configuration et initialisation de la connexion MongoDB.

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

import config

# Créer le client une seule fois pour être réutilisé à travers l'application.
# MongoClient ne se connecte réellement qu'à la première opération.
mongo_client = MongoClient(config.MONGO_URI)


def get_mongo_db() -> Database:
    """
    Retourne une instance de la base de données MongoDB.
    """
    return mongo_client[config.MONGO_DB]


# Dépendance FastAPI pour obtenir la collection des utilisateurs
def get_users_collection() -> Collection:
    return get_mongo_db()[config.USERS_COLLECTION]
