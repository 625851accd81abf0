"""
Script de peuplement de la collection des utilisateurs avec des données de démonstration.
Vide la collection puis insère les utilisateurs d'exemple (avatars calculés à partir de l'e-mail).
"""

import logging

import pymongo
from dotenv import load_dotenv

load_dotenv()

import config
from utils.avatar import generate

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {"name": "Chris", "age": 25, "company": "UMM", "email": "chris@this.that", "role": "admin"},
    {"name": "Pat", "age": 37, "company": "IBM", "email": "pat@something.com", "role": "editor"},
    {"name": "Jamie", "age": 37, "company": "OHMNET", "email": "jamie@frogs.com", "role": "viewer"},
    {"name": "Sam", "age": 45, "company": "OHMNET", "email": "sam@frogs.com", "role": "viewer"},
]


def seed_users(collection) -> int:
    """Remplace le contenu de la collection par les utilisateurs de démonstration."""
    collection.delete_many({})
    documents = [dict(user, avatar=generate(user["email"])) for user in DEMO_USERS]
    result = collection.insert_many(documents)
    return len(result.inserted_ids)


def main():
    config.configure_logging()
    client = pymongo.MongoClient(config.MONGO_URI)
    try:
        collection = client[config.MONGO_DB][config.USERS_COLLECTION]
        count = seed_users(collection)
        logger.info(f"{count} utilisateurs insérés dans '{config.MONGO_DB}.{config.USERS_COLLECTION}'")
    except pymongo.errors.ConnectionFailure as e:
        logger.error(f"Erreur de connexion à MongoDB : {e}")
        raise
    finally:
        client.close()


if __name__ == "__main__":
    main()
