"""
Fichier de configuration centralisée pour le backend de l'annuaire.
Les valeurs sont lues dans l'environnement (ou dans un fichier .env chargé par main.py).
"""

import logging
import os

# --- MongoDB ---
MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/")
MONGO_DB = os.environ.get("MONGO_DB", "dev")
USERS_COLLECTION = os.environ.get("USERS_COLLECTION", "users")

# --- Journalisation ---
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# --- CORS ---
# Liste séparée par des virgules, "*" par défaut (à restreindre en production)
CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]


def configure_logging(level: str = None):
    """Configure le logging racine une seule fois pour toute l'application."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
