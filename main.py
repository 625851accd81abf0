# main.py: Point d'entrée pour le serveur uvicorn.
# Ce fichier charge l'environnement, configure les logs
# et importe l'application créée par l'app factory.

from dotenv import load_dotenv

# Charger les variables d'environnement au tout début, avant la lecture de config.py
load_dotenv()

import config
from app_factory import create_app  # qui se trouve dans app_factory.py

config.configure_logging()

app = create_app()
