"""Exceptions métier de l'annuaire des utilisateurs.

Chaque erreur porte assez de détails (champ, valeur brute) pour que
l'appelant puisse corriger sa requête. La couche HTTP les traduit en
codes de statut dans app_factory.py.
"""


class UserDirectoryError(Exception):
    """Erreur de base de l'annuaire des utilisateurs."""
    pass


class InvalidParameter(UserDirectoryError):
    """Paramètre de filtre ou de tri illisible ou hors domaine."""

    def __init__(self, field: str, raw_value, reason: str = None):
        self.field = field
        self.raw_value = raw_value
        message = f"Invalid value for '{field}': '{raw_value}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MalformedIdentifier(UserDirectoryError):
    """Le jeton n'est pas un ObjectId MongoDB valide (24 caractères hexadécimaux)."""

    def __init__(self, token):
        self.token = token
        super().__init__("The requested user id wasn't a legal Mongo Object ID.")


class NotFound(UserDirectoryError):
    """Aucun utilisateur à cet identifiant."""

    def __init__(self, token):
        self.token = token
        super().__init__("The requested user was not found")


class ValidationFailed(UserDirectoryError):
    """Un nouvel utilisateur enfreint une ou plusieurs règles métier."""

    def __init__(self, violations):
        self.violations = list(violations)
        details = "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        super().__init__(f"Invalid user: {details}")
