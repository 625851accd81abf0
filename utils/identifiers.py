from bson import ObjectId

from exceptions import MalformedIdentifier

OBJECT_ID_LENGTH = 24


def decode(token) -> ObjectId:
    """
    Convertit un identifiant textuel en ObjectId MongoDB.
    Lève MalformedIdentifier si le jeton n'a pas exactement 24 caractères hexadécimaux.
    """
    # ObjectId.is_valid accepte aussi 12 octets bruts : on exige une chaîne de 24 caractères
    if not isinstance(token, str) or len(token) != OBJECT_ID_LENGTH or not ObjectId.is_valid(token):
        raise MalformedIdentifier(token)
    return ObjectId(token)


def encode(identifier: ObjectId) -> str:
    return str(identifier)
