"""Logique métier de l'annuaire : filtres, validation, regroupement et service."""
