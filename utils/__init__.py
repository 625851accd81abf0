"""Utilitaires : identifiants MongoDB et avatars."""
