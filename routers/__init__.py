"""Routeurs FastAPI, un par domaine."""
