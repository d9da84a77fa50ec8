"""Vues console de l'empire (panneau de synergies, navigateur d'acquisitions)."""
