"""Règles de calcul paramétrables : cumul des synergies et valorisation."""
