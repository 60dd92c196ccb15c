# app/videos/ranking.py
"""
Score de recomendación de un video.

La misma función sirve con números (Python) y con columnas de
SQLAlchemy: con columnas devuelve la expresión SQL equivalente, que es
lo que usa el UPDATE atómico del like.
"""

VIEWS_WEIGHT = 10.0


def recommendation_score(likes, views):
    return likes + views / VIEWS_WEIGHT
