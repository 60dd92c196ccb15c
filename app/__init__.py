# app/__init__.py
"""
Backend de videos cortos: registro/login, uploads, likes, comentarios
y feed de recomendados.

La app se construye con `app.main.create_app()` (uvicorn --factory).
"""
