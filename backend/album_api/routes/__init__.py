# Routes package init
"""
Album Service Backend: API Routes Package
=========================================

Route Inventory:
    - albums.py:  GET  /albums               (list every album)
                  GET  /albums/{album_id}    (first album with this id)
                  POST /albums               (append an album)
    - health.py:  GET  /health               (service health check)

Routes are thin: they pull parameters out of the request, call the store,
and let FastAPI serialize the result. Error mapping lives in main.py.
"""
