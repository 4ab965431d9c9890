# ==============================================================================
# WSGI Entry Point - Para Gunicorn en Render/Producción
# ==============================================================================
# Este archivo es el punto de entrada para servidores WSGI como Gunicorn.
#
# USO EN RENDER:
#   gunicorn wsgi:app --bind 0.0.0.0:$PORT
#
# ESTRUCTURA DEL PROYECTO:
#   repo_root/             <- Directorio de trabajo (en sys.path automáticamente)
#   ├── wsgi.py            <- Este archivo
#   ├── pyproject.toml
#   └── app_inventario/    <- Paquete Python
#       ├── main.py
#       ├── services/
#       └── repositories/
#
# El almacenamiento se elige por variables de entorno (ver config.py).
# ==============================================================================

from app_inventario.main import app

# Para desarrollo local:
#   python wsgi.py
if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
