from flask import Flask, request, jsonify
from functools import wraps
from werkzeug.exceptions import HTTPException
import logging
import os

# Sistema de profiling interno
from app_inventario.performance_logger import init_profiling

# ═══════════════════════════════════════════════════════════════════════════
# CONTENEDOR DE DEPENDENCIAS - Servicios y Repositorios
# ═══════════════════════════════════════════════════════════════════════════
# Las rutas solo orquestan request → service → response.
# El almacenamiento (relacional / kv / local) se elige en el contenedor.
# ═══════════════════════════════════════════════════════════════════════════
from app_inventario.app_container import get_container
from app_inventario.config import AppConfig
from app_inventario.exceptions import StorageError, ValidationError

LOGGER = logging.getLogger(__name__)

CONFIG = AppConfig.from_env()


def configure_logging(level='INFO'):
    """Configura el logging estándar (una sola vez por proceso)."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )


configure_logging(CONFIG.log_level)

app = Flask(__name__)

# Límite de tamaño de petición: los cuerpos son JSON pequeños
app.config['MAX_CONTENT_LENGTH'] = 64 * 1024

# ═══════════════════════════════════════════════════════════════════════════
# INICIALIZAR SISTEMA DE PROFILING
# ═══════════════════════════════════════════════════════════════════════════
# Mide rendimiento de rutas. Logs en <data_dir>/logs/
# Para desactivar: INVENTARIO_PROFILING=0
init_profiling(app, CONFIG.logs_dir, CONFIG.enable_profiling)


# Helpers
def inventory_service():
    return get_container(CONFIG).inventory_service


def error_response(message, status):
    return {"success": False, "error": message}, status


def json_body():
    """Cuerpo JSON de la petición; {} si falta, es inválido o no es un objeto."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return data


def storage_guard(message):
    """
    Convierte StorageError en un 500 genérico.
    El detalle del backend solo va al log, nunca al cliente.
    """
    def deco(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except StorageError:
                LOGGER.exception(message)
                return error_response(message, 500)
        return wrapper
    return deco


@app.errorhandler(ValidationError)
def handle_validation_error(e):
    return error_response(str(e), 400)


@app.errorhandler(HTTPException)
def handle_http_error(e):
    """Errores HTTP de Flask (404, 405, 413...) en JSON para la API."""
    if request.path.startswith("/api/"):
        return error_response(e.description, e.code)
    return e


@app.after_request
def set_security_headers(response):
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'DENY'
    response.headers['Referrer-Policy'] = 'no-referrer-when-downgrade'
    return response


# ═══════════════════════════════════════════════════════════════════════════
# API JSON - PRODUCTOS
# ═══════════════════════════════════════════════════════════════════════════

@app.route("/api/productos", methods=["GET"])
@storage_guard("Error al obtener productos")
def list_products():
    """Lista todos los productos. ?q= filtra por nombre o marca."""
    query = (request.args.get("q") or "").strip()
    service = inventory_service()
    products = service.search_products(query) if query else service.list_products()
    return jsonify([p.to_dict() for p in products])


@app.route("/api/productos", methods=["POST"])
@storage_guard("Error al crear producto")
def create_product():
    """Crea un producto: {nombre, marca, inventarioInicial}"""
    data = json_body()
    nombre = data.get("nombre", data.get("name"))
    marca = data.get("marca", data.get("brand"))
    inventario_inicial = data.get("inventarioInicial", data.get("initialStock"))

    if nombre is None or marca is None or inventario_inicial is None:
        return error_response("Faltan datos requeridos: nombre, marca, inventarioInicial", 400)

    product = inventory_service().create_product(nombre, marca, inventario_inicial)
    return product.to_dict(), 201


@app.route("/api/productos/<product_id>", methods=["GET"])
@storage_guard("Error al obtener producto")
def get_product(product_id):
    product = inventory_service().get_product(product_id)
    if product is None:
        return error_response("Producto no encontrado", 404)
    return product.to_dict()


@app.route("/api/productos/<product_id>", methods=["PATCH"])
@storage_guard("Error al actualizar inventario")
def adjust_stock(product_id):
    """Suma o resta inventario: {cantidad} (negativa para disminuir)"""
    data = json_body()
    cantidad = data.get("cantidad", data.get("delta"))

    if cantidad is None:
        return error_response("La cantidad es requerida y debe ser un número", 400)

    product = inventory_service().adjust_stock(product_id, cantidad)
    if product is None:
        return error_response("Producto no encontrado", 404)
    return product.to_dict()


@app.route("/api/productos/<product_id>", methods=["DELETE"])
@storage_guard("Error al eliminar producto")
def delete_product(product_id):
    if not inventory_service().delete_product(product_id):
        return error_response("Producto no encontrado", 404)
    return {"message": "Producto eliminado correctamente"}


if __name__ == "__main__":
    # Configuración para desarrollo local
    # En producción usar WSGI (gunicorn wsgi:app)
    DEBUG = os.environ.get('FLASK_DEBUG', '0') == '1'
    HOST = os.environ.get('FLASK_HOST', '0.0.0.0')
    PORT = int(os.environ.get('FLASK_PORT', 5000))

    if not DEBUG:
        print(f"\n{'='*50}")
        print(f"  Servidor iniciado en http://{HOST}:{PORT}")
        print(f"  Acceso local: http://localhost:{PORT}")
        print(f"{'='*50}\n")

    app.run(host=HOST, port=PORT, debug=DEBUG)
