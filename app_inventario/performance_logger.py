# ==============================================================================
# SISTEMA DE PROFILING INTERNO
# ==============================================================================
# Mide el tiempo de cada ruta sin afectar la respuesta al usuario.
# Guarda logs legibles en <data_dir>/logs/ para análisis humano.
#
# ACTIVAR/DESACTIVAR: variable de entorno INVENTARIO_PROFILING (0 = apagado)
# ==============================================================================

import os
import threading
import time
from datetime import datetime

# Umbrales de tiempo (en milisegundos)
THRESHOLD_WARNING = 300   # Advertencia si supera 300ms
THRESHOLD_CRITICAL = 700  # Crítico si supera 700ms

PERFORMANCE_LOG_NAME = 'performance.log'
SLOW_ROUTES_LOG_NAME = 'slow_routes.log'

# Mapeo de rutas a nombres legibles (para logs más humanos)
ROUTE_NAMES = {
    'GET /api/productos': 'Listar productos',
    'POST /api/productos': 'Crear producto',
    'GET /api/productos/<product_id>': 'Obtener producto',
    'PATCH /api/productos/<product_id>': 'Modificar inventario',
    'DELETE /api/productos/<product_id>': 'Eliminar producto',
}

_write_lock = threading.Lock()


def _get_timestamp():
    """Obtiene timestamp legible"""
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def _write_log(filepath, content):
    """Escribe contenido a un archivo de log (thread-safe)"""
    try:
        with _write_lock:
            with open(filepath, 'a', encoding='utf-8') as f:
                f.write(content)
    except OSError:
        pass  # Un log que falla no debe tumbar la petición


def _get_route_name(method, path, rule=None):
    """
    Obtiene nombre legible para una ruta.
    Prueba la ruta exacta, luego la regla de Flask, si no devuelve la ruta raw.
    """
    key = f"{method} {path}"
    if key in ROUTE_NAMES:
        return ROUTE_NAMES[key]

    if rule:
        rule_key = f"{method} {rule}"
        if rule_key in ROUTE_NAMES:
            return ROUTE_NAMES[rule_key]

    return key


# ═══════════════════════════════════════════════════════════════════════════
# 1️⃣ REGISTRO DE TIEMPOS
# ═══════════════════════════════════════════════════════════════════════════

def log_route_performance(logs_dir, method, path, rule, time_ms, status=None):
    """
    Registra el rendimiento de una ruta en performance.log

    Args:
        logs_dir: Carpeta de logs
        method: GET, POST, etc.
        path: Ruta solicitada (/api/productos/123)
        rule: Regla de Flask (/api/productos/<product_id>)
        time_ms: Tiempo en milisegundos
        status: Código HTTP de la respuesta
    """
    action_name = _get_route_name(method, path, rule)

    log_entry = f"""
════════════════════════════════════════
[PERFORMANCE] {_get_timestamp()}
────────────────────────────────────────
Acción: {action_name}
Ruta: {method} {path}
Estado: {status}
Tiempo: {time_ms:.0f} ms
"""

    _write_log(os.path.join(logs_dir, PERFORMANCE_LOG_NAME), log_entry)


def log_slow_route(logs_dir, method, path, rule, time_ms, level='WARNING'):
    """
    Registra una ruta lenta en slow_routes.log

    Args:
        level: 'WARNING' (>300ms) o 'CRITICAL' (>700ms)
    """
    action_name = _get_route_name(method, path, rule)
    severity = 'LENTA' if level == 'WARNING' else 'MUY LENTA'
    threshold = THRESHOLD_WARNING if level == 'WARNING' else THRESHOLD_CRITICAL

    log_entry = f"""
[{level}] {_get_timestamp()}
────────────────────────────────────────
Ruta {severity}: {action_name}
Detalle: {method} {path}
Tiempo: {time_ms:.0f} ms (umbral: {threshold} ms)
────────────────────────────────────────
"""

    _write_log(os.path.join(logs_dir, SLOW_ROUTES_LOG_NAME), log_entry)


# ═══════════════════════════════════════════════════════════════════════════
# 2️⃣ HOOKS PARA FLASK (before/after request)
# ═══════════════════════════════════════════════════════════════════════════

def init_profiling(app, logs_dir, enabled=True):
    """
    Inicializa el sistema de profiling en una app Flask.
    Registra hooks before_request y after_request.

    Uso:
        init_profiling(app, config.logs_dir, config.enable_profiling)
    """
    if not enabled:
        return

    os.makedirs(logs_dir, exist_ok=True)

    @app.before_request
    def _start_timer():
        from flask import g
        g.start_time = time.perf_counter()

    @app.after_request
    def _log_request(response):
        from flask import g, request

        if not hasattr(g, 'start_time'):
            return response

        elapsed = (time.perf_counter() - g.start_time) * 1000  # ms

        method = request.method
        path = request.path
        rule = str(request.url_rule) if request.url_rule else path

        if path.startswith('/static'):
            return response

        log_route_performance(logs_dir, method, path, rule, elapsed, response.status_code)

        if elapsed >= THRESHOLD_CRITICAL:
            log_slow_route(logs_dir, method, path, rule, elapsed, 'CRITICAL')
        elif elapsed >= THRESHOLD_WARNING:
            log_slow_route(logs_dir, method, path, rule, elapsed, 'WARNING')

        return response


__all__ = [
    'init_profiling',
    'log_route_performance',
    'log_slow_route',
]
