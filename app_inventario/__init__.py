# ==============================================================================
# APP INVENTARIO - Registro de productos y control de stock
# ==============================================================================
# Paquete principal. Capas:
#   main.py         → Rutas Flask (API JSON)
#   app_container   → Contenedor de dependencias
#   services/       → Lógica de negocio
#   repositories/   → Persistencia (local, clave-valor, relacional)
#   models/         → Entidades del dominio
# ==============================================================================

__version__ = '1.0.0'
