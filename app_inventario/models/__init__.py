# ==============================================================================
# CAPA DE MODELOS - Estructuras de datos del sistema
# ==============================================================================
# Entidades del dominio como dataclasses, serializables a JSON o a filas SQL.
# ==============================================================================

from .entities import Product

__all__ = [
    'Product',
]
