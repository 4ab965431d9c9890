# ==============================================================================
# EXCEPCIONES DEL DOMINIO
# ==============================================================================
# ValidationError → datos inválidos del cliente (HTTP 400)
# StorageError    → falla del almacenamiento activo (HTTP 500)
#
# "No encontrado" NO es una excepción: los servicios retornan None / False.
# ==============================================================================


class InventoryError(Exception):
    """Excepción base de la aplicación de inventario."""
    pass


class ValidationError(InventoryError):
    """Datos enviados por el cliente que violan una regla de la entidad."""
    pass


class StorageError(InventoryError):
    """El repositorio activo no pudo completar una operación de E/S."""
    pass
