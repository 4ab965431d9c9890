# ==============================================================================
# SELECCIÓN DE ALMACENAMIENTO - Cadena de respaldo
# ==============================================================================
# Orden de prueba: relacional → clave-valor → local.
# Se usa el primero cuyas variables estén TODAS presentes y no vacías.
#
# La elección se hace una sola vez (la primera vez que el contenedor necesita
# el repositorio) y queda fija durante la vida del proceso.
# ==============================================================================

import logging

import requests

from app_inventario.config import AppConfig
from app_inventario.repositories.kv_repository import KeyValueProductRepository
from app_inventario.repositories.local_repository import LocalProductRepository
from app_inventario.repositories.relational_repository import RelationalProductRepository

LOGGER = logging.getLogger(__name__)

STORAGE_RELATIONAL = 'relational'
STORAGE_KV = 'kv'
STORAGE_LOCAL = 'local'


def _present(*values: str) -> bool:
    return all(v and v.strip() for v in values)


def select_storage_kind(config: AppConfig) -> str:
    """
    Decide qué almacenamiento usar según la configuración disponible.

    Función pura: no abre conexiones ni toca archivos.

    Returns:
        'relational', 'kv' o 'local'
    """
    if _present(config.relational_url, config.relational_key):
        return STORAGE_RELATIONAL
    if _present(config.kv_url, config.kv_token):
        return STORAGE_KV
    return STORAGE_LOCAL


def build_repository(config: AppConfig, session: requests.Session = None):
    """
    Construye el repositorio elegido por select_storage_kind().

    Args:
        config: Configuración de la aplicación
        session: Sesión HTTP para los backends remotos (opcional)

    Returns:
        Instancia que cumple IProductRepository
    """
    kind = select_storage_kind(config)

    if kind == STORAGE_RELATIONAL:
        LOGGER.info("Almacenamiento: relacional (%s)", config.relational_url)
        return RelationalProductRepository(
            config.relational_url,
            config.relational_key,
            table=config.relational_table,
            timeout=config.request_timeout,
            session=session
        )

    if kind == STORAGE_KV:
        LOGGER.info("Almacenamiento: clave-valor (%s)", config.kv_url)
        return KeyValueProductRepository(
            config.kv_url,
            config.kv_token,
            key=config.kv_key,
            timeout=config.request_timeout,
            session=session
        )

    if config.production:
        LOGGER.warning(
            "Almacenamiento: local en memoria. En producción los datos "
            "se pierden al reiniciar el proceso"
        )
    else:
        LOGGER.info("Almacenamiento: local (%s)", config.products_file)
    return LocalProductRepository(config.products_file)
