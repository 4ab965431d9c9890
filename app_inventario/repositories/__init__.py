# ==============================================================================
# CAPA DE REPOSITORIOS - Acceso a datos
# ==============================================================================
# Esta capa encapsula todo el acceso a la persistencia.
# Los servicios dependen de IProductRepository, no de una implementación.
#
# ESTRUCTURA:
# ├── interfaces.py              → IProductRepository (contrato)
# ├── base.py                    → CollectionRepository (colección completa)
# ├── local_repository.py        → Memoria + products.json
# ├── kv_repository.py           → Vercel KV / Upstash
# ├── relational_repository.py   → Supabase (tabla productos)
# └── selection.py               → Cadena de respaldo relacional → kv → local
# ==============================================================================

from .interfaces import IProductRepository
from .base import CollectionRepository
from .local_repository import LocalProductRepository
from .kv_repository import KeyValueProductRepository
from .relational_repository import RelationalProductRepository
from .selection import (
    STORAGE_KV,
    STORAGE_LOCAL,
    STORAGE_RELATIONAL,
    build_repository,
    select_storage_kind,
)

__all__ = [
    # Interfaces
    'IProductRepository',

    # Clases base
    'CollectionRepository',

    # Implementaciones
    'LocalProductRepository',
    'KeyValueProductRepository',
    'RelationalProductRepository',

    # Selección
    'STORAGE_KV',
    'STORAGE_LOCAL',
    'STORAGE_RELATIONAL',
    'build_repository',
    'select_storage_kind',
]
