# ==============================================================================
# CAPA DE SERVICIOS - Lógica de negocio
# ==============================================================================
# PRINCIPIOS:
# 1. Las rutas (controllers) solo llaman a servicios
# 2. Los servicios aplican reglas de negocio y validaciones
# 3. Los servicios NO conocen el tipo de almacenamiento (archivo/KV/SQL)
#
# ESTRUCTURA:
# ├── inventory_service.py → Productos y stock
# └── validation.py        → Validaciones de entrada
# ==============================================================================

from app_inventario.services.inventory_service import InventoryService, generate_product_id
from app_inventario.services.validation import validate_adjustment, validate_create

__all__ = [
    'InventoryService',
    'generate_product_id',
    'validate_adjustment',
    'validate_create',
]
