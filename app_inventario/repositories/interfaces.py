# ==============================================================================
# INTERFAZ DE REPOSITORIO DE PRODUCTOS
# ==============================================================================
#
# Contrato que cumplen los tres almacenamientos:
#   - LocalProductRepository      → memoria (+ archivo JSON fuera de producción)
#   - KeyValueProductRepository   → colección completa bajo una sola clave
#   - RelationalProductRepository → tabla "productos" (Supabase/PostgREST)
#
# El servicio de inventario depende SOLO de esta interfaz. Cambiar de
# almacenamiento no requiere tocar servicios ni rutas.
#
# ==============================================================================

from typing import List, Optional, Protocol, runtime_checkable

from app_inventario.models import Product


@runtime_checkable
class IProductRepository(Protocol):
    """
    Interfaz para repositorios de productos.
    """

    def read_all(self) -> List[Product]:
        """Obtiene todos los productos en el orden natural del almacenamiento."""
        ...

    def write_all(self, products: List[Product]) -> None:
        """Reemplaza la colección completa."""
        ...

    def read_one(self, product_id: str) -> Optional[Product]:
        """Obtiene un producto por ID."""
        ...

    def create_one(self, product: Product) -> Product:
        """Guarda un producto nuevo y lo retorna."""
        ...

    def update_one(self, product_id: str, new_stock: int) -> Optional[Product]:
        """Fija el stock de un producto. None si no existe."""
        ...

    def delete_one(self, product_id: str) -> bool:
        """Elimina un producto. False si no existía."""
        ...
