# ==============================================================================
# SERVICIO DE INVENTARIO
# ==============================================================================
# Centraliza toda la lógica de negocio de productos y stock.
#
# REGLAS:
# - El stock nunca queda negativo: un ajuste que baje de 0 se fija en 0
#   (no es un error). La UI valida antes de disminuir; el servicio no.
# - Sin caché: cada operación vuelve a leer del repositorio.
# - "No encontrado" se reporta con None / False, nunca creando registros.
# ==============================================================================

import logging
import random
import string
import time
import unicodedata
from typing import Callable, List, Optional

from app_inventario.models import Product
from app_inventario.repositories.interfaces import IProductRepository
from app_inventario.services.validation import validate_adjustment, validate_create

LOGGER = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_RANDOM_LENGTH = 9


def generate_product_id() -> str:
    """
    Genera un ID único: milisegundos actuales + 9 caracteres base-36 al azar.

    Returns:
        ID opaco, ej. "1712345678901k3j9x0q2a"
    """
    millis = time.time_ns() // 1_000_000
    suffix = ''.join(random.choices(_ID_ALPHABET, k=_ID_RANDOM_LENGTH))
    return f"{millis}{suffix}"


def _fold(text: str) -> str:
    """Minúsculas y sin tildes, para búsquedas."""
    decomposed = unicodedata.normalize('NFKD', text or '')
    return ''.join(c for c in decomposed if not unicodedata.combining(c)).casefold()


class InventoryService:
    """
    Servicio para gestión de inventario.

    Responsabilidades:
    - Alta, consulta y baja de productos
    - Ajuste de stock (entradas y salidas) con piso en cero
    - Búsqueda por nombre o marca
    - Generación de IDs
    """

    def __init__(
        self,
        product_repo: IProductRepository,
        id_factory: Callable[[], str] = generate_product_id
    ):
        """
        Inicializa el servicio de inventario.

        Args:
            product_repo: Repositorio de productos (local, kv o relacional)
            id_factory: Generador de IDs (reemplazable en tests)
        """
        self.product_repo = product_repo
        self.id_factory = id_factory

    # =========================================================================
    # CONSULTAS
    # =========================================================================

    def list_products(self) -> List[Product]:
        """
        Obtiene todos los productos.

        Returns:
            Lista en el orden natural del almacenamiento
        """
        return self.product_repo.read_all()

    def search_products(self, query: str) -> List[Product]:
        """
        Filtra productos cuyo nombre o marca contiene el texto buscado.
        Ignora mayúsculas y tildes. Búsqueda vacía = todos.
        """
        products = self.list_products()
        needle = _fold(query).strip()
        if not needle:
            return products
        return [
            p for p in products
            if needle in _fold(p.name) or needle in _fold(p.brand)
        ]

    def get_product(self, product_id: str) -> Optional[Product]:
        """
        Obtiene un producto por su ID.

        Args:
            product_id: ID del producto

        Returns:
            El producto o None si no existe
        """
        return self.product_repo.read_one(product_id)

    # =========================================================================
    # MUTACIONES
    # =========================================================================

    def create_product(self, name: str, brand: str, initial_stock: int) -> Product:
        """
        Crea un producto nuevo.

        Args:
            name: Nombre
            brand: Marca
            initial_stock: Inventario inicial (>= 0)

        Returns:
            El producto creado con su ID

        Raises:
            ValidationError: Datos inválidos
            StorageError: Falla del almacenamiento
        """
        name, brand, stock = validate_create(name, brand, initial_stock)
        product = Product(
            id=self.id_factory(),
            name=name,
            brand=brand,
            current_stock=stock
        )
        created = self.product_repo.create_one(product)
        LOGGER.info("Producto creado: %s (%s / %s) stock=%d", created.id, name, brand, stock)
        return created

    def adjust_stock(self, product_id: str, delta: int) -> Optional[Product]:
        """
        Suma (delta > 0) o resta (delta < 0) stock a un producto.

        Si la resta supera el stock actual, el resultado es 0.

        Args:
            product_id: ID del producto
            delta: Cantidad con signo

        Returns:
            Producto actualizado o None si no existe

        Raises:
            ValidationError: Delta inválido
            StorageError: Falla del almacenamiento
        """
        delta = validate_adjustment(delta)

        product = self.product_repo.read_one(product_id)
        if product is None:
            return None

        new_stock = max(0, product.current_stock + delta)
        updated = self.product_repo.update_one(product_id, new_stock)
        if updated is not None:
            LOGGER.info(
                "Stock ajustado: %s %d → %d (delta %+d)",
                product_id, product.current_stock, new_stock, delta
            )
        return updated

    def delete_product(self, product_id: str) -> bool:
        """
        Elimina un producto.

        Returns:
            True si se eliminó, False si no existía
        """
        removed = self.product_repo.delete_one(product_id)
        if removed:
            LOGGER.info("Producto eliminado: %s", product_id)
        return removed
