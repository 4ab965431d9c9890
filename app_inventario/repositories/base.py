# ==============================================================================
# REPOSITORIO BASE - Colección completa como un solo valor
# ==============================================================================
# Los almacenamientos local y clave-valor guardan TODA la lista de productos
# junta. Las operaciones puntuales se implementan como leer-modificar-escribir
# sobre read_all / write_all.
#
# LIMITACIÓN: sin token de versión. Dos escrituras concurrentes sobre la misma
# colección → gana la última (last-write-wins).
# ==============================================================================

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import List, Optional

from app_inventario.models import Product


class CollectionRepository(ABC):
    """
    Clase base abstracta para repositorios de colección completa.

    Las subclases solo implementan read_all() y write_all().
    """

    @abstractmethod
    def read_all(self) -> List[Product]:
        """
        Lee la colección completa.

        Returns:
            Lista de productos en orden de inserción
        """
        pass

    @abstractmethod
    def write_all(self, products: List[Product]) -> None:
        """
        Reemplaza la colección completa.

        Args:
            products: Lista completa de productos
        """
        pass

    def _find_index(self, products: List[Product], product_id: str) -> int:
        for index, product in enumerate(products):
            if product.id == product_id:
                return index
        return -1

    def read_one(self, product_id: str) -> Optional[Product]:
        """
        Obtiene un producto por su ID.

        Args:
            product_id: ID del producto

        Returns:
            El producto o None si no existe
        """
        products = self.read_all()
        index = self._find_index(products, product_id)
        return products[index] if index >= 0 else None

    def create_one(self, product: Product) -> Product:
        """
        Agrega un producto al final de la colección.

        Args:
            product: Producto ya validado y con ID

        Returns:
            El producto guardado
        """
        products = self.read_all()
        products.append(product)
        self.write_all(products)
        return product

    def update_one(self, product_id: str, new_stock: int) -> Optional[Product]:
        """
        Fija el stock de un producto existente.

        Args:
            product_id: ID del producto
            new_stock: Nuevo stock (ya ajustado por el servicio)

        Returns:
            Producto actualizado o None si no existía
        """
        products = self.read_all()
        index = self._find_index(products, product_id)
        if index < 0:
            return None
        products[index] = replace(products[index], current_stock=new_stock)
        self.write_all(products)
        return products[index]

    def delete_one(self, product_id: str) -> bool:
        """
        Elimina un producto.

        Args:
            product_id: ID del producto a eliminar

        Returns:
            True si se eliminó, False si no existía
        """
        products = self.read_all()
        index = self._find_index(products, product_id)
        if index < 0:
            return False
        products.pop(index)
        self.write_all(products)
        return True
