# ==============================================================================
# REPOSITORIO LOCAL - Memoria del proceso (+ espejo en products.json)
# ==============================================================================
# Almacenamiento por defecto cuando no hay backend remoto configurado.
#
# - La colección vive en memoria (una instancia por contenedor, sin globales)
# - Fuera de producción se replica en un archivo JSON para sobrevivir
#   reinicios del servidor de desarrollo
# - En producción NO hay archivo: los datos se pierden al reiniciar
#   (limitación documentada, no un bug)
#
# Formato de products.json:
# [
#   {"id": "1712345678901abc123xyz", "nombre": "Laptop", "marca": "Dell",
#    "inventarioActual": 5},
#   ...
# ]
# ==============================================================================

import json
import logging
import os
import threading
from dataclasses import replace
from typing import List, Optional

from app_inventario.exceptions import StorageError
from app_inventario.models import Product
from app_inventario.repositories.base import CollectionRepository

LOGGER = logging.getLogger(__name__)


class LocalProductRepository(CollectionRepository):
    """
    Repositorio de productos en memoria con espejo opcional en archivo.

    Uso:
        repo = LocalProductRepository()                      # solo memoria
        repo = LocalProductRepository('/app/data/products.json')
    """

    # Lock para evitar escrituras intercaladas al archivo
    _file_lock = threading.RLock()

    def __init__(self, file_path: Optional[str] = None):
        """
        Inicializa el repositorio.

        Args:
            file_path: Ruta al archivo espejo (None = solo memoria)
        """
        self.file_path = file_path
        self._products: List[Product] = []
        if self.file_path:
            self._products = self._load_file()

    @property
    def persistent(self) -> bool:
        """True si los datos sobreviven a un reinicio."""
        return self.file_path is not None

    def _ensure_directory(self) -> None:
        directory = os.path.dirname(self.file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def _load_file(self) -> List[Product]:
        """
        Carga el archivo espejo.

        Un archivo inexistente, corrupto o con registros inválidos se trata
        como colección vacía.
        """
        with self._file_lock:
            if not os.path.exists(self.file_path):
                return []
            try:
                with open(self.file_path, 'r', encoding='utf-8') as f:
                    raw = json.load(f)
                return [Product.from_dict(item) for item in raw]
            except (OSError, ValueError, TypeError) as e:
                LOGGER.error("Error al leer productos de %s: %s", self.file_path, e)
                return []

    def _write_file(self, products: List[Product]) -> None:
        """Escribe el archivo espejo de forma atómica (temp + replace)."""
        with self._file_lock:
            temp_path = self.file_path + '.tmp'
            try:
                self._ensure_directory()
                with open(temp_path, 'w', encoding='utf-8') as f:
                    json.dump([p.to_dict() for p in products], f, indent=2, ensure_ascii=False)
                os.replace(temp_path, self.file_path)
            except OSError as e:
                if os.path.exists(temp_path):
                    os.remove(temp_path)
                LOGGER.error("Error al guardar productos en %s: %s", self.file_path, e)
                raise StorageError("No se pudo guardar los productos") from e

    def read_all(self) -> List[Product]:
        """Retorna copias para que nadie modifique la memoria por referencia."""
        return [replace(p) for p in self._products]

    def write_all(self, products: List[Product]) -> None:
        snapshot = [replace(p) for p in products]
        if self.file_path:
            self._write_file(snapshot)
        self._products = snapshot
