# ==============================================================================
# REPOSITORIO CLAVE-VALOR - Vercel KV / Upstash (API REST)
# ==============================================================================
# Toda la colección se guarda como UN string JSON bajo una sola clave:
#
#   GET  {url}/get/productos   → {"result": "[{...}, {...}]"}   (o null)
#   POST {url}/set/productos   body: "[{...}, {...}]"  → {"result": "OK"}
#
# POLÍTICA DE ERRORES:
# - Lectura: falla "suave". Errores de red o datos corruptos se registran en
#   el log y se retorna lista vacía (oculta fallas reales como "sin datos").
# - Escritura: lanza StorageError.
# ==============================================================================

import json
import logging
from typing import List
from urllib.parse import quote

import requests

from app_inventario.exceptions import StorageError
from app_inventario.models import Product
from app_inventario.repositories.base import CollectionRepository

LOGGER = logging.getLogger(__name__)


class KeyValueProductRepository(CollectionRepository):
    """
    Repositorio de productos sobre un almacén clave-valor REST.

    Uso:
        repo = KeyValueProductRepository(
            'https://xxx.upstash.io', token='...', key='productos'
        )
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        key: str = 'productos',
        timeout: float = 10.0,
        session: requests.Session = None
    ):
        """
        Inicializa el repositorio.

        Args:
            base_url: URL REST del almacén
            token: Token Bearer
            key: Clave donde vive la colección
            timeout: Timeout por petición (segundos)
            session: Sesión HTTP (inyectable para tests)
        """
        self.base_url = base_url.rstrip('/')
        self.key = key
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Authorization': f'Bearer {token}'})

    def _url(self, command: str) -> str:
        return f"{self.base_url}/{command}/{quote(self.key, safe='')}"

    def _decode(self, result) -> List[Product]:
        if result is None:
            return []
        if isinstance(result, (str, bytes)):
            result = json.loads(result)
        if not isinstance(result, list):
            raise ValueError(f"La clave '{self.key}' no contiene una lista")
        return [Product.from_dict(item) for item in result]

    def read_all(self) -> List[Product]:
        try:
            resp = self.session.get(self._url('get'), timeout=self.timeout)
            resp.raise_for_status()
            return self._decode(resp.json().get('result'))
        except requests.exceptions.RequestException as e:
            LOGGER.error("Error al leer productos de KV: %s", e)
            return []
        except (ValueError, TypeError, AttributeError) as e:
            LOGGER.error("Datos inválidos en KV bajo '%s': %s", self.key, e)
            return []

    def write_all(self, products: List[Product]) -> None:
        payload = json.dumps([p.to_dict() for p in products], ensure_ascii=False)
        try:
            resp = self.session.post(
                self._url('set'),
                data=payload.encode('utf-8'),
                timeout=self.timeout
            )
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            LOGGER.error("Error al guardar productos en KV: %s", e)
            raise StorageError("No se pudo guardar los productos") from e
