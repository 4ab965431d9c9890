# ==============================================================================
# REPOSITORIO RELACIONAL - Supabase (PostgREST)
# ==============================================================================
# Tabla "productos" (ver productos.sql en la raíz del repo):
#   id TEXT PRIMARY KEY, nombre TEXT, marca TEXT,
#   "inventarioActual" INTEGER NOT NULL DEFAULT 0
#
# Cada operación puntual es UNA petición sobre una fila (id=eq.<id>).
#
# POLÍTICA DE ERRORES: toda falla lanza StorageError con un mensaje por
# operación. La creación incluye el texto del backend en el mensaje; las
# rutas nunca lo devuelven al cliente, solo queda en el log.
#
# ADVERTENCIA write_all(): borra todo y luego inserta. NO es atómico: un
# lector concurrente puede ver la tabla vacía, y si la inserción falla los
# datos borrados se pierden.
# ==============================================================================

import logging
from typing import Any, Dict, List, Optional

import requests

from app_inventario.exceptions import StorageError
from app_inventario.models import Product

LOGGER = logging.getLogger(__name__)


class RelationalProductRepository:
    """
    Repositorio de productos sobre la API REST de Supabase.

    Uso:
        repo = RelationalProductRepository(
            'https://xyz.supabase.co', api_key='...', table='productos'
        )
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        table: str = 'productos',
        timeout: float = 10.0,
        session: requests.Session = None
    ):
        """
        Inicializa el repositorio.

        Args:
            base_url: URL del proyecto Supabase
            api_key: API key (anon o service role)
            table: Nombre de la tabla
            timeout: Timeout por petición (segundos)
            session: Sesión HTTP (inyectable para tests)
        """
        self.table_url = f"{base_url.rstrip('/')}/rest/v1/{table}"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'apikey': api_key,
            'Authorization': f'Bearer {api_key}',
            'Content-Type': 'application/json',
        })

    # =========================================================================
    # HELPERS HTTP
    # =========================================================================

    def _request(
        self,
        method: str,
        error_message: str,
        params: Dict[str, str] = None,
        json_body: Any = None,
        representation: bool = False,
        include_detail: bool = False
    ) -> Any:
        """
        Ejecuta una petición y retorna el JSON de respuesta (o None).

        Raises:
            StorageError: Ante cualquier falla de red, HTTP o de formato
        """
        headers = {'Prefer': 'return=representation'} if representation else None
        try:
            resp = self.session.request(
                method,
                self.table_url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout
            )
            resp.raise_for_status()
            if not resp.content:
                return None
            return resp.json()
        except requests.exceptions.HTTPError as e:
            detail = self._error_detail(e.response)
            LOGGER.error("%s: %s", error_message, detail)
            if include_detail:
                raise StorageError(f"{error_message}: {detail}") from e
            raise StorageError(error_message) from e
        except requests.exceptions.RequestException as e:
            LOGGER.error("%s: %s", error_message, e)
            if include_detail:
                raise StorageError(f"{error_message}: {e}") from e
            raise StorageError(error_message) from e
        except ValueError as e:
            LOGGER.error("%s: respuesta no es JSON (%s)", error_message, e)
            raise StorageError(error_message) from e

    @staticmethod
    def _error_detail(response) -> str:
        if response is None:
            return 'sin respuesta'
        try:
            body = response.json()
        except ValueError:
            return response.text or str(response.status_code)
        if isinstance(body, dict):
            return body.get('message') or body.get('error') or str(body)
        return str(body)

    def _to_products(self, rows: Any, error_message: str) -> List[Product]:
        if rows is None:
            return []
        try:
            return [Product.from_dict(row) for row in rows]
        except (TypeError, ValueError) as e:
            LOGGER.error("%s: fila inválida (%s)", error_message, e)
            raise StorageError(error_message) from e

    @staticmethod
    def _by_id(product_id: str) -> Dict[str, str]:
        return {'id': f'eq.{product_id}'}

    # =========================================================================
    # COLECCIÓN COMPLETA
    # =========================================================================

    def read_all(self) -> List[Product]:
        """Todos los productos ordenados por clave primaria."""
        message = "Error al obtener productos"
        rows = self._request('GET', message, params={'select': '*', 'order': 'id.asc'})
        return self._to_products(rows, message)

    def write_all(self, products: List[Product]) -> None:
        """Borra todas las filas y reinserta la colección (no atómico)."""
        self._request(
            'DELETE',
            "Error al limpiar productos",
            params={'id': 'not.is.null'}
        )
        if products:
            self._request(
                'POST',
                "Error al guardar productos",
                json_body=[p.to_dict() for p in products]
            )

    # =========================================================================
    # OPERACIONES PUNTUALES
    # =========================================================================

    def read_one(self, product_id: str) -> Optional[Product]:
        message = "Error al obtener producto"
        params = dict(self._by_id(product_id), select='*')
        products = self._to_products(self._request('GET', message, params=params), message)
        return products[0] if products else None

    def create_one(self, product: Product) -> Product:
        message = "Error al crear producto"
        rows = self._request(
            'POST',
            message,
            json_body=product.to_dict(),
            representation=True,
            include_detail=True
        )
        created = self._to_products(rows, message)
        return created[0] if created else product

    def update_one(self, product_id: str, new_stock: int) -> Optional[Product]:
        message = "Error al actualizar inventario"
        rows = self._request(
            'PATCH',
            message,
            params=self._by_id(product_id),
            json_body={'inventarioActual': new_stock},
            representation=True
        )
        updated = self._to_products(rows, message)
        return updated[0] if updated else None

    def delete_one(self, product_id: str) -> bool:
        message = "Error al eliminar producto"
        rows = self._request(
            'DELETE',
            message,
            params=self._by_id(product_id),
            representation=True
        )
        return bool(rows)
