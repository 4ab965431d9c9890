# ==============================================================================
# CONTENEDOR DE DEPENDENCIAS - Inyección de servicios
# ==============================================================================
# Punto único para obtener el repositorio de productos y el servicio de
# inventario. Facilita:
#   - Elegir el almacenamiento UNA vez por proceso (relacional → kv → local)
#   - Testing (se inyecta un repositorio propio, sin tocar el entorno)
#   - Cambiar de backend sin tocar servicios ni rutas
# ==============================================================================

from typing import Optional

from app_inventario.config import AppConfig
from app_inventario.repositories import IProductRepository, build_repository
from app_inventario.services import InventoryService


class AppContainer:
    """
    Contenedor de dependencias de la aplicación.

    Implementa el patrón Singleton: un repositorio y un servicio por proceso.

    Uso:
        container = AppContainer(config=AppConfig.from_env())
        inventory_service = container.inventory_service
    """

    _instance: Optional['AppContainer'] = None

    def __new__(cls, config: AppConfig = None, product_repo: IProductRepository = None):
        """Singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config: AppConfig = None, product_repo: IProductRepository = None):
        """
        Inicializa el contenedor.

        Args:
            config: Configuración (por defecto se lee del entorno)
            product_repo: Repositorio ya construido (omite la selección)
        """
        if self._initialized:
            return

        self.config = config or AppConfig.from_env()

        # Lazy loading
        self._product_repo: Optional[IProductRepository] = product_repo
        self._inventory_service: Optional[InventoryService] = None

        self._initialized = True

    # =========================================================================
    # REPOSITORIOS
    # =========================================================================

    @property
    def product_repo(self) -> IProductRepository:
        """Repositorio de productos (se elige en el primer acceso)."""
        if self._product_repo is None:
            self._product_repo = build_repository(self.config)
        return self._product_repo

    # =========================================================================
    # SERVICIOS
    # =========================================================================

    @property
    def inventory_service(self) -> InventoryService:
        """Servicio de inventario (singleton)."""
        if self._inventory_service is None:
            self._inventory_service = InventoryService(self.product_repo)
        return self._inventory_service

    # =========================================================================
    # UTILIDADES
    # =========================================================================

    def reset(self) -> None:
        """
        Descarta repositorio y servicio.
        El próximo acceso vuelve a elegir almacenamiento.
        """
        self._product_repo = None
        self._inventory_service = None

    @classmethod
    def get_instance(
        cls,
        config: AppConfig = None,
        product_repo: IProductRepository = None
    ) -> 'AppContainer':
        """
        Obtiene la instancia singleton del contenedor.

        Los argumentos solo se usan en la primera llamada.
        """
        if cls._instance is None:
            return cls(config, product_repo)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Elimina la instancia singleton (útil para tests)."""
        if cls._instance is not None:
            cls._instance.reset()
            cls._instance = None


def get_container(config: AppConfig = None, product_repo: IProductRepository = None) -> AppContainer:
    """
    Obtiene el contenedor de dependencias global.

    Args:
        config: Configuración (solo en la primera llamada)
        product_repo: Repositorio a inyectar (solo en la primera llamada)

    Returns:
        Instancia del contenedor
    """
    return AppContainer.get_instance(config, product_repo)
