# ==============================================================================
# CONFIGURACIÓN - Variables de entorno
# ==============================================================================
# Toda la configuración se lee del entorno (igual en local y en Render).
#
# ALMACENAMIENTO (se elige el primero con configuración completa):
#   1. Relacional (Supabase):   SUPABASE_URL + SUPABASE_KEY
#   2. Clave-valor (Vercel KV): KV_REST_API_URL + KV_REST_API_TOKEN
#   3. Local (memoria/archivo): sin variables
#
# MODO PRODUCCIÓN:
#   export APP_ENV=production
#   En producción el almacenamiento local NO escribe archivo: los datos
#   se pierden al reiniciar el proceso.
# ==============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional


DEFAULT_TABLE = 'productos'
DEFAULT_KV_KEY = 'productos'
DEFAULT_TIMEOUT = 10.0


def _clean(value: Optional[str]) -> str:
    """Normaliza un valor de entorno: None y espacios cuentan como vacío."""
    return (value or '').strip()


def _to_float(value: str, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


@dataclass
class AppConfig:
    """
    Configuración de la aplicación.

    Attributes:
        relational_url: URL base del proyecto Supabase
        relational_key: API key de Supabase
        relational_table: Tabla de productos
        kv_url: URL REST del almacén clave-valor
        kv_token: Token del almacén clave-valor
        kv_key: Clave bajo la que se guarda la colección
        production: True si APP_ENV=production
        data_dir: Carpeta del archivo local y de los logs
        request_timeout: Timeout (segundos) para backends remotos
        enable_profiling: Activa los logs de rendimiento por ruta
        log_level: Nivel del logging estándar
    """
    relational_url: str = ''
    relational_key: str = ''
    relational_table: str = DEFAULT_TABLE
    kv_url: str = ''
    kv_token: str = ''
    kv_key: str = DEFAULT_KV_KEY
    production: bool = False
    data_dir: str = ''
    request_timeout: float = DEFAULT_TIMEOUT
    enable_profiling: bool = True
    log_level: str = 'INFO'

    def __post_init__(self):
        if not self.data_dir:
            self.data_dir = os.path.join(os.getcwd(), 'data')

    @property
    def products_file(self) -> Optional[str]:
        """Archivo espejo del almacenamiento local (None en producción)."""
        if self.production:
            return None
        return os.path.join(self.data_dir, 'products.json')

    @property
    def logs_dir(self) -> str:
        return os.path.join(self.data_dir, 'logs')

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> 'AppConfig':
        """
        Construye la configuración desde variables de entorno.

        Args:
            environ: Mapeo de variables (por defecto os.environ)

        Returns:
            Instancia de AppConfig
        """
        env = os.environ if environ is None else environ

        return cls(
            relational_url=_clean(env.get('SUPABASE_URL')),
            relational_key=_clean(env.get('SUPABASE_KEY')) or _clean(env.get('SUPABASE_ANON_KEY')),
            relational_table=_clean(env.get('SUPABASE_TABLE')) or DEFAULT_TABLE,
            kv_url=_clean(env.get('KV_REST_API_URL')),
            kv_token=_clean(env.get('KV_REST_API_TOKEN')),
            kv_key=_clean(env.get('KV_KEY')) or DEFAULT_KV_KEY,
            production=_clean(env.get('APP_ENV')).lower() == 'production',
            data_dir=_clean(env.get('INVENTARIO_DATA_DIR')),
            request_timeout=_to_float(_clean(env.get('INVENTARIO_HTTP_TIMEOUT')), DEFAULT_TIMEOUT),
            enable_profiling=_clean(env.get('INVENTARIO_PROFILING')) != '0',
            log_level=(_clean(env.get('INVENTARIO_LOG_LEVEL')) or 'INFO').upper(),
        )
