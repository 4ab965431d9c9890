# ==============================================================================
# ENTIDADES DEL DOMINIO - Producto
# ==============================================================================
# El producto es la única entidad del sistema.
# Independiente del mecanismo de persistencia (archivo, clave-valor, SQL).
#
# Formato de persistencia y de la API (nombres heredados en español):
#   {"id": "...", "nombre": "...", "marca": "...", "inventarioActual": 0}
# ==============================================================================

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Product:
    """
    Representa un producto del inventario.

    Attributes:
        id: Identificador opaco, inmutable tras la creación
        name: Nombre del producto
        brand: Marca
        current_stock: Cantidad actual en inventario (nunca negativa)
    """
    id: str
    name: str
    brand: str
    current_stock: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario para persistencia y respuestas JSON."""
        return {
            'id': self.id,
            'nombre': self.name,
            'marca': self.brand,
            'inventarioActual': self.current_stock,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Product':
        """
        Crea instancia desde diccionario.

        Acepta las claves en español (formato almacenado) o en inglés.

        Raises:
            ValueError: Si el registro no tiene id o el stock no es un
                entero no negativo (se aceptan "3" y 3.0; no 2.7, -4 ni bool)
        """
        if not isinstance(data, dict):
            raise ValueError(f"Registro de producto inválido: {data!r}")

        product_id = data.get('id')
        if product_id is None or str(product_id) == '':
            raise ValueError("Registro de producto sin id")

        raw_stock = data.get('inventarioActual', data.get('currentStock'))
        stock = _parse_stock(raw_stock)
        if stock is None:
            raise ValueError(f"Stock inválido en producto {product_id}: {raw_stock!r}")

        return cls(
            id=str(product_id),
            name=data.get('nombre', data.get('name', '')) or '',
            brand=data.get('marca', data.get('brand', '')) or '',
            current_stock=stock,
        )


def _parse_stock(value: Any):
    """Stock almacenado como entero >= 0, o None si no es válido."""
    if value is None or value == '':
        return 0
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    elif isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    elif not isinstance(value, int):
        return None
    return value if value >= 0 else None
