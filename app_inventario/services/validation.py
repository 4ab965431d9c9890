# ==============================================================================
# VALIDACIONES DE PRODUCTO
# ==============================================================================
# Reglas de la entidad que se verifican ANTES de llegar al almacenamiento.
# Sin efectos secundarios: solo retornan valores normalizados o lanzan
# ValidationError.
# ==============================================================================

import math
from typing import Any, Tuple

from app_inventario.exceptions import ValidationError


def _is_number(value: Any) -> bool:
    # bool es subclase de int: True/False no son cantidades
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_text(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def _as_whole_number(value: Any, message: str) -> int:
    """Acepta int o float entero y finito (5.0 llega así desde JSON)."""
    if not _is_number(value):
        raise ValidationError(message)
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise ValidationError(message)
        return int(value)
    return value


def validate_create(name: Any, brand: Any, initial_stock: Any) -> Tuple[str, str, int]:
    """
    Valida los datos de un producto nuevo.

    Args:
        name: Nombre del producto
        brand: Marca
        initial_stock: Inventario inicial

    Returns:
        Tupla (nombre, marca, stock) normalizada

    Raises:
        ValidationError: Si algún campo es inválido
    """
    name = _require_text(name, "El nombre es requerido")
    brand = _require_text(brand, "La marca es requerida")
    stock = _as_whole_number(
        initial_stock,
        "El inventario inicial debe ser un número entero mayor o igual a 0"
    )
    if stock < 0:
        raise ValidationError("El inventario inicial debe ser un número entero mayor o igual a 0")
    return name, brand, stock


def validate_adjustment(delta: Any) -> int:
    """
    Valida la cantidad a sumar (positiva) o restar (negativa).

    Raises:
        ValidationError: Si no es un número entero finito
    """
    return _as_whole_number(delta, "La cantidad es requerida y debe ser un número entero")
