# -*- coding: utf-8 -*-
"""
Reglas del servicio de inventario, verificadas contra los tres
almacenamientos (fixture `service` parametrizada en conftest).
"""
import itertools
import re

import pytest

from app_inventario.exceptions import ValidationError
from app_inventario.repositories import LocalProductRepository
from app_inventario.services import InventoryService, generate_product_id


def test_create_then_get_round_trip(service):
    created = service.create_product("Laptop", "Dell", 5)

    found = service.get_product(created.id)
    assert found is not None
    assert (found.name, found.brand, found.current_stock) == ("Laptop", "Dell", 5)


def test_create_stores_trimmed_fields(service):
    created = service.create_product("  Teclado ", " Logitech ", 2)
    assert service.get_product(created.id).name == "Teclado"
    assert service.get_product(created.id).brand == "Logitech"


def test_create_assigns_distinct_ids(service):
    ids = {service.create_product(f"P{i}", "Marca", i).id for i in range(5)}
    assert len(ids) == 5


@pytest.mark.parametrize("name, brand, stock", [
    ("", "Dell", 5),
    ("Laptop", "Dell", -1),
    ("Laptop", "   ", 1),
])
def test_create_rejects_invalid_input(service, name, brand, stock):
    with pytest.raises(ValidationError):
        service.create_product(name, brand, stock)
    assert service.list_products() == []


def test_list_contains_every_created_product(service):
    a = service.create_product("A", "X", 1)
    b = service.create_product("B", "Y", 2)
    c = service.create_product("C", "Z", 3)

    assert {p.id for p in service.list_products()} == {a.id, b.id, c.id}


def test_adjust_stock_adds_and_subtracts(service):
    p = service.create_product("Monitor", "LG", 4)

    assert service.adjust_stock(p.id, 6).current_stock == 10
    assert service.adjust_stock(p.id, -2).current_stock == 8
    assert service.get_product(p.id).current_stock == 8


def test_adjust_stock_clamps_at_zero(service):
    p = service.create_product("Monitor", "LG", 4)

    updated = service.adjust_stock(p.id, -100)

    assert updated.current_stock == 0
    assert service.get_product(p.id).current_stock == 0


@pytest.mark.parametrize("delta", [-1, -5, -1000, 3, 0])
def test_stock_never_negative(service, delta):
    p = service.create_product("Cable", "Genérico", 2)
    assert service.adjust_stock(p.id, delta).current_stock >= 0


def test_adjust_missing_product_returns_none_and_creates_nothing(service):
    assert service.adjust_stock("no-existe", 5) is None
    assert service.list_products() == []


def test_adjust_zero_stock_product_is_not_confused_with_missing(service):
    p = service.create_product("Agotado", "X", 0)
    updated = service.adjust_stock(p.id, -1)
    assert updated is not None
    assert updated.current_stock == 0


def test_adjust_rejects_invalid_delta(service):
    p = service.create_product("Mouse", "HP", 1)
    with pytest.raises(ValidationError):
        service.adjust_stock(p.id, float("nan"))
    assert service.get_product(p.id).current_stock == 1


def test_delete_twice_returns_true_then_false(service):
    p = service.create_product("Silla", "Ikea", 1)

    assert service.delete_product(p.id) is True
    assert service.delete_product(p.id) is False


def test_full_lifecycle_scenario(service):
    p1 = service.create_product("P1", "Marca", 10)

    assert service.adjust_stock(p1.id, -3).current_stock == 7
    assert service.adjust_stock(p1.id, -100).current_stock == 0
    assert service.delete_product(p1.id) is True
    assert service.get_product(p1.id) is None


def test_delete_keeps_other_products(service):
    keep = service.create_product("Queda", "X", 1)
    gone = service.create_product("Se va", "Y", 1)

    service.delete_product(gone.id)

    assert [p.id for p in service.list_products()] == [keep.id]


# ─────────────────────────────────────────────────────────────────────────────
# Búsqueda
# ─────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def catalog():
    counter = itertools.count(1)
    svc = InventoryService(LocalProductRepository(), id_factory=lambda: f"id{next(counter)}")
    svc.create_product("Cámara Réflex", "Canon", 2)
    svc.create_product("Laptop", "Dell", 5)
    svc.create_product("Monitor", "Dell", 1)
    return svc


def test_search_matches_name_or_brand_ignoring_case_and_accents(catalog):
    assert [p.name for p in catalog.search_products("camara")] == ["Cámara Réflex"]
    assert [p.name for p in catalog.search_products("DELL")] == ["Laptop", "Monitor"]


def test_search_blank_query_returns_everything(catalog):
    assert len(catalog.search_products("   ")) == 3


def test_search_without_matches(catalog):
    assert catalog.search_products("impresora") == []


def test_local_list_keeps_insertion_order(catalog):
    assert [p.id for p in catalog.list_products()] == ["id1", "id2", "id3"]


# ─────────────────────────────────────────────────────────────────────────────
# IDs
# ─────────────────────────────────────────────────────────────────────────────

def test_generated_id_is_timestamp_plus_random_suffix():
    pid = generate_product_id()
    assert re.fullmatch(r"\d{13,}[0-9a-z]{9}", pid)


def test_generated_ids_do_not_repeat():
    assert len({generate_product_id() for _ in range(500)}) == 500
