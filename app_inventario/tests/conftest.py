# -*- coding: utf-8 -*-
import os

import pytest

# Sin logs de rendimiento ni backends remotos durante los tests
os.environ['INVENTARIO_PROFILING'] = '0'
for _var in ('SUPABASE_URL', 'SUPABASE_KEY', 'SUPABASE_ANON_KEY', 'KV_REST_API_URL', 'KV_REST_API_TOKEN'):
    os.environ.pop(_var, None)

from app_inventario.app_container import AppContainer, get_container
from app_inventario.config import AppConfig
from app_inventario.repositories import (
    KeyValueProductRepository,
    LocalProductRepository,
    RelationalProductRepository,
)
from app_inventario.services import InventoryService
from app_inventario.tests.fakes import FakeKVSession, FakePostgrestSession


@pytest.fixture
def local_repo():
    return LocalProductRepository()


@pytest.fixture
def kv_session():
    return FakeKVSession()


@pytest.fixture
def kv_repo(kv_session):
    return KeyValueProductRepository('https://kv.example.com', 'token-kv', session=kv_session)


@pytest.fixture
def pg_session():
    return FakePostgrestSession()


@pytest.fixture
def relational_repo(pg_session):
    return RelationalProductRepository('https://xyz.supabase.co', 'anon-key', session=pg_session)


@pytest.fixture(params=['local', 'kv', 'relational'])
def any_repo(request):
    """Los tres almacenamientos deben comportarse igual hacia afuera."""
    if request.param == 'local':
        return LocalProductRepository()
    if request.param == 'kv':
        return KeyValueProductRepository('https://kv.example.com', 'token-kv', session=FakeKVSession())
    return RelationalProductRepository('https://xyz.supabase.co', 'anon-key', session=FakePostgrestSession())


@pytest.fixture
def service(any_repo):
    return InventoryService(any_repo)


@pytest.fixture
def client(tmp_path):
    from app_inventario.main import app

    AppContainer.reset_instance()
    get_container(AppConfig(data_dir=str(tmp_path)), product_repo=LocalProductRepository())
    with app.test_client() as c:
        yield c
    AppContainer.reset_instance()
