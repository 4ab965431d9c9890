# -*- coding: utf-8 -*-
"""
Dobles de prueba para los backends remotos.

FakeKVSession y FakePostgrestSession imitan requests.Session lo suficiente
para que los repositorios hablen con un almacén en memoria.
"""
import json

import requests


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        if body is None:
            self.content = b''
        elif isinstance(body, bytes):
            self.content = body
        else:
            self.content = json.dumps(body).encode('utf-8')

    @property
    def text(self):
        return self.content.decode('utf-8')

    def json(self):
        return json.loads(self.content.decode('utf-8'))

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)


class _FakeSession:
    """Base: cabeceras, registro de llamadas y fallas programadas."""

    def __init__(self):
        self.headers = {}
        self.calls = []
        self.fail_with = None  # excepción o FakeResponse a devolver una vez

    def _take_failure(self):
        failure, self.fail_with = self.fail_with, None
        if isinstance(failure, Exception):
            raise failure
        return failure


class FakeKVSession(_FakeSession):
    """Almacén clave-valor estilo Upstash: /get/<key> y /set/<key>."""

    def __init__(self):
        super().__init__()
        self.store = {}

    def get(self, url, timeout=None):
        self.calls.append(('GET', url))
        failure = self._take_failure()
        if failure is not None:
            return failure
        key = url.rsplit('/', 1)[-1]
        return FakeResponse(200, {'result': self.store.get(key)})

    def post(self, url, data=None, timeout=None):
        self.calls.append(('POST', url))
        failure = self._take_failure()
        if failure is not None:
            return failure
        key = url.rsplit('/', 1)[-1]
        self.store[key] = data.decode('utf-8') if isinstance(data, bytes) else data
        return FakeResponse(200, {'result': 'OK'})


class FakePostgrestSession(_FakeSession):
    """Tabla PostgREST en memoria con filtros id=eq.<id> e id=not.is.null."""

    def __init__(self):
        super().__init__()
        self.rows = {}

    def _matching(self, params):
        flt = (params or {}).get('id')
        if flt is None or flt == 'not.is.null':
            return list(self.rows.values())
        if flt.startswith('eq.'):
            row = self.rows.get(flt[3:])
            return [row] if row else []
        raise AssertionError(f"filtro no soportado: {flt}")

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append((method, url, params, json))
        failure = self._take_failure()
        if failure is not None:
            return failure

        wants_rows = bool(headers and headers.get('Prefer') == 'return=representation')

        if method == 'GET':
            rows = sorted(self._matching(params), key=lambda r: r['id'])
            return FakeResponse(200, [dict(r) for r in rows])

        if method == 'POST':
            payload = json if isinstance(json, list) else [json]
            for row in payload:
                if row['id'] in self.rows:
                    return FakeResponse(409, {
                        'code': '23505',
                        'message': 'duplicate key value violates unique constraint "productos_pkey"',
                    })
            for row in payload:
                self.rows[row['id']] = dict(row)
            return FakeResponse(201, [dict(r) for r in payload] if wants_rows else None)

        if method == 'PATCH':
            rows = self._matching(params)
            for row in rows:
                row.update(json)
            return FakeResponse(200, [dict(r) for r in rows] if wants_rows else None)

        if method == 'DELETE':
            rows = self._matching(params)
            for row in rows:
                del self.rows[row['id']]
            return FakeResponse(200 if wants_rows else 204, [dict(r) for r in rows] if wants_rows else None)

        raise AssertionError(f"método no soportado: {method}")
