"""
Tests for the HTTP surface: route guard middleware, login/logout and the cart endpoints.
"""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from ventas.infrastructure.store.memory_token_store import MemoryTokenStore
from ventas.main import app
from ventas.wiring.dependencies import build_container, set_container

from conftest import make_client

LOGIN = {"username": "caja1", "password": "secreto"}


@pytest.fixture
def container(backend):
    c = build_container(client=make_client(backend), store=MemoryTokenStore())
    set_container(c)
    yield c
    set_container(None)


@pytest.fixture
def web(container):
    with TestClient(app, follow_redirects=False) as client:
        yield client


def _login(web) -> None:
    resp = web.post("/", json=LOGIN)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/panel"


def test_health_is_public(web):
    assert web.get("/health").json() == {"status": "ok"}


def test_panel_requires_session(web):
    resp = web.get("/panel")
    assert resp.status_code == 303
    assert resp.headers["location"] == "/"

    resp = web.get("/panel/carrito")
    assert resp.headers["location"] == "/"


def test_login_page_redirects_once_authenticated(web, container):
    assert web.get("/").json() == {"page": "login"}

    _login(web)

    assert container.session.is_authenticated() is True
    resp = web.get("/")
    assert resp.status_code == 303
    assert resp.headers["location"] == "/panel"


def test_bad_credentials_return_server_message(web, backend, container):
    backend.json("POST", "/token/", 401, {"detail": "No active account found with the given credentials"})

    resp = web.post("/", json=LOGIN)

    assert resp.status_code == 401
    assert resp.json() == {"detail": "No active account found with the given credentials"}
    assert container.session.is_authenticated() is False


def test_logout_clears_session(web, container):
    _login(web)

    resp = web.post("/logout")

    assert resp.status_code == 303
    assert resp.headers["location"] == "/"
    assert container.session.is_authenticated() is False
    assert container.navigator.redirects == ["/"]


def test_stale_unauthorized_keeps_newer_session(web, backend, container):
    _login(web)

    def relogin_then_reject(request):
        container.session.init("newer-token")
        return httpx.Response(401, json={"detail": "Token is invalid or expired"})

    backend.on("GET", "/productos/", relogin_then_reject)

    resp = web.get("/panel/productos")

    assert resp.status_code == 409
    assert container.session.is_authenticated() is True
    assert container.session.current.token == "newer-token"
    assert container.navigator.redirects == []
    assert web.get("/panel").headers["location"] == "/"


def test_expired_token_forces_logout(web, backend, container):
    _login(web)
    backend.json("GET", "/productos/", 401, {"detail": "Token is invalid or expired"})

    resp = web.get("/panel/productos")

    assert resp.status_code == 303
    assert resp.headers["location"] == "/"
    assert container.session.is_authenticated() is False
    assert container.navigator.redirects == ["/"]


def test_dashboard_summary(web, backend):
    _login(web)
    backend.json("GET", "/productos/", 200, [{"id": 1, "nombre": "Mouse", "precio": "10"}])
    backend.json("GET", "/ventas/", 200, {"results": [{"total": "10.5"}, {"total": "4.5"}]})

    resp = web.get("/panel")

    assert resp.status_code == 200
    assert resp.json() == {"product_count": 1, "order_count": 2, "revenue": 15.0, "skipped_orders": 0}


def test_customer_list_is_filtered(web, backend):
    _login(web)
    backend.json(
        "GET",
        "/clientes/",
        200,
        [{"id": 1, "nombre": "Ana", "email": "ana@x.cl"}, {"id": 2, "nombre": "Bruno", "email": None}],
    )

    resp = web.get("/panel/clientes", params={"q": "bru"})

    assert [c["id"] for c in resp.json()] == ["2"]


def test_backend_errors_are_reported(web, backend, container):
    _login(web)
    backend.on("GET", "/ventas/", lambda request: httpx.Response(500, text="boom"))

    resp = web.get("/panel/ventas")

    assert resp.status_code == 502
    assert resp.json()["upstream_status"] == 500
    assert container.session.is_authenticated() is True


def test_cart_flow_commits_order(web, backend, container):
    _login(web)
    backend.json("POST", "/ventas/", 201, {"id": 77})

    web.post("/panel/carrito/lineas", json={"product_key": "1", "name": "Mouse", "price": "9990", "product_id": 1})
    web.post("/panel/carrito/lineas", json={"product_key": "1", "name": "Mouse", "price": "9990", "product_id": 1})
    web.post("/panel/carrito/lineas", json={"product_key": "2", "name": "Cable", "price": 500, "product_id": 2})
    web.patch("/panel/carrito/lineas/2", json={"delta": -5})
    cart = web.put("/panel/carrito/cliente", json={"customer_ref": "3"}).json()

    assert [(l["product_key"], l["quantity"]) for l in cart["lines"]] == [("1", 2), ("2", 1)]
    assert cart["total"] == 20480
    assert cart["customer_ref"] == "3"

    resp = web.post("/panel/carrito/confirmar")

    assert resp.status_code == 200
    assert resp.json()["status"] == "committed"
    assert resp.json()["remote_id"] == "77"
    assert backend.bodies("POST", "/ventas/")[0]["detalles"] == [
        {"producto_id": 1, "cantidad": 2, "precio_unitario": 9990},
        {"producto_id": 2, "cantidad": 1, "precio_unitario": 500},
    ]
    cart = web.get("/panel/carrito").json()
    assert cart["lines"] == []
    assert cart["customer_ref"] is None
    assert cart["last_order"]["status"] == "committed"


def test_confirm_without_customer_is_rejected_locally(web, backend):
    _login(web)
    web.post("/panel/carrito/lineas", json={"product_key": "1", "name": "Mouse", "price": "9990"})

    resp = web.post("/panel/carrito/confirmar")

    assert resp.status_code == 422
    assert "no customer" in resp.json()["detail"]
    assert backend.calls("POST", "/ventas/") == []


def test_failed_order_keeps_cart(web, backend):
    _login(web)
    backend.json("POST", "/ventas/", 400, {"detalles": ["Stock insuficiente"]})
    web.post("/panel/carrito/lineas", json={"product_key": "1", "name": "Mouse", "price": "9990"})
    web.put("/panel/carrito/cliente", json={"customer_ref": "3"})

    resp = web.post("/panel/carrito/confirmar")

    assert resp.status_code == 502
    assert resp.json()["errors"] == {"detalles": ["Stock insuficiente"]}
    cart = web.get("/panel/carrito").json()
    assert len(cart["lines"]) == 1
    assert cart["customer_ref"] == "3"
    assert cart["last_order"]["status"] == "failed"
    assert cart["last_order"]["errors"] == {"detalles": ["Stock insuficiente"]}


def test_removing_a_line(web):
    _login(web)
    web.post("/panel/carrito/lineas", json={"product_key": "1", "name": "Mouse", "price": "10", "quantity": 3})

    cart = web.delete("/panel/carrito/lineas/1").json()

    assert cart["lines"] == []
    assert cart["total"] == 0
