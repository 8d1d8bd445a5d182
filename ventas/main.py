import logging

from fastapi import FastAPI

from ventas.api.errors import register_exception_handlers
from ventas.api.guard import route_guard
from ventas.api.routes.auth import router as auth_router
from ventas.api.routes.cart import router as cart_router
from ventas.api.routes.catalog import router as catalog_router
from ventas.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("path", "status", "epoch", "product_key", "order_status", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Ventas POS", version="1.0.0")

app.middleware("http")(route_guard)
register_exception_handlers(app)

app.include_router(auth_router, tags=["auth"])
app.include_router(catalog_router, tags=["catalog"])
app.include_router(cart_router, tags=["cart"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
