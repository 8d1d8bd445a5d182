#!/usr/bin/env python3
"""
Interactive sale terminal against the configured ventas backend (no web server).

Usage:
  python3 scripts/pos_local.py

What it does:
- Logs in through the same SessionService the web app uses
- Loads the catalog and customers, builds a cart and submits the sale
- Prints the cart after every change and the backend's answer on submit
"""

from __future__ import annotations

import asyncio
import getpass
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ventas.application.exceptions import VentasError
from ventas.application.utils.failure import describe_failure
from ventas.application.utils.search import filter_customers, filter_products
from ventas.domain.entities.session import Credentials
from ventas.wiring.dependencies import build_container

HELP = """Commands:
  p [term]          list products
  c [term]          list customers
  a <n> [qty]       add product number n from the last product list
  + <key> / - <key> change quantity by one
  r <key>           remove line
  s <customer id>   select customer
  ok                submit the sale
  /help, /quit"""


def _print_cart(container) -> None:
    draft = container.draft
    print("-" * 60)
    for line in draft.cart.lines:
        print(f"  [{line.product_key}] {line.display_name} x{line.quantity} @ {line.unit_price}")
    summary = draft.cart.summarize()
    print(f"  total: {summary.total}  customer: {draft.customer_ref or '-'}")
    if summary.excluded_keys:
        print(f"  (left out of total, price is not a number: {', '.join(summary.excluded_keys)})")
    print("-" * 60)


async def _ask(prompt: str) -> str:
    return (await asyncio.to_thread(input, prompt)).strip()


async def main() -> None:
    container = build_container()
    if not container.session.is_authenticated():
        username = await _ask("username: ")
        password = await asyncio.to_thread(getpass.getpass, "password: ")
        await container.session.authenticate(Credentials(username=username, password=password))
    print(HELP)

    products = []
    while True:
        raw = await _ask("> ")
        if not raw:
            continue
        cmd, _, arg = raw.partition(" ")
        arg = arg.strip()
        try:
            if cmd == "/quit":
                break
            elif cmd == "/help":
                print(HELP)
            elif cmd == "p":
                products = filter_products(await container.api.list_products(), arg)
                for i, p in enumerate(products, 1):
                    print(f"  {i}. {p.name}  ${p.price}  stock={p.stock}")
            elif cmd == "c":
                for c in filter_customers(await container.api.list_customers(), arg):
                    print(f"  {c.id}. {c.name}  {c.email or ''}")
            elif cmd == "a":
                index, _, qty = arg.partition(" ")
                container.draft.cart.add_line(products[int(index) - 1], qty=int(qty or 1))
                _print_cart(container)
            elif cmd in ("+", "-"):
                container.draft.cart.update_quantity(arg, 1 if cmd == "+" else -1)
                _print_cart(container)
            elif cmd == "r":
                container.draft.cart.remove_line(arg)
                _print_cart(container)
            elif cmd == "s":
                container.draft.select_customer(arg)
                _print_cart(container)
            elif cmd == "ok":
                order = await container.submit_order.execute(container.draft)
                print(f"Sale registered (id={order.remote_id}, total={order.total})")
            else:
                print("Unknown command, /help for the list")
        except (ValueError, IndexError):
            print("Bad arguments, /help for the list")
        except VentasError as e:
            message, _ = describe_failure(e)
            print(f"Error: {message}")
            if not container.session.is_authenticated():
                print("Session ended, restart to log in again.")
                break


if __name__ == "__main__":
    asyncio.run(main())
