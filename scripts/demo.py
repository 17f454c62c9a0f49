#!/usr/bin/env python3
"""
Run the fixed CRM demo sequence against the JSON files.

Uso:
  python scripts/demo.py [--data-dir ./data] [--name "Novo cliente"] [--email new@top-academy.ru]
"""
from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

from crm.core.config import get_settings
from crm.core.utils import configure_logging
from crm.domain.search import ByEmailDomain, email_domain
from crm.services.crm_service import create_service
from crm.services.notifier import log_client_added


def print_list(title: str, items: list, empty: str) -> None:
    print(f"--- {title} ---")
    if not items:
        print(empty)
        return
    for item in items:
        print(f"  {item}")


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="CRM console demo")
    ap.add_argument("--data-dir", help="Directory for clients.json/orders.json (default: CRM_DATA_DIR)")
    ap.add_argument("--name", default="Novo cliente", help="Name of the client to add")
    ap.add_argument("--email", default="new@top-academy.ru", help="E-mail of the client to add")
    ap.add_argument("--description", default="Desenvolver logotipo", help="Order description")
    ap.add_argument("--amount", default="15000", help="Order amount")
    args = ap.parse_args(argv)

    settings = get_settings()
    if args.data_dir:
        settings = dataclasses.replace(settings, data_dir=Path(args.data_dir))
    configure_logging(settings.log_level)

    svc = create_service(settings)
    svc.subscribe(log_client_added)

    print_list("Clients", svc.get_all_clients(), "No clients yet")
    client = svc.add_client(args.name, args.email)
    print(f"Added client #{client.id}")
    print_list("Clients", svc.get_all_clients(), "No clients yet")

    print_list("Orders", svc.get_all_orders(), "No orders yet")
    order = svc.add_order_for_client(1, args.description, args.amount)
    print(f"Added order #{order.id} due {order.due_date.isoformat()}")
    print_list("Orders", svc.get_all_orders(), "No orders yet")

    domain = email_domain(args.email)
    print_list(f"Clients @{domain}", svc.find_clients(ByEmailDomain(domain)), "No matches")
    print("Data saved")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
