#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

"""
Interactive local collection browser (no HTTP server).

Usage:
  python3 scripts/browse_local.py

Drives the same CollectionController the API uses and prints each view.
"""

import asyncio

from catalog_query.application.dto.collection_view import CollectionView
from catalog_query.domain.entities.query_state import SortMode
from catalog_query.wiring.dependencies import get_collection_controller


HELP = """\
c <tag>   toggle category     t <tag>   toggle type
s <mode>  sort (relevant, low-high, high-low)
q <text>  search              n / p     next / previous page
g <page>  go to page          l <size>  page size (10, 20, 30)
/quit
"""


def _print_view(view: CollectionView) -> None:
    if view.show_loading_indicator:
        print("Loading...")
        return
    status = "FAILED: " + (view.error or "") if view.failed else ("loading" if view.is_loading else "ready")
    print("-" * 60)
    for item in view.items:
        print(f"  {item.name:<32} {item.price:>8.2f}")
    prev_mark = "<" if view.can_go_previous else " "
    next_mark = ">" if view.can_go_next else " "
    print(f"{prev_mark} {view.page_label} {next_mark}   [{status}]")


async def main() -> None:
    controller = get_collection_controller()
    controller.load()
    await controller.wait_idle()
    _print_view(controller.view())

    while True:
        try:
            line = await asyncio.to_thread(input, "> ")
        except (EOFError, KeyboardInterrupt):
            break
        cmd, _, arg = line.strip().partition(" ")
        if cmd == "/quit":
            break
        try:
            if cmd == "c":
                controller.toggle_category(arg)
            elif cmd == "t":
                controller.toggle_sub_category(arg)
            elif cmd == "s":
                controller.set_sort(SortMode(arg))
            elif cmd == "q":
                controller.set_search(arg)
            elif cmd == "n":
                controller.next_page()
            elif cmd == "p":
                controller.previous_page()
            elif cmd == "g":
                controller.go_to_page(int(arg))
            elif cmd == "l":
                controller.set_page_size(int(arg))
            else:
                print(HELP)
                continue
        except ValueError as e:
            print(f"Invalid argument: {e}")
            continue
        await controller.wait_idle()
        _print_view(controller.view())


if __name__ == "__main__":
    asyncio.run(main())
