"""CLI エントリーポイント"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .domain.adoption_ledger import AdoptionLedger
from .domain.catalog_store import CatalogStore
from .domain.models import ALL_SPECIES, SortKey
from .domain.seed import DEFAULT_ANIMALS
from .infrastructure.ledger_store import LedgerStore
from .infrastructure.local_storage import LocalStorage
from .infrastructure.outreach_client import OutreachClient
from .infrastructure.page_writer import PageWriter
from .infrastructure.seed_loader import load_seed
from .orchestration.adoption_app import AdoptionApp


logger = logging.getLogger("pashucare")

DEFAULT_STORAGE_FILE = "storage/local_storage.json"


def build_app(env: Dict[str, str]) -> AdoptionApp:
    """
    環境変数の設定から AdoptionApp を構築して起動

    Args:
        env: 環境変数（PASHUCARE_STORAGE_FILE, PASHUCARE_SEED_FILE）

    Returns:
        AdoptionApp: 起動済みのアプリケーション
    """
    storage = LocalStorage(Path(env.get("PASHUCARE_STORAGE_FILE") or DEFAULT_STORAGE_FILE))
    seed_file = env.get("PASHUCARE_SEED_FILE")
    seed = load_seed(Path(seed_file)) if seed_file else DEFAULT_ANIMALS

    catalog = CatalogStore()
    ledger = AdoptionLedger(LedgerStore(storage), catalog)
    app = AdoptionApp(catalog, ledger, OutreachClient())
    app.start(seed)
    return app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pashucare", description="PashuCare adoption CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # 一覧表示条件（list / render 共通）
    criteria_parser = argparse.ArgumentParser(add_help=False)
    criteria_parser.add_argument("--query", default="", help="Search by name")
    criteria_parser.add_argument("--species", default=ALL_SPECIES, help="All, Dog, Cat, Rabbit, ...")
    criteria_parser.add_argument(
        "--sort",
        default=SortKey.NEWEST.value,
        choices=[key.value for key in SortKey],
        help="Sort order"
    )

    subparsers.add_parser("list", parents=[criteria_parser], help="List adoptable animals")

    show_parser = subparsers.add_parser("show", help="Show animal details")
    show_parser.add_argument("animal_id", type=int)

    adopt_parser = subparsers.add_parser("adopt", help="Submit an adoption request")
    adopt_parser.add_argument("animal_id", type=int)
    adopt_parser.add_argument("--name", required=True, help="Adopter name")
    adopt_parser.add_argument("--email", required=True, help="Adopter email")

    subparsers.add_parser("history", help="List submitted adoption requests")

    contact_parser = subparsers.add_parser("contact", help="Send a message")
    contact_parser.add_argument("message")

    donate_parser = subparsers.add_parser("donate", help="Donate an amount")
    donate_parser.add_argument("amount", type=float)

    subparsers.add_parser("volunteer", help="Sign up as a volunteer")

    render_parser = subparsers.add_parser(
        "render", parents=[criteria_parser], help="Render the page as static HTML"
    )
    render_parser.add_argument("--output", default=None, help="Output directory")

    return parser


def handle_list(app: AdoptionApp, args: argparse.Namespace) -> int:
    app.set_query(args.query)
    app.set_species_filter(args.species)
    app.set_sort_key(args.sort)
    animals = app.view_model().animals
    if not animals:
        print("No animals match your search.")
        return 0
    for animal in animals:
        print(f"{animal.id:>3}  {animal.name:<10} {animal.species:<7} {animal.age:>2} yrs  {animal.sex}")
    return 0


def handle_show(app: AdoptionApp, args: argparse.Namespace) -> int:
    description = app.describe_animal(args.animal_id)
    if description is None:
        logger.error(f"Animal {args.animal_id} not found.")
        return 1
    print(description)
    return 0


def handle_adopt(app: AdoptionApp, args: argparse.Namespace) -> int:
    if not app.open_adopt(args.animal_id):
        logger.error(f"Animal {args.animal_id} is not available for adoption.")
        return 1
    request = app.submit_adoption(args.name, args.email)
    print(app.dialog.message)
    return 0 if request is not None else 1


def handle_history(app: AdoptionApp, args: argparse.Namespace) -> int:
    requests = app.view_model().adopted
    if not requests:
        print("No adoption requests yet.")
        return 0
    for request in requests:
        print(
            f"{request.date.isoformat()}  {request.animal_name} "
            f"— {request.adopter_name} <{request.adopter_email}>"
        )
    return 0


def handle_contact(app: AdoptionApp, args: argparse.Namespace) -> int:
    ok = app.submit_contact(args.message)
    print(app.flash.text)
    return 0 if ok else 1


def handle_donate(app: AdoptionApp, args: argparse.Namespace) -> int:
    ok = app.submit_donation(args.amount)
    print(app.flash.text)
    return 0 if ok else 1


def handle_volunteer(app: AdoptionApp, args: argparse.Namespace) -> int:
    app.sign_up_volunteer()
    print(app.flash.text)
    return 0


def handle_render(app: AdoptionApp, args: argparse.Namespace) -> int:
    app.set_query(args.query)
    app.set_species_filter(args.species)
    app.set_sort_key(args.sort)
    writer = PageWriter(Path(args.output) if args.output else None)
    output_path = writer.write_page(app.view_model())
    print(f"Page written to {output_path}")
    return 0


HANDLERS = {
    "list": handle_list,
    "show": handle_show,
    "adopt": handle_adopt,
    "history": handle_history,
    "contact": handle_contact,
    "donate": handle_donate,
    "volunteer": handle_volunteer,
    "render": handle_render,
}


def main(argv: Optional[List[str]] = None):
    """
    CLI エントリーポイント

    Usage:
        python -m pashucare <command> [options]

    Exit codes:
        0: 成功
        1: 入力エラー・対象なし・予期しないエラー
    """
    args = build_parser().parse_args(argv)

    # ロギング設定
    logging.basicConfig(
        level=os.environ.get("PASHUCARE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        app = build_app(dict(os.environ))
        exit_code = HANDLERS[args.command](app, args)
    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}", exc_info=True)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
