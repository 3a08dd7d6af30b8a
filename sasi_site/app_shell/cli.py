import argparse
import json
import logging
import sys
from collections.abc import Sequence

from sasi_site.adapters.sqlite.migrator import SQLiteMigrator
from sasi_site.adapters.sqlite.repos import SQLiteProgramRepo
from sasi_site.api.deps import Settings
from sasi_site.app_shell.config import configure_logging
from sasi_site.components.programs import seed_programs
from sasi_site.components.seo import SITE_ROUTE_TABLE, ResolveMetadataInput, run_resolve
from sasi_site.rules.loader import load_rules
from sasi_site.rules.models import SiteRules

logger = logging.getLogger("cli")


def get_rules(settings: Settings) -> SiteRules:
    try:
        return load_rules(settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Cannot load rules: %s", e)
        sys.exit(1)


def handle_migrate(settings: Settings, args: argparse.Namespace) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    applied = SQLiteMigrator(settings.db_path).run_migrations()
    print(f"Applied {len(applied)} migration(s) to {settings.db_path}.")


def handle_seed_programs(settings: Settings, args: argparse.Namespace) -> None:
    handle_migrate(settings, args)
    programs = seed_programs(SQLiteProgramRepo(settings.db_path))
    print(f"Seeded {len(programs)} programs.")
    for program in programs:
        print(f"  {program.order}. {program.title} -> {program.page_url}")


def handle_meta(rules: SiteRules, args: argparse.Namespace) -> None:
    out = run_resolve(
        ResolveMetadataInput(path=args.path, protocol=args.proto, host=args.host),
        rules=rules.seo,
    )
    print(json.dumps(out.metadata.to_context(), indent=2))


def handle_routes(args: argparse.Namespace) -> None:
    for path in SITE_ROUTE_TABLE.paths():
        print(f"{path:<32} {SITE_ROUTE_TABLE[path].title}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sasi-site", description="Spread A Smile India site CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("migrate", help="Apply pending database migrations")
    subparsers.add_parser("seed-programs", help="Replace all programs with the seed set")

    meta_parser = subparsers.add_parser("meta", help="Show resolved metadata for a path")
    meta_parser.add_argument("path", help="Site path, e.g. /about/team/")
    meta_parser.add_argument("--host", default=None, help="Host header to simulate")
    meta_parser.add_argument("--proto", default=None, help="Request protocol to simulate")

    subparsers.add_parser("routes", help="List paths with their own metadata")

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    settings = Settings()
    rules = get_rules(settings)
    configure_logging(rules)

    if args.command == "migrate":
        handle_migrate(settings, args)
    elif args.command == "seed-programs":
        handle_seed_programs(settings, args)
    elif args.command == "meta":
        handle_meta(rules, args)
    elif args.command == "routes":
        handle_routes(args)


if __name__ == "__main__":
    main()
