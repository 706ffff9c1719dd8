"""CLI for previewing the repository filters built from query parameters."""

import argparse

from .config.runtime import get_settings
from .domain.filters import FILTER_LIST_ADAPTER, VariantRepositoryFilter
from .domain.region import Region
from .domain.variant_type import VariantType
from .models.requests import BeaconQuery, VariantSearchQuery
from .observability import configure_logging
from .services.filter_service import FilterService


def _region(text: str) -> Region:
    try:
        return Region.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _variant_type(text: str) -> VariantType:
    try:
        return VariantType(text.upper())
    except ValueError:
        choices = ", ".join(t.value for t in VariantType)
        raise argparse.ArgumentTypeError(f"unknown variant type {text!r} (choose from {choices})") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="variant-filters",
        description="Print the repository filters built for a variant query",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    search_parser = subparsers.add_parser("search", help="Filters for a general variant search")
    search_parser.add_argument("--maf", default=None, help="MAF threshold, e.g. '<0.01'")
    search_parser.add_argument("--polyphen", default=None, help="PolyPhen score threshold, e.g. '>0.9'")
    search_parser.add_argument("--sift", default=None, help="SIFT score threshold, e.g. '<=0.05'")
    search_parser.add_argument(
        "--study", dest="studies", action="append", default=None, help="Study id (repeatable)"
    )
    search_parser.add_argument(
        "--consequence-type",
        dest="consequence_type",
        action="append",
        default=None,
        help="Consequence type accession (repeatable)",
    )

    beacon_parser = subparsers.add_parser("beacon", help="Filters for a region/allele lookup")
    beacon_parser.add_argument(
        "--start-range", type=_region, required=True, help="Range for the start, e.g. '1:100-200' or '1:-200'"
    )
    beacon_parser.add_argument(
        "--end-range", type=_region, required=True, help="Range for the end, e.g. '1:150-300' or '1:150-'"
    )
    beacon_parser.add_argument("--reference-bases", default=None, help="Reference allele")
    beacon_parser.add_argument("--alternate-bases", default=None, help="Alternate allele")
    beacon_parser.add_argument("--variant-type", type=_variant_type, default=None, help="Variant type, e.g. SNV")
    beacon_parser.add_argument(
        "--study", dest="studies", action="append", default=None, help="Study id (repeatable)"
    )
    return parser


def render(filters: list[VariantRepositoryFilter], indent: int) -> str:
    """Serialize filters to JSON; an indent of 0 gives compact output."""
    return FILTER_LIST_ADAPTER.dump_json(filters, indent=indent or None).decode("utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    svc = FilterService()

    if args.command == "search":
        filters = svc.variant_search(
            VariantSearchQuery(
                maf=args.maf,
                polyphen_score=args.polyphen,
                sift_score=args.sift,
                studies=args.studies,
                consequence_type=args.consequence_type,
            )
        )
    elif args.command == "beacon":
        filters = svc.beacon(
            BeaconQuery(
                start_range=args.start_range,
                end_range=args.end_range,
                reference_bases=args.reference_bases,
                alternate_bases=args.alternate_bases,
                variant_type=args.variant_type,
                studies=args.studies,
            )
        )
    else:
        parser.print_help()
        return 1

    print(render(filters, settings.json_indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
