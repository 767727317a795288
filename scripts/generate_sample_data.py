#!/usr/bin/env python3
"""Generate sample dashboard data files.

Writes one JSON file per dataset (customers, credit officer tabs, branch
loans, customer details, loan statistics) so the screens' demo data can
be inspected outside the dashboard. Output is reproducible: the same
identifiers and reference date always produce the same files.

Settings not given on the command line come from the environment (see
``DataGenConfig.from_env``).
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from backoffice_data.api import (
    calculate_loan_statistics,
    generate_collection_transactions,
    generate_credit_officer_details,
    generate_credit_officer_loans,
    generate_credit_officer_transactions,
    generate_customer_details,
    generate_customers,
    generate_disbursed_loans,
    generate_loans_data,
)
from backoffice_data.config import DataGenConfig
from backoffice_data.generators.pool import build_pools
from backoffice_data.logging import setup_logging
from backoffice_data.sinks import ConsoleSink, JsonFileSink

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    config = DataGenConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate sample dashboard data")
    parser.add_argument(
        "--officer-id",
        type=str,
        default="co-001",
        help="Credit officer identifier (default: co-001)",
    )
    parser.add_argument(
        "--customer-id",
        type=str,
        default="cust-001",
        help="Customer identifier for the detail record (default: cust-001)",
    )
    parser.add_argument(
        "--branch-id",
        type=str,
        default="branch-lagos",
        help="Branch identifier for the loan book (default: branch-lagos)",
    )
    parser.add_argument(
        "--customers-seed",
        type=str,
        default="customers",
        help="Seed string for the customers table (default: customers)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=50,
        help="Records per batch dataset (default: 50)",
    )
    parser.add_argument(
        "--reference-date",
        type=date.fromisoformat,
        default=config.generator.reference_date,
        help="Reference date as YYYY-MM-DD (default: REFERENCE_DATE or today)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.json_output_dir,
        help="Output directory (default: OUTPUT_DIR or ./output)",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Print records to stdout instead of writing JSON files",
    )
    args = parser.parse_args()

    setup_logging(level=config.log_level, format_type=config.log_format)

    pools = build_pools(config.generator)
    today = args.reference_date or date.today()

    if args.console:
        sink = ConsoleSink(max_records=5)
    else:
        sink = JsonFileSink(args.output_dir, pretty=config.output.pretty_json)

    logger.info("Generating sample data (reference date %s)", today.isoformat())

    branch_loans = generate_loans_data(args.branch_id, args.count, pools=pools, today=today)

    datasets = {
        "customers": generate_customers(
            args.count, args.customers_seed, pools=pools, today=today
        ),
        "credit_officer": [
            generate_credit_officer_details(args.officer_id, pools=pools, today=today)
        ],
        "credit_officer_loans": generate_credit_officer_loans(
            args.officer_id, args.count, pools=pools, today=today
        ),
        "credit_officer_transactions": generate_credit_officer_transactions(
            args.officer_id, args.count, pools=pools, today=today
        ),
        "collections": generate_collection_transactions(
            args.officer_id, args.count, pools=pools, today=today
        ),
        "disbursed_loans": generate_disbursed_loans(
            args.officer_id, args.count, pools=pools, today=today
        ),
        "branch_loans": branch_loans,
        "loan_statistics": [calculate_loan_statistics(branch_loans)],
        "customer_details": [
            generate_customer_details(args.customer_id, pools=pools, today=today)
        ],
    }

    for entity_type, records in datasets.items():
        sink.write_batch(entity_type, records)
        logger.info("%-28s %d records", entity_type, len(records))

    sink.close()


if __name__ == "__main__":
    main()
