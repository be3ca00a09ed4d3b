#!/usr/bin/env python3
"""Print the travel dashboard views for the demo data.

Usage:
    PYTHONPATH=. python scripts/show_dashboard.py [--view table|calendar|batches|requests]
        [--reference-date 2024-03-15] [--weeks 4] [--config dashboard/config.yaml]

The table view lists the demo batches projected as requests.
"""
import logging
import os
import sys
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pandas as pd

from dashboard.analytics.views import batches_table, calendar_table, requests_table
from dashboard.config import configure_logging, load_config, needs_policy
from dashboard.data.demo_data import demo_batches, demo_participants, demo_requests
from domain.analytics.batches import batch_stats
from domain.calendar_grid import build_weeks
from domain.projection import project

logger = logging.getLogger(__name__)


def render(view: str, config: dict, reference_date: date, weeks: int | None = None) -> pd.DataFrame:
    batches = demo_batches()
    date_format = config["display"]["date_format"]
    if view == "table":
        requests = project(batches, needs_policy(config))
        return requests_table(requests, demo_participants(), date_format=date_format)
    if view == "requests":
        return requests_table(demo_requests(), date_format=date_format)
    if view == "calendar":
        week_count = weeks if weeks is not None else config["calendar"]["week_count"]
        return calendar_table(build_weeks(reference_date, batches, week_count))
    if view == "batches":
        return batches_table(batches)
    raise ValueError(f"Vue inconnue: {view}")


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Vues du tableau de bord des voyages")
    parser.add_argument("--config", default=None, help="Fichier de configuration YAML")
    parser.add_argument(
        "--view", default="table",
        choices=["table", "requests", "calendar", "batches"],
        help="Vue à afficher",
    )
    parser.add_argument(
        "--reference-date", type=date.fromisoformat, default=date.today(),
        help="Date du jour pour le calendrier (AAAA-MM-JJ)",
    )
    parser.add_argument("--weeks", type=int, default=None, help="Nombre de semaines du calendrier")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(config)

    stats = batch_stats(demo_batches())
    logger.info(
        "%d lots, budget total %.0f, %d voyageurs actifs",
        stats.total, stats.total_budget, stats.active_travelers,
    )

    df = render(args.view, config, args.reference_date, args.weeks)
    if df.empty:
        print("Aucune demande de voyage")
    else:
        print(df.to_string(index=args.view == "calendar"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
