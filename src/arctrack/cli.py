"""Flask CLI commands for ArcTrack."""

from __future__ import annotations

import json

import click


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("arctrack-ensure-today")
    @click.option(
        "--hour",
        type=click.IntRange(0, 23),
        default=None,
        help="Only reset profiles whose local hour equals this value.",
    )
    def arctrack_ensure_today(hour: int | None) -> None:
        """Create today's entry for every profile that is missing one."""

        from .extensions import entry_repository, profile_repository
        from .services.daily_entries import ensure_today_entries

        created = ensure_today_entries(profile_repository(), entry_repository(), hour=hour)
        click.echo(f"Created {created} daily entr{'y' if created == 1 else 'ies'}.")

    @app.cli.command("arctrack-scorecard")
    @click.argument("external_id")
    def arctrack_scorecard(external_id: str) -> None:
        """Print the scorecard grid for a user as JSON."""

        from datetime import timedelta

        from .extensions import entry_repository, profile_repository
        from .services.scorecard import build_scorecard

        profile = profile_repository().get_by_external_id(external_id)
        if profile is None:
            raise click.ClickException(f"No profile for {external_id!r}")

        last_day = profile.arc_end_date - timedelta(days=1)
        scores = entry_repository().score_map(profile.id, profile.arc_start_date, last_day)
        grid = build_scorecard(profile.arc_start_date, profile.timezone, scores)
        click.echo(json.dumps(grid.to_dict(), indent=2))
