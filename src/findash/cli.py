import os
import sys
import typer
from pathlib import Path
from findash.config import settings
from findash.logging import logger, setup_logging

app = typer.Typer(no_args_is_help=True)


@app.callback()
def main():
    """
    Finance Dashboard CLI.
    """
    setup_logging()


@app.command(name="doctor")
def doctor():
    """
    Check configuration, database and backend reachability.
    """
    logger.info("Running doctor check...")

    failures: list[str] = []
    passed = 0

    print("\n🩺 Finance Dashboard Doctor\n")

    # ── Check 1: Environment / Interpreter ──────────────────────────────────
    print("[Environment]")
    print(f"  Python: {sys.version.split()[0]}")
    print(f"  Prefix: {sys.prefix}")
    passed += 1

    # ── Check 2: Configuration ───────────────────────────────────────────────
    print("\n[Configuration]")
    print(f"  API_BASE_URL:                {settings.API_BASE_URL}")
    print(f"  API_TIMEOUT_SECONDS:         {settings.API_TIMEOUT_SECONDS}")
    print(f"  RECENT_TRANSACTIONS_LIMIT:   {settings.RECENT_TRANSACTIONS_LIMIT}")
    print(f"  CURRENCY_SYMBOL:             {settings.CURRENCY_SYMBOL}")
    if settings.RECENT_TRANSACTIONS_LIMIT >= 1:
        passed += 1
    else:
        failures.append("RECENT_TRANSACTIONS_LIMIT must be at least 1")

    # ── Check 3: Data directory ──────────────────────────────────────────────
    print("\n[Database]")
    print(f"  URL: {settings.database_url}")
    data_dir = Path(settings.data_dir)
    if settings.DATABASE_URL:
        print("  data/                        ⚠️  Skipped (DATABASE_URL overrides data_dir)")
    elif data_dir.is_dir() and os.access(data_dir, os.W_OK):
        print(f"  {data_dir}/                        ✅ Writable: {data_dir.absolute()}")
        passed += 1
    elif data_dir.exists():
        print(f"  {data_dir}/                        ❌ Not writable")
        failures.append(f"{data_dir.absolute()} is not writable")
    else:
        print(f"  {data_dir}/                        ❌ Missing: {data_dir.absolute()}")
        failures.append(f"{data_dir}/ not found; run `findash db init`")

    # ── Check 4: Backend ─────────────────────────────────────────────────────
    print("\n[Backend]")
    from findash.ui.validation import validate_backend_connection
    errors = validate_backend_connection(settings.API_BASE_URL)
    if errors:
        print(f"  {settings.API_BASE_URL:<28} ❌ Unreachable")
        failures.extend(errors)
    else:
        print(f"  {settings.API_BASE_URL:<28} ✅ Healthy")
        passed += 1

    # ── Summary ──────────────────────────────────────────────────────────────
    total = passed + len(failures)
    print(f"\n{'─' * 50}")
    if failures:
        print(f"Result: {passed}/{total} checks passed\n")
        for msg in failures:
            print(f"  ❌ {msg}")
        print()
        raise typer.Exit(code=1)
    else:
        print(f"Result: {passed}/{total} checks passed — all good ✅")
        print()


@app.command(name="dashboard")
def dashboard(
    api_url: str | None = typer.Option(None, "--api-url", help="Backend base URL (defaults to API_BASE_URL)"),
):
    """Fetch the dashboard from a running backend and print it."""
    from findash.ui.loader import fetch_dashboard
    from findash.ui.view import build_view

    state = fetch_dashboard(api_url or settings.API_BASE_URL)
    view = build_view(
        state,
        user_name=settings.DASHBOARD_USER_NAME or None,
        currency=settings.CURRENCY_SYMBOL,
    )

    print(f"\nDashboard: {view.greeting}\n")
    for card in view.headline_cards + view.overview_cards:
        print(f"  {card.title:<18} {card.value:>16}")

    print("\nRecent Transactions")
    if view.empty_state is not None:
        print(f"  {view.empty_state.message} — {view.empty_state.action_label}: {view.empty_state.href}")
    for row in view.transactions:
        print(f"  {row.description:<28} {row.subtitle:<28} {row.amount:>12}")

    print("\nQuick Actions")
    for action in view.quick_actions:
        print(f"  {action.title:<18} {action.href}")
    print()


db_app = typer.Typer(help="Database management commands.")
app.add_typer(db_app, name="db")


@db_app.command("init")
def init():
    """Initialize the database tables."""
    from findash.db import init_db
    try:
        init_db()
        logger.info("Database initialized successfully.")
        print("✅ Database initialized.")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)


@db_app.command("seed")
def seed(
    days: int = typer.Option(90, min=1, max=365, help="Spread demo transactions over this many days"),
    seed_value: int = typer.Option(42, "--seed", help="Random seed for reproducible data"),
):
    """Load demo categories, transactions, assets and investments."""
    from findash.db import init_db
    from findash.domain.exceptions import FinDashError
    from findash.infra.db.uow import UnitOfWork
    from findash.services.seed_service import SeedService

    init_db()
    try:
        with UnitOfWork() as uow:
            report = SeedService(uow).seed_demo(days=days, seed=seed_value)
    except FinDashError as e:
        logger.error(f"Seeding failed: {e.message}")
        print(f"❌ Failed: {e.message}")
        raise typer.Exit(code=1)

    print(
        f"✅ Seeded {report.transactions} transactions in {report.categories} categories, "
        f"{report.assets} assets, {report.investments} investments."
    )


if __name__ == "__main__":
    app()
