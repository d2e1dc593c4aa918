"""
Reconcile a company's investors against the company catalog.

Prints the preview counts; with --apply, links every auto-matched investor
in batches, the same way the review UI does.

Usage:
    python scripts/reconcile_investors.py --company-id <id> --user-id <profile id>
    python scripts/reconcile_investors.py --company-id <id> --user-id <id> --apply [--force] [--batch-size 50]
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path so we can import app modules
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.config import settings
from app.db.session import AsyncSessionLocal
from app.repositories.profile_repository import ProfileRepository
from app.schemas.investor_reconciliation import ApplyRequest
from app.services.investor_reconciliation_service import InvestorReconciliationService
from app.services.reconciliation import build_updates, chunk_updates
from app.services.reconciliation.errors import ReconciliationError


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Preview or apply investor to company reconciliation.")
    parser.add_argument("--company-id", required=True, help="Source company whose investors are reconciled")
    parser.add_argument("--user-id", required=True, help="Profile id the run is authorized as")
    parser.add_argument("--apply", action="store_true", help="Persist matched links")
    parser.add_argument("--force", action="store_true", help="Overwrite existing links")
    parser.add_argument("--batch-size", type=int, default=settings.RECONCILE_APPLY_BATCH_SIZE)
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    async with AsyncSessionLocal() as db:
        user = await ProfileRepository(db).get_by_id(args.user_id)
        if not user:
            print(f"❌ Profile not found: {args.user_id}")
            return 1

        service = InvestorReconciliationService(db)
        try:
            preview = await service.preview(user, args.company_id)
        except ReconciliationError as exc:
            print(f"❌ Preview failed: {exc}")
            return 1

        print(f"✓ Preview for company {args.company_id}")
        print(f"  Total:       {preview.total}")
        print(f"  Already set: {preview.already_set}")
        print(f"  Matched:     {preview.matched}")
        print(f"  Ambiguous:   {preview.ambiguous}")
        print(f"  Not found:   {preview.not_found}")

        if not args.apply:
            return 0

        updates = build_updates(preview)
        if not updates:
            print("Nothing to apply.")
            return 0

        updated = skipped = 0
        for batch in chunk_updates(updates, args.batch_size):
            request = ApplyRequest(company_id=args.company_id, updates=batch, force=args.force)
            try:
                outcome = await service.apply(user, request)
            except ReconciliationError as exc:
                await db.rollback()
                print(f"❌ Apply failed: {exc}")
                return 1
            await db.commit()

            updated += outcome.updated
            skipped += outcome.skipped
            for error in outcome.errors or []:
                print(f"  - {error.investor_id}: {error.reason}")

        print(f"✓ Applied: {updated} updated, {skipped} skipped")
        return 0


def main() -> None:
    sys.exit(asyncio.run(run(parse_args())))


if __name__ == "__main__":
    main()
