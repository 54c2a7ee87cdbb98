#!/usr/bin/env python3
"""
Cleanup Expired Verification Codes
Deletes verification codes whose expiry has passed. Run from cron.
"""

import os
import asyncio
import sys

# Add parent directory to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from docforms.database import get_db, init_db, close_db
from docforms.services.verification import VerificationService


async def cleanup() -> int:
    await init_db()

    deleted = 0
    async for db in get_db():
        deleted = await VerificationService(db).cleanup_expired_codes()
        break

    await close_db()
    return deleted


if __name__ == "__main__":
    count = asyncio.run(cleanup())
    print(f"✅ Removed {count} expired verification codes")
