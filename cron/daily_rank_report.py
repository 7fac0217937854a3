#!/usr/bin/env python3
"""
Daily Driver Rank Report.

Run daily via cron:
    0 6 * * * cd /path/to/delivery-dispatch && python -m cron.daily_rank_report

This script:
1. Builds the global driver rank report
2. Builds one rank report per city
3. Logs every report line for monitoring
"""

import asyncio
import logging
import sys
from datetime import datetime
from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from delivery_dispatch.config import get_settings
from delivery_dispatch.database import async_session_maker
from delivery_dispatch.repository import DispatchRepository
from delivery_dispatch.services.ranking import RankingAggregator, DriverDistance


# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("daily_rank_report")

GLOBAL_SCOPE = "all"


class DailyRankReport:
    """Produces the global and per-city rank reports for one session."""
    
    def __init__(self, db: AsyncSession):
        self.repository = DispatchRepository(db)
        self.ranking = RankingAggregator(self.repository)
    
    async def run(self) -> Dict[str, List[DriverDistance]]:
        """Build every report, keyed by scope name ("all" or a city name)."""
        reports = {GLOBAL_SCOPE: await self.ranking.rank()}
        
        for city in await self.repository.find_all_cities():
            reports[city.name] = await self.ranking.rank(city)
        
        for scope, report in reports.items():
            logger.info(f"Rank report [{scope}]: {len(report)} drivers")
            for position, line in enumerate(report, start=1):
                logger.info(f"  {position}. {line.driver.name}: {line.total_distance} km")
        
        return reports


async def run_daily_rank_report() -> Dict[str, List[DriverDistance]]:
    """Main entry point for the rank report cron job."""
    async with async_session_maker() as db:
        return await DailyRankReport(db).run()


def main():
    """CLI entry point."""
    logger.info("=" * 60)
    logger.info("DAILY DRIVER RANK REPORT - " + datetime.utcnow().isoformat())
    logger.info("=" * 60)
    
    try:
        reports = asyncio.run(run_daily_rank_report())
        logger.info(f"Built {len(reports)} reports")
        return 0
    except Exception as e:
        logger.error(f"Rank report failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
