"""
Seed the configured database with demo employees.

Writes through the repository, which does not check email uniqueness, so
the generated addresses are numbered.

    python scripts/seed_employees.py --count 50
"""
from __future__ import annotations

import argparse
import asyncio
import random
from datetime import date, timedelta

from employee_records import models
from employee_records.config import get_settings
from employee_records.database import create_engine, create_session_factory
from employee_records.employee_repository import EmployeeRepository
from employee_records.logging_config import get_logger, setup_logging
from employee_records.schemas import EmployeeForm

logger = get_logger(__name__)

FIRST_NAMES = ["Ada", "Grace", "Alan", "Edsger", "Barbara", "Donald", "Margaret", "Ken"]
LAST_NAMES = ["Lovelace", "Hopper", "Turing", "Dijkstra", "Liskov", "Knuth", "Hamilton", "Thompson"]
STREETS = ["Baker Street", "High Road", "Mill Lane", "Station Road", "Church Street"]


def demo_employee(index: int, rng: random.Random) -> EmployeeForm:
    first = rng.choice(FIRST_NAMES)
    last = rng.choice(LAST_NAMES)
    dob = None
    if rng.random() > 0.2:
        dob = date(1970, 1, 1) + timedelta(days=rng.randint(0, 365 * 35))
    return EmployeeForm(
        name=f"{first} {last}",
        email=f"{first.lower()}.{last.lower()}{index}@acme.com",
        address=f"{rng.randint(1, 250)} {rng.choice(STREETS)}",
        dob=dob,
        phone_number=f"555-{rng.randint(100000, 999999)}",
        is_active=rng.random() > 0.1,
    )


async def seed(count: int, seed_value: int) -> None:
    settings = get_settings()
    engine = create_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(models.Base.metadata.create_all)

    repository = EmployeeRepository(create_session_factory(engine))
    rng = random.Random(seed_value)
    try:
        for index in range(1, count + 1):
            employee_id = await repository.save_employee(demo_employee(index, rng))
            logger.debug("employee_seeded", employee_id=employee_id)
    finally:
        await engine.dispose()
    logger.info("seed_complete", count=count, database_url=settings.database_url)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--count", type=int, default=25, help="number of employees to create")
    parser.add_argument("--seed", type=int, default=7, help="random seed for repeatable data")
    args = parser.parse_args()

    setup_logging()
    asyncio.run(seed(args.count, args.seed))


if __name__ == "__main__":
    main()
