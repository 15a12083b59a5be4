#!/usr/bin/env python
"""Insert the sample employees when they are not registered yet."""

import asyncio
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy.ext.asyncio import AsyncSession

from rira_api.database import async_session_maker, engine, init_db
from rira_api.models.domain.enums import EducationLevel, Gender
from rira_api.repositories.employee_repository import EmployeeRepository

SAMPLE_EMPLOYEES = [
    {
        "first_name": "سروش",
        "last_name": "مغربی",
        "gender": Gender.MALE,
        "mobile_number": "09120000000",
        "email": "parkand@github.com",
        "birth_date": "1370/05/21",
        "education_level": EducationLevel.DOCTORATE,
        "field_of_study": "مهندسی نرم‌افزار",
        "position": "Lead Developer",
        "is_active": True,
        "description": "توسعه‌دهنده اصلی پروژه Rira.Api",
    },
    {
        "first_name": "علی",
        "last_name": "کاظمی",
        "gender": Gender.MALE,
        "mobile_number": "09121234567",
        "email": "ali.kazemi@rira.local",
        "birth_date": "1368/11/12",
        "education_level": EducationLevel.MASTER,
        "field_of_study": "مدیریت منابع انسانی",
        "position": "HR Manager",
        "is_active": True,
        "description": "نمونه تستی برای بررسی عملکرد پیکربندی",
    },
]


async def seed_employees(session: AsyncSession) -> int:
    """Insert sample employees whose email and mobile number are unused.

    Returns:
        Number of employees inserted
    """
    repo = EmployeeRepository(session)
    inserted = 0
    for fields in SAMPLE_EMPLOYEES:
        if await repo.exists_by_email_or_mobile(fields["email"], fields["mobile_number"]):
            print(f"Employee {fields['email']} already exists")
            continue
        await repo.create(**fields)
        inserted += 1
    await session.commit()
    return inserted


async def main(create_tables: bool) -> None:
    if create_tables:
        await init_db()
    async with async_session_maker() as session:
        inserted = await seed_employees(session)
    await engine.dispose()
    print(f"Seeded {inserted} employee(s)")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Insert sample employees")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables first instead of relying on migrations",
    )
    args = parser.parse_args()

    asyncio.run(main(args.create_tables))
