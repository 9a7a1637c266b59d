"""
Create a CMS user from the command line, typically the first super-admin.

    python -m src.scripts.create_user admin@nuprc.gov.ng 'S3cretPass' Ada Obi super-admin
"""

import argparse
import asyncio
import logging

from sqlmodel import SQLModel

from src.app.services.passwords import hash_password
from src.app.use_cases.users.dtos import normalize_role
from src.depends import engine, unit_of_work_scope
from src.domain.entities import User, UserRole

logger = logging.getLogger(__name__)


async def create_user(
    email: str, password: str, first_name: str, last_name: str, role: UserRole
) -> User:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with unit_of_work_scope() as uow:
        async with uow:
            email = email.strip().lower()
            if await uow.users.get_by_email(email) is not None:
                raise SystemExit(f"User {email} already exists")

            user = await uow.users.create(
                User(
                    email=email,
                    password_hash=hash_password(password),
                    first_name=first_name,
                    last_name=last_name,
                    role=role,
                )
            )
            await uow.commit()
            return user


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a CMS user")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("first_name")
    parser.add_argument("last_name")
    parser.add_argument(
        "role",
        nargs="?",
        default=UserRole.super_admin.value,
        type=normalize_role,
        choices=[role.value for role in UserRole],
    )
    args = parser.parse_args()

    if len(args.password) < 8:
        parser.error("password must be at least 8 characters")

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    user = asyncio.run(
        create_user(args.email, args.password, args.first_name, args.last_name, UserRole(args.role))
    )
    logger.info(f"Created {user.role.value} {user.email} ({user.id})")


if __name__ == "__main__":
    main()
