"""
Replace all board members with the default board.

    python -m src.scripts.seed_board_members
"""

import asyncio
import logging

from sqlalchemy import delete
from sqlmodel import SQLModel

from src.depends import engine, unit_of_work_scope
from src.domain.entities import BoardMember

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = "/images/board/placeholder.jpg"

DEFAULT_BOARD = [
    {
        "name": "Isa Ibrahim Modibbo",
        "position": "Chairman",
        "image": PLACEHOLDER_IMAGE,
        "bio": "Chairman of the NUPRC Board.",
        "order": 1,
    },
    {
        "name": "Engr. Gbenga Komolafe",
        "position": "Commission Chief Executive",
        "image": "/images/board/cce.jpg",
        "bio": "Commission Chief Executive of the NUPRC.",
        "order": 2,
    },
    {
        "name": "Bashir Indabawa",
        "position": "Executive Commissioner, Exploration & Acreage Management",
        "image": PLACEHOLDER_IMAGE,
        "bio": "Executive Commissioner overseeing Exploration and Acreage Management.",
        "order": 3,
    },
    {
        "name": "Dr. Kelechi Onyekachi Ofoegbu",
        "position": "Executive Commissioner, Corporate Services & Administration",
        "image": PLACEHOLDER_IMAGE,
        "bio": "Executive Commissioner overseeing Corporate Services and Administration.",
        "order": 4,
    },
    {
        "name": "Mr. Enorense Amadasu",
        "position": "Executive Commissioner, Development & Production",
        "image": PLACEHOLDER_IMAGE,
        "bio": "Executive Commissioner overseeing Development and Production.",
        "order": 5,
    },
    {
        "name": "Mr. Babajide Fasina",
        "position": "Executive Commissioner, Economic Regulation & Strategic Planning",
        "image": PLACEHOLDER_IMAGE,
        "bio": "Executive Commissioner overseeing Economic Regulation and Strategic Planning.",
        "order": 6,
    },
]


async def seed_board_members() -> int:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with unit_of_work_scope() as uow:
        async with uow:
            await uow.session.execute(delete(BoardMember))
            logger.info("Cleared existing board members")
            for member in DEFAULT_BOARD:
                await uow.board_members.create(BoardMember(**member))
            await uow.commit()

    return len(DEFAULT_BOARD)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    count = asyncio.run(seed_board_members())
    logger.info(f"Seeded {count} board members")


if __name__ == "__main__":
    main()
