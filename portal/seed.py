"""
Seed the account store with a demo admin and a demo wholesale user
"""
import logging

from portal.database import SessionLocal, init_db
from portal.models.user import Role
from portal.repositories.user_repository import UserRepository
from portal.services.auth_service import hash_password

logger = logging.getLogger(__name__)

SEED_USERS = [
    {
        'email': 'admin@wholesale.com',
        'password': 'admin123',
        'name': 'Admin User',
        'role': Role.ADMIN.value
    },
    {
        'email': 'user@wholesale.com',
        'password': 'user123',
        'name': 'Test User',
        'company': 'Test Company',
        'phone': '123-456-7890',
        'role': Role.USER.value
    },
]


def seed(db) -> int:
    """
    Create the demo accounts that do not exist yet

    Returns:
        Number of accounts created
    """
    repository = UserRepository(db)
    created = 0
    for data in SEED_USERS:
        if repository.get_by_email(data['email']):
            logger.info("Account %s already exists, skipping", data['email'])
            continue
        repository.create({**data, 'password': hash_password(data['password'])})
        logger.info("Created %s account %s", data['role'], data['email'])
        created += 1
    return created


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    init_db()
    db = SessionLocal()
    try:
        created = seed(db)
    finally:
        db.close()
    logger.info("Database seeding completed (%d new accounts)", created)


if __name__ == "__main__":
    main()
