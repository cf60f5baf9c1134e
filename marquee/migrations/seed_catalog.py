"""
Seed the database with an administrator account and a starter catalog

Safe to run repeatedly: the admin is matched by email and movies by title.

Run:
    python -m marquee.migrations.seed_catalog
"""
import os
import logging
from typing import Dict, List

from dotenv import load_dotenv
from sqlalchemy.orm import Session

from marquee.database import get_db_session
from marquee.models.movie import Movie
from marquee.models.user import User, ADMIN_ROLE
from marquee.utils.security import hash_password

load_dotenv()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@marquee.app")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "AdminPassword123!")

STARTER_CATALOG: List[Dict] = [
    {"title": "Stranger Than Paradise", "director": "Jim Jarmusch", "release_year": 1984},
    {"title": "Mystery Train", "director": "Jim Jarmusch", "release_year": 1989},
    {"title": "Dead Man", "director": "Jim Jarmusch", "release_year": 1995},
    {"title": "Coffee and Cigarettes", "director": "Jim Jarmusch", "release_year": 2003},
    {"title": "Broken Flowers", "director": "Jim Jarmusch", "release_year": 2005},
    {"title": "Fantastic Mr. Fox", "director": "Wes Anderson", "release_year": 2009},
    {"title": "The Royal Tenenbaums", "director": "Wes Anderson", "release_year": 2001},
    {"title": "The Grand Budapest Hotel", "director": "Wes Anderson", "release_year": 2014},
    {"title": "Moonrise Kingdom", "director": "Wes Anderson", "release_year": 2012},
    {"title": "The Darjeeling Limited", "director": "Wes Anderson", "release_year": 2007},
    {"title": "In The Mood For Love", "director": "Wong Kar-wai", "release_year": 2000},
    {"title": "2046", "director": "Wong Kar-wai", "release_year": 2004},
    {"title": "Fallen Angels", "director": "Wong Kar-wai", "release_year": 1995},
    {"title": "Chungking Express", "director": "Wong Kar-wai", "release_year": 1994},
    {"title": "Happy Together", "director": "Wong Kar-wai", "release_year": 1997},
    {"title": "Eraserhead", "director": "David Lynch", "release_year": 1977},
    {"title": "Blue Velvet", "director": "David Lynch", "release_year": 1986},
    {"title": "Lost Highway", "director": "David Lynch", "release_year": 1997},
    {"title": "Mulholland Drive", "director": "David Lynch", "release_year": 2001},
    {"title": "The Elephant Man", "director": "David Lynch", "release_year": 1980},
    {"title": "Breathless", "director": "Jean-Luc Godard", "release_year": 1960},
    {"title": "Pierrot le Fou", "director": "Jean-Luc Godard", "release_year": 1965},
    {"title": "Masculin Féminin", "director": "Jean-Luc Godard", "release_year": 1966},
    {"title": "Alphaville", "director": "Jean-Luc Godard", "release_year": 1965},
    {"title": "2 or 3 Things I Know About Her", "director": "Jean-Luc Godard", "release_year": 1967},
    {"title": "Three Colours: Red", "director": "Krzysztof Kieślowski", "release_year": 1994},
    {"title": "Three Colours: Blue", "director": "Krzysztof Kieślowski", "release_year": 1993},
    {"title": "Three Colours: White", "director": "Krzysztof Kieślowski", "release_year": 1994},
    {"title": "The Double Life of Véronique", "director": "Krzysztof Kieślowski", "release_year": 1991},
    {"title": "A Short Film About Killing", "director": "Krzysztof Kieślowski", "release_year": 1988},
]


def seed_admin(db: Session) -> User:
    """Create the admin account, or make sure the existing one has the Admin role"""
    admin = db.query(User).filter(User.email == ADMIN_EMAIL).first()
    if admin is None:
        admin = User(
            email=ADMIN_EMAIL,
            password_hash=hash_password(ADMIN_PASSWORD),
            nickname="Admin",
            roles=[ADMIN_ROLE]
        )
        db.add(admin)
        logger.info(f"✓ Created admin account {ADMIN_EMAIL}")
    elif not admin.is_admin:
        admin.roles = list(admin.roles or []) + [ADMIN_ROLE]
        logger.info(f"✓ Granted Admin role to {ADMIN_EMAIL}")
    db.commit()
    return admin


def seed_movies(db: Session, catalog: List[Dict] = STARTER_CATALOG) -> int:
    """Add or update catalog movies by title; returns how many were added"""
    added = 0
    for entry in catalog:
        movie = db.query(Movie).filter(Movie.title == entry["title"]).first()
        if movie is None:
            db.add(Movie(**entry))
            added += 1
        else:
            for field, value in entry.items():
                setattr(movie, field, value)
    db.commit()
    logger.info(f"✓ Catalog seeded: {added} added, {len(catalog) - added} updated")
    return added


def seed():
    db = get_db_session()
    try:
        seed_admin(db)
        seed_movies(db)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed()
