"""
Homepage Test Suite
===================
Recent reviews feed and the randomized director/decade spotlights.
A seeded random.Random keeps the spotlights reproducible.
"""
import random
from datetime import datetime, timedelta, timezone

import pytest

from marquee.models.movie import Movie
from marquee.models.review import Review
from marquee.routes.home import get_random
from marquee.main import app
from marquee.services.favorites_service import FavoritesService
from marquee.services.homepage_service import (
    HomepageService,
    candidate_decades,
    sample_movies,
    SPOTLIGHT_SIZE,
)


@pytest.fixture
def big_catalog(db_session):
    """Eight 1990s movies by one director and one 2010s movie by another"""
    catalog = [
        Movie(title=f"Nineties {i}", director="Wong Kar-wai", release_year=1990 + i)
        for i in range(8)
    ]
    catalog.append(Movie(title="Grand Budapest", director="Wes Anderson", release_year=2014))
    db_session.add_all(catalog)
    db_session.commit()
    return catalog


# ============================================
# I. HELPERS
# ============================================

class TestHelpers:

    def test_candidate_decades(self):
        assert candidate_decades([1984, 1989, 1995, 2000, 2014]) == [1980, 1990, 2000, 2010]

    def test_candidate_decades_skip_unknown_years(self):
        assert candidate_decades([0, 0, 1960]) == [1960]
        assert candidate_decades([0]) == []

    def test_sample_is_distinct_and_capped(self):
        picked = sample_movies(list(range(20)), SPOTLIGHT_SIZE, random.Random(7))
        assert len(picked) == SPOTLIGHT_SIZE
        assert len(set(picked)) == SPOTLIGHT_SIZE

    def test_sample_returns_all_when_fewer(self):
        picked = sample_movies(["a", "b"], SPOTLIGHT_SIZE, random.Random(7))
        assert sorted(picked) == ["a", "b"]

    def test_same_seed_same_sample(self):
        pool = list(range(30))
        assert sample_movies(pool, 6, random.Random(99)) == sample_movies(pool, 6, random.Random(99))


# ============================================
# II. SPOTLIGHTS
# ============================================

class TestSpotlights:

    def test_director_spotlight(self, db_session, big_catalog, rng):
        spotlight = HomepageService.get_director_spotlight(db_session, rng)

        assert spotlight["director"] in {"Wong Kar-wai", "Wes Anderson"}
        assert 1 <= len(spotlight["movies"]) <= SPOTLIGHT_SIZE
        assert {movie.director for movie in spotlight["movies"]} == {spotlight["director"]}
        assert len({movie.id for movie in spotlight["movies"]}) == len(spotlight["movies"])

    def test_decade_spotlight(self, db_session, big_catalog, rng):
        spotlight = HomepageService.get_decade_spotlight(db_session, rng)

        assert spotlight["decade"] in {"1990s", "2010s"}
        start = int(spotlight["decade"][:4])
        assert 1 <= len(spotlight["movies"]) <= SPOTLIGHT_SIZE
        assert all(start <= movie.release_year <= start + 9 for movie in spotlight["movies"])

    def test_nineties_are_capped_at_six(self, db_session, big_catalog):
        # Only the nineties remain once the 2010s movie is gone
        db_session.query(Movie).filter(Movie.release_year == 2014).delete()
        db_session.commit()

        spotlight = HomepageService.get_decade_spotlight(db_session, random.Random(3))

        assert spotlight["decade"] == "1990s"
        assert len(spotlight["movies"]) == SPOTLIGHT_SIZE

    def test_unknown_years_never_form_a_decade(self, db_session, rng):
        db_session.add(Movie(title="Undated", director="Anon", release_year=0))
        db_session.commit()

        assert HomepageService.get_decade_spotlight(db_session, rng) == {"decade": None, "movies": []}

    def test_seeded_homepage_is_reproducible(self, db_session, big_catalog):
        first = HomepageService.build_homepage(db_session, rng=random.Random(42))
        second = HomepageService.build_homepage(db_session, rng=random.Random(42))

        assert first["recommended_director_name"] == second["recommended_director_name"]
        assert [m.id for m in first["director_recommendations"]] == [m.id for m in second["director_recommendations"]]
        assert [m.id for m in first["decade_recommendations"]] == [m.id for m in second["decade_recommendations"]]

    def test_empty_catalog(self, db_session):
        homepage = HomepageService.build_homepage(db_session, rng=random.Random(1))

        assert homepage["recent_reviews"] == []
        assert homepage["recommended_director_name"] is None
        assert homepage["director_recommendations"] == []
        assert homepage["recommended_decade"] is None
        assert homepage["decade_recommendations"] == []
        assert homepage["welcome_name"] is None


# ============================================
# III. RECENT REVIEWS
# ============================================

class TestRecentReviews:

    def test_six_newest_with_liked_flags(self, db_session, big_catalog, test_user, other_user):
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i, movie in enumerate(big_catalog[:8]):
            author = test_user if i % 2 == 0 else other_user
            db_session.add(Review(
                movie_id=movie.id,
                user_id=author.id,
                rating=float(i % 5),
                comment="",
                review_date=start + timedelta(days=i),
            ))
        db_session.commit()
        # Newest review is movie 7 by other_user
        FavoritesService.toggle_favorite(db_session, other_user.id, big_catalog[7].id)
        # Liking a movie you did not review does not mark anyone's review
        FavoritesService.toggle_favorite(db_session, test_user.id, big_catalog[7].id)

        recent = HomepageService.get_recent_reviews(db_session)

        assert len(recent) == 6
        assert [r["movie_title"] for r in recent] == [f"Nineties {i}" for i in range(7, 1, -1)]
        assert recent[0]["user_display_name"] == "someone"
        assert recent[0]["user_liked_movie"] is True
        assert recent[1]["user_display_name"] == "Viewer"
        assert all(r["user_liked_movie"] is False for r in recent[1:])


# ============================================
# IV. ROUTE
# ============================================

class TestHomepageRoute:

    def test_homepage_route(self, client, db_session, big_catalog, test_user, auth_headers):
        app.dependency_overrides[get_random] = lambda: random.Random(5)

        response = client.get("/api/home/", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["welcome_name"] == "Viewer"
        assert body["recommended_director_name"] in {"Wong Kar-wai", "Wes Anderson"}
        assert len(body["director_recommendations"]) <= SPOTLIGHT_SIZE
        assert body["recommended_decade"] in {"1990s", "2010s"}

    def test_homepage_is_public(self, client):
        response = client.get("/api/home/")
        assert response.status_code == 200
        assert response.json()["welcome_name"] is None
