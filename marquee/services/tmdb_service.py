import requests
import os
from typing import Dict
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


# TMDB Service to interact with The Movie Database API
class TMDBService:
    BASE_URL = "https://api.themoviedb.org/3"
    IMAGE_BASE_URL = os.getenv("TMDB_IMAGE_BASE_URL", "https://image.tmdb.org/t/p/original")
    API_KEY = os.getenv("TMDB_API_KEY")

    @classmethod
    def _make_request(cls, endpoint: str, params: Dict = None) -> Dict:
        """
        Make HTTP request to TMDB API.

        Args:
            endpoint: API endpoint (e.g., "/search/movie")
            params: Query parameters

        Returns:
            JSON response from TMDB

        Raises:
            HTTPException: 500 if the API key is missing, 502 if the request
            or JSON decoding fails. Failures are not retried.
        """
        if not cls.API_KEY:
            raise HTTPException(status_code=500, detail="TMDB API key not configured")
        params = params or {}
        params['api_key'] = cls.API_KEY
        url = f"{cls.BASE_URL}{endpoint}"

        try:
            response = requests.get(url, params=params, timeout=10)
            response.raise_for_status()
            logger.debug(f"TMDB API request successful: {endpoint}")
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"TMDB API error for {endpoint}: {str(e)}")
            raise HTTPException(status_code=502, detail=f"TMDB API error: {str(e)}")
        except ValueError as e:
            logger.error(f"TMDB API returned invalid JSON for {endpoint}: {str(e)}")
            raise HTTPException(status_code=502, detail="TMDB API returned an invalid response")

    @classmethod
    def search_movies(cls, query: str, page: int = 1) -> Dict:
        """Search movies by title."""
        return cls._make_request("/search/movie", {'query': query, 'page': page})

    @classmethod
    def get_movie_details(cls, movie_id: int) -> Dict:
        """Get movie details with credits and poster images."""
        return cls._make_request(f"/movie/{movie_id}", {'append_to_response': 'credits,images'})

    @classmethod
    def poster_url(cls, file_path: str) -> str:
        return f"{cls.IMAGE_BASE_URL}{file_path}"
