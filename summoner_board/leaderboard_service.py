from typing import List

from .errors import InvalidFormat
from .score_repository import ScoreRepository

MAX_LEADERBOARD = 20
MAX_SUGGESTIONS = 10


class LeaderboardService:
    def __init__(self, repository: ScoreRepository, limit: int = MAX_LEADERBOARD):
        self.repository = repository
        self.limit = min(limit, MAX_LEADERBOARD)
    
    def top(self, limit: int = None) -> List[dict]:
        """Top entries by score, at most 20."""
        n = self.limit if limit is None else min(limit, self.limit)
        return [r.to_leaderboard_entry() for r in self.repository.top_n(n)]


class SuggestionService:
    def __init__(self, repository: ScoreRepository, limit: int = MAX_SUGGESTIONS):
        self.repository = repository
        self.limit = min(limit, MAX_SUGGESTIONS)
    
    def suggest(self, query: str) -> List[dict]:
        """Stored names containing query, for autocomplete."""
        query = (query or '').strip()
        if not query:
            raise InvalidFormat("Query parameter is required")
        return [r.to_suggestion() for r in self.repository.search_by_name_substring(query, self.limit)]
