import logging

from .errors import InvalidVote
from .profile_resolver import ProfileResolver
from .score_repository import ScoreRepository

logger = logging.getLogger(__name__)

# Score is a 32-bit INTEGER column
MAX_DELTA = 2 ** 31 - 1


class LookupService:
    """
    Ties the Riot lookup to the local score:
    - lookup(): resolve, upsert, return profile merged with the stored score
    - vote(): one increment per call
    
    Votes are not deduplicated or rate limited; any caller can vote again.
    """
    
    def __init__(self, resolver: ProfileResolver, repository: ScoreRepository):
        self.resolver = resolver
        self.repository = repository
    
    def lookup(self, tag: str) -> dict:
        """Resolve a Riot ID and return it merged with its score."""
        profile = self.resolver.resolve(tag)
        
        record = self.repository.upsert_profile(
            stable_id=profile.puuid,
            legacy_id=profile.summoner_id,
            display_name=profile.display_name,
            icon_url=profile.icon_url,
            level=profile.level
        )
        
        return {
            'stableId': profile.puuid,
            'legacyId': profile.summoner_id,
            'displayName': profile.display_name,
            'gameName': profile.game_name,
            'tagLine': profile.tag_line,
            'iconUrl': profile.icon_url,
            'level': profile.level,
            'score': record.score,
        }
    
    def vote(self, stable_id, delta) -> int:
        """Apply a vote and return the new score."""
        if not isinstance(stable_id, str) or not stable_id.strip():
            raise InvalidVote("stableId is required")
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise InvalidVote("delta must be an integer")
        if abs(delta) > MAX_DELTA:
            raise InvalidVote(f"delta must be between -{MAX_DELTA} and {MAX_DELTA}")
        
        return self.repository.increment(stable_id.strip(), delta)
