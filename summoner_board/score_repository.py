import logging
from typing import List, Optional

from sqlalchemy.exc import DataError, IntegrityError

from .errors import InvalidVote, NotFound
from .models import db, PlayerRecord
from .store import StoreConnection

logger = logging.getLogger(__name__)


class ScoreRepository:
    """
    Persistence for player records and their vote scores.
    
    Profile refreshes never touch the score; only increment() does.
    """
    
    def __init__(self, store: StoreConnection):
        self.store = store
    
    def get(self, stable_id: str) -> Optional[PlayerRecord]:
        """Get a record by PUUID."""
        self.store.ensure()
        return PlayerRecord.query.filter_by(stable_id=stable_id).first()
    
    def upsert_profile(
        self,
        stable_id: str,
        legacy_id: str,
        display_name: str,
        icon_url: str,
        level: int
    ) -> PlayerRecord:
        """Create the record with a zero score, or refresh its profile fields."""
        self.store.ensure()
        
        fields = {
            'legacy_id': legacy_id,
            'display_name': display_name,
            'icon_url': icon_url,
            'level': level,
        }
        
        record = PlayerRecord.query.filter_by(stable_id=stable_id).first()
        if record is None:
            record = PlayerRecord(stable_id=stable_id, score=0, **fields)
            db.session.add(record)
            try:
                db.session.commit()
                logger.info(f"Created player record for {stable_id} ({display_name})")
                return record
            except IntegrityError:
                # Another request inserted the same PUUID first
                db.session.rollback()
                record = PlayerRecord.query.filter_by(stable_id=stable_id).first()
                if record is None:
                    raise
        
        for key, value in fields.items():
            setattr(record, key, value)
        db.session.commit()
        return record
    
    def increment(self, stable_id: str, delta: int) -> int:
        """
        Atomically add delta to the score.
        
        Returns:
            The new score
        
        Raises:
            NotFound: no record for stable_id
            InvalidVote: the score would drop below zero
        """
        self.store.ensure()
        
        try:
            updated = PlayerRecord.query.filter(
                PlayerRecord.stable_id == stable_id,
                PlayerRecord.score + delta >= 0
            ).update(
                {PlayerRecord.score: PlayerRecord.score + delta},
                synchronize_session=False
            )
        except DataError as e:
            # Out of range for the column
            db.session.rollback()
            raise InvalidVote("Score is out of range") from e
        
        if not updated:
            db.session.rollback()
            exists = db.session.query(
                PlayerRecord.query.filter_by(stable_id=stable_id).exists()
            ).scalar()
            if not exists:
                raise NotFound()
            raise InvalidVote("Score cannot drop below zero")
        
        # Read inside the same transaction; the row stays locked until commit
        score = db.session.query(PlayerRecord.score).filter_by(stable_id=stable_id).scalar()
        db.session.commit()
        logger.info(f"Score for {stable_id} changed by {delta} to {score}")
        return score
    
    def top_n(self, n: int) -> List[PlayerRecord]:
        """Highest scores first; ties keep insertion order."""
        self.store.ensure()
        if n <= 0:
            return []
        return (
            PlayerRecord.query
            .order_by(PlayerRecord.score.desc(), PlayerRecord.id.asc())
            .limit(n)
            .all()
        )
    
    def search_by_name_substring(self, query: str, limit: int) -> List[PlayerRecord]:
        """Case-insensitive substring match on the display name."""
        self.store.ensure()
        if limit <= 0 or not query:
            return []
        return (
            PlayerRecord.query
            .filter(PlayerRecord.display_name.icontains(query, autoescape=True))
            .order_by(PlayerRecord.score.desc(), PlayerRecord.display_name.asc())
            .limit(limit)
            .all()
        )
