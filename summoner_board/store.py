import logging
import threading

from sqlalchemy.exc import SQLAlchemyError

from .errors import StoreUnavailable
from .models import db

logger = logging.getLogger(__name__)


class StoreConnection:
    """
    Process-wide handle on the score store.
    
    The first call to ensure() creates the schema and checks the database
    answers. Concurrent first callers block on the same attempt. A failed
    attempt leaves the handle unready so the next call tries again.
    """
    
    def __init__(self):
        self._lock = threading.Lock()
        self._ready = False
    
    @property
    def is_ready(self) -> bool:
        return self._ready
    
    def ensure(self):
        """Initialize the store on first use; no-op once it is ready."""
        if self._ready:
            return
        
        with self._lock:
            if self._ready:
                return
            try:
                self._connect()
            except SQLAlchemyError as e:
                logger.error(f"Score store connection error: {e}")
                self._discard()
                raise StoreUnavailable() from e
            
            self._ready = True
            logger.info("Score store connected successfully.")
    
    def reset(self):
        """Forget the current connection; the next ensure() reconnects."""
        with self._lock:
            self._ready = False
            self._discard()
    
    def ping(self) -> bool:
        """Check the store still answers, without raising."""
        try:
            self.ensure()
            db.session.execute(db.text('SELECT 1'))
            return True
        except (StoreUnavailable, SQLAlchemyError):
            try:
                db.session.rollback()
            except SQLAlchemyError as e:
                logger.warning(f"Rollback after failed ping raised: {e}")
            return False
    
    def _connect(self):
        db.create_all()
        db.session.execute(db.text('SELECT 1'))
        db.session.commit()
    
    def _discard(self):
        try:
            db.session.rollback()
            db.engine.dispose()
        except SQLAlchemyError as e:
            logger.warning(f"Failed to dispose score store engine: {e}")
