from datetime import datetime
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class PlayerRecord(db.Model):
    __tablename__ = 'player_records'
    
    id = db.Column(db.Integer, primary_key=True)
    stable_id = db.Column(db.String(100), unique=True, nullable=False, index=True)  # Riot PUUID
    legacy_id = db.Column(db.String(100), nullable=False)  # Encrypted summoner id
    display_name = db.Column(db.String(100), nullable=False, index=True)  # gameName#tagLine
    icon_url = db.Column(db.String(300), nullable=False)
    level = db.Column(db.Integer, nullable=False, default=0)
    score = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    __table_args__ = (
        db.CheckConstraint('score >= 0', name='score_not_negative'),
        db.CheckConstraint('level >= 0', name='level_not_negative'),
    )
    
    def to_leaderboard_entry(self):
        return {
            'stableId': self.stable_id,
            'displayName': self.display_name,
            'score': self.score,
            'iconUrl': self.icon_url,
        }
    
    def to_suggestion(self):
        return {'displayName': self.display_name}
