import logging
import os
from flask import Flask, request, jsonify
from werkzeug.exceptions import HTTPException

from .config import config
from .errors import BoardError, InvalidVote
from .models import db
from .store import StoreConnection
from .riot_client import RiotClient
from .profile_resolver import ProfileResolver
from .score_repository import ScoreRepository
from .lookup_service import LookupService
from .leaderboard_service import LeaderboardService, SuggestionService

logger = logging.getLogger(__name__)


def create_app(config_name: str = None) -> Flask:
    """Application factory for the summoner board service."""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')
    
    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))
    
    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        raise RuntimeError("DATABASE_URL is not configured.")
    
    logging.getLogger('summoner_board').setLevel(app.config.get('LOG_LEVEL', 'INFO'))
    
    # Initialize extensions; tables are created lazily by the store
    db.init_app(app)
    
    # Initialize services
    store = StoreConnection()
    repository = ScoreRepository(store)
    resolver = ProfileResolver(
        RiotClient.from_config(app.config),
        asset_host=app.config['DDRAGON_HOST'],
        asset_version=app.config['DDRAGON_VERSION']
    )
    
    # Store services on app for access in routes
    app.store = store
    app.repository = repository
    app.lookup = LookupService(resolver, repository)
    app.leaderboard = LeaderboardService(repository, app.config['LEADERBOARD_LIMIT'])
    app.suggestions = SuggestionService(repository, app.config['SUGGESTION_LIMIT'])
    
    register_error_handlers(app)
    register_api_routes(app)
    
    return app


def register_error_handlers(app: Flask):
    """Every failure leaves as a JSON error object."""
    
    @app.errorhandler(BoardError)
    def handle_board_error(e: BoardError):
        return jsonify(e.to_dict()), e.status_code
    
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({'error': e.description}), e.code
    
    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}")
        db.session.rollback()
        return jsonify({'error': 'An internal server error occurred.'}), 500


def register_api_routes(app: Flask):
    """Register API routes."""
    
    # ==================== Lookup ====================
    
    @app.route('/lookup', methods=['GET'])
    @app.route('/api/summoner', methods=['GET'])
    def api_lookup():
        """Resolve a Riot ID and return it merged with its score."""
        name = request.args.get('name', '')
        return jsonify(app.lookup.lookup(name))
    
    # ==================== Votes ====================
    
    @app.route('/vote', methods=['POST'])
    @app.route('/api/summoner', methods=['POST'])
    def api_vote():
        """Add delta to a summoner's score."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise InvalidVote("Request body must be a JSON object")
        
        stable_id = data.get('stableId', data.get('puuid'))
        delta = data.get('delta', data.get('increment'))
        score = app.lookup.vote(stable_id, delta)
        
        body = {'score': score}
        if request.path.startswith('/api/'):
            body['dogPoints'] = score
        return jsonify(body)
    
    # ==================== Leaderboard & Suggestions ====================
    
    @app.route('/leaderboard', methods=['GET'])
    @app.route('/api/leaderboard', methods=['GET'])
    def api_leaderboard():
        """Top summoners by score."""
        return jsonify(app.leaderboard.top())
    
    @app.route('/suggestions', methods=['GET'])
    @app.route('/api/summoner-suggestions', methods=['GET'])
    def api_suggestions():
        """Stored Riot IDs containing the query."""
        return jsonify(app.suggestions.suggest(request.args.get('query', '')))
    
    # ==================== Health Check ====================
    
    @app.route('/health')
    def health_check():
        """Health check endpoint."""
        db_ok = app.store.ping()
        
        status = 'healthy' if db_ok else 'unhealthy'
        code = 200 if db_ok else 503
        
        return jsonify({
            'status': status,
            'database': 'connected' if db_ok else 'disconnected'
        }), code
