"""
Pytest configuration and fixtures for summoner board tests.
"""
import os
import sys
from urllib.parse import unquote

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set testing environment before importing app
os.environ['FLASK_ENV'] = 'testing'

from summoner_board.app import create_app
from summoner_board.models import db, PlayerRecord
from summoner_board.score_repository import ScoreRepository


def make_response(mocker, status=200, payload=None):
    """Build a stand-in for requests.Response."""
    resp = mocker.MagicMock()
    resp.status_code = status
    resp.ok = status < 400
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


class FakeRiotApi:
    """
    In-memory stand-in for the Riot Account-v1 and Summoner-v4 endpoints.
    
    Accounts are matched case-insensitively by Riot ID like the real API.
    """
    
    def __init__(self, mocker):
        self.mocker = mocker
        self.players = {}
        self.calls = []
        self.failures = {}
    
    def add_player(self, puuid, game_name, tag_line, level=30, icon_id=9, summoner_id=None):
        self.players[puuid] = {
            'puuid': puuid,
            'gameName': game_name,
            'tagLine': tag_line,
            'summonerLevel': level,
            'profileIconId': icon_id,
            'id': summoner_id or f"summoner-{puuid}",
        }
    
    def fail(self, endpoint, status, message=None):
        """Make every call to endpoint ('by-riot-id', 'summoner', 'by-puuid') fail."""
        self.failures[endpoint] = (status, message)
    
    def get(self, url, headers=None, timeout=None):
        self.calls.append(url)
        
        if '/riot/account/v1/accounts/by-riot-id/' in url:
            endpoint = 'by-riot-id'
        elif '/lol/summoner/v4/summoners/by-puuid/' in url:
            endpoint = 'summoner'
        else:
            endpoint = 'by-puuid'
        
        if endpoint in self.failures:
            status, message = self.failures[endpoint]
            return make_response(self.mocker, status, {'status': {'message': message, 'status_code': status}})
        
        parts = [unquote(p) for p in url.split('/')]
        if endpoint == 'by-riot-id':
            game_name, tag_line = parts[-2], parts[-1]
            for player in self.players.values():
                if (player['gameName'].lower(), player['tagLine'].lower()) == (game_name.lower(), tag_line.lower()):
                    return make_response(self.mocker, 200, {
                        'puuid': player['puuid'],
                        'gameName': player['gameName'],
                        'tagLine': player['tagLine'],
                    })
            return make_response(self.mocker, 404, {'status': {'message': 'Data not found', 'status_code': 404}})
        
        player = self.players.get(parts[-1])
        if player is None:
            return make_response(self.mocker, 404, {'status': {'message': 'Data not found', 'status_code': 404}})
        
        if endpoint == 'summoner':
            return make_response(self.mocker, 200, {
                'id': player['id'],
                'puuid': player['puuid'],
                'summonerLevel': player['summonerLevel'],
                'profileIconId': player['profileIconId'],
            })
        return make_response(self.mocker, 200, {
            'puuid': player['puuid'],
            'gameName': player['gameName'],
            'tagLine': player['tagLine'],
        })


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app('testing')
    
    with app.app_context():
        app.store.ensure()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create database session for testing."""
    with app.app_context():
        # Clear all tables before each test
        db.session.remove()
        
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        
        yield db.session
        
        db.session.rollback()


@pytest.fixture
def repository(app, db_session):
    """ScoreRepository bound to the app's store connection."""
    return ScoreRepository(app.store)


@pytest.fixture
def riot_api(app, mocker):
    """Route the app's Riot client through FakeRiotApi."""
    fake = FakeRiotApi(mocker)
    mocker.patch.object(app.lookup.resolver.client.session, 'get', side_effect=fake.get)
    return fake


@pytest.fixture
def sample_players(app, db_session):
    """Three stored players with scores 10, 3 and 7."""
    with app.app_context():
        players = []
        for i, (name, score) in enumerate([('Alpha#NA1', 10), ('Bravo#NA1', 3), ('Charlie#EUW', 7)]):
            record = PlayerRecord(
                stable_id=f'puuid-{i + 1}',
                legacy_id=f'summoner-{i + 1}',
                display_name=name,
                icon_url=f'https://ddragon.test/cdn/14.7.1/img/profileicon/{i + 1}.png',
                level=100 + i,
                score=score
            )
            db.session.add(record)
            players.append(record)
        
        db.session.commit()
        return players
