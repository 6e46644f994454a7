import os


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-prod')
    
    # Database (required, checked in create_app)
    DATABASE_URL = os.getenv('DATABASE_URL')
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Riot API
    RIOT_API_KEY = os.getenv('RIOT_API_KEY', '')
    RIOT_PLATFORM_URL = os.getenv('RIOT_PLATFORM_URL', 'https://na1.api.riotgames.com')
    RIOT_REGIONAL_URL = os.getenv('RIOT_REGIONAL_URL', 'https://americas.api.riotgames.com')
    RIOT_TIMEOUT = float(os.getenv('RIOT_TIMEOUT', '10'))
    
    # Data Dragon asset host for profile icons
    DDRAGON_HOST = os.getenv('DDRAGON_HOST', 'https://ddragon.leagueoflegends.com')
    DDRAGON_VERSION = os.getenv('DDRAGON_VERSION', '14.7.1')
    
    LEADERBOARD_LIMIT = int(os.getenv('LEADERBOARD_LIMIT', '20'))
    SUGGESTION_LIMIT = int(os.getenv('SUGGESTION_LIMIT', '10'))
    
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    RIOT_API_KEY = 'test-riot-key'
    RIOT_PLATFORM_URL = 'https://platform.test'
    RIOT_REGIONAL_URL = 'https://regional.test'
    DDRAGON_HOST = 'https://ddragon.test'
    DDRAGON_VERSION = '14.7.1'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
