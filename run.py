#!/usr/bin/env python3
"""
Entry point for the Summoner Board service.

Usage:
    python run.py

Environment Variables:
    FLASK_ENV: development or production (default: development)
    PORT: Port to run on (default: 5000)
    DATABASE_URL: SQLAlchemy database URL (required)
    RIOT_API_KEY: Riot Games API key
    LOG_LEVEL: logging level (default: INFO)
"""
import logging
import os


def run_server():
    """Run the summoner board API."""
    from summoner_board.app import create_app
    
    logging.basicConfig(
        level=os.getenv('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(name)s %(levelname)s %(message)s'
    )
    
    app = create_app()
    port = int(os.getenv('PORT', 5000))
    debug = os.getenv('FLASK_ENV', 'development') == 'development'
    
    logging.getLogger(__name__).info(f"Starting Summoner Board on port {port}...")
    app.run(host='0.0.0.0', port=port, debug=debug)


if __name__ == '__main__':
    run_server()
