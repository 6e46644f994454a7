#!/usr/bin/env python3
"""
Database management script for deployment.
Run this during the build/deployment pipeline to create the schema
ahead of the first request.
"""
import sys

from summoner_board.app import create_app
from summoner_board.errors import StoreUnavailable


def deploy():
    """Run deployment tasks."""
    print("Initializing score store...")
    app = create_app()
    with app.app_context():
        try:
            app.store.ensure()
            print("✓ Score store ready.")
        except StoreUnavailable as e:
            print(f"Error initializing score store: {e}")
            sys.exit(1)


if __name__ == '__main__':
    deploy()
