"""
Summoner Board - Riot ID lookup with a community vote leaderboard

Responsibilities:
- Resolve a Riot ID (gameName#tagLine) into a summoner profile
- Persist profiles with a vote score keyed by PUUID
- Votes, leaderboard and name suggestions over stored profiles
"""
