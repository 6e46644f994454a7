import logging
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidFormat, UpstreamError
from .riot_client import RiotClient

logger = logging.getLogger(__name__)

ICON_PATH = "{host}/cdn/{version}/img/profileicon/{icon_id}.png"


@dataclass
class ResolvedProfile:
    puuid: str
    summoner_id: str
    game_name: str
    tag_line: str
    level: int
    profile_icon_id: int
    icon_url: str
    
    @property
    def display_name(self) -> str:
        return f"{self.game_name}#{self.tag_line}"


def parse_riot_id(tag: str) -> Tuple[str, str]:
    """
    Split 'gameName#tagLine' into its two parts.
    
    Raises:
        InvalidFormat: no separator, more than one, or an empty side
    """
    if not tag or tag.count('#') != 1:
        raise InvalidFormat()
    
    game_name, tag_line = (part.strip() for part in tag.split('#'))
    if not game_name or not tag_line:
        raise InvalidFormat("Invalid Riot ID format. Both gameName and tagLine are required.")
    return game_name, tag_line


class ProfileResolver:
    """
    Resolves a Riot ID into a summoner profile.
    
    Three chained calls, each needing the previous result:
    Riot ID -> PUUID, PUUID -> summoner (level, icon), PUUID -> canonical Riot ID.
    Any failure aborts the resolution; nothing is retried.
    """
    
    def __init__(self, client: RiotClient, asset_host: str, asset_version: str):
        self.client = client
        self.asset_host = asset_host.rstrip('/')
        self.asset_version = asset_version
    
    def resolve(self, tag: str) -> ResolvedProfile:
        game_name, tag_line = parse_riot_id(tag)
        
        account = self.client.get_account_by_riot_id(game_name, tag_line)
        logger.info(f"Resolved {game_name}#{tag_line} to PUUID {account.puuid}")
        
        summoner = self.client.get_summoner_by_puuid(account.puuid)
        
        # The typed tag may differ in casing or be stale after a name change
        canonical = self.client.get_account_by_puuid(account.puuid)
        if canonical.puuid != account.puuid:
            raise UpstreamError("Riot API returned a different account for the PUUID")
        
        return ResolvedProfile(
            puuid=account.puuid,
            summoner_id=summoner.summoner_id,
            game_name=canonical.game_name or game_name,
            tag_line=canonical.tag_line or tag_line,
            level=summoner.level,
            profile_icon_id=summoner.profile_icon_id,
            icon_url=self.icon_url(summoner.profile_icon_id),
        )
    
    def icon_url(self, icon_id: int) -> str:
        return ICON_PATH.format(host=self.asset_host, version=self.asset_version, icon_id=icon_id)
