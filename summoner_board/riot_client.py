"""
Riot Games API client.

Account-v1 lives on the regional host (americas, europe, asia) and
Summoner-v4 on the platform host (na1, euw1, kr). Payloads are mapped
into dataclasses here so nothing past this module sees raw JSON.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict
from urllib.parse import quote

import requests

from .errors import ConfigurationError, UpstreamError, provider_error

logger = logging.getLogger(__name__)


@dataclass
class RiotAccount:
    puuid: str
    game_name: str
    tag_line: str
    
    @property
    def riot_id(self) -> str:
        return f"{self.game_name}#{self.tag_line}"
    
    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> 'RiotAccount':
        return cls(
            puuid=_required_str(data, 'puuid'),
            game_name=_optional_str(data, 'gameName'),
            tag_line=_optional_str(data, 'tagLine'),
        )


@dataclass
class SummonerProfile:
    summoner_id: str
    level: int
    profile_icon_id: int
    
    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> 'SummonerProfile':
        return cls(
            summoner_id=_optional_str(data, 'id'),
            level=_required_int(data, 'summonerLevel'),
            profile_icon_id=_required_int(data, 'profileIconId'),
        )


def _required_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise UpstreamError(f"Riot API response is missing '{key}'")
    return value


def _optional_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise UpstreamError(f"Riot API response has a malformed '{key}'")
    return value


def _required_int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise UpstreamError(f"Riot API response is missing '{key}'")
    return value


class RiotClient:
    """Read-only access to the Riot endpoints the lookup flow needs."""
    
    def __init__(
        self,
        api_key: str,
        platform_url: str,
        regional_url: str,
        timeout: float = 10,
        session: requests.Session = None
    ):
        self.api_key = api_key
        self.platform_url = platform_url.rstrip('/')
        self.regional_url = regional_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
    
    @classmethod
    def from_config(cls, app_config) -> 'RiotClient':
        return cls(
            api_key=app_config.get('RIOT_API_KEY', ''),
            platform_url=app_config['RIOT_PLATFORM_URL'],
            regional_url=app_config['RIOT_REGIONAL_URL'],
            timeout=app_config.get('RIOT_TIMEOUT', 10),
        )
    
    def get_account_by_riot_id(self, game_name: str, tag_line: str) -> RiotAccount:
        url = (
            f"{self.regional_url}/riot/account/v1/accounts/by-riot-id/"
            f"{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        )
        return RiotAccount.from_payload(self._get_json(url))
    
    def get_account_by_puuid(self, puuid: str) -> RiotAccount:
        url = f"{self.regional_url}/riot/account/v1/accounts/by-puuid/{quote(puuid, safe='')}"
        return RiotAccount.from_payload(self._get_json(url))
    
    def get_summoner_by_puuid(self, puuid: str) -> SummonerProfile:
        url = f"{self.platform_url}/lol/summoner/v4/summoners/by-puuid/{quote(puuid, safe='')}"
        return SummonerProfile.from_payload(self._get_json(url))
    
    def _get_json(self, url: str) -> Dict[str, Any]:
        if not self.api_key:
            raise ConfigurationError()
        
        logger.info(f"Calling Riot API: {url}")
        try:
            resp = self.session.get(
                url,
                headers={'X-Riot-Token': self.api_key},
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Riot API unreachable at {url}: {e}")
            raise UpstreamError(f"Riot API unavailable: {e}", status_code=503) from e
        
        if not resp.ok:
            detail = self._error_detail(resp)
            logger.warning(f"Riot API Error ({resp.status_code}) calling {url}: {detail}")
            raise provider_error(resp.status_code, detail)
        
        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamError("Riot API returned a body that is not JSON") from e
        
        if not isinstance(data, dict):
            raise UpstreamError("Riot API returned an unexpected payload")
        return data
    
    @staticmethod
    def _error_detail(resp: requests.Response) -> str:
        try:
            body = resp.json()
        except ValueError:
            return f"Riot API Error: {resp.status_code}"
        
        status = body.get('status') if isinstance(body, dict) else None
        if isinstance(status, dict) and status.get('message'):
            return str(status['message'])
        return f"Riot API Error: {resp.status_code}"
