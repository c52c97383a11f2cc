from .location_history import LocationHistoryStore as LocationHistoryStore
from .proxy_client import ProxyClient as ProxyClient
from .quotes import fetch_daily_quote as fetch_daily_quote
