"""Signal adapters, quote fetching, caching, rate limiting, and notification.

Re-exports all public service classes so consumers can import directly:
    from Silent_Surge.services import MarketDataService, RedditMentionService
"""

from Silent_Surge.services.cache import CacheEntry, TTLCache
from Silent_Surge.services.delivery import DeliveryService
from Silent_Surge.services.market_data import MarketDataService
from Silent_Surge.services.pivots import PivotService
from Silent_Surge.services.rate_limiter import RateLimiter
from Silent_Surge.services.reddit import RedditMentionService
from Silent_Surge.services.telegram import TelegramMentionService
from Silent_Surge.services.twitter import TwitterMentionService
from Silent_Surge.services.whatsapp import WhatsAppNotifier

__all__ = [
    # Infrastructure
    "CacheEntry",
    "RateLimiter",
    "TTLCache",
    # Mention adapters
    "RedditMentionService",
    "TelegramMentionService",
    "TwitterMentionService",
    # Market adapters
    "DeliveryService",
    "MarketDataService",
    "PivotService",
    # Notification
    "WhatsAppNotifier",
]
