from app.models.counter import Counter
from app.models.event import Event
from app.models.campaign import Campaign
from app.models.referrer import Referrer
from app.models.referee import Referee
from app.models.reward import Reward
from app.models.event_log import EventLog

__all__ = [
    "Counter",
    "Event",
    "Campaign",
    "Referrer",
    "Referee",
    "Reward",
    "EventLog",
]
