"""
Gamification for Hardman

- Rank ladder driven by XP
- Missions (codec, ids) and goal-based recommendations
"""

from hardman.gamification.rank_system import calculate_rank, get_rank_progress, XP_PER_MISSION
from hardman.gamification.missions import encode_missions, decode_missions, MissionIdGenerator
from hardman.gamification.recommender import recommend_missions

__all__ = [
    "calculate_rank",
    "get_rank_progress",
    "XP_PER_MISSION",
    "encode_missions",
    "decode_missions",
    "MissionIdGenerator",
    "recommend_missions",
]
