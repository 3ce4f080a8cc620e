"""
XP and Rank System

Ranks are fixed XP thresholds; the level is the rank's position (1-based).

Rank ladder:
- Recruit: 0 XP
- Soldier: 50 XP
- Corporal: 120 XP
- Sergeant: 220 XP
- Sub-lieutenant: 360 XP
- Lieutenant: 540 XP (top rank, no cap)

XP Award Rules:
- Mission completed (not done -> done): 10 XP
- Mission re-opened (done -> not done): no change
"""

from typing import Dict, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

XP_PER_MISSION = 10

RANK_THRESHOLDS = [0, 50, 120, 220, 360, 540]
RANK_NAMES = ["Recruit", "Soldier", "Corporal", "Sergeant", "Sub-lieutenant", "Lieutenant"]


def calculate_rank(xp: int) -> Tuple[str, int]:
    """
    Calculate rank name and level from total XP

    Returns:
        (rank_name, level) where level is 1..len(RANK_NAMES)
    """
    index = 0
    for i in reversed(range(len(RANK_THRESHOLDS))):
        if xp >= RANK_THRESHOLDS[i]:
            index = i
            break
    return RANK_NAMES[index], index + 1


def get_rank_progress(xp: int) -> Dict[str, Optional[object]]:
    """
    Rank plus distance to the next one

    Returns:
        {
            'rank': str,
            'level': int,
            'total_xp': int,
            'next_rank': str or None (top rank),
            'xp_to_next_rank': int or None (top rank)
        }
    """
    rank, level = calculate_rank(xp)

    if level < len(RANK_NAMES):
        next_rank = RANK_NAMES[level]
        xp_to_next_rank = RANK_THRESHOLDS[level] - xp
    else:
        next_rank = None
        xp_to_next_rank = None

    return {
        "rank": rank,
        "level": level,
        "total_xp": xp,
        "next_rank": next_rank,
        "xp_to_next_rank": xp_to_next_rank,
    }
