"""Goal- and time-of-day-based mission suggestions"""
import logging
from typing import Callable, Dict, List

from hardman.models.mission import Mission

logger = logging.getLogger(__name__)

MORNING_MISSION = "Drink a glass of water on waking"
MORNING_CUTOFF_HOUR = 12

GOAL_MISSIONS: Dict[str, List[str]] = {
    "reduce": ["Brisk 10-minute walk", "Avoid sugar in your next meal"],
    "muscle": ["3 sets of push-ups (8-12 reps)", "Post-workout protein shake"],
    "body": ["Planks 3×30s", "Farmer's carry 4×40m with moderate load"],
}
DEFAULT_GOAL = "body"


def recommended_titles(goal: str, hour: int) -> List[str]:
    """Mission titles for a goal at an hour of day (0-23), in display order"""
    titles = list(GOAL_MISSIONS.get(goal, GOAL_MISSIONS[DEFAULT_GOAL]))
    if hour < MORNING_CUTOFF_HOUR:
        titles.insert(0, MORNING_MISSION)
    return titles


def recommend_missions(goal: str, hour: int, id_generator: Callable[[], int]) -> List[Mission]:
    """
    Build new, not-done missions for a goal and hour

    Args:
        goal: Profile goal (reduce, muscle, body); anything else is treated as body
        hour: Current hour of day (0-23)
        id_generator: Returns a fresh unique id per call

    Returns:
        Missions in display order (first one goes on top)
    """
    titles = recommended_titles(goal, hour)
    missions = [Mission(id=id_generator(), title=title, done=False) for title in titles]
    logger.info(f"Recommended {len(missions)} missions for goal={goal} hour={hour}")
    return missions
