"""Main entry point: text console over the coaching engine"""
import argparse
import asyncio
import logging
from pathlib import Path

from hardman.config import validate_config, LOG_LEVEL, PREFS_FILE
from hardman.exceptions import HardmanError, ValidationError
from hardman.gamification.rank_system import get_rank_progress
from hardman.services.container import ServiceContainer
from hardman.storage.kv_store import JsonFileKeyValueStore
from hardman.utils.scheduler import AsyncioScheduler
from hardman.utils.sfx import LoggingTonePlayer
from hardman.utils.voice import LoggingSpeechOutput

# Configure logging
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO)
)

logger = logging.getLogger(__name__)

HELP = """Commands:
  add <title>     add a mission
  toggle <id>     complete / re-open a mission
  recommend       add suggested missions
  missions        list missions
  rank            show XP and rank
  set <field> <v> edit a profile field (first_name, weight_kg, goal, ...)
  bmi             show BMI
  chat <text>     talk to the sergeant
  motivate        start / stop the motivation loop
  quit            exit"""


async def handle(container: ServiceContainer, line: str) -> bool:
    """Run one console command; returns False to exit"""
    command, _, arg = line.strip().partition(" ")
    missions = container.mission_store

    if command in ("quit", "exit"):
        return False
    if command == "add":
        mission = await missions.add_mission(arg)
        print(f"Added [{mission.id}] {mission.title}" if mission else "Mission not added")
    elif command == "toggle":
        try:
            mission_id = int(arg)
        except ValueError:
            print("Usage: toggle <id>")
            return True
        await missions.toggle_mission(mission_id)
    elif command == "recommend":
        for mission in await missions.recommend_missions():
            print(f"+ [{mission.id}] {mission.title}")
    elif command == "missions":
        for mission in missions.missions:
            print(f"[{'x' if mission.done else ' '}] {mission.id} {mission.title}")
    elif command == "rank":
        progress = get_rank_progress(missions.xp)
        print(f"{progress['rank']} (level {progress['level']}) - {progress['total_xp']} XP")
        if progress["next_rank"]:
            print(f"{progress['xp_to_next_rank']} XP to {progress['next_rank']}")
    elif command == "set":
        field, _, value = arg.partition(" ")
        try:
            await container.profile_store.update_field(field, value.strip())
        except ValidationError as e:
            print(e.user_message)
    elif command == "bmi":
        bmi = container.profile_store.bmi
        print(f"BMI {bmi.value:.1f} - {bmi.label}" if bmi.is_determined else bmi.label)
    elif command == "chat":
        reply = container.chat_service.send(arg)
        if reply:
            print(f"Sergeant: {reply.text}")
    elif command == "motivate":
        print("Motivation on" if container.motivation.toggle() else "Motivation off")
    else:
        print(HELP)
    return True


async def main(data_file: Path = PREFS_FILE) -> None:
    """Main application entry point"""
    container = None
    try:
        logger.info("Validating configuration...")
        validate_config()

        container = ServiceContainer(
            kv_store=JsonFileKeyValueStore(data_file),
            speech=LoggingSpeechOutput(),
            tones=LoggingTonePlayer(),
            scheduler=AsyncioScheduler(),
        )
        await container.load()

        profile = container.profile_store.profile
        if not profile.is_registered:
            print("No profile yet. Fill in the registration form first; missions still work.")
        print(HELP)

        while True:
            line = await asyncio.to_thread(input, "> ")
            if not await handle(container, line):
                break

    except (KeyboardInterrupt, EOFError):
        logger.info("Shutting down...")
    except HardmanError as e:
        logger.error(f"Fatal error: {e.to_dict()}")
        print(e.user_message)
    finally:
        if container:
            container.close()
        logger.info("Shutdown complete")


def run() -> None:
    parser = argparse.ArgumentParser(description="Hardman fitness coach console")
    parser.add_argument("--data-file", type=Path, default=PREFS_FILE, help="Preferences JSON file")
    args = parser.parse_args()
    asyncio.run(main(args.data_file))


if __name__ == "__main__":
    run()
