import pygame

from pixel_racer.scenes.menu import run_menu
from pixel_racer.scenes.race import run_race
from pixel_racer.settings import *
from pixel_racer.utils.log import get_logger, setup_logging
from pixel_racer.utils.storage import SessionStore

logger = get_logger("main")


def main():
    setup_logging()
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)

    pygame.display.set_caption(f"Pixel Racer v{VERSION}")
    clock = pygame.time.Clock()

    # Lives for the whole process, so best distance survives trips to the menu
    store = SessionStore()
    current_scene = "MENU"

    try:
        while True:
            if current_scene == "MENU":
                result = run_menu(screen, clock)
                if result == "RACE":
                    current_scene = "RACE"
                elif result == "QUIT":
                    break
            elif current_scene == "RACE":
                result = run_race(screen, clock, store)
                if result == "MENU":
                    current_scene = "MENU"
                elif result == "QUIT":
                    break
            logger.debug("scene -> %s", current_scene)
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
