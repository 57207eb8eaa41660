import argparse
import time

import pygame

from lander_env.lander import KeyboardLander
from lander_env.profiles import PROFILES

# pygame key codes -> browser-style key names understood by the input tracker
KEY_NAMES = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
}


def key_name(event):
    return KEY_NAMES.get(event.key, pygame.key.name(event.key))


def parse_args():
    parser = argparse.ArgumentParser(description="Fly the lunar lander with the arrow keys.")
    parser.add_argument("--profile", choices=sorted(PROFILES), default="classic",
                        help="classic: lose on ground/fuel. resizable: never lose, window resizes.")
    parser.add_argument("--texture", default=None,
                        help="Ship sprite; a placeholder is drawn if it cannot be loaded.")
    return parser.parse_args()


def main():
    args = parse_args()

    # ---------------------------------------------------------
    # 1. Load the Environment
    # ---------------------------------------------------------
    env = KeyboardLander(render_mode="human", profile=args.profile, texture_path=args.texture)
    env.reset()
    env.render()  # opens the window before the first event pump
    game = env.game

    print(f"Profile: {args.profile}")
    print("UP: thrust   LEFT/RIGHT: tilt   ESC: quit")

    # ---------------------------------------------------------
    # 2. Frame loop: events, one physics step, draw
    # ---------------------------------------------------------
    running = True
    reported = False
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                game.handle_key_down(key_name(event))
            elif event.type == pygame.KEYUP:
                game.handle_key_up(key_name(event))
            elif event.type == pygame.VIDEORESIZE:
                game.resize(event.w, event.h)

        # Time since the previous frame, measured by the visualizer's clock
        game.tick(env.visualizer.last_frame_ms)
        env.render()

        if game.game_over and not reported:
            r = game.snapshot().readouts
            print(f">>> Lost. Altitude {r['altitude']} m, fuel {r['fuel']} kg")
            reported = True

    # Pause to see the final frame
    time.sleep(0.5)
    env.close()

if __name__ == "__main__":
    main()
