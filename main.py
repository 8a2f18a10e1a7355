import argparse
import math
import sys

import pygame

from best_time import BestTimeStore
from game import Event, Game, State, format_time
from settings import (
    BEST_TIME_FILE, BLACK, BLUE, BROWN, GOLD, GRAY, GREEN, MAZE_SCALE, RED, SCREEN_HEIGHT,
    SCREEN_WIDTH, TARGET_FPS, WHITE, YELLOW, Difficulty,
)

# --- Layout ---
MAZE_PIXEL_WIDTH = int(SCREEN_WIDTH * MAZE_SCALE)
MAZE_PIXEL_HEIGHT = int(SCREEN_HEIGHT * MAZE_SCALE)
MAZE_OFFSET = ((SCREEN_WIDTH - MAZE_PIXEL_WIDTH) // 2, (SCREEN_HEIGHT - MAZE_PIXEL_HEIGHT) // 2)
WALL_THICKNESS = 4

PLAY_BUTTON = pygame.Rect(SCREEN_WIDTH - 220, 20, 200, 60)
LEVEL_BUTTONS = {
    Difficulty.EASY: pygame.Rect(SCREEN_WIDTH // 2 - 150, SCREEN_HEIGHT // 2 - 90, 300, 50),
    Difficulty.MEDIUM: pygame.Rect(SCREEN_WIDTH // 2 - 150, SCREEN_HEIGHT // 2 - 30, 300, 50),
    Difficulty.HARD: pygame.Rect(SCREEN_WIDTH // 2 - 150, SCREEN_HEIGHT // 2 + 30, 300, 50),
}
LEVEL_KEYS = {pygame.K_1: Difficulty.EASY, pygame.K_2: Difficulty.MEDIUM, pygame.K_3: Difficulty.HARD}
HOME_BUTTON = pygame.Rect(15, 15, 50, 50)
RESET_BUTTON = pygame.Rect(75, 15, 50, 50)
PAUSE_BUTTON = pygame.Rect(SCREEN_WIDTH - 70, 15, 50, 50)
RETRY_BUTTON = pygame.Rect(SCREEN_WIDTH // 2 - 150, SCREEN_HEIGHT // 2 + 60, 140, 40)
QUIT_BUTTON = pygame.Rect(SCREEN_WIDTH // 2 + 10, SCREEN_HEIGHT // 2 + 60, 140, 40)

MOVE_KEYS = {
    pygame.K_UP: Event.MOVE_UP,
    pygame.K_DOWN: Event.MOVE_DOWN,
    pygame.K_LEFT: Event.MOVE_LEFT,
    pygame.K_RIGHT: Event.MOVE_RIGHT,
}
PLAY_KEYS = {
    pygame.K_p: Event.TOGGLE_PAUSE,
    pygame.K_SPACE: Event.TOGGLE_PAUSE,
    pygame.K_r: Event.RESET,
    pygame.K_h: Event.HOME,
}
WON_KEYS = {
    pygame.K_RETURN: Event.RETRY,
    pygame.K_r: Event.RETRY,
    pygame.K_q: Event.QUIT,
    pygame.K_ESCAPE: Event.QUIT,
}


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Find your way out of a procedurally generated maze.")
    p.add_argument("--seed", type=int, default=None, help="seed for maze and obstacle randomness")
    p.add_argument("--best-time-file", default=BEST_TIME_FILE, help="where the best time is kept")
    p.add_argument("--difficulty", choices=[d.value for d in Difficulty], default=None,
                   help="skip the menus and start at this difficulty")
    return p.parse_args(argv)


# --- Drawing ---
def draw_button(surface, font, rect, label, hover_color=YELLOW, color=GOLD, text_color=BROWN):
    fill = hover_color if rect.collidepoint(pygame.mouse.get_pos()) else color
    pygame.draw.rect(surface, fill, rect, border_radius=8)
    text = font.render(label, True, text_color)
    surface.blit(text, text.get_rect(center=rect.center))


def cell_rect(pos, width):
    cell = MAZE_PIXEL_WIDTH // width
    return pygame.Rect(MAZE_OFFSET[0] + pos[0] * cell, MAZE_OFFSET[1] + pos[1] * cell, cell, cell)


def draw_maze(surface, snapshot):
    t = WALL_THICKNESS
    for y in range(snapshot.height):
        for x in range(snapshot.width):
            r = cell_rect((x, y), snapshot.width)
            top, right, bottom, left = snapshot.walls[y, x]
            if top: pygame.draw.rect(surface, BROWN, (r.left, r.top, r.width, t))
            if right: pygame.draw.rect(surface, BROWN, (r.right - t, r.top, t, r.height))
            if bottom: pygame.draw.rect(surface, BROWN, (r.left, r.bottom - t, r.width, t))
            if left: pygame.draw.rect(surface, BROWN, (r.left, r.top, t, r.height))


def draw_entities(surface, snapshot):
    pygame.draw.rect(surface, GREEN, cell_rect(snapshot.goal, snapshot.width).inflate(-8, -8))
    if snapshot.obstacle is not None:
        pygame.draw.rect(surface, RED, cell_rect(snapshot.obstacle, snapshot.width).inflate(-10, -10))
    pygame.draw.rect(surface, BLUE, cell_rect(snapshot.player, snapshot.width).inflate(-6, -6))


def draw_hud(surface, font, snapshot):
    timer_text = font.render(format_time(snapshot.elapsed), True, WHITE)
    surface.blit(timer_text, timer_text.get_rect(center=(SCREEN_WIDTH // 2, 35)))
    draw_button(surface, font, HOME_BUTTON, "H")
    draw_button(surface, font, RESET_BUTTON, "R")
    draw_button(surface, font, PAUSE_BUTTON, ">" if snapshot.state is State.PAUSED else "II")
    if snapshot.state is State.PAUSED:
        paused = font.render("Paused", True, YELLOW)
        surface.blit(paused, paused.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)))


def draw_win_screen(surface, fonts, snapshot):
    big, small = fonts
    # Colour cycles over time
    now = pygame.time.get_ticks() / 1000
    color = tuple(int(math.sin(now * 2 + phase) * 127 + 128) for phase in (0, 2, 4))
    title = big.render("You won!", True, color)
    surface.blit(title, title.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 - 80)))
    lines = [f"Time: {format_time(snapshot.elapsed)}"]
    if snapshot.best_time is not None:
        lines.append(f"Best: {format_time(snapshot.best_time)}")
    for i, line in enumerate(lines):
        text = small.render(line, True, WHITE)
        surface.blit(text, text.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 - 20 + i * 30)))
    draw_button(surface, small, RETRY_BUTTON, "Retry")
    draw_button(surface, small, QUIT_BUTTON, "Quit")


# --- Screens ---
def show_intro(screen, clock, fonts):
    """Returns False if the window was closed."""
    big, small = fonts
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                return True
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and PLAY_BUTTON.collidepoint(event.pos):
                return True
        screen.fill(BLACK)
        title = big.render("Maze Chase", True, GOLD)
        screen.blit(title, title.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)))
        draw_button(screen, small, PLAY_BUTTON, "PLAY NOW")
        pygame.display.update()
        clock.tick(TARGET_FPS)


def show_level_menu(screen, clock, fonts):
    """Returns the chosen Difficulty, or None if the window was closed."""
    big, small = fonts
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.KEYDOWN and event.key in LEVEL_KEYS:
                return LEVEL_KEYS[event.key]
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                for difficulty, rect in LEVEL_BUTTONS.items():
                    if rect.collidepoint(event.pos):
                        return difficulty
        screen.fill(BLACK)
        title = big.render("Select Difficulty Level", True, WHITE)
        screen.blit(title, title.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 - 150)))
        for difficulty, rect in LEVEL_BUTTONS.items():
            draw_button(screen, small, rect, difficulty.value.capitalize(), hover_color=GRAY, color=WHITE, text_color=BLACK)
        pygame.display.update()
        clock.tick(TARGET_FPS)


def collect_events(state):
    """Turns this frame's pygame events into game events. Returns None if the window was closed."""
    events = []
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return None
        if event.type == pygame.KEYDOWN:
            if state is State.WON:
                mapped = WON_KEYS.get(event.key)
            else:
                mapped = MOVE_KEYS.get(event.key) or PLAY_KEYS.get(event.key)
            if mapped is not None:
                events.append(mapped)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if state is State.WON:
                buttons = ((RETRY_BUTTON, Event.RETRY), (QUIT_BUTTON, Event.QUIT))
            else:
                buttons = ((PAUSE_BUTTON, Event.TOGGLE_PAUSE), (RESET_BUTTON, Event.RESET), (HOME_BUTTON, Event.HOME))
            events.extend(e for rect, e in buttons if rect.collidepoint(event.pos))
    return events


def play(screen, clock, fonts, game):
    """Runs one session until it asks for HOME or QUIT. Window close counts as QUIT."""
    dt = 0.0
    while True:
        events = collect_events(game.state)
        if events is None:
            return State.QUIT
        state = game.tick(dt, events)
        if state in (State.HOME, State.QUIT):
            return state

        snapshot = game.snapshot()
        screen.fill(BLACK)
        if state is State.WON:
            draw_win_screen(screen, fonts, snapshot)
        else:
            draw_maze(screen, snapshot)
            draw_entities(screen, snapshot)
            draw_hud(screen, fonts[1], snapshot)
        pygame.display.update()
        dt = clock.tick(TARGET_FPS) / 1000


def main(argv=None):
    args = parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Maze Chase")
        clock = pygame.time.Clock()
        fonts = (pygame.font.SysFont(None, 48), pygame.font.SysFont(None, 26))
        store = BestTimeStore(args.best_time_file)

        difficulty = Difficulty(args.difficulty) if args.difficulty else None
        if difficulty is None and not show_intro(screen, clock, fonts):
            return
        while True:
            if difficulty is None:
                difficulty = show_level_menu(screen, clock, fonts)
                if difficulty is None:
                    return
            game = Game(difficulty, seed=args.seed, store=store)
            print(f"Starting {difficulty.value} maze ({game.maze.width}x{game.maze.height})")
            if play(screen, clock, fonts, game) is State.QUIT:
                return
            difficulty = None
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
    sys.exit()
