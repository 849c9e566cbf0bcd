# main.py
from pixelgolf.config import CONFIG
from pixelgolf.game import Game
from pixelgolf.server import RemotePanel


def main():
    """
    Initializes and runs the game.
    """
    panel = None
    if CONFIG.get('server_enabled', True):
        panel = RemotePanel()
        panel.start()

    game_instance = Game(panel)
    game_instance.run()

if __name__ == "__main__":
    main()
