"""
main.py — Bootstrap

1. Load the tuning file
2. Create the app
3. Push the title screen
4. Run
"""

from core import tuning
from core.app import App
from scenes.main_menu_scene import MainMenuScene


def main():
    tuning.load()
    app = App(title="Tombs of the Ancient Kings")
    app.push_scene(MainMenuScene())
    app.run()


if __name__ == "__main__":
    main()
