import logging
import os

from slideswitch.app import SlideSwitcherApp
from slideswitch.ui.settings import AppSettings


def main():
    logging.basicConfig(
        level=os.environ.get("SLIDESWITCH_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 50)
    print("SLIDESWITCH")
    print("=" * 50)
    print("Controls:")
    print("  • Arrow buttons / Left, Right / A, D: Previous, next panel")
    print("  • Drag left or right: Swipe between panels")
    print("  • F3: Toggle debug overlay")
    print("  • F11: Toggle fullscreen")
    print("  • ESC / Q: Quit")
    print("=" * 50)

    app = SlideSwitcherApp(AppSettings.load())
    app.run()


if __name__ == "__main__":
    main()
