import logging
import os
import sys

from stepsorter.settings import SETTINGS_FILE, load_settings
from stepsorter.visualizer import SortingVisualizer

# Settings JSON is looked up next to this script
_SCRIPT_DIR   = os.path.dirname(os.path.abspath(__file__))
SETTINGS_JSON = os.path.join(_SCRIPT_DIR, SETTINGS_FILE)


def main():
    logging.basicConfig(
        level=os.getenv("STEPSORTER_LOG", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    path = sys.argv[1] if len(sys.argv) > 1 else SETTINGS_JSON
    SortingVisualizer(load_settings(path)).run()


if __name__ == "__main__":
    main()
