import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from lrcplayer.core.catalog_client import CatalogClient
from lrcplayer.core.config import AppConfig
from lrcplayer.core.session import LyricsSession
from lrcplayer.core.state import AppState, Notify
from lrcplayer.player.player import Player
from lrcplayer.ui.main_window import MainWindow

def setup_logging(config: AppConfig) -> None:
    handlers = [logging.StreamHandler(sys.stdout)]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )

def init_app_state(config: AppConfig) -> AppState:
    app_state = AppState(config)

    app_state.client = CatalogClient(base_url=config.api_url, timeout=config.http_timeout)
    app_state.session = LyricsSession(thresholds=config.thresholds)

    try:
        app_state.player = Player()
    except Exception as e:
        logging.getLogger(__name__).exception("Failed to initialize audio player")
        app_state.player = None
        app_state.queued_notifications.append(
            Notify(message=f"Failed to initialize audio player: {e}", notify_type="error")
        )

    return app_state

def main() -> int:
    config = AppConfig.from_env()
    setup_logging(config)
    logging.getLogger(__name__).info("Using catalog API at %s", config.api_url)

    qt_app = QApplication(sys.argv)

    app_state = init_app_state(config)
    main_window = MainWindow(app_state)
    main_window.show()

    if len(sys.argv) > 1:
        main_window.load_track(sys.argv[1])

    return qt_app.exec()

if __name__ == "__main__":
    raise SystemExit(main())
