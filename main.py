# ===== Part 1: Imports & Logging ============================================
import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication, QMainWindow

from panels.dashboard_panel import ClinicDashboardPanel
from services.clinic_store import ClinicDataStore
from utils.app_settings import StoreSettings, load_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: StoreSettings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.dev_mode else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# ===== Part 2: Store Lifecycle ==============================================
def build_store(settings: StoreSettings) -> ClinicDataStore:
    """Construct the one store instance for this application session."""

    if settings.seed_sample_data:
        store = ClinicDataStore.from_seed(strict_references=settings.strict_references)
    else:
        store = ClinicDataStore(strict_references=settings.strict_references)
    logger.info(
        "Clinic store ready (seeded=%s, strict_references=%s)",
        settings.seed_sample_data,
        settings.strict_references,
    )
    return store


def parse_args(argv: Optional[Sequence[str]], settings: StoreSettings) -> StoreSettings:
    parser = argparse.ArgumentParser(description="ClinicFlow operations dashboard")
    parser.add_argument("--dev", action="store_true", help="Verbose logging")
    parser.add_argument("--strict", action="store_true", help="Reject dangling references")
    parser.add_argument("--empty", action="store_true", help="Start without sample data")
    args, _ = parser.parse_known_args(argv)
    return replace(
        settings,
        dev_mode=settings.dev_mode or args.dev,
        strict_references=settings.strict_references or args.strict,
        seed_sample_data=settings.seed_sample_data and not args.empty,
    )


# ===== Part 3: Main Window ==================================================
class MainWindow(QMainWindow):
    def __init__(self, store: ClinicDataStore) -> None:
        super().__init__()
        self.setWindowTitle("ClinicFlow")
        self.resize(1200, 760)
        self.dashboard = ClinicDashboardPanel(store, self)
        self.setCentralWidget(self.dashboard)


# ===== Part 4: Application Entrypoint =======================================
def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = parse_args(argv, load_settings())
    configure_logging(settings)

    app = QApplication.instance() or QApplication(sys.argv)
    store = build_store(settings)
    app.aboutToQuit.connect(store.close)

    win = MainWindow(store)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
