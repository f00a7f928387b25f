import logging
import os
import sys

import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from gateway.expense_api import ExpenseAPI

from services.auth_service import AuthService
from services.expense_service import ExpenseService
from services.report_service import ReportService

from ui.app_window import AppWindow
from ui.state_controller import TrackerController
from utils.app_config import CONFIG_DIR, get_api_url, get_request_timeout, get_setting, load_config
from utils.log_setup import setup_logging

logger = logging.getLogger(__name__)


def main():
    # ── Bootstrap: config and logging before anything touches the network ────
    config = load_config()
    setup_logging(get_setting("log_level", config), log_dir=CONFIG_DIR)

    # ── Gateway ──────────────────────────────────────────────────────────────
    api = ExpenseAPI(get_api_url(config), timeout=get_request_timeout(config))
    logger.info("Using expense endpoint %s", api.base_url)

    # ── Services ─────────────────────────────────────────────────────────────
    auth_svc = AuthService()
    expense_svc = ExpenseService(api)
    report_svc = ReportService()
    controller = TrackerController(auth_svc, expense_svc, report_svc)

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(get_setting("appearance_mode", config))
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        controller=controller,
        currency_symbol=get_setting("currency_symbol", config),
    )
    app.mainloop()


if __name__ == "__main__":
    main()
