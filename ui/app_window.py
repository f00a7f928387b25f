import logging
import threading

import customtkinter as ctk

from ui.components.toast import Toast
from ui.state_controller import TrackerController
from ui.views.expenses_view import ExpensesView
from ui.views.login_view import LoginView
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT, DEFAULT_CURRENCY_SYMBOL

logger = logging.getLogger(__name__)


class AppWindow(ctk.CTk):
    def __init__(
        self,
        controller: TrackerController,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._controller = controller
        self._currency_symbol = currency_symbol
        self._pending = False
        self._render_queued = False

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_toast_area()
        self._login_view = LoginView(self, on_login=self._login)
        self._expenses_view = ExpensesView(
            self,
            controller=self._controller,
            run_action=self._run_action,
            currency_symbol=self._currency_symbol,
        )

        # Controller callbacks may arrive on a worker thread; hop back onto Tk's loop.
        self._controller.set_notifier(
            lambda kind, message: self.after(0, lambda: self.show_toast(kind, message))
        )
        self._controller.add_listener(self._queue_render)

        self._logged_in_shown: bool | None = None
        self._render()

    # ── Toasts ───────────────────────────────────────────────────────────────
    def _build_toast_area(self):
        self._toast_frame = ctk.CTkFrame(self, fg_color="transparent", height=0)
        self._toast_frame.grid(row=0, column=0, sticky="ew", padx=8)

    def show_toast(self, kind: str, message: str):
        for w in self._toast_frame.winfo_children():
            w.destroy()
        Toast(self._toast_frame, message=message, kind=kind).pack(fill="x", pady=2)

    # ── Background work ──────────────────────────────────────────────────────
    def _run_action(self, func, *args):
        """Run a controller call off the UI thread; one at a time."""
        if self._pending:
            logger.debug("Ignoring %s: a request is already running.", func.__name__)
            return
        self._pending = True
        self._render()

        def work():
            try:
                func(*args)
            except Exception:
                logger.exception("Unexpected error in %s.", func.__name__)
                self.after(0, lambda: self.show_toast("error", "Something went wrong!"))
            self.after(0, self._on_action_done)

        threading.Thread(target=work, daemon=True).start()

    def _on_action_done(self):
        self._pending = False
        self._render()

    # ── Rendering ────────────────────────────────────────────────────────────
    def _queue_render(self):
        if self._render_queued:
            return
        self._render_queued = True
        self.after(0, self._render)

    def _render(self):
        self._render_queued = False
        if not self.winfo_exists():
            return
        logged_in = self._controller.is_logged_in
        if logged_in != self._logged_in_shown:
            self._switch_view(logged_in)
        if logged_in:
            self._expenses_view.refresh(busy=self._pending)
        else:
            self._login_view.set_busy(self._pending)

    def _switch_view(self, logged_in: bool):
        self._logged_in_shown = logged_in
        if logged_in:
            self._login_view.grid_forget()
            self._expenses_view.grid(row=1, column=0, sticky="nsew")
        else:
            self._expenses_view.grid_forget()
            self._login_view.grid(row=1, column=0, sticky="nsew")
            self._login_view.reset()

    def _login(self, username: str, password: str):
        self._run_action(self._controller.login, username, password)
