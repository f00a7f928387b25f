import customtkinter as ctk

from utils.constants import TOAST_COLORS, TOAST_DURATION_MS, TOAST_ICONS


class Toast(ctk.CTkFrame):
    """A coloured, self-dismissing notification strip."""

    def __init__(self, master, message: str, kind: str = "info",
                 duration_ms: int = TOAST_DURATION_MS, **kwargs):
        color = TOAST_COLORS.get(kind, TOAST_COLORS["info"])
        super().__init__(master, fg_color=color, corner_radius=6, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self, text=f"{TOAST_ICONS.get(kind, '')}  {message}", text_color="white",
            anchor="w", padx=10, pady=6
        ).grid(row=0, column=0, sticky="ew")

        ctk.CTkButton(
            self, text="✕", width=28, height=24,
            fg_color="transparent",
            hover_color="#ffffff",
            text_color="white",
            command=self.dismiss,
        ).grid(row=0, column=1, padx=(0, 4))

        if duration_ms:
            self._after_id = self.after(duration_ms, self.dismiss)
        else:
            self._after_id = None

    def dismiss(self):
        if self.winfo_exists():
            self.destroy()

    def destroy(self):
        if self._after_id is not None:
            self.after_cancel(self._after_id)
            self._after_id = None
        super().destroy()
