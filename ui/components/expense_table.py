from decimal import Decimal

import customtkinter as ctk

from models.expense import Expense
from utils.currency import format_currency


_MAX_RENDERED_ROWS = 100
_COLUMN_WIDTHS = [40, 220, 110, 150, 130]


def _column_labels(currency_symbol: str) -> list[str]:
    return ["#", "Title", f"Amount ({currency_symbol})", "Category", "Actions"]


class ExpenseTable(ctk.CTkFrame):
    def __init__(self, master, on_edit, on_delete, currency_symbol: str = "₹", **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._on_edit = on_edit       # callable(Expense)
        self._on_delete = on_delete   # callable(Expense)
        self._symbol = currency_symbol

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_header()
        self._build_body()
        self._build_footer()

    # ── Column headers ───────────────────────────────────────────────────────
    def _build_header(self):
        hdr = ctk.CTkFrame(self, fg_color=("gray82", "gray22"), corner_radius=0)
        hdr.grid(row=0, column=0, sticky="ew")
        labels = _column_labels(self._symbol)
        for i, (label, width) in enumerate(zip(labels, _COLUMN_WIDTHS)):
            ctk.CTkLabel(
                hdr, text=label, width=width, anchor="w",
                font=ctk.CTkFont(weight="bold"),
            ).grid(row=0, column=i, padx=4, pady=4, sticky="w")

    def _build_body(self):
        self._scroll = ctk.CTkScrollableFrame(self, height=220)
        self._scroll.grid(row=1, column=0, sticky="nsew")
        self._scroll.grid_columnconfigure(0, weight=1)

    def _build_footer(self):
        self._footer = ctk.CTkFrame(self, fg_color=("gray82", "gray22"), corner_radius=0)
        self._footer.grid(row=2, column=0, sticky="ew")
        self._total_label = ctk.CTkLabel(
            self._footer, text="", anchor="e",
            font=ctk.CTkFont(weight="bold"),
        )
        self._total_label.pack(side="right", padx=12, pady=4)

    # ── Rendering ────────────────────────────────────────────────────────────
    def render(self, expenses: list[Expense], total: Decimal, show_total: bool, busy: bool = False):
        """Draw the filtered rows; the footer shows the overall total whenever any expense exists."""
        for w in self._scroll.winfo_children():
            w.destroy()

        if show_total:
            self._total_label.configure(text=f"Total: {format_currency(total, self._symbol)}")
            self._footer.grid()
        else:
            self._footer.grid_remove()

        if not expenses:
            ctk.CTkLabel(
                self._scroll, text="No expenses found.",
                text_color="gray60",
            ).grid(row=0, column=0, pady=20)
            return

        visible = expenses[:_MAX_RENDERED_ROWS]
        for idx, expense in enumerate(visible):
            self._add_row(idx, expense, busy)

        if len(expenses) > _MAX_RENDERED_ROWS:
            ctk.CTkLabel(
                self._scroll,
                text=f"Showing {_MAX_RENDERED_ROWS} of {len(expenses)} expenses. Use the filter to narrow results.",
                text_color="gray60",
                font=ctk.CTkFont(size=11),
            ).grid(row=_MAX_RENDERED_ROWS, column=0, pady=8)

    def _add_row(self, idx: int, expense: Expense, busy: bool):
        bg = ("gray92", "gray17") if idx % 2 == 0 else ("gray88", "gray21")
        row = ctk.CTkFrame(self._scroll, fg_color=bg, corner_radius=4)
        row.grid(row=idx, column=0, sticky="ew", pady=1, padx=2)

        widths = _COLUMN_WIDTHS
        ctk.CTkLabel(row, text=str(idx + 1), width=widths[0], anchor="w").grid(
            row=0, column=0, padx=4, pady=4
        )
        ctk.CTkLabel(row, text=expense.title, width=widths[1], anchor="w").grid(
            row=0, column=1, padx=4
        )
        ctk.CTkLabel(
            row, text=format_currency(expense.amount, self._symbol),
            width=widths[2], anchor="w",
        ).grid(row=0, column=2, padx=4)
        ctk.CTkLabel(
            row, text=expense.category, width=widths[3], anchor="w",
            text_color="#00838F",
        ).grid(row=0, column=3, padx=4)

        state = "disabled" if busy else "normal"
        acts = ctk.CTkFrame(row, fg_color="transparent")
        acts.grid(row=0, column=4, padx=(4, 6))
        ctk.CTkButton(
            acts, text="Edit", width=50, height=24,
            fg_color="transparent", border_width=1, border_color="#FF9800",
            text_color="#FF9800", state=state,
            command=lambda e=expense: self._on_edit(e),
        ).pack(side="left", padx=2)
        ctk.CTkButton(
            acts, text="Delete", width=60, height=24,
            fg_color="#F44336", hover_color="#D32F2F", state=state,
            command=lambda e=expense: self._on_delete(e),
        ).pack(side="left")
