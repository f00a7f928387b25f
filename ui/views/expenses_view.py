import customtkinter as ctk

from models.expense import Expense
from ui.components.category_pie_chart import CategoryPieChart
from ui.components.expense_form import ExpenseForm
from ui.components.expense_table import ExpenseTable
from ui.state_controller import TrackerController


class ExpensesView(ctk.CTkFrame):
    """Main screen: header, add/edit form, filter, table with total, and the category chart."""

    def __init__(
        self,
        master,
        controller: TrackerController,
        run_action,            # callable(func, *args) → runs func off the UI thread
        currency_symbol: str = "₹",
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._controller = controller
        self._run_action = run_action
        self._filter_var = ctk.StringVar(value=controller.filter_category)

        self.grid_columnconfigure(0, weight=3)
        self.grid_columnconfigure(1, weight=2)
        self.grid_rowconfigure(3, weight=1)

        self._build_header()
        self._form = ExpenseForm(self, on_submit=self._submit, on_cancel=self._cancel_edit)
        self._form.grid(row=1, column=0, columnspan=2, sticky="ew", padx=16, pady=(0, 12))
        self._build_filter_bar()
        self._table = ExpenseTable(
            self, on_edit=self._begin_edit, on_delete=self._delete,
            currency_symbol=currency_symbol,
        )
        self._table.grid(row=3, column=0, sticky="nsew", padx=(16, 8), pady=(0, 16))
        self._chart = CategoryPieChart(self)
        self._chart.grid(row=3, column=1, sticky="nsew", padx=(8, 16), pady=(0, 16))

    def _build_header(self):
        bar = ctk.CTkFrame(self, fg_color="transparent")
        bar.grid(row=0, column=0, columnspan=2, sticky="ew", padx=16, pady=(12, 8))
        ctk.CTkLabel(
            bar, text="Expense Tracker", font=ctk.CTkFont(size=24, weight="bold"),
        ).pack(side="left")
        self._logout_btn = ctk.CTkButton(
            bar, text="Logout", width=90,
            fg_color="transparent", border_width=1, border_color="#F44336",
            text_color="#F44336", hover_color=("gray85", "gray25"),
            command=self._controller.logout,
        )
        self._logout_btn.pack(side="right")

    def _build_filter_bar(self):
        bar = ctk.CTkFrame(self, fg_color="transparent")
        bar.grid(row=2, column=0, columnspan=2, sticky="ew", padx=16, pady=(0, 6))
        ctk.CTkLabel(bar, text="Expenses", text_color="gray60",
                     font=ctk.CTkFont(size=14, weight="bold")).pack(side="left")
        self._filter_combo = ctk.CTkComboBox(
            bar, values=self._controller.filter_options,
            variable=self._filter_var, width=180, state="readonly",
            command=self._controller.set_filter,
        )
        self._filter_combo.pack(side="right")
        ctk.CTkLabel(bar, text="Filter:", font=ctk.CTkFont(weight="bold")).pack(side="right", padx=(0, 6))

    def refresh(self, busy: bool = False):
        c = self._controller
        self._form.load(c.draft)
        self._form.set_busy(busy)
        self._logout_btn.configure(state="disabled" if busy else "normal")
        self._filter_combo.configure(values=c.filter_options)
        self._filter_var.set(c.filter_category)
        self._table.render(c.visible_expenses, c.total, show_total=c.show_total, busy=busy)
        self._chart.draw(c.category_breakdown)

    # ── Actions ──────────────────────────────────────────────────────────────
    def _submit(self, title: str, amount: str, category: str):
        self._controller.update_draft(title=title, amount=amount, category=category)
        self._run_action(self._controller.submit)

    def _begin_edit(self, expense: Expense):
        self._controller.begin_edit(expense)

    def _cancel_edit(self):
        self._controller.cancel_edit()

    def _delete(self, expense: Expense):
        self._run_action(self._controller.delete, expense.id)
