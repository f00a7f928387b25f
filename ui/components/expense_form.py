import customtkinter as ctk

from models.expense import ExpenseDraft


class ExpenseForm(ctk.CTkFrame):
    """Inline add/edit card. Edit mode is driven by the draft passed to load()."""

    def __init__(self, master, on_submit, on_cancel, **kwargs):
        super().__init__(master, fg_color=("gray90", "gray20"), corner_radius=10, **kwargs)
        self._on_submit = on_submit   # callable(title, amount, category)
        self._on_cancel = on_cancel   # callable()

        self.grid_columnconfigure((0, 1, 2), weight=1)

        self._heading = ctk.CTkLabel(
            self, text="Add Expense",
            font=ctk.CTkFont(size=15, weight="bold"), anchor="w",
        )
        self._heading.grid(row=0, column=0, columnspan=5, padx=16, pady=(12, 4), sticky="w")

        self._title_var = ctk.StringVar()
        self._amount_var = ctk.StringVar()
        self._category_var = ctk.StringVar()

        for col, (var, label) in enumerate([
            (self._title_var, "Title"),
            (self._amount_var, "Amount"),
            (self._category_var, "Category"),
        ]):
            padx = (16 if col == 0 else 4, 4)
            ctk.CTkLabel(self, text=label, anchor="w", text_color="gray60").grid(
                row=1, column=col, padx=padx, sticky="w"
            )
            entry = ctk.CTkEntry(self, textvariable=var)
            entry.grid(row=2, column=col, padx=padx, pady=(0, 14), sticky="ew")
            entry.bind("<Return>", lambda _: self._submit())

        self._submit_btn = ctk.CTkButton(
            self, text="Add", width=100,
            fg_color="#4CAF50", hover_color="#388E3C",
            command=self._submit,
        )
        self._submit_btn.grid(row=2, column=3, padx=4, pady=(0, 14))

        self._cancel_btn = ctk.CTkButton(
            self, text="Cancel", width=80,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._on_cancel,
        )
        self._cancel_btn.grid(row=2, column=4, padx=(4, 16), pady=(0, 14))
        self._cancel_btn.grid_remove()

    def load(self, draft: ExpenseDraft):
        self._title_var.set(draft.title)
        self._amount_var.set(draft.amount)
        self._category_var.set(draft.category)
        if draft.is_editing:
            self._heading.configure(text="Edit Expense")
            self._submit_btn.configure(text="Update")
            self._cancel_btn.grid()
        else:
            self._heading.configure(text="Add Expense")
            self._submit_btn.configure(text="Add")
            self._cancel_btn.grid_remove()

    def set_busy(self, busy: bool):
        self._submit_btn.configure(state="disabled" if busy else "normal")

    def _submit(self):
        self._on_submit(
            self._title_var.get(),
            self._amount_var.get(),
            self._category_var.get(),
        )
