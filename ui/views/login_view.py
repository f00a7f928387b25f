import customtkinter as ctk


class LoginView(ctk.CTkFrame):
    def __init__(self, master, on_login, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._on_login = on_login   # callable(username, password)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        card = ctk.CTkFrame(self, fg_color=("gray90", "gray20"), corner_radius=10, width=350)
        card.grid(row=0, column=0, pady=40)
        card.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            card, text="Login", font=ctk.CTkFont(size=20, weight="bold"),
        ).grid(row=0, column=0, padx=24, pady=(20, 16))

        self._username_var = ctk.StringVar()
        self._password_var = ctk.StringVar()

        ctk.CTkLabel(card, text="Username", anchor="w").grid(row=1, column=0, padx=24, sticky="w")
        self._username_entry = ctk.CTkEntry(card, textvariable=self._username_var, width=300)
        self._username_entry.grid(row=2, column=0, padx=24, pady=(2, 10))

        ctk.CTkLabel(card, text="Password", anchor="w").grid(row=3, column=0, padx=24, sticky="w")
        password_entry = ctk.CTkEntry(card, textvariable=self._password_var, show="•", width=300)
        password_entry.grid(row=4, column=0, padx=24, pady=(2, 16))

        for entry in (self._username_entry, password_entry):
            entry.bind("<Return>", lambda _: self._submit())

        self._login_btn = ctk.CTkButton(card, text="Login", width=300, command=self._submit)
        self._login_btn.grid(row=5, column=0, padx=24, pady=(0, 24))

    def reset(self):
        self._username_var.set("")
        self._password_var.set("")
        self._login_btn.configure(state="normal")
        self._username_entry.focus_set()

    def set_busy(self, busy: bool):
        self._login_btn.configure(state="disabled" if busy else "normal")

    def _submit(self):
        username = self._username_var.get()
        password = self._password_var.get()
        # Both fields are required before a check is attempted
        if not username or not password:
            return
        self._on_login(username, password)
