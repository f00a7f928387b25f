import customtkinter as ctk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from utils.charts import draw_category_pie, style_ax
from utils.constants import CHART_DPI, CHART_SIZE_IN


class CategoryPieChart(ctk.CTkFrame):
    """Card with the spending-by-category pie. draw() always starts from a cleared axes."""

    def __init__(self, master, title: str = "Spending by Category", **kwargs):
        super().__init__(master, fg_color=("gray90", "gray20"), corner_radius=8, **kwargs)
        ctk.CTkLabel(
            self, text=title,
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(pady=(10, 0))
        self._fig = Figure(figsize=(CHART_SIZE_IN, CHART_SIZE_IN), dpi=CHART_DPI, tight_layout=True)
        self._ax = self._fig.add_subplot(111)
        self._mpl = FigureCanvasTkAgg(self._fig, master=self)
        self._mpl.get_tk_widget().pack(fill="both", expand=True, padx=8, pady=(4, 10))

    def draw(self, breakdown: list[dict]):
        dark = ctk.get_appearance_mode() == "Dark"
        draw_category_pie(self._ax, breakdown, dark)
        style_ax(self._ax, self._fig, dark)
        self._mpl.draw_idle()
