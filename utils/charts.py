import matplotlib
from matplotlib.axes import Axes
from matplotlib.patches import Wedge

from utils.constants import CHART_PALETTE


def style_ax(ax: Axes, fig, dark: bool = False):
    bg = "#2b2b2b" if dark else "#e4e4e4"
    fig.patch.set_facecolor(bg)
    ax.set_facecolor(bg)


def category_colors(count: int) -> list:
    cmap = matplotlib.colormaps[CHART_PALETTE]
    return [cmap(i % cmap.N) for i in range(count)]


def draw_category_pie(ax: Axes, breakdown: list[dict], dark: bool = False) -> list[Wedge]:
    """Redraw ax as a pie of breakdown rows ({category, total}).

    One wedge per category, labelled at its centroid; a zero total gives a
    zero-width wedge. Negative totals cannot be drawn and are skipped.
    Returns the wedges drawn (empty when there is nothing to show).
    """
    ax.clear()
    ax.set_axis_off()

    slices = [d for d in breakdown if d["total"] >= 0]
    if not slices or sum(d["total"] for d in slices) <= 0:
        ax.text(0.5, 0.5, "No expense data", ha="center", va="center",
                transform=ax.transAxes, color="gray")
        return []

    wedges, _ = ax.pie(
        [float(d["total"]) for d in slices],
        labels=[d["category"] for d in slices],
        colors=category_colors(len(slices)),
        labeldistance=0.5,  # centroid of a full pie wedge
        startangle=90,
        counterclock=False,
        wedgeprops={"edgecolor": "white", "linewidth": 2},
        textprops={"ha": "center", "va": "center", "fontsize": 9,
                   "color": "#dddddd" if dark else "#222222"},
    )
    ax.set_aspect("equal")
    return list(wedges)
