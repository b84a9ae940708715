from .base import Theme


class DarkTheme(Theme):
    """Dark theme for editor panels in dark mode"""

    name = "dark"

    def __init__(self):
        self.background_color = "#1e1e1e"
        self.grid_color = "#3c3c3c"
        self.axis_color = "#cccccc"
        self.colors = [
            "#4fc3f7",  # light blue
            "#ffb74d",  # light orange
            "#81c784",  # light green
            "#e57373",  # light red
            "#ba68c8",  # light purple
            "#a1887f",  # light brown
            "#f06292",  # light pink
            "#90a4ae",  # light blue gray
        ]

    def get_colors(self) -> list[str]:
        return self.colors
