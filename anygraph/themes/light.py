from .base import Theme


class LightTheme(Theme):
    """Light theme with clean, bright colors"""

    name = "light"

    def __init__(self):
        self.background_color = "#ffffff"
        self.grid_color = "#e0e0e0"
        self.axis_color = "#333333"
        self.colors = [
            "#2196f3",  # blue
            "#ff9800",  # orange
            "#4caf50",  # green
            "#f44336",  # red
            "#9c27b0",  # purple
            "#795548",  # brown
            "#e91e63",  # pink
            "#607d8b",  # blue gray
        ]

    def get_colors(self) -> list[str]:
        return self.colors
