"""
ui/
---
Presentation layer.

    from ui import render_bars
    from ui import control_panel, algorithm_buttons, …
"""

from ui.canvas import render_bars, CanvasConfig

from ui.controls import (
    control_panel,
    algorithm_buttons,
    status_panel,
    comparison_panel,
)

__all__ = [
    "render_bars",
    "CanvasConfig",
    "control_panel",
    "algorithm_buttons",
    "status_panel",
    "comparison_panel",
]
