# SPDX-License-Identifier: MIT

from planning.view.views.legend import legend_view


def legend() -> None:
    """Show which color each task category is drawn with."""
    legend_view()
