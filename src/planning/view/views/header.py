# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from planning.view.state import get_show_header


def header(title: str, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        title: The name of the planning or view being shown
        sub_header: Optional line displayed under the title
    """
    if not get_show_header():
        return

    print(Padding("[dark_orange]planning[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(f"[plum1]{title}[/plum1]", (0, 1)))
    if sub_header is not None:
        print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
