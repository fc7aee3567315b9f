# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from planning.exception import PlanningError
from planning.model.locale import Locale, get_locale


def parse_locale(locale_param: Optional[str]) -> Optional[Locale]:
    if locale_param is None:
        return None
    try:
        return get_locale(locale_param)
    except PlanningError as e:
        raise typer.BadParameter(str(e))
