"""Module: __init__.py.

Author: Michael Economou
Date: 2026-10-18

Ports for the collaborators the view models call.
Concrete implementations live in infra/ (repository), app/services
(resources) and ui/adapters (navigation, toasts).
"""

from colorpick.app.ports.colors_repository import ColorsRepository
from colorpick.app.ports.navigator import Navigator
from colorpick.app.ports.resources import Resources
from colorpick.app.ports.toasts import Toasts

__all__ = ["ColorsRepository", "Navigator", "Resources", "Toasts"]
