"""ui — Modal UI framework.

Provides a ``ModalStack`` that manages layered modal overlays
(inventory, drop, level up, character sheet).  Each modal is a
self-contained ``Modal`` subclass with its own input and draw.
"""

from ui.modal import Modal, ModalStack
from ui.commands import CloseModal, UseItem, DropItem, ChooseStat, UICommand
from ui.menu_modal import (
    MenuModal, use_menu, drop_menu, level_up_menu, message_box,
)

__all__ = [
    "Modal", "ModalStack",
    "CloseModal", "UseItem", "DropItem", "ChooseStat", "UICommand",
    "MenuModal", "use_menu", "drop_menu", "level_up_menu", "message_box",
]
