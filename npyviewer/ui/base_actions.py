"""
Base class for action handlers.

Provides common infrastructure for ribbon registration and context management.
"""

from PyQt5.QtWidgets import QMessageBox

from ..models import CurrentContext


class BaseActions:
    """
    Base class for all action handlers.

    Action handlers encapsulate related operations and their ribbon UI.
    Each handler:
    - Holds a reference to the shared CurrentContext
    - Registers its buttons with the ribbon
    - Implements callback methods for user actions

    Subclasses must implement stage_ribbon() to define their UI.
    """

    def __init__(self, context: CurrentContext, ribbon, parent=None):
        """
        Initialize the action handler.

        Args:
            context: Shared application context
            ribbon: Ribbon interface for registering buttons (expects Groups API)
            parent: Parent widget for dialogs (typically MainRibbonController)
        """
        self.cxt = context
        self.ribbon = ribbon
        self.controller = parent
        self.stage_ribbon()

    def stage_ribbon(self):
        """
        Define and register ribbon structure.

        Example:
            def stage_ribbon(self):
                self._register_group('My Group', [
                    ("button", "Action 1", self.action_1, "Tooltip for action 1"),
                ])
        """
        raise NotImplementedError("Subclasses must implement stage_ribbon()")

    def _register_group(self, group_name: str, entries: list):
        """
        Register a group of buttons with the ribbon.

        This is the ONLY method that knows about the group registration API.

        Args:
            group_name: Label for the button group
            entries: List of ("button", label, callback[, tooltip]) tuples
        """
        self.ribbon.add_group(group_name, entries)

    # ============ Helper Utilities ============

    def _show_error(self, title: str, message: str):
        """Show a consistent error dialog."""
        QMessageBox.warning(self.controller, title, message)

    def _show_info(self, title: str, message: str):
        """Show a consistent info dialog."""
        QMessageBox.information(self.controller, title, message)
