"""
NpyViewer Interface Package
==================================

This package contains the lightweight interface layer that connects the
GUI event system (pointer presses, drags, releases, axis edits) with the
data model.

It provides:

- ``ToolDispatcher``
  A small router that forwards pointer events from an AnnotationCanvas
  to whichever handlers are registered, and asks the canvas to redraw
  its overlay when a handler reports a change.

- ``interaction``
  The ``InteractionController`` state machine (idle / hovering / dragging)
  that turns pointer events into add, move and remove operations on the
  ``AnnotationStore``, plus the overlay primitives the canvas draws.

- ``tools``
  Stateless helpers for loading an array, normalising it, editing axis
  limits and reading configuration. These operate on ``CurrentContext``.

Typical Usage
-------------
::

    disp = ToolDispatcher(canvas)
    disp.bind_controller(t.attach_controller(cxt))

Everything else in the application interacts with the data layer via
functions in :mod:`tools`.
"""

from .tool_dispatcher import ToolDispatcher
